# -*- coding: utf-8; -*-

"""A table of protocol elements we know something about.

The term "key" means the actual protocol element, such as
``CacheDirective('max-age')``, whereas "name" means a Python identifier
suitable for attribute access, such as ``max_age``.
"""

import re


class KnownDict:

    def __init__(self, cls, items, extra_info=None):
        self.cls = cls
        self._allowed_info = frozenset(['_', '_citations'] +
                                       list(extra_info or []))
        self._by_key = {}
        self._by_name = {}
        for item in items:
            self._add(item)

    def _add(self, item):
        unknown = set(item) - self._allowed_info
        assert not unknown, unknown
        key = item['_']
        assert isinstance(key, self.cls), key
        assert key not in self._by_key, key
        name = self._name_for(key)
        assert name not in self._by_name, name
        self._by_key[key] = item
        self._by_name[name] = key

    def __getattr__(self, name):
        # Private names must not reach ``_by_name``: it may not exist yet
        # (for example, while unpickling).
        key = None if name.startswith('_') else self._by_name.get(name)
        if key is None:
            raise AttributeError(name)
        return key

    def __getitem__(self, key):
        return self._by_key[self.cls(key)]

    def __contains__(self, key):
        return self.cls(key) in self._by_key

    def __iter__(self):
        return iter(self._by_key)

    def __len__(self):
        return len(self._by_key)

    def get_info(self, key):
        """Everything we know about `key`, or an empty dict."""
        return self._by_key.get(self.cls(key), {})

    @staticmethod
    def _name_for(key):
        return re.sub('[^a-z0-9]', '_', key.lower())
