# -*- coding: utf-8; -*-

"""Tables of protocol elements we know something about.

Attribute access gives the keys themselves, so that checks read naturally::

    if directive == cache.no_store:
        ...

"""

from cacheobject.known import cache_directive


cache = cache_directive.known

__all__ = ['cache', 'cache_directive']
