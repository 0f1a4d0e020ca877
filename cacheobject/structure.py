# -*- coding: utf-8; -*-

"""Classes for representing parsed ``Cache-Control`` values."""

from collections import namedtuple


class ProtocolString(str):

    """A string with a special meaning in HTTP, such as a directive name."""

    __slots__ = ()

    def __repr__(self):
        return '%s(%r)' % (type(self).__name__, str(self))


class CaseInsensitive(ProtocolString):

    """Compares and hashes equal to any string that differs only in case."""

    __slots__ = ()

    def __eq__(self, other):
        if not isinstance(other, str):
            return NotImplemented
        return self.lower() == other.lower()

    def __ne__(self, other):
        equal = self.__eq__(other)
        return equal if equal is NotImplemented else not equal

    def __hash__(self):
        return hash(self.lower())


class CacheDirective(CaseInsensitive):

    """A cache directive name (RFC 7234 Section 5.2)."""

    __slots__ = ()


RawDirective = namedtuple('RawDirective', ('position', 'name', 'argument'))
RawDirective.__doc__ = """One directive as found in a header value.

`name` is a :class:`CacheDirective` if it is a proper ``token``,
otherwise the raw text. `argument` is an :class:`Argument` or `None`.
"""


class Argument(namedtuple('Argument', ('text', 'quoted'))):

    """The argument of a cache directive, after ``=``.

    `text` is already unquoted if the argument was a ``quoted-string``,
    in which case `quoted` is `True`. A directive without an argument
    has `None` instead of an `Argument`.
    """

    __slots__ = ()

    def field_names(self):
        """Interpret this argument as a comma-separated list of field names.

        >>> sorted(Argument('Set-Cookie, ,Request-Id', True).field_names())
        ['Request-Id', 'Set-Cookie']
        >>> Argument('', True).field_names()
        []
        """
        names = (piece.strip(' \t') for piece in self.text.split(','))
        return [name for name in names if name]


_FIELDS = ('max_age', 's_maxage',
           'no_cache_present', 'no_cache',
           'private_present', 'private',
           'no_store', 'no_transform', 'must_revalidate', 'proxy_revalidate',
           'public', 'extensions')

_DEFAULTS = (None, None,
             False, frozenset(),
             False, frozenset(),
             False, False, False, False,
             False, ())


class DirectiveSet(namedtuple('DirectiveSet', _FIELDS, defaults=_DEFAULTS)):

    """The directives of a response's ``Cache-Control`` header.

    ``DirectiveSet()`` is what an empty header parses into: `max_age` and
    `s_maxage` are `None` (absent), all flags are `False`, and the field name
    sets and `extensions` are empty.

    `no_cache` and `private` are frozensets of field names (with their case
    as given), which are meaningful only when `no_cache_present` and
    `private_present` respectively are `True`. `extensions` is a tuple of
    unknown directives as ``name`` or ``name=value``, in order.
    """

    __slots__ = ()

    def __repr__(self):
        return 'DirectiveSet(%s)' % ', '.join(
            '%s=%r' % (name, value) for name, value in self.present())

    def __str__(self):
        from cacheobject.cache_control import format_cache_control
        return format_cache_control(self)

    def present(self):
        """The fields that differ from their defaults, as ``(name, value)``."""
        return [(name, value)
                for name, value, default in zip(_FIELDS, self, _DEFAULTS)
                if value != default]


Outcome = namedtuple('Outcome', ('value', 'directives', 'error'))
Outcome.__doc__ = """The result of parsing one header value.

Exactly one of `directives` (a :class:`DirectiveSet`) and `error`
(a :exc:`~cacheobject.errors.CacheControlError`) is not `None`.
"""
