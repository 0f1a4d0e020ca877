# -*- coding: utf-8; -*-

"""Building blocks for the ``Cache-Control`` grammar.

The grammar given in the RFCs has octets as terminal symbols, and we follow
it: a :class:`Terminal` is a set of octets, stored as a 256-bit mask,
so character classes like ``tchar`` or ``qdtext`` can be combined with
``|`` and ``-`` exactly as they are defined in RFC 5234 and RFC 7230.

Nonterminals are not parsed by a general algorithm here. The directive list
is scanned by hand in :mod:`cacheobject.cache_control` (with the help of
:class:`cacheobject.stream.Stream`), because the syntax that real servers
send is much looser than ``1#cache-directive``. Named :class:`Symbol`
objects are still useful to explain a :exc:`ParseError`: what was expected,
as part of which rule, and where that rule is defined.
"""

from bitstring import Bits

from cacheobject.util.text import format_chars


class ParseError(Exception):

    def __init__(self, position, expected=None, found=None, message=None):
        """
        :param position: Offset into the header value.
        :param expected:
            What would have been acceptable at `position`, as a list of
            ``(description, symbols)``. A `description` is free text;
            `symbols` are the :class:`Symbol` objects (grammar rules)
            being parsed when it was expected.
        :param found:
            The character at `position`, `''` at end of data,
            or `None` when that is beside the point.
        :param message: Replaces the default exception message.
        """
        if message is None:
            message = 'unexpected input at position %r' % position
        super().__init__(message)
        self.position = position
        self.expected = expected or []
        self.found = found


###############################################################################
# Symbols of the grammar.


class Symbol:

    """A named rule of the grammar, or a set of characters."""

    def __init__(self, name=None, citation=None, is_pivot=False):
        """
        :param name: The rule name, spelled as in `citation`.
        :param citation:
            A :class:`~cacheobject.citation.Citation` of the RFC that
            defines the rule.
        :param is_pivot:
            Whether the rule is worth mentioning in a :exc:`ParseError`.
        """
        self.name = name
        self.citation = citation
        self.is_pivot = is_pivot

    def __repr__(self):
        return '<%s %s>' % (self.__class__.__name__,
                            self.name or hex(id(self)))

    def __gt__(self, seal):
        """``sym >seal`` gives the `sym` symbol a name and a citation.

        See also :func:`fill_names`.
        """
        (self.name, self.citation, self.is_pivot) = seal
        return self


class Terminal(Symbol):

    """A set of octets, any one of which matches."""

    def __init__(self, name=None, citation=None, bits=None):
        super().__init__(name, citation)
        self.bits = bits if bits is not None else Bits(bytes(32))

    def chars(self):
        return [chr(i) for (i, v) in enumerate(self.bits) if v]

    def match(self, char):
        # Header values are ISO-8859-1 text, so anything above U+00FF
        # cannot be an octet of the grammar.
        point = ord(char)
        return point < 256 and self.bits[point]

    def match_all(self, s):
        return all(self.match(c) for c in s)

    def describe(self):
        return format_chars(self.chars())

    def __or__(self, other):
        return Terminal(bits=self.bits | as_symbol(other).bits)

    def __ror__(self, other):
        return as_symbol(other) | self

    def __sub__(self, other):
        return Terminal(bits=self.bits & ~as_symbol(other).bits)


def octet_range(min_, max_):
    """The octets from `min_` to `max_`, both included."""
    mask = bytearray(32)
    for i in range(min_, max_ + 1):
        mask[i // 8] |= 0x80 >> (i % 8)
    return Terminal(bits=Bits(bytes(mask)))

def octet(value):
    """Just the octet `value`."""
    return octet_range(value, value)

def literal(c, case_sensitive=False):
    """Create a terminal that accepts the single character `c`."""
    if case_sensitive or c.lower() == c.upper():
        return octet(ord(c))
    return octet(ord(c.lower())) | octet(ord(c.upper()))

def as_symbol(x):
    return x if isinstance(x, Symbol) else literal(x)


class _AutoName:

    def __repr__(self):
        return '_AUTO'

_AUTO = _AutoName()


def named(name, citation=None, is_pivot=False):
    return (name, citation, is_pivot)

auto = named(_AUTO)
pivot = named(_AUTO, is_pivot=True)

def fill_names(scope, citation):
    """Name the symbols in `scope` that were sealed with `auto` or `pivot`.

    A symbol cannot know the variable it is assigned to::

      DIGIT = octet_range(0x30, 0x39)           > auto

    so each syntax module calls this at the end with its ``globals()``.
    Underscores in variable names become dashes, as spelled in the RFCs.
    """
    for var, symbol in scope.items():
        if isinstance(symbol, Symbol) and symbol.name is _AUTO:
            symbol.name = var.rstrip('_').replace('_', '-')
            symbol.citation = citation
