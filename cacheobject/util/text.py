# -*- coding: utf-8; -*-

import io
import itertools
import re
import string


CHAR_NAMES = {
    '\t': 'tab',
    '\n': 'LF',
    '\r': 'CR',
    ' ': 'space',
    '"': 'double quote (")',
    "'": "single quote (')",
    ',': 'comma (,)',
    '.': 'period (.)',
    ';': 'semicolon (;)',
    '-': 'dash (-)',
    '=': 'equals sign (=)',
    '\\': 'backslash (\\)',
}


def nicely_join(strings):
    """
    >>> print(nicely_join(['foo']))
    foo
    >>> print(nicely_join(['foo', 'bar baz']))
    foo and bar baz
    >>> print(nicely_join(['foo', 'bar baz', 'qux']))
    foo, bar baz, and qux
    """
    strings = list(strings)
    if len(strings) < 3:
        return ' and '.join(strings)
    return '%s, and %s' % (', '.join(strings[:-1]), strings[-1])


def _char_ranges(chars, show=chr):
    # `chars` must be in ascending order, as :meth:`Terminal.chars` gives.
    ranges = []
    consecutive = lambda pair: ord(pair[1]) - pair[0]
    for _, run in itertools.groupby(enumerate(chars), consecutive):
        run = [ord(c) for (_, c) in run]
        if len(run) == 1:
            ranges.append(show(run[0]))
        else:
            ranges.append('%s–%s' % (show(run[0]), show(run[-1])))
    return ranges


def _hex(point):
    return '%#04x' % point


def format_chars(chars):
    """
    >>> print(format_chars(['\\x00', '\\x04', '\\x05', '\\x06', '\\x07',
    ...                     ' ', '0', '1', '2', '3', '4', '5', '6',
    ...                     '7', '8', '9', 'A', 'B', 'C', 'D', 'E', 'F']))
    A–F or 0–9 or space or 0x00 or 0x04–0x07

    >>> print(format_chars(['\\t', ' ']))
    tab or space

    >>> print(format_chars(['!', '#', '$', '%', '&', "'", '*', '+',
    ...                     '.', '0', '1', '2', '3', '4', '5', '6',
    ...                     '7', '8', '9', 'a', 'b', 'c', 'd', 'e']))
    a–e or 0–9 or single quote (') or period (.) or !#$%&*+
    """
    letters = [c for c in chars if c in string.ascii_letters]
    digits = [c for c in chars if c in string.digits]
    named = [CHAR_NAMES[c] for c in chars if c in CHAR_NAMES]
    punctuation = ''.join(c for c in chars
                          if c in string.punctuation and c not in CHAR_NAMES)
    other = [c for c in chars
             if c not in string.ascii_letters + string.digits and
             c not in string.punctuation and c not in CHAR_NAMES]
    pieces = (_char_ranges(letters) + _char_ranges(digits) + named +
              [punctuation] + _char_ranges(other, show=_hex))
    return ' or '.join(piece for piece in pieces if piece)


def stdio_as_bytes(f):
    return getattr(f, 'buffer', f)


def ellipsize(s, max_length=60):
    """
    >>> print(ellipsize('lorem ipsum dolor sit amet', 40))
    lorem ipsum dolor sit amet
    >>> print(ellipsize('lorem ipsum dolor sit amet', 20))
    lorem ipsum dolor...
    """
    if len(s) <= max_length:
        return s
    return s[:max_length - 3] + '...'


# Characters that XML 1.0 (section 2.2) forbids or discourages.
_unprintable = re.compile('[\x00-\x08\x0B\x0C\x0E-\x1F\x7F-\x9F'
                          '\uD800-\uDFFF\uFDD0-\uFDEF\uFFFE\uFFFF]')


def printable(s):
    return _unprintable.sub('\N{REPLACEMENT CHARACTER}', s)


class MockStdio:

    """A stand-in for stdout/stderr in tests, with a binary `buffer`."""

    def __init__(self):
        self.buffer = io.BytesIO()

    def write(self, s):
        self.buffer.write(s.encode('utf-8'))
