# -*- coding: utf-8; -*-

from cacheobject.parse import ParseError


class Stream:

    """
    Wraps a header value to enable easier reading in terms that are
    convenient for :mod:`cacheobject.cache_control`, with automatic raising
    of `ParseError` etc.

    Methods of this class **do not attempt** to uphold the exact same interface
    as similarly-named methods of file objects.
    """

    def __init__(self, data):
        self.data = data
        self.position = 0
        self._currently_parsing = [None]
        self._next_symbol = None

    def parsing(self, symbol):
        self._next_symbol = symbol
        return self

    def __enter__(self):
        self._currently_parsing.append(self._next_symbol)
        return self

    def __exit__(self, _exc_type, _exc_value, _exc_traceback):
        self._currently_parsing.pop()
        return False

    def error(self, position=None, expected=None, cls=ParseError, **kwargs):
        if position is None:
            position = self.position
        symbols = [sym for sym in self._currently_parsing[-1:] if sym]
        return cls(position=position,
                   expected=[(expected, symbols)],
                   found=self.data[position : position + 1],
                   **kwargs)

    @property
    def eof(self):
        return self.position >= len(self.data)

    def tell(self):
        return self.position

    def peek(self, n=1):
        return self.data[self.position : self.position + n]

    def read(self, n=1):
        pos = self.position
        r = self.data[pos : pos + n]
        if len(r) < n:
            raise self.error(pos, expected='at least %d characters' % n)
        self.position += n
        return r

    def read_while(self, predicate):
        """Read characters as long as `predicate` holds for each of them.

        `predicate` is a function of one character, or a
        :class:`~cacheobject.parse.Terminal`.
        """
        match = getattr(predicate, 'match', predicate)
        start = end = self.position
        while end < len(self.data) and match(self.data[end]):
            end += 1
        self.position = end
        return self.data[start:end]

    def skip_while(self, predicate):
        return len(self.read_while(predicate))

    def consume(self, c):
        """Read `c` if it comes next. Return whether it did."""
        if self.data.startswith(c, self.position):
            self.position += len(c)
            return True
        return False
