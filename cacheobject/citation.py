# -*- coding: utf-8; -*-


class Citation:

    """A reference to a relevant document."""

    __slots__ = ('title', 'url')
    __str__ = lambda self: self.title or self.url

    def __init__(self, title, url):
        self.title = title
        self.url = url

    def __repr__(self):
        return '<Citation %s>' % self

    def __eq__(self, other):
        return isinstance(other, Citation) and \
            self.title == other.title and self.url == other.url

    def __ne__(self, other):        # pragma: no cover
        return not self == other

    def __hash__(self):             # pragma: no cover
        return hash((self.title, self.url))


class RFC(Citation):

    """A reference to an RFC document, optionally to one of its sections."""

    __slots__ = ('num', 'section')

    def __init__(self, num, section=None):
        self.num = num = int(num)
        if isinstance(section, tuple):
            section = '.'.join(str(part) for part in section)
        self.section = section = str(section) if section else None
        title = 'RFC %d' % num
        url = 'https://tools.ietf.org/html/rfc%d' % num
        if section:
            title += ' § %s' % section
            url += '#section-%s' % section
        super().__init__(title, url)
