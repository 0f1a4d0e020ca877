# -*- coding: utf-8; -*-

import codecs
from functools import singledispatch

from cacheobject.reports.common import (directive_lines, error_name,
                                        expand_error, expand_piece)
from cacheobject.util.text import ellipsize, printable


def text_report(outcomes, buf):
    """Generate a plain-text report with parse results.

    :param outcomes:
        An iterable of :class:`~cacheobject.structure.Outcome` objects.

    :param buf:
        The file (or file-like object) to which the report will be written.
        It must be opened in binary mode (not text).

    """
    f = codecs.getwriter('utf-8')(buf)
    for outcome in outcomes:
        f.write(_outcome_marker(outcome))
        if outcome.error is not None:
            _write_error(outcome.error, f)
        else:
            lines = directive_lines(outcome.directives)
            if not lines:
                f.write('(no directives)\n')
            for label, piece in lines:
                f.write('%s: %s\n' % (label, _piece_to_text(piece)))


def _outcome_marker(outcome):
    # The number 79 fits the default ``cmd.exe`` size in Windows.
    return ellipsize('------------ %s' % printable(outcome.value), 79) + '\n'


def _write_error(error, f):
    (first, *rest) = expand_error(error)
    f.write('E %s %s\n' % (error_name(error), _piece_to_text(first)))
    for para in rest:
        f.write('  %s\n' % _piece_to_text(para))


@singledispatch
def _piece_to_text(piece):
    return _piece_to_text(expand_piece(piece))

@_piece_to_text.register(str)
def _text_to_text(text):
    return printable(text)

@_piece_to_text.register(list)
def _list_to_text(xs):
    return ''.join(_piece_to_text(x) for x in xs)
