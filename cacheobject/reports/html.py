# -*- coding: utf-8; -*-

from functools import singledispatch
import pkgutil

import dominate
import dominate.tags as H
from dominate.util import text as text_node

from cacheobject.__metadata__ import version
from cacheobject.citation import Citation
from cacheobject.known import cache_directive
from cacheobject.reports.common import (directive_lines, error_name,
                                        expand_error, expand_piece)
from cacheobject.structure import CacheDirective
from cacheobject.util.text import printable


css_code = pkgutil.get_data('cacheobject.reports', 'html.css').decode('utf-8')


def html_report(outcomes, buf):
    """Generate an HTML report with parse results.

    :param outcomes:
        An iterable of :class:`~cacheobject.structure.Outcome` objects.

    :param buf:
        The file (or file-like object) to which the report will be written.
        It must be opened in binary mode (not text).

    """
    title = 'Cache-Control report'
    document = dominate.document(title=title)
    _common_meta(document)
    with document.body:
        H.attr(_class='report')
    with document:
        H.h1(title)
        _render_outcomes(outcomes)
    buf.write(document.render().encode('utf-8'))


def _common_meta(document):
    with document:
        H.attr(lang='en')
    with document.head:
        H.meta(charset='utf-8')
        H.meta(name='generator', content='cacheobject %s' % version)
        H.style(type='text/css').add_raw_string(css_code)
        H.base(_target='blank')


def _render_outcomes(outcomes):
    # The ``hr`` elements really help readability in w3m.
    H.hr()
    for outcome in outcomes:
        status = 'error' if outcome.error is not None else 'ok'
        with H.section(_class='outcome %s' % status):
            with H.h2():
                H.code(printable(outcome.value), _class='header-value')
            if outcome.error is not None:
                _render_error(outcome.error)
            else:
                _render_directives(outcome.directives)
        H.hr()


def _render_directives(directives):
    lines = directive_lines(directives)
    if not lines:
        H.p('No directives.', _class='empty')
        return
    with H.table(_class='directives'):
        for label, piece in lines:
            with H.tr():
                with H.th(__pretty=False):
                    _render_known(label)
                with H.td(__pretty=False):
                    _piece_to_html(piece)


def _render_error(error):
    with H.div(_class='error'):
        paras = expand_error(error)
        with H.h3(__pretty=False):
            H.abbr('E', _class='severity', title='error')
            H.span(error_name(error), _class='ident')
            _piece_to_html(paras[0])
        for para in paras[1:]:
            with H.p(__pretty=False):
                _piece_to_html(para)


def _render_known(label):
    """Render a directive name, linking to where it is defined."""
    text = printable(label)
    cite = cache_directive.citation_for(CacheDirective(label))
    if cite:
        H.a(text, href=cite.url, title=cite.title)
    else:
        text_node(text)


@singledispatch
def _piece_to_html(piece):
    _piece_to_html(expand_piece(piece))

@_piece_to_html.register(str)
def _text_to_html(text):
    text_node(printable(text))

@_piece_to_html.register(list)
def _list_to_html(xs):
    for x in xs:
        _piece_to_html(x)

@_piece_to_html.register(Citation)
def _cite_to_html(cite):
    with H.cite():
        H.a(cite.title, href=cite.url)
