# -*- coding: utf-8; -*-

from functools import singledispatch

from cacheobject.errors import CacheControlError
from cacheobject.parse import ParseError, Symbol
from cacheobject.util.text import format_chars, nicely_join


@singledispatch
def expand_piece(piece):
    return str(piece)

@expand_piece.register(bool)
def expand_flag(flag):
    return 'yes' if flag else 'no'

@expand_piece.register(frozenset)
def expand_field_names(names):
    return nicely_join(sorted(names))

@expand_piece.register(tuple)
def expand_extensions(extensions):
    return ', '.join(extensions)

@expand_piece.register(Symbol)
def expand_symbol(sym):
    if sym.citation:
        return [sym.name, ' (', sym.citation, ')']
    else:
        return [sym.name]


def directive_lines(directives):
    """Describe what is set in a :class:`~cacheobject.structure.DirectiveSet`.

    :return: A list of ``(label, piece)`` pairs, where `label` is
        a directive name (or ``extensions``).
    """
    lines = []
    for field, value in directives.present():
        if field.endswith('_present'):
            names_field = field[:-len('_present')]
            if getattr(directives, names_field):
                # The field names will be listed on their own.
                continue
            field, value = names_field, 'all fields'
        lines.append((field.replace('_', '-'), value))
    return lines


@singledispatch
def expand_error(error):
    return [[str(error)]]   # A single paragraph consisting of the error message.

@expand_error.register(ParseError)
def expand_parse_error(error):
    paras = [[str(error)]]
    if error.position is not None:
        paras.append(['Parse error at offset %d.' % error.position])
    if error.found == '':
        paras.append(['Found end of data.'])
    elif error.found is not None:
        paras.append(['Found: %s' % format_chars([error.found])])

    if error.expected:
        paras.append(['Expected:'])
    for i, (option, symbols) in enumerate(error.expected):
        para = []
        if option:
            para.extend([option] if i == 0 else ['or ', option])
            if symbols:
                para.append(' as part of ')
        for j, symbol in enumerate(symbols or []):
            para.extend([symbol] if j == 0 else [' or ', symbol])
        paras.append(para)

    if isinstance(error, CacheControlError):
        paras.append(['See ', error.citation, '.'])
    return paras


def error_name(error):
    return error.__class__.__name__

