# -*- coding: utf-8; -*-

from cacheobject.citation import RFC
from cacheobject.parse import (Symbol, auto, fill_names, literal, octet,
                               octet_range, pivot)
from cacheobject.syntax.common import ALPHA, DIGIT, HTAB, SP, VCHAR


obs_text = octet_range(0x80, 0xFF)                                      > auto

tchar = (literal('!') | '#' | '$' | '%' | '&' | "'" | '*' | '+' | '-' | '.' |
         '^' | '_' | '`' | '|' | '~' | DIGIT | ALPHA)                   > auto

qdtext = (HTAB | SP | octet(0x21) | octet_range(0x23, 0x5B) |
          octet_range(0x5D, 0x7E) | obs_text)                           > auto

# What may follow the backslash of a ``quoted-pair``.
quoted_pair_char = HTAB | SP | VCHAR | obs_text

OWS = SP | HTAB                                                         > auto

token = Symbol()                                                        > pivot
quoted_string = Symbol()                                                > pivot
quoted_pair = Symbol()                                                  > auto

fill_names(globals(), RFC(7230, section='3.2.6'))
