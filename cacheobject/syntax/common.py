# -*- coding: utf-8; -*-

from cacheobject.citation import RFC
from cacheobject.parse import auto, fill_names, octet, octet_range


ALPHA = octet_range(0x41, 0x5A) | octet_range(0x61, 0x7A)               > auto
DIGIT = octet_range(0x30, 0x39)                                         > auto
DQUOTE = octet(0x22)                                                    > auto
HTAB = octet(0x09)                                                      > auto
SP = octet(0x20)                                                        > auto
VCHAR = octet_range(0x21, 0x7E)                                         > auto

fill_names(globals(), RFC(5234))
