# -*- coding: utf-8; -*-

from cacheobject.__metadata__ import version as __version__
from cacheobject.cache_control import (MAX_DELTA_SECONDS, check_value,
                                       format_cache_control,
                                       parse_delta_seconds,
                                       parse_response_cache_control)
from cacheobject.errors import (CacheControlError, DeltaSecondsError,
                                MaxAgeError, MustRevalidateArgumentError,
                                NoStoreArgumentError,
                                NoTransformArgumentError,
                                ProxyRevalidateArgumentError,
                                PublicArgumentError, QuoteMismatchError,
                                SMaxAgeError, UnexpectedArgumentError)
from cacheobject.parse import ParseError
from cacheobject.reports.html import html_report
from cacheobject.reports.text import text_report
from cacheobject.structure import DirectiveSet, Outcome

__all__ = [
    'CacheControlError',
    'DeltaSecondsError',
    'DirectiveSet',
    'MAX_DELTA_SECONDS',
    'MaxAgeError',
    'MustRevalidateArgumentError',
    'NoStoreArgumentError',
    'NoTransformArgumentError',
    'Outcome',
    'ParseError',
    'ProxyRevalidateArgumentError',
    'PublicArgumentError',
    'QuoteMismatchError',
    'SMaxAgeError',
    'UnexpectedArgumentError',
    'check_value',
    'format_cache_control',
    'html_report',
    'parse_delta_seconds',
    'parse_response_cache_control',
    'text_report',
]
