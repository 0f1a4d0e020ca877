# -*- coding: utf-8; -*-

from cacheobject import errors
from cacheobject.citation import RFC
from cacheobject.known.base import KnownDict
from cacheobject.structure import CacheDirective


NO = 0
OPTIONAL = 1
REQUIRED = 2

DELTA_SECONDS = 'delta-seconds'
FIELD_LIST = 'field-list'


def argument_required(name):
    return known.get_info(name).get('argument') == REQUIRED

def no_argument(name):
    return known.get_info(name).get('argument') == NO

def is_delta_seconds(name):
    return known.get_info(name).get('kind') == DELTA_SECONDS

def is_field_list(name):
    return known.get_info(name).get('kind') == FIELD_LIST

def error_for(name):
    return known.get_info(name).get('error')

def field_for(name):
    return known.get_info(name).get('field')

def citation_for(name):
    citations = known.get_info(name).get('_citations')
    return citations[0] if citations else None


# Only the response directives are listed here.
# Everything else (including request-only directives such as ``max-stale``)
# ends up in ``DirectiveSet.extensions``.

known = KnownDict(CacheDirective, [
 {'_': CacheDirective('max-age'),
  '_citations': [RFC(7234, section=(5, 2, 2, 8))],
  'argument': REQUIRED,
  'kind': DELTA_SECONDS,
  'field': 'max_age',
  'error': errors.MaxAgeError},
 {'_': CacheDirective('must-revalidate'),
  '_citations': [RFC(7234, section=(5, 2, 2, 1))],
  'argument': NO,
  'field': 'must_revalidate',
  'error': errors.MustRevalidateArgumentError},
 {'_': CacheDirective('no-cache'),
  '_citations': [RFC(7234, section=(5, 2, 2, 2))],
  'argument': OPTIONAL,
  'kind': FIELD_LIST,
  'field': 'no_cache'},
 {'_': CacheDirective('no-store'),
  '_citations': [RFC(7234, section=(5, 2, 2, 3))],
  'argument': NO,
  'field': 'no_store',
  'error': errors.NoStoreArgumentError},
 {'_': CacheDirective('no-transform'),
  '_citations': [RFC(7234, section=(5, 2, 2, 4))],
  'argument': NO,
  'field': 'no_transform',
  'error': errors.NoTransformArgumentError},
 {'_': CacheDirective('private'),
  '_citations': [RFC(7234, section=(5, 2, 2, 6))],
  'argument': OPTIONAL,
  'kind': FIELD_LIST,
  'field': 'private'},
 {'_': CacheDirective('proxy-revalidate'),
  '_citations': [RFC(7234, section=(5, 2, 2, 7))],
  'argument': NO,
  'field': 'proxy_revalidate',
  'error': errors.ProxyRevalidateArgumentError},
 {'_': CacheDirective('public'),
  '_citations': [RFC(7234, section=(5, 2, 2, 5))],
  'argument': NO,
  'field': 'public',
  'error': errors.PublicArgumentError},
 {'_': CacheDirective('s-maxage'),
  '_citations': [RFC(7234, section=(5, 2, 2, 9))],
  'argument': REQUIRED,
  'kind': DELTA_SECONDS,
  'field': 's_maxage',
  'error': errors.SMaxAgeError},
], extra_info=['argument', 'kind', 'field', 'error'])
