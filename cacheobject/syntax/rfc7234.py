# -*- coding: utf-8; -*-

from cacheobject.citation import RFC
from cacheobject.parse import Symbol, fill_names, pivot


delta_seconds = Symbol()                                                > pivot
cache_directive = Symbol()                                              > pivot
Cache_Control = Symbol()                                                > pivot

fill_names(globals(), RFC(7234, section='5.2'))

delta_seconds.citation = RFC(7234, section='1.2.1')
