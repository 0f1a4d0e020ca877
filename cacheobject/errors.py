# -*- coding: utf-8; -*-

"""Exceptions raised when a ``Cache-Control`` value cannot be accepted.

There are three kinds of them:

- structural (:exc:`QuoteMismatchError`): the rest of the value
  cannot be reliably split into directives;
- argument shape (:exc:`UnexpectedArgumentError` and its subclasses):
  a directive that takes no argument was given one;
- numeric (:exc:`DeltaSecondsError` and its subclasses): a directive
  that requires delta-seconds has a missing or invalid value.

Each kind is a distinct class, so callers can tell them apart with
``except``. None of them leaves a partially parsed value behind.
"""

from cacheobject.citation import RFC
from cacheobject.parse import ParseError


class CacheControlError(ParseError):

    """Base class for all errors in ``Cache-Control`` values."""

    title = 'malformed Cache-Control value'
    citation = RFC(7234, section='5.2')

    def __init__(self, position=None, directive=None, expected=None,
                 found=None):
        self.directive = directive
        super().__init__(position, expected, found, message=self.describe())

    def describe(self):
        if self.directive is None:
            return self.title
        return '%s: %s' % (self.directive, self.title)


class QuoteMismatchError(CacheControlError):

    title = 'quoted string has no closing double quote'
    citation = RFC(7230, section='3.2.6')


class UnexpectedArgumentError(CacheControlError):

    title = 'directive does not take an argument'


class MustRevalidateArgumentError(UnexpectedArgumentError):

    citation = RFC(7234, section='5.2.2.1')


class NoStoreArgumentError(UnexpectedArgumentError):

    citation = RFC(7234, section='5.2.2.3')


class NoTransformArgumentError(UnexpectedArgumentError):

    citation = RFC(7234, section='5.2.2.4')


class PublicArgumentError(UnexpectedArgumentError):

    citation = RFC(7234, section='5.2.2.5')


class ProxyRevalidateArgumentError(UnexpectedArgumentError):

    citation = RFC(7234, section='5.2.2.7')


class DeltaSecondsError(CacheControlError):

    title = 'expected delta-seconds (a non-negative number of seconds)'
    citation = RFC(7234, section='1.2.1')


class MaxAgeError(DeltaSecondsError):

    citation = RFC(7234, section='5.2.2.8')


class SMaxAgeError(DeltaSecondsError):

    citation = RFC(7234, section='5.2.2.9')
