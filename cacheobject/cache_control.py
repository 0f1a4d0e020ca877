# -*- coding: utf-8; -*-

"""Parse the ``Cache-Control`` header of a response (RFC 7234 Section 5.2).

The grammar in the RFC is ``1#cache-directive``, but servers send all sorts
of things, so we are more lenient than that:

- directives may be separated by any mix of commas, spaces and tabs;
- an unquoted argument to ``no-cache`` or ``private`` runs up to the next
  whitespace, commas included, and is a list of field names just like
  the quoted form;
- anything that doesn't look like a directive is kept as an extension.

On the other hand, a directive with the wrong kind of argument makes
the whole value unacceptable: see :mod:`cacheobject.errors`.
"""

import logging

from cacheobject import errors
from cacheobject.known import cache, cache_directive
from cacheobject.stream import Stream
from cacheobject.structure import (Argument, CacheDirective, DirectiveSet,
                                   Outcome, RawDirective)
from cacheobject.syntax import rfc7234
from cacheobject.syntax.common import DIGIT, DQUOTE
from cacheobject.syntax.rfc7230 import (OWS, qdtext, quoted_pair,
                                        quoted_pair_char, quoted_string,
                                        tchar, token)
from cacheobject.util.text import ellipsize


log = logging.getLogger(__name__)

# RFC 7234 Section 1.2.1 says "2147483648 (2^31)", but we stay
# within a signed 32-bit integer.
MAX_DELTA_SECONDS = 2 ** 31 - 1

separator = OWS | ','


def _not(terminal):
    return lambda c: not terminal.match(c)


###############################################################################
# delta-seconds


def parse_delta_seconds(text):
    """Parse `text` as ``delta-seconds``.

    Values that don't fit into a signed 32-bit integer are clamped
    to :data:`MAX_DELTA_SECONDS`, as recommended by RFC 7234.

    >>> parse_delta_seconds('3600')
    3600
    >>> parse_delta_seconds('99999999999')
    2147483647

    :raises: :exc:`~cacheobject.errors.DeltaSecondsError`
        if `text` is not a non-empty string of ASCII digits.
    """
    stream = Stream(text)
    with stream.parsing(rfc7234.delta_seconds):
        digits = stream.read_while(DIGIT)
        if not digits:
            raise stream.error(expected=DIGIT.describe(),
                               cls=errors.DeltaSecondsError)
        if not stream.eof:
            raise stream.error(expected='end of data',
                               cls=errors.DeltaSecondsError)
    # Anything longer than ten digits is over the limit anyway, and
    # ``int()`` refuses very long strings.
    digits = digits.lstrip('0') or '0'
    if len(digits) > len(str(MAX_DELTA_SECONDS)) or \
            int(digits) > MAX_DELTA_SECONDS:
        log.debug('clamping delta-seconds %s to %d',
                  ellipsize(digits, 20), MAX_DELTA_SECONDS)
        return MAX_DELTA_SECONDS
    return int(digits)


###############################################################################
# Splitting into directives


def _scan(value):
    """Split `value` into :class:`~cacheobject.structure.RawDirective`."""
    stream = Stream(value)
    with stream.parsing(rfc7234.Cache_Control):
        while True:
            stream.skip_while(separator)
            if stream.eof:
                break
            yield _scan_directive(stream)


def _scan_directive(stream):
    position = stream.tell()
    with stream.parsing(rfc7234.cache_directive):
        with stream.parsing(token):
            name = stream.read_while(tchar)
        if not name or not (stream.eof or stream.peek() == '=' or
                            separator.match(stream.peek())):
            # Not something we can understand, so just keep it as is.
            name += stream.read_while(_not(separator))
            return RawDirective(position, name, None)

        name = CacheDirective(name)
        if not stream.consume('='):
            return RawDirective(position, name, None)

        if stream.peek() and DQUOTE.match(stream.peek()):
            return RawDirective(position, name,
                                Argument(_scan_quoted_string(stream), True))

        if cache_directive.is_field_list(name):
            text = stream.read_while(_not(OWS))
        else:
            text = stream.read_while(_not(separator))
        return RawDirective(position, name, Argument(text, False))


def _scan_quoted_string(stream):
    with stream.parsing(quoted_string):
        stream.read(1)
        chunks = []
        while True:
            chunks.append(stream.read_while(lambda c: c not in '"\\'))
            if stream.eof:
                raise stream.error(expected=DQUOTE.describe(),
                                   cls=errors.QuoteMismatchError)
            if stream.consume('"'):
                return ''.join(chunks)
            with stream.parsing(quoted_pair):
                stream.read(1)
                if stream.eof:
                    raise stream.error(expected=quoted_pair_char.describe(),
                                       cls=errors.QuoteMismatchError)
                chunks.append(stream.read(1))


###############################################################################
# Putting directives together


def parse_response_cache_control(value):
    """Parse the `value` of a response's ``Cache-Control`` header.

    An empty (or whitespace-only) `value` is fine and gives an empty
    :class:`~cacheobject.structure.DirectiveSet`.

    If the same delta-seconds directive (such as ``max-age``) occurs
    more than once, the last one wins. Field names from repeated ``no-cache``
    and ``private`` directives are merged.

    :raises: :exc:`~cacheobject.errors.CacheControlError`
        on the first directive (from left to right) that is not acceptable.
    """
    fields = DirectiveSet()._asdict()
    field_names = {'no_cache': set(), 'private': set()}
    extensions = []

    try:
        for position, name, argument in _scan(value):
            if name in cache:
                _apply(fields, field_names, position, name, argument)
            else:
                log.debug('extension directive %r at %d', name, position)
                extensions.append(_render_extension(name, argument))
    except errors.CacheControlError as exc:
        log.debug('rejecting Cache-Control %r: %s', value, exc)
        raise

    for field, names in field_names.items():
        fields[field] = frozenset(names)
    fields['extensions'] = tuple(extensions)
    return DirectiveSet(**fields)


def _apply(fields, field_names, position, name, argument):
    field = cache_directive.field_for(name)
    log.debug('directive %r at %d sets %s', name, position, field)

    if argument is None and cache_directive.argument_required(name):
        raise cache_directive.error_for(name)(
            position=position, directive=name,
            expected=[('=', [rfc7234.cache_directive])])

    if cache_directive.no_argument(name):
        if argument is not None:
            raise cache_directive.error_for(name)(position=position,
                                                  directive=name)
        fields[field] = True

    elif cache_directive.is_delta_seconds(name):
        error_cls = cache_directive.error_for(name)
        try:
            fields[field] = parse_delta_seconds(argument.text)
        except errors.DeltaSecondsError as exc:
            raise error_cls(position=position, directive=name,
                            expected=exc.expected, found=exc.found) from exc

    elif cache_directive.is_field_list(name):
        fields[field + '_present'] = True
        if argument is not None:
            field_names[field].update(argument.field_names())


def _render_extension(name, argument):
    if argument is None:
        return str(name)
    return '%s=%s' % (name, argument.text)


def check_value(value):
    """Parse `value` into an :class:`~cacheobject.structure.Outcome`.

    Unlike :func:`parse_response_cache_control`, this never raises
    :exc:`~cacheobject.errors.CacheControlError`, but returns it.
    """
    try:
        return Outcome(value, parse_response_cache_control(value), None)
    except errors.CacheControlError as exc:
        return Outcome(value, None, exc)


###############################################################################
# Serializing


_ORDER = [cache.public, cache.private, cache.no_cache, cache.no_store,
          cache.no_transform, cache.must_revalidate, cache.proxy_revalidate,
          cache.max_age, cache.s_maxage]


def format_cache_control(directives):
    """Serialize a :class:`~cacheobject.structure.DirectiveSet`.

    The result parses back into an equal ``DirectiveSet``.

    >>> print(format_cache_control(
    ...     DirectiveSet(max_age=60, private_present=True,
    ...                  private=frozenset(['Set-Cookie']))))
    private="Set-Cookie", max-age=60
    """
    pieces = []
    for name in _ORDER:
        field = cache_directive.field_for(name)
        value = getattr(directives, field)
        if cache_directive.is_field_list(name):
            if getattr(directives, field + '_present'):
                if value:
                    pieces.append(_format_pair(name, ', '.join(sorted(value)),
                                               quote=True))
                else:
                    pieces.append(name)
        elif cache_directive.is_delta_seconds(name):
            if value is not None:
                pieces.append('%s=%d' % (name, value))
        elif value:
            pieces.append(name)

    for extension in directives.extensions:
        (name, sep, text) = extension.partition('=')
        if sep and name and tchar.match_all(name):
            pieces.append(_format_pair(name, text))
        else:
            # Kept verbatim by the parser, so it contains no separators.
            pieces.append(extension)

    return ', '.join(pieces)


def _format_pair(name, text, quote=False):
    if not quote and tchar.match_all(text):
        return '%s=%s' % (name, text)
    return '%s="%s"' % (name, ''.join(
        '\\' + c if quoted_pair_char.match(c) and not qdtext.match(c) else c
        for c in text))
