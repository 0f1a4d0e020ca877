# -*- coding: utf-8; -*-

import pytest

from cacheobject.citation import RFC
from cacheobject.parse import ParseError, Terminal, literal, octet_range
from cacheobject.stream import Stream
from cacheobject.syntax import rfc7230, rfc7234
from cacheobject.syntax.common import ALPHA, DIGIT, DQUOTE, SP


def test_terminals():
    assert DIGIT.match('0')
    assert DIGIT.match('9')
    assert not DIGIT.match('a')
    assert not DIGIT.match('٣')
    assert ALPHA.match_all('NoCache')
    assert not ALPHA.match_all('no-cache')
    assert rfc7230.tchar.match_all('no-cache')
    assert rfc7230.tchar.match_all("!#$%&'*+-.^_`|~")
    for c in ' \t",;=()[]{}/\\?@:<>':
        assert not rfc7230.tchar.match(c)
    assert rfc7230.tchar.match_all('')


def test_qdtext():
    assert rfc7230.qdtext.match_all('Set-Cookie, foo bar\t!#[]~')
    assert rfc7230.qdtext.match('\xe9')
    assert not rfc7230.qdtext.match('"')
    assert not rfc7230.qdtext.match('\\')
    assert not rfc7230.qdtext.match('\x7f')
    assert rfc7230.quoted_pair_char.match('"')
    assert rfc7230.quoted_pair_char.match('\\')
    assert not rfc7230.quoted_pair_char.match('\n')


def test_terminal_operations():
    hex_digit = DIGIT | octet_range(0x41, 0x46) | 'f'
    assert hex_digit.match_all('09AFf')
    assert not hex_digit.match('a')
    assert (hex_digit - DIGIT).chars() == ['A', 'B', 'C', 'D', 'E', 'F', 'f']
    assert (',' | SP).chars() == [' ', ',']
    assert literal('x').chars() == ['X', 'x']
    assert literal('x', case_sensitive=True).chars() == ['x']
    assert Terminal().chars() == []
    assert len(octet_range(0x00, 0xFF).chars()) == 256
    assert octet_range(0x07, 0x09).chars() == ['\x07', '\x08', '\t']
    assert DQUOTE.chars() == ['"']


def test_describe():
    assert DIGIT.describe() == '0–9'
    assert rfc7230.OWS.describe() == 'tab or space'
    assert (literal('=') | ';').describe() == 'semicolon (;) or equals sign (=)'


def test_names():
    assert DIGIT.name == 'DIGIT'
    assert DIGIT.citation == RFC(5234)
    assert rfc7230.tchar.name == 'tchar'
    assert rfc7230.quoted_string.name == 'quoted-string'
    assert rfc7230.quoted_string.is_pivot
    assert not rfc7230.quoted_pair.is_pivot
    assert rfc7230.token.is_pivot
    assert rfc7230.token.citation == RFC(7230, section='3.2.6')
    assert rfc7234.Cache_Control.name == 'Cache-Control'
    assert rfc7234.cache_directive.name == 'cache-directive'
    assert rfc7234.delta_seconds.citation == RFC(7234, section=(1, 2, 1))
    assert rfc7230.quoted_pair_char.name is None


def test_citation():
    citation = RFC(7234, section=(5, 2, 2, 8))
    assert str(citation) == 'RFC 7234 § 5.2.2.8'
    assert citation.url == \
        'https://tools.ietf.org/html/rfc7234#section-5.2.2.8'
    assert citation == RFC(7234, section='5.2.2.8')
    assert citation != RFC(7234)
    assert len(set([citation, RFC(7234, section='5.2.2.8')])) == 1


def test_stream():
    stream = Stream('max-age=60, public')
    assert stream.read_while(rfc7230.tchar) == 'max-age'
    assert stream.tell() == 7
    assert stream.peek() == '='
    assert stream.consume('=')
    assert not stream.consume('=')
    assert stream.read_while(DIGIT) == '60'
    assert stream.skip_while(lambda c: c in ', ') == 2
    assert stream.read(6) == 'public'
    assert stream.eof
    assert stream.peek() == ''
    assert stream.read_while(DIGIT) == ''


def test_stream_error():
    stream = Stream('abc')
    stream.read(2)
    with pytest.raises(ParseError) as info:
        stream.read(2)
    assert info.value.position == 2
    assert info.value.found == 'c'
    assert stream.tell() == 2

    with stream.parsing(rfc7234.delta_seconds):
        exc = stream.error(expected='0–9')
    assert exc.expected == [('0–9', [rfc7234.delta_seconds])]
    assert stream.error(position=3).found == ''
    assert stream.error().expected == [(None, [])]
