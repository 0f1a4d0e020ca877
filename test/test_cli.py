# -*- coding: utf-8; -*-

import io
import os

import cacheobject.cli
from cacheobject.util.text import MockStdio


base_path = os.path.dirname(__file__)


def run(options, values=None, relative_paths=None, stdin_text=''):
    argv = ['cacheobject'] + options
    for relative_path in relative_paths or []:
        argv += ['-f', os.path.join(base_path, relative_path)]
    argv += values or []
    stdin = io.StringIO(stdin_text)
    stdout = MockStdio()
    stderr = MockStdio()
    args = cacheobject.cli.parse_args(argv)
    exit_status = cacheobject.cli.run_cli(args, stdin, stdout, stderr)
    return (exit_status, stdout.buffer.getvalue(), stderr.buffer.getvalue())


def test_basic():
    (code, stdout, stderr) = run([], ['max-age=20, no-cache="Set-Cookie"'])
    assert code == 0
    assert stdout == (b'------------ max-age=20, no-cache="Set-Cookie"\n'
                      b'max-age: 20\n'
                      b'no-cache: Set-Cookie\n')
    assert stderr == b''


def test_several_values():
    (code, stdout, stderr) = run([], ['', 'private', 'no-store, x=1'])
    assert code == 0
    assert stdout.count(b'------------ ') == 3
    assert b'(no directives)\n' in stdout
    assert b'private: all fields\n' in stdout
    assert b'no-store: yes\n' in stdout
    assert b'extensions: x=1\n' in stdout
    assert stderr == b''


def test_error():
    (code, stdout, stderr) = run([], ['public=5'])
    assert code == 0
    assert b'E PublicArgumentError public: directive does not take ' \
        b'an argument\n' in stdout
    assert b'RFC 7234 \xc2\xa7 5.2.2.5' in stdout
    assert stderr == b''

    (code, stdout, stderr) = run([], ['foo="bar'])
    assert b'E QuoteMismatchError quoted string has no closing ' \
        b'double quote\n' in stdout
    assert b'Found end of data.' in stdout


def test_fail_on_error():
    (code, stdout, stderr) = run(['--fail-on-error'], ['max-age=5'])
    assert code == 0
    assert b'E ' not in stdout

    (code, stdout, stderr) = run(['--fail-on-error'],
                                 ['max-age=5', 'max-age=-5'])
    assert code > 0
    assert b'max-age: 5\n' in stdout
    assert b'E MaxAgeError' in stdout
    assert stderr == b''


def test_html():
    (code, stdout, stderr) = run(['-o', 'html'],
                                 ['s-maxage=60', 'no-transform=1'])
    assert code == 0
    assert b'<!DOCTYPE html' in stdout
    assert b'<title>Cache-Control report</title>' in stdout
    assert b'href="https://tools.ietf.org/html/rfc7234#section-5.2.2.9"' \
        in stdout
    assert b'NoTransformArgumentError' in stdout
    assert stdout.count(b'<section') == 2
    assert stderr == b''


def test_files():
    (code, stdout, stderr) = run(['--fail-on-error'],
                                 relative_paths=['data/values_ok'])
    assert code == 0
    assert stdout.count(b'------------ ') == 4
    assert b'max-age: 3600\n' in stdout
    assert b'extensions: immutable\n' in stdout

    (code, stdout, stderr) = run(['--fail-on-error'], ['public'],
                                 relative_paths=['data/values_ok',
                                                 'data/values_bad'])
    assert code > 0
    assert stdout.count(b'------------ ') == 8
    assert stdout.startswith(b'------------ public\n')
    assert b'E SMaxAgeError' in stdout
    assert b'E NoStoreArgumentError' in stdout


def test_stdin():
    (code, stdout, stderr) = run([], stdin_text='max-age=1\r\nprivate=X\n')
    assert code == 0
    assert b'max-age: 1\n' in stdout
    assert b'private: X\n' in stdout


def test_nonexistent_file():
    (code, stdout, stderr) = run([], relative_paths=['data/nonexistent'])
    assert code > 0
    assert stderr.startswith(b'cacheobject: ')
    assert b'nonexistent' in stderr
