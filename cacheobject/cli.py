# -*- coding: utf-8; -*-

"""The command-line interface to cacheobject."""

import argparse
import io
import logging
import sys
import traceback

import cacheobject
from cacheobject import reports
from cacheobject.cache_control import check_value
from cacheobject.util.text import stdio_as_bytes


log = logging.getLogger(__name__)


def parse_args(argv):
    parser = argparse.ArgumentParser(
        description='Parse Cache-Control response header values.')
    parser.add_argument('--version', action='version',
                        version='cacheobject %s' % cacheobject.__version__)
    parser.add_argument('-f', '--file', metavar='PATH', action='append',
                        help='read header values from this file, '
                             'one per line')
    parser.add_argument('-o', '--output', choices=reports.formats,
                        default='text', help='output format')
    parser.add_argument('--fail-on-error', action='store_true',
                        help='exit with a non-zero status '
                             'if any value could not be parsed')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='log what the parser is doing to stderr')
    parser.add_argument('--full-traceback', action='store_true',
                        help='do not hide the traceback on exceptions')
    parser.add_argument('value', nargs='*',
                        help='a Cache-Control header value')
    return parser.parse_args(argv[1:])


def _read_values(args, stdin):
    for value in args.value:
        yield value
    for path in args.file or []:
        with io.open(path, encoding='iso-8859-1', newline='') as f:
            for line in f:
                yield line.rstrip('\r\n')
    if not args.value and not args.file:
        for line in stdin:
            yield line.rstrip('\r\n')


def run_cli(args, stdin, stdout, stderr):
    report = reports.formats[args.output]
    n_errors = 0
    def generate_outcomes():
        nonlocal n_errors
        for value in _read_values(args, stdin):
            outcome = check_value(value)
            if outcome.error is not None:
                n_errors += 1
            yield outcome

    try:
        # Reports are always written as UTF-8 bytes, whatever the encoding
        # of the terminal: HTML reports declare it in ``meta``.
        report(generate_outcomes(), stdio_as_bytes(stdout))
    except EnvironmentError as exc:
        if args.full_traceback:
            traceback.print_exc(file=stderr)
        stderr.write('cacheobject: %s\n' % exc)
        return 1

    log.debug('%d values failed to parse', n_errors)
    if args.fail_on_error and n_errors > 0:
        return 1
    return 0


def excepthook(_type, exc, _traceback):     # pragma: no cover
    sys.stderr.write('cacheobject: unhandled exception: %r\n' % exc)


def main():     # pragma: no cover
    args = parse_args(sys.argv)
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(name)s: %(levelname)s: %(message)s')
    if not args.full_traceback:
        sys.excepthook = excepthook
    sys.exit(run_cli(args, sys.stdin, sys.stdout, sys.stderr))

if __name__ == '__main__':
    main()
