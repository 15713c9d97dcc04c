#!/usr/bin/env python3

import argparse
import sys

from . import __version__, document, util
from .target import TARGET_ENV, TargetError, get_target

ACTIONS = ('put', 'get')
TARGET_FLAGS = ('-t', '--target')


def _put(args) -> bool:
    return document.put(args.document_id, args.json_file, get_target(args.target))


def _get(args) -> bool:
    return document.get(args.document_id, get_target(args.target))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='vespa-doc',
                                     description='Issue document operations against a Vespa document API')
    parser.add_argument('-t', '--target',
                        help=f"Target to use: 'local' or an http(s) URL (default: ${TARGET_ENV} or 'local')")
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    commands = parser.add_subparsers(dest='command', required=True)

    doc = commands.add_parser('document',
                              help='Issue document operations (put by default)',
                              description='Issue document operations (put by default). '
                                          'Example: document mynamespace/mydocumenttype/myid document.json')
    actions = doc.add_subparsers(dest='action', required=True)

    put = actions.add_parser('put', help='Put the document in the given file')
    put.add_argument('document_id', help='Document id, e.g. mynamespace/mydocumenttype/myid')
    put.add_argument('json_file', help='Path to the JSON file holding the document')
    put.set_defaults(func=_put)

    get = actions.add_parser('get', help='Get a document (not implemented)')
    get.add_argument('document_id', help='Document id, e.g. mynamespace/mydocumenttype/myid')
    get.set_defaults(func=_get)

    return parser


def normalize_args(argv):
    """Make 'document <id> <file>' mean 'document put <id> <file>'."""
    argv = list(argv)
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg in TARGET_FLAGS:
            i += 2
            continue
        if arg.startswith('-'):
            i += 1
            continue
        # first positional is the command
        if arg == 'document':
            rest = argv[i + 1:]
            if rest and not rest[0].startswith('-') and rest[0] not in ACTIONS:
                argv.insert(i + 1, 'put')
        break
    return argv


def main(argv=None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(normalize_args(argv))
    try:
        ok = args.func(args)
    except TargetError as e:
        util.error(str(e))
        return 1
    return 0 if ok else 1


if __name__ == '__main__':
    sys.exit(main())
