"""
validlang.py.

Utility module to check whether a language tag is well-formed according
to BCP47 (https://tools.ietf.org/html/bcp47) but not if it is valid.

Run as a script to check tags given on the command line, or with no
arguments to check tags typed at a prompt.
"""
import sys
import argparse
from json import dumps

from bcp47 import parse, stringify


def check_tag(s, normalize=False, forgiving=False):
    """
    Parse s, collecting any grammar warning.

    Return (schema, warnings), where warnings is a list of
    (message, code, offset) tuples.
    """
    warnings = []

    def _warning(message, code, offset):
        warnings.append((message, code, offset))

    schema = parse(s, normalize=normalize, forgiving=forgiving,
                   warning=_warning)
    return schema, warnings


def well_formed_bcp47(s):
    """Check whether a language tag is well-formed according to bcp47"""
    schema, warnings = check_tag(s)
    if warnings or schema.is_empty():
        return None
    return schema.to_dict()


def _report(tag, args):
    schema, warnings = check_tag(tag, normalize=args.normalize,
                                 forgiving=args.forgiving)
    if args.json:
        print(dumps(schema.to_dict()))
    else:
        print("{} -> {}".format(tag, stringify(schema) or '(empty)'))
    for message, code, offset in warnings:
        print("  error {} at offset {}: {}".format(code, offset, message))
        if args.verbose:
            print("  {}".format(tag))
            print("  {}^".format(' ' * offset))
    return not warnings


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Check BCP 47 language tags for well-formedness.')
    parser.add_argument('tags', nargs='*',
                        help='Tags to check (read from stdin if none given)')
    parser.add_argument('-n', '--normalize', dest='normalize',
                        action='store_true', default=False,
                        help='Replace grandfathered tags with their '
                             'preferred value')
    parser.add_argument('-f', '--forgiving', dest='forgiving',
                        action='store_true', default=False,
                        help='Keep subtags parsed before an error')
    parser.add_argument('-j', '--json', dest='json', action='store_true',
                        default=False, help='Print the parsed schema as JSON')
    parser.add_argument('-v', '--verbose', dest='verbose', action='count',
                        default=0, help='Turn on verbose output.')
    args = parser.parse_args(argv)

    if args.tags:
        results = [_report(tag, args) for tag in args.tags]
        return 0 if all(results) else 1

    print("> ", end='', flush=True)
    line = sys.stdin.readline()
    while line:
        tag = line.strip()
        if tag:
            _report(tag, args)
        print("> ", end='', flush=True)
        line = sys.stdin.readline()
    return 0


if __name__ == '__main__':
    sys.exit(main())
