#!/usr/bin/env python3
"""langident: command line access to the language identifier library.

Usage:
    python3 tools/langident.py <command> [args...]

Commands:
    canonicalize <tags...>   Print the canonical form of each tag
    info <tag>               Show subtags, direction and raw encoding
    maximize <tags...>       Add likely subtags
    minimize <tags...>       Remove likely subtags
    match <range> <tag>      Check whether <tag> falls inside <range>
    store put <tags...>      Parse and store tags in the identifier store
    store get <tags...>      Read tags back from the identifier store
    store list               List canonical keys in the identifier store

Environment:
    LANGIDENT_LOG_LEVEL      Logging level (default: WARNING)
    LANGIDENT_STORE_PATH     LMDB directory for the store commands
                             (default: ./langident.lmdb)
"""

import argparse
import logging
import os
import sys

from langident.core.errors import LangIdentError
from langident.likely.tables import CLDR_VERSION
from langident.model.language_identifier import LanguageIdentifier

DEFAULT_STORE_PATH = os.environ.get("LANGIDENT_STORE_PATH", "langident.lmdb")
DEFAULT_LOG_LEVEL = os.environ.get("LANGIDENT_LOG_LEVEL", "WARNING")


def fail(message):
    """Print error and exit."""
    print(f"ERROR: {message}", file=sys.stderr)
    sys.exit(1)


def parse_or_fail(text):
    try:
        return LanguageIdentifier.from_text(text, allow_extension=True)
    except LangIdentError as e:
        fail(str(e))


# ---- Commands ----

def cmd_canonicalize(args):
    for tag in args.tags:
        print(parse_or_fail(tag).to_text())


def cmd_info(args):
    li = parse_or_fail(args.tag)
    language, script, region, variants = li.into_raw_parts()
    print(f"canonical:  {li}")
    print(f"language:   {li.get_language()}  (raw {language})")
    print(f"script:     {li.get_script() or '-'}  (raw {script})")
    print(f"region:     {li.get_region() or '-'}  (raw {region})")
    print(f"variants:   {', '.join(li.get_variants()) or '-'}  (raw {list(variants)})")
    if li.extension_tail:
        print(f"extensions: {li.extension_tail}")
    print(f"direction:  {li.get_character_direction().value}")


def cmd_maximize(args):
    for tag in args.tags:
        li = parse_or_fail(tag)
        li.add_likely_subtags()
        print(li)


def cmd_minimize(args):
    for tag in args.tags:
        li = parse_or_fail(tag)
        li.remove_likely_subtags()
        print(li)


def cmd_match(args):
    range_id = parse_or_fail(args.range)
    tag = parse_or_fail(args.tag)
    matched = range_id.matches(tag, True, False)
    print("match" if matched else "no match")
    if not matched:
        sys.exit(2)


def cmd_store(args):
    from langident.cache.store import IdentifierStore

    with IdentifierStore(args.path, map_size=args.map_size) as store:
        if args.action == "list":
            for key in store.keys():
                print(key)
        elif args.action == "put":
            for tag in args.tags:
                try:
                    print(store.resolve(tag))
                except LangIdentError as e:
                    fail(str(e))
        else:
            for tag in args.tags:
                found = store.get(tag)
                print(found if found is not None else f"{tag}: (not stored)")


def build_parser():
    parser = argparse.ArgumentParser(
        description=f"Language identifier tools (CLDR {CLDR_VERSION})")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("canonicalize", help="Normalize tags")
    p.add_argument("tags", nargs="+")
    p.set_defaults(func=cmd_canonicalize)

    p = sub.add_parser("info", help="Show parsed subtags")
    p.add_argument("tag")
    p.set_defaults(func=cmd_info)

    p = sub.add_parser("maximize", help="Add likely subtags")
    p.add_argument("tags", nargs="+")
    p.set_defaults(func=cmd_maximize)

    p = sub.add_parser("minimize", help="Remove likely subtags")
    p.add_argument("tags", nargs="+")
    p.set_defaults(func=cmd_minimize)

    p = sub.add_parser("match", help="Range match")
    p.add_argument("range")
    p.add_argument("tag")
    p.set_defaults(func=cmd_match)

    p = sub.add_parser("store", help="Identifier store")
    p.add_argument("action", choices=["put", "get", "list"])
    p.add_argument("tags", nargs="*")
    p.add_argument("--path", default=DEFAULT_STORE_PATH)
    p.add_argument("--map-size", type=int, default=16 * 1024 * 1024)
    p.set_defaults(func=cmd_store)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=DEFAULT_LOG_LEVEL.upper(),
                        format="%(levelname)s %(name)s: %(message)s")
    args.func(args)


if __name__ == "__main__":
    main()
