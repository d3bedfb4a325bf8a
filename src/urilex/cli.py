"""src/urilex/cli.py

Command line driver: parse URIs and print their components.
"""

import argparse
import sys
from typing import List, Optional, TextIO

from urilex.config import ParserOptions
from urilex.exceptions import ParseError
from urilex.syntax.lexer import tokenize
from urilex.syntax.parser import parse
from urilex.uri import ParsedUri, format_uri
from urilex.version import __version__

FIELDS = ("scheme", "hostname", "port", "path", "query", "fragment")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the urilex command."""
    ap = argparse.ArgumentParser(
        prog="urilex", description="Parse scheme://host[:port][/path] URIs."
    )
    ap.add_argument("uris", nargs="+", metavar="URI", help="URI to parse")
    mode = ap.add_mutually_exclusive_group()
    mode.add_argument(
        "-t", "--tokens", action="store_true", help="print the token sequence"
    )
    mode.add_argument(
        "-f", "--format", action="store_true", help="print the canonical form"
    )
    ap.add_argument(
        "--lenient-port",
        action="store_true",
        help="drop invalid ports instead of failing",
    )
    ap.add_argument("--version", action="version", version=__version__)
    return ap


def print_fields(uri: ParsedUri, out: TextIO) -> None:
    """Print each URI component as a `name: value` line."""
    for name in FIELDS:
        value = getattr(uri, name)
        print(f"{name}: {'' if value is None else value}", file=out)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command and return the exit status."""
    args = build_parser().parse_args(argv)
    options = ParserOptions.lenient() if args.lenient_port else ParserOptions()

    status = 0
    for index, text in enumerate(args.uris):
        if index and not args.format:
            print(file=sys.stdout)

        if args.tokens:
            for token in tokenize(text):
                print(repr(token), file=sys.stdout)
            continue

        try:
            uri = parse(text, options)
        except ParseError as exc:
            print(f"{text}: {exc}", file=sys.stderr)
            status = 1
            continue

        if args.format:
            print(format_uri(uri), file=sys.stdout)
        else:
            print_fields(uri, sys.stdout)

    return status


if __name__ == "__main__":
    sys.exit(main())
