"""
Muajam CLI.

    muajam content add notes.txt
    muajam lex search كتب
    muajam --api-url http://host:8000/api lex dups
"""

import argparse
import logging

from muajam.cli import client
from muajam.cli.commands import content, lex
from muajam.config import settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="muajam", description="Annotate Arabic text and edit the lexicon")
    parser.add_argument("--api-url", default=settings.api_url, help=f"API base URL (default {settings.api_url})")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log HTTP requests")
    subparsers = parser.add_subparsers(dest="command")

    content.add_subparser(subparsers)
    lex.add_subparser(subparsers)
    return parser


def main(argv: list[str] | None = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    client.BASE_URL = args.api_url.rstrip("/")
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if not hasattr(args, "func"):
        parser.print_help()
        return
    args.func(args)


if __name__ == "__main__":
    main()
