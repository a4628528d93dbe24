#!/usr/bin/env python3
"""Validate, parse and build STYLE:PIECE identifiers from the command line.

    gan validate CHESS:K shogi:+p CHESS:k
    gan parse shogi:+p
    gan dump --name chess --type k --side second
"""
from __future__ import annotations

import argparse
import json
import logging
import sys

from gan_core.config import GrammarConfig
from gan_core.enums import Side, State
from gan_core.errors import NotationError
from gan_core.grammar import Grammar
from gan_core.identifier import CompositeIdentifier

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gan", description="STYLE:PIECE identifier notation")
    parser.add_argument(
        "--allow-terminal",
        action="store_true",
        help="Accept the trailing ' terminal marker on pieces",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    validate = sub.add_parser("validate", help="Check one or more identifiers")
    validate.add_argument("identifiers", nargs="+")

    parse = sub.add_parser("parse", help="Print the fields of an identifier as JSON")
    parse.add_argument("identifier")

    dump = sub.add_parser("dump", help="Build an identifier from its fields")
    dump.add_argument("--name", required=True, help="Style name, e.g. chess")
    dump.add_argument("--type", required=True, help="Piece letter, e.g. K")
    dump.add_argument("--side", required=True, choices=[s.name.lower() for s in Side])
    dump.add_argument("--state", default="normal", choices=[s.name.lower() for s in State])
    dump.add_argument("--terminal", action="store_true")
    return parser


def cmd_validate(grammar: Grammar, identifiers: list[str]) -> int:
    status = 0
    for text in identifiers:
        if grammar.is_valid(text):
            print(f"{text}\tvalid")
        else:
            print(f"{text}\tinvalid")
            status = 1
    return status


def cmd_parse(grammar: Grammar, text: str) -> int:
    identifier = CompositeIdentifier.from_str(text, grammar)
    logger.debug("Parsed %r", identifier)
    print(json.dumps(identifier.to_dict()))
    return 0


def cmd_dump(args: argparse.Namespace) -> int:
    identifier = CompositeIdentifier.from_params(
        args.name,
        args.type,
        Side[args.side.upper()],
        State[args.state.upper()],
        terminal=args.terminal,
    )
    print(identifier)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    grammar = Grammar(GrammarConfig(allow_terminal_marker=args.allow_terminal))
    logger.debug("Using %r", grammar)

    try:
        if args.command == "validate":
            return cmd_validate(grammar, args.identifiers)
        if args.command == "parse":
            return cmd_parse(grammar, args.identifier)
        return cmd_dump(args)
    except NotationError as e:
        logger.debug("Rejected: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
