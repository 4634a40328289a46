# Copyright 2026 structql Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the structql command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from structql.definitions import DefinitionsError, load_definitions
from structql.errors import SchemaGenerationError
from structql.generator import SchemaGenerator
from structql.views import render_sdl

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the structql CLI."""
    parser = argparse.ArgumentParser(
        prog="structql",
        description="structql - GraphQL schema types from runtime type descriptors",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every registered and reused type to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # print subcommand
    print_parser = subparsers.add_parser(
        "print",
        help="Print the GraphQL schema types for a definitions file",
        description="Generate GraphQL types starting from a root type and print them as SDL.",
    )
    print_parser.add_argument(
        "definitions",
        help="YAML file declaring scalars and types",
    )
    print_parser.add_argument(
        "root",
        help="Name of the declared type to generate the schema from",
    )

    # demo subcommand
    subparsers.add_parser(
        "demo",
        help="Print the schema of the built-in demonstration types",
        description="Generate and print an interface 'Foo' referencing an object 'Bar'.",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "print":
        return _cmd_print(args)
    if args.command == "demo":
        return _cmd_demo(args)
    return 0


def _cmd_print(args: argparse.Namespace) -> int:
    """Handle the print subcommand."""
    path = Path(args.definitions)

    try:
        definitions = load_definitions(path)
    except DefinitionsError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.root not in definitions.types:
        print(f"Error: type '{args.root}' is not declared in '{path}'.", file=sys.stderr)
        return 1

    generator = SchemaGenerator(definitions.generators())
    try:
        types = generator.generate(definitions.types[args.root])
    except SchemaGenerationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(render_sdl(types))
    return 0


def _cmd_demo(args: argparse.Namespace) -> int:
    """Handle the demo subcommand."""
    from structql.demo import run_demo

    print(run_demo())
    return 0
