# Copyright 2026 cmdtree Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the cmdtree command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from cmdtree.compiler.errors import FormatError, ReaderIOError
from cmdtree.compiler.reader import CommandFileReader
from cmdtree.compiler.writer import dump
from cmdtree.config.reader_config import (
    CONFIG_FILE_NAME,
    ReaderConfig,
    ReaderConfigError,
    build_reader,
    load_reader_config,
)

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the cmdtree CLI."""
    parser = argparse.ArgumentParser(
        prog="cmdtree",
        description="cmdtree - command file compiler",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Reader configuration file (default: {CONFIG_FILE_NAME} in the current directory, if present)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Check command files for errors",
        description="Parse command files and report the first error in each.",
    )
    check_parser.add_argument("files", nargs="+", type=Path, help="Command files to check")

    # show subcommand
    show_parser = subparsers.add_parser(
        "show",
        help="Print the command tree of a command file",
        description="Parse a command file and print its normalized form.",
    )
    show_parser.add_argument("file", type=Path, help="Command file to show")
    show_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the tree as JSON instead of command file text",
    )

    # types subcommand
    subparsers.add_parser(
        "types",
        help="List the available argument types",
        description="List the argument type names known to the configured reader.",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    try:
        reader = _load_reader(args.config)
    except ReaderConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.command == "check":
        return _cmd_check(args, reader)
    if args.command == "show":
        return _cmd_show(args, reader)
    if args.command == "types":
        return _cmd_types(reader)
    return 0


def _load_reader(config_path: Path | None) -> CommandFileReader:
    """Build the reader from an explicit or discovered configuration file."""
    if config_path is None:
        discovered = Path.cwd() / CONFIG_FILE_NAME
        config = load_reader_config(discovered) if discovered.exists() else ReaderConfig()
    else:
        config = load_reader_config(config_path)
    return build_reader(config)


def _cmd_check(args: argparse.Namespace, reader: CommandFileReader) -> int:
    """Handle the check subcommand."""
    print(f"Checking {len(args.files)} command file(s)...")
    has_errors = False
    for path in args.files:
        try:
            reader.parse_path(path)
        except (FormatError, ReaderIOError) as exc:
            print(f"Error: {path}: {exc}", file=sys.stderr)
            has_errors = True

    if has_errors:
        return 1

    print("No issues found.")
    return 0


def _cmd_show(args: argparse.Namespace, reader: CommandFileReader) -> int:
    """Handle the show subcommand."""
    try:
        root = reader.parse_path(args.file)
    except (FormatError, ReaderIOError) as exc:
        print(f"Error: {args.file}: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(root.model_dump_json(indent=2))
    else:
        print(dump(root), end="")
    return 0


def _cmd_types(reader: CommandFileReader) -> int:
    """Handle the types subcommand."""
    for name in sorted(reader.registry.names()):
        print(name)
    return 0
