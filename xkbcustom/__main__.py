# SPDX-License-Identifier: MIT

"""
Generate the custom XKB symbols file.
"""

from __future__ import annotations

import argparse
import difflib
import logging
import sys
from pathlib import Path

from .keymap import DEFAULT_OUTPUT, export_layout, render_keymap, write_keymap
from .layout import entries

logger = logging.getLogger("xkbcustom")


def write_command(args: argparse.Namespace) -> int:
    """Handles the default command: write the keymap file"""
    try:
        write_keymap(args.output, entries())
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def check_command(args: argparse.Namespace) -> int:
    """
    Handles the 'check' subcommand: compare an existing keymap file with a
    freshly generated one.

    Returns:
        int: The exit code (0 if up to date, 1 otherwise).
    """
    path: Path = args.file if args.file is not None else args.output
    try:
        expected = path.read_text(encoding="utf-8")
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    got = render_keymap(entries())
    if got == expected:
        logger.info("Keymap up to date: {}".format(path))
        return 0

    print(f"Check FAILED: '{path}' is not up to date.", file=sys.stderr)
    diff_lines = difflib.unified_diff(
        expected.splitlines(keepends=True),
        got.splitlines(keepends=True),
        fromfile=str(path),
        tofile="(generated)",
    )
    for line in diff_lines:
        print(line.rstrip("\n"), file=sys.stderr)
    return 1


def export_command(args: argparse.Namespace) -> int:
    """Handles the 'export' subcommand: print the resolved layout as YAML"""
    sys.stdout.write(export_layout(entries()))
    return 0


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xkbcustom", description="Generate the custom XKB symbols file"
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=DEFAULT_OUTPUT,
        help="Path of the generated file (default: %(default)s)",
    )
    parser.add_argument("--debug", action="store_true", help="Activate debug mode")
    parser.set_defaults(func=write_command)

    subparsers = parser.add_subparsers(dest="command", help="Available subcommands")

    parser_write = subparsers.add_parser("write", help="Write the keymap file.")
    parser_write.set_defaults(func=write_command)

    parser_check = subparsers.add_parser(
        "check", help="Compare an existing keymap file with the generated one."
    )
    parser_check.add_argument(
        "file",
        type=Path,
        nargs="?",
        default=None,
        help="File to check (default: the output path)",
    )
    parser_check.set_defaults(func=check_command)

    parser_export = subparsers.add_parser(
        "export", help="Print the resolved layout as YAML."
    )
    parser_export.set_defaults(func=export_command)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = make_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(levelname)s:%(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
