"""Command-line find and replace over one or more text files."""

from __future__ import annotations

import argparse
import re
import sys
import unicodedata
from dataclasses import dataclass
from typing import Optional, Sequence, TextIO, Union

from toolshelf.fileops import (
    find_and_replace,
    read_file_to_string,
    write_string_to_file,
)

_PROG = "Text Manipulation Utility"
_VERSION = "1.0"
_UNKNOWN = "Unknown command. Use '--help' for usage instructions."

_ESCAPES = {
    "\t": "\\t",
    "\r": "\\r",
    "\n": "\\n",
    "\\": "\\\\",
    '"': '\\"',
    "\0": "\\0",
}


@dataclass
class FindCommand:
    """Arguments of the "find" subcommand."""

    input: Optional[list[str]] = None
    pattern: Optional[str] = None


@dataclass
class ReplaceCommand:
    """Arguments of the "replace" subcommand."""

    input: Optional[list[str]] = None
    pattern: Optional[str] = None
    replace: Optional[str] = None
    ignore_case: bool = False


Command = Union[FindCommand, ReplaceCommand]


def _quoted(text: str) -> str:
    """Render a string quoted, with control characters escaped."""
    parts = []
    for char in text:
        if char in _ESCAPES:
            parts.append(_ESCAPES[char])
        elif unicodedata.category(char) == "Cc":
            parts.append(f"\\u{{{ord(char):x}}}")
        else:
            parts.append(char)
    return '"' + "".join(parts) + '"'


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=_PROG,
        description="A command-line text manipulation utility",
    )
    parser.add_argument("-V", "--version", action="version", version=f"{_PROG} {_VERSION}")
    parser.add_argument(
        "-d", "--debug", action="count", default=0, help="Turn debugging information on."
    )
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    find = commands.add_parser("find", help="Subcommand for handling find operations.")
    find.add_argument("-i", "--input", nargs="+", help="Sets the input file to process")
    find.add_argument("-p", "--pattern", help="Sets the pattern to find.")

    replace = commands.add_parser(
        "replace", help="Subcommand for handling replace operations."
    )
    replace.add_argument("-i", "--input", nargs="+", help="Sets the input file to process")
    replace.add_argument("-p", "--pattern", help="Sets the pattern to find.")
    replace.add_argument("-r", "--replace", help="Sets the replacement text.")
    replace.add_argument(
        "-c",
        "--ignore-case",
        action="store_true",
        help="Perform a case-insensitive search and replace.",
    )
    return parser


def _split_inputs(values: Optional[list[str]]) -> Optional[list[str]]:
    if values is None:
        return None
    return [piece for value in values for piece in value.split(" ")]


def parse_args(argv: Optional[Sequence[str]] = None) -> Optional[Command]:
    """Parse the command line; return the chosen command, or None if there is none.

    Input file names given as one value are split on spaces.
    """
    namespace = _build_parser().parse_args(argv)
    if namespace.command == "find":
        return FindCommand(input=_split_inputs(namespace.input), pattern=namespace.pattern)
    if namespace.command == "replace":
        return ReplaceCommand(
            input=_split_inputs(namespace.input),
            pattern=namespace.pattern,
            replace=namespace.replace,
            ignore_case=namespace.ignore_case,
        )
    return None


def _collect(
    command: Command, out: TextIO
) -> tuple[list[str], str]:
    if command.input is not None:
        files = list(command.input)
    else:
        print("Please provide a file name.", file=out)
        files = [""]
    if command.pattern is not None:
        pattern = command.pattern
        print(f"Pattern: {_quoted(pattern)}", file=out)
    else:
        print("Please provide a pattern.", file=out)
        pattern = ""
    return files, pattern


def run_find(command: FindCommand, out: Optional[TextIO] = None) -> list[str]:
    """Remove every match of the pattern from each file's content and report it.

    Returns the resulting content of each file, in order. Files are not changed.
    """
    out = sys.stdout if out is None else out
    files, pattern = _collect(command, out)
    results = []
    for path in files:
        content = find_and_replace(read_file_to_string(path), pattern, "", False)
        print(f"Found Content: {_quoted(content)}", file=out)
        results.append(content)
    return results


def run_replace(command: ReplaceCommand, out: Optional[TextIO] = None) -> list[str]:
    """Replace every match of the pattern in each file, writing the files back.

    Returns the new content of each file as read back after writing.
    """
    out = sys.stdout if out is None else out
    files, pattern = _collect(command, out)
    if command.replace is not None:
        replacement = command.replace
        print(f"Replacement text: {_quoted(replacement)}", file=out)
    else:
        print("Please provide a replacement text.", file=out)
        replacement = ""
    print(f"Ignore case: {'true' if command.ignore_case else 'false'}", file=out)

    results = []
    for path in files:
        content = read_file_to_string(path)
        print(f"File Content Before: {_quoted(content)}", file=out)
        content = find_and_replace(content, pattern, replacement, command.ignore_case)
        write_string_to_file(path, content)
        content = read_file_to_string(path)
        print(f"File Content After: {_quoted(content)}", file=out)
        results.append(content)
    return results


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the utility; return the process exit status."""
    command = parse_args(argv)
    try:
        if isinstance(command, FindCommand):
            run_find(command)
        elif isinstance(command, ReplaceCommand):
            run_replace(command)
        else:
            print(_UNKNOWN)
    except (OSError, UnicodeDecodeError, re.error) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())