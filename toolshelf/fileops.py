"""Reading, writing and find-and-replace on text files."""

from __future__ import annotations

import os
import re
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]

# A replacement reference: "$$", "${name}" or "$name".
_REFERENCE = re.compile(r"\$(?:(\$)|\{([^}]+)\}|([A-Za-z0-9_]+))")


def read_file_to_string(file_path: PathLike) -> str:
    """Return the whole content of a UTF-8 text file, byte for byte.

    Raises OSError when the file cannot be opened or read, and
    UnicodeDecodeError when it is not valid UTF-8.
    """
    with open(file_path, "r", encoding="utf-8", newline="") as handle:
        return handle.read()


def write_string_to_file(file_path: PathLike, content: str) -> None:
    """Create or truncate a file and write the content to it as UTF-8."""
    with open(file_path, "w", encoding="utf-8", newline="") as handle:
        handle.write(content)


def replace_literal(content: str, pattern: str, replacement: str) -> str:
    """Replace every occurrence of a plain-text pattern."""
    return content.replace(pattern, replacement)


def _group_value(match: re.Match[str], name: str) -> str:
    if name.isascii() and name.isdigit():
        index = int(name)
        if index > match.re.groups:
            return ""
        value = match.group(index)
    else:
        if name not in match.re.groupindex:
            return ""
        value = match.group(name)
    return value or ""


def _expand(template: str, match: re.Match[str]) -> str:
    """Expand "$n", "${name}" and "$$" references in a replacement."""

    def substitute(ref: re.Match[str]) -> str:
        dollar, braced, bare = ref.groups()
        if dollar:
            return "$"
        return _group_value(match, braced if braced is not None else bare)

    return _REFERENCE.sub(substitute, template)


def find_and_replace(
    content: str, pattern: str, replacement: str, ignore_case: bool = False
) -> str:
    """Replace every match of a regular expression.

    The replacement may refer to groups as "$1", "$name" or "${name}";
    "$$" stands for a literal dollar sign and references to groups that
    do not exist or did not take part in the match expand to nothing.
    An empty match right where the previous match ended is skipped.
    Raises re.error when the pattern is not a valid expression.
    """
    regex = re.compile(pattern, re.IGNORECASE if ignore_case else 0)
    pieces: list[str] = []
    position = 0
    last_end: int | None = None
    for match in regex.finditer(content):
        start, end = match.span()
        if start == end and end == last_end:
            continue
        pieces.append(content[position:start])
        pieces.append(_expand(replacement, match))
        position = end
        last_end = end
    pieces.append(content[position:])
    return "".join(pieces)