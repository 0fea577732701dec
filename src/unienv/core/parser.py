"""Line-oriented parser for ``.env`` style configuration files.

Format rules:
- Lines whose trimmed text starts with ``#`` are comments.
- `` #`` (space, hash) starts a trailing comment.
- ``KEY=VALUE`` splits on the first ``=``; the key is trimmed.
- One leading and one trailing quote (``'`` or ``"``) are stripped from each
  value fragment.
- A line that is not ``KEY=VALUE`` continues the previous value, joined with
  a newline, until the next ``KEY=VALUE`` line.
- The two-character sequence ``\\n`` in a value becomes a real newline.

Values are returned raw: ``${...}`` references are left for the interpolator.
"""

from __future__ import annotations

import re
from typing import Dict, Iterator, List, Optional, Tuple

COMMENT_PREFIX = "#"
TRAILING_COMMENT = " #"

_KEY_VALUE = re.compile(r"^([^=]+)=(.*)$")
_EDGE_QUOTES = re.compile(r"^['\"]|['\"]$")


def strip_quotes(fragment: str) -> str:
    """Drop one leading and one trailing quote character, if present."""

    return _EDGE_QUOTES.sub("", fragment)


def _clean_line(line: str) -> Optional[str]:
    """Return the line without comments, or None for a full-line comment."""

    trimmed = line.strip()
    if trimmed.startswith(COMMENT_PREFIX):
        return None
    comment_index = trimmed.find(TRAILING_COMMENT)
    if comment_index != -1:
        trimmed = trimmed[:comment_index].strip()
    return trimmed


def iter_key_values(contents: str) -> Iterator[Tuple[str, str]]:
    """Yield ``(key, raw_value)`` pairs in file order, duplicates included."""

    current_key: Optional[str] = None
    fragments: List[str] = []

    for line in contents.split("\n"):
        cleaned = _clean_line(line)
        if cleaned is None:
            continue
        match = _KEY_VALUE.match(cleaned)
        if match:
            if current_key is not None:
                yield current_key, "\n".join(fragments).strip()
            current_key = match.group(1).strip()
            fragments = [strip_quotes(match.group(2))]
        elif current_key is not None:
            fragments.append(strip_quotes(cleaned))

    if current_key is not None:
        yield current_key, "\n".join(fragments).strip()


def unescape_newlines(value: str) -> str:
    return value.replace("\\n", "\n")


def parse_config(contents: str) -> Dict[str, str]:
    """Parse file contents into a key to raw value mapping.

    Later definitions of a key overwrite earlier ones.
    """

    table: Dict[str, str] = {}
    for key, value in iter_key_values(contents):
        table[key] = value
    return {key: unescape_newlines(value) for key, value in table.items()}
