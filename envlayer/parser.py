"""
envlayer/parser.py
Line tokenizer for `.env` files.

Format:
  KEY=VALUE           bare value, trailing `# comment` dropped, whitespace trimmed
  KEY="VALUE # x"     quoted value taken verbatim (no escape processing)
  # comment           any line not starting with [A-Za-z0-9_-] is ignored
"""

from __future__ import annotations

import re
from typing import Iterable

_KEY_START = re.compile(r"[A-Za-z0-9_-]")
_QUOTED = re.compile(r"""^(["'])(.*)\1""")


def is_comment_line(line: str) -> bool:
    """True if *line* (already stripped) does not start with a key character."""
    return not _KEY_START.match(line[:1])


def unquote(raw: str) -> str:
    """Extract the value part of a line (everything after the first `=`)."""
    raw = raw.lstrip()
    m = _QUOTED.match(raw)
    if m:
        return m.group(2)
    return raw.split("#", 1)[0].strip()


def parse_line(line: str) -> tuple[str, str] | None:
    """Parse one line into (key, value), or None for blanks and comments."""
    line = line.strip()
    if not line or is_comment_line(line):
        return None
    key, _, value = line.partition("=")
    return key.strip(), unquote(value)


def parse_lines(lines: Iterable[str]) -> dict[str, str]:
    """Build a RawAssoc from *lines*; later duplicate keys win."""
    assoc: dict[str, str] = {}
    for line in lines:
        pair = parse_line(line)
        if pair is None:
            continue
        key, value = pair
        assoc[key] = value
    return assoc


def parse_text(text: str) -> dict[str, str]:
    # only \n ends a line; \r is stripped with the rest of the line's whitespace
    return parse_lines(text.split("\n"))
