"""
envlayer/coercion.py
Type inference and `${NAME}` interpolation for raw string values.

  true / false     → bool      (case-insensitive)
  null             → None
  "" / empty       → ""
  -?[0-9]+         → int       (after interpolation)
  other numerics   → float     ("1e10", "-3.14", ".5", "+7")
  anything else    → str
"""

from __future__ import annotations

import re
from typing import Any, Callable

_INTEGER = re.compile(r"^-?[0-9]+$")
# Hex, inf/nan and digit separators are not numeric.
_NUMERIC = re.compile(r"^\s*[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?\s*$")
_PLACEHOLDER = re.compile(r"\$\{([^}]+)\}")
_NAME_STRIP = " \t\n\r\0\x0b\"'"


def is_numeric(value: str) -> bool:
    return bool(_NUMERIC.match(value))


def render(value: Any) -> str:
    """Text form of a resolved value when substituted into another value."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def interpolate(data: str, lookup: Callable[[str], Any]) -> str:
    """Replace each `${NAME}` in *data* with render(lookup(NAME)), in one pass."""
    def _sub(m: re.Match) -> str:
        return render(lookup(m.group(1).strip(_NAME_STRIP)))
    return _PLACEHOLDER.sub(_sub, data)


def convert(data: Any, lookup: Callable[[str], Any]) -> Any:
    """Coerce a raw value; non-strings pass through unchanged."""
    if not isinstance(data, str):
        return data

    low = data.lower()
    if low == "true":
        return True
    if low == "false":
        return False
    if low in ("", "empty"):
        return ""
    if low == "null":
        return None

    data = interpolate(data, lookup)
    if _INTEGER.match(data):
        return int(data)
    if is_numeric(data):
        return float(data)
    return data
