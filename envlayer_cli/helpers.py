"""Shared utilities for CLI modules."""
from __future__ import annotations

import os
from typing import Any

from rich.console import Console

from envlayer.theme import theme as _theme


def get_version() -> str:
    """Read version from pyproject.toml, fallback to installed metadata or '0.1.0'."""
    try:
        import tomllib  # Python 3.11+
    except ImportError:
        try:
            import tomli as tomllib  # type: ignore[no-redef]
        except ImportError:
            tomllib = None  # type: ignore[assignment]

    pyproject = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
                             "pyproject.toml")
    if tomllib and os.path.exists(pyproject):
        with open(pyproject, "rb") as f:
            data = tomllib.load(f)
        return data.get("project", {}).get("version", "0.1.0")

    from importlib.metadata import PackageNotFoundError, version
    try:
        return version("envlayer")
    except PackageNotFoundError:
        return "0.1.0"


def default_path() -> str:
    return os.environ.get("ENVLAYER_PATH", ".")


def make_console() -> Console:
    return Console(force_terminal=True if _theme.force_color else None,
                   no_color=_theme.no_color)


def format_value(value: Any) -> str:
    """Format a coerced value for display, keeping its type visible."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, str):
        return value if value else '""'
    return str(value)


def type_name(value: Any) -> str:
    if value is None:
        return "null"
    return type(value).__name__
