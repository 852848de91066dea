"""Get subcommand: resolve one variable after loading the env file."""
from __future__ import annotations

import json
import sys

from rich.markup import escape

import envlayer
from envlayer.theme import theme as _theme
from envlayer_cli.helpers import format_value, make_console, type_name

_MISSING = object()


def cmd_get(name: str, path: str, default: str | None = None,
            json_output: bool = False):
    """Handle `envlayer get NAME [--path P] [--default V]`.

    The file is loaded non-strictly, so a missing file just leaves the
    current environment to answer.
    """
    console = make_console()
    envlayer.load(path, strict=False)

    value = envlayer.get(name, _MISSING)
    found = value is not _MISSING
    if not found:
        if default is None:
            if json_output:
                print(json.dumps({"name": name, "found": False}))
            else:
                console.print(f"  {_theme.tag('error', '✗')} Not set: {escape(name)}")
            sys.exit(1)
        value = default

    if json_output:
        print(json.dumps({"name": name, "found": found, "value": value,
                          "type": type_name(value)}, default=str))
        return
    console.print(format_value(value), markup=False, highlight=False)
