"""Load and check subcommands."""
from __future__ import annotations

import json
import os
import sys

from rich.markup import escape
from rich.table import Table
from rich.text import Text

import envlayer
from envlayer import Accessor, ConfigError, EnvironmentStore, Loader
from envlayer.theme import theme as _theme
from envlayer_cli.helpers import format_value, make_console, type_name


def _fail(console, err: ConfigError, json_output: bool):
    if json_output:
        print(json.dumps({"ok": False, "error": err.kind, "message": str(err),
                          "path": err.path}))
    else:
        console.print(f"  {_theme.tag('error', '✗')} {escape(str(err))}", highlight=False)
    sys.exit(1)


def _values_table(rows: list[tuple[str, object, str]]) -> Table:
    table = Table(show_header=True, header_style=_theme.heading,
                  box=None, padding=(0, 2))
    table.add_column("Key", style=_theme.key)
    table.add_column("Value", style=_theme.value)
    table.add_column("Type", style=_theme.muted)
    table.add_column("", style=_theme.muted)
    for key, value, note in rows:
        table.add_row(Text(key), Text(format_value(value)), type_name(value), note)
    return table


def cmd_load(path: str, strict: bool = True, json_output: bool = False):
    """Handle `envlayer load [PATH]`: merge the file and show what was set."""
    console = make_console()
    try:
        applied = envlayer.load(path, strict=strict)
    except ConfigError as e:
        _fail(console, e, json_output)
        return

    values = {key: envlayer.get(key) for key in applied}
    if json_output:
        print(json.dumps({"ok": True, "loaded": values}, indent=2, default=str))
        return

    if not values:
        console.print(f"  {_theme.tag('warning', '!')} Nothing new to load from {escape(path)}",
                      highlight=False)
        return
    console.print(f"\n  {_theme.tag('success', '✓')} Loaded {len(values)} "
                  f"key(s) from {escape(path)}\n", highlight=False)
    console.print(_values_table([(k, v, "") for k, v in values.items()]))
    console.print()


def cmd_check(path: str, json_output: bool = False):
    """Handle `envlayer check [PATH]`: parse and preview without merging.

    Values are resolved against a copy of the current environment, so keys
    already set there show up as kept instead of loaded.
    """
    console = make_console()
    try:
        resolved = envlayer.resolve(path)
        assoc = envlayer.parse_file(resolved)
    except ConfigError as e:
        _fail(console, e, json_output)
        return

    store = EnvironmentStore(environ=dict(os.environ))
    applied = Loader(store).merge(assoc)
    accessor = Accessor(store)

    entries = []
    for key in assoc:
        entries.append({
            "key": key,
            "raw": assoc[key],
            "value": accessor.get(key),
            "kept_existing": key not in applied,
        })

    if json_output:
        print(json.dumps({"ok": True, "path": resolved, "entries": entries},
                         indent=2, default=str))
        return

    console.print(f"\n  {_theme.tag('success', '✓')} {escape(resolved)}: "
                  f"{len(entries)} entr{'y' if len(entries) == 1 else 'ies'}\n",
                  highlight=False)
    if entries:
        rows = [(e["key"], e["value"], "kept existing" if e["kept_existing"] else "")
                for e in entries]
        console.print(_values_table(rows))
        console.print()
