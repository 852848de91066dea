"""Version subcommand: extended version info beyond -V flag."""
from __future__ import annotations

import json
import os
import sys
from importlib.metadata import PackageNotFoundError, version as dist_version

from rich.table import Table

from envlayer.theme import theme as _theme
from envlayer_cli.helpers import get_version, make_console

DEPENDENCIES = ("PyYAML", "rich")


def cmd_version(json_output: bool = False):
    """Show version, Python version, and dependency versions."""
    version = get_version()
    project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    py_version = f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}"

    deps: dict[str, str] = {}
    for pkg in DEPENDENCIES:
        try:
            deps[pkg] = dist_version(pkg)
        except PackageNotFoundError:
            deps[pkg] = "not installed"

    if json_output:
        info = {
            "version": version,
            "python": py_version,
            "dependencies": deps,
            "install_path": project_root,
        }
        print(json.dumps(info, indent=2))
        return

    console = make_console()
    console.print(f"\n  {_theme.tag('heading', 'envlayer')}  v{version}")
    console.print(f"  {_theme.tag('muted', 'Python:')}  {py_version}")
    console.print(f"  {_theme.tag('muted', 'Path:')}    {project_root}", highlight=False)

    table = Table(show_header=True, header_style=_theme.heading,
                  box=None, padding=(0, 2))
    table.add_column("Package", style=_theme.muted)
    table.add_column("Version")
    for pkg, ver in deps.items():
        style = "success" if ver != "not installed" else "error"
        table.add_row(pkg, _theme.tag(style, ver))
    console.print()
    console.print(table)
    console.print()
