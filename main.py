#!/usr/bin/env python3
"""
main.py: envlayer CLI
Usage:
  envlayer load [PATH]              # merge .env / .env.yaml into the environment
  envlayer load PATH --no-strict    # ignore missing or invalid files
  envlayer get NAME                 # resolve one variable (typed, interpolated)
  envlayer get NAME --default X     # fallback when NAME is unset
  envlayer check [PATH]             # parse and preview without loading
  envlayer version                  # version and dependency info

PATH defaults to $ENVLAYER_PATH, or the current directory.
Every command accepts --json for machine-readable output.

Logging:
  ENVLAYER_LOG_LEVEL   DEBUG/INFO/WARNING/ERROR (default WARNING)
  ENVLAYER_LOG_DIR     also write envlayer.log into this directory
  ENVLAYER_LOG_JSON    JSON lines in the log file when set
"""

import argparse
import os

from envlayer.logging_config import set_correlation_id, setup_logging
from envlayer_cli import dispatch_command
from envlayer_cli.helpers import default_path, get_version


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="envlayer")
    parser.add_argument("-V", "--version", action="version",
                        version=f"envlayer {get_version()}")
    sub = parser.add_subparsers(dest="cmd")

    p_load = sub.add_parser("load", help="Load an env file into the environment")
    p_load.add_argument("path", nargs="?", default=default_path(),
                        help="File or directory (default: $ENVLAYER_PATH or .)")
    p_load.add_argument("--no-strict", action="store_true",
                        help="Return quietly if the file is missing or invalid")
    p_load.add_argument("--json", action="store_true", help="JSON output")

    p_get = sub.add_parser("get", help="Resolve one variable")
    p_get.add_argument("name", help="Variable name")
    p_get.add_argument("--path", "-p", default=default_path(),
                       help="File or directory to load first (missing is ignored)")
    p_get.add_argument("--default", "-d", default=None,
                       help="Value to print when the variable is unset")
    p_get.add_argument("--json", action="store_true", help="JSON output")

    p_check = sub.add_parser("check", help="Parse an env file without loading it")
    p_check.add_argument("path", nargs="?", default=default_path(),
                         help="File or directory (default: $ENVLAYER_PATH or .)")
    p_check.add_argument("--json", action="store_true", help="JSON output")

    p_ver = sub.add_parser("version", help="Show version and dependency info")
    p_ver.add_argument("--json", action="store_true", help="JSON output")

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(
        level=os.environ.get("ENVLAYER_LOG_LEVEL", "WARNING"),
        structured=bool(os.environ.get("ENVLAYER_LOG_JSON")),
        log_dir=os.environ.get("ENVLAYER_LOG_DIR") or None,
    )
    set_correlation_id()

    if not dispatch_command(args):
        parser.print_help()


if __name__ == "__main__":
    main()
