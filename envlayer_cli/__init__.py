"""CLI dispatcher: lazy-loads command modules on demand."""
from __future__ import annotations


def dispatch_command(args):
    """Route args.cmd to the appropriate command module, importing only on use."""
    cmd = getattr(args, "cmd", None)
    json_output = getattr(args, "json", False)

    if cmd == "load":
        from envlayer_cli.load_cmd import cmd_load
        cmd_load(args.path, strict=not args.no_strict, json_output=json_output)

    elif cmd == "check":
        from envlayer_cli.load_cmd import cmd_check
        cmd_check(args.path, json_output=json_output)

    elif cmd == "get":
        from envlayer_cli.get_cmd import cmd_get
        cmd_get(args.name, path=args.path, default=args.default,
                json_output=json_output)

    elif cmd == "version":
        from envlayer_cli.version_cmd import cmd_version
        cmd_version(json_output=json_output)

    else:
        return False
    return True
