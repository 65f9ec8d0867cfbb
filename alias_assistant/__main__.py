"""Entry point for the Alias Assistant CLI."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from .constants import VERSION
from .errors import AliasAssistantError
from .log import logger


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="alias-assistant",
        description="Manage shell aliases and back them up to a GitHub Gist",
    )
    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version=f"alias-assistant {VERSION}",
    )
    parser.add_argument(
        "--home",
        type=Path,
        default=None,
        help="Use DIR instead of the home directory (for ~/.alias-assistant)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug output to stderr",
    )
    sub = parser.add_subparsers(dest="command", metavar="COMMAND")

    p = sub.add_parser("list", help="List aliases")
    p.add_argument("--json", action="store_true", help="Print as JSON")

    p = sub.add_parser("add", help="Add an alias")
    p.add_argument("name")
    p.add_argument("alias_command", metavar="command")

    p = sub.add_parser("rm", help="Delete an alias")
    p.add_argument("name")

    p = sub.add_parser("export", help="Print the alias file")
    p.add_argument("-o", "--output", type=Path, help="Write to FILE instead")

    p = sub.add_parser("import", help="Merge aliases from a file ('-' for stdin)")
    p.add_argument("source")

    p = sub.add_parser("token", help="Show or set the GitHub token")
    p.add_argument("value", nargs="?")

    p = sub.add_parser("gist-id", help="Show or set the Gist id")
    p.add_argument("value", nargs="?")

    sub.add_parser("push", help="Upload the alias file to the Gist")

    p = sub.add_parser("pull", help="Download the Gist and merge it locally")
    p.add_argument(
        "--no-merge",
        action="store_true",
        help="Print the remote content instead of merging it",
    )

    p = sub.add_parser("setup-shell", help="Source the alias file from your rc file")
    p.add_argument(
        "--shell",
        choices=["bash", "zsh"],
        help="Use this shell instead of $SHELL (remembered in preferences)",
    )

    p = sub.add_parser("copy", help="Copy an alias name to the clipboard")
    p.add_argument("name")

    p = sub.add_parser("open", help="Copy an alias name and open a terminal")
    p.add_argument("name")

    return parser


def _mask(token: str) -> str:
    if len(token) <= 8:
        return "*" * len(token)
    return token[:4] + "*" * (len(token) - 8) + token[-4:]


def _run(args: argparse.Namespace) -> int:
    from .app import AliasAssistant
    from .platform import AppPaths

    app = AliasAssistant(AppPaths.from_home(args.home))
    cmd = args.command

    if cmd in (None, "list"):
        aliases = app.get_aliases()
        if getattr(args, "json", False):
            print(json.dumps([a.to_dict() for a in aliases], indent=2))
        elif not aliases:
            print("No aliases yet. Add one with: alias-assistant add NAME COMMAND")
        else:
            width = max(len(a.name) for a in aliases)
            for a in aliases:
                print(f"{a.name:<{width}}  {a.command}")
        return 0

    if cmd == "add":
        app.add_alias(args.name, args.alias_command)
        print(f"Added alias {args.name}")
    elif cmd == "rm":
        app.delete_alias(args.name)
        print(f"Deleted alias {args.name}")
    elif cmd == "export":
        content = app.export_aliases()
        if args.output:
            try:
                args.output.write_text(content, encoding="utf-8")
            except OSError as exc:
                print(f"error: failed to write {args.output}: {exc}", file=sys.stderr)
                return 1
            print(f"Exported to {args.output}")
        else:
            sys.stdout.write(content)
    elif cmd == "import":
        if args.source == "-":
            app.import_aliases_from_content(sys.stdin.read())
        else:
            app.import_aliases_from_file(Path(args.source))
        print(f"Imported; {len(app.get_aliases())} alias(es) now defined")
    elif cmd == "token":
        if args.value is not None:
            app.set_gist_token(args.value)
            print("Token saved")
        else:
            token = app.get_gist_token()
            print(_mask(token) if token else "(not set)")
    elif cmd == "gist-id":
        if args.value is not None:
            app.set_gist_id(args.value)
            print("Gist id saved")
        else:
            print(app.get_gist_id() or "(not set)")
    elif cmd == "push":
        print(asyncio.run(app.sync_push()))
    elif cmd == "pull":
        if args.no_merge:
            sys.stdout.write(asyncio.run(app.sync_pull()))
        else:
            count = asyncio.run(app.sync_pull_and_merge())
            print(f"Merged from Gist; {count} alias(es) now defined")
    elif cmd == "setup-shell":
        if args.shell:
            from .preferences import save_shell_override

            save_shell_override(args.shell, app.paths.preferences_file)
        changed = app.ensure_sourcing_is_setup(args.shell)
        if changed:
            print("Sourcing added; open a new shell to pick up your aliases")
        else:
            print("Sourcing already set up")
    elif cmd == "copy":
        if app.copy_alias_name(args.name):
            print(f"Copied {args.name}")
        else:
            print(f"No alias named {args.name}")
    elif cmd == "open":
        app.open_terminal(args.name)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the Alias Assistant CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return _run(args)
    except AliasAssistantError as exc:
        logger.debug("%s failed (%s)", args.command, exc.kind, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
