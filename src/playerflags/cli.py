"""Developer tool for inspecting and editing flags in a saved player snapshot."""
from __future__ import annotations
import argparse
import json
from typing import Any, List, Optional
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from playerflags.core.errors import PlayerFlagsError
from playerflags.core.logging import logger
from playerflags.core.scheduler import Scheduler
from playerflags.flags.registry import FlagRegistry
from playerflags.host.player import Player
from playerflags.system.save import SnapshotStore
from playerflags.system.settings import Settings

def parse_value(text: str) -> Any:
    """JSON when it parses (``true``, ``3``, ``{"tier": 2}``), otherwise the literal text."""
    try:
        return json.loads(text)
    except ValueError:
        return text

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="playerflags", description="Inspect and edit player flags")
    parser.add_argument("--save", default="player.json", help="Player snapshot file")
    parser.add_argument("--prefix", default=None, help="Flag attribute prefix (overrides settings)")
    parser.add_argument("--player", default="PLAYER", help="Player name for a new snapshot")
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("show", help="List every flag")
    p_set = sub.add_parser("set", help="Set a flag value")
    p_set.add_argument("name")
    p_set.add_argument("value", nargs="?", default="true")
    p_rm = sub.add_parser("remove", help="Remove one flag")
    p_rm.add_argument("name")
    sub.add_parser("clear", help="Remove every flag")
    return parser

def render_flags(console: Console, registry: FlagRegistry, player: Player):
    flags = registry.get_flags(player)
    if not flags:
        console.print(f"No flags on {escape(player.name)}.")
        return
    table = Table(title=f"Flags on {escape(player.name)}", show_header=True)
    table.add_column("Flag", style="bright_white")
    table.add_column("Value", style="green")
    table.add_column("Stored", style="dim")
    for name in sorted(flags):
        raw = player.get_attribute(registry.key_for(name))
        table.add_row(escape(name), escape(repr(flags[name].get_value())), escape(repr(raw)))
    console.print(table)

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings.load()
    settings.apply()
    registry = FlagRegistry(Scheduler(), args.prefix or settings.data.prefix)
    store = SnapshotStore(args.save)
    console = Console()
    try:
        player = store.read() or Player(args.player)
        if args.command == "show":
            render_flags(console, registry, player)
            return 0
        if args.command == "set":
            value = parse_value(args.value)
            registry.flag(player, args.name, value).set_value(value)
            console.print(f"Set {escape(args.name)} = {escape(repr(registry.get_flag_value(player, args.name)))}")
        elif args.command == "remove":
            handle = registry.get_flags(player).get(args.name)
            if handle is None:
                console.print(f"No flag named {escape(args.name)}.")
                return 1
            handle.remove()
            console.print(f"Removed {escape(args.name)}")
        elif args.command == "clear":
            count = registry.clear_flags(player)
            console.print(f"Cleared {count} flag(s)")
        store.write(player)
    except PlayerFlagsError as e:
        logger.error("CommandFailed", command=args.command, error=str(e))
        console.print(f"[red]{escape(str(e))}[/red]")
        return 1
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
