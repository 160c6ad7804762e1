"""
Command-line interface for listview.

Renders lists described in YAML files, searches them, and manages
display configuration files.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

import yaml
from rich.console import Console
from rich.table import Table
from rich.text import Text

from listview.config import ListConfig
from listview.errors import ListViewError
from listview.logging import get_logger, setup_logging
from listview.tui.screen import Screen
from listview.widget import ListView

console = Console()
logger = get_logger("cli")


def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Selectable list widget tools",
        prog="listview",
    )

    # Global options
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output (debug logging)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Render command
    render_parser = subparsers.add_parser("render", help="Draw a list file into a frame")
    render_parser.add_argument("file", help="YAML list file")
    render_parser.add_argument("-W", "--width", type=int, default=40, help="Frame width")
    render_parser.add_argument("-H", "--height", type=int, default=10, help="Frame height")
    render_parser.add_argument("-c", "--config", help="YAML display configuration")
    render_parser.add_argument(
        "--current",
        type=int,
        default=None,
        help="Index of the current row (negative counts from the end)",
    )
    render_parser.add_argument(
        "--plain",
        action="store_true",
        help="Print without colours",
    )

    # Find command
    find_parser = subparsers.add_parser("find", help="Search the rows of a list file")
    find_parser.add_argument("file", help="YAML list file")
    find_parser.add_argument("main", help="Text to find in the main text")
    find_parser.add_argument(
        "-s",
        "--secondary",
        default="",
        help="Text to find in the secondary text",
    )
    find_parser.add_argument(
        "--both",
        action="store_true",
        help="Require both searches to match",
    )
    find_parser.add_argument(
        "-i",
        "--ignore-case",
        action="store_true",
        help="Case-insensitive search",
    )

    # Config command with subcommands
    config_parser = subparsers.add_parser("config", help="Configuration management")
    config_subparsers = config_parser.add_subparsers(dest="config_command", help="Config commands")

    # config show
    config_show_parser = config_subparsers.add_parser("show", help="Show a configuration")
    config_show_parser.add_argument("-c", "--config", help="YAML configuration to load")

    # config init
    config_init_parser = config_subparsers.add_parser("init", help="Write a default config file")
    config_init_parser.add_argument(
        "-o",
        "--output",
        default="listview.yaml",
        help="Output file path",
    )

    args = parser.parse_args()

    # Setup logging based on verbosity
    if getattr(args, "verbose", False):
        setup_logging("DEBUG")
    else:
        setup_logging("WARNING")

    try:
        if args.command == "render":
            cmd_render(args)
        elif args.command == "find":
            cmd_find(args)
        elif args.command == "config":
            cmd_config(args)
        else:
            parser.print_help()
    except (ListViewError, OSError, yaml.YAMLError) as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)


def _load_config(path: str | None) -> ListConfig:
    if path is None:
        return ListConfig()
    return ListConfig.from_yaml(Path(path))


def _load_list(path: str | Path, config: ListConfig | None = None) -> ListView:
    """
    Build a list from a YAML file.

    The file is either a sequence of rows or a mapping with ``items`` and
    optional ``config``, ``current`` and ``border`` keys.  A row is a
    string (main text only) or a mapping with ``main``, ``secondary``,
    ``shortcut`` and ``enabled``.  An empty mapping is a divider.
    """
    with open(path) as f:
        data: Any = yaml.safe_load(f)

    if isinstance(data, list):
        data = {"items": data}
    elif not isinstance(data, dict):
        raise ListViewError(f"{path}: expected a list of rows or a mapping")

    if config is None:
        config = ListConfig.from_dict(data.get("config") or {})
    list_view = ListView(config=config)
    list_view.set_border(bool(data.get("border", True)))

    for row in data.get("items") or []:
        if isinstance(row, str):
            list_view.add_item(row)
        elif isinstance(row, dict):
            list_view.add_item(
                str(row.get("main", "")),
                str(row.get("secondary", "")),
                str(row.get("shortcut", "")),
                enabled=bool(row.get("enabled", True)),
            )
        else:
            raise ListViewError(f"{path}: unsupported row {row!r}")

    if "current" in data:
        list_view.set_current_item(int(data["current"]))
    logger.debug("Loaded %d rows from %s", len(list_view), path)
    return list_view


def cmd_render(args: argparse.Namespace) -> None:
    """Draw a list file into a frame and print it."""
    config = _load_config(args.config) if args.config else None
    list_view = _load_list(args.file, config)
    if args.current is not None:
        list_view.set_current_item(args.current)

    screen = Screen(args.width, args.height)
    list_view.set_rect(0, 0, args.width, args.height)
    list_view.focused = True
    list_view.draw(screen)

    if args.plain:
        for line in screen.plain_lines():
            console.print(line, markup=False, highlight=False, soft_wrap=True)
    else:
        for line in screen.to_lines():
            console.print(Text.from_ansi(line), soft_wrap=True)


def cmd_find(args: argparse.Namespace) -> None:
    """Print the rows of a list file matching a search."""
    list_view = _load_list(args.file)
    indices = list_view.find_items(
        args.main,
        args.secondary,
        must_contain_both=args.both,
        ignore_case=args.ignore_case,
    )

    table = Table(title="Matching Rows")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Main", style="cyan")
    table.add_column("Secondary")
    table.add_column("Shortcut", style="yellow")

    for index in indices:
        item = list_view.get_item(index)
        table.add_row(str(index), item.main_text, item.secondary_text, item.shortcut)

    console.print(table)
    console.print(f"\n[dim]Total: {len(indices)} of {len(list_view)} rows[/dim]")


def cmd_config(args: argparse.Namespace) -> None:
    """Configuration management commands."""
    if args.config_command == "show":
        _config_show(args.config)
    elif args.config_command == "init":
        _config_init(args.output)
    else:
        console.print("[yellow]Usage: listview config <show|init>[/yellow]")


def _config_show(path: str | None) -> None:
    """Show a configuration, the defaults when no file is given."""
    config = _load_config(path)
    source = path or "defaults"
    console.print(f"[bold]Configuration ({source}):[/bold]\n")
    console.print(
        yaml.safe_dump(config.to_dict(), default_flow_style=False, sort_keys=False),
        markup=False,
        highlight=False,
    )


def _config_init(output: str) -> None:
    """Write a default configuration file."""
    path = Path(output)
    if path.exists():
        console.print(f"[red]File already exists: {path}[/red]")
        sys.exit(1)

    data = ListConfig().to_dict()
    with open(path, "w") as f:
        yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)

    console.print(f"[green]Created config file: {path}[/green]")


if __name__ == "__main__":
    main()
