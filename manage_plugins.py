#!/usr/bin/env python3
"""Plugin dependency CLI tool."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

# Ensure project root is in path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

# Load environment variables FIRST (before importing project modules)
load_dotenv(".env")

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from plugin_deps import constants
from plugin_deps.exceptions import DependencyFileError
from plugin_deps.plugins.bundled import base_plugins
from plugin_deps.plugins.loader import load_dependency_file, parse_plugin_list
from plugin_deps.plugins.verifier import verify_dependencies

logger = logging.getLogger(__name__)

console = Console(soft_wrap=True)


def cmd_parse(args) -> int:
    """Validate plugin strings."""
    plugins, errors = parse_plugin_list(args.plugins)

    if plugins:
        table = Table(title="Valid plugins")
        table.add_column("Name")
        table.add_column("Version")
        for p in plugins:
            table.add_row(p.name, p.version)
        console.print(table)

    for error in errors:
        console.print(f"[red]✗[/red] {escape(str(error))}", highlight=False)

    return 1 if errors else 0


def cmd_verify(args) -> int:
    """Check declared plugins for version conflicts."""
    path = Path(args.file) if args.file else constants.DEPENDENCY_FILE

    try:
        sets = load_dependency_file(path)
    except DependencyFileError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        return 2

    mappings = list(sets.values())
    if args.include_base:
        mappings.insert(0, base_plugins())

    messages = verify_dependencies(*mappings)
    if not messages:
        console.print(f"[green]✓[/green] No version conflicts in {len(mappings)} set(s).")
        return 0

    console.print(f"Found {len(messages)} conflict(s):")
    for i, message in enumerate(messages, 1):
        console.print(f"  {i}. {message}", markup=False, highlight=False)

    if args.warn_only:
        logger.warning(f"{len(messages)} plugin version conflict(s) ignored (--warn-only)")
        return 0
    return 1


def cmd_base(args) -> int:
    """List the bundled base plugins."""
    table = Table(title="Base plugins")
    table.add_column("Plugin")
    table.add_column("Requires")
    for root, plugins in base_plugins().items():
        table.add_row(str(root), ", ".join(str(p) for p in plugins))
    console.print(table)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Plugin dependency checker")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # parse
    parse_parser = subparsers.add_parser("parse", help="Validate 'name:version' plugin strings")
    parse_parser.add_argument("plugins", nargs="+", help="Plugins as name:version")

    # verify
    verify_parser = subparsers.add_parser("verify", help="Check a dependency file for version conflicts")
    verify_parser.add_argument("file", nargs="?", help="Dependency file (.json, .yaml, .yml)")
    verify_parser.add_argument(
        "--base",
        dest="include_base",
        action=argparse.BooleanOptionalAction,
        default=constants.INCLUDE_BASE_PLUGINS,
        help="Check against the bundled base plugins (default from PLUGIN_INCLUDE_BASE)",
    )
    verify_parser.add_argument(
        "--warn-only", action="store_true", help="Report conflicts without failing"
    )

    # base
    subparsers.add_parser("base", help="List bundled base plugins")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(
        level=getattr(logging, constants.LOG_LEVEL.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    commands = {
        "parse": cmd_parse,
        "verify": cmd_verify,
        "base": cmd_base,
    }

    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
