"""Dingus CLI - directory-scoped environment loader.

Usage:
    dingus session            # Start $SHELL with the closest .dingus loaded
    dingus session -c work    # ... or ~/.config/dingus/work.yaml
    eval "$(dingus print)"    # Export into the current shell instead
    dingus list               # Show the active .dingus and named configs
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .catalog import list_config_files
from .config import config_dir
from .errors import ConfigDirNotFoundError, DingusError
from .locator import ExplicitConfig, find_nearest
from .resolver import resolve_environment
from .shell import detect_shell, format_exports, run_session

console = Console()
err_console = Console(stderr=True)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_time=False, show_path=False)],
    )


def _require_config_dir() -> Path:
    path = config_dir()
    if not path.is_dir():
        raise ConfigDirNotFoundError(path)
    return path


def _explicit_config(name: Optional[str]) -> Optional[ExplicitConfig]:
    if name is None:
        return None
    return ExplicitConfig(directory=_require_config_dir(), filename=name)


def cmd_session(args: argparse.Namespace) -> int:
    """Run a shell with the resolved environment."""
    shell = detect_shell(args.shell)
    variables = resolve_environment(_explicit_config(args.config), Path.cwd())

    code = run_session(shell, variables)
    console.print("[bold]Exiting Dingus Session[/bold]\n")
    return code


def cmd_print(args: argparse.Namespace) -> int:
    """Write export statements for the resolved environment to stdout."""
    shell = detect_shell(args.shell)
    variables = resolve_environment(_explicit_config(args.config), Path.cwd())

    # Raw stdout: this is meant to be eval'd
    sys.stdout.write(format_exports(shell, variables) + "\n")
    sys.stdout.flush()
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    """Show the active marker file and the named config files."""
    folder = _require_config_dir()
    lines = []

    nearest = find_nearest(Path.cwd())
    if nearest is not None:
        lines.append(f"[green]Found in path:[/green] {escape(str(nearest))}")
        lines.append("")

    names = list_config_files(folder)
    if names:
        lines.append("[green]Available config files:[/green]")
        lines.extend(f"- {escape(name)}" for name in names)
    else:
        lines.append("[bold]No valid config files found in config folder.[/bold]")

    console.print("\n".join(lines), soft_wrap=True)
    return 0


def _add_resolve_options(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "-c",
        "--config",
        metavar="NAME",
        help="Config file in the config folder (extension optional). "
             "Default: closest .dingus in this or a parent directory",
    )
    p.add_argument("-s", "--shell", help="Shell to use (default: $SHELL)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dingus",
        description="Dingus: load environment variables for the directory you're in",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug output on stderr")

    sub = parser.add_subparsers(dest="subcmd")

    p_session = sub.add_parser("session", help="Start a shell with the environment loaded")
    _add_resolve_options(p_session)
    p_session.set_defaults(func=cmd_session)

    p_print = sub.add_parser("print", help="Print export statements for eval")
    _add_resolve_options(p_print)
    p_print.set_defaults(func=cmd_print)

    p_list = sub.add_parser("list", help="List available config files")
    p_list.set_defaults(func=cmd_list)

    return parser


def run(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.subcmd:
        parser.print_usage(sys.stderr)
        return 2

    _setup_logging(args.verbose)

    try:
        return args.func(args)
    except DingusError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        return e.exit_code


def main() -> None:
    raise SystemExit(run())


if __name__ == "__main__":
    main()
