"""
Compleat Completion Engine

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import shlex
import sys
from argparse import ArgumentParser, Namespace
from typing import Any

from prompt_toolkit import PromptSession
from rich.markup import escape
from rich.table import Table

from compleat.command import Command
from compleat.completer import ActionCompleter
from compleat.config import load_config
from compleat.console import console, err_console
from compleat.exceptions import ConfigError
from compleat.main.example import build_command, build_registry
from compleat.registry import HIDDEN_COMMAND, CompletionRegistry, traverse
from compleat.utils import setup_logging


def get_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="compleat",
        description="Demo program of the Compleat completion engine.",
        epilog=f"Shell snippets: compleat {HIDDEN_COMMAND} <elvish|xonsh>",
    )
    parser.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="Try the completions in an interactive prompt.",
    )
    parser.add_argument("--config", help="Path to a compleat.toml or compleat.yaml file.")
    return parser


def render_help(root: Command) -> None:
    table = Table(title=f"{root.name}: {root.short}", show_lines=False)
    table.add_column("Command", style="bold", no_wrap=True)
    table.add_column("Flags")
    table.add_column("Description")
    for command in root.children:
        flags = ", ".join(
            f"-{flag.shorthand}/--{flag.name}" if flag.shorthand else f"--{flag.name}"
            for flag in command.flags
            if not flag.hidden
        )
        table.add_row(" ".join(command.path()[1:]), escape(flags), command.short)
    console.print(table)


def interactive(registry: CompletionRegistry, root: Command) -> None:
    session: PromptSession = PromptSession(
        completer=ActionCompleter(registry, root),
        complete_while_typing=True,
    )
    while True:
        try:
            text = session.prompt(f"{root.name}> ")
        except (EOFError, KeyboardInterrupt):
            break
        try:
            words = shlex.split(text)
        except ValueError as error:
            err_console.print(f"[red]{escape(str(error))}[/]")
            continue
        state = traverse(root, [*words, ""])
        changed = [flag.name for flag in state.command.flags if flag.changed]
        console.print(
            f"command=[bold]{escape(' '.join(state.command.path()))}[/] "
            f"flags={escape(str(changed))} args={escape(str(state.positionals))}"
        )


def main(argv: list[str] | None = None) -> Any:
    argv = sys.argv[1:] if argv is None else argv
    args: Namespace | None = None
    if not argv or argv[0] != HIDDEN_COMMAND:
        args = get_parser().parse_args(argv)

    try:
        config = load_config(args.config if args else None)
    except ConfigError as error:
        err_console.print(f"[bold red]error:[/] {escape(str(error))}")
        sys.exit(1)
    setup_logging(mode=config.log_mode, log_filename=config.log_file)

    root = build_command()
    registry = build_registry(root, config)
    if registry.execute(root, argv):
        return 0

    if args and args.interactive:
        interactive(registry, root)
    else:
        render_help(root)
    return 0


if __name__ == "__main__":
    sys.exit(main())
