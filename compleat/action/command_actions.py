# Compleat Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""command_actions.py

Complete subcommands and flags of a `Command`.

`action_flags` handles two situations:

- A shorthand cluster such as `-vx`, where every letter is a registered
  shorthand: offers further shorthand letters to append
  to the cluster. A flag that needs a value can only end a cluster, so once
  the typed cluster contains one nothing more is offered, and flags needing a
  value are not offered as a continuation.
- Anything else: offers the long form of every flag plus its shorthand, leaving
  out deprecated and hidden flags and flags that were already given unless
  they can be repeated.
"""
from __future__ import annotations

import re

from compleat.action.action import Action
from compleat.action.core_actions import action_callback, action_values_described
from compleat.command import Command
from compleat.context import Context
from compleat.parser.flag import Flag

SHORTHAND_SERIES = re.compile(r"^-(?P<shorthand>[^-=]+)$")


def action_subcommands(command: Command) -> Action:
    """Complete the visible subcommands of `command` and their aliases."""
    values: list[str] = []
    for child in command.children:
        if child.hidden or child.deprecated:
            continue
        values.extend((child.name, child.short))
        for alias in child.aliases:
            values.extend((alias, child.short))
    return action_values_described(*values)


def _offerable(flag: Flag) -> bool:
    if flag.deprecated or flag.hidden:
        return False
    return not flag.changed or flag.repeatable


def _shorthand_series(command: Command, series: str, context: Context) -> Action:
    typed = set(series)
    for shorthand in series:
        flag = command.flags.shorthand_lookup(shorthand)
        if flag is not None and flag.requires_argument:
            return Action(nospace=True)

    values: list[str] = []
    for flag in command.flags:
        if not flag.shorthand or flag.shorthand_deprecated or not _offerable(flag):
            continue
        if flag.requires_argument:
            continue
        if flag.shorthand in typed and not flag.repeatable:
            continue
        values.extend((flag.shorthand, flag.usage))
    return (
        action_values_described(*values)
        .invoke(context)
        .prefix(context.callback_value)
        .to_a()
        .no_space()
    )


def action_flags(command: Command, long_shorthand: bool = False) -> Action:
    """
    Complete the flags of `command`.

    Args:
        command (Command): Command whose flags are offered.
        long_shorthand (bool): Offer long names with a single dash (`-name`).
    """

    def _flags(context: Context) -> Action:
        match = SHORTHAND_SERIES.match(context.callback_value)
        if match and all(
            command.flags.shorthand_lookup(char) is not None
            for char in match.group("shorthand")
        ):
            return _shorthand_series(command, match.group("shorthand"), context)

        long_prefix = "-" if long_shorthand else "--"
        values: list[str] = []
        for flag in command.flags:
            if not _offerable(flag):
                continue
            if not flag.shorthand_only:
                values.extend((long_prefix + flag.name, flag.usage))
            if flag.shorthand and not flag.shorthand_deprecated:
                values.extend(("-" + flag.shorthand, flag.usage))
        return action_values_described(*values)

    return action_callback(_flags)
