# Compleat Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""example.py

Demo command tree showing the built-in actions.

    example action --files <TAB>
    example action -v<TAB>
    example _compleat fish _ example action --values=

Source the output of `compleat _compleat elvish` (or `xonsh`) to try it in a
shell.
"""
from __future__ import annotations

import signal
import socket

from compleat.action import (
    Action,
    action_callback,
    action_directories,
    action_exec_command,
    action_files,
    action_groups,
    action_hosts,
    action_message,
    action_multi_parts,
    action_user_group,
    action_users,
    action_values,
    action_values_described,
    batch,
)
from compleat.command import Command
from compleat.config import CompleatConfig
from compleat.context import Context
from compleat.parser import FlagType
from compleat.registry import CompletionRegistry


def action_kill_signals() -> Action:
    """Signal names of the running platform, described by number."""

    def _signals(_: Context) -> Action:
        described = []
        for sig in sorted(signal.Signals, key=lambda s: s.value):
            described.extend([sig.name.removeprefix("SIG"), str(sig.value)])
        return action_values_described(*described)

    return action_callback(_signals)


def action_net_interfaces() -> Action:
    def _interfaces(_: Context) -> Action:
        try:
            names = [name for _, name in socket.if_nameindex()]
        except OSError as error:
            return action_message(str(error))
        return action_values(*names)

    return action_callback(_interfaces)


def action_git_branches() -> Action:
    return action_exec_command("git", "branch", "--format=%(refname:short)")(
        lambda output: action_values(*output.decode("utf-8").splitlines())
    )


def _action_versions(context: Context) -> Action:
    if len(context.parts) == 0:
        return action_values("1", "2", "3")
    if len(context.parts) == 1:
        return action_values("0", "1", "2")
    return action_values_described("alpha", "unstable", "beta", "preview", "rc", "candidate")


def build_command() -> Command:
    root = Command(name="example", short="compleat demo program")

    action_cmd = Command(name="action", short="action example", aliases=["alias"])
    flags = action_cmd.flags
    flags.add_flag("files", "f", usage="files flag")
    flags.add_flag("directories", usage="directories flag")
    flags.add_flag("groups", "g", usage="groups flag")
    flags.add_flag("hosts", usage="hosts flag")
    flags.add_flag("message", "m", usage="message flag")
    flags.add_flag("net_interfaces", "n", usage="net_interfaces flag")
    flags.add_flag("usergroup", usage="user:group flag")
    flags.add_flag("users", "u", usage="users flag")
    flags.add_flag("values", "v", usage="values flag")
    flags.add_flag("values_described", "d", usage="values with description flag")
    flags.add_flag("kill", "k", usage="kill signals")
    flags.add_flag(
        "optarg", "o", usage="optional arg with default value blue", no_opt_default="blue"
    )

    multi_cmd = Command(name="multiparts", short="multiparts example")
    multi_cmd.flags.add_flag("version", usage="dotted version")
    multi_cmd.flags.add_flag("branch", "b", usage="git branch")

    flag_cmd = Command(name="flag", short="flag example")
    flag_cmd.flags.add_flag("bool", "b", FlagType.BOOL, "bool flag")
    flag_cmd.flags.add_flag("count", "c", FlagType.COUNT, "count flag")
    flag_cmd.flags.add_flag("string", "s", FlagType.STRING, "string flag")
    flag_cmd.flags.add_flag("slice", "l", FlagType.STRING_SLICE, "string slice flag")
    flag_cmd.flags.add_flag("legacy", "x", FlagType.BOOL, deprecated="use --bool")

    root.add_command(action_cmd, multi_cmd, flag_cmd)
    return root


def build_registry(root: Command, config: CompleatConfig | None = None) -> CompletionRegistry:
    registry = CompletionRegistry(config)
    action_cmd = root.find(["action"])
    registry.gen(action_cmd).flag_completion(
        {
            "files": action_files(".py"),
            "directories": action_directories(),
            "groups": action_groups(),
            "hosts": action_hosts(),
            "message": action_message("message example"),
            "net_interfaces": action_net_interfaces(),
            "usergroup": action_user_group(),
            "users": action_users(),
            "values": action_values("values", "example"),
            "values_described": action_values_described(
                "values", "valueDescription", "example", "exampleDescription"
            ),
            "kill": action_kill_signals(),
            "optarg": action_values("blue", "red", "green", "yellow"),
        }
    )
    registry.gen(action_cmd).positional_completion(
        action_values("positional1", "p1"),
        action_values("positional2", "p2"),
    )

    multi_cmd = root.find(["multiparts"])
    registry.gen(multi_cmd).flag_completion(
        {
            "version": action_multi_parts(".", _action_versions),
            "branch": action_git_branches(),
        }
    )
    registry.gen(multi_cmd).positional_completion(
        batch(action_files(), action_values("-")).to_a(),
    )

    flag_cmd = root.find(["flag"])
    registry.gen(flag_cmd).flag_completion(
        {
            "string": action_values("one", "two", "three"),
            "slice": action_multi_parts(",", lambda c: action_values("a", "b", "c")),
        }
    )
    return registry
