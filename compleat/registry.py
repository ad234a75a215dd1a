# Compleat Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""registry.py

Registration of completion actions and dispatch of completion requests.

Applications attach actions to their command tree during setup:

    registry = CompletionRegistry()
    registry.gen(deploy).flag_completion({"config": action_files(".yaml")})
    registry.gen(deploy).positional_completion(action_values("staging", "prod"))

Each action is stored under the UID of its flag or positional slot. The shell
snippet re-invokes the program as

    <program> _compleat <shell> <uid> <program> <words...>

and `CompletionRegistry.execute()` answers the request: it walks the typed
words through the command tree (selecting subcommands, marking flags already
given, collecting positional arguments), picks the target action, resolves it
and prints the candidates in the shell's format. With the anonymous UID `_`
the target is derived from the words:

- the value of a flag that is waiting for one,
- the value part of `--flag=value`,
- flags when the current word starts with `-`,
- the next positional slot if an action is registered for it,
- subcommands while no positional argument has been typed.

Once a positional argument has been typed, a slot without a registered action
yields no candidates at all. No message is shown, so the shell falls back to
its own default (usually nothing, or file names for bash `-o default`).
"""
from __future__ import annotations

import sys
from dataclasses import dataclass, field

from rich.markup import escape

from compleat.action.action import Action, InvokedAction
from compleat.action.command_actions import action_flags, action_subcommands
from compleat.action.core_actions import action_values
from compleat.command import Command
from compleat.config import CompleatConfig
from compleat.console import err_console
from compleat.context import Context
from compleat.exceptions import CompleatError, UnknownUIDError
from compleat.logger import logger
from compleat.parser.flag import Flag
from compleat.shells import serialize
from compleat.snippets import snippet
from compleat.uid import (
    UID,
    UID_MARKER,
    find_command,
    parse_uid,
    uid_command,
    uid_flag,
    uid_positional,
)
from compleat.utils import get_program_invocation

HIDDEN_COMMAND = "_compleat"


@dataclass
class Traversal:
    """Where the typed words lead in the command tree."""

    command: Command
    current: str
    positionals: list[str] = field(default_factory=list)
    pending_flag: Flag | None = None
    terminated: bool = False


def traverse(root: Command, words: list[str]) -> Traversal:
    """
    Walk `words` through the tree below `root`.

    The last word is the one being completed; all others are parsed. Flags of
    every visited command are reset and then marked changed as they are found.
    """
    typed, current = (words[:-1], words[-1]) if words else ([], "")
    command = root
    command.flags.reset()
    state = Traversal(command=command, current=current)

    tokens = iter(typed)
    for token in tokens:
        if state.pending_flag is not None:
            state.pending_flag = None
            continue
        if token == "--":
            state.positionals.extend(tokens)
            state.terminated = True
            break
        if token.startswith("-") and len(token) > 1:
            state.pending_flag = state.command.flags.parse_token(token)
            continue
        if not state.positionals:
            child = state.command.find_child(token)
            if child is not None:
                child.flags.reset()
                state.command = child
                continue
        state.positionals.append(token)
    return state


@dataclass
class CommandCompletion:
    """Registers the actions of one command."""

    registry: CompletionRegistry
    command: Command

    def flag_completion(self, actions: dict[str, Action]) -> CommandCompletion:
        for name, action in actions.items():
            self.registry.register(uid_flag(self.command, name), action)
        return self

    def positional_completion(self, *actions: Action) -> CommandCompletion:
        for position, action in enumerate(actions):
            self.registry.register(uid_positional(self.command, position), action)
        return self


class CompletionRegistry:
    """
    Actions of an application, addressed by UID.

    Args:
        config (CompleatConfig | None): Engine settings.
    """

    def __init__(self, config: CompleatConfig | None = None) -> None:
        self.config: CompleatConfig = config or CompleatConfig()
        self._actions: dict[str, Action] = {}

    def gen(self, command: Command) -> CommandCompletion:
        return CommandCompletion(self, command)

    def register(self, uid: str, action: Action) -> None:
        parse_uid(uid)
        if uid in self._actions:
            logger.warning("Overriding action registered for '%s'", uid)
        self._actions[uid] = action
        logger.debug("Registered action for '%s'", uid)

    def get(self, uid: str) -> Action | None:
        return self._actions.get(uid)

    def __contains__(self, uid: object) -> bool:
        return uid in self._actions

    def _derive_target(self, state: Traversal) -> tuple[str, str, str]:
        command = state.command
        current = state.current
        if state.pending_flag is not None:
            return uid_flag(command, state.pending_flag.name), current, ""
        if not state.terminated and current.startswith("--") and "=" in current:
            name, _, value = current[2:].partition("=")
            if command.flags.lookup(name) is not None:
                return uid_flag(command, name), value, current[: len(current) - len(value)]
        if not state.terminated and current.startswith("-"):
            return uid_command(command), current, ""
        positional = uid_positional(command, len(state.positionals))
        if positional in self._actions:
            return positional, current, ""
        return uid_command(command), current, ""

    def _action_for(self, command: Command, uid: UID, state: Traversal, strict: bool) -> Action:
        if uid.is_command:
            if not state.terminated and state.current.startswith("-"):
                return action_flags(command, long_shorthand=self.config.long_shorthand)
            if state.positionals:
                # unregistered positional slot, silently empty
                return action_values()
            return action_subcommands(command)
        action = self._actions.get(str(uid))
        if action is None:
            if strict:
                raise UnknownUIDError(f"No action registered for '{uid}'")
            return action_values()
        return action

    def invoke(self, root: Command, uid: str, words: list[str]) -> InvokedAction:
        """
        Resolve the action addressed by `uid` for the typed `words`.

        Args:
            root (Command): Root of the command tree.
            uid (str): Target UID, or `_` to derive it from `words`.
            words (list[str]): Words after the program name; the last one is
                               being completed.

        Raises:
            UnknownUIDError: If `uid` does not address a registered action.
            RecursionLimitError: If the action's callbacks nest too deeply.
        """
        state = traverse(root, words)
        strict = uid != UID_MARKER
        if strict:
            target, current, prefix = uid, state.current, ""
        else:
            target, current, prefix = self._derive_target(state)

        parsed = parse_uid(target)
        command = find_command(root, parsed)
        logger.debug("Completing '%s' for target '%s'", current, target)

        action = self._action_for(command, parsed, state, strict)
        context = Context(callback_value=current, args=tuple(state.positionals))
        invoked = action.invoke(context, max_depth=self.config.max_callback_depth)
        if prefix:
            invoked = invoked.prefix(prefix)
        return invoked

    def complete(self, root: Command, shell: str, uid: str, words: list[str]) -> str:
        """Resolve and format the candidates for `shell`."""
        invoked = self.invoke(root, uid, words)
        current = words[-1] if words else ""
        return serialize(shell, invoked, current)

    def execute(self, root: Command, argv: list[str] | None = None) -> bool:
        """
        Answer a completion request found in `argv`.

        Call this at the start of the application's entry point. Returns False
        when `argv` is not a completion request. Configuration errors are
        reported on stderr and end the process with status 1.

        Args:
            root (Command): Root of the command tree.
            argv (list[str] | None): Arguments after the program name,
                                     defaults to `sys.argv[1:]`.
        """
        argv = sys.argv[1:] if argv is None else argv
        if not argv or argv[0] != HIDDEN_COMMAND:
            return False

        try:
            if len(argv) < 2:
                raise CompleatError(f"Usage: {HIDDEN_COMMAND} <shell> [<uid> <words...>]")
            shell = argv[1]
            if len(argv) == 2:
                output = snippet(shell, root, get_program_invocation())
            else:
                uid = argv[2]
                words = argv[4:] if len(argv) > 3 else []
                output = self.complete(root, shell, uid, words or [""])
        except CompleatError as error:
            logger.error("Completion request %s failed: %s", argv, error)
            err_console.print(f"[bold red]error:[/] {escape(str(error))}")
            sys.exit(1)

        print(output)
        return True
