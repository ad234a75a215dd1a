# Compleat Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
UID addressing of registered actions.

A UID names one completion target in the command tree so that a re-invoked
process can find the action again without running application setup logic:

    _root__sub              the command `root sub`
    _root__sub##output      flag `--output` of `root sub`
    _root__sub#0            first positional argument of `root sub`

`_` alone is the anonymous UID: the target is derived from the typed words.
"""
from __future__ import annotations

from dataclasses import dataclass

from compleat.command import Command
from compleat.exceptions import FlagDefinitionError, UnknownUIDError

UID_MARKER = "_"
PATH_SEPARATOR = "__"
FLAG_SEPARATOR = "##"
POSITIONAL_SEPARATOR = "#"


@dataclass(frozen=True)
class UID:
    """Parsed form of a UID."""

    path: tuple[str, ...]
    flag: str | None = None
    position: int | None = None

    @property
    def is_command(self) -> bool:
        return self.flag is None and self.position is None

    def __str__(self) -> str:
        text = UID_MARKER + PATH_SEPARATOR.join(self.path)
        if self.flag is not None:
            return f"{text}{FLAG_SEPARATOR}{self.flag}"
        if self.position is not None:
            return f"{text}{POSITIONAL_SEPARATOR}{self.position}"
        return text


def uid_command(command: Command) -> str:
    return str(UID(tuple(command.path())))


def uid_flag(command: Command, flag_name: str) -> str:
    """
    UID of the flag `flag_name` of `command`.

    Raises:
        FlagDefinitionError: If the command has no such flag.
    """
    if command.flags.lookup(flag_name) is None:
        raise FlagDefinitionError(
            f"Command '{' '.join(command.path())}' has no flag '{flag_name}'"
        )
    return str(UID(tuple(command.path()), flag=flag_name))


def uid_positional(command: Command, position: int) -> str:
    if position < 0:
        raise ValueError(f"Positional index must not be negative, got {position}")
    return str(UID(tuple(command.path()), position=position))


def parse_uid(uid: str) -> UID:
    """
    Parse a UID string.

    Raises:
        UnknownUIDError: If `uid` is not well formed.
    """
    if not uid.startswith(UID_MARKER) or len(uid) == len(UID_MARKER):
        raise UnknownUIDError(f"Malformed UID: {uid!r}")
    body = uid[len(UID_MARKER) :]

    flag = None
    position = None
    if FLAG_SEPARATOR in body:
        body, _, flag = body.partition(FLAG_SEPARATOR)
        if not flag:
            raise UnknownUIDError(f"Malformed UID: {uid!r} has an empty flag name")
    elif POSITIONAL_SEPARATOR in body:
        body, _, index = body.partition(POSITIONAL_SEPARATOR)
        try:
            position = int(index)
        except ValueError as error:
            raise UnknownUIDError(
                f"Malformed UID: {uid!r} has an invalid position"
            ) from error
        if position < 0:
            raise UnknownUIDError(f"Malformed UID: {uid!r} has a negative position")

    path = tuple(body.split(PATH_SEPARATOR))
    if not all(path):
        raise UnknownUIDError(f"Malformed UID: {uid!r} has an empty command name")
    return UID(path, flag=flag, position=position)


def find_command(root: Command, uid: UID) -> Command:
    """
    Locate the command addressed by `uid` below `root`.

    Raises:
        UnknownUIDError: If the path does not exist in the tree.
    """
    if uid.path[0] != root.name:
        raise UnknownUIDError(
            f"UID '{uid}' does not belong to command '{root.name}'"
        )
    command = root
    for name in uid.path[1:]:
        child = next((c for c in command.children if c.name == name), None)
        if child is None:
            raise UnknownUIDError(f"UID '{uid}' names unknown command '{name}'")
        command = child
    if uid.flag is not None and command.flags.lookup(uid.flag) is None:
        raise UnknownUIDError(f"UID '{uid}' names unknown flag '{uid.flag}'")
    return command
