# Compleat Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""command.py

Defines the Command class, the host command tree Compleat completes against.

A command has a name, aliases, a short description, visibility markers, a
`FlagSet` and child commands. The completion engine only reads this structure;
applications build it once during setup.

Commands provide:
- Parent/child navigation (`add_command`, `parent`, `root`, `find_child`)
- Path resolution from a list of names (`find`)
- The command path used to build UIDs (`path`)
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

from compleat.exceptions import CommandNotFoundError
from compleat.parser.flag_set import FlagSet


class Command(BaseModel):
    """
    Represents a command or subcommand of the completed program.

    Attributes:
        name (str): Name the command is invoked with.
        short (str): One-line description, used for subcommand completion.
        aliases (list[str]): Alternate names.
        hidden (bool): Hidden commands are not offered for completion.
        deprecated (str): Deprecation notice; deprecated commands are not offered.
        flags (FlagSet): Flags accepted by the command.
        children (list[Command]): Subcommands.
    """

    name: str
    short: str = ""
    aliases: list[str] = Field(default_factory=list)
    hidden: bool = False
    deprecated: str = ""
    flags: FlagSet = Field(default_factory=FlagSet)
    children: list[Command] = Field(default_factory=list)

    _parent: Command | None = PrivateAttr(default=None)

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @field_validator("name")
    @classmethod
    def validate_name(cls, name: str) -> str:
        if (
            not name
            or " " in name
            or "#" in name
            or "__" in name
            or name.endswith("_")
        ):
            raise ValueError(
                f"Invalid command name {name!r}: must be non-empty without spaces, "
                "'#' or '__' and must not end with '_'"
            )
        return name

    def model_post_init(self, __context) -> None:
        for child in self.children:
            child._parent = self

    def add_command(self, *commands: Command) -> None:
        for command in commands:
            command._parent = self
            self.children.append(command)

    @property
    def parent(self) -> Command | None:
        return self._parent

    def root(self) -> Command:
        command = self
        while command.parent is not None:
            command = command.parent
        return command

    def path(self) -> list[str]:
        """Names from the root command down to this one."""
        names = []
        command: Command | None = self
        while command is not None:
            names.append(command.name)
            command = command.parent
        return list(reversed(names))

    def find_child(self, name: str) -> Command | None:
        for child in self.children:
            if child.name == name or name in child.aliases:
                return child
        return None

    def find(self, names: list[str]) -> Command:
        """
        Resolve a subcommand path relative to this command.

        Raises:
            CommandNotFoundError: If a name does not match any subcommand.
        """
        command = self
        for name in names:
            child = command.find_child(name)
            if child is None:
                raise CommandNotFoundError(
                    f"Unknown command '{name}' for '{' '.join(command.path())}'"
                )
            command = child
        return command

    def __str__(self) -> str:
        return f"Command(name={self.name!r}, children={len(self.children)})"
