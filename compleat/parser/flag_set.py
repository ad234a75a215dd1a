# Compleat Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `FlagSet`, the registry of flags attached to a command.

It is the part of the host command definition the completion engine reads:
flag lookup by name and shorthand, iteration in registration order, and the
`changed` state of flags already present on the command line.

`FlagSet` does not convert or validate values. Its parsing is just enough to
tell which flags were given and which tokens are positional arguments, in the
same tolerant way an incomplete command line requires: unknown flags are
skipped instead of rejected.

Key Features:
- Declarative flag registration via `add_flag()`
- Duplicate and malformed name/shorthand detection
- POSIX-style bundling for shorthand flags (`-abc`, `-ovalue`)
- `--name=value` and `--name value` forms
- `--` terminates flag parsing

Example Usage:
    flags = FlagSet()
    flags.add_flag("verbose", "v", FlagType.BOOL, "Verbose output.")
    flags.add_flag("output", "o", FlagType.STRING, "Output file.")

    positionals = flags.parse(["-vo", "out.txt", "input.txt"])
    # positionals == ["input.txt"]; both flags are marked changed
"""
from __future__ import annotations

from typing import Iterator

from compleat.exceptions import FlagDefinitionError
from compleat.logger import logger
from compleat.parser.flag import Flag
from compleat.parser.flag_type import FlagType


class FlagSet:
    """
    Flags of a single command.

    Features:
    - Name and shorthand lookup.
    - Registration order iteration.
    - Tracking of flags already given on the command line.
    """

    def __init__(self) -> None:
        self._flags: list[Flag] = []
        self._long_map: dict[str, Flag] = {}
        self._short_map: dict[str, Flag] = {}

    def _validate_flag(self, name: str, shorthand: str) -> None:
        if not isinstance(name, str) or not name:
            raise FlagDefinitionError("Flag name must be a non-empty string")
        if name.startswith("-"):
            raise FlagDefinitionError(f"Flag name '{name}' must not start with '-'")
        if "=" in name or " " in name:
            raise FlagDefinitionError(f"Flag name '{name}' must not contain '=' or spaces")
        if name in self._long_map:
            raise FlagDefinitionError(f"Flag '--{name}' is already defined")
        if shorthand:
            if len(shorthand) != 1 or shorthand in "-=":
                raise FlagDefinitionError(
                    f"Shorthand '{shorthand}' for flag '{name}' must be a single character"
                )
            if shorthand in self._short_map:
                existing = self._short_map[shorthand]
                raise FlagDefinitionError(
                    f"Shorthand '-{shorthand}' is already used by flag '{existing.name}'"
                )

    def add_flag(
        self,
        name: str,
        shorthand: str = "",
        flag_type: FlagType | str = FlagType.STRING,
        usage: str = "",
        *,
        default: str = "",
        no_opt_default: str | None = None,
        deprecated: str = "",
        shorthand_deprecated: str = "",
        hidden: bool = False,
        shorthand_only: bool = False,
    ) -> Flag:
        """
        Register a flag.

        Args:
            name (str): Long name without leading dashes.
            shorthand (str): Optional single character shorthand.
            flag_type (FlagType | str): Value kind of the flag.
            usage (str): Help text.
            default (str): Default value as text.
            no_opt_default (str | None): Value used when given bare. Defaults
                to "true" for bool flags and "+1" for count flags.
            deprecated (str): Deprecation notice.
            shorthand_deprecated (str): Deprecation notice for the shorthand.
            hidden (bool): Hide the flag from completion.
            shorthand_only (bool): Only the shorthand form is accepted.

        Returns:
            Flag: The registered flag.
        """
        if not isinstance(flag_type, FlagType):
            try:
                flag_type = FlagType(flag_type)
            except ValueError as error:
                raise FlagDefinitionError(str(error)) from error
        self._validate_flag(name, shorthand)
        if shorthand_only and not shorthand:
            raise FlagDefinitionError(
                f"Flag '{name}' is shorthand only but has no shorthand"
            )
        if no_opt_default is None:
            if flag_type == FlagType.BOOL:
                no_opt_default = "true"
            elif flag_type == FlagType.COUNT:
                no_opt_default = "+1"
            else:
                no_opt_default = ""

        flag = Flag(
            name=name,
            shorthand=shorthand,
            usage=usage,
            type=flag_type,
            default=default,
            no_opt_default=no_opt_default,
            deprecated=deprecated,
            shorthand_deprecated=shorthand_deprecated,
            hidden=hidden,
            shorthand_only=shorthand_only,
        )
        self._flags.append(flag)
        self._long_map[name] = flag
        if shorthand:
            self._short_map[shorthand] = flag
        return flag

    def lookup(self, name: str) -> Flag | None:
        return self._long_map.get(name)

    def shorthand_lookup(self, shorthand: str) -> Flag | None:
        return self._short_map.get(shorthand)

    def __iter__(self) -> Iterator[Flag]:
        return iter(self._flags)

    def __len__(self) -> int:
        return len(self._flags)

    def __contains__(self, name: object) -> bool:
        return name in self._long_map

    def reset(self) -> None:
        """Forget which flags were given."""
        for flag in self._flags:
            flag.changed = False

    def parse_token(self, token: str) -> Flag | None:
        """
        Mark the flag(s) named by `token` as changed.

        Returns:
            Flag | None: The flag still waiting for its value in the next token.
        """
        if token.startswith("--"):
            name, has_value, _ = token[2:].partition("=")
            flag = self._long_map.get(name)
            if flag is None or flag.shorthand_only:
                logger.debug("Ignoring unknown flag '%s'", token)
                return None
            flag.changed = True
            if flag.requires_argument and not has_value:
                return flag
            return None

        for index, char in enumerate(token[1:], start=1):
            flag = self._short_map.get(char)
            if flag is None:
                logger.debug("Ignoring unknown shorthand '-%s' in '%s'", char, token)
                return None
            flag.changed = True
            if flag.requires_argument:
                if index == len(token) - 1:
                    return flag
                return None
        return None

    def parse(self, args: list[str]) -> list[str]:
        """
        Mark the flags given in `args` as changed.

        Returns:
            list[str]: The positional arguments in `args`.
        """
        positionals: list[str] = []
        pending: Flag | None = None
        tokens = iter(args)
        for token in tokens:
            if pending is not None:
                pending = None
                continue
            if token == "--":
                positionals.extend(tokens)
                break
            if token.startswith("-") and len(token) > 1:
                pending = self.parse_token(token)
                continue
            positionals.append(token)
        return positionals
