# Compleat Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Flag` dataclass used by `FlagSet` to represent a single
command-line flag in a structured, introspectable format.

Flags should be created using `FlagSet.add_flag()`, which validates names and
shorthands.

Key Attributes:
- `name`: Long name without dashes (e.g. `verbose` for `--verbose`)
- `shorthand`: Optional single character (e.g. `v` for `-v`)
- `type`: `FlagType` describing whether a value is taken and if it repeats
- `no_opt_default`: Value used when the flag is given bare, which makes the
  value optional
- `deprecated` / `shorthand_deprecated`: Deprecation notices, hiding the flag
  or its shorthand from completion
- `changed`: Whether the flag was already given on the command line
"""
from dataclasses import dataclass, field

from compleat.parser.flag_type import FlagType


@dataclass
class Flag:
    """
    Represents a command-line flag.

    Attributes:
        name (str): Long name of the flag.
        shorthand (str): Single character shorthand, empty if none.
        usage (str): Help text, used as the completion description.
        type (FlagType): Value kind of the flag.
        default (str): Default value as text.
        no_opt_default (str): Value used when the flag is given without one.
        deprecated (str): Deprecation notice, empty if not deprecated.
        shorthand_deprecated (str): Deprecation notice for the shorthand only.
        hidden (bool): True if the flag is not offered for completion.
        shorthand_only (bool): True if only the shorthand form exists.
        changed (bool): True if the flag was already given.
    """

    name: str
    shorthand: str = ""
    usage: str = ""
    type: FlagType = FlagType.STRING
    default: str = ""
    no_opt_default: str = ""
    deprecated: str = ""
    shorthand_deprecated: str = ""
    hidden: bool = False
    shorthand_only: bool = False
    changed: bool = field(default=False, compare=False)

    @property
    def requires_argument(self) -> bool:
        """True if the flag must be followed by a value."""
        return self.type.takes_value and self.no_opt_default == ""

    @property
    def repeatable(self) -> bool:
        return self.type.repeatable

    def __hash__(self) -> int:
        return hash((self.name, self.shorthand, self.type))
