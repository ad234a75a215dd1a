# Compleat Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `FlagType`, the value kind of a command-line flag.

Completion only needs to know three things about a flag's value: whether the
flag takes one at all (`bool`, `count`), whether it may be given more than once
(list kinds and `count`), and otherwise that it stores a single value.

Supports alias coercion for config-friendly values.

Example:
    FlagType("bool")         → FlagType.BOOL
    FlagType("store_true")   → FlagType.BOOL (via alias)
    FlagType("append")       → FlagType.STRING_ARRAY (via alias)
"""
from __future__ import annotations

from enum import Enum


class FlagType(Enum):
    """
    Defines the value kind of a flag.

    Members:
        BOOL: Presence sets the flag, no value.
        COUNT: Each occurrence increments a counter, no value.
        STRING: A single string value.
        INT: A single integer value.
        FLOAT: A single float value.
        STRING_SLICE: Comma separated strings, may be repeated.
        STRING_ARRAY: One string per occurrence, may be repeated.
        INT_SLICE: Comma separated integers, may be repeated.

    Aliases:
        - "store_true" / "store_false" / "true" / "false" → "bool"
        - "store" → "string"
        - "append" → "stringArray"
        - "extend" / "list" → "stringSlice"
    """

    BOOL = "bool"
    COUNT = "count"
    STRING = "string"
    INT = "int"
    FLOAT = "float64"
    STRING_SLICE = "stringSlice"
    STRING_ARRAY = "stringArray"
    INT_SLICE = "intSlice"

    @classmethod
    def choices(cls) -> list[FlagType]:
        """Return a list of all flag types."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "store_true": "bool",
            "store_false": "bool",
            "true": "bool",
            "false": "bool",
            "store": "string",
            "append": "stringArray",
            "extend": "stringSlice",
            "list": "stringSlice",
            "float": "float64",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> FlagType:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip()
        alias = cls._get_alias(normalized.lower())
        for member in cls:
            if member.value.lower() == alias.lower():
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @property
    def takes_value(self) -> bool:
        return self not in (FlagType.BOOL, FlagType.COUNT)

    @property
    def repeatable(self) -> bool:
        return self in (
            FlagType.COUNT,
            FlagType.STRING_SLICE,
            FlagType.STRING_ARRAY,
            FlagType.INT_SLICE,
        )

    def __str__(self) -> str:
        """Return the string representation of the flag type."""
        return self.value
