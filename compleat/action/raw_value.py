# Compleat Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""raw_value.py

Defines `RawValue`, the atomic completion candidate.

A candidate carries the text inserted into the command line (`value`), the text
shown in the shell's menu (`display`) and an optional help text
(`description`, empty string meaning none). `display` differs from `value` for
multi-part candidates, where the menu only shows the trailing segment.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class RawValue(BaseModel):
    """A single completion candidate."""

    value: str
    display: str
    description: str = ""

    model_config = ConfigDict(frozen=True)

    @classmethod
    def of(cls, value: str, description: str = "") -> RawValue:
        """Create a candidate whose display equals its value."""
        return cls(value=value, display=value, description=description)


def raw_values_from(*values: str) -> tuple[RawValue, ...]:
    """Create undescribed candidates for the given values."""
    return tuple(RawValue.of(value) for value in values)


def by_value(raw_value: RawValue) -> tuple[str, str]:
    """Sort key ordering candidates by value, then display."""
    return raw_value.value, raw_value.display
