"""
Compleat Completion Engine

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .flag import Flag
from .flag_set import FlagSet
from .flag_type import FlagType

__all__ = [
    "Flag",
    "FlagSet",
    "FlagType",
]
