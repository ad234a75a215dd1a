"""
Compleat Completion Engine

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .action import (
    Action,
    InvokedAction,
    RawValue,
    action_bool,
    action_callback,
    action_directories,
    action_exec_command,
    action_files,
    action_flags,
    action_message,
    action_multi_parts,
    action_subcommands,
    action_values,
    action_values_described,
    batch,
)
from .command import Command
from .config import CompleatConfig, load_config
from .context import Context
from .registry import CompletionRegistry

logger = logging.getLogger("compleat")

__version__ = "0.1.0"

__all__ = [
    "Action",
    "Command",
    "CompleatConfig",
    "CompletionRegistry",
    "Context",
    "InvokedAction",
    "RawValue",
    "action_bool",
    "action_callback",
    "action_directories",
    "action_exec_command",
    "action_files",
    "action_flags",
    "action_message",
    "action_multi_parts",
    "action_subcommands",
    "action_values",
    "action_values_described",
    "batch",
    "load_config",
]
