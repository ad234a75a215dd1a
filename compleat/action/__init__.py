"""
Compleat Completion Engine

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from ..context import MAX_CALLBACK_DEPTH
from .action import Action, CompletionCallback, InvokedAction
from .command_actions import action_flags, action_subcommands
from .core_actions import (
    Batch,
    action_bool,
    action_callback,
    action_message,
    action_multi_parts,
    action_raw_values,
    action_values,
    action_values_described,
    batch,
)
from .exec_action import action_exec_command
from .path_action import action_directories, action_files
from .raw_value import RawValue, by_value, raw_values_from
from .system_actions import action_groups, action_hosts, action_user_group, action_users

__all__ = [
    "MAX_CALLBACK_DEPTH",
    "Action",
    "Batch",
    "CompletionCallback",
    "InvokedAction",
    "RawValue",
    "action_bool",
    "action_callback",
    "action_directories",
    "action_exec_command",
    "action_files",
    "action_flags",
    "action_groups",
    "action_hosts",
    "action_message",
    "action_multi_parts",
    "action_raw_values",
    "action_subcommands",
    "action_user_group",
    "action_users",
    "action_values",
    "action_values_described",
    "batch",
    "by_value",
    "raw_values_from",
]
