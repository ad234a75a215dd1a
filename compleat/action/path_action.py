# Compleat Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""path_action.py

Filesystem path completion.

`action_files()` and `action_directories()` list the directory containing the
current word. Directories carry a trailing separator so the user can keep
descending. Candidates keep their full path as value but only show their last
segment in the menu, and are never space-terminated.

Reading failures are reported as message candidates carrying the error text.
"""
from __future__ import annotations

import os

from compleat.action.action import Action
from compleat.action.core_actions import action_callback, action_message, action_values
from compleat.context import Context
from compleat.logger import logger

SEPARATOR = "/"


def _action_path(suffixes: tuple[str, ...], directories_only: bool) -> Action:
    def _path(context: Context) -> Action:
        value = context.callback_value
        if value == "~":
            value = "~" + SEPARATOR

        folder = os.path.dirname(value)
        read_folder = folder or "."
        if value.startswith("~"):
            expanded = os.path.expanduser(value)
            if expanded == value:
                return action_message(f"could not resolve home directory for '{value}'")
            read_folder = os.path.dirname(expanded) or "."

        try:
            with os.scandir(context.abs_path(read_folder)) as iterator:
                entries = sorted(iterator, key=lambda entry: entry.name)
        except OSError as error:
            logger.warning("Cannot list '%s': %s", read_folder, error)
            return action_message(str(error))

        if folder in ("", "."):
            prefix = "./" if value.startswith("./") else ""
        elif folder.endswith(SEPARATOR):
            prefix = folder
        else:
            prefix = folder + SEPARATOR

        show_hidden = (
            value != ""
            and not value.endswith(SEPARATOR)
            and os.path.basename(value).startswith(".")
        )

        values = []
        for entry in entries:
            if not show_hidden and entry.name.startswith("."):
                continue
            try:
                is_dir = entry.is_dir()
            except OSError:
                is_dir = False
            if is_dir:
                values.append(prefix + entry.name + SEPARATOR)
            elif not directories_only:
                if not suffixes or any(entry.name.endswith(s) for s in suffixes):
                    values.append(prefix + entry.name)
        logger.debug("Listed %d path candidate(s) in '%s'", len(values), read_folder)
        return action_values(*values)

    return action_callback(_path)


def action_files(*suffixes: str) -> Action:
    """
    Complete files and directories.

    Args:
        suffixes (str): Only offer files ending with one of these. Directories
                        are always offered.
    """
    return action_callback(
        lambda context: _action_path(suffixes, False)
        .invoke(context)
        .to_multi_parts_a(SEPARATOR)
        .no_space()
    )


def action_directories() -> Action:
    """Complete directories."""
    return action_callback(
        lambda context: _action_path((), True)
        .invoke(context)
        .to_multi_parts_a(SEPARATOR)
        .no_space()
    )
