# Compleat Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""system_actions.py

Complete names known to the local system: users, groups and SSH hosts.

The sources are plain text databases read at completion time. Missing files
produce no candidates for users and groups (not every system has them) and a
message for known hosts.
"""
from __future__ import annotations

import os
import re

from compleat.action.action import Action
from compleat.action.core_actions import (
    action_callback,
    action_message,
    action_multi_parts,
    action_values,
)
from compleat.context import Context
from compleat.logger import logger

PASSWD_FILE = "/etc/passwd"
GROUP_FILE = "/etc/group"
KNOWN_HOSTS_FILE = "~/.ssh/known_hosts"

HOST_PATTERN = re.compile(r"^(?P<host>[^ ,#]+)")


def _first_fields(path: str) -> list[str]:
    try:
        with open(path, "r", encoding="UTF-8") as f:
            lines = f.read().splitlines()
    except OSError as error:
        logger.debug("Cannot read '%s': %s", path, error)
        return []
    names = []
    for line in lines:
        name = line.split(":", 1)[0].strip()
        if name and not name.startswith("#"):
            names.append(name)
    return names


def action_users() -> Action:
    """Complete user names from the passwd database."""
    return action_callback(lambda context: action_values(*_first_fields(PASSWD_FILE)))


def action_groups() -> Action:
    """Complete group names from the group database."""
    return action_callback(lambda context: action_values(*_first_fields(GROUP_FILE)))


def action_user_group() -> Action:
    """Complete `user:group` pairs."""

    def _user_group(context: Context) -> Action:
        if len(context.parts) == 0:
            return action_users().invoke(context).suffix(":").to_a().no_space()
        if len(context.parts) == 1:
            return action_groups()
        return action_values()

    return action_multi_parts(":", _user_group)


def action_hosts() -> Action:
    """Complete host names from the SSH known hosts file."""

    def _hosts(context: Context) -> Action:
        path = os.path.expanduser(KNOWN_HOSTS_FILE)
        try:
            with open(path, "r", encoding="UTF-8") as f:
                lines = f.read().splitlines()
        except FileNotFoundError:
            return action_values()
        except OSError as error:
            return action_message(str(error))
        hosts = []
        for line in lines:
            match = HOST_PATTERN.match(line)
            if match:
                hosts.append(match.group("host"))
        return action_values(*hosts)

    return action_callback(_hosts)
