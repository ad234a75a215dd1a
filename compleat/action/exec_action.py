# Compleat Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""exec_action.py

Complete from the output of an external program.

`action_exec_command(program, *args)` returns a decorator-style factory taking a
transform `bytes -> Action`. The program runs without a shell, so its arguments
are never interpreted as shell syntax. A failing program yields a message with
the first line of its standard error.

Example:
    action_exec_command("git", "remote")(
        lambda output: action_values(*output.decode().splitlines())
    )
"""
from __future__ import annotations

import subprocess
from typing import Callable

from compleat.action.action import Action
from compleat.action.core_actions import action_callback, action_message
from compleat.context import Context
from compleat.logger import logger
from compleat.utils import strip_ansi

OutputTransform = Callable[[bytes], Action]


def action_exec_command(program: str, *args: str) -> Callable[[OutputTransform], Action]:
    """
    Run `program` with `args` at completion time.

    The transform receives the captured standard output on success. On a
    non-zero exit or when the program cannot be started, the action resolves to
    a message built from the first non-blank standard error line, or from the
    failure itself when standard error is empty.
    """

    def _with_transform(transform: OutputTransform) -> Action:
        def _exec(context: Context) -> Action:
            command = [program, *args]
            logger.debug("Executing %s in '%s'", command, context.dir or ".")
            try:
                result = subprocess.run(
                    command,
                    capture_output=True,
                    cwd=context.dir or None,
                    check=False,
                )
            except OSError as error:
                logger.warning("Failed to execute '%s': %s", program, error)
                return action_message(str(error))

            if result.returncode != 0:
                stderr = result.stderr.decode("utf-8", errors="replace")
                first_line = strip_ansi(stderr.split("\n", 1)[0])
                logger.warning(
                    "'%s' exited with status %d", program, result.returncode
                )
                if first_line.strip():
                    return action_message(first_line)
                return action_message(
                    f"{program} exited with status {result.returncode}"
                )
            return transform(result.stdout)

        return action_callback(_exec)

    return _with_transform
