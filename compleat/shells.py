# Compleat Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""shells.py

Output formatting of resolved candidates, one serializer per shell.

Serializers are registered in `SERIALIZERS` with the `output_serializer`
decorator. Each receives the `InvokedAction` and the word being completed and
returns the text printed for the shell snippet. Supporting a new shell means
registering one more function.

Formats:
- bash: one value per line, pre-filtered by the current word, ending with a
  space unless `nospace` is set.
- zsh: `value<TAB>display<TAB>description<TAB>suffix` per line.
- fish: `value<TAB>description` per line.
- elvish: JSON list of `{Value, Display, Description, CodeSuffix}`.
- xonsh: Python set literal of `RichCompletion` objects.
- powershell: JSON list of `{CompletionText, ListItemText, ToolTip}`.
- export: JSON dump of the invoked action, for debugging and other tools.
"""
from __future__ import annotations

import json
from typing import Callable

from compleat.action.action import InvokedAction
from compleat.exceptions import UnknownShellError

Serializer = Callable[[InvokedAction, str], str]

SERIALIZERS: dict[str, Serializer] = {}


def output_serializer(shell: str) -> Callable[[Serializer], Serializer]:
    def _register(func: Serializer) -> Serializer:
        SERIALIZERS[shell] = func
        return func

    return _register


def _suffix(invoked: InvokedAction) -> str:
    return "" if invoked.nospace else " "


def _single_line(text: str) -> str:
    return text.replace("\r", " ").replace("\n", " ")


@output_serializer("bash")
def bash_output_serializer(invoked: InvokedAction, current: str) -> str:
    suffix = _suffix(invoked)
    return "\n".join(
        _single_line(rv.value) + suffix
        for rv in invoked.raw_values
        if rv.value.startswith(current)
    )


@output_serializer("zsh")
def zsh_output_serializer(invoked: InvokedAction, current: str) -> str:
    suffix = _suffix(invoked)
    lines = []
    for rv in invoked.raw_values:
        fields = (rv.value, rv.display, rv.description, suffix)
        lines.append("\t".join(_single_line(f).replace("\t", " ") for f in fields))
    return "\n".join(lines)


@output_serializer("fish")
def fish_output_serializer(invoked: InvokedAction, current: str) -> str:
    lines = []
    for rv in invoked.raw_values:
        line = rv.value
        if rv.description:
            line = f"{line}\t{rv.description}"
        lines.append(_single_line(line))
    return "\n".join(lines)


@output_serializer("elvish")
def elvish_output_serializer(invoked: InvokedAction, current: str) -> str:
    suffix = _suffix(invoked)
    return json.dumps(
        [
            {
                "Value": rv.value,
                "Display": rv.display,
                "Description": rv.description,
                "CodeSuffix": suffix,
            }
            for rv in invoked.raw_values
        ]
    )


@output_serializer("xonsh")
def xonsh_output_serializer(invoked: InvokedAction, current: str) -> str:
    if not invoked.raw_values:
        return ""
    append_space = not invoked.nospace
    entries = [
        f"RichCompletion({rv.value!r}, display={rv.display!r}, "
        f"description={rv.description!r}, prefix_len=0, append_space={append_space})"
        for rv in invoked.raw_values
    ]
    return "{" + ",".join(entries) + "}"


@output_serializer("powershell")
def powershell_output_serializer(invoked: InvokedAction, current: str) -> str:
    suffix = _suffix(invoked)
    return json.dumps(
        [
            {
                "CompletionText": rv.value + suffix,
                "ListItemText": rv.display,
                "ToolTip": rv.description or rv.display,
            }
            for rv in invoked.raw_values
        ]
    )


@output_serializer("export")
def export_output_serializer(invoked: InvokedAction, current: str) -> str:
    return json.dumps(
        {
            "nospace": invoked.nospace,
            "skipcache": invoked.skipcache,
            "values": [rv.model_dump() for rv in invoked.raw_values],
        }
    )


def serialize(shell: str, invoked: InvokedAction, current: str = "") -> str:
    """
    Format `invoked` for `shell`.

    Raises:
        UnknownShellError: If no serializer is registered for `shell`.
    """
    serializer = SERIALIZERS.get(shell)
    if serializer is None:
        raise UnknownShellError(
            f"Unsupported shell '{shell}'. Must be one of: {', '.join(sorted(SERIALIZERS))}"
        )
    return serializer(invoked, current)
