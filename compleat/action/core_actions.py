# Compleat Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""core_actions.py

Basic action constructors.

- `action_values` / `action_values_described`: fixed candidate batches.
- `action_callback`: defer candidate creation to completion time.
- `action_message`: report an error or hint in place of candidates.
- `action_multi_parts`: complete one segment of a delimiter-joined value.
- `batch`: resolve several actions and merge their candidates.
"""
from __future__ import annotations

from dataclasses import dataclass

from compleat.action.action import (
    MESSAGE_FILLER,
    MESSAGE_MARKER,
    Action,
    CompletionCallback,
    InvokedAction,
)
from compleat.action.raw_value import RawValue
from compleat.context import Context
from compleat.exceptions import InvalidActionError


def action_callback(callback: CompletionCallback) -> Action:
    """Invoke `callback` with the request context during completion."""
    if not callable(callback):
        raise InvalidActionError(f"{callback!r} is not callable")
    return Action(callback=callback)


def action_raw_values(*raw_values: RawValue) -> Action:
    return Action(tuple(raw_values))


def action_values(*values: str) -> Action:
    """Complete the given values."""
    return action_raw_values(*(RawValue.of(value) for value in values))


def action_values_described(*values: str) -> Action:
    """Complete `(value, description)` pairs given as a flat sequence."""
    if len(values) % 2:
        raise InvalidActionError(
            "action_values_described expects (value, description) pairs, "
            f"got {len(values)} items"
        )
    return action_raw_values(
        *(
            RawValue.of(values[index], values[index + 1])
            for index in range(0, len(values), 2)
        )
    )


def action_bool() -> Action:
    return action_values("true", "false")


def action_message(message: str) -> Action:
    """
    Display `message` where no candidates can be generated.

    The message is represented as a filler candidate plus a marker candidate
    carrying the text as its description. Both are prefixed with the current
    word so shells filtering by prefix keep them.
    """

    def _message(context: Context) -> Action:
        return (
            action_values_described(MESSAGE_FILLER, "", MESSAGE_MARKER, message)
            .invoke(context)
            .prefix(context.callback_value)
            .to_a()
            .no_space()
            .skip_cache()
        )

    return action_callback(_message)


def action_multi_parts(divider: str, callback: CompletionCallback) -> Action:
    """
    Complete the segment after the last `divider` of the current word.

    `callback` receives a context whose `callback_value` is the segment being
    completed and whose `parts` are the segments already typed. Its candidates
    are prefixed with the typed portion again.
    """

    def _multi_parts(context: Context) -> Action:
        prefix = ""
        current = context.callback_value
        parts: list[str] = []
        if divider:
            index = context.callback_value.rfind(divider)
            if index != -1:
                prefix = context.callback_value[: index + len(divider)]
                current = context.callback_value[index + len(divider) :]
                parts = prefix.split(divider)[:-1]

        narrowed = context.narrow(current, parts)
        return callback(narrowed).invoke(narrowed).prefix(prefix).to_a().no_space()

    return action_callback(_multi_parts)


@dataclass(frozen=True)
class Batch:
    """A group of actions resolved against the same context."""

    actions: tuple[Action, ...]

    def invoke(self, context: Context | None = None) -> InvokedAction:
        invoked = [action.invoke(context) for action in self.actions]
        if not invoked:
            return InvokedAction()
        return invoked[0].merge(*invoked[1:])

    def to_a(self) -> Action:
        return action_callback(lambda context: self.invoke(context).to_a())


def batch(*actions: Action) -> Batch:
    return Batch(tuple(actions))

