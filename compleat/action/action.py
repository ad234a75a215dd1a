# Compleat Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""action.py

Core action system for Compleat.

An `Action` describes how to produce completion candidates. It is either a
static batch of `RawValue` candidates or a callback that receives the request
`Context` and returns another `Action`, which may itself be a callback.

`Action.invoke()` resolves callbacks with an iterative trampoline until a static
batch is reached and returns an `InvokedAction`: the concrete candidates plus
the `nospace` and `skipcache` modifiers collected along the way. A flag set by
any action in the chain is set on the result.

`InvokedAction` offers the combinators used to build producers out of other
producers (`merge`, `filter`, `prefix`, `suffix`, `to_multi_parts_a`,
`suppress`). None of them mutate; each returns a new value.

Example:
    action = action_callback(lambda c: action_values("a", "b"))
    invoked = action.invoke(Context(callback_value="a"))
    invoked.prefix("x/").raw_values
    # (RawValue(value='x/a', ...), RawValue(value='x/b', ...))
"""
from __future__ import annotations

import os
import re
from dataclasses import dataclass, field, replace
from typing import Callable

from compleat.action.raw_value import RawValue
from compleat.context import Context
from compleat.exceptions import RecursionLimitError
from compleat.logger import logger

MESSAGE_FILLER = "_"
MESSAGE_MARKER = "ERR"

CompletionCallback = Callable[[Context], "Action"]


@dataclass(frozen=True)
class Action:
    """
    Lazy description of a completion candidate source.

    Attributes:
        raw_values (tuple[RawValue, ...]): Candidates of a static action.
        callback (CompletionCallback | None): Producer of the next action, if any.
        nospace (bool): Do not append a separator after insertion.
        skipcache (bool): Do not cache the result across requests.
    """

    raw_values: tuple[RawValue, ...] = ()
    callback: CompletionCallback | None = field(default=None, compare=False)
    nospace: bool = False
    skipcache: bool = False

    @property
    def is_static(self) -> bool:
        return self.callback is None

    def invoke(
        self, context: Context | None = None, max_depth: int | None = None
    ) -> InvokedAction:
        """
        Resolve the action against `context`.

        Every callback receives a context whose `depth` counts the callbacks
        unwrapped so far, so resolutions nested inside callbacks share one
        bound with the outer one.

        Args:
            context (Context | None): Request state, defaults to an empty one.
            max_depth (int | None): Replaces `context.max_depth` when given.

        Raises:
            RecursionLimitError: If more than `max_depth` callbacks are unwrapped.
        """
        if context is None:
            context = Context()
        if max_depth is not None:
            context = context.model_copy(update={"max_depth": max_depth})
        action = self
        nospace = self.nospace
        skipcache = self.skipcache
        depth = context.depth
        while action.callback is not None:
            if depth >= context.max_depth:
                raise RecursionLimitError(
                    f"Callback chain exceeded maximum depth of {context.max_depth}"
                )
            depth += 1
            action = action.callback(context.model_copy(update={"depth": depth}))
            nospace = nospace or action.nospace
            skipcache = skipcache or action.skipcache
        if depth > context.depth:
            logger.debug(
                "Resolved '%s' after %d callback(s) into %d candidate(s)",
                context.callback_value,
                depth - context.depth,
                len(action.raw_values),
            )
        return InvokedAction(action.raw_values, nospace=nospace, skipcache=skipcache)

    def no_space(self, enabled: bool = True) -> Action:
        return replace(self, nospace=self.nospace or enabled)

    def skip_cache(self, enabled: bool = True) -> Action:
        return replace(self, skipcache=self.skipcache or enabled)

    def chdir(self, directory: str) -> Action:
        """
        Resolve this action with the context directory set to `directory`.

        Relative directories are joined to the current context directory. The
        process working directory is left untouched.
        """
        from compleat.action.core_actions import action_callback, action_message

        def _chdir(context: Context) -> Action:
            target = context.abs_path(os.path.expanduser(directory))
            try:
                if not os.path.isdir(target):
                    os.stat(target)
                    return action_message(f"{directory} is not a directory")
            except OSError as error:
                logger.warning("Cannot change into '%s': %s", directory, error)
                return action_message(str(error))
            return self.invoke(context.model_copy(update={"dir": target})).to_a()

        return action_callback(_chdir)

    def suppress(self, *patterns: str) -> Action:
        """Hide message candidates whose text matches any of the regular expressions."""
        from compleat.action.core_actions import action_callback

        def _suppress(context: Context) -> Action:
            return self.invoke(context).suppress(*patterns).to_a()

        return action_callback(_suppress)


@dataclass(frozen=True)
class InvokedAction:
    """Resolved candidates of an action plus its modifiers."""

    raw_values: tuple[RawValue, ...] = ()
    nospace: bool = False
    skipcache: bool = False

    def merge(self, *others: InvokedAction) -> InvokedAction:
        """Concatenate candidates in order; modifiers are OR-ed."""
        raw_values = list(self.raw_values)
        nospace = self.nospace
        skipcache = self.skipcache
        for other in others:
            raw_values.extend(other.raw_values)
            nospace = nospace or other.nospace
            skipcache = skipcache or other.skipcache
        return InvokedAction(tuple(raw_values), nospace=nospace, skipcache=skipcache)

    def filter(self, displays: list[str] | set[str] | tuple[str, ...]) -> InvokedAction:
        """Drop candidates whose display is in `displays`."""
        excluded = set(displays)
        return replace(
            self,
            raw_values=tuple(rv for rv in self.raw_values if rv.display not in excluded),
        )

    def prefix(self, text: str) -> InvokedAction:
        return replace(
            self,
            raw_values=tuple(
                rv.model_copy(
                    update={"value": text + rv.value, "display": text + rv.display}
                )
                for rv in self.raw_values
            ),
        )

    def suffix(self, text: str) -> InvokedAction:
        return replace(
            self,
            raw_values=tuple(
                rv.model_copy(
                    update={"value": rv.value + text, "display": rv.display + text}
                )
                for rv in self.raw_values
            ),
        )

    def suppress(self, *patterns: str) -> InvokedAction:
        """
        Remove message candidates whose text matches one of `patterns`.

        The filler candidate accompanying a message is removed with it.
        """
        expressions = [re.compile(pattern) for pattern in patterns]
        kept: list[RawValue] = []
        suppressed = False
        for rv in self.raw_values:
            if rv.display.endswith(MESSAGE_MARKER) and any(
                expression.search(rv.description) for expression in expressions
            ):
                suppressed = True
                continue
            kept.append(rv)
        if suppressed:
            kept = [
                rv
                for rv in kept
                if not (rv.display.endswith(MESSAGE_FILLER) and rv.description == "")
            ]
        return replace(self, raw_values=tuple(kept))

    def to_multi_parts_a(self, divider: str) -> Action:
        """
        Show only the trailing segment of each value in the menu.

        The value is kept whole. A value ending with `divider` keeps it on its
        display (`a/b/` shows as `b/`). The result is never space-terminated.
        """
        raw_values = []
        for rv in self.raw_values:
            display = rv.value
            if divider:
                trailing = divider if display.endswith(divider) else ""
                stem = display[: len(display) - len(trailing)]
                display = stem.rsplit(divider, 1)[-1] + trailing
            raw_values.append(rv.model_copy(update={"display": display}))
        return Action(tuple(raw_values), nospace=True, skipcache=self.skipcache)

    def to_a(self) -> Action:
        """Wrap the resolved candidates back into a static action."""
        return Action(self.raw_values, nospace=self.nospace, skipcache=self.skipcache)
