# Compleat Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Request-time state threaded through action resolution.

`Context` is immutable. Producers that need a different view of the request
(multi-part completion narrowing the word being completed, `Action.chdir`
switching the working directory) derive a new instance with `narrow()` or
`model_copy()`; the context they were handed is never changed, so no state
leaks between nested resolution steps or across requests.
"""
from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field

MAX_CALLBACK_DEPTH = 100


class Context(BaseModel):
    """
    State of one completion request.

    Attributes:
        callback_value (str): Literal text of the word being completed.
        parts (tuple[str, ...]): Already typed segments of a multi-part value.
        args (tuple[str, ...]): Positional arguments typed before the current word.
        dir (str): Directory relative paths are resolved in. Empty means the
                   process working directory.
        depth (int): Callbacks unwrapped so far in this request, nested
                     resolutions included.
        max_depth (int): Callbacks that may be unwrapped before resolution fails.
    """

    callback_value: str = ""
    parts: tuple[str, ...] = Field(default_factory=tuple)
    args: tuple[str, ...] = Field(default_factory=tuple)
    dir: str = ""
    depth: int = 0
    max_depth: int = MAX_CALLBACK_DEPTH

    model_config = ConfigDict(frozen=True)

    def narrow(self, callback_value: str, parts: tuple[str, ...] | list[str]) -> Context:
        """Return a copy completing only `callback_value` with the given prior parts."""
        return self.model_copy(
            update={"callback_value": callback_value, "parts": tuple(parts)}
        )

    def abs_path(self, path: str) -> str:
        """Resolve `path` against the context directory."""
        if os.path.isabs(path):
            return path
        if self.dir:
            return os.path.join(self.dir, path)
        return path
