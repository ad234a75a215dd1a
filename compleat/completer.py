# Compleat Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides `ActionCompleter`, a Prompt Toolkit completer driven by the
registered actions of a command tree.

It lets interactive prompts reuse the completion logic written for shell
integration: the input buffer is split into words, resolved through
`CompletionRegistry.invoke()` exactly like a shell request, and the candidates
are yielded as Prompt Toolkit completions with their descriptions as menu meta
text.

Behavior:
- Candidates not starting with the current word are dropped.
- Values containing whitespace are quoted.
- Unbalanced quotes produce no completions.
"""

from __future__ import annotations

import shlex
from typing import Iterable

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from compleat.command import Command
from compleat.exceptions import CompleatError
from compleat.logger import logger
from compleat.registry import CompletionRegistry
from compleat.uid import UID_MARKER


class ActionCompleter(Completer):
    """
    Prompt Toolkit completer for the command line of `root`.

    The prompt input is expected to start with the subcommands of `root`, not
    with the program name itself.

    Args:
        registry (CompletionRegistry): Registered actions.
        root (Command): Root of the command tree.
    """

    def __init__(self, registry: CompletionRegistry, root: Command):
        self.registry = registry
        self.root = root

    def get_completions(self, document: Document, complete_event) -> Iterable[Completion]:
        """
        Compute completions for the current user input.

        Args:
            document (Document): The current Prompt Toolkit document (input buffer & cursor).
            complete_event: The triggering event (TAB key, menu display, etc.), not used here.

        Yields:
            Completion: One completion per matching candidate.
        """
        text = document.text_before_cursor
        try:
            words = shlex.split(text)
        except ValueError:
            return
        if not words or text.endswith((" ", "\t")):
            words.append("")
        stub = words[-1]

        try:
            invoked = self.registry.invoke(self.root, UID_MARKER, words)
        except CompleatError as error:
            logger.warning("Completion failed for %r: %s", text, error)
            return

        for raw_value in invoked.raw_values:
            if not raw_value.value.startswith(stub):
                continue
            yield Completion(
                self._ensure_quote(raw_value.value),
                start_position=-len(stub),
                display=raw_value.display,
                display_meta=raw_value.description or None,
            )

    def _ensure_quote(self, text: str) -> str:
        """
        Ensure that a suggestion is shell-safe by quoting if needed.

        Args:
            text (str): The input text to quote.

        Returns:
            str: The quoted text, suitable for shell command usage.
        """
        if " " in text or "\t" in text:
            return f'"{text}"'
        return text
