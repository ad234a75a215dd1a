#!/usr/bin/env python
"""Interactive prompt using the completions of the demo command tree."""
from prompt_toolkit import PromptSession

from compleat.completer import ActionCompleter
from compleat.main.example import build_command, build_registry
from compleat.utils import setup_logging

setup_logging()

root = build_command()
session = PromptSession(completer=ActionCompleter(build_registry(root), root))

if __name__ == "__main__":
    while True:
        try:
            text = session.prompt("example> ")
        except (EOFError, KeyboardInterrupt):
            break
        print(f"You typed: {text}")
