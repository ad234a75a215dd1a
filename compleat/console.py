# Compleat Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instances for Compleat.

Completion output goes to stdout and is parsed by the shell snippet, so every
human-facing message is printed to `err_console` instead.
"""
from rich.console import Console

console = Console(color_system="truecolor")
err_console = Console(color_system="truecolor", stderr=True)
