# Compleat Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Compleat.

Only configuration errors are raised as exceptions. Environment failures met
while producing candidates (unreadable directories, failing subprocesses) are
turned into message candidates and never leave the resolution engine.

All exceptions inherit from `CompleatError`, the base exception for the package.

Exception Hierarchy:
- CompleatError
    ├── RecursionLimitError
    ├── InvalidActionError
    ├── UnknownUIDError
    ├── CommandNotFoundError
    ├── FlagDefinitionError
    ├── UnknownShellError
    └── ConfigError
"""


class CompleatError(Exception):
    """Base exception for Compleat."""


class RecursionLimitError(CompleatError):
    """Exception raised when callback unwrapping exceeds the configured depth."""


class InvalidActionError(CompleatError):
    """Exception raised when an action is built from invalid input."""


class UnknownUIDError(CompleatError):
    """Exception raised when a UID does not address a registered action."""


class CommandNotFoundError(CompleatError):
    """Exception raised when a command path cannot be found in the command tree."""


class FlagDefinitionError(CompleatError):
    """Exception raised when a flag is defined with invalid settings."""


class UnknownShellError(CompleatError):
    """Exception raised when no formatter is registered for a shell."""


class ConfigError(CompleatError):
    """Exception raised when the configuration file cannot be loaded."""
