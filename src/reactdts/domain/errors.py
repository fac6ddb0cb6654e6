from __future__ import annotations

"""
Domain Exception Hierarchy.

Every failure raised by the generator derives from ReactDtsError so that
callers can separate tool errors from unexpected interpreter failures.
"""

from typing import Optional


class ReactDtsError(Exception):
    """Base class for all errors raised by the declaration generator."""


class ParseError(ReactDtsError):
    """
    Raised when the component source cannot be parsed.

    Attributes:
        line: 1-based line of the first offending token, if known.
        column: 1-based column of the first offending token, if known.
    """

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None) -> None:
        self.line = line
        self.column = column
        if line is not None and column is not None:
            message = f"{message} ({line}:{column})"
        super().__init__(message)


class MissingFlagError(ReactDtsError):
    """Raised by the CLI layer when a mandatory option was not supplied."""

    def __init__(self, flag: str) -> None:
        self.flag = flag
        super().__init__(f"Failed to specify --{flag} parameter")


class WriterStateError(ReactDtsError):
    """Raised on unbalanced block closing or writes after finalization."""


class ConfigError(ReactDtsError):
    """Raised when a configuration file cannot be read or is malformed."""
