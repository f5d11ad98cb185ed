"""Centralized internal error hierarchy.

Classes:
  InternalError        – Base for all internal errors.
  ParsingError         – Protocol line parsing issues.
  MessageParseError    – A single inbound line could not be parsed.
  ConfigurationError   – Session configuration could not be loaded or validated.

Parsing errors are local to one line: callers skip the line and keep the
session running. Transport errors are never wrapped here; they belong to the
client shell.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum


class InternalError(Exception):
    """Base class for all internal application errors with metadata support.

    Attributes:
        data: Dictionary containing arbitrary structured context data.

    Args:
        message: Descriptive error message.
        data: Optional mapping of additional context data.
    """

    data: dict[str, object]

    def __init__(
        self, message: str, *, data: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(message)
        # Copy into a plain dict to avoid unexpected mutations from caller.
        self.data = dict(data) if data else {}


class ParsingError(InternalError):
    """Exception raised for protocol parsing errors."""


class ParseFailure(Enum):
    """Why an inbound line was rejected by the parser."""

    EMPTY = "empty"
    MISSING_COMMAND = "missing_command"


class MessageParseError(ParsingError):
    """Raised by the message parser for a line that yields no message.

    Args:
        reason: The ParseFailure category.
        line: The offending input line, as received.
    """

    def __init__(self, reason: ParseFailure, line: str) -> None:
        super().__init__(
            f"Cannot parse line ({reason.value}): {line!r}",
            data={"reason": reason.value, "line": line},
        )
        self.reason = reason
        self.line = line


class ConfigurationError(InternalError):
    """Exception raised when the session configuration is missing or invalid."""


__all__ = [
    "InternalError",
    "ParsingError",
    "ParseFailure",
    "MessageParseError",
    "ConfigurationError",
]
