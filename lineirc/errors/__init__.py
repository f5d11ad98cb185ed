"""Internal error hierarchy."""

from .internal import (  # noqa: F401
    ConfigurationError,
    InternalError,
    MessageParseError,
    ParseFailure,
    ParsingError,
)

__all__ = [
    "ConfigurationError",
    "InternalError",
    "MessageParseError",
    "ParseFailure",
    "ParsingError",
]
