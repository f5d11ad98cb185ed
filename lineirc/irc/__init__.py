"""IRC subsystem package.

Contains the message model, parser, dispatcher, numeric reply handling,
session and async client modules.
"""

from .client import AsyncIRCClient  # noqa: F401
from .commands import encode_line, format_command, registration_commands  # noqa: F401
from .dispatcher import close, dispatch  # noqa: F401
from .models import DispatchOutcome, IRCMessage, Numeric, SessionState, Verb  # noqa: F401
from .numerics import classify_numeric  # noqa: F401
from .parser import parse_irc_message  # noqa: F401
from .session import IRCSession  # noqa: F401

__all__ = [
    "AsyncIRCClient",
    "DispatchOutcome",
    "IRCMessage",
    "IRCSession",
    "Numeric",
    "SessionState",
    "Verb",
    "classify_numeric",
    "close",
    "dispatch",
    "encode_line",
    "format_command",
    "parse_irc_message",
    "registration_commands",
]
