"""Outgoing command formatting (the line sink side of the protocol)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..constants import ENCODING, LINE_TERMINATOR

if TYPE_CHECKING:  # pragma: no cover
    from ..config.model import SessionConfig

PING = "PING"
PONG = "PONG"
PRIVMSG = "PRIVMSG"
JOIN = "JOIN"
PART = "PART"
NICK = "NICK"
USER = "USER"


def _needs_marker(param: str) -> bool:
    return not param or " " in param or param.startswith(":")


def format_command(verb: str, *params: str, trailing: str | None = None) -> str:
    """Build one outgoing line without its terminator.

    The last positional parameter is marked with ':' only when it would not
    survive whitespace tokenization; ``trailing`` is always marked.
    """
    parts = [verb]
    if params:
        *middle, last = params
        parts.extend(middle)
        if trailing is None and _needs_marker(last):
            parts.append(f":{last}")
        else:
            parts.append(last)
    if trailing is not None:
        parts.append(f":{trailing}")
    return " ".join(parts)


def encode_line(command: str) -> bytes:
    """Encode a command for the wire, appending exactly one CRLF."""
    return f"{command}{LINE_TERMINATOR}".encode(ENCODING)


def pong_command(token: str) -> str:
    return format_command(PONG, token)


def join_command(channel: str) -> str:
    return format_command(JOIN, channel)


def registration_commands(config: SessionConfig) -> list[str]:
    """NICK then USER, sent before any input is read."""
    return [
        format_command(NICK, config.nickname),
        format_command(USER, config.username, "0", "*", trailing=config.realname),
    ]
