"""IRC message parsing utilities."""

from __future__ import annotations

from ..errors import MessageParseError, ParseFailure
from .models import IRCMessage, command_from_token

TRAILING_MARKER = " :"
PREFIX_MARKER = ":"


def parse_irc_message(raw_line: str) -> IRCMessage:
    """Parse one protocol line into an IRCMessage.

    The first " :" marks the trailing parameter, which runs verbatim to the end
    of the line. Everything before it is split on whitespace runs: an optional
    ":origin" token, the command, then the middle parameters.

    Raises:
        MessageParseError: EMPTY for blank input, MISSING_COMMAND when no
            command token follows the origin.
    """
    line = raw_line.strip()
    if not line:
        raise MessageParseError(ParseFailure.EMPTY, raw_line)

    head, sep, trailing = line.partition(TRAILING_MARKER)
    tokens = head.split()

    origin: str | None = None
    if tokens and tokens[0].startswith(PREFIX_MARKER):
        origin = tokens.pop(0)[1:] or None
    if not tokens:
        raise MessageParseError(ParseFailure.MISSING_COMMAND, raw_line)

    params = tokens[1:]
    if sep:
        params.append(trailing)

    return IRCMessage(
        raw=raw_line,
        origin=origin,
        command=command_from_token(tokens[0]),
        params=tuple(params),
        has_trailing=bool(sep),
    )
