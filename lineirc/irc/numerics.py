"""Numeric reply classification."""

from __future__ import annotations

from collections.abc import Sequence

from .models import (
    MotdEnd,
    MotdLine,
    MotdStart,
    NamesEnd,
    NamesList,
    Notification,
    ServerNotice,
)

RPL_WELCOME = "001"
RPL_NAMREPLY = "353"
RPL_ENDOFNAMES = "366"
RPL_MOTD = "372"
RPL_MOTDSTART = "375"
RPL_ENDOFMOTD = "376"


def classify_numeric(
    code: str, params: Sequence[str], trailing: str | None = None
) -> Notification | None:
    """Map a numeric reply to a notification, or None when it is not worth showing.

    ``trailing`` is the verbatim trailing parameter when the line had one.
    """
    if code == RPL_NAMREPLY and len(params) >= 4:
        # <me> <symbol> <channel> :<names>
        return NamesList(channel=params[2], users=params[3])
    if code == RPL_ENDOFNAMES and len(params) >= 2:
        return NamesEnd(channel=params[1])
    if code == RPL_MOTD:
        return MotdLine(text=trailing) if trailing is not None else None
    if code == RPL_MOTDSTART:
        return MotdStart()
    if code == RPL_ENDOFMOTD:
        return MotdEnd()
    # Single-character and empty replies are noise.
    if params and len(params[-1]) > 1:
        return ServerNotice(code=code, text=params[-1])
    return None
