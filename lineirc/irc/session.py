"""Per-connection session: parse + dispatch with explicit registration state."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import asdict
from typing import TYPE_CHECKING

from ..errors import MessageParseError
from ..logs.logger import logger
from .dispatcher import close, dispatch
from .models import (
    DispatchOutcome,
    MalformedMessage,
    NamesEnd,
    Notification,
    ParseFailed,
    SessionState,
    UnhandledCommand,
)
from .parser import parse_irc_message

if TYPE_CHECKING:  # pragma: no cover
    from ..config.model import SessionConfig

_WARNINGS = (ParseFailed, MalformedMessage)
_TRACES = (UnhandledCommand, NamesEnd)


class IRCSession:
    """Feeds lines through the parser and dispatcher in order.

    One line is fully dispatched before the next is considered. A line that
    fails to parse becomes a ParseFailed notification and never stops the
    session.
    """

    def __init__(self, config: SessionConfig) -> None:
        self.config = config
        self.state = SessionState.CONNECTING

    @property
    def closed(self) -> bool:
        return self.state is SessionState.CLOSED

    def _set_state(self, new_state: SessionState) -> None:
        if self.state != new_state:
            logger.log_event(
                "irc",
                "state_change",
                level=logging.DEBUG,
                user=self.config.nickname,
                old_state=self.state.name,
                new_state=new_state.name,
            )
            self.state = new_state

    def feed(self, line: str) -> DispatchOutcome:
        try:
            message = parse_irc_message(line)
        except MessageParseError as e:
            return DispatchOutcome(
                notifications=(ParseFailed(line=line, reason=e.reason.value),)
            )
        outcome, new_state = dispatch(message, self.config, self.state)
        self._set_state(new_state)
        return outcome

    def close(self) -> DispatchOutcome:
        outcome, new_state = close(self.state)
        self._set_state(new_state)
        return outcome

    def process(self, lines: Iterable[str]) -> Iterator[DispatchOutcome]:
        """Dispatch every line from a synchronous source, then close."""
        for line in lines:
            if self.closed:
                return
            yield self.feed(line)
        yield self.close()


def log_notification(notification: Notification, user: str | None = None) -> None:
    """Render a notification through the structured event logger."""
    domain, action = notification.event
    if isinstance(notification, _WARNINGS):
        level = logging.WARNING
    elif isinstance(notification, _TRACES):
        level = logging.DEBUG
    else:
        level = logging.INFO
    fields = asdict(notification)
    if "target" in fields:
        fields["channel"] = fields["target"]
    logger.log_event(domain, action, level=level, user=user, **fields)
