"""Protocol dispatch: decide what to send back and what to report for one message."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .commands import JOIN, PART, PING, PRIVMSG, join_command, pong_command
from .models import (
    EMPTY_OUTCOME,
    ChatMessage,
    DispatchOutcome,
    IRCMessage,
    MalformedMessage,
    Notification,
    Registered,
    SessionState,
    StreamClosed,
    UnhandledCommand,
    UserJoined,
    UserLeft,
    Verb,
)
from .numerics import RPL_WELCOME, classify_numeric

if TYPE_CHECKING:  # pragma: no cover
    from ..config.model import SessionConfig

# Minimum parameter count per handled verb
REQUIRED_PARAMS = {PING: 1, PRIVMSG: 2, JOIN: 1, PART: 1}


def _notify(*notifications: Notification | None) -> DispatchOutcome:
    kept = tuple(n for n in notifications if n is not None)
    return DispatchOutcome(notifications=kept)


def dispatch(
    message: IRCMessage, config: SessionConfig, state: SessionState
) -> tuple[DispatchOutcome, SessionState]:
    """Dispatch one parsed message.

    Returns the outcome together with the (possibly updated) session state.
    Never performs I/O.
    """
    if state is SessionState.CLOSED:
        return EMPTY_OUTCOME, state
    command = message.command
    if isinstance(command, Verb):
        return _dispatch_verb(command.name, message), state
    if command.code == RPL_WELCOME and state is SessionState.CONNECTING:
        return _handle_welcome(message, config), SessionState.REGISTERED
    notification = classify_numeric(command.code, message.params, message.trailing)
    return _notify(notification), state


def _dispatch_verb(name: str, message: IRCMessage) -> DispatchOutcome:
    required = REQUIRED_PARAMS.get(name)
    if required is None:
        return _notify(UnhandledCommand(command=name))
    if len(message.params) < required:
        return _notify(
            MalformedMessage(
                command=name,
                reason=f"expected {required} parameter(s), got {len(message.params)}",
            )
        )

    params = message.params
    if name == PING:
        return DispatchOutcome(commands=(pong_command(params[0]),))
    nick = message.nick
    if nick is None:
        return EMPTY_OUTCOME
    if name == PRIVMSG:
        return _notify(ChatMessage(target=params[0], nick=nick, text=params[1]))
    if name == JOIN:
        return _notify(UserJoined(nick=nick, channel=params[0]))
    return _notify(UserLeft(nick=nick, channel=params[0]))


def _handle_welcome(message: IRCMessage, config: SessionConfig) -> DispatchOutcome:
    params = message.params
    registered = Registered(
        nick=params[0] if params else config.nickname,
        text=params[-1] if len(params) > 1 else "",
    )
    channel = config.first_channel
    commands = (join_command(channel),) if channel else ()
    return DispatchOutcome(commands=commands, notifications=(registered,))


def close(state: SessionState) -> tuple[DispatchOutcome, SessionState]:
    """Signal end-of-stream. Only the first close reports StreamClosed."""
    if state is SessionState.CLOSED:
        return EMPTY_OUTCOME, state
    return _notify(StreamClosed()), SessionState.CLOSED
