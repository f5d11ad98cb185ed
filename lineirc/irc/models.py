"""Shared IRC data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import ClassVar


@dataclass(frozen=True, slots=True)
class Verb:
    """Alphabetic command token such as PRIVMSG or JOIN."""

    name: str

    @property
    def token(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Numeric:
    """Three-digit server reply code. Kept as a string: "001" is not 1."""

    code: str

    @property
    def token(self) -> str:
        return self.code


Command = Verb | Numeric


def command_from_token(token: str) -> Command:
    if len(token) == 3 and all("0" <= ch <= "9" for ch in token):
        return Numeric(token)
    return Verb(token)


def nick_from_origin(origin: str) -> str:
    """Nick part of a nick!user@host origin; the whole origin when there is no '!'."""
    return origin.split("!", 1)[0]


@dataclass(frozen=True, slots=True)
class IRCMessage:
    raw: str
    origin: str | None
    command: Command
    params: tuple[str, ...] = ()
    has_trailing: bool = False

    @property
    def trailing(self) -> str | None:
        return self.params[-1] if self.has_trailing else None

    @property
    def nick(self) -> str | None:
        return nick_from_origin(self.origin) if self.origin is not None else None


class SessionState(Enum):
    CONNECTING = auto()
    REGISTERED = auto()
    CLOSED = auto()


@dataclass(frozen=True, slots=True)
class Notification:
    """Observable event produced by dispatch, rendered by the logging layer."""

    event: ClassVar[tuple[str, str]] = ("irc", "event")


@dataclass(frozen=True, slots=True)
class ChatMessage(Notification):
    event: ClassVar[tuple[str, str]] = ("chat", "privmsg")
    target: str
    nick: str
    text: str


@dataclass(frozen=True, slots=True)
class UserJoined(Notification):
    event: ClassVar[tuple[str, str]] = ("chat", "join")
    nick: str
    channel: str


@dataclass(frozen=True, slots=True)
class UserLeft(Notification):
    event: ClassVar[tuple[str, str]] = ("chat", "part")
    nick: str
    channel: str


@dataclass(frozen=True, slots=True)
class Registered(Notification):
    event: ClassVar[tuple[str, str]] = ("irc", "registered")
    nick: str
    text: str


@dataclass(frozen=True, slots=True)
class NamesList(Notification):
    event: ClassVar[tuple[str, str]] = ("chat", "names")
    channel: str
    users: str


@dataclass(frozen=True, slots=True)
class NamesEnd(Notification):
    event: ClassVar[tuple[str, str]] = ("chat", "names_end")
    channel: str


@dataclass(frozen=True, slots=True)
class MotdStart(Notification):
    event: ClassVar[tuple[str, str]] = ("chat", "motd_start")


@dataclass(frozen=True, slots=True)
class MotdLine(Notification):
    event: ClassVar[tuple[str, str]] = ("chat", "motd")
    text: str


@dataclass(frozen=True, slots=True)
class MotdEnd(Notification):
    event: ClassVar[tuple[str, str]] = ("chat", "motd_end")


@dataclass(frozen=True, slots=True)
class ServerNotice(Notification):
    event: ClassVar[tuple[str, str]] = ("chat", "server_notice")
    code: str
    text: str


@dataclass(frozen=True, slots=True)
class UnhandledCommand(Notification):
    event: ClassVar[tuple[str, str]] = ("irc", "unhandled")
    command: str


@dataclass(frozen=True, slots=True)
class MalformedMessage(Notification):
    event: ClassVar[tuple[str, str]] = ("irc", "malformed")
    command: str
    reason: str


@dataclass(frozen=True, slots=True)
class ParseFailed(Notification):
    event: ClassVar[tuple[str, str]] = ("irc", "parse_failed")
    line: str
    reason: str


@dataclass(frozen=True, slots=True)
class StreamClosed(Notification):
    event: ClassVar[tuple[str, str]] = ("irc", "stream_closed")


@dataclass(frozen=True, slots=True)
class DispatchOutcome:
    """Outgoing command lines (no terminator) plus notifications for one message."""

    commands: tuple[str, ...] = ()
    notifications: tuple[Notification, ...] = ()

    @property
    def command(self) -> str | None:
        return self.commands[0] if self.commands else None


EMPTY_OUTCOME = DispatchOutcome()
