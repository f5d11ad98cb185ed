from __future__ import annotations

import pytest

from lineirc.config.model import SessionConfig
from lineirc.irc.dispatcher import close, dispatch
from lineirc.irc.models import (
    ChatMessage,
    MalformedMessage,
    Registered,
    ServerNotice,
    SessionState,
    StreamClosed,
    UnhandledCommand,
    UserJoined,
    UserLeft,
)
from lineirc.irc.parser import parse_irc_message

CONNECTING = SessionState.CONNECTING
REGISTERED = SessionState.REGISTERED


def run(line: str, config: SessionConfig, state: SessionState = REGISTERED):
    return dispatch(parse_irc_message(line), config, state)


def test_ping_pong_response(config):
    outcome, state = run("PING :irc.example.com", config)
    assert outcome.command == "PONG irc.example.com"
    assert outcome.commands == ("PONG irc.example.com",)
    assert outcome.notifications == ()
    assert state is REGISTERED


def test_ping_answered_before_registration(config):
    outcome, state = run("PING :tok", config, CONNECTING)
    assert outcome.command == "PONG tok"
    assert state is CONNECTING


def test_ping_echoes_only_first_param(config):
    outcome, _ = run("PING one two", config)
    assert outcome.command == "PONG one"


def test_ping_without_params_is_malformed(config):
    outcome, _ = run("PING", config)
    assert outcome.command is None
    assert isinstance(outcome.notifications[0], MalformedMessage)
    assert outcome.notifications[0].command == "PING"


def test_welcome_registers_and_joins_first_channel(config):
    outcome, state = run(":server 001 mynick :Welcome", config, CONNECTING)
    assert state is REGISTERED
    assert outcome.commands == ("JOIN #general",)
    assert outcome.notifications == (Registered(nick="mynick", text="Welcome"),)


def test_welcome_without_channels_sends_nothing():
    config = SessionConfig(nickname="solo", channels=[])
    outcome, state = run(":server 001 solo :Welcome", config, CONNECTING)
    assert state is REGISTERED
    assert outcome.command is None


def test_second_welcome_does_not_rejoin(config):
    outcome, state = run(":server 001 mynick :Welcome again", config)
    assert state is REGISTERED
    assert outcome.command is None
    assert outcome.notifications == (ServerNotice(code="001", text="Welcome again"),)


def test_privmsg_notification(config):
    outcome, _ = run(":nick!user@host PRIVMSG #general :hello there", config)
    assert outcome.command is None
    assert outcome.notifications == (
        ChatMessage(target="#general", nick="nick", text="hello there"),
    )


def test_privmsg_without_origin_is_silent(config):
    outcome, _ = run("PRIVMSG #general :hello", config)
    assert outcome.command is None
    assert outcome.notifications == ()


def test_privmsg_missing_text_is_malformed(config):
    outcome, _ = run(":nick!u@h PRIVMSG #general", config)
    assert outcome.notifications == (
        MalformedMessage(command="PRIVMSG", reason="expected 2 parameter(s), got 1"),
    )


def test_join_and_part(config):
    joined, _ = run(":a!b@c JOIN #x", config)
    left, _ = run(":a PART #x :bye", config)
    assert joined.notifications == (UserJoined(nick="a", channel="#x"),)
    assert left.notifications == (UserLeft(nick="a", channel="#x"),)


def test_join_without_origin_is_silent(config):
    outcome, _ = run("JOIN #x", config)
    assert outcome.notifications == ()
    assert outcome.command is None


def test_verb_matching_is_case_sensitive(config):
    outcome, _ = run("ping :tok", config)
    assert outcome.command is None
    assert outcome.notifications == (UnhandledCommand(command="ping"),)


@pytest.mark.parametrize("line", [":srv NOTICE * :hi", ":x!y@z QUIT :gone", "CAP LS"])
def test_unknown_verbs_are_reported(config, line):
    message = parse_irc_message(line)
    outcome, _ = dispatch(message, config, REGISTERED)
    assert outcome.notifications == (UnhandledCommand(command=message.command.token),)


def test_closed_session_ignores_messages(config):
    outcome, state = run("PING :tok", config, SessionState.CLOSED)
    assert outcome.command is None
    assert outcome.notifications == ()
    assert state is SessionState.CLOSED


def test_close_transitions_once():
    outcome, state = close(REGISTERED)
    assert state is SessionState.CLOSED
    assert outcome.command is None
    assert outcome.notifications == (StreamClosed(),)
    again, state = close(state)
    assert again.notifications == ()
    assert state is SessionState.CLOSED
