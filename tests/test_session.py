from __future__ import annotations

from lineirc.irc.models import (
    ChatMessage,
    ParseFailed,
    SessionState,
    StreamClosed,
)


def test_session_starts_connecting(session):
    assert session.state is SessionState.CONNECTING
    assert not session.closed


def test_welcome_moves_session_to_registered(session):
    outcome = session.feed(":server 001 mynick :Welcome")
    assert outcome.command == "JOIN #general"
    assert session.state is SessionState.REGISTERED


def test_parse_failures_are_skipped(session):
    for line in ["", "   ", ":"]:
        outcome = session.feed(line)
        assert outcome.command is None
        assert len(outcome.notifications) == 1
        assert isinstance(outcome.notifications[0], ParseFailed)
    assert session.state is SessionState.CONNECTING
    # The session keeps going after malformed lines.
    assert session.feed("PING :still-here").command == "PONG still-here"


def test_parse_failure_reason_is_reported(session):
    outcome = session.feed(":server")
    assert outcome.notifications == (
        ParseFailed(line=":server", reason="missing_command"),
    )


def test_close_is_reported_once(session):
    assert session.close().notifications == (StreamClosed(),)
    assert session.closed
    assert session.close().notifications == ()
    assert session.feed("PING :x").command is None


def test_process_drives_lines_in_order_then_closes(session):
    lines = [
        "PING :one",
        ":server 001 mynick :Welcome",
        "",
        ":nick!u@h PRIVMSG #general :hi",
        "PING :two",
    ]
    outcomes = list(session.process(lines))
    assert [o.command for o in outcomes] == [
        "PONG one",
        "JOIN #general",
        None,
        None,
        "PONG two",
        None,
    ]
    assert outcomes[3].notifications == (
        ChatMessage(target="#general", nick="nick", text="hi"),
    )
    assert outcomes[-1].notifications == (StreamClosed(),)
    assert session.closed


def test_process_after_close_yields_nothing(session):
    session.close()
    assert list(session.process(["PING :x"])) == []
