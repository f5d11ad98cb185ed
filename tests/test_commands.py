from lineirc.config.model import SessionConfig
from lineirc.irc.commands import (
    encode_line,
    format_command,
    join_command,
    pong_command,
    registration_commands,
)
from lineirc.irc.parser import parse_irc_message


def test_encode_line_appends_single_crlf():
    assert encode_line("JOIN #general") == b"JOIN #general\r\n"
    assert encode_line("") == b"\r\n"


def test_encode_line_is_utf8():
    assert encode_line("PRIVMSG #x :héllo") == "PRIVMSG #x :héllo\r\n".encode()


def test_format_command_marks_only_when_needed():
    assert format_command("PONG", "irc.example.com") == "PONG irc.example.com"
    assert format_command("PRIVMSG", "#x", "hello there") == "PRIVMSG #x :hello there"
    assert format_command("PONG", "") == "PONG :"
    assert format_command("PONG", ":odd") == "PONG ::odd"
    assert format_command("QUIT") == "QUIT"


def test_format_command_forced_trailing():
    assert format_command("USER", "bob", "0", "*", trailing="Bob") == "USER bob 0 * :Bob"


def test_formatted_commands_parse_back():
    line = format_command("PRIVMSG", "#x", "a :b c")
    assert parse_irc_message(line).params == ("#x", "a :b c")


def test_pong_and_join_helpers():
    assert pong_command("tok") == "PONG tok"
    assert join_command("#general") == "JOIN #general"


def test_registration_handshake_order():
    config = SessionConfig(nickname="user", realname="Real Name")
    assert registration_commands(config) == [
        "NICK user",
        "USER user 0 * :Real Name",
    ]


def test_registration_defaults_to_nickname():
    assert registration_commands(SessionConfig(nickname="bot"))[1] == "USER bot 0 * :bot"
