import pytest

from lineirc.config.model import SessionConfig
from lineirc.irc.session import IRCSession


@pytest.fixture(autouse=True)
def _concise_logging(monkeypatch):
    """Keep log rendering in concise mode regardless of the caller's DEBUG env."""
    monkeypatch.delenv("DEBUG", raising=False)


@pytest.fixture
def config() -> SessionConfig:
    return SessionConfig(
        host="irc.example.com",
        port=6667,
        nickname="mynick",
        channels=["#general", "#random"],
    )


@pytest.fixture
def session(config: SessionConfig) -> IRCSession:
    return IRCSession(config)


class FakeWriter:
    """Captures bytes written by the client instead of sending them."""

    def __init__(self) -> None:
        self.data = b""
        self.closed = False
        self.drains = 0

    def write(self, data: bytes) -> None:
        self.data += data

    async def drain(self) -> None:
        self.drains += 1

    def close(self) -> None:
        self.closed = True

    async def wait_closed(self) -> None:
        return None

    @property
    def lines(self) -> list[str]:
        return [line for line in self.data.decode("utf-8").split("\r\n") if line]


@pytest.fixture
def fake_writer() -> FakeWriter:
    return FakeWriter()
