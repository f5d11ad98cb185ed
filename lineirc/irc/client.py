"""Async IRC client: the transport shell around IRCSession."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from ..constants import CONNECT_TIMEOUT, ENCODING
from ..logs.logger import logger
from .commands import PING, PONG, encode_line, registration_commands
from .session import IRCSession, log_notification

if TYPE_CHECKING:  # pragma: no cover
    from ..config.model import SessionConfig


class AsyncIRCClient:
    def __init__(self, config: SessionConfig, connect_timeout: float = CONNECT_TIMEOUT):
        self.config = config
        self.connect_timeout = connect_timeout
        self.session = IRCSession(config)
        self.reader: asyncio.StreamReader | None = None
        self.writer: asyncio.StreamWriter | None = None

    @property
    def nickname(self) -> str:
        return self.config.nickname

    async def connect(self) -> bool:
        """Open the connection and send NICK/USER. Returns False on failure."""
        logger.log_event(
            "irc",
            "connect_start",
            user=self.nickname,
            host=self.config.host,
            port=self.config.port,
        )
        try:
            self.reader, self.writer = await asyncio.wait_for(
                asyncio.open_connection(self.config.host, self.config.port),
                timeout=self.connect_timeout,
            )
        except TimeoutError:
            logger.log_event(
                "irc",
                "connect_timeout",
                level=logging.ERROR,
                user=self.nickname,
                timeout=self.connect_timeout,
            )
            return False
        except OSError as e:
            logger.log_event(
                "irc",
                "connect_network_error",
                level=logging.ERROR,
                user=self.nickname,
                error=str(e),
            )
            return False
        logger.log_event(
            "irc", "connection_established", level=logging.DEBUG, user=self.nickname
        )
        await self.register()
        return True

    async def register(self) -> None:
        for command in registration_commands(self.config):
            await self.send_line(command)
        logger.log_event(
            "irc", "registration_sent", user=self.nickname, nickname=self.nickname
        )

    async def send_line(self, command: str) -> None:
        if not self.writer:
            return
        self.writer.write(encode_line(command))
        await self.writer.drain()
        action = "pong" if command.startswith(PONG) else "send"
        logger.log_event(
            "irc", action, level=logging.DEBUG, user=self.nickname, line=command
        )

    async def handle_line(self, line: str) -> None:
        """Dispatch one line and transmit its outgoing commands before returning."""
        if not line.startswith(PING):
            logger.log_event(
                "irc", "raw", level=logging.DEBUG, user=self.nickname, raw=line
            )
        outcome = self.session.feed(line)
        for command in outcome.commands:
            await self.send_line(command)
        for notification in outcome.notifications:
            log_notification(notification, self.nickname)

    async def listen(self) -> None:
        """Read lines until end-of-stream, then close the session once."""
        if not self.reader:
            return
        try:
            while not self.session.closed:
                data = await self.reader.readline()
                if not data:
                    break
                line = data.decode(ENCODING, errors="replace").rstrip("\r\n")
                await self.handle_line(line)
        except (OSError, ValueError) as e:  # ValueError: line over the reader limit
            logger.log_event(
                "irc",
                "connection_error",
                level=logging.ERROR,
                user=self.nickname,
                error=str(e),
            )
        finally:
            for notification in self.session.close().notifications:
                log_notification(notification, self.nickname)

    async def disconnect(self) -> None:
        if self.writer:
            writer, self.writer = self.writer, None
            writer.close()
            try:
                await writer.wait_closed()
            except OSError as e:
                logger.log_event(
                    "irc",
                    "write_error",
                    level=logging.DEBUG,
                    user=self.nickname,
                    error=str(e),
                )
        self.reader = None
        logger.log_event("irc", "disconnected", level=logging.DEBUG, user=self.nickname)

    async def run(self) -> bool:
        """Connect, register, and process the stream until it ends."""
        if not await self.connect():
            return False
        try:
            await self.listen()
        finally:
            await self.disconnect()
        return True
