"""Application entry point: load config, run the client until the stream ends."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from .config import get_configuration
from .config.model import SessionConfig
from .errors import ConfigurationError
from .irc.client import AsyncIRCClient
from .logs.logger import logger


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="lineirc", description="Minimal IRC client")
    parser.add_argument("-c", "--config", help="path to the JSON config file")
    parser.add_argument(
        "--check-config",
        action="store_true",
        help="validate the configuration and exit",
    )
    return parser.parse_args(argv)


async def main(config: SessionConfig) -> bool:
    logger.log_event("app", "start")
    client = AsyncIRCClient(config)
    try:
        return await client.run()
    finally:
        logger.log_event("app", "shutdown")


def run(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    try:
        config = get_configuration(args.config)
    except ConfigurationError as e:
        logger.log_event("app", "config_invalid", level=logging.ERROR, error=str(e))
        sys.exit(1)

    if args.check_config:
        logger.log_event(
            "app",
            "config_ok",
            nickname=config.nickname,
            host=config.host,
            port=config.port,
        )
        sys.exit(0)

    try:
        ok = asyncio.run(main(config))
    except KeyboardInterrupt:
        logger.log_event("app", "interrupted", level=logging.WARNING)
        sys.exit(0)
    except Exception as e:  # noqa: BLE001
        logger.log_event(
            "app", "fatal", level=logging.CRITICAL, exc_info=True, error=str(e)
        )
        sys.exit(1)
    sys.exit(0 if ok else 1)
