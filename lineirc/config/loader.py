"""Configuration loading utilities."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from ..constants import CONFIG_FILE_ENV, DEFAULT_CONFIG_FILE
from ..errors import ConfigurationError
from ..logs.logger import logger
from .model import SessionConfig
from .repository import ConfigRepository

# Environment variable -> config field
ENV_OVERRIDES = {
    "LINEIRC_HOST": "host",
    "LINEIRC_PORT": "port",
    "LINEIRC_NICK": "nickname",
}


def _apply_env_overrides(
    data: dict[str, Any], environ: Mapping[str, str]
) -> dict[str, Any]:
    merged = dict(data)
    for env_name, field in ENV_OVERRIDES.items():
        value = environ.get(env_name)
        if value:
            merged[field] = value
    return merged


def get_configuration(
    config_file: str | None = None, environ: Mapping[str, str] | None = None
) -> SessionConfig:
    """Load and validate the session configuration.

    Args:
        config_file: Path to the JSON config file. Defaults to the path named by
            LINEIRC_CONF_FILE, or lineirc.conf.
        environ: Environment mapping used for overrides (defaults to os.environ).

    Returns:
        A validated SessionConfig.

    Raises:
        ConfigurationError: If the file is unreadable or the values are invalid.
    """
    environ = os.environ if environ is None else environ
    path = config_file or environ.get(CONFIG_FILE_ENV, DEFAULT_CONFIG_FILE)
    repo = ConfigRepository(path)
    if repo.exists():
        raw = repo.load_raw()
        logger.log_event("config", "loaded", level=logging.DEBUG, path=path)
    else:
        raw = {}
        logger.log_event("config", "file_missing", level=logging.DEBUG, path=path)
    try:
        return SessionConfig.from_dict(_apply_env_overrides(raw, environ))
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration: {e}", data={"path": path}
        ) from e
