"""
Configuration constants for the lineirc client

Each tunable constant can be overridden by setting an environment variable with
the same name.
"""

import os


def _get_env_float(name: str, default: float) -> float:
    """Retrieve a float value from an environment variable.

    If the variable is not set or cannot be parsed, prints a warning and
    returns the default value.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return float(value)
        except ValueError:
            print(
                f"Warning: Invalid float value for {name}='{value}', using default {default}"
            )
    return default


# Seconds allowed for the TCP connection to open
CONNECT_TIMEOUT = _get_env_float("CONNECT_TIMEOUT", 30.0)

# Session defaults
DEFAULT_HOST = "localhost"
DEFAULT_PORT = 6667
DEFAULT_NICKNAME = "user"
DEFAULT_CHANNEL = "#general"

# Config file location
CONFIG_FILE_ENV = "LINEIRC_CONF_FILE"
DEFAULT_CONFIG_FILE = "lineirc.conf"

# Wire format
LINE_TERMINATOR = "\r\n"
ENCODING = "utf-8"
