from __future__ import annotations

import json
import os
from typing import Any

from ..errors import ConfigurationError


class ConfigRepository:
    """Reads the raw session configuration from a JSON file."""

    def __init__(self, path: str | os.PathLike[str]):
        if not isinstance(path, str | os.PathLike):
            raise TypeError("path must be str or os.PathLike")
        self.path = str(path)

    def exists(self) -> bool:
        return os.path.isfile(self.path)

    def load_raw(self) -> dict[str, Any]:
        """Load the raw configuration mapping.

        Returns:
            The decoded JSON object, or an empty dict when the file is missing.

        Raises:
            ConfigurationError: If the file is unreadable, not JSON, or not an object.
        """
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in {self.path}: {e}", data={"path": self.path}
            ) from e
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read {self.path}: {e}", data={"path": self.path}
            ) from e
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration in {self.path} must be a JSON object",
                data={"path": self.path},
            )
        return data
