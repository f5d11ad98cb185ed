"""Session configuration package."""

from .loader import get_configuration  # noqa: F401
from .model import SessionConfig  # noqa: F401
from .repository import ConfigRepository  # noqa: F401

__all__ = ["ConfigRepository", "SessionConfig", "get_configuration"]
