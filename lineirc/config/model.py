from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..constants import DEFAULT_CHANNEL, DEFAULT_HOST, DEFAULT_NICKNAME, DEFAULT_PORT


class SessionConfig(BaseModel):
    """Per-connection parameters, created once at startup and never mutated.

    Attributes:
        host: Server host name.
        port: Server TCP port.
        nickname: Nickname registered with NICK.
        username: Username sent with USER (defaults to the nickname).
        realname: Real name sent with USER (defaults to the nickname).
        channels: Ordered channels; the first one is joined after registration.
    """

    model_config = ConfigDict(frozen=True)

    host: str = Field(default=DEFAULT_HOST, min_length=1)
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    nickname: str = Field(default=DEFAULT_NICKNAME, min_length=1)
    username: str = ""
    realname: str = ""
    channels: tuple[str, ...] = (DEFAULT_CHANNEL,)

    @field_validator("host", "nickname", "username", "realname", mode="before")
    @classmethod
    def strip_text(cls, v: Any) -> Any:
        return v.strip() if isinstance(v, str) else v

    @field_validator("nickname", "username")
    @classmethod
    def no_whitespace(cls, v: str) -> str:
        if any(ch.isspace() for ch in v):
            raise ValueError("must not contain whitespace")
        return v

    @field_validator("channels", mode="before")
    @classmethod
    def validate_channels(cls, v: Any) -> tuple[str, ...]:
        """Strip whitespace, drop empties and duplicates, keep the given order."""
        if isinstance(v, str):
            v = [v]
        if not isinstance(v, list | tuple):
            raise ValueError("channels must be a list")
        validated = []
        for c in v:
            if not isinstance(c, str):
                raise ValueError("channel names must be strings")
            stripped = c.strip()
            if any(ch.isspace() for ch in stripped):
                raise ValueError(f"channel name contains whitespace: {stripped!r}")
            if stripped:
                validated.append(stripped)
        return tuple(dict.fromkeys(validated))

    @model_validator(mode="before")
    @classmethod
    def default_identity(cls, data: Any) -> Any:
        """Username and real name fall back to the nickname when omitted."""
        if not isinstance(data, Mapping):
            return data
        data = dict(data)
        nickname = data.get("nickname", DEFAULT_NICKNAME)
        for field in ("username", "realname"):
            value = data.get(field)
            if not (isinstance(value, str) and value.strip()):
                data[field] = nickname
        return data

    @property
    def first_channel(self) -> str | None:
        return self.channels[0] if self.channels else None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SessionConfig:
        """Create a SessionConfig from a raw mapping, ignoring None values."""
        return cls(**{k: v for k, v in data.items() if v is not None})
