from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, field_validator

from ..constants import CHAT_DEFAULT_HOST, CHAT_DEFAULT_PORT


class ClientConfig(BaseModel):
    """Connection settings for a chat session.

    Attributes:
        host: Chat server host name or IP address.
        port: Chat server TCP port.
        username: Name to log in with, or None to skip the automatic login.
    """

    host: str = Field(default=CHAT_DEFAULT_HOST, min_length=1)
    port: int = Field(default=CHAT_DEFAULT_PORT, ge=1, le=65535)
    username: str | None = None

    @field_validator("host", mode="before")
    @classmethod
    def validate_host(cls, v: Any) -> str:
        if not isinstance(v, str):
            raise ValueError("host must be a string")
        return v.strip()

    @field_validator("username", mode="before")
    @classmethod
    def validate_username(cls, v: Any) -> str | None:
        """Strip whitespace; empty means no login.

        The login command is space separated, so a username may not contain
        spaces.
        """
        if v is None:
            return None
        if not isinstance(v, str):
            raise ValueError("username must be a string")
        stripped = v.strip()
        if not stripped:
            return None
        if " " in stripped:
            raise ValueError("username must not contain spaces")
        return stripped

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ClientConfig:
        # Drop unset values so field defaults apply
        return cls.model_validate({k: v for k, v in data.items() if v not in (None, "")})

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ClientConfig:
        """Build the config from CHAT_HOST, CHAT_PORT and CHAT_USERNAME."""
        env = os.environ if environ is None else environ
        return cls.from_dict(
            {
                "host": env.get("CHAT_HOST"),
                "port": env.get("CHAT_PORT"),
                "username": env.get("CHAT_USERNAME"),
            }
        )

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)
