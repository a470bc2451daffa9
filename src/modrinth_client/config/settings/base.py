"""Config settings – Settings base class and ClientSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from modrinth_client.adapters.http.client import DEFAULT_USER_AGENT
from modrinth_client.api.search import DEFAULT_BASE_URL
from modrinth_client.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class ClientSettings(Settings):
    """Connection settings, read from ``MODRINTH_*`` environment variables."""

    _prefix: ClassVar[str] = "MODRINTH"

    base_url: str = DEFAULT_BASE_URL
    token: str | None = None
    timeout: float = 10.0
    user_agent: str = DEFAULT_USER_AGENT

    def _validate(self) -> None:
        if not self.base_url or not self.base_url.startswith(("http://", "https://")):
            raise InvalidSettingValueError("base_url", self.base_url, "must be an http(s) URL")
        if self.timeout <= 0:
            raise InvalidSettingValueError("timeout", self.timeout, "must be positive")
        if not self.user_agent:
            raise InvalidSettingValueError("user_agent", self.user_agent, "must not be empty")
        if self.token == "":
            self.token = None

    def __repr__(self) -> str:
        token = "'***'" if self.token else "None"
        return (
            f"ClientSettings(base_url={self.base_url!r}, token={token}, "
            f"timeout={self.timeout!r}, user_agent={self.user_agent!r})"
        )


__all__ = ["ClientSettings", "Settings"]
