"""HTTP adapter – Transport protocol."""
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Transport(Protocol):
    """Port: perform one HTTP GET and return the response body.

    Implementations raise :class:`~modrinth_client.kernel.errors.TransportError`
    (or a subclass) for network failures and non-2xx statuses. Timeouts,
    redirects and headers are the implementation's concern.
    """

    def get(self, url: str, token: str | None = None) -> bytes: ...


__all__ = ["Transport"]
