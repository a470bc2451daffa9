"""Transport errors — network and HTTP-layer failures."""

from __future__ import annotations

from typing import Any

from modrinth_client.kernel.errors.base import ErrorKind, ModrinthError


class TransportError(ModrinthError):
    """The request could not be completed by the transport."""

    default_code = "transport_error"
    kind = ErrorKind.TRANSPORT

    def __init__(self, message: str, *, url: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.url = url


class HttpStatusError(TransportError):
    """The service answered with a non-2xx status."""

    default_code = "http_status_error"

    def __init__(
        self,
        status_code: int,
        *,
        url: str | None = None,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"HTTP {status_code} from GET {url}", url=url, **kwargs)
        self.status_code = status_code
        self.detail.setdefault("status_code", status_code)


class TransportTimeoutError(TransportError):
    """The request exceeded the transport deadline."""

    default_code = "transport_timeout"


__all__ = ["HttpStatusError", "TransportError", "TransportTimeoutError"]
