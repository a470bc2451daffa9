"""HTTP adapter – HttpxTransport."""
from __future__ import annotations

import logging
from typing import Any

import httpx

from modrinth_client.kernel.errors import HttpStatusError, TransportError, TransportTimeoutError

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "modrinth-client/0.1.0"


class HttpxTransport:
    """Thin synchronous httpx wrapper with structured error mapping.

    The token, when given, is sent verbatim as the ``Authorization`` header.
    """

    def __init__(
        self,
        timeout: float = 10.0,
        user_agent: str = DEFAULT_USER_AGENT,
        client: httpx.Client | None = None,
        **kwargs: Any,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.Client(
            timeout=timeout,
            headers={"User-Agent": user_agent},
            follow_redirects=True,
            **kwargs,
        )

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def get(self, url: str, token: str | None = None) -> bytes:
        headers = {"Authorization": token} if token else None
        logger.debug("http.get url=%s authenticated=%s", url, token is not None)
        try:
            response = self._client.get(url, headers=headers)
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            raise TransportTimeoutError(f"HTTP request timed out: GET {url}", url=url, cause=exc) from exc
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.warning("http.status url=%s status=%d", url, status)
            raise HttpStatusError(
                status,
                url=url,
                detail={"status_code": status, "body": exc.response.text[:512]},
                cause=exc,
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(str(exc) or f"GET {url} failed", url=url, cause=exc) from exc
        except httpx.InvalidURL as exc:
            raise TransportError(f"Invalid request URL: {exc}", url=url, cause=exc) from exc
        return response.content


__all__ = ["DEFAULT_USER_AGENT", "HttpxTransport"]
