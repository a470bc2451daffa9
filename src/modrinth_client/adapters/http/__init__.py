"""HTTP adapter – Transport port and the httpx-backed implementation."""
from modrinth_client.adapters.http.client import DEFAULT_USER_AGENT, HttpxTransport
from modrinth_client.adapters.http.port import Transport

__all__ = ["DEFAULT_USER_AGENT", "HttpxTransport", "Transport"]
