"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    ModrinthError                 (base.py, tagged with ErrorKind)
    ├── TransportError            (transport.py)
    │   ├── HttpStatusError
    │   └── TransportTimeoutError
    ├── DecodeError               (decoding.py)
    ├── EncodingError
    └── ValidationError
"""

from modrinth_client.kernel.errors.base import ErrorKind, ModrinthError
from modrinth_client.kernel.errors.decoding import DecodeError, EncodingError, ValidationError
from modrinth_client.kernel.errors.transport import (
    HttpStatusError,
    TransportError,
    TransportTimeoutError,
)

__all__ = [
    "DecodeError",
    "EncodingError",
    "ErrorKind",
    "HttpStatusError",
    "ModrinthError",
    "TransportError",
    "TransportTimeoutError",
    "ValidationError",
]
