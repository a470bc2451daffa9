"""Root error class for the modrinth-client error hierarchy."""

from __future__ import annotations

import json
from enum import Enum
from typing import Any, ClassVar


class ErrorKind(str, Enum):
    """Tag shared by every error the client raises or captures."""

    TRANSPORT = "transport"
    DECODE = "decode"
    ENCODING = "encoding"
    VALIDATION = "validation"


class ModrinthError(Exception):
    """Root of the error hierarchy.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Arbitrary extra context (serialisable dict).
        cause: Underlying exception that triggered this error.
    """

    default_code: ClassVar[str] = "modrinth_error"
    kind: ClassVar[ErrorKind]

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        """Return a JSON-serialisable single-line string representation."""
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a plain dict (safe for logging)."""
        payload: dict[str, Any] = {
            "kind": self.kind.value,
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["ErrorKind", "ModrinthError"]
