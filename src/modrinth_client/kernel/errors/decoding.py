"""Payload errors — bodies and identifiers that cannot be decoded."""

from __future__ import annotations

from typing import Any

from modrinth_client.kernel.errors.base import ErrorKind, ModrinthError


class DecodeError(ModrinthError):
    """A response body does not match the expected schema."""

    default_code = "decode_error"
    kind = ErrorKind.DECODE

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


class EncodingError(ModrinthError, ValueError):
    """An identifier cannot be represented in, or recovered from, base 62."""

    default_code = "encoding_error"
    kind = ErrorKind.ENCODING


class ValidationError(ModrinthError, ValueError):
    """Input parameters do not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"
    kind = ErrorKind.VALIDATION

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


__all__ = ["DecodeError", "EncodingError", "ValidationError"]
