"""Base classes for decoded service payloads."""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from modrinth_client.kernel.errors import DecodeError

M = TypeVar("M", bound="ServiceRecord")


class ServiceRecord(BaseModel):
    """Immutable record decoded from a service response.

    Unknown extra fields are ignored so that additions to the service payload do
    not break decoding; missing required fields still fail.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    @classmethod
    def decode(cls: type[M], body: bytes | str) -> M:
        """Decode a raw JSON body, raising :class:`DecodeError` on any mismatch."""
        try:
            return cls.model_validate_json(body)
        except PydanticValidationError as exc:
            raise DecodeError(
                f"Response does not match {cls.__name__}: {exc.error_count()} error(s)",
                payload_type=cls.__name__,
                detail={"errors": _summarise(exc)},
                cause=exc,
            ) from exc

    @classmethod
    def from_dict(cls: type[M], data: Any) -> M:
        """Decode an already-parsed JSON value."""
        try:
            return cls.model_validate(data)
        except PydanticValidationError as exc:
            raise DecodeError(
                f"Payload does not match {cls.__name__}: {exc.error_count()} error(s)",
                payload_type=cls.__name__,
                detail={"errors": _summarise(exc)},
                cause=exc,
            ) from exc


def _summarise(exc: PydanticValidationError) -> list[dict[str, str]]:
    return [
        {"loc": ".".join(str(part) for part in error["loc"]), "type": error["type"]}
        for error in exc.errors(include_url=False)
    ]


__all__ = ["ServiceRecord"]
