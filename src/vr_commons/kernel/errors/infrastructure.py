"""Infrastructure errors — payload encoding and decoding failures."""

from __future__ import annotations

from typing import Any

from vr_commons.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class SerializationError(InfrastructureError):
    """Failed to serialize or deserialize a payload."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


class RevisionDeserializationError(SerializationError):
    """The serialized revision could not be turned into an ordered value.

    Raised when every quoting mode failed to parse, when the parsed value
    has no ordering, or when there is nothing to parse.
    """

    default_code = "revision_deserialization_error"

    def __init__(
        self,
        message: str,
        *,
        revision_type_name: str | None = None,
        attempted_modes: tuple[str, ...] = (),
        **kwargs: Any,
    ) -> None:
        super().__init__(message, payload_type=revision_type_name, **kwargs)
        self.revision_type_name = revision_type_name
        self.attempted_modes = attempted_modes
        self.detail.setdefault("revision_type_name", revision_type_name)
        if attempted_modes:
            self.detail.setdefault("attempted_modes", list(attempted_modes))


class UnknownTypeError(RevisionDeserializationError):
    """A revision type name is not present in the revision type registry."""

    default_code = "unknown_revision_type"

    def __init__(self, type_name: str | None, **kwargs: Any) -> None:
        super().__init__(
            f"Unknown revision type {type_name!r}",
            revision_type_name=type_name,
            **kwargs,
        )
        self.type_name = type_name


__all__ = [
    "InfrastructureError",
    "RevisionDeserializationError",
    "SerializationError",
    "UnknownTypeError",
]
