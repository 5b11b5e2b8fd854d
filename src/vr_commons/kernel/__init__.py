"""Kernel – framework-agnostic building blocks."""

from vr_commons.kernel.errors import (
    ApplicationError,
    BaseError,
    ConflictError,
    DomainError,
    InfrastructureError,
    InvariantViolationError,
    NotFoundError,
    RevisionDeserializationError,
    SerializationError,
    UnknownTypeError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConflictError",
    "DomainError",
    "InfrastructureError",
    "InvariantViolationError",
    "NotFoundError",
    "RevisionDeserializationError",
    "SerializationError",
    "UnknownTypeError",
]
