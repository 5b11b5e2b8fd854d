"""Domain errors — entity rule and invariant violations."""

from __future__ import annotations

from typing import Any

from vr_commons.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a domain rule / invariant is violated."""

    default_code = "domain_error"


class InvariantViolationError(DomainError):
    """An entity invariant was violated."""

    default_code = "invariant_violation"


class NotFoundError(DomainError):
    """The requested entity does not exist."""

    default_code = "not_found"

    def __init__(
        self,
        resource: str,
        identifier: Any = None,
        **kwargs: Any,
    ) -> None:
        msg = f"{resource} not found"
        if identifier is not None:
            msg = f"{resource} '{identifier}' not found"
        super().__init__(msg, **kwargs)
        self.resource = resource
        self.identifier = identifier


class ConflictError(DomainError):
    """A write was attempted against a stale optimistic lock version."""

    default_code = "conflict"

    def __init__(
        self,
        entity_uid: str,
        *,
        expected_version: int,
        actual_version: int,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"Version conflict on '{entity_uid}': "
            f"expected {expected_version}, found {actual_version}",
            **kwargs,
        )
        self.entity_uid = entity_uid
        self.expected_version = expected_version
        self.actual_version = actual_version


__all__ = [
    "ConflictError",
    "DomainError",
    "InvariantViolationError",
    "NotFoundError",
]
