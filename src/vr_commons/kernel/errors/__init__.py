"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── InvariantViolationError
    │   ├── NotFoundError
    │   └── ConflictError
    ├── ApplicationError     (application.py)
    └── InfrastructureError  (infrastructure.py)
        └── SerializationError
            └── RevisionDeserializationError
                └── UnknownTypeError
"""

from vr_commons.kernel.errors.application import ApplicationError
from vr_commons.kernel.errors.base import BaseError
from vr_commons.kernel.errors.domain import (
    ConflictError,
    DomainError,
    InvariantViolationError,
    NotFoundError,
)
from vr_commons.kernel.errors.infrastructure import (
    InfrastructureError,
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
