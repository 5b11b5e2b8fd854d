"""Revision kinds, quoting modes and the default codec."""

from vr_commons.kernel.revision.codec import (
    Deserializer,
    encode_revision,
    is_orderable,
    pydantic_deserializer,
    serialize_revision,
)
from vr_commons.kernel.revision.quoting import (
    DeserializationMode,
    add_quotations,
    apply_mode,
    candidate_attempts,
)
from vr_commons.kernel.revision.registry import (
    RevisionType,
    RevisionTypeRegistry,
    default_revision_types,
    get_default_registry,
    revision_type,
)

__all__ = [
    "DeserializationMode",
    "Deserializer",
    "RevisionType",
    "RevisionTypeRegistry",
    "add_quotations",
    "apply_mode",
    "candidate_attempts",
    "default_revision_types",
    "encode_revision",
    "get_default_registry",
    "is_orderable",
    "pydantic_deserializer",
    "revision_type",
    "serialize_revision",
]
