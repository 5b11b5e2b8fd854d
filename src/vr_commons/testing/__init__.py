"""Testing support – fakes and generators for versioned entities."""

from vr_commons.testing.fakes import InMemoryVersionedEntityStore
from vr_commons.testing.generators import (
    Builder,
    RevisionSource,
    VersionedEntityBuilder,
    revision_source_strategy,
    versioned_entity_strategy,
)

__all__ = [
    "Builder",
    "InMemoryVersionedEntityStore",
    "RevisionSource",
    "VersionedEntityBuilder",
    "revision_source_strategy",
    "versioned_entity_strategy",
]
