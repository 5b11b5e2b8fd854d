"""Testing generators – builders and Hypothesis strategies."""
from vr_commons.testing.generators.builder import Builder, VersionedEntityBuilder
from vr_commons.testing.generators.strategies import (
    RevisionSource,
    revision_source_strategy,
    versioned_entity_strategy,
)

__all__ = [
    "Builder",
    "RevisionSource",
    "VersionedEntityBuilder",
    "revision_source_strategy",
    "versioned_entity_strategy",
]
