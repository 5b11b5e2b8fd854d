"""DDD building blocks — public re-export surface."""

from vr_commons.kernel.ddd.invariant import Invariant
from vr_commons.kernel.ddd.versioned_entity import VersionedEntity
from vr_commons.kernel.ddd.views import (
    OutputView,
    PersistView,
    to_output_view,
    to_persist_view,
)

__all__ = [
    "Invariant",
    "OutputView",
    "PersistView",
    "VersionedEntity",
    "to_output_view",
    "to_persist_view",
]
