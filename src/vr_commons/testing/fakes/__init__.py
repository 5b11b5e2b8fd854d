"""Testing fakes – in-memory implementations of persistence collaborators."""
from vr_commons.testing.fakes.store import InMemoryVersionedEntityStore

__all__ = ["InMemoryVersionedEntityStore"]
