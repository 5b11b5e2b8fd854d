"""Unit tests for the fluent builders."""

from __future__ import annotations

from typing import Any

import pytest

from vr_commons.kernel.ddd import VersionedEntity
from vr_commons.kernel.revision import DeserializationMode, pydantic_deserializer
from vr_commons.testing.generators import Builder, VersionedEntityBuilder


class Itinerary(VersionedEntity[Any]):
    domain_object_version = 1


class TestBuilder:
    def test_with_returns_new_builder(self) -> None:
        base: Builder[Any] = Builder()
        derived = base.with_(a=1)
        assert base.attrs == {}
        assert derived.attrs == {"a": 1}

    def test_build_not_implemented(self) -> None:
        with pytest.raises(NotImplementedError):
            Builder().build()


class TestVersionedEntityBuilder:
    def test_defaults(self) -> None:
        entity = VersionedEntityBuilder(Itinerary).build()
        assert entity.entity_uid == "entity-1"
        assert entity.entity_type == "Itinerary"
        assert entity.revision_type_name == "int"
        assert entity.revision_serialized == "1"

    def test_with_revision(self) -> None:
        entity = VersionedEntityBuilder(Itinerary).with_revision("str", "hello").build()
        mode = entity.deserialize_revision(pydantic_deserializer, DeserializationMode.WITHOUT_QUOTATIONS)
        assert mode is DeserializationMode.WITH_QUOTATIONS
        assert entity.revision == "hello"

    def test_call_with_overrides(self) -> None:
        builder = VersionedEntityBuilder(Itinerary)
        entity = builder(entity_uid="other")
        assert entity.entity_uid == "other"
        assert builder.attrs["entity_uid"] == "entity-1"
