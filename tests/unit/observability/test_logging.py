"""Unit tests for observability logging."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from typing import Any

import pytest
import structlog
from structlog.testing import capture_logs

from vr_commons.kernel.ddd import VersionedEntity
from vr_commons.observability.logging import JsonLoggerFactory, entity_log_context, get_logger


class Itinerary(VersionedEntity[Any]):
    domain_object_version = 1


@pytest.fixture()
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger("vr.test", component="resolver").info("hello")
        assert logs == [{"component": "resolver", "event": "hello", "log_level": "info"}]

    def test_without_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger().warning("plain")
        assert logs[0]["event"] == "plain"


class TestEntityLogContext:
    def test_fields(self) -> None:
        entity = Itinerary("itin-1", entity_type="Itinerary", revision_type_name="int")
        assert entity_log_context(entity) == {
            "entity_class": "Itinerary",
            "entity_uid": "itin-1",
            "entity_type": "Itinerary",
            "revision_type_name": "int",
        }

    def test_same_in_both_shapes(self) -> None:
        entity = Itinerary("itin-1", entity_type="Itinerary", revision_type_name="int")
        live = entity_log_context(entity)
        entity.prepare_for_persist_serialization()
        assert entity_log_context(entity) == live
        entity.prepare_for_output_serialization()
        assert entity_log_context(entity) == live


class TestJsonLoggerFactory:
    @pytest.mark.usefixtures("restore_logging")
    def test_sets_root_level_from_name(self) -> None:
        JsonLoggerFactory.configure("warning")
        assert logging.getLogger().level == logging.WARNING

    @pytest.mark.usefixtures("restore_logging")
    def test_renders_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(logging.INFO)
        get_logger("vr.json").info("entity_persisted", entity_uid="itin-1")
        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "entity_persisted"
        assert payload["entity_uid"] == "itin-1"
        assert payload["level"] == "info"
        assert "timestamp" in payload

    @pytest.mark.usefixtures("restore_logging")
    def test_level_from_revision_settings(self) -> None:
        from vr_commons.config.settings import RevisionSettings

        JsonLoggerFactory.configure(RevisionSettings(log_level="ERROR").log_level)
        assert logging.getLogger().level == logging.ERROR
