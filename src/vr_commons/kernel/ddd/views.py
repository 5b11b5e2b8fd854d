"""Persist and output projections of a :class:`VersionedEntity`.

Projections read the preserved copies and never mutate the entity.
``to_output_view(entity)`` yields the same fields as calling
``prepare_for_output_serialization()`` and reading them back, without the
side effects.
"""

from __future__ import annotations

import dataclasses
import json
from typing import Any

from vr_commons.kernel.ddd.versioned_entity import VersionedEntity
from vr_commons.kernel.revision.codec import encode_revision


def _without_none(data: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in data.items() if v is not None}


@dataclasses.dataclass(frozen=True)
class PersistView:
    """Fields written to durable storage."""

    entity_uid: str | None
    event_key: str | None = None
    event_key_notified: bool | None = None
    revision_type_name: str | None = None
    revision_serialized: str | None = None
    optimistic_lock_version: int = 1
    notification_number: int | None = None
    payload: dict[str, Any] = dataclasses.field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        data = {f.name: getattr(self, f.name) for f in dataclasses.fields(self)}
        payload = data.pop("payload")
        return {**_without_none(data), **_without_none(payload)}

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)


@dataclasses.dataclass(frozen=True)
class OutputView:
    """Fields emitted to downstream consumers."""

    entity_uid: str | None
    entity_type: str | None = None
    event_key: str | None = None
    revision: Any = None
    notification_number: int | None = None
    payload: dict[str, Any] = dataclasses.field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        data = {f.name: getattr(self, f.name) for f in dataclasses.fields(self)}
        payload = data.pop("payload")
        if data["revision"] is not None:
            data["revision"] = encode_revision(data["revision"])
        return {**_without_none(data), **_without_none(payload)}

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)


def to_persist_view(entity: VersionedEntity[Any]) -> PersistView:
    return PersistView(
        entity_uid=entity.entity_uid,
        event_key=entity.event_key,
        event_key_notified=entity.event_key_notified,
        revision_type_name=entity.preserved_revision_type_name,
        revision_serialized=entity.preserved_revision_serialized,
        optimistic_lock_version=entity.optimistic_lock_version,
        notification_number=entity.notification_number,
        payload=entity._payload_dict(),  # noqa: SLF001
    )


def to_output_view(entity: VersionedEntity[Any]) -> OutputView:
    return OutputView(
        entity_uid=entity.entity_uid,
        entity_type=entity.preserved_entity_type,
        event_key=entity.event_key,
        revision=entity.preserved_revision,
        notification_number=entity.notification_number,
        payload=entity._payload_dict(),  # noqa: SLF001
    )


__all__ = ["OutputView", "PersistView", "to_output_view", "to_persist_view"]
