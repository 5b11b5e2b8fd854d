"""VersionedEntity — an entity carrying an ordered, type-tagged revision.

The revision arrives as two strings (a registered type name and a
serialized value) and is reconstructed with :meth:`deserialize_revision`.
The entity then flips between two serialization shapes:

* persist shape — the raw revision source, no ``entity_type`` or ``revision``;
* output shape — the resolved ``revision``, no internal plumbing.

Every assignment of ``entity_type``, ``revision``, ``revision_type_name``
and ``revision_serialized`` also writes a preserved copy, so switching
shapes never loses data.
"""

from __future__ import annotations

import abc
from typing import Any, Generic, TypeVar

from vr_commons.kernel.ddd.invariant import Invariant
from vr_commons.kernel.errors import RevisionDeserializationError
from vr_commons.kernel.revision.codec import Deserializer, encode_revision, is_orderable
from vr_commons.kernel.revision.quoting import DeserializationMode, candidate_attempts
from vr_commons.kernel.revision.registry import RevisionTypeRegistry, get_default_registry
from vr_commons.kernel.types import Err, Ok, Result

T = TypeVar("T")

_PERSISTED_FIELDS: tuple[str, ...] = (
    "entity_type",
    "entity_uid",
    "event_key",
    "event_key_notified",
    "revision_type_name",
    "revision_serialized",
    "notification_number",
)


class VersionedEntity(abc.ABC, Generic[T]):
    """Base entity — equality is identity-based (by ``entity_uid``).

    Concrete entities implement :attr:`domain_object_version` and may add
    domain fields by overriding :meth:`_payload_dict`.
    """

    def __init__(
        self,
        entity_uid: str | None = None,
        *,
        entity_type: str | None = None,
        event_key: str | None = None,
        event_key_notified: bool | None = None,
        revision_type_name: str | None = None,
        revision_serialized: str | None = None,
        revision: T | None = None,
        optimistic_lock_version: int = 1,
        notification_number: int | None = None,
    ) -> None:
        self._entity_uid: str | None = None
        self._entity_type: str | None = None
        self._preserved_entity_type: str | None = None
        self._revision_type_name: str | None = None
        self._preserved_revision_type_name: str | None = None
        self._revision_serialized: str | None = None
        self._preserved_revision_serialized: str | None = None
        self._revision: T | None = None
        self._preserved_revision: T | None = None

        self.entity_uid = entity_uid
        self.entity_type = entity_type
        self.event_key = event_key
        self.event_key_notified = event_key_notified
        self.revision_type_name = revision_type_name
        self.revision_serialized = revision_serialized
        self.revision = revision
        self._optimistic_lock_version = optimistic_lock_version
        self._notification_number = notification_number

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    @property
    def entity_uid(self) -> str | None:
        return self._entity_uid

    @entity_uid.setter
    def entity_uid(self, value: str | None) -> None:
        Invariant.require(
            self._entity_uid is None or value == self._entity_uid,
            f"entity_uid of {type(self).__name__} is already {self._entity_uid!r}",
        )
        self._entity_uid = value

    @property
    @abc.abstractmethod
    def domain_object_version(self) -> int:
        """Shape version of the concrete entity class.

        Stores use it to pick how to read previously persisted records, so
        it must be unique across every version of the entity.
        """

    # ------------------------------------------------------------------
    # Preserved fields
    # ------------------------------------------------------------------

    @property
    def entity_type(self) -> str | None:
        return self._entity_type

    @entity_type.setter
    def entity_type(self, value: str | None) -> None:
        self._entity_type = value
        self._preserved_entity_type = value

    @property
    def revision_type_name(self) -> str | None:
        return self._revision_type_name

    @revision_type_name.setter
    def revision_type_name(self, value: str | None) -> None:
        self._revision_type_name = value
        self._preserved_revision_type_name = value

    @property
    def revision_serialized(self) -> str | None:
        return self._revision_serialized

    @revision_serialized.setter
    def revision_serialized(self, value: str | None) -> None:
        self._revision_serialized = value
        self._preserved_revision_serialized = value

    @property
    def revision(self) -> T | None:
        return self._revision

    @revision.setter
    def revision(self, value: T | None) -> None:
        self._revision = value
        self._preserved_revision = value

    # Last assigned values, unaffected by the prepare_for_* shapes.

    @property
    def preserved_entity_type(self) -> str | None:
        return self._preserved_entity_type

    @property
    def preserved_revision_type_name(self) -> str | None:
        return self._preserved_revision_type_name

    @property
    def preserved_revision_serialized(self) -> str | None:
        return self._preserved_revision_serialized

    @property
    def preserved_revision(self) -> T | None:
        return self._preserved_revision

    # ------------------------------------------------------------------
    # Revision
    # ------------------------------------------------------------------

    def deserialize_revision(
        self,
        deserializer: Deserializer,
        preferred_mode: DeserializationMode,
        *,
        registry: RevisionTypeRegistry | None = None,
    ) -> DeserializationMode:
        """Rebuild :attr:`revision` from the type name and serialized string.

        The preferred quoting mode is tried first and the opposite mode
        second.  Returns the mode that parsed, so callers can prefer it
        next time for entities of the same shape.

        Raises:
            UnknownTypeError: ``revision_type_name`` is not registered.
            RevisionDeserializationError: both modes failed, or the parsed
                value has no ordering.  ``revision`` is left unchanged.
        """
        resolved = (registry or get_default_registry()).resolve(self._revision_type_name)
        serialized = self._revision_serialized
        if serialized is None:
            raise RevisionDeserializationError(
                f"{type(self).__name__} '{self._entity_uid}' has no serialized revision",
                revision_type_name=self._revision_type_name,
            )

        attempted: list[str] = []
        last_error: Exception | None = None
        for mode, candidate in candidate_attempts(serialized, preferred_mode):
            attempted.append(mode.value)
            outcome = _attempt(deserializer, candidate, resolved.python_type)
            if isinstance(outcome, Ok):
                self.revision = outcome.value
                return mode
            last_error = outcome.error

        raise RevisionDeserializationError(
            f"Could not deserialize revision {serialized!r} as {resolved.name!r}",
            revision_type_name=self._revision_type_name,
            attempted_modes=tuple(attempted),
            cause=last_error,
        )

    # ------------------------------------------------------------------
    # Counters
    # ------------------------------------------------------------------

    @property
    def optimistic_lock_version(self) -> int:
        return self._optimistic_lock_version

    @optimistic_lock_version.setter
    def optimistic_lock_version(self, value: int) -> None:
        Invariant.require(
            value >= self._optimistic_lock_version,
            f"optimistic_lock_version cannot go back from "
            f"{self._optimistic_lock_version} to {value}",
        )
        self._optimistic_lock_version = value

    @property
    def notification_number(self) -> int | None:
        return self._notification_number

    @notification_number.setter
    def notification_number(self, value: int | None) -> None:
        current = self._notification_number
        Invariant.require(
            current is None or (value is not None and value >= current),
            f"notification_number cannot go back from {current} to {value}",
        )
        self._notification_number = value

    def increment_optimistic_lock_version(self) -> int:
        """Increment the optimistic lock version in preparation for an update."""
        self._optimistic_lock_version += 1
        return self._optimistic_lock_version

    def determine_current_notification_number(self) -> None:
        if self.notification_number is None:
            self.notification_number = self.optimistic_lock_version

    def increment_notification_number(self) -> int:
        """Increment the notification number used for notification uniqueness.

        Raises ``InvariantViolationError`` when the number was never
        determined; call :meth:`determine_current_notification_number` first.
        """
        current = Invariant.not_none(self.notification_number, "notification_number")
        self.notification_number = current + 1
        return self.notification_number

    # ------------------------------------------------------------------
    # Serialization shapes
    # ------------------------------------------------------------------

    def prepare_for_persist_serialization(self) -> None:
        """Show the raw revision source; hide ``entity_type`` and ``revision``."""
        self._revision_type_name = self._preserved_revision_type_name
        self._revision_serialized = self._preserved_revision_serialized

        self._entity_type = None
        self._revision = None

    def prepare_for_output_serialization(self) -> None:
        """Show ``entity_type`` and ``revision``; hide deserialization plumbing."""
        self._entity_type = self._preserved_entity_type
        self._revision = self._preserved_revision

        self.event_key_notified = None
        self._revision_type_name = None
        self._revision_serialized = None

    def to_dict(self, *, include_lock_version: bool = False) -> dict[str, Any]:
        """Return the currently visible fields, omitting unset ones.

        ``optimistic_lock_version`` is only included on request, for
        persistence layers that compare it on write.
        """
        data: dict[str, Any] = {}
        for name in _PERSISTED_FIELDS:
            value = getattr(self, name)
            if value is not None:
                data[name] = value
        if self._revision is not None:
            data["revision"] = encode_revision(self._revision)
        if include_lock_version:
            data["optimistic_lock_version"] = self.optimistic_lock_version
        data.update(
            {k: v for k, v in self._payload_dict().items() if v is not None}
        )
        return data

    def _payload_dict(self) -> dict[str, Any]:
        """Override to add domain fields to both serialization shapes."""
        return {}

    @classmethod
    def from_persisted(cls, data: dict[str, Any]) -> "VersionedEntity[T]":
        """Rebuild an entity from a dict produced in the persist shape.

        Keys are passed to the constructor as keyword arguments, so
        subclasses with domain fields must accept them.
        """
        return cls(**data)

    # ------------------------------------------------------------------
    # Identity semantics
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return False
        return self._entity_uid == other._entity_uid

    def __hash__(self) -> int:
        return hash(self._entity_uid)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(entity_uid={self._entity_uid!r}, "
            f"entity_type={self._entity_type!r}, revision={self._revision!r}, "
            f"optimistic_lock_version={self.optimistic_lock_version!r}, "
            f"notification_number={self.notification_number!r})"
        )


def _attempt(deserializer: Deserializer, serialized: str, target: type[Any]) -> Result[Any, Exception]:
    try:
        value = deserializer(serialized, target)
    except Exception as exc:  # noqa: BLE001
        return Err(exc)
    if not is_orderable(value):
        return Err(TypeError(f"{type(value).__name__} values have no ordering"))
    return Ok(value)


__all__ = ["VersionedEntity"]
