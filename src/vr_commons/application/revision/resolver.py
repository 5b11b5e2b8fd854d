"""RevisionResolver — deserializes entity revisions and remembers what worked.

Entities of the same shape serialize their revision the same way, so once
a quoting mode succeeds for an entity type it is tried first for the next
entity of that type.  This saves the failing attempt on every call.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from vr_commons.kernel.ddd import VersionedEntity
from vr_commons.kernel.errors import RevisionDeserializationError
from vr_commons.kernel.revision import (
    DeserializationMode,
    Deserializer,
    RevisionTypeRegistry,
    get_default_registry,
    pydantic_deserializer,
)
from vr_commons.observability.logging import entity_log_context, get_logger

if TYPE_CHECKING:
    from vr_commons.config.settings import RevisionSettings

type ModeKey = tuple[str, str | None]

logger = get_logger(__name__)


class RevisionResolver:
    """Resolve :attr:`VersionedEntity.revision` with per-type mode memory.

    Usage::

        resolver = RevisionResolver()
        mode = resolver.resolve(entity)   # entity.revision is now set
    """

    def __init__(
        self,
        registry: RevisionTypeRegistry | None = None,
        deserializer: Deserializer = pydantic_deserializer,
        *,
        default_mode: DeserializationMode = DeserializationMode.WITHOUT_QUOTATIONS,
        remember_modes: bool = True,
    ) -> None:
        self._registry = registry or get_default_registry()
        self._deserializer = deserializer
        self._default_mode = default_mode
        self._remember_modes = remember_modes
        self._modes: dict[ModeKey, DeserializationMode] = {}

    @classmethod
    def from_settings(
        cls,
        settings: "RevisionSettings",
        registry: RevisionTypeRegistry | None = None,
        deserializer: Deserializer = pydantic_deserializer,
    ) -> "RevisionResolver":
        """Build a resolver from :class:`RevisionSettings`."""
        return cls(
            registry,
            deserializer,
            default_mode=settings.deserialization_mode,
            remember_modes=settings.remember_modes,
        )

    @staticmethod
    def mode_key(entity: VersionedEntity[Any]) -> ModeKey:
        """Return the memory key for *entity*, stable across its persist and output shapes."""
        return (type(entity).__qualname__, entity.preserved_entity_type)

    def preferred_mode(self, key: ModeKey) -> DeserializationMode:
        return self._modes.get(key, self._default_mode)

    def forget(self) -> None:
        """Drop every remembered mode."""
        self._modes.clear()

    def resolve(self, entity: VersionedEntity[Any]) -> DeserializationMode:
        """Deserialize *entity*'s revision in place and return the mode used.

        Raises :class:`RevisionDeserializationError` (or its subclass
        :class:`UnknownTypeError`) unchanged; the entity should then be
        neither persisted nor emitted.
        """
        key = self.mode_key(entity)
        preferred = self.preferred_mode(key)
        log = logger.bind(**entity_log_context(entity))
        try:
            mode = entity.deserialize_revision(
                self._deserializer, preferred, registry=self._registry
            )
        except RevisionDeserializationError as exc:
            log.error("revision_resolution_failed", error=exc.to_dict())
            raise

        if self._remember_modes:
            self._modes[key] = mode
        if mode is preferred:
            log.debug("revision_resolved", mode=mode.value)
        else:
            log.warning(
                "revision_resolved_with_fallback",
                preferred_mode=preferred.value,
                mode=mode.value,
            )
        return mode


__all__ = ["RevisionResolver"]
