"""Observability – get_logger helper and entity log context."""
from __future__ import annotations

from typing import Any

import structlog


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


def entity_log_context(entity: Any) -> dict[str, Any]:
    """Return the identifying fields of a versioned entity for log binding.

    Type names come from the preserved copies so the context is the same in
    the persist and output shapes.
    """
    return {
        "entity_class": type(entity).__name__,
        "entity_uid": getattr(entity, "entity_uid", None),
        "entity_type": getattr(entity, "preserved_entity_type", None),
        "revision_type_name": getattr(entity, "preserved_revision_type_name", None),
    }


__all__ = ["entity_log_context", "get_logger"]
