"""RevisionTypeRegistry and the @revision_type decorator.

Revision type names are tags looked up in a registry; nothing is ever
imported from a name at runtime.
"""

from __future__ import annotations

import dataclasses
import datetime
import decimal
import uuid
from collections.abc import Callable, Iterator
from typing import Any, TypeVar

from vr_commons.kernel.errors import UnknownTypeError

T = TypeVar("T")


@dataclasses.dataclass(frozen=True)
class RevisionType:
    """A registered revision kind: the tag and the Python type it decodes to."""

    name: str
    python_type: type[Any]


class RevisionTypeRegistry:
    """Maps revision type names (and aliases) to :class:`RevisionType`.

    Example::

        registry = RevisionTypeRegistry()
        registry.register("int", int, "builtins.int")
        registry.resolve("builtins.int").python_type  # -> int
    """

    def __init__(self) -> None:
        self._store: dict[str, RevisionType] = {}

    def register(self, name: str, python_type: type[Any], *aliases: str) -> RevisionType:
        """Register *python_type* under *name* and each alias.

        Idempotent for the identical type; a different type under an
        existing name raises ``ValueError``.
        """
        revision_type = RevisionType(name=name, python_type=python_type)
        for key in (name, *aliases):
            existing = self._store.get(key)
            if existing is not None and existing.python_type is not python_type:
                raise ValueError(
                    f"A different revision type is already registered under {key!r}"
                )
        for key in (name, *aliases):
            self._store.setdefault(key, revision_type)
        return revision_type

    def resolve(self, name: str | None) -> RevisionType:
        """Return the revision type for *name*.

        Raises :class:`UnknownTypeError` if *name* is ``None`` or unknown.
        """
        if name is None:
            raise UnknownTypeError(None)
        try:
            return self._store[name]
        except KeyError:
            raise UnknownTypeError(name) from None

    def names(self) -> list[str]:
        return sorted(self._store)

    def clear(self) -> None:
        """Remove all registrations (useful in tests)."""
        self._store.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._store

    def __iter__(self) -> Iterator[RevisionType]:
        seen: list[RevisionType] = []
        for revision_type in self._store.values():
            if revision_type not in seen:
                seen.append(revision_type)
        return iter(seen)


def default_revision_types() -> RevisionTypeRegistry:
    """Return a new registry preloaded with the built-in revision kinds."""
    registry = RevisionTypeRegistry()
    registry.register("int", int, "builtins.int")
    registry.register("float", float, "builtins.float")
    registry.register("str", str, "builtins.str")
    registry.register("decimal", decimal.Decimal, "decimal.Decimal")
    registry.register("datetime", datetime.datetime, "datetime.datetime")
    registry.register("date", datetime.date, "datetime.date")
    registry.register("uuid", uuid.UUID, "uuid.UUID")
    return registry


# ---------------------------------------------------------------------------
# Module-level default registry + decorator
# ---------------------------------------------------------------------------

_default_registry: RevisionTypeRegistry = default_revision_types()


def revision_type(name: str, *aliases: str) -> Callable[[type[T]], type[T]]:
    """Class decorator — registers a custom revision class in the default registry.

    The class is returned unchanged.  It must define an ordering
    (``__lt__``) to be usable as a revision.

    Example::

        @revision_type("OrderRevision")
        @dataclasses.dataclass(frozen=True, order=True)
        class OrderRevision:
            batch: int
            sequence: int
    """

    def decorator(cls: type[T]) -> type[T]:
        _default_registry.register(name, cls, *aliases)
        return cls

    return decorator


def get_default_registry() -> RevisionTypeRegistry:
    """Return the module-level default revision type registry."""
    return _default_registry


__all__ = [
    "RevisionType",
    "RevisionTypeRegistry",
    "default_revision_types",
    "get_default_registry",
    "revision_type",
]
