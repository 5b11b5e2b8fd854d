"""Quoting modes used when parsing a serialized revision.

A serialized revision is either already valid JSON (``42``, ``{"x": 1}``,
``"abc"``) or a bare scalar that only parses once wrapped in quotes
(``hello``, ``2024-01-01T00:00:00``).  Each mode is one candidate
transform of the raw string.
"""

from __future__ import annotations

from enum import Enum

_QUOTE = '"'


class DeserializationMode(str, Enum):
    """Which transform of the serialized revision produced the value."""

    WITH_QUOTATIONS = "WITH_QUOTATIONS"
    WITHOUT_QUOTATIONS = "WITHOUT_QUOTATIONS"

    def opposite(self) -> "DeserializationMode":
        if self is DeserializationMode.WITH_QUOTATIONS:
            return DeserializationMode.WITHOUT_QUOTATIONS
        return DeserializationMode.WITH_QUOTATIONS


def add_quotations(value: str) -> str:
    """Wrap *value* in exactly one pair of double quotes.

    One existing leading and one existing trailing quote are stripped
    first, so ``'"hello"'`` stays ``'"hello"'``.
    """
    if value.startswith(_QUOTE):
        value = value[1:]
    if value.endswith(_QUOTE):
        value = value[:-1]
    return f"{_QUOTE}{value}{_QUOTE}"


def apply_mode(value: str, mode: DeserializationMode) -> str:
    if mode is DeserializationMode.WITH_QUOTATIONS:
        return add_quotations(value)
    return value


def candidate_attempts(
    value: str, preferred: DeserializationMode
) -> tuple[tuple[DeserializationMode, str], ...]:
    """Return ``(mode, transformed)`` pairs, preferred mode first."""
    return tuple(
        (mode, apply_mode(value, mode)) for mode in (preferred, preferred.opposite())
    )


__all__ = [
    "DeserializationMode",
    "add_quotations",
    "apply_mode",
    "candidate_attempts",
]
