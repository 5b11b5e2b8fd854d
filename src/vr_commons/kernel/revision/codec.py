"""Revision codec — default deserializer and JSON encoders.

The default deserializer validates JSON text against the target type in
pydantic *strict* mode.  Strictness is what makes the two quoting modes
distinguishable: ``"7"`` is rejected for ``int`` and bare ``hello`` is not
valid JSON for ``str``.

``Decimal`` targets are parsed with ``json`` directly so that numbers keep
every digit; going through a binary float would make distinct revisions
compare equal.
"""

from __future__ import annotations

import decimal
import functools
import json
from collections.abc import Callable, Mapping, Set
from typing import Any

from pydantic import TypeAdapter
from pydantic_core import to_jsonable_python

type Deserializer = Callable[[str, type[Any]], Any]


@functools.lru_cache(maxsize=256)
def _adapter(target: type[Any]) -> TypeAdapter[Any]:
    return TypeAdapter(target)


def pydantic_deserializer(serialized: str, target: type[Any]) -> Any:
    """Parse JSON text *serialized* into an instance of *target*.

    Raises ``pydantic.ValidationError`` when the text does not match
    *target* strictly, or ``ValueError`` when a ``Decimal`` target is given
    text that is not a JSON number or numeric JSON string.
    """
    if isinstance(target, type) and issubclass(target, decimal.Decimal):
        return _adapter(target).validate_python(_parse_decimal(serialized), strict=True)
    return _adapter(target).validate_json(serialized, strict=True)


def _parse_decimal(serialized: str) -> Any:
    parsed = json.loads(serialized, parse_float=decimal.Decimal, parse_int=decimal.Decimal)
    if isinstance(parsed, str):
        try:
            return decimal.Decimal(parsed)
        except decimal.InvalidOperation as exc:
            raise ValueError(f"not a decimal number: {parsed!r}") from exc
    return parsed


def is_orderable(value: Any) -> bool:
    """Return True when *value* supports a total order against its own type.

    Mappings and sets are rejected outright: the first cannot be compared
    and ``<`` on the second means "proper subset".  Anything else must
    answer ``value < value`` with ``False``.
    """
    if value is None or isinstance(value, (Mapping, Set)):
        return False
    try:
        result = value < value
    except (TypeError, ArithmeticError):
        return False
    return isinstance(result, bool) and not result


def encode_revision(value: Any) -> Any:
    """Return a JSON-compatible form of a revision value."""
    return to_jsonable_python(value)


def serialize_revision(value: Any) -> str:
    """Return the serialized string form of a revision value.

    JSON strings come back bare (``hello`` rather than ``"hello"``), which
    is the shape upstream producers usually send.
    """
    encoded = encode_revision(value)
    if isinstance(encoded, str):
        return encoded
    return json.dumps(encoded, separators=(",", ":"), ensure_ascii=False)


__all__ = [
    "Deserializer",
    "encode_revision",
    "is_orderable",
    "pydantic_deserializer",
    "serialize_revision",
]
