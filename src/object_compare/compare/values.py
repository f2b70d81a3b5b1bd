"""Value classification and the recursive equality check behind every diff.

Values fall into one of these kinds:

- nullish: ``None`` or ``MISSING`` (a key that isn't there)
- scalar: strings, numbers, bools, enums, UUIDs, sets
- date-like: ``date``, ``datetime`` and ``time`` instances
- sequence: ``list`` or ``tuple``
- record: any ``Mapping`` or dataclass instance

Anything else is only equal to itself.
"""

from __future__ import annotations

import cmath
import dataclasses
import datetime as dt
import enum
import math
import uuid
from collections.abc import Iterator, Mapping
from decimal import Decimal
from typing import Any, Final, TypeGuard


class _Missing(enum.Enum):
    """Marker for a key that is absent from a record."""

    MISSING = enum.auto()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing.MISSING

type SequenceValue = list[Any] | tuple[Any, ...]

_NUMBER_TYPES = (int, float, complex, Decimal)
_SCALAR_TYPES = (str, bytes, bool, enum.Enum, uuid.UUID, set, frozenset, *_NUMBER_TYPES)
_DATE_TYPES = (dt.date, dt.time)


def is_nullish(value: Any) -> bool:
    return value is None or value is MISSING


def is_date_like(value: Any) -> bool:
    return isinstance(value, _DATE_TYPES)


def is_primitive(value: Any) -> bool:
    """True for nullish, scalar and date-like values."""
    return is_nullish(value) or isinstance(value, _SCALAR_TYPES) or is_date_like(value)


def is_sequence(value: Any) -> TypeGuard[SequenceValue]:
    return isinstance(value, (list, tuple))


def is_record(value: Any) -> bool:
    """True for mappings and dataclass instances (not dataclass types)."""
    if isinstance(value, Mapping):
        return True
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def record_keys(record: Any) -> list[Any]:
    """Field names of a record, in iteration order."""
    if isinstance(record, Mapping):
        return list(record.keys())
    return [f.name for f in dataclasses.fields(record)]


def record_get(record: Any, key: Any) -> Any:
    """Look up a field, returning MISSING when the record doesn't have it."""
    if isinstance(record, Mapping):
        return record.get(key, MISSING)
    if key not in _field_names(record):
        return MISSING
    return getattr(record, key)


def _field_names(record: Any) -> frozenset[str]:
    return frozenset(f.name for f in dataclasses.fields(record))


def record_items(record: Any) -> Iterator[tuple[Any, Any]]:
    for key in record_keys(record):
        yield key, record_get(record, key)


def _is_number(value: Any) -> bool:
    return isinstance(value, _NUMBER_TYPES) and not isinstance(value, bool)


def _is_nan(value: Any) -> bool:
    if isinstance(value, float):
        return math.isnan(value)
    if isinstance(value, complex):
        return cmath.isnan(value)
    if isinstance(value, Decimal):
        return value.is_nan()
    return False


def strict_equal(current: Any, original: Any) -> bool:
    """Equality without coercion between kinds.

    Numbers compare across numeric types (``1 == 1.0``), but a bool never
    equals a number and a str never equals anything that isn't a str.
    NaN is unequal to everything, itself included.
    """
    if _is_nan(current) or _is_nan(original):
        return False
    if current is original:
        return True
    if _is_number(current) and _is_number(original):
        return bool(current == original)
    if type(current) is not type(original):
        return False
    return bool(current == original)


def values_equal(current: Any, original: Any, deep: bool = True) -> bool:
    """Decide whether two values are equal.

    Args:
        current: The value from the current snapshot
        original: The value from the original snapshot
        deep: Compare nested lists and records by content. When False, they
            are only equal if they are the same object.

    Returns:
        True if the values are considered equal
    """
    if is_primitive(current) or is_primitive(original):
        if is_date_like(current) and is_date_like(original):
            return bool(current == original)
        return strict_equal(current, original)

    if is_sequence(current) and is_sequence(original):
        if len(current) != len(original):
            return False
        if not deep:
            return current is original
        return all(
            values_equal(value, original[index], deep)
            for index, value in enumerate(current)
        )

    if is_record(current) and is_record(original):
        if not deep:
            return current is original
        current_keys = record_keys(current)
        # Only the key counts are compared. Keys of current that original
        # lacks read as MISSING.
        if len(current_keys) != len(record_keys(original)):
            return False
        return all(
            values_equal(record_get(current, key), record_get(original, key), deep)
            for key in current_keys
        )

    return current is original
