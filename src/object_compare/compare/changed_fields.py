"""Detect which top-level fields of a record changed between two snapshots.

Typical use is right before a save: diff the edited record against the copy
that was loaded, and send only what changed.

Example:
    original = {"name": "John", "age": 30}
    current = {"name": "John", "age": 31}

    get_changed_fields(current, original)  # {"age": 31}
    has_changes(current, original)         # True
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from object_compare.compare.CompareOptions import CompareOptions
from object_compare.compare.values import (
    is_nullish,
    is_record,
    record_get,
    record_items,
    values_equal,
)

logger = logging.getLogger(__name__)


class InvalidArgumentError(TypeError):
    """Raised when a value passed as a record is not a record."""


def validate_records(current: Any, original: Any) -> None:
    """Check both snapshots are records (mappings or dataclass instances).

    Raises:
        InvalidArgumentError: If either argument is None, a scalar, a sequence
            or any other non-record value
    """
    for name, value in (("current", current), ("original", original)):
        if not is_record(value):
            raise InvalidArgumentError(
                f"Both current and original must be records, "
                f"got {type(value).__name__} for {name}"
            )


def get_changed_fields(
    current: Any,
    original: Any,
    options: CompareOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> dict[Any, Any]:
    """Get the fields of `current` whose values differ from `original`.

    Only fields of `current` are visited, so the result never contains a
    field that exists only in `original`.

    Args:
        current: Current state of the record
        original: Original state of the record to compare against
        options: Comparison policy (CompareOptions or a mapping of its fields)
        **overrides: Individual option values, applied on top of `options`

    Returns:
        Dict of changed field names to their current values, in the order
        the fields appear in `current`

    Raises:
        InvalidArgumentError: If either input is not a record
    """
    validate_records(current, original)
    opts = CompareOptions.coerce(options, **overrides)

    changed: dict[Any, Any] = {}
    for name, current_field in record_items(current):
        if opts.is_ignored(name):
            continue

        original_field = record_get(original, name)

        comparator = opts.comparator_for(name)
        if comparator is not None:
            if not comparator(current_field, original_field):
                changed[name] = current_field
            continue

        if not opts.include_nullish and is_nullish(current_field):
            continue

        if not values_equal(current_field, original_field, opts.deep):
            changed[name] = current_field

    if changed:
        logger.debug("Changed fields: %s", ", ".join(map(str, changed)))
    return changed


def has_changes(
    current: Any,
    original: Any,
    options: CompareOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> bool:
    """Check whether any field of `current` differs from `original`.

    Raises:
        InvalidArgumentError: If either input is not a record
    """
    return len(get_changed_fields(current, original, options, **overrides)) > 0
