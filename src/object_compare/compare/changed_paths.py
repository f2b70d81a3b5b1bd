"""Nested paths inside changed fields.

`get_changed_fields` answers "which fields changed". This module answers
"where inside those fields", using DeepDiff to walk the nested values of each
changed field. Paths are returned in dot notation, e.g. ``address.city`` or
``tags.2``.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from deepdiff import DeepDiff, parse_path
from deepdiff.helper import notpresent

from object_compare.compare.changed_fields import get_changed_fields
from object_compare.compare.CompareOptions import CompareOptions
from object_compare.compare.values import MISSING, is_primitive, record_get, values_equal


def _normalize_diff_path(diff_path: str) -> str:
    """Convert DeepDiff path like root['address']['city'] to dot notation 'address.city'."""
    parts = parse_path(diff_path)
    return ".".join(str(p) for p in parts)


def _levels(diff: DeepDiff) -> Iterator[Any]:
    for levels in diff.values():
        yield from levels


def _field_paths(name: Any, current_field: Any, original_field: Any) -> list[str]:
    field_path = str(name)
    if original_field is MISSING or is_primitive(current_field) or is_primitive(original_field):
        return [field_path]

    diff = DeepDiff(original_field, current_field, view="tree")
    paths: list[str] = []
    for level in _levels(diff):
        # DeepDiff flags 1 vs 1.0 and list vs tuple; values_equal does not.
        if level.t1 is not notpresent and level.t2 is not notpresent:
            if values_equal(level.t2, level.t1):
                continue
        nested = _normalize_diff_path(level.path())
        path = f"{field_path}.{nested}" if nested else field_path
        if path not in paths:
            paths.append(path)

    # Shallow mode and custom comparators can flag a field whose contents
    # DeepDiff considers equal.
    return paths or [field_path]


def get_changed_paths(
    current: Any,
    original: Any,
    options: CompareOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> list[str]:
    """Get dot-notation paths of everything that changed, field by field.

    Fields are visited in the order `get_changed_fields` reports them. A
    scalar field, or one absent from `original`, is reported by name alone.

    Args:
        current: Current state of the record
        original: Original state of the record to compare against
        options: Comparison policy (CompareOptions or a mapping of its fields)
        **overrides: Individual option values, applied on top of `options`

    Returns:
        List of dot-notation paths

    Raises:
        InvalidArgumentError: If either input is not a record
    """
    changed = get_changed_fields(current, original, options, **overrides)
    paths: list[str] = []
    for name, current_field in changed.items():
        paths.extend(_field_paths(name, current_field, record_get(original, name)))
    return paths
