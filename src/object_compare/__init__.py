"""Detect which fields of a record changed between two snapshots."""

from object_compare.compare.changed_fields import (
    InvalidArgumentError,
    get_changed_fields,
    has_changes,
)
from object_compare.compare.changed_paths import get_changed_paths
from object_compare.compare.CompareOptions import CompareOptions, CustomComparator
from object_compare.compare.values import MISSING, values_equal
from object_compare.tracker.ChangeTracker import ChangeTracker, snapshot

diff_fields = get_changed_fields
has_any_change = has_changes

__all__ = [
    "MISSING",
    "ChangeTracker",
    "CompareOptions",
    "CustomComparator",
    "InvalidArgumentError",
    "diff_fields",
    "get_changed_fields",
    "get_changed_paths",
    "has_any_change",
    "has_changes",
    "snapshot",
    "values_equal",
]
