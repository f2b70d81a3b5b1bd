"""Track a live record against the snapshot taken when it was loaded.

Usage:
    tracker = ChangeTracker(load_user(user_id), ignore_fields={"updated_at"})
    user = tracker.get()
    user["age"] = 31

    if tracker.has_changes():
        repository.update(user_id, tracker.commit())
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import Any

from glom import T, glom

from object_compare.compare.changed_fields import InvalidArgumentError, get_changed_fields
from object_compare.compare.changed_paths import get_changed_paths
from object_compare.compare.CompareOptions import CompareOptions
from object_compare.compare.values import is_record

logger = logging.getLogger(__name__)


def snapshot[S](record: S) -> S:
    """Deep copy a record so later in-place edits to the live one show up in a diff."""
    return copy.deepcopy(record)


class ChangeTracker[R]:
    """Holds a record and a deep copy of its original state.

    The record is edited in place by the caller; every query diffs it against
    the snapshot. Since the snapshot is a deep copy, shallow-mode options will
    report every nested list or record as changed.
    """

    _record: R
    _original: R
    _options: CompareOptions

    def __init__(
        self,
        record: R,
        options: CompareOptions | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> None:
        if not is_record(record):
            raise InvalidArgumentError(
                f"ChangeTracker can only track records, got {type(record).__name__}"
            )
        self._record = record
        self._original = snapshot(record)
        self._options = CompareOptions.coerce(options, **overrides)

    def get(self) -> R:
        return self._record

    @property
    def original(self) -> R:
        return self._original

    @property
    def options(self) -> CompareOptions:
        return self._options

    def changed_fields(self, scope: str = ".") -> dict[Any, Any]:
        """Get the changed fields of the record, or of a nested record.

        Args:
            scope: glom path of the nested record to diff. "." diffs the
                whole record.

        Returns:
            Dict of changed field names to their current values

        Raises:
            glom.PathAccessError: If `scope` doesn't resolve
            InvalidArgumentError: If `scope` resolves to something that isn't a record
        """
        # Use T for root access when path is "."
        spec = T if scope == "." else scope
        current = glom(self._record, spec)
        original = glom(self._original, spec)
        return get_changed_fields(current, original, self._options)

    def has_changes(self, scope: str = ".") -> bool:
        return len(self.changed_fields(scope)) > 0

    def changed_paths(self) -> list[str]:
        """Dot-notation paths of everything that changed since the snapshot."""
        return get_changed_paths(self._record, self._original, self._options)

    def affects(self, path: str) -> bool:
        """Check if a path was affected by the changes so far.

        Args:
            path: Dot-notation path like "address" or "address.city"

        Returns:
            True if the path, or anything nested under it, changed
        """
        return any(
            changed == path or changed.startswith(f"{path}.")
            for changed in self.changed_paths()
        )

    def commit(self) -> dict[Any, Any]:
        """Accept the current state as the new original.

        Call after the changes have been saved.

        Returns:
            The changed fields that were committed
        """
        changed = self.changed_fields()
        self._original = snapshot(self._record)
        logger.debug("Committed %d changed field(s)", len(changed))
        return changed
