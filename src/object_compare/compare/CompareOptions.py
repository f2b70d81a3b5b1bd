"""Configuration for a single comparison.

Options are immutable. Build them once and reuse them across calls, or pass a
plain mapping / keyword overrides to the compare functions and let
`CompareOptions.coerce` do the conversion.

Example:
    options = CompareOptions(
        ignore_fields=frozenset({"updated_at"}),
        custom_comparators={"tags": lambda c, o: set(c) == set(o)},
    )
    get_changed_fields(current, original, options)
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable

# Receives (current field value, original field value); truthy means unchanged.
type CustomComparator = Callable[[Any, Any], bool]


@dataclass(frozen=True)
class CompareOptions:
    """Policy for deciding whether a field changed.

    Attributes:
        include_nullish: If True, fields whose current value is None (or
            absent) are compared like any other value. If False, such fields
            are never reported as changed.
        deep: If True, nested lists and records are compared by content.
            If False, they are only equal when they are the same object.
        ignore_fields: Field names that are never reported.
        custom_comparators: Per-field predicates that replace the default
            equality for that field, including the nullish policy.
    """

    include_nullish: bool = False
    deep: bool = True
    ignore_fields: frozenset[str] = field(default_factory=frozenset)
    custom_comparators: Mapping[str, CustomComparator] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        # Normalise containers so the instance can't be mutated through them.
        if not isinstance(self.ignore_fields, frozenset):
            if isinstance(self.ignore_fields, str):
                raise TypeError("ignore_fields must be a collection of field names, not a str")
            object.__setattr__(self, "ignore_fields", frozenset(self.ignore_fields))

        comparators = dict(self.custom_comparators)
        for name, comparator in comparators.items():
            if not callable(comparator):
                raise TypeError(
                    f"custom_comparators['{name}'] must be callable, "
                    f"got {type(comparator).__name__}"
                )
        object.__setattr__(self, "custom_comparators", MappingProxyType(comparators))

    def comparator_for(self, name: str) -> CustomComparator | None:
        return self.custom_comparators.get(name)

    def is_ignored(self, name: str) -> bool:
        return name in self.ignore_fields

    @classmethod
    def coerce(
        cls,
        options: CompareOptions | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> CompareOptions:
        """Build a CompareOptions from whatever a caller handed us.

        Args:
            options: An existing CompareOptions, a mapping of option names to
                values, or None for defaults
            **overrides: Option values applied on top of `options`

        Returns:
            A CompareOptions instance

        Raises:
            TypeError: If an option name is unknown or `options` has the wrong type
        """
        if options is None:
            base = cls()
        elif isinstance(options, CompareOptions):
            base = options
        elif isinstance(options, Mapping):
            base = cls(**_check_names(options))
        else:
            raise TypeError(
                f"options must be a CompareOptions or a mapping, got {type(options).__name__}"
            )

        if not overrides:
            return base
        return dataclasses.replace(base, **_check_names(overrides))


_OPTION_NAMES = frozenset(f.name for f in dataclasses.fields(CompareOptions))


def _check_names(values: Mapping[str, Any]) -> dict[str, Any]:
    unknown = sorted(str(name) for name in values if name not in _OPTION_NAMES)
    if unknown:
        raise TypeError(f"Unknown compare option(s): {', '.join(unknown)}")
    return dict(values)
