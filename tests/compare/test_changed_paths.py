"""Tests for get_changed_paths()."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import pytest

from object_compare.compare.changed_fields import InvalidArgumentError
from object_compare.compare.changed_paths import get_changed_paths


@dataclass
class Address:
    street: str
    city: str


class TestChangedPaths:
    """Tests for nested path reporting."""

    def test_scalar_field_reported_by_name(self) -> None:
        assert get_changed_paths({"age": 31}, {"age": 30}) == ["age"]

    def test_nested_record_change(self) -> None:
        current = {"address": {"street": "Main St", "city": "New York"}}
        original = {"address": {"street": "Main St", "city": "Boston"}}

        assert get_changed_paths(current, original) == ["address.city"]

    def test_appended_list_item(self) -> None:
        current = {"tags": ["user", "admin", "manager"]}
        original = {"tags": ["user", "admin"]}

        assert get_changed_paths(current, original) == ["tags.2"]

    def test_dataclass_field_change(self) -> None:
        current = {"address": Address("Main St", "New York")}
        original = {"address": Address("Main St", "Boston")}

        assert get_changed_paths(current, original) == ["address.city"]

    def test_field_absent_from_original(self) -> None:
        assert get_changed_paths({"address": {"city": "Boston"}}, {}) == ["address"]

    def test_fields_in_result_order(self) -> None:
        current = {"name": "Jane", "age": 31, "address": {"city": "New York"}}
        original = {"name": "John", "age": 30, "address": {"city": "Boston"}}

        assert get_changed_paths(current, original) == ["name", "age", "address.city"]

    def test_shallow_change_falls_back_to_field(self) -> None:
        """Equal contents flagged by shallow mode are reported by field name."""
        assert get_changed_paths({"a": [1]}, {"a": [1]}, deep=False) == ["a"]

    def test_custom_comparator_falls_back_to_field(self) -> None:
        def always_changed(current: Any, original: Any) -> bool:
            return False

        paths = get_changed_paths(
            {"a": {"x": 1}}, {"a": {"x": 1}}, custom_comparators={"a": always_changed}
        )

        assert paths == ["a"]

    def test_numeric_type_change_is_not_a_path(self) -> None:
        """1 vs 1.0 is equal, so only the real change is reported."""
        current = {"a": {"x": 1.0, "y": 2}}
        original = {"a": {"x": 1, "y": 3}}

        assert get_changed_paths(current, original) == ["a.y"]

    def test_list_vs_tuple_is_not_a_path(self) -> None:
        current = {"a": {"items": [1, 2], "n": 2}}
        original = {"a": {"items": (1, 2), "n": 1}}

        assert get_changed_paths(current, original) == ["a.n"]

    def test_no_changes(self) -> None:
        assert get_changed_paths({"a": {"x": [1]}}, {"a": {"x": [1]}}) == []

    def test_respects_options(self) -> None:
        current = {"a": {"x": 2}, "b": 1}
        original = {"a": {"x": 1}, "b": 2}

        assert get_changed_paths(current, original, ignore_fields={"b"}) == ["a.x"]

    def test_invalid_arguments(self) -> None:
        with pytest.raises(InvalidArgumentError):
            get_changed_paths(None, {})
