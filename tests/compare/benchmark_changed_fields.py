"""Performance benchmarks for get_changed_fields().

Run with: python -m pytest tests/compare/benchmark_changed_fields.py -v -s
"""

# pyright: reportUnknownParameterType=false
# pyright: reportMissingParameterType=false

import copy
import time
from typing import Any, Callable

import pytest

from object_compare.compare.changed_fields import get_changed_fields


def create_record(num_items: int, item_size: int = 20) -> dict[str, Any]:
    """Create a record sized like a typical API resource with nested lists."""
    return {
        "id": "order-1",
        "status": "open",
        "customer": {"name": "John", "address": {"street": "Main St", "city": "Boston"}},
        "items": [
            {"sku": f"sku-{i}", "qty": i, "notes": ["x" * item_size] * 3}
            for i in range(num_items)
        ],
    }


def benchmark(fn: Callable[[], Any], iterations: int = 100) -> dict[str, float]:
    """Time a call and return stats in microseconds."""
    times_us = []
    for _ in range(iterations):
        start = time.perf_counter()
        fn()
        times_us.append((time.perf_counter() - start) * 1_000_000)

    return {
        "avg_us": sum(times_us) / len(times_us),
        "p99_us": sorted(times_us)[int(len(times_us) * 0.99)],
    }


class TestChangedFieldsPerformance:
    """Benchmarks for deep comparisons."""

    @pytest.mark.benchmark
    def test_small_record_deep(self) -> None:
        """10 items, no changes: should be < 1ms."""
        original = create_record(10)
        current = copy.deepcopy(original)

        stats = benchmark(lambda: get_changed_fields(current, original))

        print(f"\nSmall record deep: avg={stats['avg_us']:.0f}µs p99={stats['p99_us']:.0f}µs")
        assert stats["avg_us"] < 1000, f"Deep compare too slow: {stats['avg_us']}µs"

    @pytest.mark.benchmark
    def test_large_record_shallow(self) -> None:
        """Shallow mode doesn't walk the 1000 items."""
        original = create_record(1000)
        current = dict(original)

        stats = benchmark(lambda: get_changed_fields(current, original, deep=False))

        print(f"\nLarge record shallow: avg={stats['avg_us']:.0f}µs p99={stats['p99_us']:.0f}µs")
        assert stats["avg_us"] < 1000, f"Shallow compare too slow: {stats['avg_us']}µs"
