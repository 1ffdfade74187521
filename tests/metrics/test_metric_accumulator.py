"""Tests for MetricAccumulator."""

from __future__ import annotations

import numpy as np
import pytest

from opbench.metrics import MetricAccumulator


class TestAverages:
    """Test per-key averaging."""

    def test_empty_accumulator_has_no_averages(self) -> None:
        """No snapshots produce an empty mapping, not a division error."""
        accumulator = MetricAccumulator()
        assert accumulator.averages() == {}
        assert accumulator.snapshot_count == 0

    def test_identical_key_sets_average_to_mean(self) -> None:
        """Each key averages to the arithmetic mean of its values."""
        accumulator = MetricAccumulator()
        accumulator.add_results({"cpu_nanos": 100, "input_rows": 10})
        accumulator.add_results({"cpu_nanos": 200, "input_rows": 20})
        accumulator.add_results({"cpu_nanos": 600, "input_rows": 33})

        assert accumulator.averages() == {"cpu_nanos": 300.0, "input_rows": 21.0}
        assert accumulator.snapshot_count == 3

    def test_identical_snapshots_average_to_input(self, constant_snapshot) -> None:
        """Averaging the same snapshot returns its values unchanged."""
        accumulator = MetricAccumulator()
        for _ in range(3):
            accumulator.add_results(constant_snapshot)

        assert accumulator.averages() == {
            key: float(value) for key, value in constant_snapshot.items()
        }

    def test_uneven_key_sets_use_per_key_counts(self) -> None:
        """A key seen once is averaged over one snapshot, not all of them."""
        accumulator = MetricAccumulator()
        accumulator.add_results({"cpu_nanos": 10, "extra": 7})
        accumulator.add_results({"cpu_nanos": 20})
        accumulator.add_results({"cpu_nanos": 30})

        averages = accumulator.averages()
        assert averages["cpu_nanos"] == 20.0
        assert averages["extra"] == 7.0
        assert accumulator.counts() == {"cpu_nanos": 3, "extra": 1}

    def test_missing_key_is_absent(self) -> None:
        """Keys never added are simply not in the result."""
        accumulator = MetricAccumulator()
        accumulator.add_results({"cpu_nanos": 1})
        assert "input_rows" not in accumulator.averages()

    def test_empty_snapshot_counts_but_adds_no_keys(self) -> None:
        accumulator = MetricAccumulator()
        accumulator.add_results({})
        assert accumulator.snapshot_count == 1
        assert accumulator.averages() == {}


class TestValues:
    """Test value handling."""

    def test_large_sums_do_not_overflow(self) -> None:
        """Sums beyond 64 bits stay exact."""
        big = 2**63 - 1
        accumulator = MetricAccumulator()
        accumulator.add_results({"bytes": big})
        accumulator.add_results({"bytes": big})
        assert accumulator.averages()["bytes"] == float(big)

    def test_numpy_integers_are_accepted(self) -> None:
        accumulator = MetricAccumulator()
        accumulator.add_results({"rows": np.int64(4)})
        accumulator.add_results({"rows": np.int32(6)})
        assert accumulator.averages() == {"rows": 5.0}

    @pytest.mark.parametrize("value", [1.5, "10", None])
    def test_non_integral_values_rejected(self, value) -> None:
        accumulator = MetricAccumulator()
        with pytest.raises(TypeError):
            accumulator.add_results({"rows": value})

    @pytest.mark.parametrize("value", [True, False])
    def test_bool_values_rejected(self, value) -> None:
        """Booleans are not counted as 1 and 0."""
        accumulator = MetricAccumulator()
        with pytest.raises(TypeError):
            accumulator.add_results({"rows": value})
        assert accumulator.snapshot_count == 0

    def test_rejected_snapshot_leaves_state_unchanged(self) -> None:
        """Keys before the bad value in a rejected snapshot are not added."""
        accumulator = MetricAccumulator()
        accumulator.add_results({"a": 10, "b": 10})

        with pytest.raises(TypeError):
            accumulator.add_results({"a": 1000, "b": 1.5})

        assert accumulator.averages() == {"a": 10.0, "b": 10.0}
        assert accumulator.counts() == {"a": 1, "b": 1}
        assert accumulator.snapshot_count == 1

    def test_averages_is_a_fresh_copy(self) -> None:
        """Mutating returned averages does not affect later calls."""
        accumulator = MetricAccumulator()
        accumulator.add_results({"rows": 2})
        averages = accumulator.averages()
        averages["rows"] = 100.0
        assert accumulator.averages() == {"rows": 2.0}
