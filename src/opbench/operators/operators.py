"""Concrete operator benchmarks over an orders-like table.

Inputs are an ``orderkey`` int64 column and a ``totalprice`` float64 column
in which roughly 1% of the values are NaN (null).
"""

from __future__ import annotations

import numpy as np

from .base import Columns, OperatorBenchmark

NULL_FRACTION = 0.01
MAX_PRICE = 500_000.0


def _orders(rows: int, rng: np.random.Generator) -> Columns:
    orderkey = rng.permutation(rows).astype(np.int64)
    totalprice = rng.uniform(0.0, MAX_PRICE, size=rows)
    totalprice[rng.random(rows) < NULL_FRACTION] = np.nan
    return {"orderkey": orderkey, "totalprice": totalprice}


class CountAggregationBenchmark(OperatorBenchmark):
    """count(totalprice): number of non-null prices."""

    benchmark_name = "count_agg"

    def _generate_columns(self, rng: np.random.Generator) -> Columns:
        return {"totalprice": _orders(self.rows, rng)["totalprice"]}

    def execute(self, columns: Columns) -> Columns:
        count = np.count_nonzero(~np.isnan(columns["totalprice"]))
        return {"count": np.array([count], dtype=np.int64)}


class DoubleSumAggregationBenchmark(OperatorBenchmark):
    """sum(totalprice), ignoring nulls."""

    benchmark_name = "double_sum_agg"

    def _generate_columns(self, rng: np.random.Generator) -> Columns:
        return {"totalprice": _orders(self.rows, rng)["totalprice"]}

    def execute(self, columns: Columns) -> Columns:
        return {"sum": np.array([np.nansum(columns["totalprice"])], dtype=np.float64)}


class PredicateFilterBenchmark(OperatorBenchmark):
    """Rows whose totalprice falls inside a fixed band.

    Args:
        rows: Number of input rows.
        seed: Input generator seed.
        low: Inclusive lower bound of the band.
        high: Exclusive upper bound of the band.
    """

    benchmark_name = "predicate_filter"

    def __init__(
        self,
        rows: int = 1_000_000,
        seed: int = 42,
        low: float = 1_000.0,
        high: float = 50_000.0,
    ) -> None:
        super().__init__(rows, seed)
        self.low = low
        self.high = high

    def _generate_columns(self, rng: np.random.Generator) -> Columns:
        return _orders(self.rows, rng)

    def execute(self, columns: Columns) -> Columns:
        totalprice = columns["totalprice"]
        # NaN compares False on both sides, so nulls are filtered out.
        mask = (totalprice >= self.low) & (totalprice < self.high)
        return {name: column[mask] for name, column in columns.items()}


class OrderByBenchmark(OperatorBenchmark):
    """All rows ordered by totalprice, nulls last."""

    benchmark_name = "order_by"

    def _generate_columns(self, rng: np.random.Generator) -> Columns:
        return _orders(self.rows, rng)

    def execute(self, columns: Columns) -> Columns:
        order = np.argsort(columns["totalprice"], kind="stable")
        return {name: column[order] for name, column in columns.items()}


def create_operator_benchmarks(rows: int = 1_000_000, seed: int = 42) -> list[OperatorBenchmark]:
    """Instantiate every built-in operator benchmark with the same input size."""
    return [
        CountAggregationBenchmark(rows, seed),
        DoubleSumAggregationBenchmark(rows, seed),
        PredicateFilterBenchmark(rows, seed),
        OrderByBenchmark(rows, seed),
    ]
