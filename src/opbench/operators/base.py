"""Base class for numpy-backed operator benchmarks.

Subclasses generate their input columns once in set_up and implement a
single ``execute`` step; this class times that step and derives the row
and byte counts reported to the harness.
"""

from __future__ import annotations

from abc import abstractmethod

import numpy as np

from opbench.errors import ConfigurationError
from opbench.harness import WorkUnit
from opbench.time import cpu_time_ns, wall_time_ns

Columns = dict[str, np.ndarray]


def _row_count(columns: Columns) -> int:
    if not columns:
        return 0
    return len(next(iter(columns.values())))


def _byte_count(columns: Columns) -> int:
    return sum(column.nbytes for column in columns.values())


class OperatorBenchmark(WorkUnit):
    """Work-unit measuring one columnar operator over generated data.

    Subclasses must implement:
        _generate_columns(rng): Build the input columns.
        execute(columns): Apply the operator and return output columns.

    Args:
        rows: Number of input rows to generate.
        seed: Seed of the input generator, so runs are reproducible.
    """

    benchmark_name = ""

    def __init__(self, rows: int = 1_000_000, seed: int = 42) -> None:
        if rows <= 0:
            raise ConfigurationError(f"Invalid rows; expected >0 but got {rows}")
        self.rows = rows
        self.seed = seed
        self._columns: Columns | None = None

    @abstractmethod
    def _generate_columns(self, rng: np.random.Generator) -> Columns:
        """Create the input columns, each of length ``self.rows``."""

    @abstractmethod
    def execute(self, columns: Columns) -> Columns:
        """Apply the operator.

        Args:
            columns: Input columns from set_up.

        Returns:
            Output columns; all of equal length.
        """

    def set_up(self) -> None:
        self._columns = self._generate_columns(np.random.default_rng(self.seed))

    def run_once(self) -> dict[str, int]:
        if self._columns is None:
            raise RuntimeError("set_up must be called before run_once")

        wall_start = wall_time_ns()
        cpu_start = cpu_time_ns()
        output = self.execute(self._columns)
        cpu_nanos = cpu_time_ns() - cpu_start
        wall_nanos = wall_time_ns() - wall_start

        return {
            "cpu_nanos": cpu_nanos,
            "wall_nanos": wall_nanos,
            "input_rows": _row_count(self._columns),
            "input_bytes": _byte_count(self._columns),
            "output_rows": _row_count(output),
            "output_bytes": _byte_count(output),
        }

    def tear_down(self) -> None:
        self._columns = None

    def default_result_key(self) -> str:
        return "cpu_nanos"
