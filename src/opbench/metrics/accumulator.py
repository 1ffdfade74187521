"""Running averages over repeated metric snapshots."""

from __future__ import annotations

import operator
from collections.abc import Mapping

MetricSnapshot = Mapping[str, int]
AveragedMetrics = dict[str, float]


class MetricAccumulator:
    """Accumulates named integer metrics and averages them per key.

    Each key keeps its own count, so snapshots with uneven key sets still
    average correctly: a key seen in 1 of 3 snapshots is averaged over 1.
    Sums are exact Python integers and cannot overflow.

    Not safe for concurrent writers; one run owns one accumulator.
    """

    def __init__(self) -> None:
        self._sums: dict[str, int] = {}
        self._counts: dict[str, int] = {}
        self._snapshot_count = 0

    def add_results(self, snapshot: MetricSnapshot) -> None:
        """Add every metric of a snapshot to its running sum.

        Args:
            snapshot: Mapping of metric name to integral value.

        A rejected snapshot leaves the accumulator unchanged.

        Raises:
            TypeError: If a value is not integral, or is a bool.
        """
        values = []
        for key, value in snapshot.items():
            if isinstance(value, bool):
                raise TypeError(f"Invalid value for {key!r}; expected int but got bool")
            values.append((key, operator.index(value)))

        for key, value in values:
            if key in self._sums:
                self._sums[key] += value
                self._counts[key] += 1
            else:
                self._sums[key] = value
                self._counts[key] = 1
        self._snapshot_count += 1

    def averages(self) -> AveragedMetrics:
        """Return sum / count for every key seen so far.

        Returns:
            Mapping of metric name to average; empty if nothing was added.
        """
        return {
            key: total / self._counts[key]
            for key, total in self._sums.items()
            if self._counts[key] > 0
        }

    def counts(self) -> dict[str, int]:
        """Number of snapshots that contained each key."""
        return dict(self._counts)

    @property
    def snapshot_count(self) -> int:
        """Total number of snapshots added."""
        return self._snapshot_count
