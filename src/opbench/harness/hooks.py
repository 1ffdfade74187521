"""Observers notified of every measured snapshot of a run."""

from __future__ import annotations

from abc import ABC, abstractmethod

from opbench.metrics import MetricSnapshot


class ResultHook(ABC):
    """Passive sink for the measured results of one benchmark run.

    Hooks are passed to each ``BenchmarkHarness.run`` call and never stored
    on the harness. Warmup results are never delivered.
    """

    @abstractmethod
    def add_results(self, snapshot: MetricSnapshot) -> None:
        """Receive the metrics of one measured iteration.

        Args:
            snapshot: Read-only mapping of metric name to value.
        """

    @abstractmethod
    def finished(self) -> None:
        """Called once after tear-down of a successful run."""


class ForwardingResultHook(ResultHook):
    """Forwards every notification to each wrapped hook, in order.

    Args:
        *hooks: Hooks to notify.
    """

    def __init__(self, *hooks: ResultHook) -> None:
        self.hooks = list(hooks)

    def add_results(self, snapshot: MetricSnapshot) -> None:
        for hook in self.hooks:
            hook.add_results(snapshot)

    def finished(self) -> None:
        for hook in self.hooks:
            hook.finished()
