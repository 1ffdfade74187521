"""Work-unit contract injected into the benchmark harness."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from opbench.metrics import MetricSnapshot


class WorkUnit(ABC):
    """The operation being benchmarked.

    Implementations report their own metrics; the harness only counts
    iterations and averages what it is given.

    Subclasses must implement:
        run_once(): Perform one unit of work and return its metrics.
        default_result_key(): Metric external monitoring should track.
    """

    def set_up(self) -> None:
        """Initialize any state needed by run_once. Called once before all iterations."""

    @abstractmethod
    def run_once(self) -> MetricSnapshot:
        """Run the work once and return its metrics.

        Returns:
            Mapping of metric name to integer value, conventionally including
            cpu_nanos, input_rows, input_bytes, output_rows and output_bytes.
        """

    def tear_down(self) -> None:
        """Release state created by set_up. Called once after all iterations."""

    @abstractmethod
    def default_result_key(self) -> str:
        """Some monitoring tools only accept one result.

        Returns:
            Name of the metric that should be tracked.
        """


class FunctionWorkUnit(WorkUnit):
    """Adapts plain callables to the WorkUnit contract.

    Args:
        run_once: Callable returning a metric snapshot.
        default_result_key: Metric name external monitoring should track.
        set_up: Optional callable run once before all iterations.
        tear_down: Optional callable run once after all iterations.
    """

    def __init__(
        self,
        run_once: Callable[[], MetricSnapshot],
        default_result_key: str = "cpu_nanos",
        set_up: Callable[[], None] | None = None,
        tear_down: Callable[[], None] | None = None,
    ) -> None:
        self._run_once = run_once
        self._default_result_key = default_result_key
        self._set_up = set_up
        self._tear_down = tear_down

    def set_up(self) -> None:
        if self._set_up is not None:
            self._set_up()

    def run_once(self) -> MetricSnapshot:
        return self._run_once()

    def tear_down(self) -> None:
        if self._tear_down is not None:
            self._tear_down()

    def default_result_key(self) -> str:
        return self._default_result_key
