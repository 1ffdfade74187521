"""Warmup / measure orchestration of a single benchmark.

The harness owns no timing logic: the work-unit reports its own metrics,
the harness runs it the configured number of times, averages the measured
snapshots and hands the averages to the reporter.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from opbench.errors import ConfigurationError, WorkUnitError
from opbench.logging import Logger
from opbench.metrics import AveragedMetrics, MetricAccumulator, MetricSnapshot
from opbench.reporting import ResultReporter

from .config import BenchmarkConfig
from .hooks import ResultHook
from .work_unit import WorkUnit


class BenchmarkHarness:
    """Runs a work-unit through warmup and measured iterations.

    Args:
        work_unit: Operation under test.
        config: Benchmark name and iteration counts.
        reporter: Sink for the averaged results. Defaults to a stdout reporter.
        logger: Logger for run progress. Defaults to one named after the benchmark.
    """

    def __init__(
        self,
        work_unit: WorkUnit,
        config: BenchmarkConfig,
        reporter: ResultReporter | None = None,
        logger: Logger | None = None,
    ) -> None:
        if not isinstance(config, BenchmarkConfig):
            raise ConfigurationError(
                f"Invalid config; expected BenchmarkConfig but got {type(config).__name__}"
            )
        self._work_unit = work_unit
        self._config = config
        self._reporter = reporter if reporter is not None else ResultReporter()
        self._logger = logger if logger is not None else Logger(name=config.name)

    @property
    def name(self) -> str:
        """Benchmark name."""
        return self._config.name

    @property
    def config(self) -> BenchmarkConfig:
        return self._config

    @property
    def work_unit(self) -> WorkUnit:
        return self._work_unit

    @property
    def default_result_key(self) -> str:
        """Metric external monitoring should track for this benchmark."""
        return self._work_unit.default_result_key()

    def _run_once(self, phase: str, iteration: int) -> Mapping:
        try:
            snapshot = self._work_unit.run_once()
        except Exception as exc:
            raise WorkUnitError(self.name, phase, iteration, str(exc)) from exc

        if not isinstance(snapshot, Mapping):
            raise WorkUnitError(
                self.name,
                phase,
                iteration,
                f"run_once returned {type(snapshot).__name__}, expected a mapping",
            )
        return snapshot

    def _run_iterations(
        self, accumulator: MetricAccumulator, hook: ResultHook | None
    ) -> None:
        for i in range(self._config.warmup_iterations):
            self._logger.trace(f"warmup iteration {i}")
            self._run_once("warmup", i)

        for i in range(self._config.measured_iterations):
            self._logger.trace(f"measured iteration {i}")
            snapshot: MetricSnapshot = MappingProxyType(
                dict(self._run_once("measured", i))
            )
            try:
                accumulator.add_results(snapshot)
            except TypeError as exc:
                raise WorkUnitError(self.name, "measured", i, str(exc)) from exc
            if hook is not None:
                hook.add_results(snapshot)

    def _tear_down(self, pending: BaseException | None = None) -> None:
        """Run tear-down; a failure only surfaces if nothing else is propagating."""
        try:
            self._work_unit.tear_down()
        except Exception as exc:
            if pending is None:
                raise WorkUnitError(self.name, "tear_down", message=str(exc)) from exc
            self._logger.error(f"tear_down failed after an earlier error: {exc!r}")
            pending.add_note(f"tear_down also failed: {exc!r}")

    def run(self, hook: ResultHook | None = None) -> AveragedMetrics:
        """Run the benchmark and report its averaged metrics.

        Args:
            hook: Optional observer receiving every measured snapshot and a
                final ``finished()`` call.

        Returns:
            Averaged metrics of the measured iterations.

        Raises:
            WorkUnitError: If set-up, an iteration or tear-down fails.
            MissingMetricError: If a metric required by the reporter is absent.
        """
        accumulator = MetricAccumulator()
        self._logger.info(
            f"Starting benchmark (warmup={self._config.warmup_iterations}, "
            f"measured={self._config.measured_iterations})"
        )

        try:
            try:
                self._work_unit.set_up()
            except Exception as exc:
                raise WorkUnitError(self.name, "set_up", message=str(exc)) from exc

            try:
                self._run_iterations(accumulator, hook)
            except BaseException as exc:
                self._tear_down(pending=exc)
                raise
            self._tear_down()

            if hook is not None:
                hook.finished()

            averages = accumulator.averages()
            self._logger.info(
                f"Finished benchmark ({accumulator.snapshot_count} measured snapshots)"
            )
            self._reporter.report(self.name, averages)
            return averages
        finally:
            self._logger.flush()
