"""Exception types raised by the benchmark harness."""

from __future__ import annotations


class BenchmarkError(Exception):
    """Base class for every error raised by opbench."""


class ConfigurationError(BenchmarkError, ValueError):
    """Raised when a benchmark, logger or suite is constructed with invalid settings."""


class WorkUnitError(BenchmarkError):
    """Raised when a work-unit fails during set-up, an iteration or tear-down.

    The original exception is available as ``__cause__``.

    Args:
        benchmark_name: Name of the benchmark whose work-unit failed.
        phase: One of "set_up", "warmup", "measured" or "tear_down".
        iteration: Zero-based iteration index within the phase, if any.
        message: Optional human readable detail.
    """

    def __init__(
        self,
        benchmark_name: str,
        phase: str,
        iteration: int | None = None,
        message: str = "",
    ) -> None:
        self.benchmark_name = benchmark_name
        self.phase = phase
        self.iteration = iteration

        where = phase if iteration is None else f"{phase} iteration {iteration}"
        text = f"Benchmark '{benchmark_name}' failed during {where}"
        if message:
            text = f"{text}: {message}"
        super().__init__(text)


class MissingMetricError(BenchmarkError, LookupError):
    """Raised when averaged results lack metrics required for reporting.

    Args:
        benchmark_name: Name of the benchmark being reported.
        missing: Names of the absent metrics.
    """

    def __init__(self, benchmark_name: str, missing: tuple[str, ...]) -> None:
        self.benchmark_name = benchmark_name
        self.missing = missing
        super().__init__(
            f"Benchmark '{benchmark_name}' is missing required metrics: "
            f"{', '.join(missing)}"
        )
