"""Running a named collection of benchmarks into an output directory."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Self

from msgspec import Struct

from opbench.errors import ConfigurationError
from opbench.harness import BenchmarkHarness, ForwardingResultHook
from opbench.logging import Logger
from opbench.metrics import AveragedMetrics
from opbench.reporting.writers import JsonResultWriter, SimpleLineResultWriter


def _compile_pattern(pattern: str) -> re.Pattern:
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise ConfigurationError(f"Invalid pattern {pattern!r}; {exc}") from exc


_FILE_SAFE_NAME = re.compile(r"[A-Za-z0-9_][A-Za-z0-9_.\-]*")


class SuiteConfig(Struct):
    """Settings shared by every benchmark of a suite run."""

    output_dir: str
    pattern: str
    warmup_iterations: int
    measured_iterations: int
    rows: int

    def __post_init__(self):
        """Validate the pattern, iteration counts and input size."""
        _compile_pattern(self.pattern)
        if self.warmup_iterations < 0:
            raise ConfigurationError(
                f"Invalid warmup_iterations; must not be negative but got {self.warmup_iterations}"
            )
        if self.measured_iterations < 0:
            raise ConfigurationError(
                f"Invalid measured_iterations; must not be negative but got {self.measured_iterations}"
            )
        if self.rows <= 0:
            raise ConfigurationError(f"Invalid rows; expected >0 but got {self.rows}")

    @classmethod
    def default(cls) -> Self:
        """Return config running everything, 10 warmup / 100 measured iterations over 1M rows."""
        return cls(
            output_dir="benchmark_results",
            pattern=".*",
            warmup_iterations=10,
            measured_iterations=100,
            rows=1_000_000,
        )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Self:
        """Return the default config overridden by OPBENCH_* environment variables."""
        env = os.environ if environ is None else environ
        defaults = cls.default()

        def read_int(key: str, default: int) -> int:
            raw = env.get(key)
            if raw is None or raw == "":
                return default
            try:
                return int(raw.replace("_", ""))
            except ValueError as exc:
                raise ConfigurationError(
                    f"Invalid {key}; expected integer but got {raw!r}"
                ) from exc

        return cls(
            output_dir=env.get("OPBENCH_OUTPUT_DIR") or defaults.output_dir,
            pattern=env.get("OPBENCH_PATTERN") or defaults.pattern,
            warmup_iterations=read_int("OPBENCH_WARMUP", defaults.warmup_iterations),
            measured_iterations=read_int(
                "OPBENCH_ITERATIONS", defaults.measured_iterations
            ),
            rows=read_int("OPBENCH_ROWS", defaults.rows),
        )


class BenchmarkSuite:
    """Runs harnesses in order, saving every measured sample to disk.

    For each benchmark ``<name>``, ``<output_dir>/<name>.json`` receives all
    samples as one JSON document and ``<output_dir>/<name>.txt`` one line per
    sample.

    Args:
        harnesses: Benchmarks to run; names must be unique and usable as file names.
        output_dir: Directory for the sample files, created on demand.
        logger: Logger for suite progress.
    """

    def __init__(
        self,
        harnesses: Iterable[BenchmarkHarness],
        output_dir: str | os.PathLike,
        logger: Logger | None = None,
    ) -> None:
        self._harnesses = list(harnesses)
        seen: set[str] = set()
        for harness in self._harnesses:
            if not _FILE_SAFE_NAME.fullmatch(harness.name):
                raise ConfigurationError(
                    f"Invalid benchmark name {harness.name!r}; expected letters, digits, '_', '.' or '-'"
                )
            if harness.name in seen:
                raise ConfigurationError(f"Duplicate benchmark name {harness.name!r}")
            seen.add(harness.name)

        self.output_dir = Path(output_dir)
        self._logger = logger if logger is not None else Logger(name="suite")

    @property
    def benchmark_names(self) -> list[str]:
        return [harness.name for harness in self._harnesses]

    def select(self, pattern: str = ".*") -> list[BenchmarkHarness]:
        """Return the harnesses whose name matches ``pattern`` (re.search)."""
        regex = _compile_pattern(pattern)
        return [harness for harness in self._harnesses if regex.search(harness.name)]

    def run(self, pattern: str = ".*") -> dict[str, AveragedMetrics]:
        """Run every benchmark matching ``pattern``.

        The first failing benchmark aborts the suite.

        Returns:
            Averaged metrics keyed by benchmark name, in run order.
        """
        selected = self.select(pattern)
        self._logger.info(
            f"Running {len(selected)} of {len(self._harnesses)} benchmarks into {self.output_dir}"
        )
        self.output_dir.mkdir(parents=True, exist_ok=True)

        results: dict[str, AveragedMetrics] = {}
        for harness in selected:
            json_path = self.output_dir / f"{harness.name}.json"
            line_path = self.output_dir / f"{harness.name}.txt"
            with open(json_path, "w") as json_file, open(line_path, "w") as line_file:
                hook = ForwardingResultHook(
                    JsonResultWriter(json_file, harness.name),
                    SimpleLineResultWriter(line_file, harness.name),
                )
                results[harness.name] = harness.run(hook)

        self._logger.flush()
        return results
