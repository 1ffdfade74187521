"""Summary line formatting for averaged benchmark results.

Writes to an injected text stream so reports can be captured without
touching process-wide stdout.
"""

from __future__ import annotations

import sys
from collections.abc import Mapping
from typing import TextIO

from opbench.errors import MissingMetricError

from .formatting import (
    format_count,
    format_count_rate,
    format_data_rate,
    format_data_size,
    nanos_to_millis,
)

REQUIRED_METRICS = (
    "cpu_nanos",
    "input_rows",
    "input_bytes",
    "output_rows",
    "output_bytes",
)

REPORT_FORMAT = (
    "%35s :: %8.3f cpu ms :: in %5s,  %6s,  %8s,  %8s :: out %5s,  %6s,  %8s,  %8s"
)


class ResultReporter:
    """Formats averaged metrics into a one-line summary.

    Args:
        stream: Destination text stream. Defaults to stdout, resolved at
            report time.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        """Stream the report line is written to."""
        return self._stream if self._stream is not None else sys.stdout

    def format(self, name: str, averages: Mapping[str, float]) -> str:
        """Build the summary line without writing it.

        Args:
            name: Benchmark name.
            averages: Averaged metrics of the run.

        Returns:
            Formatted summary line.

        Raises:
            MissingMetricError: If a required metric is absent.
        """
        missing = tuple(key for key in REQUIRED_METRICS if key not in averages)
        if missing:
            raise MissingMetricError(name, missing)

        cpu_nanos = averages["cpu_nanos"]

        input_rows = int(averages["input_rows"])
        input_bytes = averages["input_bytes"]

        output_rows = int(averages["output_rows"])
        output_bytes = averages["output_bytes"]

        return REPORT_FORMAT % (
            name,
            nanos_to_millis(cpu_nanos),
            format_count(input_rows),
            format_data_size(input_bytes),
            format_count_rate(input_rows, cpu_nanos),
            format_data_rate(input_bytes, cpu_nanos),
            format_count(output_rows),
            format_data_size(output_bytes),
            format_count_rate(output_rows, cpu_nanos),
            format_data_rate(output_bytes, cpu_nanos),
        )

    def report(self, name: str, averages: Mapping[str, float]) -> str:
        """Write the summary line for one benchmark run.

        Nothing is written when a required metric is missing.

        Args:
            name: Benchmark name.
            averages: Averaged metrics of the run.

        Returns:
            The line written, without its trailing newline.

        Raises:
            MissingMetricError: If a required metric is absent.
        """
        line = self.format(name, averages)
        stream = self.stream
        stream.write(line + "\n")
        stream.flush()
        return line
