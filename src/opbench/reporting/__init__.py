"""Report formatting and result writers for benchmarks."""

from .formatting import (
    format_count as format_count,
)
from .formatting import (
    format_count_rate as format_count_rate,
)
from .formatting import (
    format_data_rate as format_data_rate,
)
from .formatting import (
    format_data_size as format_data_size,
)
from .reporter import (
    REQUIRED_METRICS as REQUIRED_METRICS,
)
from .reporter import (
    ResultReporter as ResultReporter,
)

__all__ = [
    "REQUIRED_METRICS",
    "ResultReporter",
    "format_count",
    "format_count_rate",
    "format_data_rate",
    "format_data_size",
]
