"""Metric snapshot accumulation and averaging."""

from .accumulator import (
    AveragedMetrics as AveragedMetrics,
)
from .accumulator import (
    MetricAccumulator as MetricAccumulator,
)
from .accumulator import (
    MetricSnapshot as MetricSnapshot,
)

__all__ = [
    "AveragedMetrics",
    "MetricAccumulator",
    "MetricSnapshot",
]
