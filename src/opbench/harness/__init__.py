"""Benchmark execution: work-unit contract, hooks and the harness itself."""

from .config import (
    BenchmarkConfig as BenchmarkConfig,
)
from .harness import (
    BenchmarkHarness as BenchmarkHarness,
)
from .hooks import (
    ForwardingResultHook as ForwardingResultHook,
)
from .hooks import (
    ResultHook as ResultHook,
)
from .work_unit import (
    FunctionWorkUnit as FunctionWorkUnit,
)
from .work_unit import (
    WorkUnit as WorkUnit,
)

__all__ = [
    "BenchmarkConfig",
    "BenchmarkHarness",
    "ForwardingResultHook",
    "FunctionWorkUnit",
    "ResultHook",
    "WorkUnit",
]
