"""Micro-benchmark harness for data-processing operators."""

from .errors import (
    BenchmarkError as BenchmarkError,
)
from .errors import (
    ConfigurationError as ConfigurationError,
)
from .errors import (
    MissingMetricError as MissingMetricError,
)
from .errors import (
    WorkUnitError as WorkUnitError,
)
from .harness import (
    BenchmarkConfig as BenchmarkConfig,
)
from .harness import (
    BenchmarkHarness as BenchmarkHarness,
)
from .harness import (
    ForwardingResultHook as ForwardingResultHook,
)
from .harness import (
    FunctionWorkUnit as FunctionWorkUnit,
)
from .harness import (
    ResultHook as ResultHook,
)
from .harness import (
    WorkUnit as WorkUnit,
)
from .logging import (
    Logger as Logger,
)
from .logging import (
    LoggerConfig as LoggerConfig,
)
from .logging import (
    LogLevel as LogLevel,
)
from .metrics import (
    MetricAccumulator as MetricAccumulator,
)
from .reporting import (
    ResultReporter as ResultReporter,
)
from .suite import (
    BenchmarkSuite as BenchmarkSuite,
)
from .suite import (
    SuiteConfig as SuiteConfig,
)

# NOTE: Operator benchmarks pull in numpy and are only accessible by
#       importing '.operators' directly.

__all__ = [
    # Errors
    "BenchmarkError",
    "ConfigurationError",
    "MissingMetricError",
    "WorkUnitError",
    # Harness
    "BenchmarkConfig",
    "BenchmarkHarness",
    "ForwardingResultHook",
    "FunctionWorkUnit",
    "ResultHook",
    "WorkUnit",
    "MetricAccumulator",
    "ResultReporter",
    # Suite
    "BenchmarkSuite",
    "SuiteConfig",
    # Logging
    "Logger",
    "LoggerConfig",
    "LogLevel",
]
