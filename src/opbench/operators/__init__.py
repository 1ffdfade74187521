"""Built-in numpy operator benchmarks."""

from .base import (
    OperatorBenchmark as OperatorBenchmark,
)
from .operators import (
    CountAggregationBenchmark as CountAggregationBenchmark,
)
from .operators import (
    DoubleSumAggregationBenchmark as DoubleSumAggregationBenchmark,
)
from .operators import (
    OrderByBenchmark as OrderByBenchmark,
)
from .operators import (
    PredicateFilterBenchmark as PredicateFilterBenchmark,
)
from .operators import (
    create_operator_benchmarks as create_operator_benchmarks,
)

__all__ = [
    "CountAggregationBenchmark",
    "DoubleSumAggregationBenchmark",
    "OperatorBenchmark",
    "OrderByBenchmark",
    "PredicateFilterBenchmark",
    "create_operator_benchmarks",
]
