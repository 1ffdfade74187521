"""Command-line entry point running the built-in operator benchmarks.

Defaults come from ``SuiteConfig.from_env()`` and are overridden by flags.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from opbench.errors import BenchmarkError
from opbench.harness import BenchmarkConfig, BenchmarkHarness
from opbench.logging import FileLogHandler, Logger, LoggerConfig, LogLevel
from opbench.operators import create_operator_benchmarks
from opbench.reporting import ResultReporter
from opbench.suite import BenchmarkSuite, SuiteConfig


class BenchmarkCLI:
    """Builder for the benchmark command-line interface.

    Args:
        description: Description shown by --help.
        defaults: Values used when a flag is not given.
    """

    def __init__(self, description: str, defaults: SuiteConfig) -> None:
        self.parser = argparse.ArgumentParser(prog="opbench", description=description)
        self.defaults = defaults
        self._add_common_args()

    def _add_common_args(self) -> None:
        """Add iteration count arguments used by every benchmark."""
        self.parser.add_argument(
            "--warmup",
            "-w",
            type=int,
            default=self.defaults.warmup_iterations,
            help=f"Number of discarded warmup iterations (default: {self.defaults.warmup_iterations:,})",
        )
        self.parser.add_argument(
            "--iterations",
            "-n",
            type=int,
            default=self.defaults.measured_iterations,
            help=f"Number of measured iterations (default: {self.defaults.measured_iterations:,})",
        )

    def add_rows_arg(self) -> BenchmarkCLI:
        """Add --rows/-r argument.

        Returns:
            Self for method chaining.
        """
        self.parser.add_argument(
            "--rows",
            "-r",
            type=int,
            default=self.defaults.rows,
            help=f"Rows of generated input per benchmark (default: {self.defaults.rows:,})",
        )
        return self

    def add_output_args(self) -> BenchmarkCLI:
        """Add --output-dir/-o and --pattern/-p arguments.

        Returns:
            Self for method chaining.
        """
        self.parser.add_argument(
            "--output-dir",
            "-o",
            default=self.defaults.output_dir,
            help=f"Directory for per-benchmark sample files (default: {self.defaults.output_dir})",
        )
        self.parser.add_argument(
            "--pattern",
            "-p",
            default=self.defaults.pattern,
            help="Regular expression selecting benchmarks by name (default: all)",
        )
        return self

    def add_log_level_arg(self) -> BenchmarkCLI:
        """Add --log-level argument.

        Returns:
            Self for method chaining.
        """
        self.parser.add_argument(
            "--log-level",
            choices=[level.name for level in LogLevel],
            default=LogLevel.INFO.name,
            help="Minimum level of log messages written to stderr (default: INFO)",
        )
        return self

    def add_log_file_arg(self) -> BenchmarkCLI:
        """Add --log-file argument.

        Returns:
            Self for method chaining.
        """
        self.parser.add_argument(
            "--log-file",
            default=None,
            help="Also append log messages to this file",
        )
        return self

    def parse(self, argv: Sequence[str] | None = None) -> argparse.Namespace:
        """Parse command-line arguments.

        Returns:
            Parsed arguments namespace.
        """
        return self.parser.parse_args(argv)


def build_harnesses(
    config: SuiteConfig,
    reporter: ResultReporter | None = None,
    logger: Logger | None = None,
) -> list[BenchmarkHarness]:
    """Wrap every built-in operator benchmark in a harness."""
    return [
        BenchmarkHarness(
            operator,
            BenchmarkConfig(
                name=operator.benchmark_name,
                warmup_iterations=config.warmup_iterations,
                measured_iterations=config.measured_iterations,
            ),
            reporter=reporter,
            logger=logger,
        )
        for operator in create_operator_benchmarks(rows=config.rows)
    ]


def main(argv: Sequence[str] | None = None) -> int:
    """Run the operator suite; returns the process exit status."""
    try:
        defaults = SuiteConfig.from_env()
    except BenchmarkError as exc:
        Logger(name="opbench").error(str(exc))
        return 1

    args = (
        BenchmarkCLI("Micro-benchmark columnar operators", defaults)
        .add_rows_arg()
        .add_output_args()
        .add_log_level_arg()
        .add_log_file_arg()
        .parse(argv)
    )
    handlers = []
    if args.log_file is not None:
        try:
            handlers.append(FileLogHandler(args.log_file))
        except BenchmarkError as exc:
            Logger(name="opbench").error(str(exc))
            return 1
    logger = Logger(
        name="opbench",
        config=LoggerConfig(base_level=LogLevel[args.log_level]),
        handlers=handlers,
    )

    try:
        config = SuiteConfig(
            output_dir=args.output_dir,
            pattern=args.pattern,
            warmup_iterations=args.warmup,
            measured_iterations=args.iterations,
            rows=args.rows,
        )
        suite = BenchmarkSuite(
            build_harnesses(config, logger=logger),
            config.output_dir,
            logger=logger,
        )
        suite.run(config.pattern)
    except BenchmarkError as exc:
        logger.error(str(exc))
        return 1
    finally:
        logger.shutdown()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
