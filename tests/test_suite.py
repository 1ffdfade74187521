"""Tests for BenchmarkSuite and SuiteConfig."""

from __future__ import annotations

import json

import pytest

from opbench.errors import ConfigurationError, WorkUnitError
from opbench.harness import BenchmarkConfig, BenchmarkHarness
from opbench.reporting import ResultReporter
from opbench.suite import BenchmarkSuite, SuiteConfig


@pytest.fixture
def make_suite(make_work_unit, report_stream, quiet_logger, tmp_path):
    def _make_suite(names, measured=2, work_units=None):
        work_units = work_units or {}
        harnesses = [
            BenchmarkHarness(
                work_units.get(name) or make_work_unit(),
                BenchmarkConfig(name=name, warmup_iterations=1, measured_iterations=measured),
                reporter=ResultReporter(report_stream),
                logger=quiet_logger,
            )
            for name in names
        ]
        return BenchmarkSuite(harnesses, tmp_path / "out", logger=quiet_logger)

    return _make_suite


class TestBenchmarkSuite:
    """Test suite selection and output files."""

    def test_runs_all_and_writes_files(self, make_suite, report_stream, tmp_path) -> None:
        suite = make_suite(["count_agg", "order_by"])

        results = suite.run()

        assert list(results) == ["count_agg", "order_by"]
        assert results["count_agg"]["cpu_nanos"] == 100.0
        assert len(report_stream.getvalue().splitlines()) == 2

        document = json.loads((tmp_path / "out" / "count_agg.json").read_text())
        assert document["name"] == "count_agg"
        assert len(document["samples"]) == 2

        lines = (tmp_path / "out" / "order_by.txt").read_text().splitlines()
        assert lines == [
            "order_by cpu_nanos=100 input_bytes=1000 input_rows=10 output_bytes=500 output_rows=5"
        ] * 2

    def test_pattern_selects_by_search(self, make_suite, tmp_path) -> None:
        suite = make_suite(["count_agg", "double_sum_agg", "order_by"])

        results = suite.run("_agg$")

        assert list(results) == ["count_agg", "double_sum_agg"]
        assert not (tmp_path / "out" / "order_by.json").exists()

    def test_no_match_runs_nothing(self, make_suite) -> None:
        assert make_suite(["count_agg"]).run("nothing") == {}

    def test_invalid_pattern(self, make_suite) -> None:
        with pytest.raises(ConfigurationError):
            make_suite(["count_agg"]).run("(")

    def test_duplicate_names_rejected(self, make_suite) -> None:
        with pytest.raises(ConfigurationError):
            make_suite(["count_agg", "count_agg"])

    @pytest.mark.parametrize("name", ["../escape", "nested/name", "..", ".hidden", "with space"])
    def test_path_like_names_rejected(self, make_suite, tmp_path, name) -> None:
        """Names are used as file names, so path characters are refused up front."""
        with pytest.raises(ConfigurationError):
            make_suite([name])
        assert not (tmp_path / "out").exists()

    def test_dotted_and_dashed_names_accepted(self, make_suite) -> None:
        suite = make_suite(["q1.count-agg"])
        assert suite.benchmark_names == ["q1.count-agg"]

    def test_failure_aborts_remaining(self, make_suite, make_work_unit, report_stream) -> None:
        suite = make_suite(
            ["first", "second"],
            work_units={"first": make_work_unit(fail_on_call=1)},
        )

        with pytest.raises(WorkUnitError):
            suite.run()
        assert report_stream.getvalue() == ""

    def test_benchmark_names(self, make_suite) -> None:
        assert make_suite(["a", "b"]).benchmark_names == ["a", "b"]


class TestSuiteConfig:
    """Test SuiteConfig defaults, validation and environment overrides."""

    def test_default(self) -> None:
        config = SuiteConfig.default()
        assert config.output_dir == "benchmark_results"
        assert config.pattern == ".*"
        assert config.warmup_iterations == 10
        assert config.measured_iterations == 100
        assert config.rows == 1_000_000

    def test_from_env(self) -> None:
        config = SuiteConfig.from_env(
            {
                "OPBENCH_OUTPUT_DIR": "/tmp/results",
                "OPBENCH_PATTERN": "agg",
                "OPBENCH_WARMUP": "2",
                "OPBENCH_ITERATIONS": "5",
                "OPBENCH_ROWS": "10_000",
            }
        )
        assert config == SuiteConfig(
            output_dir="/tmp/results",
            pattern="agg",
            warmup_iterations=2,
            measured_iterations=5,
            rows=10_000,
        )

    def test_from_empty_env_is_default(self) -> None:
        assert SuiteConfig.from_env({}) == SuiteConfig.default()

    @pytest.mark.parametrize(
        "env",
        [
            {"OPBENCH_WARMUP": "abc"},
            {"OPBENCH_WARMUP": "-1"},
            {"OPBENCH_ITERATIONS": "-1"},
            {"OPBENCH_ROWS": "0"},
            {"OPBENCH_PATTERN": "["},
        ],
    )
    def test_invalid_env(self, env) -> None:
        with pytest.raises(ConfigurationError):
            SuiteConfig.from_env(env)
