import io
from collections.abc import Callable

import pytest

from opbench.harness import ResultHook, WorkUnit
from opbench.logging import Logger, LoggerConfig, LogLevel

CONSTANT_SNAPSHOT = {
    "cpu_nanos": 100,
    "input_rows": 10,
    "input_bytes": 1000,
    "output_rows": 5,
    "output_bytes": 500,
}


class RecordingWorkUnit(WorkUnit):
    """Work-unit recording every call, optionally failing on request."""

    def __init__(
        self,
        snapshots: list[dict] | None = None,
        fail_on_call: int | None = None,
        fail_set_up: bool = False,
        fail_tear_down: bool = False,
    ) -> None:
        self.snapshots = snapshots or [CONSTANT_SNAPSHOT]
        self.fail_on_call = fail_on_call
        self.fail_set_up = fail_set_up
        self.fail_tear_down = fail_tear_down
        self.calls: list[str] = []
        self.run_count = 0

    def set_up(self) -> None:
        self.calls.append("set_up")
        if self.fail_set_up:
            raise RuntimeError("set_up exploded")

    def run_once(self) -> dict:
        self.calls.append("run_once")
        index = self.run_count
        self.run_count += 1
        if self.fail_on_call is not None and index == self.fail_on_call:
            raise RuntimeError(f"run_once exploded on call {index}")
        return dict(self.snapshots[index % len(self.snapshots)])

    def tear_down(self) -> None:
        self.calls.append("tear_down")
        if self.fail_tear_down:
            raise RuntimeError("tear_down exploded")

    def default_result_key(self) -> str:
        return "cpu_nanos"


class RecordingHook(ResultHook):
    """Hook remembering every snapshot and finished() call."""

    def __init__(self, events: list[str] | None = None, fail_on_add: bool = False) -> None:
        self.results: list = []
        self.finished_count = 0
        self.events = events
        self.fail_on_add = fail_on_add

    def add_results(self, snapshot) -> None:
        if self.fail_on_add:
            raise ValueError("hook exploded")
        self.results.append(snapshot)
        if self.events is not None:
            self.events.append("add_results")

    def finished(self) -> None:
        self.finished_count += 1
        if self.events is not None:
            self.events.append("finished")


@pytest.fixture
def constant_snapshot() -> dict[str, int]:
    return dict(CONSTANT_SNAPSHOT)


@pytest.fixture
def make_work_unit() -> Callable[..., RecordingWorkUnit]:
    """Return a factory for recording work-units."""
    return RecordingWorkUnit


@pytest.fixture
def make_hook() -> Callable[..., RecordingHook]:
    """Return a factory for recording hooks."""
    return RecordingHook


@pytest.fixture
def report_stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def quiet_logger() -> Logger:
    """Logger that keeps everything in memory (no stderr, no handlers)."""
    return Logger(
        name="test",
        config=LoggerConfig(base_level=LogLevel.TRACE, do_stderr=False),
    )
