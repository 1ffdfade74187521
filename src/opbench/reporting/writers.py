"""Result hooks that persist the raw measured samples of a run."""

from __future__ import annotations

from typing import TextIO

import msgspec

from opbench.harness.hooks import ResultHook
from opbench.metrics import MetricSnapshot


class BenchmarkSamples(msgspec.Struct):
    """JSON document written by JsonResultWriter."""

    name: str
    samples: list[dict[str, int]]


class JsonResultWriter(ResultHook):
    """Collects every measured sample and writes them as one JSON document.

    Args:
        stream: Text stream receiving the document on ``finished()``.
        name: Benchmark name stored in the document.
    """

    def __init__(self, stream: TextIO, name: str) -> None:
        self._stream = stream
        self._document = BenchmarkSamples(name=name, samples=[])
        self._encoder = msgspec.json.Encoder()

    @property
    def samples(self) -> list[dict[str, int]]:
        """Samples received so far."""
        return self._document.samples

    def add_results(self, snapshot: MetricSnapshot) -> None:
        self._document.samples.append(
            {key: int(value) for key, value in snapshot.items()}
        )

    def finished(self) -> None:
        self._stream.write(self._encoder.encode(self._document).decode("utf-8"))
        self._stream.write("\n")
        self._stream.flush()


class SimpleLineResultWriter(ResultHook):
    """Writes one line per measured sample: the name, then sorted key=value pairs.

    Args:
        stream: Text stream receiving the lines.
        name: Benchmark name prefixed to every line.
    """

    def __init__(self, stream: TextIO, name: str) -> None:
        self._stream = stream
        self._name = name

    def add_results(self, snapshot: MetricSnapshot) -> None:
        pairs = " ".join(f"{key}={int(snapshot[key])}" for key in sorted(snapshot))
        self._stream.write(f"{self._name} {pairs}\n" if pairs else f"{self._name}\n")

    def finished(self) -> None:
        self._stream.flush()


def decode_samples(data: bytes | str) -> BenchmarkSamples:
    """Decode a document produced by JsonResultWriter."""
    return msgspec.json.decode(data, type=BenchmarkSamples)
