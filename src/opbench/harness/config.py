from typing import Self

from msgspec import Struct

from opbench.errors import ConfigurationError


class BenchmarkConfig(Struct, frozen=True):
    """Name and iteration counts of a single benchmark."""

    name: str
    warmup_iterations: int
    measured_iterations: int

    def __post_init__(self):
        """Validate that the name is non-empty and both counts are non-negative integers."""
        if not isinstance(self.name, str) or not self.name:
            raise ConfigurationError(
                f"Invalid name; expected non-empty string but got {self.name!r}"
            )
        for field_name in ("warmup_iterations", "measured_iterations"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(
                    f"Invalid {field_name}; expected int but got {type(value).__name__}"
                )
            if value < 0:
                raise ConfigurationError(
                    f"Invalid {field_name}; must not be negative but got {value}"
                )

    @classmethod
    def default(cls, name: str) -> Self:
        """Return config with 10 warmup and 100 measured iterations."""
        return cls(
            name=name,
            warmup_iterations=10,
            measured_iterations=100,
        )
