"""Human-scale formatting of counts, data sizes and rates.

Counts scale by 1000 (K, M, B, T, Q) and sizes by 1024 (K, M, G, T, P).
Scaled values keep two decimals below 10, one below 100 and none above.
"""

from __future__ import annotations

import math

_COUNT_UNITS = ("K", "M", "B", "T", "Q")
_SIZE_UNITS = ("K", "M", "G", "T", "P")

NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_MILLI = 1_000_000


def _format_scaled(value: float) -> str:
    if value < 10:
        return f"{value:.2f}"
    if value < 100:
        return f"{value:.1f}"
    return f"{value:.0f}"


def format_count(count: int) -> str:
    """Format a count with a K/M/B/T/Q suffix.

    Counts below 1000 are printed as plain integers.

    Args:
        count: Non-negative count.

    Returns:
        Abbreviated count, e.g. "12.3K".
    """
    fractional = float(count)
    unit = ""
    for next_unit in _COUNT_UNITS:
        if fractional < 1000:
            break
        fractional /= 1000
        unit = next_unit

    if not unit:
        return str(int(count))
    return f"{_format_scaled(fractional)}{unit}"


def format_data_size(num_bytes: float, long_form: bool = True) -> str:
    """Format a byte count with a binary K/M/G/T/P suffix.

    Args:
        num_bytes: Size in bytes.
        long_form: Append "B" to scaled units ("KB" rather than "K").

    Returns:
        Abbreviated size, e.g. "1.50MB" or "1000B".
    """
    fractional = float(num_bytes)
    unit = ""
    for next_unit in _SIZE_UNITS:
        if fractional < 1024:
            break
        fractional /= 1024
        unit = next_unit

    if not unit:
        return f"{int(fractional)}B"
    if long_form:
        unit += "B"
    return f"{_format_scaled(fractional)}{unit}"


def _per_second(value: float, elapsed_nanos: float) -> float:
    if elapsed_nanos <= 0:
        return 0.0
    rate = value * NANOS_PER_SECOND / elapsed_nanos
    if math.isnan(rate) or math.isinf(rate):
        return 0.0
    return rate


def format_count_rate(count: float, elapsed_nanos: float, long_form: bool = True) -> str:
    """Format count / elapsed as a per-second rate.

    A zero or non-finite rate is reported as 0.

    Args:
        count: Number of items processed.
        elapsed_nanos: Time taken, in nanoseconds.
        long_form: Append "/s".
    """
    rate = format_count(int(_per_second(count, elapsed_nanos)))
    if long_form:
        rate += "/s"
    return rate


def format_data_rate(num_bytes: float, elapsed_nanos: float, long_form: bool = True) -> str:
    """Format bytes / elapsed as a per-second data rate.

    Args:
        num_bytes: Number of bytes processed.
        elapsed_nanos: Time taken, in nanoseconds.
        long_form: Ensure a "B" unit and append "/s".
    """
    rate = format_data_size(_per_second(num_bytes, elapsed_nanos), long_form=False)
    if long_form:
        if not rate.endswith("B"):
            rate += "B"
        rate += "/s"
    return rate


def nanos_to_millis(nanos: float) -> float:
    """Convert nanoseconds to fractional milliseconds."""
    return nanos / NANOS_PER_MILLI
