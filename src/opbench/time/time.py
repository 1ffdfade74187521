from time import (
    gmtime,
    perf_counter_ns,
    process_time_ns,
    strftime,
    time as time_sec,
)


def time_s() -> float:
    """
    Get the current time in seconds since the epoch.

    Returns
    -------
    float
        The current time in seconds.
    """
    return time_sec()


def wall_time_ns() -> int:
    """
    Read a monotonic high resolution clock.

    Only differences between two readings are meaningful.

    Returns
    -------
    int
        Clock reading in nanoseconds.
    """
    return perf_counter_ns()


def cpu_time_ns() -> int:
    """
    Read the CPU time (user + system) consumed by the current process.

    Returns
    -------
    int
        Process CPU time in nanoseconds.
    """
    return process_time_ns()


def time_iso8601() -> str:
    """
    Get the current UTC time as an ISO 8601 string with millisecond precision.

    Returns
    -------
    str
        Timestamp formatted as 'YYYY-MM-DDTHH:MM:SS.mmmZ'.
    """
    now_s = time_sec()
    millis = int(now_s * 1_000.0) % 1_000
    return strftime("%Y-%m-%dT%H:%M:%S", gmtime(now_s)) + f".{millis:03d}Z"
