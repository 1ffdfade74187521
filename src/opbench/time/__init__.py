"""Clock readings and timestamp helpers."""

from .time import (
    cpu_time_ns as cpu_time_ns,
)
from .time import (
    time_iso8601 as time_iso8601,
)
from .time import (
    time_s as time_s,
)
from .time import (
    wall_time_ns as wall_time_ns,
)
