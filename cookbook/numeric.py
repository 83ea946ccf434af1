"""Random numbers from the system's entropy source and checks on float inputs."""

from __future__ import annotations

import math
import random
import sys

_USHORT_MAX = 65535


def random_numbers(count: int = 100, low: int = 1000, high: int = _USHORT_MAX) -> list[int]:
    """Return ``count`` integers drawn uniformly from ``low`` to ``high`` inclusive."""
    if count < 0:
        raise ValueError("count must not be negative")
    if low > high:
        raise ValueError("low must not exceed high")
    device = random.SystemRandom()
    return [device.randint(low, high) for _ in range(count)]


def check_float_inputs(value: float) -> float:
    """Reject infinities and NaNs and return ``value`` with its sign bit cleared."""
    if math.isinf(value):
        raise ValueError(f"infinite input: {value}")
    if math.isnan(value):
        raise ValueError("input is not a number")
    if math.copysign(1.0, value) < 0:
        value = -value
    if not value + sys.float_info.epsilon >= 0:
        raise ValueError(f"negative input: {value}")
    return value