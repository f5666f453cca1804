"""Unit helpers and small numeric utilities used across the scheme."""

from __future__ import annotations

from typing import Iterable

EPSILON = 0.00001
SECONDS_PER_MINUTE = 60


def _to_int32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    wrapped = value & 0xFFFFFFFF
    return wrapped - 0x100000000 if wrapped & 0x80000000 else wrapped


def meters(value: int | float) -> int | float:
    """Return a length in metres; integers are kept as 32-bit integers."""
    if isinstance(value, int):
        return _to_int32(value)
    return float(value)


def seconds(value: float) -> float:
    """Return a duration in seconds."""
    return float(value)


def minutes(value: float) -> float:
    """Return a duration given in minutes as seconds."""
    return float(value) * SECONDS_PER_MINUTE


def mps(value: float) -> float:
    """Return a velocity in metres per second."""
    return float(value)


def byte_count(value: int) -> int:
    """Return a byte count as a 32-bit integer."""
    return _to_int32(int(value))


def percent(value: float) -> float:
    """Return a percentage as a fraction of one."""
    return float(value) / 100.0


def is_equal(a: float, b: float) -> bool:
    """Compare two floats within a fixed tolerance."""
    return abs(b - a) < EPSILON


def format_list(values: Iterable[object]) -> str:
    """Render values as ``[a, b, c]``."""
    return "[" + ", ".join(str(value) for value in values) + "]"