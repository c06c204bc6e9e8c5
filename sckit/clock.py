"""Wall-clock and monotonic timestamps, and a millisecond sleep."""

from __future__ import annotations

import time

_NS_PER_MS = 1_000_000


def now_ms() -> int:
    """Wall-clock time in milliseconds since the epoch."""
    return time.time_ns() // _NS_PER_MS


def now_ns() -> int:
    """Wall-clock time in nanoseconds since the epoch."""
    return time.time_ns()


def mono_ms() -> int:
    """Monotonic clock reading in milliseconds."""
    return time.monotonic_ns() // _NS_PER_MS


def mono_ns() -> int:
    """Monotonic clock reading in nanoseconds."""
    return time.monotonic_ns()


def sleep(millis: int) -> None:
    """Sleep for ``millis`` milliseconds, resuming after interrupting signals."""
    if millis < 0:
        raise ValueError(f"cannot sleep for a negative time: {millis}")
    time.sleep(millis / 1000)