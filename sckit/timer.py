"""A hashed timing wheel for scheduling timeouts on a caller-driven clock."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

TICK = 16
WHEEL_COUNT = 16
INVALID = 2**64 - 1
"""Id that never names a timer; cancelling it does nothing."""

_U32 = 0xFFFFFFFF
_U64 = 2**64
_ENTRY_SIZE = 24
_MAX_WHEEL = (_U32 // _ENTRY_SIZE) // WHEEL_COUNT

Callback = Callable[[int, int, Any], None]


class TimerFullError(RuntimeError):
    """Raised when the wheel cannot grow to hold another timer."""


@dataclass
class _Entry:
    timeout: int
    kind: int
    data: Any


class Timer:
    """Timers grouped into 16 slots of ``TICK`` milliseconds each.

    Timeouts given to :meth:`add` are relative to the latest timestamp
    the timer has seen; :meth:`timeout` advances that timestamp and fires
    the timers that are due.
    """

    def __init__(self, timestamp: int) -> None:
        self.timestamp = timestamp
        self._head = 0
        self._wheel = 0
        self._slots: list[list[_Entry | None]] = [[] for _ in range(WHEEL_COUNT)]

    def _expand(self) -> None:
        if self._wheel >= _MAX_WHEEL // 2:
            raise TimerFullError("timer wheel cannot grow any further")
        wheel = self._wheel * 2 if self._wheel else 4
        for slot in self._slots:
            slot.extend([None] * (wheel - self._wheel))
        self._wheel = wheel

    def add(self, timeout: int, kind: int, data: Any) -> int:
        """Schedule a timer ``timeout`` ms from now and return its id."""
        if timeout < 0:
            raise ValueError(f"timeout must not be negative: {timeout}")
        pos = ((timeout // TICK + self._head) & _U32) & (WHEEL_COUNT - 1)
        slot = self._slots[pos]
        seq = next((i for i, entry in enumerate(slot) if entry is None), None)
        if seq is None:
            seq = self._wheel
            self._expand()
        slot[seq] = _Entry(timeout + self.timestamp, kind, data)
        return (seq << 32) | pos

    def cancel(self, timer_id: int | None) -> None:
        """Cancel the timer with ``timer_id``; ``INVALID`` or ``None`` is ignored."""
        if timer_id is None or timer_id == INVALID:
            return
        pos = timer_id & _U32
        seq = timer_id >> 32
        if pos >= WHEEL_COUNT or seq >= self._wheel:
            raise ValueError(f"unknown timer id: {timer_id}")
        self._slots[pos][seq] = None

    def clear(self) -> None:
        """Remove every timer while keeping the allocated wheel."""
        self._head = 0
        for slot in self._slots:
            slot[:] = [None] * len(slot)

    def reset(self) -> None:
        """Drop every timer and release the wheel, keeping the timestamp."""
        self._head = 0
        self._wheel = 0
        self._slots = [[] for _ in range(WHEEL_COUNT)]

    def timeout(self, timestamp: int, callback: Callback) -> int:
        """Advance to ``timestamp`` and fire due timers.

        ``callback`` is called as ``callback(timeout, kind, data)`` for each
        expired timer; it may add new timers. Returns the number of
        milliseconds until the next check is due.
        """
        elapsed = (timestamp - self.timestamp) % _U64
        next_check = min((TICK - elapsed) % _U64, TICK)
        wheels = min(elapsed // TICK, WHEEL_COUNT)
        if wheels == 0:
            return next_check

        head = self._head
        self.timestamp = timestamp
        self._head = (self._head + wheels) & (WHEEL_COUNT - 1)

        for _ in range(wheels):
            for i in range(self._wheel):
                entry = self._slots[head][i]
                if entry is not None and entry.timeout <= self.timestamp:
                    self._slots[head][i] = None
                    callback(entry.timeout, entry.kind, entry.data)
            head = (head + 1) & (WHEEL_COUNT - 1)

        return next_check