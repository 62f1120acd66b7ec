"""
Clock abstraction.

Injected into the driver service bootstrap step so that service name
fallback is deterministic under test.
"""
from __future__ import annotations

import time
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Source of wall-clock milliseconds."""

    def get_time_millis(self) -> int: ...


class SystemClock:
    """Clock backed by the system time."""

    def get_time_millis(self) -> int:
        return time.time_ns() // 1_000_000

    def __repr__(self) -> str:
        return "SystemClock()"


class ManualClock:
    """Clock whose time only moves when told to."""

    def __init__(self, time_millis: int = 0):
        self._time_millis = time_millis

    def get_time_millis(self) -> int:
        return self._time_millis

    def advance(self, millis: int) -> None:
        self._time_millis += millis

    def __repr__(self) -> str:
        return f"ManualClock(time_millis={self._time_millis})"
