"""A stopwatch measuring whole milliseconds."""

from __future__ import annotations

import time


class TimerError(RuntimeError):
    """Raised when the timer is used out of order."""


class Timer:
    """Start, stop and report elapsed milliseconds."""

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self._start_ns = 0
        self._end_ns = 0
        self._running = False

    def start(self) -> None:
        if self._running:
            raise TimerError("Timer already started!")
        self._start_ns = time.perf_counter_ns()
        self._running = True

    def stop(self) -> None:
        if not self._running:
            raise TimerError("Timer not started!")
        self._end_ns = time.perf_counter_ns()
        self._running = False

    def result(self) -> int:
        """Print and return the elapsed whole milliseconds."""
        if self._running:
            raise TimerError("Timer still running!")
        elapsed = (self._end_ns - self._start_ns) // 1_000_000
        print(elapsed)
        return elapsed