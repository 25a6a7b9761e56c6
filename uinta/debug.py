"""Debug timers and the text lines used to show metrics on screen."""

from __future__ import annotations

import time

from .metrics import MetricsController, MetricsError, MetricType

__all__ = [
    "DEBUG_CONTROLLER_MAX_TIMERS",
    "METRIC_LINE_SIZE",
    "METRIC_COLOR",
    "DebugTimers",
    "format_metric",
]

DEBUG_CONTROLLER_MAX_TIMERS = 8
METRIC_LINE_SIZE = 20.0
METRIC_COLOR = (0.6, 0.6, 0.3)


class DebugTimers:
    """A fixed number of stopwatch slots addressed by integer handles."""

    def __init__(self, capacity: int = DEBUG_CONTROLLER_MAX_TIMERS) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._started: list[int | None] = [None] * capacity

    def create_timer(self) -> int:
        """Claim a free slot, start it, and return its handle."""
        for handle, started in enumerate(self._started):
            if started is None:
                self._started[handle] = time.monotonic_ns()
                return handle
        raise RuntimeError("No available debug timer storage.")

    def _check(self, handle: int) -> int:
        if not 0 <= handle < self.capacity or self._started[handle] is None:
            raise ValueError(f"invalid debug timer {handle}")
        return self._started[handle]  # type: ignore[return-value]

    def reset_timer(self, handle: int) -> None:
        self._check(handle)
        self._started[handle] = time.monotonic_ns()

    def _elapsed_ns(self, handle: int) -> int:
        now = time.monotonic_ns()
        return now - self._check(handle)

    def duration_micro(self, handle: int) -> float:
        """Whole microseconds since the timer was started or reset."""
        return float(self._elapsed_ns(handle) // 1_000)

    def duration_milli(self, handle: int) -> float:
        """Whole milliseconds since the timer was started or reset."""
        return float(self._elapsed_ns(handle) // 1_000_000)


def format_metric(metrics: MetricsController, handle: int, append: str = "") -> str:
    """The display line for a metric: its name, its value, then ``append``."""
    name = metrics.name(handle)
    kind = metrics.metric_type(handle)
    if name is None or kind is None:
        raise MetricsError(f"metric handle {handle} is not assigned")
    if kind is MetricType.FLOAT:
        value = f"{metrics.getf(handle):f}"
    elif kind is MetricType.INT:
        value = str(metrics.geti(handle))
    else:
        value = str(metrics.getui(handle))
    return f"{name} {value} {append}"