"""Named metric slots holding 32-bit float, int or unsigned values."""

from __future__ import annotations

import struct
from enum import IntEnum

__all__ = ["METRICS_MAX_STORAGE", "MetricType", "MetricsError", "MetricsController"]

METRICS_MAX_STORAGE = 100
_SLOT_SIZE = 4


class MetricType(IntEnum):
    FLOAT = 0
    INT = 1
    UINT = 2


class MetricsError(Exception):
    """Raised for invalid handles, full storage or unstorable values."""


class MetricsController:
    """Fixed set of metric slots, each a raw 32-bit cell.

    A value is stored in the representation of its own Python type, and the
    getters read the cell back as float, signed or unsigned.
    """

    def __init__(self, capacity: int = METRICS_MAX_STORAGE) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._storage = bytearray(_SLOT_SIZE * capacity)
        self._names: list[str | None] = [None] * capacity
        self._types: list[MetricType | None] = [None] * capacity

    def init_metric(self, metric_type: MetricType | int, name: str) -> int:
        kind = MetricType(metric_type)
        for handle, assigned in enumerate(self._names):
            if assigned is None:
                self._names[handle] = str(name)
                self._types[handle] = kind
                return handle
        raise MetricsError(f"no free metric storage (capacity {self.capacity})")

    def _in_range(self, handle: int) -> None:
        if not 0 <= handle < self.capacity:
            raise MetricsError(f"invalid metric handle {handle}")

    def _offset(self, handle: int) -> int:
        self._in_range(handle)
        if self._names[handle] is None:
            raise MetricsError(f"metric handle {handle} is not assigned")
        return handle * _SLOT_SIZE

    def set(self, handle: int, value: float | int) -> None:
        offset = self._offset(handle)
        if isinstance(value, float):
            fmt = "<f"
        elif isinstance(value, int):
            fmt = "<i" if value < 0 else "<I"
        else:
            raise TypeError(f"metric values must be int or float, not {type(value).__name__}")
        try:
            struct.pack_into(fmt, self._storage, offset, value)
        except (struct.error, OverflowError) as exc:
            raise MetricsError(f"value {value!r} does not fit a 32-bit metric") from exc

    def _read(self, handle: int, fmt: str) -> float | int:
        return struct.unpack_from(fmt, self._storage, self._offset(handle))[0]

    def getf(self, handle: int) -> float:
        return float(self._read(handle, "<f"))

    def geti(self, handle: int) -> int:
        return int(self._read(handle, "<i"))

    def getui(self, handle: int) -> int:
        return int(self._read(handle, "<I"))

    def name(self, handle: int) -> str | None:
        """The metric's name, or None for a free slot."""
        self._in_range(handle)
        return self._names[handle]

    def metric_type(self, handle: int) -> MetricType | None:
        """The metric's type, or None for a free slot."""
        self._in_range(handle)
        return self._types[handle]