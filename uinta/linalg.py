"""Vectors, a column-major 4x4 matrix, a running average and a smoothed float."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field
from numbers import Real
from typing import Any

__all__ = ["Vec2", "Vec3", "Vec4", "Mat4", "RunningAverage", "SmoothFloat"]


class _Vector:
    """Shared behaviour of the fixed-size float vectors."""

    __slots__ = ()
    _fields: tuple[str, ...] = ()

    def __iter__(self) -> Iterator[float]:
        return (getattr(self, name) for name in self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        args = ", ".join(f"{name}={getattr(self, name)!r}" for name in self._fields)
        return f"{type(self).__name__}({args})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return tuple(self) == tuple(other)  # type: ignore[arg-type]

    __hash__ = None  # type: ignore[assignment]

    def _elementwise(self, other: Any, op: Callable[[float, float], float], scalar: bool) -> Any:
        if type(other) is type(self):
            return type(self)(*map(op, self, other))
        if scalar and isinstance(other, Real) and not isinstance(other, bool):
            return type(self)(*(op(component, float(other)) for component in self))
        return NotImplemented

    def _all(self, other: Any, op: Callable[[float, float], bool]) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return all(map(op, self, other))

    def __rmul__(self, other: Any) -> Any:
        if isinstance(other, Real) and not isinstance(other, bool):
            return self._elementwise(other, operator.mul, scalar=True)
        return NotImplemented


def _spread(cls_name: str, first: float, rest: tuple[float | None, ...]) -> tuple[float, ...]:
    if all(value is None for value in rest):
        return (float(first),) * (len(rest) + 1)
    if any(value is None for value in rest):
        raise TypeError(f"{cls_name} takes either one value or all {len(rest) + 1} components")
    return (float(first), *(float(value) for value in rest))  # type: ignore[arg-type]


class Vec2(_Vector):
    """Two-component float vector; a single value fills both components."""

    __slots__ = ("x", "y")
    _fields = ("x", "y")

    def __init__(self, x: float = 0.0, y: float | None = None) -> None:
        self.x, self.y = _spread("Vec2", x, (y,))

    def __add__(self, other: Any) -> Any:
        return self._elementwise(other, operator.add, scalar=False)

    def __sub__(self, other: Any) -> Any:
        return self._elementwise(other, operator.sub, scalar=False)

    def __mul__(self, other: Any) -> Any:
        return self._elementwise(other, operator.mul, scalar=True)

    def __truediv__(self, other: Any) -> Any:
        return self._elementwise(other, operator.truediv, scalar=True)

    def __lt__(self, other: Any) -> bool:
        """True when every component is strictly less."""
        return self._all(other, operator.lt)

    def __le__(self, other: Any) -> bool:
        """True when every component is less or equal."""
        return self._all(other, operator.le)

    def __gt__(self, other: Any) -> bool:
        """True when every component is strictly greater."""
        return self._all(other, operator.gt)

    def __ge__(self, other: Any) -> bool:
        """True when every component is greater or equal."""
        return self._all(other, operator.ge)


class Vec3(_Vector):
    """Three-component float vector; a single value fills every component."""

    __slots__ = ("x", "y", "z")
    _fields = ("x", "y", "z")

    def __init__(self, x: float = 0.0, y: float | None = None, z: float | None = None) -> None:
        self.x, self.y, self.z = _spread("Vec3", x, (y, z))

    @classmethod
    def from_vec2(cls, vec: Vec2, z: float = 0.0) -> Vec3:
        return cls(vec.x, vec.y, z)

    def __add__(self, other: Any) -> Any:
        return self._elementwise(other, operator.add, scalar=False)

    def __sub__(self, other: Any) -> Any:
        return self._elementwise(other, operator.sub, scalar=False)

    def __mul__(self, other: Any) -> Any:
        return self._elementwise(other, operator.mul, scalar=True)

    def __truediv__(self, other: Any) -> Any:
        return self._elementwise(other, operator.truediv, scalar=True)

    def __lt__(self, other: Any) -> bool:
        """True when every component is strictly less."""
        return self._all(other, operator.lt)

    def __le__(self, other: Any) -> bool:
        """True when every component is less or equal."""
        return self._all(other, operator.le)

    def __gt__(self, other: Any) -> bool:
        """True when every component is strictly greater."""
        return self._all(other, operator.gt)

    def __ge__(self, other: Any) -> bool:
        """True when every component is greater or equal."""
        return self._all(other, operator.ge)


class Vec4(_Vector):
    """Four-component float vector; a single value fills every component."""

    __slots__ = ("x", "y", "z", "w")
    _fields = ("x", "y", "z", "w")

    def __init__(
        self,
        x: float = 0.0,
        y: float | None = None,
        z: float | None = None,
        w: float | None = None,
    ) -> None:
        self.x, self.y, self.z, self.w = _spread("Vec4", x, (y, z, w))

    @classmethod
    def from_vec2(cls, vec: Vec2, z: float = 0.0, w: float = 0.0) -> Vec4:
        return cls(vec.x, vec.y, z, w)

    @classmethod
    def from_vec3(cls, vec: Vec3, w: float = 0.0) -> Vec4:
        return cls(vec.x, vec.y, vec.z, w)

    def __add__(self, other: Any) -> Any:
        return self._elementwise(other, operator.add, scalar=False)

    def __sub__(self, other: Any) -> Any:
        return self._elementwise(other, operator.sub, scalar=False)

    def __mul__(self, other: Any) -> Any:
        return self._elementwise(other, operator.mul, scalar=True)

    def __truediv__(self, other: Any) -> Any:
        return self._elementwise(other, operator.truediv, scalar=True)

    def __lt__(self, other: Any) -> bool:
        """True when every component is strictly less."""
        return self._all(other, operator.lt)

    def __le__(self, other: Any) -> bool:
        """True when every component is less or equal."""
        return self._all(other, operator.le)

    def __gt__(self, other: Any) -> bool:
        """True when every component is strictly greater."""
        return self._all(other, operator.gt)

    def __ge__(self, other: Any) -> bool:
        """True when every component is greater or equal."""
        return self._all(other, operator.ge)


class Mat4:
    """Column-major 4x4 matrix.

    ``m[col, row]`` addresses an element; ``m[i]`` addresses the flat storage.
    """

    __slots__ = ("values",)

    def __init__(self, value: float | Sequence[float] = 1.0) -> None:
        if isinstance(value, Real):
            diagonal = float(value)
            self.values = [diagonal if col == row else 0.0 for col in range(4) for row in range(4)]
        else:
            values = [float(v) for v in value]
            if len(values) != 16:
                raise ValueError(f"Mat4 needs 16 values, got {len(values)}")
            self.values = values

    @staticmethod
    def _index(key: int | tuple[int, int]) -> int:
        if isinstance(key, tuple):
            col, row = key
            if not (0 <= col < 4 and 0 <= row < 4):
                raise IndexError(f"matrix element {key} out of range")
            return col * 4 + row
        if not -16 <= key < 16:
            raise IndexError(f"matrix index {key} out of range")
        return key

    def __getitem__(self, key: int | tuple[int, int]) -> float:
        return self.values[self._index(key)]

    def __setitem__(self, key: int | tuple[int, int], value: float) -> None:
        self.values[self._index(key)] = float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mat4):
            return NotImplemented
        return self.values == other.values

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[float]:
        return iter(self.values)

    def __repr__(self) -> str:
        return f"Mat4({self.values!r})"


class RunningAverage:
    """Average over the most recent ``count`` samples, kept in a ring buffer."""

    def __init__(self, count: int) -> None:
        if count < 1:
            raise ValueError("RunningAverage needs room for at least one sample")
        self.count = count
        self._buffer = [0.0] * count
        self._cursor = 0
        self._filled = 0
        self._average = 0.0
        self._dirty = False

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def dirty(self) -> bool:
        return self._dirty

    def add(self, value: float) -> None:
        if self._cursor >= self.count:
            self._cursor = 0
        self._buffer[self._cursor] = float(value)
        self._cursor += 1
        self._filled = min(self._filled + 1, self.count)
        self._dirty = True

    def __iadd__(self, value: float) -> RunningAverage:
        self.add(value)
        return self

    def avg(self) -> float:
        if self._dirty:
            self._average = sum(self._buffer[: self._filled]) / self._filled
            self._dirty = False
        return self._average

    def samples(self) -> tuple[float, ...]:
        """Stored samples in ring-buffer order."""
        return tuple(self._buffer[: self._filled])


@dataclass
class SmoothFloat:
    """A float that moves its current value toward a target over time."""

    agility: float = 1.0
    target: float = 0.0
    current: float = field(default=0.0, init=False)

    def __iadd__(self, value: float) -> SmoothFloat:
        self.target += value
        return self

    def __isub__(self, value: float) -> SmoothFloat:
        self.target -= value
        return self

    def __float__(self) -> float:
        return float(self.current)

    def force(self, value: float | None = None) -> None:
        """Jump straight to the target, or to ``value`` which becomes the target."""
        if value is not None:
            self.target = value
        self.current = self.target

    def update(self, dt: float) -> None:
        self.current += (self.target - self.current) * self.agility * dt