"""Plain records describing GPU buffers and mesh attribute layouts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

__all__ = ["GlBuffer", "MeshAttribType", "MeshAttrib", "kilobytes", "megabytes"]


def kilobytes(n: int) -> int:
    return n * 1024


def megabytes(n: int) -> int:
    return kilobytes(n) * 1024


@dataclass
class GlBuffer:
    """A buffer handle with its element count, capacity and write offset."""

    id: int = 0
    count: int = 0
    capacity: int = 0
    offset: int = 0


class MeshAttribType(IntEnum):
    POSITION = 0
    UV = 1
    COLOR = 2


@dataclass(frozen=True)
class MeshAttrib:
    """Layout of one vertex attribute: component count, stride and offset."""

    size: int
    stride: int
    offset: int