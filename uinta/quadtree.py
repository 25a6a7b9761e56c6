"""A square quadtree that files entities into the smallest cell holding a point."""

from __future__ import annotations

from collections.abc import Hashable
from typing import Optional

from .linalg import Vec2

__all__ = ["QUAD_MIN_CELL_SIZE", "QUAD_ENTITY_STORE_SIZE_STEP", "Quad"]

QUAD_MIN_CELL_SIZE = 1
QUAD_ENTITY_STORE_SIZE_STEP = 2

_TOP_LEFT = "top_left"
_TOP_RIGHT = "top_right"
_BOTTOM_LEFT = "bottom_left"
_BOTTOM_RIGHT = "bottom_right"


def _validate(top_left: Vec2, bottom_right: Vec2, min_cell_size: int) -> None:
    for label, value in (
        ("quad.topLeftBounds.x", top_left.x),
        ("quad.topLeftBounds.y", top_left.y),
        ("quad.bottomRightBounds.x", bottom_right.x),
        ("quad.bottomRightBounds.y", bottom_right.y),
    ):
        if not float(value).is_integer():
            raise ValueError(f"{label} must be an integer.")
    if bottom_right.x <= top_left.x or bottom_right.y <= top_left.y:
        raise ValueError(
            "bottomRightBounds must be aligned after the topRightBounds spatially."
        )
    if min_cell_size < 1:
        raise ValueError("minimum cell size must be at least 1")
    width = bottom_right.x - top_left.x
    height = bottom_right.y - top_left.y
    if width < min_cell_size:
        raise ValueError("quad width must be at least the size of the minimum cell size")
    if height < min_cell_size:
        raise ValueError("quad height must be at least the size of the minimum cell size")
    if width != height:
        raise ValueError("quad boundaries must be a square")


class Quad:
    """A square region of space, split into four child quads on demand.

    The y axis grows downward, so the top-left bound is the minimum corner.
    Entities are stored only in cells too small to split further.
    """

    def __init__(
        self,
        top_left: Optional[Vec2] = None,
        bottom_right: Optional[Vec2] = None,
        min_cell_size: int = QUAD_MIN_CELL_SIZE,
    ) -> None:
        top_left = Vec2(0.0) if top_left is None else Vec2(top_left.x, top_left.y)
        if bottom_right is None:
            bottom_right = Vec2(float(QUAD_MIN_CELL_SIZE))
        else:
            bottom_right = Vec2(bottom_right.x, bottom_right.y)
        _validate(top_left, bottom_right, min_cell_size)
        self.top_left_bounds = top_left
        self.bottom_right_bounds = bottom_right
        self.min_cell_size = min_cell_size
        self.parent: Optional[Quad] = None
        self.entity_store_size = 0
        self._store: list[Hashable] = []
        self._children: dict[str, Quad] = {}

    def __repr__(self) -> str:
        return (
            f"Quad({self.top_left_bounds!r}, {self.bottom_right_bounds!r}, "
            f"min_cell_size={self.min_cell_size})"
        )

    @property
    def width(self) -> float:
        return self.bottom_right_bounds.x - self.top_left_bounds.x

    @property
    def top_left(self) -> Optional[Quad]:
        return self._children.get(_TOP_LEFT)

    @property
    def top_right(self) -> Optional[Quad]:
        return self._children.get(_TOP_RIGHT)

    @property
    def bottom_left(self) -> Optional[Quad]:
        return self._children.get(_BOTTOM_LEFT)

    @property
    def bottom_right(self) -> Optional[Quad]:
        return self._children.get(_BOTTOM_RIGHT)

    @property
    def children(self) -> tuple[Quad, ...]:
        """The child quads that currently exist."""
        return tuple(self._children.values())

    @property
    def entity_count(self) -> int:
        return len(self._store)

    def entities(self) -> tuple[Hashable, ...]:
        """Entities stored directly in this quad."""
        return tuple(self._store)

    def is_in_bounds(self, pos: Vec2) -> bool:
        """True when ``pos`` lies inside the bounds, edges included."""
        tl, br = self.top_left_bounds, self.bottom_right_bounds
        return tl.x <= pos.x <= br.x and tl.y <= pos.y <= br.y

    def _is_leaf_size(self) -> bool:
        return self.width / 2 < self.min_cell_size

    def _slot(self, pos: Vec2) -> tuple[str, Vec2, float]:
        half = self.width / 2
        mid_x = self.top_left_bounds.x + half
        mid_y = self.top_left_bounds.y + half
        right = pos.x > mid_x
        bottom = pos.y > mid_y
        if bottom:
            name = _BOTTOM_RIGHT if right else _BOTTOM_LEFT
        else:
            name = _TOP_RIGHT if right else _TOP_LEFT
        origin = Vec2(
            mid_x if right else self.top_left_bounds.x,
            mid_y if bottom else self.top_left_bounds.y,
        )
        return name, origin, half

    def _child_for(self, pos: Vec2) -> Quad:
        name, origin, half = self._slot(pos)
        child = self._children.get(name)
        if child is None:
            child = Quad(origin, origin + Vec2(half), self.min_cell_size)
            child.parent = self
            self._children[name] = child
        return child

    def find_quad(self, pos: Vec2) -> Optional[Quad]:
        """The deepest existing quad holding ``pos``, or None when out of bounds."""
        if not self.is_in_bounds(pos):
            return None
        node = self
        while True:
            name, _, _ = node._slot(pos)
            child = node._children.get(name)
            if child is None:
                return node
            node = child

    def get(self, pos: Vec2) -> tuple[Hashable, ...]:
        """Entities stored in the deepest quad holding ``pos``."""
        node = self.find_quad(pos)
        return node.entities() if node is not None else ()

    def insert(self, entity: Hashable, pos: Vec2) -> bool:
        """File ``entity`` at ``pos``; False when ``pos`` is out of bounds."""
        if not self.is_in_bounds(pos):
            return False
        node = self
        while not node._is_leaf_size():
            node = node._child_for(pos)
        node._add_entity(entity)
        return True

    def is_active(self) -> bool:
        """True when this quad or any descendant holds an entity."""
        return bool(self._store) or any(child.is_active() for child in self._children.values())

    def clear(self) -> None:
        """Drop every entity and every child quad."""
        self._store.clear()
        for child in self._children.values():
            child.clear()
            child.parent = None
        self._children.clear()

    def _add_entity(self, entity: Hashable) -> None:
        if len(self._store) == self.entity_store_size:
            self.entity_store_size += QUAD_ENTITY_STORE_SIZE_STEP
        self._store.append(entity)

    def _remove_entity(self, entity: Hashable) -> None:
        try:
            index = self._store.index(entity)
        except ValueError:
            return
        last = self._store.pop()
        if index < len(self._store):
            self._store[index] = last
        if self.parent is not None and not self.is_active():
            self.parent._remove_quad(self)

    def _remove_quad(self, quad: Quad) -> None:
        for name, child in list(self._children.items()):
            if child is quad:
                del self._children[name]
                child.parent = None