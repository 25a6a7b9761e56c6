"""Camera state for 2D and 3D views."""

from __future__ import annotations

from dataclasses import dataclass, field

from .linalg import Vec2, Vec3

__all__ = ["WORLD_UP", "WORLD_RIGHT", "WORLD_FORWARD", "Camera", "Camera2D"]

# World coordinates follow the right-hand rule.
WORLD_UP = Vec3(0.0, 1.0, 0.0)
WORLD_RIGHT = Vec3(1.0, 0.0, 0.0)
WORLD_FORWARD = Vec3(0.0, 0.0, -1.0)


@dataclass
class Camera:
    """A 3D camera: a position and an attitude of pitch, yaw and roll."""

    pos: Vec3 = field(default_factory=Vec3)
    attitude: Vec3 = field(default_factory=Vec3)

    @property
    def pitch(self) -> float:
        return self.attitude.x

    @pitch.setter
    def pitch(self, value: float) -> None:
        self.attitude.x = float(value)

    @property
    def yaw(self) -> float:
        return self.attitude.y

    @yaw.setter
    def yaw(self, value: float) -> None:
        self.attitude.y = float(value)

    @property
    def roll(self) -> float:
        return self.attitude.z

    @roll.setter
    def roll(self, value: float) -> None:
        self.attitude.z = float(value)


@dataclass
class Camera2D:
    """A 2D camera with a field of view and an orthographic size."""

    pos: Vec2 = field(default_factory=Vec2)
    fov: float = 45.0
    ortho_size: float = 1.0