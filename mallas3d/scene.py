"""Scene state: the selectable objects, draw settings, camera and projection."""

from __future__ import annotations

import enum
import logging
import os
from dataclasses import dataclass
from typing import Sequence, Union

from mallas3d.axes import Axes
from mallas3d.mesh import (
    DrawMode,
    Mesh,
    make_cone,
    make_cube,
    make_cylinder,
    make_sphere,
    make_tetrahedron,
    mesh_from_ply,
    revolution_from_ply,
)

__all__ = ["SpecialKey", "Frustum", "Scene", "build_default_objects"]

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]

FRONT_PLANE = 0.1
BACK_PLANE = 2000.0
OBSERVER_DISTANCE = 8.0
SCENE_AXIS_SIZE = 5000
DEFAULT_WINDOW_SIZE = 500
ZOOM_FACTOR = 1.2


class SpecialKey(enum.IntEnum):
    """Non-character keys, valued as the usual GLUT key codes."""

    LEFT = 100
    UP = 101
    RIGHT = 102
    DOWN = 103
    PAGE_UP = 104
    PAGE_DOWN = 105


@dataclass(frozen=True)
class Frustum:
    """Bounds of a perspective viewing volume."""

    left: float
    right: float
    bottom: float
    top: float
    near: float
    far: float


class Scene:
    """Holds the objects shown one at a time and the interaction state."""

    def __init__(self, objects: Sequence[Mesh]) -> None:
        self.objects: list[Mesh] = list(objects)
        if not self.objects:
            raise ValueError("a scene needs at least one object")
        self.front_plane = FRONT_PLANE
        self.back_plane = BACK_PLANE
        self.observer_distance = OBSERVER_DISTANCE
        self.observer_angle_x = 0.0
        self.observer_angle_y = 0.0
        self.axes = Axes()
        self.axes.change_size(SCENE_AXIS_SIZE)
        self.current_index = 0
        self.mode = DrawMode.TRIANGLES
        self.chess = False
        self.draw_mode = 0
        self.width = DEFAULT_WINDOW_SIZE
        self.height = DEFAULT_WINDOW_SIZE

    @property
    def deferred(self) -> bool:
        """True when objects are drawn from buffer objects rather than immediately."""
        return self.draw_mode != 0

    def current_object(self) -> Mesh:
        """Return the mesh currently selected for display."""
        return self.objects[self.current_index]

    def key_pressed(self, key: str) -> bool:
        """Handle a character key; return True when the key asks to quit."""
        logger.info("key pressed: '%s'", key)
        self.chess = False
        command = key.upper()
        if command == "P":
            self.mode = DrawMode.POINTS
        elif command == "L":
            self.mode = DrawMode.LINES
        elif command == "T":
            self.mode = DrawMode.TRIANGLES
        elif command == "A":
            self.mode = DrawMode.TRIANGLES
            self.chess = True
        elif command == "V":
            self.draw_mode = (self.draw_mode + 1) % len(self.objects)
            logger.info("drawing mode: %s", "deferred" if self.deferred else "immediate")
        elif command == "Q":
            return True
        elif command == "O":
            self.current_index = (self.current_index + 1) % len(self.objects)
            logger.info("current object == %d", self.current_index)
        return False

    def special_key(self, key: int) -> None:
        """Move the camera for arrow and page keys; other keys are ignored."""
        try:
            special = SpecialKey(key)
        except ValueError:
            return
        if special is SpecialKey.LEFT:
            self.observer_angle_y -= 1
        elif special is SpecialKey.RIGHT:
            self.observer_angle_y += 1
        elif special is SpecialKey.UP:
            self.observer_angle_x -= 1
        elif special is SpecialKey.DOWN:
            self.observer_angle_x += 1
        elif special is SpecialKey.PAGE_UP:
            self.observer_distance *= ZOOM_FACTOR
        elif special is SpecialKey.PAGE_DOWN:
            self.observer_distance /= ZOOM_FACTOR

    def resize(self, width: int, height: int) -> None:
        """Record a new window size."""
        if width <= 0 or height <= 0:
            raise ValueError("window dimensions must be positive")
        self.width = width
        self.height = height

    def frustum(self) -> Frustum:
        """Return the perspective frustum for the current window size."""
        ratio = float(self.height) / float(self.width)
        wy = 0.84 * self.front_plane
        wx = ratio * wy
        return Frustum(-wx, wx, -wy, wy, self.front_plane, self.back_plane)

    def observer(self) -> tuple[float, float, float]:
        """Return ``(distance, angle_x, angle_y)`` of the camera."""
        return (self.observer_distance, self.observer_angle_x, self.observer_angle_y)


def build_default_objects(ply_dir: PathLike) -> list[Mesh]:
    """Build the nine standard objects, reading PLY models from ``ply_dir``."""
    return [
        make_cube(),
        make_tetrahedron(),
        mesh_from_ply(os.path.join(ply_dir, "big_dodge.ply")),
        mesh_from_ply(os.path.join(ply_dir, "ant.ply")),
        mesh_from_ply(os.path.join(ply_dir, "beethoven.ply")),
        revolution_from_ply(os.path.join(ply_dir, "peon.ply")),
        make_sphere(20, 70, 0.5),
        make_cone(20, 40, 0.5, 0.5),
        make_cylinder(20, 40, 0.5, 0.75),
    ]