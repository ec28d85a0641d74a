"""Indexed triangle meshes: basic solids, PLY models and solids of revolution."""

from __future__ import annotations

import enum
import math
import os
from dataclasses import dataclass, field
from typing import Iterable, Sequence, Union

from mallas3d import ply
from mallas3d.tuples import Vec

__all__ = [
    "DrawMode",
    "Chessboard",
    "Mesh",
    "make_cube",
    "make_tetrahedron",
    "mesh_from_ply",
    "rotate_point",
    "revolve",
    "revolution_from_ply",
    "make_cylinder",
    "make_cone",
    "make_sphere",
]

PathLike = Union[str, "os.PathLike[str]"]

DEFAULT_REVOLUTION_INSTANCES = 30

EVEN_COLOR = Vec(0.0, 1.0, 0.0)
ODD_COLOR = Vec(0.0, 0.0, 1.0)


class DrawMode(enum.IntEnum):
    """Primitive used to draw a mesh, with its OpenGL enumerant as value."""

    POINTS = 0x0000
    LINES = 0x0001
    TRIANGLES = 0x0004


@dataclass(frozen=True)
class Chessboard:
    """A mesh's triangles split by position, each half with per-vertex colours."""

    even: list[Vec] = field(default_factory=list)
    odd: list[Vec] = field(default_factory=list)
    even_colors: list[Vec] = field(default_factory=list)
    odd_colors: list[Vec] = field(default_factory=list)


class Mesh:
    """An indexed triangle mesh: a vertex table and a table of index triples."""

    def __init__(self, vertices: Iterable, triangles: Iterable) -> None:
        self.vertices: list[Vec] = [Vec(float(c) for c in v) for v in vertices]
        self.triangles: list[Vec] = [Vec(int(i) for i in t) for t in triangles]
        for vertex in self.vertices:
            if len(vertex) != 3:
                raise ValueError(f"vertex {vertex} does not have 3 coordinates")
        count = len(self.vertices)
        for triangle in self.triangles:
            if len(triangle) != 3:
                raise ValueError(f"triangle {triangle} does not have 3 indices")
            if any(index < 0 or index >= count for index in triangle):
                raise ValueError(f"triangle {triangle} refers to a missing vertex")

    def __repr__(self) -> str:
        return (
            f"Mesh({len(self.vertices)} vertices, {len(self.triangles)} triangles)"
        )

    def vertex_array(self) -> list[float]:
        """Return the vertex coordinates flattened, three per vertex."""
        return [coordinate for vertex in self.vertices for coordinate in vertex]

    def index_array(self) -> list[int]:
        """Return the triangle indices flattened, three per triangle."""
        return [index for triangle in self.triangles for index in triangle]

    def chessboard(self) -> Chessboard:
        """Split the triangles into even and odd positions with their colours."""
        count = len(self.vertices)
        return Chessboard(
            even=self.triangles[0::2],
            odd=self.triangles[1::2],
            even_colors=[EVEN_COLOR] * count,
            odd_colors=[ODD_COLOR] * count,
        )


def make_cube() -> Mesh:
    """Return a unit cube centred on the origin, faces wound counter-clockwise."""
    vertices = [
        (-0.5, -0.5, -0.5),
        (-0.5, -0.5, +0.5),
        (-0.5, +0.5, -0.5),
        (-0.5, +0.5, +0.5),
        (+0.5, -0.5, -0.5),
        (+0.5, -0.5, +0.5),
        (+0.5, +0.5, -0.5),
        (+0.5, +0.5, +0.5),
    ]
    triangles = [
        (0, 2, 4), (4, 2, 6),
        (1, 5, 3), (3, 5, 7),
        (1, 3, 0), (0, 3, 2),
        (5, 4, 7), (7, 4, 6),
        (1, 0, 5), (5, 0, 4),
        (3, 7, 2), (2, 7, 6),
    ]
    return Mesh(vertices, triangles)


def make_tetrahedron() -> Mesh:
    """Return a tetrahedron with its base on the plane y = -0.5."""
    vertices = [
        (-0.5, -0.5, -0.5),
        (0.0, -0.5, +0.5),
        (+0.5, -0.5, -0.5),
        (0.0, +0.5, 0.0),
    ]
    triangles = [(0, 1, 3), (1, 2, 3), (2, 0, 3), (0, 2, 1)]
    return Mesh(vertices, triangles)


def mesh_from_ply(name: PathLike) -> Mesh:
    """Load a triangle mesh from a PLY file."""
    vertices, faces = ply.read(name)
    return Mesh(vertices, faces)


def rotate_point(point: Sequence[float], step: float, instances: int) -> Vec:
    """Rotate a point about the Y axis by ``step`` of ``instances`` equal turns."""
    if instances <= 0:
        raise ValueError("the number of instances must be positive")
    x, y, z = point
    angle = (2.0 * step * math.pi) / instances
    sine = math.sin(angle)
    cosine = math.cos(angle)
    return Vec(x * cosine + z * sine, float(y), -x * sine + z * cosine)


def revolve(profile: Sequence[Sequence[float]], instances: int) -> Mesh:
    """Sweep a profile around the Y axis and close it with two caps.

    The bottom cap's centre is at the height of the last profile point
    and the top cap's centre at the height of the first.
    """
    if instances <= 0:
        raise ValueError("the number of instances must be positive")
    points = [tuple(p) for p in profile]
    if not points:
        raise ValueError("the profile is empty")
    size = len(points)

    vertices = [
        rotate_point(point, step, instances)
        for step in range(instances)
        for point in points
    ]

    triangles: list[tuple[int, int, int]] = []
    for k in range(instances):
        here = k * size
        there = ((k + 1) % instances) * size
        for v in range(size - 1):
            triangles.append((v + there, v + 1 + there, v + 1 + here))
            triangles.append((v + 1 + here, v + here, v + there))

    bottom = size * instances
    vertices.append(Vec(0.0, float(points[-1][1]), 0.0))
    for i in range(instances):
        triangles.append(
            (bottom, (i + 1) * size - 1, ((i + 1) % instances) * size + size - 1)
        )

    top = bottom + 1
    vertices.append(Vec(0.0, float(points[0][1]), 0.0))
    for i in range(instances):
        triangles.append((top, ((i + 1) % instances) * size, i * size))

    return Mesh(vertices, triangles)


def revolution_from_ply(
    name: PathLike, instances: int = DEFAULT_REVOLUTION_INSTANCES
) -> Mesh:
    """Revolve the profile stored as the vertices of a PLY file."""
    return revolve(ply.read_vertices(name), instances)


def make_cylinder(
    num_profile_vertices: int, instances: int, radius: float, height: float
) -> Mesh:
    """Return a cylinder spanning y from -height to +height.

    ``num_profile_vertices`` is accepted for interface symmetry; the
    profile always has four points.
    """
    profile = [
        (0.0, -height, 0.0),
        (radius, -height, 0.0),
        (radius, height, 0.0),
        (0.0, height, 0.0),
    ]
    return revolve(profile, instances)


def make_cone(
    num_profile_vertices: int, instances: int, radius: float, height: float
) -> Mesh:
    """Return a cone with its base at y = -height and apex at y = +height.

    ``num_profile_vertices`` is accepted for interface symmetry; the
    profile always has three points.
    """
    profile = [
        (0.0, -height, 0.0),
        (radius, -height, 0.0),
        (0.0, height, 0.0),
    ]
    return revolve(profile, instances)


def make_sphere(num_profile_vertices: int, instances: int, radius: float) -> Mesh:
    """Return a sphere whose profile has ``instances + 1`` points.

    The profile starts at 270 degrees and advances in whole-degree steps of
    ``180 // (instances // 2)``; ``num_profile_vertices`` is not used.
    """
    half = instances // 2
    if half <= 0:
        raise ValueError("a sphere needs at least 2 instances")
    step_degrees = 180 // half
    profile = []
    for i in range(instances + 1):
        angle = math.radians(i * step_degrees + 270)
        profile.append((radius * math.cos(angle), radius * math.sin(angle), 0.0))
    return revolve(profile, instances)