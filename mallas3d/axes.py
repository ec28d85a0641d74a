"""The three coordinate axes drawn as coloured line segments."""

from __future__ import annotations

from mallas3d.tuples import Vec

__all__ = ["Axes"]

DEFAULT_AXIS_SIZE = 1000.0

RED = Vec(1.0, 0.0, 0.0)
GREEN = Vec(0.0, 1.0, 0.0)
BLUE = Vec(0.0, 0.0, 1.0)


class Axes:
    """X, Y and Z axes spanning ``-size`` to ``+size``, coloured red, green, blue."""

    def __init__(self, size: float = DEFAULT_AXIS_SIZE) -> None:
        self.size = float(size)

    def __repr__(self) -> str:
        return f"Axes(size={self.size:g})"

    def change_size(self, size: float) -> None:
        """Set the half-length of every axis."""
        self.size = float(size)

    def segments(self) -> list[tuple[Vec, Vec, Vec]]:
        """Return ``(colour, start, end)`` for the X, Y and Z axes in that order."""
        s = self.size
        return [
            (RED, Vec(-s, 0.0, 0.0), Vec(s, 0.0, 0.0)),
            (GREEN, Vec(0.0, -s, 0.0), Vec(0.0, s, 0.0)),
            (BLUE, Vec(0.0, 0.0, -s), Vec(0.0, 0.0, s)),
        ]

    def vertex_array(self) -> list[float]:
        """Return the six segment end points flattened, three floats each."""
        return [
            coordinate
            for _, start, end in self.segments()
            for point in (start, end)
            for coordinate in point
        ]

    def color_array(self) -> list[float]:
        """Return one colour per end point, flattened, three floats each."""
        return [
            component
            for color, _, _ in self.segments()
            for _ in range(2)
            for component in color
        ]