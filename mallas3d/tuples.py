"""Small fixed-size numeric tuples for coordinates and colours."""

from __future__ import annotations

import math
from numbers import Number
from typing import Iterable, Iterator, Union

Scalar = Union[int, float]


def _format_component(value: Scalar) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


class Vec:
    """An immutable tuple of numbers supporting component-wise arithmetic.

    ``Vec(1, 2, 3)`` builds a tuple from its components, and
    ``Vec(iterable)`` builds one from any iterable of numbers.
    """

    __slots__ = ("_components",)

    def __init__(self, *args) -> None:
        if len(args) == 1 and not isinstance(args[0], Number):
            components = tuple(args[0])
        else:
            components = tuple(args)
        if not components:
            raise ValueError("a Vec needs at least one component")
        for value in components:
            if not isinstance(value, Number):
                raise TypeError(f"component {value!r} is not a number")
        self._components = components

    def __getitem__(self, index):
        return self._components[index]

    def __len__(self) -> int:
        return len(self._components)

    def __iter__(self) -> Iterator[Scalar]:
        return iter(self._components)

    def __eq__(self, other) -> bool:
        if isinstance(other, Vec):
            return self._components == other._components
        if isinstance(other, (tuple, list)):
            return self._components == tuple(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._components)

    def __repr__(self) -> str:
        return f"Vec{self._components!r}"

    def _paired(self, other: Iterable[Scalar]) -> Iterator[tuple[Scalar, Scalar]]:
        other_components = tuple(other)
        if len(other_components) != len(self._components):
            raise ValueError(
                f"size mismatch: {len(self._components)} and {len(other_components)}"
            )
        return zip(self._components, other_components)

    def __add__(self, other) -> Vec:
        if not isinstance(other, (Vec, tuple, list)):
            return NotImplemented
        return Vec(a + b for a, b in self._paired(other))

    def __sub__(self, other) -> Vec:
        if not isinstance(other, (Vec, tuple, list)):
            return NotImplemented
        return Vec(a - b for a, b in self._paired(other))

    def __neg__(self) -> Vec:
        return Vec(-a for a in self._components)

    def __mul__(self, scalar) -> Vec:
        if not isinstance(scalar, Number):
            return NotImplemented
        return Vec(a * scalar for a in self._components)

    def __rmul__(self, scalar) -> Vec:
        if not isinstance(scalar, Number):
            return NotImplemented
        return Vec(scalar * a for a in self._components)

    def __truediv__(self, scalar) -> Vec:
        if not isinstance(scalar, Number):
            return NotImplemented
        return Vec(a / scalar for a in self._components)

    def __or__(self, other) -> Scalar:
        if not isinstance(other, (Vec, tuple, list)):
            return NotImplemented
        return self.dot(other)

    def __str__(self) -> str:
        return "(" + ",".join(_format_component(c) for c in self._components) + ")"

    def dot(self, other) -> Scalar:
        """Return the scalar (dot) product with another tuple of equal size."""
        return sum(a * b for a, b in self._paired(other))

    def length_sq(self) -> Scalar:
        """Return the squared Euclidean length."""
        return self.dot(self)

    def normalized(self) -> Vec:
        """Return a copy scaled to unit length.

        Raises ValueError when the squared length is not positive.
        """
        len_sq = sum(a * a for a in self._components)
        if not len_sq > 0.0:
            raise ValueError(f"cannot normalize a tuple with lenSq == {len_sq}")
        return self * (1.0 / math.sqrt(len_sq))

    def cross(self, other) -> Vec:
        """Return the vector (cross) product of two 3-component tuples."""
        if len(self._components) != 3:
            raise ValueError("cross product needs 3-component tuples")
        (x1, x2), (y1, y2), (z1, z2) = self._paired(other)
        return Vec(
            y1 * z2 - z1 * y2,
            z1 * x2 - x1 * z2,
            x1 * y2 - y1 * x2,
        )