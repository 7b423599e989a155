"""Immutable 3D point type used throughout the outline sampler."""

from __future__ import annotations

from dataclasses import dataclass
from math import sqrt
from typing import Iterator, Sequence

## same empirically chosen tolerance the rest of the geometry code uses
epsilon = 0.000005


def close(a: float, b: float) -> bool:
    """are two scalars the same within epsilon"""
    return abs(a - b) < epsilon


@dataclass(frozen=True)
class Point3:
    """Value-type XYZ coordinate with basic vector arithmetic."""

    x: float
    y: float
    z: float

    @classmethod
    def of(cls, point_like: Sequence[float]) -> "Point3":
        """Build a point from any sequence with at least three components."""

        if isinstance(point_like, Point3):
            return point_like
        if len(point_like) < 3:
            raise ValueError("value must have at least three components")
        return cls(float(point_like[0]), float(point_like[1]), float(point_like[2]))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: "Point3") -> "Point3":
        return Point3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Point3") -> "Point3":
        return Point3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, c: float) -> "Point3":
        return Point3(self.x * c, self.y * c, self.z * c)

    __rmul__ = __mul__

    def offset(self, dx: float = 0.0, dy: float = 0.0, dz: float = 0.0) -> "Point3":
        """Return this point translated by the given deltas."""
        return Point3(self.x + dx, self.y + dy, self.z + dz)

    def length(self) -> float:
        return sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def distance(self, other: "Point3") -> float:
        """euclidean distance between this point and ``other``"""
        return (self - other).length()

    def normalized(self) -> "Point3":
        """Unit vector in the same direction; the zero vector maps to itself."""

        m = self.length()
        if m == 0.0:
            return self
        return Point3(self.x / m, self.y / m, self.z / m)

    def isclose(self, other: "Point3", tol: float = epsilon) -> bool:
        return self.distance(other) < tol


ORIGIN = Point3(0.0, 0.0, 0.0)

## cell-center convention: grid cells are addressed by their lower
## corner, and outlines are drawn through the middle of the cell
HALF = Point3(0.5, 0.5, 0.5)
ONE = Point3(1.0, 1.0, 1.0)


__all__ = [
    "HALF",
    "ONE",
    "ORIGIN",
    "Point3",
    "close",
    "epsilon",
]
