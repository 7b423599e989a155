"""Region descriptions understood by the outline sampler.

Each region kind is a frozen dataclass; together they form the
``Region`` union that :func:`regionoutline.outline.sample` dispatches
on.  Coordinates follow the cell-grid convention of the selection
tools these regions come from: integer coordinates address the lower
corner of a unit cell, and a region's maximum corner is *padded* by
one cell so that the drawn box encloses whole cells.

Every region carries an opaque ``world`` tag.  The sampler never looks
inside it; it is attached to each output point, and a region whose
world is ``None`` produces no points.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence, Tuple, Union

from regionoutline.errors import UnsupportedRegionShape
from regionoutline.vector import ONE, Point3

Face = Tuple[Point3, Point3, Point3]


def _point(value) -> Point3:
    return Point3.of(value)


@dataclass(frozen=True)
class Cuboid:
    """Axis aligned box between ``min`` and the padded ``max`` corner."""

    min: Point3
    max: Point3
    world: Any = None

    def __post_init__(self):
        object.__setattr__(self, "min", _point(self.min))
        object.__setattr__(self, "max", _point(self.max))

    @classmethod
    def from_cells(cls, a, b, world: Any = None) -> "Cuboid":
        """Box enclosing the inclusive cell corners ``a`` and ``b``.

        The corners may be given in any order; the maximum corner is
        padded by one cell in every axis.
        """
        a = _point(a)
        b = _point(b)
        lo = Point3(min(a.x, b.x), min(a.y, b.y), min(a.z, b.z))
        hi = Point3(max(a.x, b.x), max(a.y, b.y), max(a.z, b.z))
        return cls(lo, hi + ONE, world)


@dataclass(frozen=True)
class PolygonalPrism:
    """Vertical extrusion of an ``(x, z)`` polygon starting at ``min_y``."""

    points: Tuple[Tuple[float, float], ...]
    min_y: float
    height: float
    world: Any = None

    def __post_init__(self):
        pts = []
        for p in self.points:
            if len(p) != 2:
                raise ValueError(f"polygon points must be (x, z) pairs, got {p!r}")
            pts.append((float(p[0]), float(p[1])))
        object.__setattr__(self, "points", tuple(pts))
        if self.height < 0:
            raise ValueError(f"prism height must be non-negative, got {self.height}")


@dataclass(frozen=True)
class Cylinder:
    """Elliptic cylinder.

    The footprint covers the cells from ``center.x - radius_x`` to
    ``center.x + radius_x`` (likewise in z).  The lower outline ring is
    drawn through the middle of the ``center`` cell and copied ``height``
    upwards; the four side edges rise from ``min_y``.
    """

    center: Point3
    radius_x: float
    radius_z: float
    min_y: float
    height: float
    world: Any = None

    def __post_init__(self):
        object.__setattr__(self, "center", _point(self.center))
        if self.radius_x < 0 or self.radius_z < 0:
            raise ValueError("cylinder radii must be non-negative")
        if self.height < 0:
            raise ValueError(f"cylinder height must be non-negative, got {self.height}")

    @property
    def width(self) -> float:
        return 2.0 * self.radius_x + 1.0

    @property
    def length(self) -> float:
        return 2.0 * self.radius_z + 1.0


@dataclass(frozen=True)
class Ellipsoid:
    """Ellipsoid with per-axis ``radius`` around the cell at ``center``."""

    center: Point3
    radius: Point3
    world: Any = None

    def __post_init__(self):
        object.__setattr__(self, "center", _point(self.center))
        object.__setattr__(self, "radius", _point(self.radius))
        if min(self.radius) < 0:
            raise ValueError("ellipsoid radii must be non-negative")


@dataclass(frozen=True)
class ConvexPolyhedron:
    """Convex hull given as a list of triangular faces."""

    triangles: Tuple[Face, ...] = field(default_factory=tuple)
    world: Any = None

    def __post_init__(self):
        faces = []
        for tri in self.triangles:
            if len(tri) != 3:
                raise ValueError(f"faces must have exactly three vertices, got {len(tri)}")
            faces.append((_point(tri[0]), _point(tri[1]), _point(tri[2])))
        object.__setattr__(self, "triangles", tuple(faces))

    def vertices(self) -> Tuple[Point3, ...]:
        """All face vertices in face order, shared vertices repeated."""
        return tuple(v for tri in self.triangles for v in tri)


Region = Union[Cuboid, PolygonalPrism, Cylinder, Ellipsoid, ConvexPolyhedron]

REGION_TYPES = (Cuboid, PolygonalPrism, Cylinder, Ellipsoid, ConvexPolyhedron)


def isregion(x) -> bool:
    """is ``x`` one of the known region variants?"""
    return isinstance(x, REGION_TYPES)


def _bounds_of(points: Sequence[Point3]) -> Tuple[Point3, Point3]:
    lo = Point3(min(p.x for p in points), min(p.y for p in points), min(p.z for p in points))
    hi = Point3(max(p.x for p in points), max(p.y for p in points), max(p.z for p in points))
    return lo, hi


def region_bounds(region: Region) -> Tuple[Point3, Point3]:
    """Return the ``(min, max)`` corners of ``region``, max padded by one cell.

    Raises:
        UnsupportedRegionShape: if ``region`` is not a known variant
        ValueError: for a prism or polyhedron with no vertices
    """
    if isinstance(region, Cuboid):
        return region.min, region.max
    if isinstance(region, PolygonalPrism):
        if not region.points:
            raise ValueError("polygonal prism has no points")
        xs = [p[0] for p in region.points]
        zs = [p[1] for p in region.points]
        return (Point3(min(xs), region.min_y, min(zs)),
                Point3(max(xs) + 1.0, region.min_y + region.height, max(zs) + 1.0))
    if isinstance(region, Cylinder):
        c = region.center
        return (Point3(c.x - region.radius_x, region.min_y, c.z - region.radius_z),
                Point3(c.x + region.radius_x + 1.0, region.min_y + region.height,
                       c.z + region.radius_z + 1.0))
    if isinstance(region, Ellipsoid):
        return region.center - region.radius, region.center + region.radius + ONE
    if isinstance(region, ConvexPolyhedron):
        verts = region.vertices()
        if not verts:
            raise ValueError("convex polyhedron has no faces")
        lo, hi = _bounds_of(verts)
        return lo, hi + ONE
    raise UnsupportedRegionShape(region)


def region_size(region: Region) -> Tuple[float, float, float]:
    """Return ``(width, height, length)`` extents along x, y and z."""
    lo, hi = region_bounds(region)
    d = hi - lo
    return d.x, d.y, d.z


__all__ = [
    "ConvexPolyhedron",
    "Cuboid",
    "Cylinder",
    "Ellipsoid",
    "Face",
    "PolygonalPrism",
    "REGION_TYPES",
    "Region",
    "isregion",
    "region_bounds",
    "region_size",
]
