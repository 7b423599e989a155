"""Wireframe outlines for volumetric regions.

:func:`sample` turns a region into a list of ``(point, world)`` pairs
tracing its skeleton edges and, when enabled in the
:class:`~regionoutline.config.DensityConfig`, horizontal contour rings.
The result is meant for a renderer that draws one marker per point.

Every region kind has its own skeleton procedure:

* cuboids and polygonal prisms draw the bottom and top outlines plus
  one vertical edge per corner,
* cylinders draw a bottom and top ellipse and four vertical edges at
  the footprint's extremes,
* ellipsoids draw three orthogonal great ellipses, with optional
  latitude rings,
* convex polyhedra join their face vertices in face order.

Points are produced lazily by :func:`iter_points`, so a point ceiling
in the config bounds the work done as well as the size of the result.
"""

from __future__ import annotations

import logging
from itertools import islice
from math import asin, cos
from typing import Any, Callable, Iterator, List, Optional, Sequence, Tuple

from regionoutline.config import DensityConfig
from regionoutline.errors import UnsupportedRegionShape
from regionoutline.regions import (
    ConvexPolyhedron,
    Cuboid,
    Cylinder,
    Ellipsoid,
    PolygonalPrism,
    Region,
    region_bounds,
)
from regionoutline.sampling import iter_ellipse, iter_line
from regionoutline.vector import HALF, Point3

logger = logging.getLogger(__name__)

PointSequence = List[Tuple[Point3, Any]]
WorldResolver = Callable[[Any], Any]


def _ring_offsets(height: float, vertical_gap: float) -> Iterator[float]:
    ## vertical_gap, 2*vertical_gap, ... strictly below height
    offset = vertical_gap
    while offset < height:
        yield offset
        offset += vertical_gap


def _prism_points(corners: Sequence[Point3], height: float, rings: bool,
                  config: DensityConfig) -> Iterator[Point3]:
    gap = config.gap_between_points
    n = len(corners)
    for i in range(n):
        p1 = corners[i]
        p2 = corners[(i + 1) % n]
        p3 = p1.offset(dy=height)
        p4 = p2.offset(dy=height)

        yield from iter_line(p1, p2, gap)
        yield from iter_line(p3, p4, gap)
        yield from iter_line(p1, p3, gap)

        if not rings:
            continue
        for offset in _ring_offsets(height, config.vertical_gap):
            yield from iter_line(p1.offset(dy=offset), p2.offset(dy=offset), gap)


def _cuboid_points(region: Cuboid, config: DensityConfig) -> Iterator[Point3]:
    lo, hi = region.min, region.max
    corners = [
        Point3(lo.x, lo.y, lo.z),
        Point3(hi.x, lo.y, lo.z),
        Point3(hi.x, lo.y, hi.z),
        Point3(lo.x, lo.y, hi.z),
    ]
    return _prism_points(corners, hi.y - lo.y, config.cuboid_lines, config)


def _polygon_points(region: PolygonalPrism, config: DensityConfig) -> Iterator[Point3]:
    corners = [Point3(x + 0.5, region.min_y, z + 0.5) for x, z in region.points]
    return _prism_points(corners, region.height, config.polygon_lines, config)


def _cylinder_points(region: Cylinder, config: DensityConfig) -> Iterator[Point3]:
    gap = config.gap_between_points
    height = region.height
    lo, hi = region_bounds(region)
    center = region.center + HALF
    radius = Point3(region.width / 2.0, 0.0, region.length / 2.0)

    ## each copy of the ring is traced afresh, none is buffered
    yield from iter_ellipse(center, radius, gap)
    for p in iter_ellipse(center, radius, gap):
        yield p.offset(dy=height)

    mid_x = (hi.x + lo.x) / 2.0
    mid_z = (hi.z + lo.z) / 2.0
    for p in (Point3(mid_x, lo.y, lo.z),
              Point3(mid_x, lo.y, hi.z),
              Point3(lo.x, lo.y, mid_z),
              Point3(hi.x, lo.y, mid_z)):
        yield from iter_line(p, p.offset(dy=height), gap)

    if config.cylinder_lines:
        for offset in _ring_offsets(height, config.vertical_gap):
            for p in iter_ellipse(center, radius, gap):
                yield p.offset(dy=offset)


def _ellipsoid_points(region: Ellipsoid, config: DensityConfig) -> Iterator[Point3]:
    gap = config.gap_between_points
    r = region.radius + HALF
    center = region.center + HALF

    yield from iter_ellipse(center, Point3(0.0, r.y, r.z), gap)
    yield from iter_ellipse(center, Point3(r.x, 0.0, r.z), gap)
    yield from iter_ellipse(center, Point3(r.x, r.y, 0.0), gap)

    if not config.ellipsoid_lines:
        return
    for offset in _ring_offsets(r.y, config.vertical_gap):
        ## cross-section radius of a unit sphere at latitude offset/r.y
        ratio = cos(asin(offset / r.y))
        rx = r.x * ratio
        rz = r.z * ratio
        yield from iter_ellipse(center.offset(dy=-offset), Point3(rx, 0.0, rz), gap)
        yield from iter_ellipse(center.offset(dy=offset), Point3(rx, 0.0, rz), gap)


def _polyhedron_points(region: ConvexPolyhedron, config: DensityConfig) -> Iterator[Point3]:
    gap = config.gap_between_points
    corners = [v + HALF for v in region.vertices()]
    n = len(corners)
    for i in range(n):
        yield from iter_line(corners[i], corners[(i + 1) % n], gap)


_HANDLERS = {
    Cuboid: _cuboid_points,
    PolygonalPrism: _polygon_points,
    Cylinder: _cylinder_points,
    Ellipsoid: _ellipsoid_points,
    ConvexPolyhedron: _polyhedron_points,
}


def iter_points(region: Region, config: DensityConfig) -> Iterator[Point3]:
    """Lazily generate the outline points of ``region``.

    The stream is neither clipped nor tagged with a world.

    Raises:
        UnsupportedRegionShape: if ``region`` is not a known variant
    """
    handler = _HANDLERS.get(type(region))
    if handler is None:
        raise UnsupportedRegionShape(region)
    return handler(region, config)


def sample(region: Region, config: DensityConfig,
           resolve_world: Optional[WorldResolver] = None) -> PointSequence:
    """Sample the wireframe outline of ``region``.

    Args:
        region: the region to outline
        config: point spacing, ring toggles and the optional point
            ceiling; validated when it was constructed
        resolve_world: optional lookup applied to ``region.world``; the
            value it returns tags every point.  Without a resolver the
            world tag is used as is.

    Returns:
        a list of ``(Point3, world)`` pairs in generation order.  The
        list is empty for unknown region kinds and for regions whose
        world is missing or does not resolve.  If ``config.max_points``
        is set the list is clipped to that many points.
    """
    try:
        points = iter_points(region, config)
    except UnsupportedRegionShape as e:
        logger.debug("%s; nothing to outline", e)
        return []

    world = getattr(region, "world", None)
    if world is None:
        logger.debug("region %s has no world; discarding outline", type(region).__name__)
        return []
    if resolve_world is not None:
        resolved = resolve_world(world)
        if resolved is None:
            logger.debug("world %r could not be resolved; discarding outline", world)
            return []
        world = resolved

    limit = config.max_points
    if limit is None:
        return [(p, world) for p in points]

    ## pull one extra point to tell a clipped outline from an exact fit
    clipped = [(p, world) for p in islice(points, limit + 1)]
    if len(clipped) > limit:
        logger.warning("outline of %s clipped to %d points",
                       type(region).__name__, limit)
        del clipped[limit:]
    return clipped


__all__ = [
    "PointSequence",
    "WorldResolver",
    "iter_points",
    "sample",
]
