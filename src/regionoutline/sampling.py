"""Primitive point generators: straight lines and axis-aligned ellipses.

Both generators space their output by a target ``gap`` measured in
world units.  The ``iter_*`` forms are lazy and are what the region
sampler chains together; the ``sample_*`` forms return lists.
"""

from __future__ import annotations

from math import cos, floor, pi, sin
from typing import Iterator, List

from regionoutline.errors import InvalidConfiguration
from regionoutline.vector import Point3

pi2 = 2.0 * pi


def _check_gap(gap: float) -> None:
    if not gap > 0:
        raise InvalidConfiguration(f"gap must be positive, got {gap}")


def line_point_count(p1: Point3, p2: Point3, gap: float) -> int:
    """number of points :func:`iter_line` emits for the segment ``p1``-``p2``"""
    _check_gap(gap)
    return int(floor(p1.distance(p2) / gap)) + 1


def iter_line(p1: Point3, p2: Point3, gap: float) -> Iterator[Point3]:
    """Lazily walk from ``p1`` to ``p2`` in evenly spaced steps.

    The step is the segment length divided into as many pieces of at
    least ``gap`` as fit, so both endpoints are produced whenever the
    segment is at least ``gap`` long.  Shorter (or zero length)
    segments yield ``p1`` alone.
    """
    count = line_point_count(p1, p2, gap)
    if count == 1:
        yield p1
        return
    step = p1.distance(p2) / (count - 1)
    delta = (p2 - p1).normalized() * step
    for i in range(count):
        yield p1 + delta * i


def sample_line(p1: Point3, p2: Point3, gap: float) -> List[Point3]:
    """Return the points of :func:`iter_line` as a list."""
    return list(iter_line(p1, p2, gap))


def _ellipse_plane(radius: Point3):
    ## return (index of axis driven by cos, index of axis driven by
    ## sin), or None if no radius component is zero
    if radius.x == 0.0:
        return 1, 2
    if radius.y == 0.0:
        return 0, 2
    if radius.z == 0.0:
        return 0, 1
    return None


def iter_ellipse(center: Point3, radius: Point3, gap: float) -> Iterator[Point3]:
    """Lazily trace an ellipse lying in a cardinal plane.

    Exactly one component of ``radius`` should be zero; the ellipse
    lies in the plane orthogonal to that axis.  The angular step is
    derived from the circumference of a circle with the largest radius,
    so eccentric ellipses are sampled evenly in angle rather than in
    arc length.  The start point is not repeated at the end.

    If ``radius`` has no zero component, every sample sits at
    ``center``; if all components are zero a single ``center`` is
    produced.
    """
    _check_gap(gap)
    largest = max(abs(radius.x), abs(radius.y), abs(radius.z))
    if largest == 0.0:
        yield center
        return

    delta = gap / (pi2 * largest)
    plane = _ellipse_plane(radius)
    c = (center.x, center.y, center.z)
    r = (radius.x, radius.y, radius.z)

    theta = 0.0
    while theta < 1.0:
        p = list(c)
        if plane is not None:
            a, b = plane
            p[a] = c[a] + cos(theta * pi2) * r[a]
            p[b] = c[b] + sin(theta * pi2) * r[b]
        yield Point3(p[0], p[1], p[2])
        theta += delta


def sample_ellipse(center: Point3, radius: Point3, gap: float) -> List[Point3]:
    """Return the points of :func:`iter_ellipse` as a list."""
    return list(iter_ellipse(center, radius, gap))


__all__ = [
    "iter_ellipse",
    "iter_line",
    "line_point_count",
    "sample_ellipse",
    "sample_line",
]
