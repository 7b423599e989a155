# -*- coding: utf-8 -*-
from importlib.metadata import PackageNotFoundError, version

from regionoutline.config import DensityConfig, load_config
from regionoutline.errors import (
    InvalidConfiguration,
    RegionOutlineError,
    UnsupportedRegionShape,
)
from regionoutline.outline import PointSequence, iter_points, sample
from regionoutline.regions import (
    ConvexPolyhedron,
    Cuboid,
    Cylinder,
    Ellipsoid,
    PolygonalPrism,
    Region,
    region_bounds,
    region_size,
)
from regionoutline.sampling import sample_ellipse, sample_line
from regionoutline.vector import Point3

try:
    __version__ = version("regionoutline")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"

__all__ = [
    "ConvexPolyhedron",
    "Cuboid",
    "Cylinder",
    "DensityConfig",
    "Ellipsoid",
    "InvalidConfiguration",
    "Point3",
    "PointSequence",
    "PolygonalPrism",
    "Region",
    "RegionOutlineError",
    "UnsupportedRegionShape",
    "iter_points",
    "load_config",
    "region_bounds",
    "region_size",
    "sample",
    "sample_ellipse",
    "sample_line",
]
