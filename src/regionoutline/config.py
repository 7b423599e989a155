"""Density settings for the outline sampler, with YAML loading.

Settings are read from a YAML mapping whose keys use the spelling of
the host plugin's configuration file::

    gapBetweenPoints: 0.5
    verticalGap: 1.0
    cuboidLines: true
    polygonLines: true
    cylinderLines: true
    ellipsoidLines: false
    maxPoints: 20000

Environment Variables:
    REGIONOUTLINE_CONFIG: path to a YAML file used in place of the user
                          and bundled configuration.

Search order used by :func:`load_config` when no path is given:
    1. ``$REGIONOUTLINE_CONFIG``
    2. User config directory (``~/.config/regionoutline/config.yaml``)
    3. Bundled defaults
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass, fields
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from regionoutline.errors import InvalidConfiguration

logger = logging.getLogger(__name__)

__all__ = [
    "CONFIG_KEYS",
    "DensityConfig",
    "REGIONOUTLINE_CONFIG",
    "clear_cache",
    "load_config",
]

REGIONOUTLINE_CONFIG = "REGIONOUTLINE_CONFIG"

_BUNDLED_CONFIG = Path(__file__).parent / "data" / "config.yaml"

# YAML key -> DensityConfig field
CONFIG_KEYS = {
    "gapBetweenPoints": "gap_between_points",
    "verticalGap": "vertical_gap",
    "cuboidLines": "cuboid_lines",
    "polygonLines": "polygon_lines",
    "cylinderLines": "cylinder_lines",
    "ellipsoidLines": "ellipsoid_lines",
    "maxPoints": "max_points",
}


@dataclass(frozen=True)
class DensityConfig:
    """How densely region outlines are sampled.

    Attributes:
        gap_between_points: target spacing between neighbouring points
            along any line or arc (> 0)
        vertical_gap: spacing between horizontal contour rings (> 0)
        cuboid_lines: draw contour rings on cuboids
        polygon_lines: draw contour rings on polygonal prisms
        cylinder_lines: draw contour rings on cylinders
        ellipsoid_lines: draw latitude rings on ellipsoids
        max_points: optional ceiling on the number of points returned
            for one region; ``None`` means unbounded
    """
    gap_between_points: float = 0.5
    vertical_gap: float = 1.0
    cuboid_lines: bool = True
    polygon_lines: bool = True
    cylinder_lines: bool = True
    ellipsoid_lines: bool = True
    max_points: Optional[int] = None

    def __post_init__(self):
        for name in ("gap_between_points", "vertical_gap"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidConfiguration(f"{name} must be a number, got {value!r}")
            if not value > 0:
                raise InvalidConfiguration(f"{name} must be positive, got {value}")
        for name in ("cuboid_lines", "polygon_lines", "cylinder_lines", "ellipsoid_lines"):
            if not isinstance(getattr(self, name), bool):
                raise InvalidConfiguration(f"{name} must be a boolean, got {getattr(self, name)!r}")
        if self.max_points is not None:
            if isinstance(self.max_points, bool) or not isinstance(self.max_points, int):
                raise InvalidConfiguration(f"max_points must be an integer, got {self.max_points!r}")
            if self.max_points < 0:
                raise InvalidConfiguration(f"max_points must be non-negative, got {self.max_points}")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "DensityConfig":
        """Build a config from a mapping using the YAML key spelling.

        Unknown keys are ignored with a warning; missing keys keep their
        defaults.
        """
        kwargs = {}
        for key, value in data.items():
            name = CONFIG_KEYS.get(key)
            if name is None:
                logger.warning("ignoring unknown configuration key %r", key)
                continue
            kwargs[name] = value
        return cls(**kwargs)

    def to_mapping(self) -> Dict[str, Any]:
        """Inverse of :meth:`from_mapping`."""
        names = {f.name for f in fields(self)}
        return {key: getattr(self, name) for key, name in CONFIG_KEYS.items() if name in names}


def clear_cache() -> None:
    """Forget previously loaded configuration files.

    Call this if you edit a configuration file and want it reloaded.
    """
    _load_config_cached.cache_clear()


def _user_config_path() -> Path:
    if sys.platform == "win32":
        config_base = Path(os.environ.get("APPDATA", "~")).expanduser()
    else:
        config_base = Path.home() / ".config"
    return config_base / "regionoutline" / "config.yaml"


def _resolve_path() -> Path:
    env_path = os.environ.get(REGIONOUTLINE_CONFIG)
    if env_path:
        path = Path(env_path.strip()).expanduser()
        if path.is_file():
            return path
        logger.warning("%s points at missing file %s", REGIONOUTLINE_CONFIG, path)

    user_path = _user_config_path()
    if user_path.is_file():
        return user_path
    return _BUNDLED_CONFIG


def _load_yaml(path: Path) -> DensityConfig:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise InvalidConfiguration(f"Invalid configuration in {path}: expected a mapping at root")

    logger.info("loaded outline density settings from %s", path)
    return DensityConfig.from_mapping(data)


@lru_cache(maxsize=32)
def _load_config_cached(path_str: str) -> DensityConfig:
    return _load_yaml(Path(path_str))


def load_config(path: Optional[Path] = None) -> DensityConfig:
    """Load density settings.

    Args:
        path: explicit YAML file; overrides the search order

    Returns:
        a validated :class:`DensityConfig`

    Raises:
        FileNotFoundError: if ``path`` is given and does not exist
        InvalidConfiguration: if the file is not a mapping or holds
            invalid values
    """
    if path is not None:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")
    else:
        path = _resolve_path()
    return _load_config_cached(str(path.resolve()))
