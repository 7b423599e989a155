"""Exceptions raised by the outline sampler."""


class RegionOutlineError(Exception):
    """Base class for all regionoutline errors."""


class InvalidConfiguration(RegionOutlineError, ValueError):
    """Density settings that cannot drive a sampler (e.g. a zero gap)."""


class UnsupportedRegionShape(RegionOutlineError, TypeError):
    """A region value that is not one of the known variants."""

    def __init__(self, region):
        self.region = region
        super().__init__(f"unsupported region shape: {type(region).__name__}")


__all__ = [
    "InvalidConfiguration",
    "RegionOutlineError",
    "UnsupportedRegionShape",
]
