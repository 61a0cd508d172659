"""Exception types raised by the garden core and its host."""


class GardenError(Exception):
    """Base class for fractal garden failures."""


class ConfigurationError(GardenError):
    """Settings could not be turned into a usable configuration."""


class SurfaceError(GardenError):
    """A drawing primitive failed; the current frame cannot continue."""
