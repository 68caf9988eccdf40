"""
Exceptions raised while measuring planar geometries.
"""


class CentroidAreaError(ValueError):
    """Base class for errors raised by planar_measure."""


class UnsupportedGeometryError(CentroidAreaError, TypeError):
    """The geometry is not one of the supported shape variants."""

    def __init__(self, geometry):
        self.geometry = geometry
        super().__init__(f"Unsupported geometry type: {type(geometry).__name__}")


class EmptyGeometryError(CentroidAreaError):
    """The geometry has no coordinates, so its centroid is undefined."""
