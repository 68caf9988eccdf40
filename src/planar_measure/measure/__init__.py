"""
Centroid and area computations.
"""

from .ring import ring_centroid_area, vertex_average
from .compose import polygon_centroid_area, multi_centroid_area, bound_centroid_area
from .centroid_area import centroid_area, area, centroid

__all__ = [
    'ring_centroid_area',
    'vertex_average',
    'polygon_centroid_area',
    'multi_centroid_area',
    'bound_centroid_area',
    'centroid_area',
    'area',
    'centroid',
]
