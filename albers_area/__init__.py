"""Albers equal-area projection and polygon area.

Projects latitude/longitude onto Adams' (1945) whole-world Albers map
centred on the north pole, and measures planar polygons with the
shoelace formula.
"""

from albers_area.core.exceptions import InvalidInputError
from albers_area.geometry.area import polygon_area
from albers_area.geometry.projection import project
from albers_area.models.points import GeoPoint, PlanarPoint

__version__ = "0.1.0"

__all__ = [
    "GeoPoint",
    "InvalidInputError",
    "PlanarPoint",
    "polygon_area",
    "project",
]
