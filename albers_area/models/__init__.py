"""Data models.

- GeoPoint: latitude/longitude in degrees (projector input)
- PlanarPoint: x/y in metres (projector output, polygon vertex)
- Polygon: ordered, implicitly closed sequence of planar points
"""

from albers_area.models.points import (
    GeoPoint,
    PlanarPoint,
    Polygon,
    as_geo_point,
    as_xy,
    validate_geo_coordinate,
)

__all__ = [
    "GeoPoint",
    "PlanarPoint",
    "Polygon",
    "as_geo_point",
    "as_xy",
    "validate_geo_coordinate",
]
