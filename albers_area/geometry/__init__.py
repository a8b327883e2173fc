"""Projection and area computation.

- projection: Albers equal-area conic projector
- area: shoelace polygon area, geographic ring area
"""

from albers_area.geometry.area import (
    geographic_area_ha,
    geographic_area_m2,
    polygon_area,
    project_ring,
)
from albers_area.geometry.projection import (
    AlbersProjector,
    default_projector,
    degrees_to_radians,
    project,
)

__all__ = [
    "AlbersProjector",
    "default_projector",
    "degrees_to_radians",
    "geographic_area_ha",
    "geographic_area_m2",
    "polygon_area",
    "project",
    "project_ring",
]
