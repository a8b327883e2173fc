"""Planar polygon area.

``polygon_area`` implements the trapezoid form of the shoelace formula
(http://algolist.manual.ru/maths/geom/polygon/area.php)::

    area = |Σ (x[i] + x[j]) * (y[i] - y[j])| / 2,   j = (i + 1) mod l

The polygon is implicitly closed from its last vertex back to the first,
and the absolute value makes the result independent of winding order.

The ``geographic_area_*`` helpers project a latitude/longitude ring with
the equal-area projector first, so the planar area is the area on the
sphere (explicit units: square metres or hectares).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from albers_area.core.constants import SQ_METRES_PER_HECTARE
from albers_area.core.exceptions import InvalidInputError
from albers_area.geometry.projection import AlbersProjector, default_projector
from albers_area.models.points import (
    GeoPointLike,
    PlanarPoint,
    PlanarPointLike,
    as_xy,
)

logger = logging.getLogger("albers_area.geometry.area")


def polygon_area(polygon: Iterable[PlanarPointLike]) -> float:
    """Return the area enclosed by ``polygon`` in the square of its units.

    Args:
        polygon: Ordered vertices as PlanarPoints or ``(x, y)`` pairs, in
            any iterable.  The closing edge is implied; a repeated
            first vertex at the end adds a zero-length edge and does
            not change the result.

    Returns:
        A non-negative area.  Fewer than three vertices, or collinear
        vertices, give 0.

    Raises:
        InvalidInputError: If ``polygon`` has no vertices.
    """
    coords = [as_xy(p) for p in polygon]
    if not coords:
        msg = "Empty polygon  --  no vertices to close the ring against"
        raise InvalidInputError(msg, stage="area")

    count = len(coords)

    total = 0.0
    for i in range(count):
        j = i + 1 if i < count - 1 else 0
        xi, yi = coords[i]
        xj, yj = coords[j]
        total += (xi + xj) * (yi - yj)
    return abs(total) / 2


def project_ring(
    coords: Iterable[GeoPointLike],
    projector: AlbersProjector | None = None,
) -> list[PlanarPoint]:
    """Project every vertex of a geographic ring, preserving order."""
    projector = projector or default_projector()
    return [projector.project(point) for point in coords]


def geographic_area_m2(
    coords: Iterable[GeoPointLike],
    projector: AlbersProjector | None = None,
) -> float:
    """Return the area of a latitude/longitude ring in square metres.

    Args:
        coords: Ring vertices as GeoPoints or ``(lat, lng)`` pairs.
        projector: Projector to use; defaults to the Adams (1945) world
            projection.

    Raises:
        InvalidInputError: If the ring is empty or a vertex is invalid.
    """
    vertices = list(coords)
    if not vertices:
        msg = "Empty ring  --  no coordinates provided for area computation"
        raise InvalidInputError(msg, stage="area")

    area_m2 = polygon_area(project_ring(vertices, projector))
    logger.debug(
        "Area computed | vertices=%d | area=%.2f m2",
        len(vertices),
        area_m2,
    )
    return area_m2


def geographic_area_ha(
    coords: Iterable[GeoPointLike],
    projector: AlbersProjector | None = None,
) -> float:
    """Return the area of a latitude/longitude ring in hectares."""
    return geographic_area_m2(coords, projector) / SQ_METRES_PER_HECTARE
