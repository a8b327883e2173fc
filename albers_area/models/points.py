"""Value types for geographic and planar coordinates.

A GeoPoint is the input of the projector; a PlanarPoint is its output
and the vertex type of the polygons measured by the area calculator.
Both are immutable and compare by value.

Plain pairs are accepted wherever a point is expected: ``(lat, lng)``
for geographic points and ``(x, y)`` for planar points.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeAlias

from albers_area.core.constants import MAX_LATITUDE, MIN_LATITUDE
from albers_area.core.exceptions import InvalidInputError


@dataclass(frozen=True, slots=True)
class GeoPoint:
    """A latitude/longitude pair in decimal degrees.

    Longitude is deliberately not range-checked: values past +180º are
    how the projector represents longitudes west of its cut.

    Attributes:
        lat: Latitude in degrees, within [-90, 90].
        lng: Longitude in degrees.

    Raises:
        InvalidInputError: If either value is not finite or the latitude
            is out of range.
    """

    lat: float
    lng: float

    def __post_init__(self) -> None:
        validate_geo_coordinate(self.lat, self.lng)

    def to_dict(self) -> dict[str, float]:
        return {"lat": self.lat, "lng": self.lng}

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> GeoPoint:
        """Deserialise from a ``{"lat": ..., "lng": ...}`` mapping.

        Raises:
            InvalidInputError: If a key is missing or a value is invalid.
        """
        try:
            return cls(lat=float(data["lat"]), lng=float(data["lng"]))  # type: ignore[arg-type]
        except (KeyError, TypeError, ValueError) as exc:
            msg = f"Invalid GeoPoint payload {data!r}: {exc}"
            raise InvalidInputError(msg, stage="projection") from exc


@dataclass(frozen=True, slots=True)
class PlanarPoint:
    """A projected point in metres. X grows east of the central meridian."""

    x: float
    y: float

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> PlanarPoint:
        try:
            return cls(x=float(data["x"]), y=float(data["y"]))  # type: ignore[arg-type]
        except (KeyError, TypeError, ValueError) as exc:
            msg = f"Invalid PlanarPoint payload {data!r}: {exc}"
            raise InvalidInputError(msg, stage="area") from exc


GeoPointLike: TypeAlias = GeoPoint | tuple[float, float]
PlanarPointLike: TypeAlias = PlanarPoint | tuple[float, float]
Polygon: TypeAlias = Sequence[PlanarPointLike]


def validate_geo_coordinate(lat: float, lng: float) -> None:
    """Validate a single geographic coordinate.

    Raises:
        InvalidInputError: If the latitude is outside [-90, 90] or either
            value is NaN or infinite.
    """
    if not (math.isfinite(lat) and math.isfinite(lng)):
        msg = f"Coordinate ({lat}, {lng}) is not finite"
        raise InvalidInputError(msg, stage="projection")
    if not MIN_LATITUDE <= lat <= MAX_LATITUDE:
        msg = f"Latitude {lat} is outside [{MIN_LATITUDE:.0f}, {MAX_LATITUDE:.0f}]"
        raise InvalidInputError(msg, stage="projection")


def as_geo_point(point: GeoPointLike) -> GeoPoint:
    """Coerce a ``(lat, lng)`` pair into a validated GeoPoint."""
    if isinstance(point, GeoPoint):
        return point
    try:
        lat, lng = point
        lat, lng = float(lat), float(lng)
    except (TypeError, ValueError) as exc:
        msg = f"Invalid GeoPoint pair {point!r}: {exc}"
        raise InvalidInputError(msg, stage="projection") from exc
    return GeoPoint(lat=lat, lng=lng)


def as_xy(point: PlanarPointLike) -> tuple[float, float]:
    """Return ``(x, y)`` for a PlanarPoint or a plain pair."""
    if isinstance(point, PlanarPoint):
        return (point.x, point.y)
    try:
        x, y = point
        return (float(x), float(y))
    except (TypeError, ValueError) as exc:
        msg = f"Invalid PlanarPoint pair {point!r}: {exc}"
        raise InvalidInputError(msg, stage="area") from exc
