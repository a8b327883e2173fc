"""Albers equal-area conic projection.

Maps WGS 84 latitude/longitude (degrees) to planar x/y (metres) on a
sphere.  The default parameters are Adams' (1945) whole-world map:
north pole at the centre, standard parallels at 90º N and 18º25' S,
central meridian 10º W.

Formulas (https://en.wikipedia.org/wiki/Albers_projection)::

    n  = (sin φ1 + sin φ2) / 2
    C  = cos² φ1 + 2 n sin φ1
    ρ  = sqrt(C - 2 n sin φ) / n
    ρ0 = sqrt(C - 2 n sin φ0) / n
    θ  = n (λ - λ0)
    x  = ρ sin θ
    y  = ρ0 - ρ cos θ

The north pole (φ = 90º) is a singular point of the projection and maps
to the origin.
"""

from __future__ import annotations

import math

from albers_area.core.config import DEFAULT_CONFIG, ProjectionConfig
from albers_area.models.points import GeoPointLike, PlanarPoint, as_geo_point


def degrees_to_radians(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * math.pi / 180


class AlbersProjector:
    """Projects geographic coordinates with a fixed set of Albers parameters.

    Quantities that depend only on the configuration (``n``, ``C``,
    ``ρ0`` and λ0 in radians) are derived once here and reused by
    every call to :meth:`project`.  Instances are never modified after
    construction and safe to share between threads.
    """

    __slots__ = ("config", "n", "c", "rho0", "lambda0")

    def __init__(self, config: ProjectionConfig = DEFAULT_CONFIG) -> None:
        self.config = config

        phi0 = degrees_to_radians(config.origin_latitude_deg)
        phi1 = degrees_to_radians(config.standard_parallel_1_deg)
        phi2 = degrees_to_radians(config.standard_parallel_2_deg)

        self.lambda0 = degrees_to_radians(config.central_meridian_deg)
        self.n = (math.sin(phi1) + math.sin(phi2)) / 2
        self.c = math.cos(phi1) ** 2 + 2 * self.n * math.sin(phi1)
        # Evaluated through the formula: 0 for the default pole-centred origin
        self.rho0 = self._rho(phi0)

    def project(self, point: GeoPointLike) -> PlanarPoint:
        """Return the planar position of ``point`` in metres.

        Args:
            point: A GeoPoint or a ``(lat, lng)`` pair in degrees.

        Returns:
            The projected ``PlanarPoint``.

        Raises:
            InvalidInputError: If the coordinate is not finite or the
                latitude is outside [-90, 90].
        """
        geo = as_geo_point(point)

        lng = geo.lng
        # Longitudes past the cut continue beyond +180º instead of wrapping
        if lng < self.config.wrap_threshold_deg:
            lng = 360 + lng

        lam = degrees_to_radians(lng)
        phi = degrees_to_radians(geo.lat)

        theta = self.n * (lam - self.lambda0)
        rho = self._rho(phi)

        radius = self.config.earth_radius_m
        x = rho * math.sin(theta)
        y = self.rho0 - rho * math.cos(theta)
        return PlanarPoint(x=x * radius, y=y * radius)

    def _rho(self, phi: float) -> float:
        # Never negative in exact arithmetic; clamp rounding noise
        radicand = max(self.c - 2 * self.n * math.sin(phi), 0.0)
        return math.sqrt(radicand) / self.n

    def __repr__(self) -> str:
        return f"AlbersProjector(config={self.config!r})"


_DEFAULT_PROJECTOR = AlbersProjector()


def default_projector() -> AlbersProjector:
    """Return the shared projector built from the Adams (1945) parameters."""
    return _DEFAULT_PROJECTOR


def project(point: GeoPointLike) -> PlanarPoint:
    """Project ``point`` with the default Adams (1945) world parameters.

    Example:
        >>> p = project((0.0, -10.0))
        >>> round(p.x, 3), round(p.y, 3)
        (0.0, -15423111.292)
    """
    return _DEFAULT_PROJECTOR.project(point)
