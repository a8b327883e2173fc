"""Projection configuration.

Defaults are the Adams (1945) whole-world parameters from
``albers_area.core.constants``.  Each value can be overridden from the
environment so a different Albers variant can be audited without
touching the projection formula.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if any value is out of
    its valid range or would make the cone constant degenerate.
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

from albers_area.core.constants import (
    CENTRAL_MERIDIAN_DEG,
    EARTH_RADIUS_M,
    MAX_LATITUDE,
    MIN_LATITUDE,
    ORIGIN_LATITUDE_DEG,
    STANDARD_PARALLEL_1_DEG,
    STANDARD_PARALLEL_2_DEG,
    WRAP_THRESHOLD_DEG,
)
from albers_area.core.exceptions import PermanentError

if TYPE_CHECKING:
    from pyproj import CRS

# Parallels closer than this to mirror images give a cone constant of ~0
_SYMMETRY_EPS_DEG = 1e-9


class ConfigValidationError(PermanentError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        message: Human-readable description of the valid range.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class ProjectionConfig:
    """Immutable Albers projection parameters.

    Attributes:
        earth_radius_m: Sphere radius in metres.
        central_meridian_deg: Reference longitude λ0.
        origin_latitude_deg: Reference latitude φ0.
        standard_parallel_1_deg: First standard parallel φ1.
        standard_parallel_2_deg: Second standard parallel φ2.
        wrap_threshold_deg: Longitudes strictly below this are shifted by 360º.
    """

    earth_radius_m: float = EARTH_RADIUS_M
    central_meridian_deg: float = CENTRAL_MERIDIAN_DEG
    origin_latitude_deg: float = ORIGIN_LATITUDE_DEG
    standard_parallel_1_deg: float = STANDARD_PARALLEL_1_DEG
    standard_parallel_2_deg: float = STANDARD_PARALLEL_2_DEG
    wrap_threshold_deg: float = WRAP_THRESHOLD_DEG

    @classmethod
    def from_env(cls) -> ProjectionConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a value is out of range.
            ValueError: If a numeric environment variable cannot be
                parsed (e.g. ``ALBERS_EARTH_RADIUS_M=abc``).
        """
        config = cls(
            earth_radius_m=float(os.getenv("ALBERS_EARTH_RADIUS_M", str(EARTH_RADIUS_M))),
            central_meridian_deg=float(
                os.getenv("ALBERS_CENTRAL_MERIDIAN_DEG", str(CENTRAL_MERIDIAN_DEG))
            ),
            origin_latitude_deg=float(
                os.getenv("ALBERS_ORIGIN_LATITUDE_DEG", str(ORIGIN_LATITUDE_DEG))
            ),
            standard_parallel_1_deg=float(
                os.getenv("ALBERS_STANDARD_PARALLEL_1_DEG", str(STANDARD_PARALLEL_1_DEG))
            ),
            standard_parallel_2_deg=float(
                os.getenv("ALBERS_STANDARD_PARALLEL_2_DEG", str(STANDARD_PARALLEL_2_DEG))
            ),
            wrap_threshold_deg=float(os.getenv("ALBERS_WRAP_THRESHOLD_DEG", str(WRAP_THRESHOLD_DEG))),
        )
        validate(config)
        return config

    def to_proj_string(self) -> str:
        """Return the equivalent PROJ string for a sphere of ``earth_radius_m``.

        PROJ cuts the map at ``central_meridian_deg ± 180``; the
        ``wrap_threshold_deg`` shift has no PROJ equivalent and is not
        expressed here.
        """
        return (
            f"+proj=aea +lat_0={self.origin_latitude_deg!r} "
            f"+lat_1={self.standard_parallel_1_deg!r} "
            f"+lat_2={self.standard_parallel_2_deg!r} "
            f"+lon_0={self.central_meridian_deg!r} "
            f"+R={self.earth_radius_m!r} +units=m +no_defs"
        )

    def to_crs(self) -> CRS:
        """Return a ``pyproj.CRS`` for this projection."""
        from pyproj import CRS

        return CRS.from_proj4(self.to_proj_string())


def validate(config: ProjectionConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    fields = {
        "ALBERS_EARTH_RADIUS_M": config.earth_radius_m,
        "ALBERS_CENTRAL_MERIDIAN_DEG": config.central_meridian_deg,
        "ALBERS_ORIGIN_LATITUDE_DEG": config.origin_latitude_deg,
        "ALBERS_STANDARD_PARALLEL_1_DEG": config.standard_parallel_1_deg,
        "ALBERS_STANDARD_PARALLEL_2_DEG": config.standard_parallel_2_deg,
        "ALBERS_WRAP_THRESHOLD_DEG": config.wrap_threshold_deg,
    }
    for key, value in fields.items():
        if not math.isfinite(value):
            raise ConfigValidationError(key, value, "must be a finite number")

    if config.earth_radius_m <= 0:
        raise ConfigValidationError(
            "ALBERS_EARTH_RADIUS_M",
            config.earth_radius_m,
            "must be > 0 (metres)",
        )

    for key in (
        "ALBERS_ORIGIN_LATITUDE_DEG",
        "ALBERS_STANDARD_PARALLEL_1_DEG",
        "ALBERS_STANDARD_PARALLEL_2_DEG",
    ):
        value = fields[key]
        if not MIN_LATITUDE <= value <= MAX_LATITUDE:
            raise ConfigValidationError(
                key,
                value,
                f"must be between {MIN_LATITUDE:.0f} and {MAX_LATITUDE:.0f} (degrees)",
            )

    if abs(config.standard_parallel_1_deg + config.standard_parallel_2_deg) < _SYMMETRY_EPS_DEG:
        raise ConfigValidationError(
            "ALBERS_STANDARD_PARALLEL_2_DEG",
            config.standard_parallel_2_deg,
            "must not mirror ALBERS_STANDARD_PARALLEL_1_DEG across the equator "
            "(cone constant would be 0)",
        )


DEFAULT_CONFIG = ProjectionConfig()
