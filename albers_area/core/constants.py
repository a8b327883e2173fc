"""Projection constants: single source of truth.

Parameters of the Albers equal-area conic projection proposed for a
whole-world map centred on the north pole, from O. S. Adams,
*General Theory of Equivalent Projections* (1945), p. 37:

    "The north pole should be taken as the center and the separation
    should be made at 170º west longitude which passes through Bering
    Strait [...] it does not produce any deformation along the parallel
    of 18º25' south."

Formulas follow https://en.wikipedia.org/wiki/Albers_projection.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Sphere
# ---------------------------------------------------------------------------

EARTH_RADIUS_M: float = 6_378_137.0
"""WGS 84 semi-major axis, used as the sphere radius."""

# ---------------------------------------------------------------------------
# Projection parameters (degrees)
# ---------------------------------------------------------------------------

CENTRAL_MERIDIAN_DEG: float = -10.0
"""Reference longitude λ0."""

ORIGIN_LATITUDE_DEG: float = 90.0
"""Reference latitude φ0: the north pole is the projection centre."""

STANDARD_PARALLEL_1_DEG: float = 90.0
"""First standard parallel φ1."""

STANDARD_PARALLEL_2_DEG: float = -(18 + 25 / 60)
"""Second standard parallel φ2: 18º25' south, the parallel of no distortion."""

WRAP_THRESHOLD_DEG: float = -169.0
"""Longitudes strictly below this are shifted by +360º.

The map is cut at 170º west; -169 (not -170) was found experimentally to
keep the Bering Strait seam clean.
"""

# ---------------------------------------------------------------------------
# Validation bounds
# ---------------------------------------------------------------------------

MIN_LATITUDE: float = -90.0
MAX_LATITUDE: float = 90.0

# ---------------------------------------------------------------------------
# Units
# ---------------------------------------------------------------------------

SQ_METRES_PER_HECTARE: float = 10_000.0
