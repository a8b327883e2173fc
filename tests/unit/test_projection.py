"""Unit tests for the Albers equal-area projector.

Covers:
- Reference values on the central meridian
- Pole singularity and finiteness over the whole globe
- Longitude shift west of the -169º cut
- Determinism and precomputed parameters
- Agreement with PROJ for the same parameters
- Input validation
"""

from __future__ import annotations

import math

import pytest
from pyproj import Proj

from albers_area.core.config import ProjectionConfig
from albers_area.core.constants import EARTH_RADIUS_M
from albers_area.core.exceptions import InvalidInputError
from albers_area.geometry.projection import (
    AlbersProjector,
    default_projector,
    degrees_to_radians,
    project,
)
from albers_area.models.points import GeoPoint, PlanarPoint

# project((0, -10)): theta = 0, so y = -R * sqrt(2 / n)
EQUATOR_ON_MERIDIAN_Y = -15_423_111.291839052
# project((30, 10)), reference run
LAT30_LNG10_X = 1_298_989.874288155
LAT30_LNG10_Y = -10_828_148.792232378
# Cone constant n = (1 + sin(-18º25')) / 2
CONE_CONSTANT = 0.34203747978399424


class TestDegreesToRadians:
    def test_right_angle(self) -> None:
        assert degrees_to_radians(90) == pytest.approx(math.pi / 2)

    def test_negative(self) -> None:
        assert degrees_to_radians(-180) == pytest.approx(-math.pi)

    def test_matches_math_radians(self) -> None:
        assert degrees_to_radians(-18.25) == pytest.approx(math.radians(-18.25))


class TestReferenceValues:
    """Hardcoded values from a reference run, within 1e-3 m."""

    def test_equator_on_central_meridian(self) -> None:
        point = project((0.0, -10.0))
        assert point.x == pytest.approx(0.0, abs=1e-3)
        assert point.y == pytest.approx(EQUATOR_ON_MERIDIAN_Y, abs=1e-3)

    def test_equator_on_central_meridian_matches_formula(self) -> None:
        point = project((0.0, -10.0))
        assert point.y == pytest.approx(-EARTH_RADIUS_M * math.sqrt(2 / CONE_CONSTANT), abs=1e-3)

    def test_mid_latitude(self) -> None:
        point = project((30.0, 10.0))
        assert point.x == pytest.approx(LAT30_LNG10_X, abs=1e-3)
        assert point.y == pytest.approx(LAT30_LNG10_Y, abs=1e-3)

    def test_accepts_geopoint(self) -> None:
        assert project(GeoPoint(lat=30.0, lng=10.0)) == project((30.0, 10.0))

    def test_returns_planar_point(self) -> None:
        assert isinstance(project((10.0, 20.0)), PlanarPoint)

    def test_east_is_positive_x(self) -> None:
        assert project((45.0, 0.0)).x > 0
        assert project((45.0, -20.0)).x < 0


class TestPoleAndFiniteness:
    def test_north_pole_is_origin(self) -> None:
        """The pole is a singular point: every longitude maps to (0, 0)."""
        for lng in (-180.0, -10.0, 0.0, 95.5, 180.0):
            point = project((90.0, lng))
            assert point.x == pytest.approx(0.0, abs=1e-6)
            assert point.y == pytest.approx(0.0, abs=1e-6)

    def test_south_pole_is_finite(self) -> None:
        point = project((-90.0, 0.0))
        assert math.isfinite(point.x)
        assert math.isfinite(point.y)

    def test_whole_globe_is_finite(self) -> None:
        for lat in range(-90, 91, 15):
            for lng in range(-180, 181, 20):
                point = project((float(lat), float(lng)))
                assert math.isfinite(point.x), (lat, lng)
                assert math.isfinite(point.y), (lat, lng)

    def test_origin_radius_is_zero(self) -> None:
        assert default_projector().rho0 == 0.0


class TestLongitudeWrap:
    """Longitudes west of -169º continue past +180º."""

    @pytest.mark.parametrize("lat", [-60.0, -18.0, 0.0, 45.0, 66.5, 89.0])
    def test_shifted_longitude_matches_plus_360(self, lat: float) -> None:
        wrapped = project((lat, -169.0001))
        continued = project((lat, -169.0001 + 360))
        assert wrapped.x == pytest.approx(continued.x, abs=1e-6)
        assert wrapped.y == pytest.approx(continued.y, abs=1e-6)

    def test_threshold_is_strict(self) -> None:
        """Exactly -169º is not shifted."""
        at_threshold = project((50.0, -169.0))
        shifted = project((50.0, 191.0))
        assert at_threshold.x != pytest.approx(shifted.x, abs=1.0)

    def test_seam_between_sides_of_threshold(self) -> None:
        """Either side of -169º lands on opposite edges of the map cut."""
        east_side = project((60.0, -168.9999))
        west_side = project((60.0, -169.0001))
        distance = math.hypot(east_side.x - west_side.x, east_side.y - west_side.y)
        assert distance > 1_000_000

    def test_minus_170_continues_from_plus_180(self) -> None:
        """-170º sits just beyond +180º, next to 179.9º."""
        beyond = project((20.0, -170.0))
        before = project((20.0, 179.9))
        distance = math.hypot(beyond.x - before.x, beyond.y - before.y)
        assert distance < 1_500_000

    def test_custom_threshold(self) -> None:
        projector = AlbersProjector(ProjectionConfig(wrap_threshold_deg=-180.0))
        assert projector.project((50.0, -175.0)) != projector.project((50.0, 185.0))
        assert project((50.0, -175.0)) == project((50.0, 185.0))


class TestDeterminism:
    def test_repeat_calls_are_bit_identical(self) -> None:
        first = project((12.345678, -98.765432))
        second = project((12.345678, -98.765432))
        assert first.x == second.x
        assert first.y == second.y

    def test_instances_agree(self, projector: AlbersProjector) -> None:
        assert projector.project((-33.9, 18.4)) == project((-33.9, 18.4))


class TestPrecomputedParameters:
    def test_cone_constant(self, projector: AlbersProjector) -> None:
        assert projector.n == pytest.approx(CONE_CONSTANT)

    def test_c_is_twice_n_for_polar_parallel(self, projector: AlbersProjector) -> None:
        assert projector.c == pytest.approx(2 * projector.n)

    def test_central_meridian_radians(self, projector: AlbersProjector) -> None:
        assert projector.lambda0 == pytest.approx(math.radians(-10.0))

    def test_repr_mentions_config(self, projector: AlbersProjector) -> None:
        assert "ProjectionConfig" in repr(projector)


class TestAgreementWithProj:
    """PROJ's ``aea`` on a sphere implements the same formula.

    Only longitudes within 180º of the central meridian are compared;
    PROJ wraps the rest differently.
    """

    @pytest.mark.parametrize(
        ("lat", "lng"),
        [
            (0.0, -10.0),
            (46.6, -120.5),
            (-33.9, 18.4),
            (5.3, 117.9),
            (-60.0, 160.0),
            (75.0, -150.0),
        ],
    )
    def test_matches_pyproj(self, lat: float, lng: float) -> None:
        proj = Proj(ProjectionConfig().to_proj_string())
        expected_x, expected_y = proj(lng, lat)
        point = project((lat, lng))
        assert point.x == pytest.approx(expected_x, rel=1e-9, abs=1e-3)
        assert point.y == pytest.approx(expected_y, rel=1e-9, abs=1e-3)


class TestInvalidInput:
    def test_latitude_above_90(self) -> None:
        with pytest.raises(InvalidInputError, match="Latitude"):
            project((90.5, 0.0))

    def test_latitude_below_minus_90(self) -> None:
        with pytest.raises(InvalidInputError, match="Latitude"):
            project((-91.0, 0.0))

    def test_nan_rejected(self) -> None:
        with pytest.raises(InvalidInputError, match="not finite"):
            project((float("nan"), 0.0))

    def test_infinite_longitude_rejected(self) -> None:
        with pytest.raises(InvalidInputError, match="not finite"):
            project((0.0, float("inf")))

    def test_non_numeric_pair_rejected(self) -> None:
        with pytest.raises(InvalidInputError, match="Invalid GeoPoint pair"):
            project(("north", 0.0))  # type: ignore[arg-type]

    def test_error_is_tagged_with_stage(self) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            project((100.0, 0.0))
        assert exc_info.value.stage == "projection"
        assert exc_info.value.code == "INVALID_INPUT"
