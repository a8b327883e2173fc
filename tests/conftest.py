"""Shared pytest fixtures for the albers_area test suite."""

from __future__ import annotations

import pytest

from albers_area.core.config import ProjectionConfig
from albers_area.geometry.projection import AlbersProjector

# ---------------------------------------------------------------------------
# Reference rings, (lat, lng) degrees
# ---------------------------------------------------------------------------

# Yakima Valley orchard  --  roughly rectangular, ~100 ha at 46.6N
YAKIMA_RING = [
    (46.6040, -120.5210),
    (46.6130, -120.5210),
    (46.6130, -120.5080),
    (46.6040, -120.5080),
]

# 1 x 1 degree box on the equator, east of the central meridian
EQUATOR_BOX = [
    (0.0, -10.0),
    (1.0, -10.0),
    (1.0, -9.0),
    (0.0, -9.0),
]


@pytest.fixture()
def projector() -> AlbersProjector:
    """A projector built from the default world parameters."""
    return AlbersProjector(ProjectionConfig())


@pytest.fixture()
def yakima_ring() -> list[tuple[float, float]]:
    return list(YAKIMA_RING)


@pytest.fixture()
def equator_box() -> list[tuple[float, float]]:
    return list(EQUATOR_BOX)
