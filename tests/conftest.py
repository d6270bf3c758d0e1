"""Shared pytest fixtures for the cadastre test suite."""

import pytest

from morocco_cadastre.geometry import create_geo_polygon
from morocco_cadastre.models.geometry import GeoPolygon

# ---------------------------------------------------------------------------
# Reference rings
# ---------------------------------------------------------------------------

# Unit-free square with corners on whole degrees
SQUARE_RING = [(0.0, 0.0), (0.0, 2.0), (2.0, 2.0), (2.0, 0.0), (0.0, 0.0)]

# Small parcel in Agdal, Rabat (~0.0010 x 0.0008 deg)
RABAT_RING = [
    (-6.8500, 33.9900),
    (-6.8500, 33.9908),
    (-6.8490, 33.9908),
    (-6.8490, 33.9900),
    (-6.8500, 33.9900),
]


@pytest.fixture()
def square_polygon() -> GeoPolygon:
    """Closed 2x2 degree square at the origin."""
    return create_geo_polygon(SQUARE_RING)


@pytest.fixture()
def rabat_polygon() -> GeoPolygon:
    """Small rectangular parcel in Rabat."""
    return create_geo_polygon(RABAT_RING)


@pytest.fixture()
def square_payload() -> dict[str, object]:
    """The square as an untyped payload, as read from storage."""
    return {"type": "Polygon", "coordinates": [[list(c) for c in SQUARE_RING]]}
