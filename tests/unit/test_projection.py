"""Tests for WGS 84 <-> Morocco Lambert projection.

Covers:
- Projection lands inside the Lambert Nord Maroc false-origin frame
- Round trip back to WGS 84
- Non-finite output raises ProjectionError
"""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from morocco_cadastre.core.exceptions import ProjectionError
from morocco_cadastre.geometry import create_geo_point
from morocco_cadastre.projection import from_lambert, to_lambert

RABAT = create_geo_point(-6.8498, 33.9716)


class TestToLambert:
    def test_rabat_in_metres(self) -> None:
        x, y = to_lambert(RABAT)
        # Nord Maroc false easting / northing are 500 000 m / 300 000 m
        assert 300_000 < x < 600_000
        assert 300_000 < y < 500_000

    def test_round_trip(self) -> None:
        back = from_lambert(*to_lambert(RABAT))
        assert back.coordinates == pytest.approx(RABAT.coordinates, abs=1e-6)


class TestNonFiniteOutput:
    def test_infinite_result_raises(self) -> None:
        transformer = MagicMock()
        transformer.transform.return_value = (float("inf"), float("inf"))
        with (
            patch("morocco_cadastre.projection._transformer", return_value=transformer),
            pytest.raises(ProjectionError, match="non-finite"),
        ):
            to_lambert(RABAT)

    def test_from_lambert_nan_raises(self) -> None:
        transformer = MagicMock()
        transformer.transform.return_value = (float("nan"), 33.0)
        with (
            patch("morocco_cadastre.projection._transformer", return_value=transformer),
            pytest.raises(ProjectionError),
        ):
            from_lambert(0.0, 0.0)
