"""Projection between WGS 84 and Morocco Lambert Zone 1 (EPSG:26191).

Cadastral surveys are drawn in Lambert Conformal Conic coordinates
(metres), while captures and storage use WGS 84 degrees.  These helpers
move single positions between the two.

``calculate_polygon_area`` does not go through this module; its area
remains the fixed-factor approximation.
"""

from __future__ import annotations

import logging
import math
from functools import lru_cache
from typing import TYPE_CHECKING

from morocco_cadastre.core.constants import SRID_MOROCCO_LAMBERT, SRID_WGS84
from morocco_cadastre.core.exceptions import ProjectionError
from morocco_cadastre.models.geometry import GeoPoint

if TYPE_CHECKING:
    from pyproj import Transformer

logger = logging.getLogger("morocco_cadastre.projection")


@lru_cache(maxsize=4)
def _transformer(source_srid: int, target_srid: int) -> Transformer:
    from pyproj import Transformer

    logger.debug("Building transformer | EPSG:%d -> EPSG:%d", source_srid, target_srid)
    return Transformer.from_crs(f"EPSG:{source_srid}", f"EPSG:{target_srid}", always_xy=True)


def _checked(x: float, y: float, context: str) -> tuple[float, float]:
    if not (math.isfinite(x) and math.isfinite(y)):
        msg = f"Projection produced non-finite output ({x}, {y}) for {context}"
        raise ProjectionError(msg)
    return (x, y)


def to_lambert(point: GeoPoint) -> tuple[float, float]:
    """Project a WGS 84 point to Lambert ``(easting, northing)`` in metres.

    Raises:
        ProjectionError: If the point cannot be represented in the zone.
    """
    lng, lat = point.coordinates
    x, y = _transformer(SRID_WGS84, SRID_MOROCCO_LAMBERT).transform(lng, lat)
    return _checked(x, y, f"point ({lng}, {lat})")


def from_lambert(easting: float, northing: float) -> GeoPoint:
    """Unproject Lambert metres back to a WGS 84 point.

    Raises:
        ProjectionError: If the coordinates cannot be unprojected.
    """
    lng, lat = _transformer(SRID_MOROCCO_LAMBERT, SRID_WGS84).transform(easting, northing)
    return GeoPoint(coordinates=_checked(lng, lat, f"Lambert ({easting}, {northing})"))
