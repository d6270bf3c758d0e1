"""Conversion between GeoJSON-style geometries and PostGIS geography strings.

The spatial database accepts EWKT text (``SRID=4326;POINT(lng lat)``)
in its geography columns.  The SRID tag defaults to 4326; the
``*_with_config`` variants take it from ``CadastreConfig.storage_srid``.
Only points can be read back: there is no polygon decoder.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import TYPE_CHECKING

from morocco_cadastre.core.constants import SRID_WGS84
from morocco_cadastre.models.geometry import GeoPoint

if TYPE_CHECKING:
    from morocco_cadastre.core.config import CadastreConfig
    from morocco_cadastre.models.geometry import GeoPolygon

_NUMBER = r"[-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?"
_POINT_PATTERN = re.compile(rf"POINT\(({_NUMBER})\s+({_NUMBER})\)", re.IGNORECASE)


def _format_number(value: float) -> str:
    """Render a coordinate the way stored geography strings were written.

    Uses the shortest digits that round-trip, written out in plain decimal
    for magnitudes in ``[1e-6, 1e21)`` and in exponent form otherwise
    (``1e-7``, ``1.5e+21``).  Integral values drop the fraction
    (``10.0`` -> ``"10"``), negative zero prints as ``"0"`` and non-finite
    values print as ``NaN`` / ``Infinity`` / ``-Infinity``.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).as_tuple()
    digits = "".join(map(str, digit_tuple)).rstrip("0")
    exponent += len(digit_tuple) - len(digits)
    # value == 0.<digits> * 10**point
    point = exponent + len(digits)

    if len(digits) <= point <= 21:
        return f"{sign}{digits}{'0' * (point - len(digits))}"
    if 0 < point <= 21:
        return f"{sign}{digits[:point]}.{digits[point:]}"
    if -6 < point <= 0:
        return f"{sign}0.{'0' * -point}{digits}"

    power = point - 1
    mantissa = digits if len(digits) == 1 else f"{digits[0]}.{digits[1:]}"
    return f"{sign}{mantissa}e{'+' if power >= 0 else '-'}{abs(power)}"


def _format_position(coord: tuple[float, float] | list[float]) -> str:
    return f"{_format_number(coord[0])} {_format_number(coord[1])}"


def geo_point_to_postgis(point: GeoPoint, *, srid: int = SRID_WGS84) -> str:
    """Encode a point as ``SRID=4326;POINT(<lng> <lat>)``."""
    return f"SRID={srid};POINT({_format_position(point.coordinates)})"


def geo_polygon_to_postgis(polygon: GeoPolygon, *, srid: int = SRID_WGS84) -> str:
    """Encode a polygon as ``SRID=4326;POLYGON((<ring0>),(<ring1>),...)``.

    Each ring is its ``"lng lat"`` pairs joined by commas, in order.  All
    rings are written, not only the first.
    """
    rings = [",".join(_format_position(coord) for coord in ring) for ring in polygon.coordinates]
    return f"SRID={srid};POLYGON(({'),('.join(rings)}))"


def geo_point_to_postgis_with_config(point: GeoPoint, config: CadastreConfig) -> str:
    """Encode a point tagged with the configured storage SRID."""
    return geo_point_to_postgis(point, srid=config.storage_srid)


def geo_polygon_to_postgis_with_config(polygon: GeoPolygon, config: CadastreConfig) -> str:
    """Encode a polygon tagged with the configured storage SRID."""
    return geo_polygon_to_postgis(polygon, srid=config.storage_srid)


def postgis_point_to_geo(text: str) -> GeoPoint | None:
    """Decode the first ``POINT(<lng> <lat>)`` found in ``text``.

    The keyword is case-insensitive and any ``SRID=...;`` prefix is
    ignored.  Returns ``None`` when no point is found.
    """
    match = _POINT_PATTERN.search(text)
    if match is None:
        return None
    return GeoPoint(coordinates=(float(match.group(1)), float(match.group(2))))
