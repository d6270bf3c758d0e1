"""Validation helpers for geometry payloads and field captures.

Responsibilities:
- Structural guards for untrusted point / polygon payloads
- Morocco bounding-box membership
- GPS capture quality gating (range, accuracy, region)

None of these raise: guards answer with a boolean and capture gating
answers with a ``GPSCaptureResult``.
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from collections.abc import Mapping
from numbers import Real
from typing import TYPE_CHECKING

from morocco_cadastre.core.constants import (
    GPS_REJECT_ACCURACY_M,
    GPS_WARN_ACCURACY_M,
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
    MIN_RING_VERTICES,
    MOROCCO_MAX_LAT,
    MOROCCO_MAX_LNG,
    MOROCCO_MIN_LAT,
    MOROCCO_MIN_LNG,
)
from morocco_cadastre.models.capture import GPSCaptureResult
from morocco_cadastre.models.geometry import GeoPoint, GeoPolygon

if TYPE_CHECKING:
    from morocco_cadastre.core.config import CadastreConfig

logger = logging.getLogger("morocco_cadastre.geometry")

INVALID_RANGE_WARNING = "Invalid coordinate range"
OUTSIDE_MOROCCO_WARNING = "Coordinates outside Morocco bounds"


# ---------------------------------------------------------------------------
# Structural guards
# ---------------------------------------------------------------------------


def _is_number(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _is_array(value: object) -> bool:
    return isinstance(value, (list, tuple))


def _is_position(value: object) -> bool:
    return (
        _is_array(value)
        and len(value) == 2  # type: ignore[arg-type]
        and _is_number(value[0])  # type: ignore[index]
        and _is_number(value[1])  # type: ignore[index]
    )


def is_valid_geo_point(value: object) -> bool:
    """Return whether ``value`` is a well-formed GeoJSON-style point.

    Checks the ``"Point"`` tag and a two-number ``coordinates`` array.
    No range check is performed.
    """
    if isinstance(value, GeoPoint):
        value = value.to_dict()
    if not isinstance(value, Mapping):
        return False
    return value.get("type") == "Point" and _is_position(value.get("coordinates"))


def is_valid_geo_polygon(value: object) -> bool:
    """Return whether ``value`` is a well-formed GeoJSON-style polygon.

    Every ring must hold at least four two-number positions and its first
    position must equal its last.  The first failing ring rejects the
    whole polygon.
    """
    if isinstance(value, GeoPolygon):
        value = value.to_dict()
    if not isinstance(value, Mapping):
        return False
    rings = value.get("coordinates")
    if value.get("type") != "Polygon" or not _is_array(rings):
        return False
    if len(rings) == 0:  # type: ignore[arg-type]
        return False

    for ring in rings:  # type: ignore[union-attr]
        if not _is_array(ring) or len(ring) < MIN_RING_VERTICES:
            return False
        if not all(_is_position(coord) for coord in ring):
            return False
        first, last = ring[0], ring[-1]
        if first[0] != last[0] or first[1] != last[1]:
            return False

    return True


# ---------------------------------------------------------------------------
# Coordinate validation
# ---------------------------------------------------------------------------


def is_within_morocco(lat: float, lng: float) -> bool:
    """Return whether ``(lat, lng)`` lies inside Morocco's bounding box (inclusive)."""
    return MOROCCO_MIN_LAT <= lat <= MOROCCO_MAX_LAT and MOROCCO_MIN_LNG <= lng <= MOROCCO_MAX_LNG


def _one_decimal(value: float) -> str:
    """Render with one decimal, rounding exact ties upwards (12.25 -> 12.3)."""
    return str(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def validate_gps_capture(
    lat: float,
    lng: float,
    accuracy: float,
    *,
    reject_accuracy_m: float = GPS_REJECT_ACCURACY_M,
    warn_accuracy_m: float = GPS_WARN_ACCURACY_M,
) -> GPSCaptureResult:
    """Gate a field GPS reading before it enters the system of record.

    Note the ``(lat, lng)`` argument order, unlike ``create_geo_point``.

    Args:
        lat: Latitude in degrees.
        lng: Longitude in degrees.
        accuracy: Reported horizontal accuracy in metres.
        reject_accuracy_m: Readings less accurate than this are rejected.
        warn_accuracy_m: Readings less accurate than this carry a warning.

    Returns:
        An invalid result with a single reason if the coordinates are out of
        WGS 84 range or the accuracy is too low; otherwise a valid result
        with any advisory warnings.
    """
    if not (MIN_LATITUDE <= lat <= MAX_LATITUDE and MIN_LONGITUDE <= lng <= MAX_LONGITUDE):
        logger.warning(
            "GPS capture rejected | reason=range | lat=%s | lng=%s",
            lat,
            lng,
        )
        return GPSCaptureResult(valid=False, warnings=(INVALID_RANGE_WARNING,))

    if accuracy > reject_accuracy_m:
        logger.warning(
            "GPS capture rejected | reason=accuracy | accuracy=%.1f m | limit=%g m",
            accuracy,
            reject_accuracy_m,
        )
        return GPSCaptureResult(
            valid=False,
            warnings=(f"GPS accuracy too low (>{reject_accuracy_m:g}m)",),
        )

    warnings: list[str] = []
    if not is_within_morocco(lat, lng):
        warnings.append(OUTSIDE_MOROCCO_WARNING)
    if accuracy > warn_accuracy_m:
        warnings.append(f"GPS accuracy warning: {_one_decimal(accuracy)}m")

    logger.debug(
        "GPS capture accepted | lat=%.6f | lng=%.6f | accuracy=%.1f m | warnings=%d",
        lat,
        lng,
        accuracy,
        len(warnings),
    )
    return GPSCaptureResult(valid=True, warnings=tuple(warnings))


def validate_gps_capture_with_config(
    lat: float,
    lng: float,
    accuracy: float,
    config: CadastreConfig,
) -> GPSCaptureResult:
    """Gate a capture using the thresholds from a loaded ``CadastreConfig``."""
    return validate_gps_capture(
        lat,
        lng,
        accuracy,
        reject_accuracy_m=config.gps_reject_accuracy_m,
        warn_accuracy_m=config.gps_warn_accuracy_m,
    )
