"""Area, centroid and bounding box of a polygon's first ring.

All three read ``coordinates[0]`` only and ignore further rings.  A
missing or degenerate ring yields a defined zero result (0 m², a point
at ``(0, 0)``, an all-zero box) instead of an error, so callers that
need to tell "degenerate" from "genuinely zero" must run
``is_valid_geo_polygon`` first.

Area limitation: vertices are scaled to metres with two fixed factors
tuned for ~32°N and then fed to the planar shoelace formula.  This is
an approximation for Moroccan parcels only, not a geodesic area.  It
does not use the Lambert projection in ``morocco_cadastre.projection``.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence

from morocco_cadastre.core.constants import (
    METRES_PER_DEGREE_LAT,
    METRES_PER_DEGREE_LNG,
    MIN_RING_VERTICES,
)
from morocco_cadastre.models.geometry import BoundingBox, GeoPoint, GeoPolygon

PolygonLike = GeoPolygon | Mapping[str, object]


def _first_ring(polygon: PolygonLike) -> Sequence[Sequence[float]]:
    """Return the first ring of a polygon or polygon-shaped dict, or ``()``."""
    if isinstance(polygon, Mapping):
        rings = polygon.get("coordinates") or ()
    else:
        rings = polygon.coordinates
    if not rings:
        return ()
    return rings[0] or ()  # type: ignore[index,return-value]


def calculate_polygon_area(polygon: PolygonLike) -> float:
    """Approximate area of the first ring in square metres.

    Returns 0.0 when the ring is missing or has fewer than four
    positions.  The ring is assumed closed, so the closing edge is
    already one of the consecutive pairs.
    """
    ring = _first_ring(polygon)
    if len(ring) < MIN_RING_VERTICES:
        return 0.0

    total = 0.0
    for (x1, y1), (x2, y2) in zip(ring, ring[1:]):
        x1m = x1 * METRES_PER_DEGREE_LNG
        y1m = y1 * METRES_PER_DEGREE_LAT
        x2m = x2 * METRES_PER_DEGREE_LNG
        y2m = y2 * METRES_PER_DEGREE_LAT
        total += x1m * y2m - x2m * y1m

    return abs(total) / 2


def calculate_centroid(polygon: PolygonLike) -> GeoPoint:
    """Vertex-mean centroid of the first ring, excluding the closing vertex."""
    ring = _first_ring(polygon)
    n = len(ring) - 1
    if n <= 0:
        return GeoPoint(coordinates=(0, 0))

    sum_lng = 0.0
    sum_lat = 0.0
    for lng, lat in ring[:n]:
        sum_lng += lng
        sum_lat += lat

    return GeoPoint(coordinates=(sum_lng / n, sum_lat / n))


def calculate_bounding_box(polygon: PolygonLike) -> BoundingBox:
    """Single-pass min/max extent of the first ring."""
    ring = _first_ring(polygon)
    if not ring:
        return BoundingBox(0, 0, 0, 0)

    min_lng = math.inf
    max_lng = -math.inf
    min_lat = math.inf
    max_lat = -math.inf

    for lng, lat in ring:
        if lng < min_lng:
            min_lng = lng
        if lng > max_lng:
            max_lng = lng
        if lat < min_lat:
            min_lat = lat
        if lat > max_lat:
            max_lat = lat

    return BoundingBox(min_lng=min_lng, max_lng=max_lng, min_lat=min_lat, max_lat=max_lat)
