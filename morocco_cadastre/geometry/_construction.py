"""Point and polygon constructors with ring closure normalisation."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from morocco_cadastre.models.geometry import GeoPoint, GeoPolygon


def create_geo_point(lng: float, lat: float) -> GeoPoint:
    """Build a point from ``(lng, lat)``.

    GeoJSON order: longitude first.  No range check.
    """
    return GeoPoint(coordinates=(lng, lat))


def create_geo_polygon(coordinates: Iterable[Sequence[float]]) -> GeoPolygon:
    """Build a single-ring polygon, closing the ring if necessary.

    The input is copied, never mutated.  Applying this to an already
    closed ring returns the ring unchanged, so the operation is
    idempotent.

    Args:
        coordinates: Open or closed ring as ``(lng, lat)`` pairs.

    Returns:
        A ``GeoPolygon`` with exactly one ring.
    """
    ring = [(c[0], c[1]) for c in coordinates]
    if ring:
        first, last = ring[0], ring[-1]
        if first[0] != last[0] or first[1] != last[1]:
            ring.append(first)
    return GeoPolygon(coordinates=(tuple(ring),))
