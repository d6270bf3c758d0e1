"""Data models and schemas.

Defines the value types passed in and out of the geometry functions:
- GeoPoint / GeoPolygon: GeoJSON-style geometries
- BoundingBox: extent of a polygon's first ring
- GPSCaptureResult: outcome of GPS capture gating
- ParcelGeometryRecord (``models.parcel``): geospatial columns of a property row
"""

from morocco_cadastre.models.capture import GPSCaptureResult
from morocco_cadastre.models.geometry import (
    BoundingBox,
    Coordinate,
    GeoPoint,
    GeoPolygon,
    Ring,
)

__all__ = [
    "BoundingBox",
    "Coordinate",
    "GPSCaptureResult",
    "GeoPoint",
    "GeoPolygon",
    "Ring",
]
