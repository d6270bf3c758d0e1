"""Pydantic record for the geospatial columns of a property row.

Bundles everything the data-store collaborator writes alongside a
property's boundary: surface, centroid, extent, cadastral region and the
EWKT strings for the geography columns.

All coordinates are WGS 84 (EPSG:4326).  ``surface_sqm`` is the
fixed-factor approximation from ``calculate_polygon_area``.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field

from morocco_cadastre.cadastral import get_cadastral_region
from morocco_cadastre.core.constants import SRID_WGS84
from morocco_cadastre.geometry import (
    calculate_bounding_box,
    calculate_centroid,
    calculate_polygon_area,
    geo_point_to_postgis,
    geo_polygon_to_postgis,
    is_within_morocco,
)
from morocco_cadastre.models.geometry import GeoPoint, GeoPolygon

logger = logging.getLogger("morocco_cadastre.models.parcel")

SCHEMA_VERSION = "parcel-geometry-v1"


class ParcelGeometryRecord(BaseModel):
    """Geometry block of a property record.

    Attributes:
        schema_version: Record schema identifier.
        boundary: GeoJSON-style polygon coordinates.
        boundary_postgis: EWKT for the boundary geography column.
        gps_point: Field-captured ``[lng, lat]``, if any.
        gps_postgis: EWKT for the GPS geography column, or ``None``.
        surface_sqm: Approximate surface in square metres.
        centroid: Vertex-mean centroid ``[lng, lat]``.
        bounding_box: ``{minLng, maxLng, minLat, maxLat}``.
        cadastral_zone: Zone code as stored, may be empty.
        region: Region slug resolved from the zone code, or ``None``.
        within_morocco: Whether the centroid falls in Morocco's bounding box.
        topology_valid: Whether the first ring is a valid simple polygon.
        srid: SRID of the EWKT strings.
    """

    schema_version: str = SCHEMA_VERSION
    boundary: list[list[list[float]]] = Field(default_factory=list)
    boundary_postgis: str = ""
    gps_point: list[float] | None = None
    gps_postgis: str | None = None
    surface_sqm: float = 0.0
    centroid: list[float] = Field(default_factory=list)
    bounding_box: dict[str, float] = Field(default_factory=dict)
    cadastral_zone: str = ""
    region: str | None = None
    within_morocco: bool = False
    topology_valid: bool = False
    srid: int = SRID_WGS84

    @classmethod
    def from_geometry(
        cls,
        polygon: GeoPolygon,
        *,
        cadastral_zone: str = "",
        gps_point: GeoPoint | None = None,
        srid: int = SRID_WGS84,
    ) -> ParcelGeometryRecord:
        """Build a record from a boundary polygon and optional capture point."""
        centroid = calculate_centroid(polygon)
        surface = calculate_polygon_area(polygon)
        region = get_cadastral_region(cadastral_zone) if cadastral_zone else None
        topology_valid = _is_topology_valid(polygon)

        if not topology_valid:
            logger.warning(
                "Parcel boundary is not a valid simple polygon | zone=%s | vertices=%d",
                cadastral_zone or "-",
                len(polygon.exterior),
            )

        logger.info(
            "Parcel geometry built | zone=%s | region=%s | surface=%.1f m2 | centroid=(%.6f, %.6f)",
            cadastral_zone or "-",
            region or "-",
            surface,
            centroid.lng,
            centroid.lat,
        )

        return cls(
            boundary=[[list(c) for c in ring] for ring in polygon.coordinates],
            boundary_postgis=geo_polygon_to_postgis(polygon, srid=srid),
            gps_point=list(gps_point.coordinates) if gps_point is not None else None,
            gps_postgis=(
                geo_point_to_postgis(gps_point, srid=srid) if gps_point is not None else None
            ),
            surface_sqm=surface,
            centroid=list(centroid.coordinates),
            bounding_box=calculate_bounding_box(polygon).to_dict(),
            cadastral_zone=cadastral_zone,
            region=region,
            within_morocco=is_within_morocco(centroid.lat, centroid.lng),
            topology_valid=topology_valid,
            srid=srid,
        )


def _is_topology_valid(polygon: GeoPolygon) -> bool:
    """Check the first ring with shapely (self-intersection, zero area)."""
    from shapely.errors import ShapelyError
    from shapely.geometry import Polygon

    ring = polygon.exterior
    if len(ring) < 4:
        return False
    try:
        poly = Polygon(ring)
    except (ValueError, ShapelyError):
        return False
    return poly.is_valid and poly.area > 0
