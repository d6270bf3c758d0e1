"""Cadastral geometry: guards, GPS gating, construction, measurement, PostGIS text.

Public API:
- ``is_valid_geo_point`` / ``is_valid_geo_polygon``: structural guards
- ``is_within_morocco`` / ``validate_gps_capture``: coordinate gating
- ``create_geo_point`` / ``create_geo_polygon``: constructors
- ``calculate_polygon_area`` / ``calculate_centroid`` / ``calculate_bounding_box``
- ``geo_point_to_postgis`` / ``geo_polygon_to_postgis`` / ``postgis_point_to_geo``
  (plus ``*_with_config`` encoders using the configured storage SRID)

Internal modules:
- ``_validation``: guards and GPS capture gating
- ``_construction``: point / polygon constructors
- ``_measurement``: area, centroid, bounding box
- ``_postgis``: geography-string encode / decode
"""

from __future__ import annotations

from morocco_cadastre.geometry._construction import create_geo_point, create_geo_polygon
from morocco_cadastre.geometry._measurement import (
    calculate_bounding_box,
    calculate_centroid,
    calculate_polygon_area,
)
from morocco_cadastre.geometry._postgis import (
    geo_point_to_postgis,
    geo_point_to_postgis_with_config,
    geo_polygon_to_postgis,
    geo_polygon_to_postgis_with_config,
    postgis_point_to_geo,
)
from morocco_cadastre.geometry._validation import (
    INVALID_RANGE_WARNING,
    OUTSIDE_MOROCCO_WARNING,
    is_valid_geo_point,
    is_valid_geo_polygon,
    is_within_morocco,
    validate_gps_capture,
    validate_gps_capture_with_config,
)

__all__ = [
    "INVALID_RANGE_WARNING",
    "OUTSIDE_MOROCCO_WARNING",
    "calculate_bounding_box",
    "calculate_centroid",
    "calculate_polygon_area",
    "create_geo_point",
    "create_geo_polygon",
    "geo_point_to_postgis",
    "geo_point_to_postgis_with_config",
    "geo_polygon_to_postgis",
    "geo_polygon_to_postgis_with_config",
    "is_valid_geo_point",
    "is_valid_geo_polygon",
    "is_within_morocco",
    "postgis_point_to_geo",
    "validate_gps_capture",
    "validate_gps_capture_with_config",
]
