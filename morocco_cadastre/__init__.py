"""Moroccan cadastral geometry toolkit.

Validates GeoJSON-like point and polygon payloads, gates field GPS
captures, computes flat-approximation area, centroid and bounding box,
converts geometries to ``SRID=4326;...`` geography strings for the
spatial database, and parses cadastral zone codes.
"""

__version__ = "0.1.0"
