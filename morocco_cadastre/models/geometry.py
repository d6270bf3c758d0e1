"""GeoJSON-style value types for points, polygons and bounding boxes.

All coordinates are ``(longitude, latitude)`` pairs in WGS 84.  The
types are immutable and carry no range invariants of their own: range
checking happens only where a caller explicitly validates.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from morocco_cadastre.core.exceptions import GeometryContractError

Coordinate = tuple[float, float]
Ring = tuple[Coordinate, ...]


@dataclass(frozen=True, slots=True)
class GeoPoint:
    """A single ``(lng, lat)`` position.

    Attributes:
        coordinates: Position as ``(longitude, latitude)``.
    """

    type: ClassVar[str] = "Point"

    coordinates: Coordinate = (0.0, 0.0)

    @property
    def lng(self) -> float:
        return self.coordinates[0]

    @property
    def lat(self) -> float:
        return self.coordinates[1]

    def to_dict(self) -> dict[str, object]:
        """Serialise to a GeoJSON-like dict."""
        return {"type": self.type, "coordinates": list(self.coordinates)}

    @classmethod
    def from_dict(cls, data: object) -> GeoPoint:
        """Deserialise an untrusted payload.

        Raises:
            GeometryContractError: If the payload is not a well-formed point.
        """
        from morocco_cadastre.geometry import is_valid_geo_point

        if not is_valid_geo_point(data):
            msg = f"Not a valid GeoJSON Point payload: {data!r}"
            raise GeometryContractError(msg)
        if isinstance(data, cls):
            return data
        lng, lat = data["coordinates"]  # type: ignore[index]
        return cls(coordinates=(lng, lat))


@dataclass(frozen=True, slots=True)
class GeoPolygon:
    """A polygon as a sequence of closed rings.

    Only the first ring is consumed by area, centroid and bounding-box
    computation.  Further rings are carried through serialisation but are
    not treated as holes.

    Attributes:
        coordinates: Rings, each a tuple of ``(lng, lat)`` pairs.
    """

    type: ClassVar[str] = "Polygon"

    coordinates: tuple[Ring, ...] = field(default_factory=tuple)

    @property
    def exterior(self) -> Ring:
        """The first ring, or an empty tuple if the polygon has none."""
        if not self.coordinates:
            return ()
        return tuple(self.coordinates[0])

    def to_dict(self) -> dict[str, object]:
        """Serialise to a GeoJSON-like dict."""
        return {
            "type": self.type,
            "coordinates": [[list(c) for c in ring] for ring in self.coordinates],
        }

    @classmethod
    def from_dict(cls, data: object) -> GeoPolygon:
        """Deserialise an untrusted payload.

        Raises:
            GeometryContractError: If the payload is not a well-formed polygon.
        """
        from morocco_cadastre.geometry import is_valid_geo_polygon

        if not is_valid_geo_polygon(data):
            msg = "Not a valid GeoJSON Polygon payload (need closed rings of >= 4 positions)"
            raise GeometryContractError(msg)
        if isinstance(data, cls):
            return data
        rings = data["coordinates"]  # type: ignore[index]
        return cls(coordinates=tuple(tuple((c[0], c[1]) for c in ring) for ring in rings))


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Axis-aligned extent of a ring, in degrees."""

    min_lng: float = 0.0
    max_lng: float = 0.0
    min_lat: float = 0.0
    max_lat: float = 0.0

    def contains(self, lng: float, lat: float) -> bool:
        """Whether ``(lng, lat)`` lies inside the box (inclusive)."""
        return self.min_lng <= lng <= self.max_lng and self.min_lat <= lat <= self.max_lat

    def to_dict(self) -> dict[str, float]:
        """Serialise with the camelCase keys dashboard consumers expect."""
        return {
            "minLng": self.min_lng,
            "maxLng": self.max_lng,
            "minLat": self.min_lat,
            "maxLat": self.max_lat,
        }
