"""Exceptions raised at the strict edges of the package.

Geometry guards, GPS gating and zone lookups answer bad input with
``False``, ``None`` or zero-valued results and never raise.  Only three
operations raise, each with its own concrete class:

- ``GeometryContractError``: ``GeoPoint.from_dict`` / ``GeoPolygon.from_dict``
  were handed a payload that fails its structural guard.
- ``ProjectionError``: a Lambert transform produced a non-finite result.
- ``ConfigValidationError`` (in ``core.config``): an environment value is
  out of range.

Their bases name the two failure categories: ``ContractError`` for data
from another producer that breaks the agreed shape, and
``PermanentError`` for failures that repeating the call cannot fix.
Nothing in the package is worth retrying, so there is no transient
category.
"""

from __future__ import annotations

from typing import ClassVar


class CadastreError(Exception):
    """Base exception for all cadastre-domain errors.

    Attributes:
        message: Human-readable error description.
        stage: Component that raised (``"geometry"``, ``"projection"``, ``"config"``).
        code: Stable machine-readable code, e.g. ``"PROJECTION_FAILED"``.
    """

    category: ClassVar[str] = "permanent"
    default_stage: ClassVar[str] = ""
    default_code: ClassVar[str] = ""

    def __init__(self, message: str = "", *, stage: str = "", code: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code

    def to_error_dict(self) -> dict[str, str]:
        """Structured payload for log lines and API error bodies."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
        }


class ContractError(CadastreError):
    """Data from an external producer does not have the agreed shape."""

    category = "contract"


class PermanentError(CadastreError):
    """The operation cannot succeed for these inputs."""


class GeometryContractError(ContractError):
    """A point or polygon payload failed its structural guard."""

    default_stage = "geometry"
    default_code = "GEOMETRY_CONTRACT_VIOLATION"


class ProjectionError(PermanentError):
    """A coordinate could not be projected between reference systems."""

    default_stage = "projection"
    default_code = "PROJECTION_FAILED"
