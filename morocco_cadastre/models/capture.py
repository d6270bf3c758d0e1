"""Outcome of gating a field GPS capture."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GPSCaptureResult:
    """Whether a capture may enter the system of record, plus advisories.

    An invalid result carries exactly one warning (the rejection reason).
    A valid result carries zero, one or two advisory warnings.

    Attributes:
        valid: ``True`` if the capture is accepted.
        warnings: Human-readable warning strings, in the order raised.
    """

    valid: bool
    warnings: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, object]:
        return {"valid": self.valid, "warnings": list(self.warnings)}
