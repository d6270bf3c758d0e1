"""Cadastral zone codes.

A zone code identifies a land-registry region, section and parcel as
``XX-NNNN-NNN``.  The two-letter prefix resolves to one of Morocco's
administrative regions through ``CADASTRAL_PREFIXES``; an unknown
prefix resolves to ``None`` rather than an error.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from morocco_cadastre.core.constants import CADASTRAL_PREFIXES

# ASCII classes: ``\d`` would also accept non-ASCII digits.
_ZONE_PATTERN = re.compile(r"([A-Z]{2})-([0-9]{4})-([0-9]{3})")


@dataclass(frozen=True, slots=True)
class CadastralZone:
    """A parsed zone code.

    Attributes:
        code: The original code string.
        prefix: Two-letter region prefix.
        section: Four-digit section number, as written.
        parcel: Three-digit parcel number, as written.
        region: Region slug, or ``None`` if the prefix is unknown.
    """

    code: str
    prefix: str
    section: str
    parcel: str
    region: str | None = None


def is_valid_cadastral_zone(zone: object) -> bool:
    """Return whether ``zone`` is exactly ``XX-NNNN-NNN``.

    Lowercase prefixes are rejected, not normalised.
    """
    return isinstance(zone, str) and _ZONE_PATTERN.fullmatch(zone) is not None


def _region_for_prefix(prefix: str) -> str | None:
    for region, prefixes in CADASTRAL_PREFIXES.items():
        if prefix in prefixes:
            return region
    return None


def get_cadastral_region(zone: object) -> str | None:
    """Return the region slug for a zone code, or ``None``.

    ``None`` covers both a malformed code and an unknown prefix.
    """
    if not is_valid_cadastral_zone(zone):
        return None
    return _region_for_prefix(zone[:2])  # type: ignore[index]


def parse_cadastral_zone(zone: object) -> CadastralZone | None:
    """Split a zone code into its parts, or return ``None`` if malformed."""
    if not isinstance(zone, str):
        return None
    match = _ZONE_PATTERN.fullmatch(zone)
    if match is None:
        return None
    prefix, section, parcel = match.groups()
    return CadastralZone(
        code=zone,
        prefix=prefix,
        section=section,
        parcel=parcel,
        region=_region_for_prefix(prefix),
    )
