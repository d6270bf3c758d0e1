"""Unit tests for cadastral zone codes.

Covers:
- Exact ``XX-NNNN-NNN`` format, no normalisation
- Region lookup for every prefix in the table
- Unknown prefixes and malformed codes resolve to None
- Zone parsing into prefix / section / parcel
"""

from __future__ import annotations

import pytest

from morocco_cadastre.cadastral import (
    CadastralZone,
    get_cadastral_region,
    is_valid_cadastral_zone,
    parse_cadastral_zone,
)
from morocco_cadastre.core.constants import CADASTRAL_PREFIXES


class TestIsValidCadastralZone:
    def test_valid_code(self) -> None:
        assert is_valid_cadastral_zone("CS-1234-567")

    def test_lowercase_rejected(self) -> None:
        assert not is_valid_cadastral_zone("cs-1234-567")

    @pytest.mark.parametrize(
        "zone",
        [
            "",
            "CS1234567",
            "CS-123-567",
            "CS-12345-567",
            "CS-1234-56",
            "CS-1234-5678",
            "C-1234-567",
            "CSA-1234-567",
            "Cs-1234-567",
            " CS-1234-567",
            "CS-1234-567 ",
            "CS-1234-567\n",
            "CS_1234_567",
            "CS-12a4-567",
            "CS-١٢٣٤-567",
        ],
    )
    def test_malformed_rejected(self, zone: str) -> None:
        assert not is_valid_cadastral_zone(zone)

    @pytest.mark.parametrize("zone", [None, 1234, ["CS-1234-567"]])
    def test_non_string_rejected(self, zone: object) -> None:
        assert is_valid_cadastral_zone(zone) is False


class TestGetCadastralRegion:
    def test_casablanca(self) -> None:
        assert get_cadastral_region("CS-1234-567") == "casablanca-settat"

    @pytest.mark.parametrize(
        ("prefix", "region"),
        [(p, region) for region, prefixes in CADASTRAL_PREFIXES.items() for p in prefixes],
    )
    def test_every_prefix_resolves(self, prefix: str, region: str) -> None:
        assert get_cadastral_region(f"{prefix}-0001-001") == region

    def test_seven_regions(self) -> None:
        assert len(CADASTRAL_PREFIXES) == 7

    def test_prefixes_unique(self) -> None:
        prefixes = [p for group in CADASTRAL_PREFIXES.values() for p in group]
        assert len(prefixes) == len(set(prefixes))

    def test_unknown_prefix_is_none(self) -> None:
        assert get_cadastral_region("ZZ-1234-567") is None

    def test_malformed_is_none(self) -> None:
        assert get_cadastral_region("cs-1234-567") is None
        assert get_cadastral_region("CS-1234") is None

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            CADASTRAL_PREFIXES["new-region"] = ("NR",)  # type: ignore[index]


class TestParseCadastralZone:
    def test_parts(self) -> None:
        zone = parse_cadastral_zone("MR-0420-017")
        assert zone == CadastralZone(
            code="MR-0420-017",
            prefix="MR",
            section="0420",
            parcel="017",
            region="marrakech-safi",
        )

    def test_unknown_prefix_keeps_parts(self) -> None:
        zone = parse_cadastral_zone("ZZ-0001-002")
        assert zone is not None
        assert zone.prefix == "ZZ"
        assert zone.region is None

    @pytest.mark.parametrize("zone", ["cs-1234-567", "", None, 42])
    def test_malformed_is_none(self, zone: object) -> None:
        assert parse_cadastral_zone(zone) is None
