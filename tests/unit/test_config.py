"""Tests for cadastre configuration.

Covers:
- Default values match the capture thresholds and storage SRID
- Loading from environment variables
- Type coercion (string env vars → numeric fields)
- Fail-fast range validation
"""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from morocco_cadastre.core.config import CadastreConfig, ConfigValidationError


class TestCadastreConfigDefaults:
    """Verify default configuration values."""

    def test_default_reject_accuracy(self) -> None:
        assert CadastreConfig().gps_reject_accuracy_m == 50.0

    def test_default_warn_accuracy(self) -> None:
        assert CadastreConfig().gps_warn_accuracy_m == 10.0

    def test_default_srid(self) -> None:
        assert CadastreConfig().storage_srid == 4326


class TestCadastreConfigFromEnv:
    """Verify loading from environment variables."""

    def test_loads_from_environment(self) -> None:
        env = {
            "CADASTRE_GPS_REJECT_ACCURACY_M": "30",
            "CADASTRE_GPS_WARN_ACCURACY_M": "5.5",
            "CADASTRE_STORAGE_SRID": "3857",
        }
        with patch.dict(os.environ, env, clear=False):
            cfg = CadastreConfig.from_env()

        assert cfg.gps_reject_accuracy_m == 30.0
        assert cfg.gps_warn_accuracy_m == 5.5
        assert cfg.storage_srid == 3857

    def test_defaults_when_env_missing(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            cfg = CadastreConfig.from_env()

        assert cfg == CadastreConfig()

    def test_unparseable_number_raises_value_error(self) -> None:
        with (
            patch.dict(os.environ, {"CADASTRE_GPS_WARN_ACCURACY_M": "abc"}, clear=True),
            pytest.raises(ValueError),
        ):
            CadastreConfig.from_env()

    def test_frozen_immutability(self) -> None:
        cfg = CadastreConfig()
        with pytest.raises(AttributeError):
            cfg.gps_warn_accuracy_m = 20.0  # type: ignore[misc]


class TestCadastreConfigValidation:
    """Fail-fast range validation in from_env."""

    def test_reject_zero_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"CADASTRE_GPS_REJECT_ACCURACY_M": "0"}, clear=True),
            pytest.raises(ConfigValidationError, match="CADASTRE_GPS_REJECT_ACCURACY_M"),
        ):
            CadastreConfig.from_env()

    def test_warn_negative_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"CADASTRE_GPS_WARN_ACCURACY_M": "-1"}, clear=True),
            pytest.raises(ConfigValidationError, match="must be >= 0"),
        ):
            CadastreConfig.from_env()

    def test_warn_above_reject_rejected(self) -> None:
        env = {"CADASTRE_GPS_REJECT_ACCURACY_M": "20", "CADASTRE_GPS_WARN_ACCURACY_M": "25"}
        with (
            patch.dict(os.environ, env, clear=True),
            pytest.raises(ConfigValidationError, match="must not exceed"),
        ):
            CadastreConfig.from_env()

    def test_warn_equal_reject_accepted(self) -> None:
        env = {"CADASTRE_GPS_REJECT_ACCURACY_M": "20", "CADASTRE_GPS_WARN_ACCURACY_M": "20"}
        with patch.dict(os.environ, env, clear=True):
            cfg = CadastreConfig.from_env()
        assert cfg.gps_warn_accuracy_m == 20.0

    def test_srid_zero_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"CADASTRE_STORAGE_SRID": "0"}, clear=True),
            pytest.raises(ConfigValidationError, match="CADASTRE_STORAGE_SRID"),
        ):
            CadastreConfig.from_env()

    def test_error_carries_key_and_value(self) -> None:
        with (
            patch.dict(os.environ, {"CADASTRE_GPS_REJECT_ACCURACY_M": "-5"}, clear=True),
            pytest.raises(ConfigValidationError) as exc_info,
        ):
            CadastreConfig.from_env()
        assert exc_info.value.key == "CADASTRE_GPS_REJECT_ACCURACY_M"
        assert exc_info.value.value == -5.0
