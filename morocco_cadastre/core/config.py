"""Cadastre configuration loaded from environment variables.

All values default to the thresholds used by field capture and the
spatial database.  ``from_env()`` raises ``ConfigValidationError`` if
any value is out of range, so bad configuration is caught at startup
rather than on the first GPS capture.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from morocco_cadastre.core.constants import (
    GPS_REJECT_ACCURACY_M,
    GPS_WARN_ACCURACY_M,
    SRID_WGS84,
)
from morocco_cadastre.core.exceptions import PermanentError


class ConfigValidationError(PermanentError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        message: Human-readable description of the valid range.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")
        self.message = message


@dataclass(frozen=True, slots=True)
class CadastreConfig:
    """Immutable cadastre configuration.

    Attributes:
        gps_reject_accuracy_m: Captures with a worse accuracy (metres) are rejected.
        gps_warn_accuracy_m: Captures with a worse accuracy (metres) carry a warning.
        storage_srid: SRID of the spatial database geography column.
    """

    gps_reject_accuracy_m: float = GPS_REJECT_ACCURACY_M
    gps_warn_accuracy_m: float = GPS_WARN_ACCURACY_M
    storage_srid: int = SRID_WGS84

    @classmethod
    def from_env(cls) -> CadastreConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a value is out of range.
            ValueError: If a numeric environment variable cannot be
                parsed (e.g. ``CADASTRE_GPS_WARN_ACCURACY_M=abc``).
        """
        config = cls(
            gps_reject_accuracy_m=float(
                os.getenv("CADASTRE_GPS_REJECT_ACCURACY_M", str(GPS_REJECT_ACCURACY_M))
            ),
            gps_warn_accuracy_m=float(
                os.getenv("CADASTRE_GPS_WARN_ACCURACY_M", str(GPS_WARN_ACCURACY_M))
            ),
            storage_srid=int(os.getenv("CADASTRE_STORAGE_SRID", str(SRID_WGS84))),
        )
        _validate(config)
        return config


def _validate(config: CadastreConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if config.gps_reject_accuracy_m <= 0:
        raise ConfigValidationError(
            "CADASTRE_GPS_REJECT_ACCURACY_M",
            config.gps_reject_accuracy_m,
            "must be > 0 (metres)",
        )

    if config.gps_warn_accuracy_m < 0:
        raise ConfigValidationError(
            "CADASTRE_GPS_WARN_ACCURACY_M",
            config.gps_warn_accuracy_m,
            "must be >= 0 (metres)",
        )

    if config.gps_warn_accuracy_m > config.gps_reject_accuracy_m:
        raise ConfigValidationError(
            "CADASTRE_GPS_WARN_ACCURACY_M",
            config.gps_warn_accuracy_m,
            "must not exceed CADASTRE_GPS_REJECT_ACCURACY_M",
        )

    if config.storage_srid <= 0:
        raise ConfigValidationError(
            "CADASTRE_STORAGE_SRID",
            config.storage_srid,
            "must be a positive EPSG code",
        )
