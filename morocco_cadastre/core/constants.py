"""Shared cadastral constants — single source of truth.

Every table here is an immutable module-level value built once at
import time.  Nothing in the package mutates them.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Final

# ---------------------------------------------------------------------------
# Morocco bounding box (advisory filter, never a hard validity rule)
# ---------------------------------------------------------------------------

MOROCCO_MIN_LAT: Final = 21.0
"""Southern border."""

MOROCCO_MAX_LAT: Final = 36.0
"""Northern border."""

MOROCCO_MIN_LNG: Final = -17.0
"""Western border (Atlantic)."""

MOROCCO_MAX_LNG: Final = -1.0
"""Eastern border (Algeria)."""

MOROCCO_BOUNDS: Final = MappingProxyType(
    {
        "minLat": MOROCCO_MIN_LAT,
        "maxLat": MOROCCO_MAX_LAT,
        "minLng": MOROCCO_MIN_LNG,
        "maxLng": MOROCCO_MAX_LNG,
    }
)

# ---------------------------------------------------------------------------
# Coordinate reference systems
# ---------------------------------------------------------------------------

SRID_WGS84: Final = 4326
"""GPS standard; the SRID written into every geography string."""

SRID_MOROCCO_LAMBERT: Final = 26191
"""Merchich / Nord Maroc (Lambert Zone 1), used only by ``projection``."""

CRS: Final = MappingProxyType(
    {
        "WGS84": SRID_WGS84,
        "MOROCCO_LAMBERT": SRID_MOROCCO_LAMBERT,
    }
)

# ---------------------------------------------------------------------------
# WGS 84 coordinate ranges
# ---------------------------------------------------------------------------

MIN_LONGITUDE: Final = -180.0
MAX_LONGITUDE: Final = 180.0
MIN_LATITUDE: Final = -90.0
MAX_LATITUDE: Final = 90.0

# Minimum ring length (3 distinct + closing = 4)
MIN_RING_VERTICES: Final = 4

# ---------------------------------------------------------------------------
# Flat area approximation at ~32°N
# ---------------------------------------------------------------------------

METRES_PER_DEGREE_LAT: Final = 111_132.0
METRES_PER_DEGREE_LNG: Final = 94_000.0
"""cos(32°) * 111 320, rounded.  Fixed scalar, not a per-vertex correction."""

# ---------------------------------------------------------------------------
# GPS capture gating
# ---------------------------------------------------------------------------

GPS_REJECT_ACCURACY_M: Final = 50.0
GPS_WARN_ACCURACY_M: Final = 10.0

# ---------------------------------------------------------------------------
# Cadastral region prefixes (ordered; first match wins)
# ---------------------------------------------------------------------------

CADASTRAL_PREFIXES: Final = MappingProxyType(
    {
        "marrakech-safi": ("MS", "MR"),
        "souss-massa": ("SM", "AG"),
        "draa-tafilalet": ("DT", "OZ", "ER"),
        "casablanca-settat": ("CS", "CA"),
        "rabat-sale-kenitra": ("RS", "RB"),
        "tanger-tetouan-al-hoceima": ("TT", "TN"),
        "fes-meknes": ("FM", "FE"),
    }
)
