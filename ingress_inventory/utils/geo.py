"""Portal location decoding and great-circle distance."""

import logging
import math
import re
from typing import Optional

from ingress_inventory.config import Location
from ingress_inventory.constants import (
    EARTH_RADIUS_KM,
    KM_TO_MILES_FACTOR,
    LOCATION_E6_SCALE,
)

logger = logging.getLogger(__name__)

# Leading hexadecimal number, with optional sign and 0x prefix.
_HEX_PREFIX = re.compile(r"\s*([+-]?)(?:0[xX])?([0-9a-fA-F]+)")


def _parse_hex(text: str) -> Optional[int]:
    """Parse the leading hexadecimal digits of ``text``; trailing junk is ignored."""
    match = _HEX_PREFIX.match(text)
    if match is None:
        return None
    sign, digits = match.groups()
    value = int(digits, 16)
    return -value if sign == "-" else value


def _to_signed_32(value: int) -> int:
    """Reinterpret the low 32 bits of ``value`` as a two's-complement integer."""
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def decode_location(text: Optional[str]) -> Optional[Location]:
    """Decode a ``"latE6hex,lonE6hex"`` portal location.

    Each half is a 32-bit two's-complement integer in microdegrees, written in
    hexadecimal: ``"0000000a,fffffff6"`` decodes to ``(0.00001, -0.00001)``.

    Args:
        text: Encoded location as found in ``portalCoupler.portalLocation``.

    Returns:
        Location | None: Decoded coordinates, or ``None`` when the comma is
        missing or either half has no hexadecimal digits.
    """
    if not text or not isinstance(text, str) or "," not in text:
        return None
    lat_hex, lon_hex = text.split(",")[:2]
    lat_e6 = _parse_hex(lat_hex)
    lon_e6 = _parse_hex(lon_hex)
    if lat_e6 is None or lon_e6 is None:
        logger.debug("Undecodable portal location %r", text)
        return None
    return Location(
        lat=_to_signed_32(lat_e6) * LOCATION_E6_SCALE,
        lon=_to_signed_32(lon_e6) * LOCATION_E6_SCALE,
    )


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in kilometres on a sphere of radius 6371 km."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1))
        * math.cos(math.radians(lat2))
        * math.sin(d_lon / 2) ** 2
    )
    # Rounding can push antipodal pairs just past 1.
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def km_to_miles(km: float) -> float:
    return km * KM_TO_MILES_FACTOR


def distance_km(origin: Location, encoded: Optional[str]) -> float:
    """Distance from ``origin`` to an encoded portal location.

    Unknown or undecodable locations are infinitely far away.
    """
    location = decode_location(encoded)
    if location is None:
        return math.inf
    km = haversine_km(origin.lat, origin.lon, location.lat, location.lon)
    return km if math.isfinite(km) else math.inf
