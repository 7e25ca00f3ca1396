import logging
from typing import Sequence

import swisseph as swe

from .constants import DEFAULT_HOUSE_SYSTEM, HOUSE_SYSTEMS
from .errors import EphemerisError
from .zodiac import normalize

logger = logging.getLogger(__name__)

_HOUSE_SYSTEM_LOOKUP = {name.lower(): name for name in HOUSE_SYSTEMS}


def resolve_house_system(system: str | None) -> str:
    """Return the canonical house system name; unknown names fall back to Placidus."""

    if not system:
        return DEFAULT_HOUSE_SYSTEM
    key = system.strip().lower().replace("_", " ").replace("-", " ")
    return _HOUSE_SYSTEM_LOOKUP.get(key, DEFAULT_HOUSE_SYSTEM)


def houses(jd_utc: float, lat: float, lon: float, system: str = DEFAULT_HOUSE_SYSTEM):
    name = resolve_house_system(system)
    try:
        cusps, ascmc = swe.houses(jd_utc, lat, lon, HOUSE_SYSTEMS[name])
    except swe.Error as exc:
        raise EphemerisError(
            "houses",
            f"{name} houses failed for JD {jd_utc} at ({lat}, {lon}): {exc}",
        ) from exc
    # cusps: house 1..12
    return {
        "asc": normalize(ascmc[0]),
        "mc": normalize(ascmc[1]),
        "cusps": [normalize(cusps[i]) for i in range(12)],
    }


def house_of(lon: float, cusps: Sequence[float]) -> int:
    """Return the house (1-12) containing ``lon``.

    ``cusps`` lists the 12 cusp longitudes, house 1 first. A house whose
    span crosses 0° Aries is matched on either side of the boundary. When
    no house matches (malformed cusps) the planet is placed in house 1.
    """

    nlon = normalize(lon)
    ncusps = [normalize(c) for c in cusps]
    for i in range(12):
        current = ncusps[i]
        nxt = ncusps[(i + 1) % 12]
        if nxt > current:
            if current <= nlon < nxt:
                return i + 1
        elif nlon >= current or nlon < nxt:
            return i + 1
    logger.warning("house_of_no_match", extra={"lon": lon, "cusps": list(cusps)})
    return 1
