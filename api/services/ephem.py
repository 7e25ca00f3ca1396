"""Swiss Ephemeris helpers feeding the natal chart engine."""

from __future__ import annotations

import logging
import os

import swisseph as swe

from .errors import EphemerisError
from .houses import houses, resolve_house_system
from .models import CelestialBody, EphemerisSnapshot, PlanetPosition
from .zodiac import normalize

logger = logging.getLogger(__name__)

# Engine version for API responses
try:
    ENGINE_VERSION = f"swisseph-{swe.version}"
except AttributeError:
    ENGINE_VERSION = "swisseph-2.10"  # Fallback if version not available

# Aspect pairs are evaluated in this order.
CELESTIAL_BODIES = (
    CelestialBody(swe.SUN, "Sun", "sun"),
    CelestialBody(swe.MOON, "Moon", "moon"),
    CelestialBody(swe.MERCURY, "Mercury", "mercury"),
    CelestialBody(swe.VENUS, "Venus", "venus"),
    CelestialBody(swe.MARS, "Mars", "mars"),
    CelestialBody(swe.JUPITER, "Jupiter", "jupiter"),
    CelestialBody(swe.SATURN, "Saturn", "saturn"),
    CelestialBody(swe.URANUS, "Uranus", "uranus"),
    CelestialBody(swe.NEPTUNE, "Neptune", "neptune"),
    CelestialBody(swe.PLUTO, "Pluto", "pluto"),
    CelestialBody(swe.MEAN_NODE, "Mean Node", "meannode"),
    CelestialBody(swe.TRUE_NODE, "True Node", "truenode"),
    CelestialBody(swe.CHIRON, "Chiron", "chiron"),
)


def backend_name() -> str:
    raw_backend = os.getenv("EPHEMERIS_BACKEND")
    backend = raw_backend.strip().lower() if raw_backend else "swieph"
    return "moseph" if backend == "moseph" else "swieph"


def _backend_flag() -> int:
    """Return the Swiss Ephemeris backend flag based on environment configuration."""

    return swe.FLG_MOSEPH if backend_name() == "moseph" else swe.FLG_SWIEPH


def init_paths(ephe_dir: str | os.PathLike[str] | None) -> None:
    """Set the Swiss Ephemeris file search path when available."""

    if not ephe_dir:
        return

    path = os.fspath(ephe_dir)
    if os.path.isdir(path):
        swe.set_ephe_path(path)
    else:
        logger.warning("ephemeris_dir_missing", extra={"path": path})


def julian_day(year: int, month: int, day: int, hour: float, calendar: int = swe.GREG_CAL) -> float:
    """Julian day (UT) for a UTC calendar date and decimal hour."""

    return swe.julday(year, month, day, hour, calendar)


def body_position(jd_utc: float, body: CelestialBody) -> PlanetPosition:
    flag = _backend_flag() | swe.FLG_SPEED
    try:
        values, _ = swe.calc_ut(jd_utc, body.id, flag)
    except swe.Error as exc:
        raise EphemerisError(
            "position",
            f"{body.name} at JD {jd_utc} failed: {exc}. Check EPHEMERIS_DIR "
            "points at the Swiss Ephemeris data files.",
        ) from exc
    lon, lat, _dist, lon_speed, _lat_speed, _dist_speed = values
    return PlanetPosition(body=body, longitude=normalize(lon), latitude=lat, speed=lon_speed)


def positions_ecliptic(jd_utc: float, bodies=CELESTIAL_BODIES) -> tuple[PlanetPosition, ...]:
    """Return ecliptic longitude, latitude and speed for every catalog body."""

    return tuple(body_position(jd_utc, body) for body in bodies)


def snapshot(jd_utc: float, lat: float, lon: float, house_system: str | None = None) -> EphemerisSnapshot:
    system = resolve_house_system(house_system)
    hs = houses(jd_utc, lat, lon, system=system)
    return EphemerisSnapshot(
        julian_day=jd_utc,
        cusps=tuple(hs["cusps"]),
        positions=positions_ecliptic(jd_utc),
        ascendant=hs["asc"],
        midheaven=hs["mc"],
        house_system=system,
    )
