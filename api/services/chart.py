"""Natal chart assembly from a single ephemeris snapshot."""

from .angles import chart_angles
from .aspects import AspectPoint, find_aspects
from .houses import house_of
from .models import EphemerisSnapshot, HouseCusp, NatalChartReport, PlacedPlanet
from .zodiac import zodiac_placement

UNKNOWN_SIGN = "Unknown"


def place_planets(snapshot: EphemerisSnapshot) -> tuple[PlacedPlanet, ...]:
    return tuple(
        PlacedPlanet(
            position=p,
            placement=zodiac_placement(p.longitude),
            house=house_of(p.longitude, snapshot.cusps),
        )
        for p in snapshot.positions
    )


def house_cusps(cusps) -> tuple[HouseCusp, ...]:
    return tuple(
        HouseCusp(number=i + 1, longitude=lon, placement=zodiac_placement(lon))
        for i, lon in enumerate(cusps[:12])
    )


def sun_sign(planets) -> str:
    for planet in planets:
        if planet.position.body.key == "sun":
            return planet.placement.sign
    return UNKNOWN_SIGN


def assemble(snapshot: EphemerisSnapshot) -> NatalChartReport:
    """Build the natal chart report for ``snapshot``.

    Pure and deterministic: the same snapshot always yields an equal report.
    """

    planets = place_planets(snapshot)
    points = [
        AspectPoint(p.position.body.name, p.position.longitude, p.position.body.key)
        for p in planets
    ]
    return NatalChartReport(
        julian_day=snapshot.julian_day,
        planets=planets,
        houses=house_cusps(snapshot.cusps),
        aspects=tuple(find_aspects(points)),
        angles=chart_angles(snapshot.ascendant, snapshot.midheaven),
        sun_sign=sun_sign(planets),
        house_system=snapshot.house_system,
    )
