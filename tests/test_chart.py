from api.schemas import BirthDateTime, CoordinatesIn, NatalChartRequest
from api.routers.charts import build_response
from api.services.chart import assemble
from api.services.models import CelestialBody, Coordinates, EphemerisSnapshot, PlanetPosition
from api.services.natal import NatalChartResult

from datetime import datetime, timezone

SUN = CelestialBody(0, "Sun", "sun")
MOON = CelestialBody(1, "Moon", "moon")
MARS = CelestialBody(4, "Mars", "mars")

CUSPS = (0.0, 30.0, 60.0, 90.0, 120.0, 150.0, 180.0, 210.0, 240.0, 270.0, 300.0, 330.0)


def _snapshot(positions=None):
    positions = positions or (
        PlanetPosition(SUN, 84.0, 0.0, 0.95),
        PlanetPosition(MOON, 204.0, -3.1, 13.2),
        PlanetPosition(MARS, 350.0, 0.5, -0.3),
    )
    return EphemerisSnapshot(
        julian_day=2448057.1875,
        cusps=CUSPS,
        positions=tuple(positions),
        ascendant=0.0,
        midheaven=270.0,
        house_system="Placidus",
    )


def test_assemble_places_planets():
    report = assemble(_snapshot())
    sun, moon, mars = report.planets
    assert (sun.placement.sign, sun.house) == ("Gemini", 3)
    assert (moon.placement.sign, moon.house) == ("Libra", 7)
    assert (mars.placement.sign, mars.house) == ("Pisces", 12)
    assert mars.position.is_retrograde
    assert not sun.position.is_retrograde


def test_assemble_houses_and_angles():
    report = assemble(_snapshot())
    assert [h.number for h in report.houses] == list(range(1, 13))
    assert report.houses[3].placement.sign == "Cancer"
    assert report.angles.descendant.longitude == 180.0
    assert report.angles.imum_coeli.longitude == 90.0
    assert report.house_system == "Placidus"


def test_assemble_aspects_in_catalog_order():
    report = assemble(_snapshot())
    # Sun 84 / Moon 204 -> trine, Sun 84 / Mars 350 -> square (orb 4), Moon / Mars none
    assert [(a.point1, a.point2, a.definition.key) for a in report.aspects] == [
        ("Sun", "Moon", "trine"),
        ("Sun", "Mars", "square"),
    ]
    assert report.aspects[1].orb == 4.0


def test_sun_sign():
    assert assemble(_snapshot()).sun_sign == "Gemini"


def test_missing_sun_reports_unknown_sign():
    report = assemble(_snapshot([PlanetPosition(MOON, 10.0, 0.0, 13.0)]))
    assert report.sun_sign == "Unknown"


def test_assemble_is_idempotent():
    snap = _snapshot()
    assert assemble(snap) == assemble(snap)


def test_responses_are_byte_identical():
    snap = _snapshot()
    req = NatalChartRequest(
        datetime=BirthDateTime(year=1990, month=6, day=15, hour=12, minute=30),
        location=CoordinatesIn(latitude=40.7128, longitude=-74.006),
    )
    utc = datetime(1990, 6, 15, 16, 30, tzinfo=timezone.utc)

    def render():
        result = NatalChartResult(
            report=assemble(snap),
            coordinates=Coordinates(40.7128, -74.006),
            timezone="America/New_York",
            utc=utc,
        )
        return build_response(req, result).model_dump_json()

    assert render() == render()
