import os

os.environ.setdefault("EPHEMERIS_BACKEND", "moseph")

import pytest

from api.services import ephem
from api.services.models import PlanetPosition

# Longitude, latitude, speed per body key
FAKE_POSITIONS = {
    "sun": (84.0, 0.0, 0.95),
    "moon": (204.0, -3.1, 13.2),
    "mercury": (70.5, 1.2, -0.4),
    "venus": (44.0, -0.8, 1.1),
    "mars": (355.0, 0.5, 0.7),
    "jupiter": (96.0, 0.1, 0.23),
    "saturn": (292.0, 0.3, -0.05),
    "uranus": (278.5, -0.4, -0.03),
    "neptune": (283.0, 0.8, -0.02),
    "pluto": (225.5, 14.6, -0.01),
    "meannode": (310.0, 0.0, -0.05),
    "truenode": (311.2, 0.0, -0.12),
    "chiron": (113.0, 5.2, 0.08),
}


def fake_body_position(jd_utc, body):
    lon, lat, speed = FAKE_POSITIONS[body.key]
    return PlanetPosition(body=body, longitude=lon, latitude=lat, speed=speed)


@pytest.fixture
def fake_positions(monkeypatch):
    """Serve fixed body positions so no Swiss Ephemeris data files are needed."""

    monkeypatch.setattr(ephem, "body_position", fake_body_position)
    return FAKE_POSITIONS
