"""End-to-end natal chart computation: birth data in, chart report out."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import datetime

from . import ephem, geocoding, timezones
from .chart import assemble
from .houses import resolve_house_system
from .models import Coordinates, NatalChartReport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NatalChartResult:
    report: NatalChartReport
    coordinates: Coordinates
    timezone: str
    utc: datetime


def compute_natal_chart(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    location,
    house_system: str | None = None,
) -> NatalChartResult:
    ephem.init_paths(os.getenv("EPHEMERIS_DIR"))
    coords = geocoding.resolve_location(location)
    utc, tz_name = timezones.local_to_utc(
        year, month, day, hour, minute, coords.latitude, coords.longitude
    )
    # The UTC date may differ from the local one
    jd = ephem.julian_day(utc.year, utc.month, utc.day, timezones.decimal_hour(utc))
    snap = ephem.snapshot(jd, coords.latitude, coords.longitude, resolve_house_system(house_system))
    report = assemble(snap)
    logger.info(
        "natal_chart_computed",
        extra={"jd": jd, "tz": tz_name, "house_system": snap.house_system, "aspects": len(report.aspects)},
    )
    return NatalChartResult(report=report, coordinates=coords, timezone=tz_name, utc=utc)
