"""Resolve a local birth time at given coordinates to UTC."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from timezonefinder import TimezoneFinder

from .errors import InvalidLocalTimeError, TimezoneNotFoundError

logger = logging.getLogger(__name__)

# Loading the timezone polygons is slow; build the finder once.
_TF = TimezoneFinder()


def timezone_for(lat: float, lon: float) -> str:
    tz = _TF.timezone_at(lng=lon, lat=lat)
    if not tz:
        raise TimezoneNotFoundError(lat, lon)
    return tz


def local_to_utc(year: int, month: int, day: int, hour: int, minute: int, lat: float, lon: float) -> tuple[datetime, str]:
    """Convert a local wall time at ``(lat, lon)`` to an aware UTC datetime.

    Returns the UTC datetime together with the IANA zone name used. Wall
    times skipped by a DST transition are rejected; repeated wall times
    resolve to their first occurrence.
    """

    tz_name = timezone_for(lat, lon)
    try:
        tzinfo = ZoneInfo(tz_name)
    except ZoneInfoNotFoundError as exc:
        raise TimezoneNotFoundError(lat, lon) from exc

    try:
        naive = datetime(year, month, day, hour, minute)
    except ValueError as exc:
        raise InvalidLocalTimeError(
            f"Invalid datetime {year:04d}-{month:02d}-{day:02d} {hour:02d}:{minute:02d}: {exc}"
        ) from exc

    local = naive.replace(tzinfo=tzinfo)
    utc = local.astimezone(timezone.utc)
    if utc.astimezone(tzinfo).replace(tzinfo=None) != naive:
        raise InvalidLocalTimeError(
            f"Local time {naive.isoformat(timespec='minutes')} does not exist in "
            f"timezone {tz_name} (skipped by a daylight saving transition). "
            "Check that the date and time are valid for that timezone."
        )

    logger.debug("local_time_resolved", extra={"tz": tz_name, "utc": utc.isoformat()})
    return utc, tz_name


def decimal_hour(dt: datetime) -> float:
    """Hour of day as a decimal, e.g. 09:30 -> 9.5."""

    return dt.hour + dt.minute / 60 + dt.second / 3600 + dt.microsecond / 3_600_000_000
