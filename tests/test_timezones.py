from datetime import datetime, timezone

import pytest

from api.services import timezones
from api.services.errors import InvalidLocalTimeError, TimezoneNotFoundError

NYC = (40.7128, -74.0060)


def test_timezone_for_new_york():
    assert timezones.timezone_for(*NYC) == "America/New_York"


def test_local_to_utc_applies_daylight_saving():
    utc, tz = timezones.local_to_utc(1990, 6, 15, 12, 30, *NYC)
    assert tz == "America/New_York"
    assert utc == datetime(1990, 6, 15, 16, 30, tzinfo=timezone.utc)


def test_local_to_utc_crosses_date_line_of_utc():
    utc, _ = timezones.local_to_utc(1990, 12, 31, 22, 0, *NYC)
    assert (utc.year, utc.month, utc.day, utc.hour) == (1991, 1, 1, 3)


def test_spring_forward_gap_is_rejected():
    with pytest.raises(InvalidLocalTimeError) as info:
        timezones.local_to_utc(2021, 3, 14, 2, 30, *NYC)
    assert info.value.field == "datetime"


def test_repeated_fall_back_time_uses_first_occurrence():
    utc, _ = timezones.local_to_utc(2021, 11, 7, 1, 30, *NYC)
    assert utc == datetime(2021, 11, 7, 5, 30, tzinfo=timezone.utc)


def test_impossible_calendar_date_is_rejected():
    with pytest.raises(InvalidLocalTimeError):
        timezones.local_to_utc(2021, 2, 30, 12, 0, *NYC)


def test_unresolvable_timezone(monkeypatch):
    class NoZone:
        def timezone_at(self, lng, lat):
            return None

    monkeypatch.setattr(timezones, "_TF", NoZone())
    with pytest.raises(TimezoneNotFoundError) as info:
        timezones.local_to_utc(2000, 1, 1, 0, 0, 0.0, 0.0)
    assert info.value.field == "location"


def test_decimal_hour():
    assert timezones.decimal_hour(datetime(2000, 1, 1, 9, 30)) == 9.5
    assert timezones.decimal_hour(datetime(2000, 1, 1, 0, 0, 36)) == 0.01
