import pytest

from api.services.zodiac import format_degree, normalize, zodiac_placement


@pytest.mark.parametrize(
    "lon, sign, key",
    [
        (0.0, "Aries", "aries"),
        (30.0, "Taurus", "taurus"),
        (-30.0, "Pisces", "pisces"),
        (360.0, "Aries", "aries"),
    ],
)
def test_sign_boundaries(lon, sign, key):
    p = zodiac_placement(lon)
    assert p.sign == sign
    assert p.sign_key == key
    assert p.degree_in_sign == 0.0


def test_degree_within_sign():
    p = zodiac_placement(45.0)
    assert p.sign == "Taurus"
    assert p.degree_in_sign == 15.0


@pytest.mark.parametrize("lon", [12.5, 187.25, 359.75, -0.5])
@pytest.mark.parametrize("turns", [-2, -1, 1, 3])
def test_full_turns_do_not_change_placement(lon, turns):
    assert zodiac_placement(lon + 360.0 * turns) == zodiac_placement(lon)


def test_tiny_negative_longitude_wraps_to_aries():
    p = zodiac_placement(-1e-15)
    assert p.sign == "Aries"
    assert p.degree_in_sign == 0.0


@pytest.mark.parametrize("lon", [-1e-15, -1e-12, 360.0, 719.9999999999999, -360.0])
def test_normalize_stays_below_full_turn(lon):
    assert 0.0 <= normalize(lon) < 360.0


def test_format_degree():
    assert format_degree(15.5) == "15° 30' 0\""
    assert format_degree(0) == "0° 0' 0\""


def test_format_degree_truncates():
    # 29.999° = 29° 59' 56.4" -> seconds are truncated, never rounded up
    assert format_degree(29.999) == "29° 59' 56\""
