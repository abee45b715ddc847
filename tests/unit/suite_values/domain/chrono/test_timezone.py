from datetime import datetime, timedelta

import pytest

from suite_values.domain.chrono.timezone import Timezone, display_name_for
from suite_values.domain.errors import UnknownTimezoneError, ValidationError
from suite_values.utils.datetime_tools import make_utc


@pytest.mark.parametrize("id", ["America/New_York", "UTC", "Asia/Tokyo", "Europe/London", "Australia/Sydney"])
def test_from_id_resolves_known_zones(id):
    tz = Timezone.from_id(id)

    assert tz.id == id
    assert tz.to_primitive() == id
    assert tz.zone is not None


@pytest.mark.parametrize("id", ["Invalid/Timezone", "Mars/Olympus_Mons", "../etc/passwd", "/absolute/path"])
def test_from_id_rejects_unknown_zones(id):
    with pytest.raises(UnknownTimezoneError, match="unsupported timezone ID"):
        Timezone.from_id(id)


@pytest.mark.parametrize("id", ["America", "Etc", "Europe"])
def test_from_id_rejects_zone_directories(id):
    with pytest.raises(UnknownTimezoneError, match="unsupported timezone ID"):
        Timezone.from_id(id)


def test_from_id_rejects_empty():
    with pytest.raises(ValidationError, match="timezone ID cannot be empty"):
        Timezone.from_id("")


def test_from_id_rejects_non_string():
    with pytest.raises(TypeError):
        Timezone.from_id(None)


def test_unknown_zone_is_a_lookup_error():
    with pytest.raises(LookupError):
        Timezone.from_id("Nowhere/Special")


def test_from_primitive():
    assert Timezone.from_primitive("Europe/Paris") == Timezone.from_id("Europe/Paris")


def test_offset_depends_on_instant():
    new_york = Timezone.from_id("America/New_York")

    assert new_york.offset_at(make_utc(2022, 1, 1)) == timedelta(hours=-5)
    assert new_york.offset_at(make_utc(2022, 7, 1)) == timedelta(hours=-4)
    assert new_york.format_offset(make_utc(2022, 1, 1)) == "-05:00"
    assert new_york.format_offset(make_utc(2022, 7, 1)) == "-04:00"


def test_offset_at_rejects_naive_instant():
    with pytest.raises(ValidationError, match="naive"):
        Timezone.from_id("Asia/Tokyo").offset_at(datetime(2022, 1, 1))


def test_format_offset_positive_and_fractional_hours():
    assert Timezone.from_id("Asia/Tokyo").format_offset(make_utc(2022, 1, 1)) == "+09:00"
    assert Timezone.from_id("Asia/Kolkata").format_offset(make_utc(2022, 1, 1)) == "+05:30"
    assert Timezone.from_id("UTC").format_offset(make_utc(2022, 1, 1)) == "+00:00"


@pytest.mark.parametrize(
    "id, expected",
    [
        ("UTC", "Coordinated Universal Time"),
        ("America/New_York", "Eastern Time"),
        ("Asia/Tokyo", "Japan Standard Time"),
        ("America/Sao_Paulo", "Sao Paulo"),
        ("America/Argentina/Buenos_Aires", "Buenos Aires"),
        ("Etc/GMT+5", "GMT+5"),
        ("GMT", "GMT"),
    ],
)
def test_display_names(id, expected):
    assert display_name_for(id) == expected
    assert Timezone.from_id(id).name == expected


def test_equality_and_string():
    utc = Timezone.from_id("UTC")

    assert utc == Timezone.from_id("UTC")
    assert utc != Timezone.from_id("Asia/Tokyo")
    assert utc != "UTC"
    assert hash(utc) == hash(Timezone.from_id("UTC"))
    assert str(utc) == "UTC (Coordinated Universal Time) +00:00"
    assert repr(utc) == "Timezone('UTC')"
