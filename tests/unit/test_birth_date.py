"""Tests for the BirthDate value object."""

from datetime import date, timedelta

import pytest

from userhub.domain.errors import UnprocessableContentError
from userhub.domain.value_objects import BirthDate

TODAY = date(2024, 6, 15)


# ===========================
# Parsing
# ===========================


def test_parse_valid_date():
    """A past YYYYMMDD date parses into a calendar date."""
    result = BirthDate.parse("19900115", required=True, today=TODAY)

    assert result == BirthDate(date(1990, 1, 15))
    assert str(result) == "19900115"
    assert result.isoformat() == "1990-01-15"


def test_parse_full_width_digits():
    """Full-width digits are normalized before parsing."""
    result = BirthDate.parse(" ２００００２２９ ", required=True, today=TODAY)

    assert result.value == date(2000, 2, 29)


def test_parse_today_is_accepted():
    """A birth date equal to today is valid."""
    result = BirthDate.parse("20240615", required=True, today=TODAY)

    assert result.value == TODAY


def test_parse_tomorrow_is_rejected():
    """A birth date after today is rejected."""
    with pytest.raises(UnprocessableContentError) as exc_info:
        BirthDate.parse("20240616", required=True, today=TODAY)

    assert exc_info.value.detail == "birth_date cannot be a future date"


def test_parse_uses_local_date_by_default():
    """Without an explicit reference date the local date is used."""
    today = date.today()
    tomorrow = today + timedelta(days=1)

    assert BirthDate.parse(today.strftime("%Y%m%d"), required=True).value == today
    with pytest.raises(UnprocessableContentError, match="future"):
        BirthDate.parse(tomorrow.strftime("%Y%m%d"), required=True)


def test_parse_seven_digits_is_rejected():
    """Input shorter than eight characters fails the length check."""
    with pytest.raises(UnprocessableContentError) as exc_info:
        BirthDate.parse("2023131", required=True, today=TODAY)

    assert exc_info.value.detail == "birth_date must be at least 8 characters"


def test_parse_nine_digits_is_rejected():
    """Input longer than eight characters fails the length check."""
    with pytest.raises(UnprocessableContentError) as exc_info:
        BirthDate.parse("202301011", required=True, today=TODAY)

    assert exc_info.value.detail == "birth_date must be at most 8 characters"


@pytest.mark.parametrize(
    "raw",
    [
        "20231301",  # month 13
        "20230229",  # not a leap year
        "20230431",  # April has 30 days
        "2023-1-1",  # separators
        "abcdefgh",
        "00000101",  # year 0
    ],
)
def test_parse_invalid_calendar_values(raw):
    """Eight characters that are not a real YYYYMMDD date are rejected."""
    with pytest.raises(UnprocessableContentError) as exc_info:
        BirthDate.parse(raw, required=True, today=TODAY)

    assert exc_info.value.detail == "birth_date must be in YYYYMMDD format"


def test_parse_optional_blank_returns_none():
    """Blank optional input is absent, not an error."""
    assert BirthDate.parse("   ", required=False, today=TODAY) is None


def test_parse_required_blank_fails():
    """Blank required input is an error."""
    with pytest.raises(UnprocessableContentError) as exc_info:
        BirthDate.parse("", required=True, today=TODAY)

    assert exc_info.value.detail == "birth_date is required"


def test_parse_optional_invalid_still_fails():
    """Present-but-invalid optional input is an error, never None."""
    with pytest.raises(UnprocessableContentError):
        BirthDate.parse("20231301", required=False, today=TODAY)


def test_from_date_skips_validation():
    """Trusted dates are wrapped as-is."""
    birth_date = BirthDate.from_date(date(1985, 12, 31))

    assert birth_date.value == date(1985, 12, 31)


# ===========================
# Age
# ===========================


@pytest.mark.parametrize(
    ("birth", "today", "expected"),
    [
        (date(1990, 6, 15), date(2024, 6, 15), 34),  # birthday today
        (date(1990, 6, 16), date(2024, 6, 15), 33),  # birthday tomorrow
        (date(1990, 6, 14), date(2024, 6, 15), 34),  # birthday yesterday
        (date(1990, 12, 31), date(2025, 1, 1), 34),
        (date(2024, 6, 15), date(2024, 6, 15), 0),  # born today
    ],
)
def test_age_in_years(birth, today, expected):
    """Age counts completed years."""
    assert BirthDate.from_date(birth).age_in_years(today) == expected


def test_leap_day_birthday_in_non_leap_year():
    """Feb 29 birthdays are observed on Feb 28 in non-leap years."""
    birth_date = BirthDate.from_date(date(2000, 2, 29))

    assert birth_date.age_in_years(date(2023, 2, 27)) == 22
    assert birth_date.age_in_years(date(2023, 2, 28)) == 23
    assert birth_date.age_in_years(date(2023, 3, 1)) == 23
    assert birth_date.age_in_years(date(2023, 3, 1)) == birth_date.age_in_years(
        date(2023, 2, 28)
    )


def test_leap_day_birthday_in_leap_year():
    """In leap years the Feb 29 birthday is the real anniversary."""
    birth_date = BirthDate.from_date(date(2000, 2, 29))

    assert birth_date.age_in_years(date(2024, 2, 28)) == 23
    assert birth_date.age_in_years(date(2024, 2, 29)) == 24


def test_age_of_future_birth_date_fails():
    """A trusted date after the reference date cannot produce an age."""
    birth_date = BirthDate.from_date(date(2030, 1, 1))

    with pytest.raises(UnprocessableContentError) as exc_info:
        birth_date.age_in_years(TODAY)

    assert exc_info.value.detail == "birth_date value is invalid"


def test_age_defaults_to_local_date():
    """Without a reference date the local date is used."""
    today = date.today()
    birth_date = BirthDate.from_date(date(today.year - 10, 1, 1))

    assert birth_date.age_in_years() == 10
