import datetime

import pytest

from morsediary.date import Date


def test_default_date():
    assert Date() == Date(1, 1, 1970)
    assert str(Date()) == "01.01.1970"


def test_from_string_fields():
    assert Date.from_string("07.06.2025") == Date(7, 6, 2025)


def test_str_zero_pads_day_and_month():
    assert str(Date(1, 2, 2000)) == "01.02.2000"


@pytest.mark.parametrize("text", ["07.06.2025", "31.12.1900", "01.01.9999"])
def test_round_trip(text):
    assert str(Date.from_string(text)) == text


@pytest.mark.parametrize("text", ["7.6.2025", "07/06/2025", "07.06.25", "", "07.06.2025 "])
def test_bad_format(text):
    with pytest.raises(ValueError, match="Invalid date format"):
        Date.from_string(text)


@pytest.mark.parametrize("text", ["00.01.2000", "32.01.2000", "01.00.2000", "01.13.2000", "01.01.1899"])
def test_bad_values(text):
    with pytest.raises(ValueError, match="Invalid date values"):
        Date.from_string(text)


def test_today_matches_local_date():
    before = datetime.date.today()
    result = Date.today()
    after = datetime.date.today()
    assert (result.year, result.month, result.day) in {
        (before.year, before.month, before.day),
        (after.year, after.month, after.day),
    }


def test_dates_are_immutable():
    date = Date(1, 1, 2000)
    with pytest.raises(AttributeError):
        date.day = 2
    assert date.day == 1
    assert str(date) == "01.01.2000"