# tests/test_dates.py
import pytest

from egypt_national_id.dates import days_in_month, is_leap_year, is_legal_date


@pytest.mark.unit
@pytest.mark.parametrize("year,expected", [
    (2000, True),
    (2004, True),
    (1996, True),
    (1900, False),
    (2100, False),
    (1999, False),
    (2001, False),
])
def test_is_leap_year(year, expected):
    assert is_leap_year(year) is expected


@pytest.mark.unit
@pytest.mark.parametrize("year,month,expected", [
    (2001, 1, 31),
    (2001, 2, 28),
    (2000, 2, 29),
    (1900, 2, 28),
    (2001, 4, 30),
    (2001, 12, 31),
])
def test_days_in_month(year, month, expected):
    assert days_in_month(year, month) == expected


@pytest.mark.unit
@pytest.mark.parametrize("month", [0, 13])
def test_days_in_month_rejects_bad_month(month):
    with pytest.raises(ValueError):
        days_in_month(2001, month)


@pytest.mark.unit
@pytest.mark.parametrize("year,month,day,expected", [
    (2001, 1, 1, True),
    (2000, 2, 29, True),
    (1996, 2, 29, True),
    (1999, 2, 29, False),
    (1900, 2, 29, False),
    (2001, 2, 30, False),
    (2001, 4, 31, False),
    (2001, 13, 1, False),
    (2001, 0, 1, False),
    (2001, 1, 0, False),
    (2001, 1, 32, False),
    (0, 1, 1, False),
])
def test_is_legal_date(year, month, day, expected):
    assert is_legal_date(year, month, day) is expected
