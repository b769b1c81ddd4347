"""
Gregorian calendar checks for decoded birth dates.
"""

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Divisible by 4, except centuries not divisible by 400."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """
    Number of days in ``month`` of ``year``.

    Raises:
        ValueError: If month is outside 1-12
    """
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def is_legal_date(year: int, month: int, day: int) -> bool:
    """
    Check that (year, month, day) exists in the Gregorian calendar.

    Examples:
        >>> is_legal_date(2000, 2, 29)
        True
        >>> is_legal_date(1900, 2, 29)
        False
        >>> is_legal_date(2010, 13, 1)
        False
    """
    if year < 1 or not 1 <= month <= 12:
        return False
    return 1 <= day <= days_in_month(year, month)
