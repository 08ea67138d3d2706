"""Julian date calculation module.

This module provides functions for converting between datetime objects and Julian dates
using the Meeus algorithm from "Astronomical Algorithms" (2nd ed.).
Dates before the Gregorian reform are treated as proleptic Gregorian, matching
Python's own datetime calendar.
"""

from datetime import datetime, timedelta, timezone
from typing import Union

# Precision for Julian dates (microsecond precision = 12 decimal places)
JD_PRECISION = 12


def gregorian_to_jdn(year: int, month: int, day: int) -> int:
    """Convert a Gregorian date to Julian Day Number using Meeus algorithm.

    Args:
        year: Year in the (proleptic) Gregorian calendar
        month: Month (1-12)
        day: Day of month

    Returns:
        Julian Day Number
    """
    # Adjust month and year for the algorithm (Jan & Feb are 13 & 14 of prev year)
    if month <= 2:
        year -= 1
        month += 12

    a = year // 100
    b = 2 - a + (a // 4)

    return int(365.25 * (year + 4716)) + int(30.6001 * (month + 1)) + day + b - 1524


def _day_fraction(
    hour: int, minute: int, second: int, microsecond: int, offset_seconds: float = 0.0
) -> float:
    """Calculate the fraction of a day from time components.

    A UTC offset is taken off the wall-clock time, so the result can fall
    outside [0, 1) for zoned times near midnight.
    """
    total_seconds = (
        hour * 3600 + minute * 60 + second + microsecond / 1_000_000 - offset_seconds
    )
    return total_seconds / 86400


def jdn_to_julian_date(
    jdn: int, hour: int = 0, minute: int = 0, second: int = 0, microsecond: int = 0
) -> float:
    """Convert a Julian Day Number to a Julian Date.

    Args:
        jdn: Julian Day Number
        hour: Hour (0-23)
        minute: Minute (0-59)
        second: Second (0-59)
        microsecond: Microsecond (0-999999)

    Returns:
        Julian Date (JD)
    """
    day_fraction = _day_fraction(hour, minute, second, microsecond)

    # Julian days start at noon
    jd = jdn - 0.5 + day_fraction

    return round(jd, JD_PRECISION)


def datetime_to_julian(dt: datetime) -> float:
    """Convert a datetime object to a Julian Date.

    Args:
        dt: timezone-aware datetime object

    Returns:
        Julian Date (JD)

    Raises:
        ValueError: If the datetime is naive
    """
    if dt.tzinfo is None:
        raise ValueError("datetime must be timezone-aware")

    # Work from the wall-clock fields: converting to UTC first overflows for
    # zoned times at the ends of the datetime range
    offset = dt.utcoffset()
    offset_seconds = offset.total_seconds() if offset is not None else 0.0

    jdn = gregorian_to_jdn(dt.year, dt.month, dt.day)
    jd = jdn - 0.5 + _day_fraction(
        dt.hour, dt.minute, dt.second, dt.microsecond, offset_seconds
    )

    return round(jd, JD_PRECISION)


def julian_to_datetime(jd: Union[float, datetime]) -> datetime:
    """Convert a Julian Date to a datetime object using Meeus algorithm.

    Args:
        jd: Julian Date or datetime object

    Returns:
        datetime object with UTC timezone
    """
    if isinstance(jd, datetime):
        return jd

    jd = round(jd, JD_PRECISION)

    # Noon epoch adjustment
    jd_plus_half = jd + 0.5
    Z = int(jd_plus_half)
    F = jd_plus_half - Z

    # Proleptic Gregorian correction, the inverse of gregorian_to_jdn
    alpha = int((Z - 1867216.25) // 36524.25)
    A = Z + 1 + alpha - alpha // 4

    B = A + 1524
    C = int((B - 122.1) / 365.25)
    D = int(365.25 * C)
    E = int((B - D) / 30.6001)

    day_with_fraction = B - D - int(30.6001 * E) + F
    day = int(day_with_fraction)

    month = E - 1
    if month > 12:
        month -= 12

    year = C - 4716
    if month < 3:
        year += 1

    fraction_of_day = day_with_fraction - day

    hours_fraction = fraction_of_day * 24
    hour = int(hours_fraction)

    minutes_fraction = (hours_fraction - hour) * 60
    minute = int(minutes_fraction)

    seconds_fraction = (minutes_fraction - minute) * 60
    second = int(seconds_fraction)

    microsecond = round((seconds_fraction - second) * 1_000_000)

    # Carry whole-second overflow from rounding through the datetime arithmetic
    overflow = 0
    if microsecond >= 1_000_000:
        microsecond -= 1_000_000
        overflow = 1

    dt = datetime(
        year, month, day, hour, minute, second, microsecond, tzinfo=timezone.utc
    )
    if overflow:
        dt += timedelta(seconds=overflow)
    return dt
