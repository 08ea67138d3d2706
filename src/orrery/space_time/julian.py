from datetime import date, datetime, timezone
from typing import Union

from ..constants import J2000
from ..logging import get_logger
from .pythonic_datetimes import ensure_aware
from .rounding import create_and_round_to_millisecond
from .julian_calc import datetime_to_julian, julian_to_datetime as _julian_to_datetime

logger = get_logger(__name__)


def julian_from_datetime(dt: datetime) -> float:
    """Convert datetime to Julian date.

    Naive datetimes are taken to be UTC.

    Args:
        dt: Datetime to convert

    Returns:
        float: Julian date
    """
    dt = ensure_aware(dt)
    return datetime_to_julian(dt)


def julian_to_datetime(jd: float) -> datetime:
    """Convert Julian date to datetime.

    Args:
        jd: Julian date to convert

    Returns:
        datetime: UTC datetime rounded to the millisecond
    """
    dt = _julian_to_datetime(jd)
    return create_and_round_to_millisecond(
        dt.microsecond, dt.second, dt.minute, dt.hour, dt.day, dt.month, dt.year
    )


def get_julian_date(time: Union[float, date, datetime]) -> float:
    """Normalize a time given as a datetime, a date or a Julian date to a Julian date.

    A plain date is taken as midnight UTC at the start of that day.

    Args:
        time: A datetime, a date, or a float representing a Julian date.

    Returns:
        float: Julian date
    """
    if isinstance(time, datetime):
        return julian_from_datetime(time)
    if isinstance(time, date):
        return julian_from_datetime(
            datetime(time.year, time.month, time.day, tzinfo=timezone.utc)
        )
    # Assume time is already a Julian date
    return float(time)


def days_since_j2000(time: Union[float, date, datetime]) -> float:
    """Days elapsed since the J2000.0 epoch (2000-01-01T12:00:00 UTC).

    This is the independent variable of every position formula. It is
    negative before the epoch and may be fractional.

    Args:
        time: A datetime, a date, or a Julian date.

    Returns:
        float: Days since J2000.0
    """
    days = get_julian_date(time) - J2000
    logger.debug(f"{time!r} is {days} days from J2000")
    return days
