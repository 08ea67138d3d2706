"""Date and time conversions feeding the position formulas."""

from .julian import (
    days_since_j2000,
    get_julian_date,
    julian_from_datetime,
    julian_to_datetime,
)
from .pythonic_datetimes import ensure_aware, get_utc_datetime
from .rounding import round_degrees

__all__ = [
    "days_since_j2000",
    "get_julian_date",
    "julian_from_datetime",
    "julian_to_datetime",
    "ensure_aware",
    "get_utc_datetime",
    "round_degrees",
]
