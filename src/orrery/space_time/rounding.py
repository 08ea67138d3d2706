from datetime import datetime, timedelta, timezone

from ..constants import DEGREES_PRECISION


def round_degrees(value: float) -> float:
    # round() is half-to-even, the same midpoint rule the reference tables use
    return round(value, DEGREES_PRECISION)


def create_and_round_to_millisecond(
    microseconds: float,
    second: int,
    minute: int,
    hour: int,
    day: int,
    month: int,
    year: int,
) -> datetime:
    """Round microseconds to nearest millisecond and normalize all time units."""
    rounded_micros = round(microseconds / 1000) * 1000

    # Handle microsecond overflow before creating datetime
    extra_seconds = rounded_micros // 1_000_000
    normalized_micros = rounded_micros % 1_000_000

    dt = datetime(
        year,
        month,
        day,
        hour,
        minute,
        second,
        int(normalized_micros),
        tzinfo=timezone.utc,
    )

    if extra_seconds:
        dt += timedelta(seconds=extra_seconds)

    return dt
