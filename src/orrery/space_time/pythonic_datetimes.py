from datetime import datetime, timezone
import pytz

from ..logging import get_logger

logger = get_logger(__name__)


def ensure_aware(dt: datetime) -> datetime:
    """Attach UTC to a naive datetime.

    Aware datetimes are returned unchanged, in their own zone.

    Args:
        dt: Datetime to check

    Returns:
        datetime: Timezone-aware datetime
    """
    if dt.tzinfo is None:
        logger.debug(f"Treating naive datetime {dt.isoformat()} as UTC")
        return dt.replace(tzinfo=timezone.utc)
    return dt


def get_utc_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    microsecond: int = 0,
) -> datetime:
    """Create a UTC datetime object.

    Args:
        year: Year
        month: Month (1-12)
        day: Day of month
        hour: Hour (0-23)
        minute: Minute (0-59)
        second: Second (0-59)
        microsecond: Microsecond (0-999999)

    Returns:
        datetime: UTC datetime object
    """
    return datetime(
        year,
        month,
        day,
        hour,
        minute,
        second,
        microsecond,
        tzinfo=pytz.UTC,
    )
