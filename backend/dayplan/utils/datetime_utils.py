"""
Timezone-aware datetime utilities.

Plans store timestamps as epoch milliseconds; these helpers convert
between calendar days in a user's timezone and that representation.
"""

from datetime import date, datetime, time, timedelta, timezone
from zoneinfo import ZoneInfo

# UTC timezone constant
UTC = timezone.utc

MS_PER_MINUTE = 60 * 1000
MS_PER_HOUR = 60 * MS_PER_MINUTE

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def now_utc() -> datetime:
    """
    Get current UTC datetime (timezone-aware).

    Returns:
        datetime: Current UTC time with tzinfo set to UTC
    """
    return datetime.now(UTC)


def to_epoch_ms(dt: datetime) -> int:
    """Convert an aware datetime to epoch milliseconds."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return (dt - _EPOCH) // timedelta(milliseconds=1)


def now_ms() -> int:
    """Current instant in epoch milliseconds."""
    return to_epoch_ms(now_utc())


def next_date(plan_date: date) -> date:
    return plan_date + timedelta(days=1)


def day_start_ms(plan_date: date, user_timezone: str) -> int:
    """
    Local midnight of `plan_date` in the user's timezone, as epoch ms.

    Args:
        plan_date: Calendar day
        user_timezone: IANA timezone name (e.g., "Asia/Tokyo")

    Example:
        >>> day_start_ms(date(2024, 1, 20), "Asia/Tokyo")
        1705676400000  # 2024-01-19T15:00:00Z
    """
    tz = ZoneInfo(user_timezone)
    return to_epoch_ms(datetime.combine(plan_date, time.min, tzinfo=tz))


def day_bounds_ms(plan_date: date, user_timezone: str) -> tuple[int, int]:
    """
    Half-open bounds [start, end) of a calendar day in the user's timezone.

    The end is the following local midnight, so days with a DST shift
    are 23 or 25 hours long.
    """
    return (
        day_start_ms(plan_date, user_timezone),
        day_start_ms(next_date(plan_date), user_timezone),
    )


def local_hour_ms(plan_date: date, hour: int, user_timezone: str) -> int:
    """Epoch ms of `hour`:00 local time on `plan_date`."""
    tz = ZoneInfo(user_timezone)
    if hour == 24:
        return day_start_ms(next_date(plan_date), user_timezone)
    return to_epoch_ms(datetime.combine(plan_date, time(hour=hour), tzinfo=tz))
