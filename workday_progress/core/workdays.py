"""Business-day predicate, inclusive range counting and month boundaries.

All counting works on calendar dates: a ``datetime`` argument is reduced to
its date, so the time of day never shifts a range by one.
"""

from __future__ import annotations

from collections.abc import Iterator
from datetime import date, datetime, timedelta

from .logging_config import get_logger
from .models import DateRange, HolidaySet, as_calendar_date

logger = get_logger(__name__)

SATURDAY = 5
SUNDAY = 6


def is_business_day(day: date | datetime, holidays: HolidaySet) -> bool:
    """Return True unless ``day`` is a Saturday, a Sunday or a listed holiday."""
    d = as_calendar_date(day)
    if d.weekday() in (SATURDAY, SUNDAY):
        return False
    return d not in holidays


def iter_business_days(date_range: DateRange, holidays: HolidaySet) -> Iterator[date]:
    for d in date_range.days():
        if is_business_day(d, holidays):
            yield d


def count_business_days(
    start: date | datetime, end: date | datetime, holidays: HolidaySet
) -> int:
    """Count business days in [start, end], both ends included.

    Raises:
        InvalidRangeError: If ``end`` precedes ``start``.
    """
    date_range = DateRange(start, end)
    count = sum(1 for _ in iter_business_days(date_range, holidays))
    logger.debug(
        "Counted business days",
        extra={
            "start": date_range.start.isoformat(),
            "end": date_range.end.isoformat(),
            "count": count,
        },
    )
    return count


def beginning_of_month(ref: datetime) -> datetime:
    """Day 1 of ``ref``'s month at 00:00:00, keeping ``ref``'s tzinfo."""
    return datetime(ref.year, ref.month, 1, tzinfo=getattr(ref, "tzinfo", None))


def end_of_month(ref: datetime) -> datetime:
    """Last day of ``ref``'s month at 23:59:59, keeping ``ref``'s tzinfo."""
    first = beginning_of_month(ref)
    if first.month == 12:
        next_first = first.replace(year=first.year + 1, month=1)
    else:
        next_first = first.replace(month=first.month + 1)
    last = next_first - timedelta(days=1)
    return last.replace(hour=23, minute=59, second=59)


def month_bounds(ref: datetime) -> tuple[datetime, datetime]:
    return beginning_of_month(ref), end_of_month(ref)
