from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta

from .errors import InvalidRangeError


def as_calendar_date(value: date | datetime) -> date:
    """Drop the time-of-day (and timezone) part, keeping year/month/day."""
    if isinstance(value, datetime):
        return value.date()
    return value


@dataclass(frozen=True)
class HolidaySet:
    dates: tuple[date, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "dates", tuple(as_calendar_date(d) for d in self.dates))

    @classmethod
    def of(cls, values: Iterable[date | datetime]) -> HolidaySet:
        return cls(tuple(values))

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, date):
            return False
        return as_calendar_date(item) in self.dates

    def __iter__(self) -> Iterator[date]:
        return iter(self.dates)

    def __len__(self) -> int:
        return len(self.dates)


@dataclass(frozen=True)
class DateRange:
    """Inclusive span of calendar days."""

    start: date
    end: date

    def __post_init__(self) -> None:
        # Normalise datetimes so comparisons ignore the time of day
        object.__setattr__(self, "start", as_calendar_date(self.start))
        object.__setattr__(self, "end", as_calendar_date(self.end))
        if self.end < self.start:
            raise InvalidRangeError(
                f"End date {self.end.isoformat()} precedes start date {self.start.isoformat()}"
            )

    def days(self) -> Iterator[date]:
        current = self.start
        while current <= self.end:
            yield current
            current += timedelta(days=1)

    def __len__(self) -> int:
        return (self.end - self.start).days + 1


@dataclass(frozen=True)
class Report:
    reference: date
    days_passed: int
    days_total: int
    hours_per_day: int = 8
    today_is_business_day: bool = field(default=False, compare=False)

    @property
    def business_day_index(self) -> int:
        # start..today is inclusive, so today is already counted
        return self.days_passed

    @property
    def days_remaining(self) -> int:
        return self.days_total - self.days_passed

    @property
    def hours_remaining(self) -> int:
        return self.days_remaining * self.hours_per_day

    @property
    def percent_elapsed(self) -> float:
        if self.days_total == 0:
            return 0.0
        return self.days_passed / self.days_total * 100
