from __future__ import annotations

from datetime import datetime

from .config import Settings, get_settings
from .logging_config import get_logger
from .models import HolidaySet, Report, as_calendar_date
from .workdays import count_business_days, is_business_day, month_bounds

logger = get_logger(__name__)


def build_report(
    holidays: HolidaySet,
    reference: datetime | None = None,
    settings: Settings | None = None,
) -> Report:
    """Compute business-day progress for the month containing ``reference``.

    Args:
        holidays: Dates excluded in addition to weekends
        reference: Point in time to report on; defaults to now in local time
        settings: Overrides ``get_settings()``

    Returns:
        Report with days passed (start of month to ``reference`` inclusive)
        and the month's total business days
    """
    settings = settings or get_settings()
    if reference is None:
        reference = datetime.now().astimezone()

    start, end = month_bounds(reference)
    days_passed = count_business_days(start, reference, holidays)
    days_total = count_business_days(start, end, holidays)

    if days_total == 0:
        logger.warning(
            "Month has no business days; reporting 0% elapsed",
            extra={"month": start.strftime("%Y-%m")},
        )

    report = Report(
        reference=as_calendar_date(reference),
        days_passed=days_passed,
        days_total=days_total,
        hours_per_day=settings.hours_per_day,
        today_is_business_day=is_business_day(reference, holidays),
    )
    logger.info(
        "Built report",
        extra={
            "reference": report.reference.isoformat(),
            "days_passed": days_passed,
            "days_total": days_total,
            "today_is_business_day": report.today_is_business_day,
        },
    )
    return report


def format_report(report: Report) -> list[str]:
    return [
        f"Today is business day {report.business_day_index} of this month",
        f"Business days remaining this month: {report.days_remaining}",
        f"Estimated working hours remaining this month: {report.hours_remaining}",
        f"{report.percent_elapsed:.1f}% of this month's business days have elapsed",
    ]
