import datetime as dt

from axion.schemas.snapshot import DateRange, CollaboratorRecord
from axion.services.kpis.utils import parse_iso_date, month_days


def within_range(iso_date: str | None, start: str, end: str) -> bool:
    # ISO yyyy-mm-dd sorts the same way as the calendar, so plain string compare is enough
    if not iso_date:
        return False
    d = iso_date[:10]
    return start <= d <= end


def days_between_inclusive(start: str, end: str) -> int:
    d1 = parse_iso_date(start)
    d2 = parse_iso_date(end)
    if d1 is None or d2 is None:
        return 1
    return max(1, (d2 - d1).days + 1)


def days_in_month_for_iso(iso_date: str) -> int:
    d = parse_iso_date(iso_date)
    if d is None:
        return 0
    return month_days(d)


def proration_factor(date_range: DateRange) -> float:
    """Share of start's month covered by the range, capped at one full month."""
    days = days_between_inclusive(date_range.start, date_range.end)
    mdays = days_in_month_for_iso(date_range.start)
    if mdays <= 0:
        return 1.0
    return min(1.0, days / mdays)


def prorated_fixed_cost(collaborators: list[CollaboratorRecord], date_range: DateRange) -> float:
    monthly = sum(c.commission_fixed for c in collaborators)
    return monthly * proration_factor(date_range)


def current_month_range(today: dt.date) -> DateRange:
    return DateRange.of(dt.date(today.year, today.month, 1), today)


def last_days_range(days: int, today: dt.date) -> DateRange:
    return DateRange.of(today - dt.timedelta(days=days), today)
