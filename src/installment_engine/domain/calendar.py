"""Calendar arithmetic used to size and date installment schedules."""

from __future__ import annotations

import calendar
from datetime import date, timedelta

# Schedules must conclude at least one month before the event
NOTICE_PERIOD_MONTHS = 1
MIN_SCHEDULE_MONTHS = 1
MAX_SCHEDULE_MONTHS = 600


def calendar_months_between(event_date: date, reference_date: date) -> int:
    """Month boundaries crossed from reference_date to event_date, ignoring day-of-month."""
    return (event_date.year - reference_date.year) * 12 + (event_date.month - reference_date.month)


def months_until(event_date: date, reference_date: date) -> int:
    """
    Number of monthly periods available before an event.

    Whole calendar months between the two dates, minus the notice period,
    bounded to [1, 600]. A past or same-month event still yields 1.
    """
    remaining = calendar_months_between(event_date, reference_date) - NOTICE_PERIOD_MONTHS
    return max(MIN_SCHEDULE_MONTHS, min(MAX_SCHEDULE_MONTHS, remaining))


def add_months(start: date, months: int) -> date:
    """Same day-of-month `months` later, clamped to the target month's last day."""
    index = start.month - 1 + months
    year = start.year + index // 12
    month = index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def days_between(start: date, end: date) -> int:
    return (end - start).days


def shift_days(start: date, days: int) -> date:
    return start + timedelta(days=days)
