from datetime import date

import pytest

from installment_engine.domain.calendar import (
    add_months,
    calendar_months_between,
    days_between,
    months_until,
    shift_days,
)


def test_calendar_months_ignores_day_of_month():
    """Jan 31 -> Feb 1 crosses one month boundary even though it is one day."""
    assert calendar_months_between(date(2026, 2, 1), date(2026, 1, 31)) == 1


def test_calendar_months_across_years():
    assert calendar_months_between(date(2027, 3, 10), date(2025, 11, 20)) == 16


def test_calendar_months_negative_for_past_event():
    assert calendar_months_between(date(2025, 1, 1), date(2025, 6, 1)) == -5


def test_months_until_subtracts_notice_month():
    """Event three months out leaves two payable months."""
    assert months_until(date(2026, 6, 15), date(2026, 3, 1)) == 2


@pytest.mark.parametrize(
    "event_date",
    [date(2026, 3, 20), date(2026, 4, 20), date(2025, 1, 1)],
)
def test_months_until_floor_is_one(event_date):
    """Same month, next month and past events all yield a single period."""
    assert months_until(event_date, date(2026, 3, 1)) == 1


def test_months_until_caps_at_600():
    assert months_until(date(2200, 1, 1), date(2026, 1, 1)) == 600


def test_add_months_keeps_day():
    assert add_months(date(2026, 1, 15), 1) == date(2026, 2, 15)


def test_add_months_clamps_to_month_end():
    assert add_months(date(2026, 1, 31), 1) == date(2026, 2, 28)
    assert add_months(date(2028, 1, 31), 1) == date(2028, 2, 29)


def test_add_months_rolls_year():
    assert add_months(date(2026, 11, 5), 3) == date(2027, 2, 5)


def test_day_helpers():
    assert days_between(date(2026, 1, 1), date(2026, 3, 2)) == 60
    assert shift_days(date(2026, 1, 1), 30) == date(2026, 1, 31)
    assert shift_days(date(2026, 3, 2), -30) == date(2026, 1, 31)
