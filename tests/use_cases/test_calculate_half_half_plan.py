from datetime import date
from decimal import Decimal

import pytest

from installment_engine.domain.errors import InvalidInput
from installment_engine.domain.half_half import HalfHalfRequest
from installment_engine.domain.money import round_currency
from installment_engine.use_cases.calculate_half_half_plan import CalculateHalfHalfPlan

CONTRACT = date(2026, 1, 1)


# ============================================================================
# VALIDATION TESTS
# ============================================================================


def test_rejects_event_59_days_after_contract():
    with pytest.raises(InvalidInput, match="at least 60 days") as exc_info:
        CalculateHalfHalfPlan().execute(
            HalfHalfRequest(total=Decimal("10000"), contract_date=CONTRACT, event_date=date(2026, 3, 1))
        )

    assert exc_info.value.context["lead_days"] == 59


def test_rejects_event_before_contract():
    with pytest.raises(InvalidInput, match="event_date must be after contract_date"):
        CalculateHalfHalfPlan().execute(
            HalfHalfRequest(total=Decimal("10000"), contract_date=CONTRACT, event_date=date(2025, 12, 1))
        )


def test_rejects_zero_total():
    with pytest.raises(InvalidInput, match="total must be > 0"):
        CalculateHalfHalfPlan().execute(
            HalfHalfRequest(total=0, contract_date=CONTRACT, event_date=date(2026, 12, 1))
        )


# ============================================================================
# CALCULATION TESTS
# ============================================================================


def test_sixty_days_has_no_interest_periods():
    plan = CalculateHalfHalfPlan().execute(
        HalfHalfRequest(total=Decimal("10000"), contract_date=CONTRACT, event_date=date(2026, 3, 2))
    )

    assert plan.entry_amount == Decimal("2000.00")
    assert plan.first_boleto_amount == Decimal("3000.00")
    assert plan.first_boleto_due_date == date(2026, 1, 31)
    assert plan.balance_due_date == date(2026, 1, 31)
    assert plan.interest_periods == 0
    assert plan.balance_base == Decimal("5000.00")
    assert plan.balance_amount == Decimal("5000.00")
    assert plan.interest_amount == Decimal("0.00")
    assert plan.total_financed == Decimal("10000.00")


def test_balance_compounds_over_whole_thirty_day_periods():
    """Jan 31 to Jun 1 is 121 days: four whole periods."""
    plan = CalculateHalfHalfPlan().execute(
        HalfHalfRequest(total=Decimal("10000"), contract_date=CONTRACT, event_date=date(2026, 7, 1))
    )

    expected = round_currency(Decimal("5000") * Decimal("1.0129") ** 4)
    assert plan.balance_due_date == date(2026, 6, 1)
    assert plan.interest_periods == 4
    assert plan.balance_amount == expected
    assert plan.interest_amount == expected - Decimal("5000.00")
    assert plan.total_financed == Decimal("5000.00") + expected


def test_explicit_rate_overrides_default():
    plan = CalculateHalfHalfPlan().execute(
        HalfHalfRequest(
            total=Decimal("10000"),
            contract_date=CONTRACT,
            event_date=date(2026, 7, 1),
            rate=Decimal("0"),
        )
    )

    assert plan.monthly_rate == Decimal("0")
    assert plan.balance_amount == Decimal("5000.00")


def test_parts_reconstruct_total_financed():
    plan = CalculateHalfHalfPlan().execute(
        HalfHalfRequest(total=Decimal("7777.77"), contract_date=CONTRACT, event_date=date(2027, 5, 20))
    )

    assert plan.entry_amount + plan.first_boleto_amount + plan.balance_base == plan.total
    assert plan.entry_amount + plan.first_boleto_amount + plan.balance_amount == plan.total_financed
