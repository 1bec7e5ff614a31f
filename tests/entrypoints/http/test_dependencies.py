"""
Unit tests for FastAPI dependency injection functions.

This test suite verifies the dependency wiring logic:
- each factory builds the matching use case
- rates come from configuration at call time
- no caching of stateful objects; each request gets a fresh instance
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from installment_engine.entrypoints.http.dependencies import (
    get_advisor_condition_use_case,
    get_card_installments_use_case,
    get_cash_discount_use_case,
    get_deferred_balance_use_case,
    get_fixed_installments_use_case,
    get_half_half_use_case,
)
from installment_engine.use_cases.calculate_advisor_condition_plan import CalculateAdvisorConditionPlan
from installment_engine.use_cases.calculate_card_installments_plan import CalculateCardInstallmentsPlan
from installment_engine.use_cases.calculate_cash_discount_plan import CalculateCashDiscountPlan
from installment_engine.use_cases.calculate_deferred_balance_plan import CalculateDeferredBalancePlan
from installment_engine.use_cases.calculate_fixed_installments_plan import CalculateFixedInstallmentsPlan
from installment_engine.use_cases.calculate_half_half_plan import CalculateHalfHalfPlan


@pytest.fixture(autouse=True)
def _default_rate(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("INSTALLMENT_ENGINE_MONTHLY_RATE", raising=False)


@pytest.mark.parametrize(
    "factory, use_case_type",
    [
        (get_deferred_balance_use_case, CalculateDeferredBalancePlan),
        (get_fixed_installments_use_case, CalculateFixedInstallmentsPlan),
        (get_cash_discount_use_case, CalculateCashDiscountPlan),
        (get_card_installments_use_case, CalculateCardInstallmentsPlan),
        (get_advisor_condition_use_case, CalculateAdvisorConditionPlan),
        (get_half_half_use_case, CalculateHalfHalfPlan),
    ],
)
def test_factory_builds_matching_use_case(factory, use_case_type) -> None:
    assert isinstance(factory(), use_case_type)


def test_deferred_balance_uses_default_rate() -> None:
    assert get_deferred_balance_use_case().monthly_rate == Decimal("0.0129")


def test_rates_follow_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Configured rate is read on every call, not at import time."""
    monkeypatch.setenv("INSTALLMENT_ENGINE_MONTHLY_RATE", "0.02")

    assert get_deferred_balance_use_case().monthly_rate == Decimal("0.02")
    assert get_card_installments_use_case().default_rate == Decimal("0.02")
    assert get_advisor_condition_use_case().default_rate == Decimal("0.02")
    assert get_half_half_use_case().default_rate == Decimal("0.02")


def test_dependencies_are_not_cached() -> None:
    """Each call returns a fresh use case instance."""
    assert get_deferred_balance_use_case() is not get_deferred_balance_use_case()
    assert get_card_installments_use_case() is not get_card_installments_use_case()


def test_invalid_configured_rate_fails_loudly(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("INSTALLMENT_ENGINE_MONTHLY_RATE", "abc")

    with pytest.raises(RuntimeError, match="INSTALLMENT_ENGINE_MONTHLY_RATE"):
        get_half_half_use_case()
