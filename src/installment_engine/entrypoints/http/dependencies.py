"""
Dependency injection for FastAPI routes.

Use cases are stateless frozen dataclasses, so each request gets a fresh,
cheap instance built from the current configuration. Nothing is cached.
"""

from __future__ import annotations

from installment_engine.infra.config import monthly_interest_rate
from installment_engine.use_cases.calculate_advisor_condition_plan import CalculateAdvisorConditionPlan
from installment_engine.use_cases.calculate_card_installments_plan import CalculateCardInstallmentsPlan
from installment_engine.use_cases.calculate_cash_discount_plan import CalculateCashDiscountPlan
from installment_engine.use_cases.calculate_deferred_balance_plan import CalculateDeferredBalancePlan
from installment_engine.use_cases.calculate_fixed_installments_plan import (
    CalculateFixedInstallmentsPlan,
)
from installment_engine.use_cases.calculate_half_half_plan import CalculateHalfHalfPlan


def get_deferred_balance_use_case() -> CalculateDeferredBalancePlan:
    """
    Factory for the deferred-balance calculator.

    The monthly rate comes from INSTALLMENT_ENGINE_MONTHLY_RATE (default 0.0129).

    Returns:
        CalculateDeferredBalancePlan: Configured use case instance
    """
    return CalculateDeferredBalancePlan(monthly_rate=monthly_interest_rate())


def get_fixed_installments_use_case() -> CalculateFixedInstallmentsPlan:
    return CalculateFixedInstallmentsPlan()


def get_cash_discount_use_case() -> CalculateCashDiscountPlan:
    return CalculateCashDiscountPlan()


def get_card_installments_use_case() -> CalculateCardInstallmentsPlan:
    """Card calculator; requests without card_rate fall back to the configured rate."""
    return CalculateCardInstallmentsPlan(default_rate=monthly_interest_rate())


def get_advisor_condition_use_case() -> CalculateAdvisorConditionPlan:
    return CalculateAdvisorConditionPlan(default_rate=monthly_interest_rate())


def get_half_half_use_case() -> CalculateHalfHalfPlan:
    return CalculateHalfHalfPlan(default_rate=monthly_interest_rate())
