"""Property-based checks shared by every calculator."""

from datetime import date, timedelta
from decimal import Decimal

from hypothesis import given, settings, strategies as st

from installment_engine.domain.advisor_condition import ADVISOR_MIN_INSTALLMENT, AdvisorConditionRequest
from installment_engine.domain.card_installments import CardInstallmentsRequest
from installment_engine.domain.cash_discount import CashDiscountRequest
from installment_engine.domain.deferred_balance import DeferredBalanceRequest
from installment_engine.domain.fixed_installments import FixedInstallmentsRequest
from installment_engine.domain.half_half import HalfHalfRequest
from installment_engine.domain.schedule import schedule_total
from installment_engine.use_cases.calculate_advisor_condition_plan import CalculateAdvisorConditionPlan
from installment_engine.use_cases.calculate_card_installments_plan import CalculateCardInstallmentsPlan
from installment_engine.use_cases.calculate_cash_discount_plan import CalculateCashDiscountPlan
from installment_engine.use_cases.calculate_deferred_balance_plan import CalculateDeferredBalancePlan
from installment_engine.use_cases.calculate_fixed_installments_plan import CalculateFixedInstallmentsPlan
from installment_engine.use_cases.calculate_half_half_plan import CalculateHalfHalfPlan

REFERENCE = date(2026, 3, 1)

totals = st.decimals(min_value=Decimal("0.01"), max_value=Decimal("1000000000"), places=2)
rates = st.decimals(min_value=Decimal("0"), max_value=Decimal("0.2"), places=4)


@settings(max_examples=200, deadline=None)
@given(total=totals, lead_days=st.integers(min_value=-365, max_value=3650))
def test_deferred_balance_reconstructs_total_financed(total, lead_days):
    uc = CalculateDeferredBalancePlan(today=lambda: REFERENCE)
    req = DeferredBalanceRequest(total=total, event_date=REFERENCE + timedelta(days=lead_days))

    plan = uc.execute(req)

    assert 1 <= plan.installment_count <= 600
    assert plan.entry_amount + schedule_total(plan.installments) + plan.balance_amount == plan.total_financed
    assert all(inst.amount >= 0 for inst in plan.installments)
    assert plan.total_financed >= plan.total
    assert uc.execute(req) == plan


@settings(max_examples=200, deadline=None)
@given(total=totals)
def test_fixed_and_cash_reconstruct(total):
    fixed = CalculateFixedInstallmentsPlan().execute(FixedInstallmentsRequest(total=total))
    cash = CalculateCashDiscountPlan().execute(CashDiscountRequest(total=total))

    assert fixed.entry_amount + schedule_total(fixed.installments) == fixed.total
    assert cash.entry_amount + cash.balance_amount == cash.discounted_total
    assert cash.discounted_total + cash.discount_amount == cash.total


@settings(max_examples=200, deadline=None)
@given(total=totals, count=st.integers(min_value=1, max_value=18), rate=rates)
def test_card_installments_reconstruct(total, count, rate):
    plan = CalculateCardInstallmentsPlan().execute(
        CardInstallmentsRequest(total=total, installment_count=count, card_rate=rate)
    )

    assert schedule_total(plan.installments) == plan.remaining_with_interest
    assert plan.entry_amount + plan.remaining_with_interest == plan.total_financed
    assert plan.interest_amount >= 0


@settings(max_examples=200, deadline=None)
@given(total=totals, lead_days=st.integers(min_value=60, max_value=3650), rate=rates)
def test_half_half_reconstructs(total, lead_days, rate):
    plan = CalculateHalfHalfPlan().execute(
        HalfHalfRequest(
            total=total,
            contract_date=REFERENCE,
            event_date=REFERENCE + timedelta(days=lead_days),
            rate=rate,
        )
    )

    assert plan.entry_amount + plan.first_boleto_amount + plan.balance_base == plan.total
    assert plan.entry_amount + plan.first_boleto_amount + plan.balance_amount == plan.total_financed
    assert plan.interest_periods >= 0


@settings(max_examples=200, deadline=None)
@given(
    entry=st.decimals(min_value=Decimal("1000.00"), max_value=Decimal("100000"), places=2),
    entry_count=st.integers(min_value=1, max_value=12),
    intermediate_count=st.integers(min_value=5, max_value=60),
    closing_count=st.integers(min_value=1, max_value=18),
    extra=st.decimals(min_value=Decimal("0"), max_value=Decimal("1000000"), places=2),
    rate=rates,
)
def test_advisor_condition_reconstructs(entry, entry_count, intermediate_count, closing_count, extra, rate):
    total = entry + ADVISOR_MIN_INSTALLMENT * intermediate_count + extra
    plan = CalculateAdvisorConditionPlan().execute(
        AdvisorConditionRequest(
            total=total,
            entry_value=entry,
            entry_installment_count=entry_count,
            intermediate_installment_count=intermediate_count,
            closing_installment_count=closing_count,
            rate=rate,
        )
    )

    closing = plan.closing_balance or Decimal("0.00")
    intermediates = plan.intermediate_installment_amount * plan.intermediate_installment_count
    assert schedule_total(plan.entry_installments) == plan.entry_amount
    assert plan.entry_amount + intermediates + closing == plan.total
    assert schedule_total(plan.closing_installments) == closing + plan.interest_amount
    assert plan.total_financed == plan.total + plan.interest_amount
    assert all(inst.amount > 0 for inst in plan.entry_installments + plan.closing_installments)
    assert plan.has_closing_balance == (plan.closing_balance is not None)
