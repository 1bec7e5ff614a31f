from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from installment_engine.domain.calendar import days_between, shift_days
from installment_engine.domain.half_half import (
    BALANCE_DAYS_BEFORE_EVENT,
    FIRST_BOLETO_DAYS_AFTER_CONTRACT,
    HALF_HALF_DEFAULT_MONTHLY_RATE,
    HALF_HALF_ENTRY_SHARE,
    HALF_HALF_FIRST_BOLETO_SHARE,
    INTEREST_PERIOD_DAYS,
    MAX_HALF_HALF_RATE,
    HalfHalfPlan,
    HalfHalfRequest,
)
from installment_engine.domain.money import (
    MAX_COMPOUND_PERIODS,
    as_percent,
    clamp,
    compound_growth,
    portion,
    round_currency,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CalculateHalfHalfPlan:
    """
    50/50 plan: half paid up front in two short-term parts, half near the event.

    - 20% entry at signing
    - 30% first boleto due 30 days after the contract date
    - 50% balance due 30 days before the event date

    Only the balance accrues interest, compounded over the whole 30-day periods
    between the first-boleto due date and the balance due date.
    """

    default_rate: Decimal = HALF_HALF_DEFAULT_MONTHLY_RATE

    def execute(self, req: HalfHalfRequest) -> HalfHalfPlan:
        req.validate()

        rate = clamp(self.default_rate if req.rate is None else req.rate, 0, MAX_HALF_HALF_RATE)

        principal = round_currency(req.total)
        entry_amount = portion(principal, HALF_HALF_ENTRY_SHARE)
        first_boleto_amount = portion(principal, HALF_HALF_FIRST_BOLETO_SHARE)
        balance_base = principal - entry_amount - first_boleto_amount

        first_boleto_due_date = shift_days(req.contract_date, FIRST_BOLETO_DAYS_AFTER_CONTRACT)
        balance_due_date = shift_days(req.event_date, -BALANCE_DAYS_BEFORE_EVENT)

        interest_days = max(0, days_between(first_boleto_due_date, balance_due_date))
        interest_periods = min(interest_days // INTEREST_PERIOD_DAYS, MAX_COMPOUND_PERIODS)

        balance_amount = round_currency(compound_growth(balance_base, rate, interest_periods))
        interest_amount = balance_amount - balance_base

        logger.debug(
            "Half-half plan calculated",
            extra={
                "total": str(principal),
                "interest_periods": interest_periods,
                "balance": str(balance_amount),
            },
        )

        return HalfHalfPlan(
            total=principal,
            entry_amount=entry_amount,
            first_boleto_amount=first_boleto_amount,
            first_boleto_due_date=first_boleto_due_date,
            balance_base=balance_base,
            balance_amount=balance_amount,
            balance_due_date=balance_due_date,
            interest_periods=interest_periods,
            total_financed=entry_amount + first_boleto_amount + balance_amount,
            interest_amount=interest_amount,
            monthly_rate=rate,
            interest_rate_percent=as_percent(rate),
        )
