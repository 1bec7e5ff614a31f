from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal, ROUND_DOWN

from installment_engine.domain.advisor_condition import (
    ADVISOR_DEFAULT_MONTHLY_RATE,
    MAX_ADVISOR_RATE,
    AdvisorConditionPlan,
    AdvisorConditionRequest,
)
from installment_engine.domain.money import (
    CENT,
    ZERO,
    as_percent,
    clamp,
    compound_growth,
    round_currency,
)
from installment_engine.domain.schedule import Installment, split_evenly

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CalculateAdvisorConditionPlan:
    """
    Advisor special condition: a negotiated long-tail arrangement.

    - Entry (>= R$ 1,000.00) split into 1 to 12 interest-free installments
    - (total - entry) split into at least 5 equal intermediate installments,
      truncated to cents and never below R$ 600.00 each
    - Cents the exact division cannot place become the closing balance. When
      it is split into more than one installment it compounds at the monthly
      rate over that many periods; a single closing payment carries no interest.
      When the grown balance cannot give each closing installment at least one
      cent, it is paid as a single interest-free closing payment instead.

    Guard clauses run even when the caller skipped the validator.
    """

    default_rate: Decimal = ADVISOR_DEFAULT_MONTHLY_RATE

    def execute(self, req: AdvisorConditionRequest) -> AdvisorConditionPlan:
        req.validate()

        rate = clamp(self.default_rate if req.rate is None else req.rate, 0, MAX_ADVISOR_RATE)
        intermediate_count = req.intermediate_installment_count

        principal = round_currency(req.total)
        entry_amount = round_currency(req.entry_value)
        entry_installments = split_evenly(entry_amount, req.entry_installment_count)

        remaining = principal - entry_amount
        intermediate_amount = (remaining / intermediate_count).quantize(CENT, rounding=ROUND_DOWN)
        leftover = remaining - intermediate_amount * intermediate_count

        closing_installments: tuple[Installment, ...] = ()
        interest_amount = ZERO
        closing_with_interest = ZERO
        if leftover > 0 and req.closing_installment_count > 1:
            closing_with_interest = round_currency(
                compound_growth(leftover, rate, req.closing_installment_count)
            )

        if closing_with_interest >= CENT * req.closing_installment_count:
            closing_installments = split_evenly(closing_with_interest, req.closing_installment_count)
            interest_amount = closing_with_interest - leftover
        elif leftover > 0:
            # Too few cents to fill every closing installment
            if req.closing_installment_count > 1:
                logger.debug(
                    "Closing balance collapsed into a single payment",
                    extra={
                        "closing_balance": str(leftover),
                        "requested_installments": req.closing_installment_count,
                    },
                )
            closing_installments = split_evenly(leftover, 1)

        has_closing_balance = bool(closing_installments)

        logger.debug(
            "Advisor-condition plan calculated",
            extra={
                "total": str(principal),
                "entry": str(entry_amount),
                "intermediate_installments": intermediate_count,
                "closing_balance": str(leftover) if has_closing_balance else None,
            },
        )

        return AdvisorConditionPlan(
            total=principal,
            entry_amount=entry_amount,
            entry_installment_count=req.entry_installment_count,
            entry_installment_amount=entry_installments[0].amount,
            entry_installments=entry_installments,
            intermediate_installment_count=intermediate_count,
            intermediate_installment_amount=intermediate_amount,
            has_closing_balance=has_closing_balance,
            closing_balance=leftover if has_closing_balance else None,
            closing_installment_count=len(closing_installments),
            closing_installment_amount=closing_installments[0].amount if has_closing_balance else None,
            closing_installments=closing_installments,
            total_financed=principal + interest_amount,
            interest_amount=interest_amount,
            monthly_rate=rate,
            interest_rate_percent=as_percent(rate),
        )
