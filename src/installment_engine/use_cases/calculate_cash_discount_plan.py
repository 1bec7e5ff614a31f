from __future__ import annotations

import logging
from dataclasses import dataclass

from installment_engine.domain.cash_discount import (
    CASH_DISCOUNT_RATE,
    CASH_ENTRY_SHARE,
    CashDiscountPlan,
    CashDiscountRequest,
)
from installment_engine.domain.money import as_percent, portion, round_currency

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CalculateCashDiscountPlan:
    """
    Cash payment with a 5% discount.

    The discounted total splits into a 20% entry and an 80% balance paid as a
    single instrument. Balance = discounted_total - entry, so the two parts
    always reconstruct the discounted total exactly.
    """

    def execute(self, req: CashDiscountRequest) -> CashDiscountPlan:
        req.validate()

        principal = round_currency(req.total)
        discount_amount = portion(principal, CASH_DISCOUNT_RATE)
        discounted_total = principal - discount_amount
        entry_amount = portion(discounted_total, CASH_ENTRY_SHARE)

        logger.debug(
            "Cash-discount plan calculated",
            extra={"total": str(principal), "discount": str(discount_amount)},
        )

        return CashDiscountPlan(
            total=principal,
            discount_percent=as_percent(CASH_DISCOUNT_RATE),
            discount_amount=discount_amount,
            discounted_total=discounted_total,
            total_financed=discounted_total,
            entry_amount=entry_amount,
            balance_amount=discounted_total - entry_amount,
        )
