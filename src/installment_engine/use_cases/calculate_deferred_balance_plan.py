from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Callable

from installment_engine.domain.calendar import add_months, months_until, shift_days
from installment_engine.domain.deferred_balance import (
    BALANCE_DUE_DAYS_BEFORE_EVENT,
    DEFERRED_BALANCE_SHARE,
    DEFERRED_ENTRY_SHARE,
    DEFERRED_MONTHLY_RATE,
    DeferredBalancePlan,
    DeferredBalanceRequest,
)
from installment_engine.domain.errors import InvalidInput
from installment_engine.domain.money import (
    as_percent,
    compound_growth,
    portion,
    round_currency,
    to_decimal,
)
from installment_engine.domain.schedule import split_evenly

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CalculateDeferredBalancePlan:
    """
    Deferred-balance ("Pagamento Indaiá") plan.

    The total grows by compound interest over the months available before the
    event (minus the notice month), then splits into:
    - 20% entry at signing
    - 50% across `periods` monthly installments, starting one month after the reference date
    - 30% closing balance due 30 days before the event

    Rounding policy:
    - total_financed, entry and balance are rounded to cents independently
    - the installment bucket is whatever remains, so the parts reconstruct
      total_financed exactly; the last installment absorbs split drift

    Events less than two months away are still calculated; the validator flags them.
    """

    monthly_rate: Decimal = DEFERRED_MONTHLY_RATE
    today: Callable[[], date] = date.today

    def execute(self, req: DeferredBalanceRequest) -> DeferredBalancePlan:
        req.validate()

        reference = req.reference_date or self.today()
        principal = round_currency(req.total)
        periods = months_until(req.event_date, reference)

        total_financed = round_currency(compound_growth(principal, self.monthly_rate, periods))
        entry_amount = portion(total_financed, DEFERRED_ENTRY_SHARE)
        balance_amount = portion(total_financed, DEFERRED_BALANCE_SHARE)

        due_dates = [add_months(reference, month) for month in range(1, periods + 1)]
        installments = split_evenly(total_financed - entry_amount - balance_amount, periods, due_dates)

        plan = DeferredBalancePlan(
            total=principal,
            total_financed=total_financed,
            entry_amount=entry_amount,
            installment_amount=installments[0].amount,
            installment_count=periods,
            installments=installments,
            balance_amount=balance_amount,
            balance_due_date=shift_days(req.event_date, -BALANCE_DUE_DAYS_BEFORE_EVENT),
            interest_amount=total_financed - principal,
            monthly_rate=self.monthly_rate,
            interest_rate_percent=as_percent(self.monthly_rate),
        )

        logger.debug(
            "Deferred-balance plan calculated",
            extra={
                "total": str(principal),
                "periods": periods,
                "total_financed": str(total_financed),
            },
        )
        return plan

    def minimum_entry(self, req: DeferredBalanceRequest) -> Decimal:
        """Entry a proposal must collect to qualify for this model."""
        return self.execute(req).entry_amount

    def accepts_entry(self, req: DeferredBalanceRequest, entry_value: Decimal) -> bool:
        """Whether a proposed entry covers the model's entry; False if the request itself is invalid."""
        try:
            minimum = self.minimum_entry(req)
        except InvalidInput:
            return False
        return to_decimal(entry_value) >= minimum
