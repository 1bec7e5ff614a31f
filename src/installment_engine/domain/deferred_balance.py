from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from installment_engine.domain.errors import InvalidInput
from installment_engine.domain.money import is_positive_amount
from installment_engine.domain.schedule import Installment


DEFERRED_ENTRY_SHARE = Decimal("0.20")
DEFERRED_BALANCE_SHARE = Decimal("0.30")
DEFERRED_MONTHLY_RATE = Decimal("0.0129")
BALANCE_DUE_DAYS_BEFORE_EVENT = 30
MIN_LEAD_MONTHS = 2


@dataclass(frozen=True, slots=True)
class DeferredBalanceRequest:
    total: Decimal
    event_date: date
    reference_date: date | None = None

    def validate(self) -> None:
        if not is_positive_amount(self.total):
            raise InvalidInput("total must be > 0", field="total")


@dataclass(frozen=True, slots=True)
class DeferredBalancePlan:
    total: Decimal
    total_financed: Decimal
    entry_amount: Decimal
    installment_amount: Decimal
    installment_count: int
    installments: tuple[Installment, ...]
    balance_amount: Decimal
    balance_due_date: date
    interest_amount: Decimal
    monthly_rate: Decimal
    interest_rate_percent: Decimal
