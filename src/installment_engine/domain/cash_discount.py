from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from installment_engine.domain.errors import InvalidInput
from installment_engine.domain.money import is_positive_amount


CASH_DISCOUNT_RATE = Decimal("0.05")
CASH_ENTRY_SHARE = Decimal("0.20")


@dataclass(frozen=True, slots=True)
class CashDiscountRequest:
    total: Decimal

    def validate(self) -> None:
        if not is_positive_amount(self.total):
            raise InvalidInput("total must be > 0", field="total")


@dataclass(frozen=True, slots=True)
class CashDiscountPlan:
    total: Decimal
    discount_percent: Decimal
    discount_amount: Decimal
    discounted_total: Decimal
    total_financed: Decimal
    entry_amount: Decimal
    # Paid as a single instrument, no installments
    balance_amount: Decimal
