from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from installment_engine.domain.errors import InvalidInput
from installment_engine.domain.money import is_positive_amount
from installment_engine.domain.schedule import Installment


FIXED_ENTRY_SHARE = Decimal("0.20")
FIXED_INSTALLMENT_SHARE = Decimal("0.20")
FIXED_INSTALLMENT_COUNT = 4


@dataclass(frozen=True, slots=True)
class FixedInstallmentsRequest:
    total: Decimal

    def validate(self) -> None:
        if not is_positive_amount(self.total):
            raise InvalidInput("total must be > 0", field="total")


@dataclass(frozen=True, slots=True)
class FixedInstallmentsPlan:
    total: Decimal
    total_financed: Decimal
    entry_amount: Decimal
    installment_amount: Decimal
    installment_count: int
    installments: tuple[Installment, ...]
    has_balance: bool = False
