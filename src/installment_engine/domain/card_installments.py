from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from installment_engine.domain.errors import InvalidInput
from installment_engine.domain.money import is_positive_amount
from installment_engine.domain.schedule import Installment


CARD_ENTRY_SHARE = Decimal("0.20")
CARD_DEFAULT_MONTHLY_RATE = Decimal("0.0129")
MIN_CARD_INSTALLMENTS = 1
MAX_CARD_INSTALLMENTS = 18
MIN_CARD_RATE = Decimal("0")
MAX_CARD_RATE = Decimal("1")


@dataclass(frozen=True, slots=True)
class CardInstallmentsRequest:
    total: Decimal
    installment_count: int
    card_rate: Decimal | None = None

    def validate(self) -> None:
        if not is_positive_amount(self.total):
            raise InvalidInput("total must be > 0", field="total")
        if self.installment_count < MIN_CARD_INSTALLMENTS:
            raise InvalidInput(
                f"installment_count must be >= {MIN_CARD_INSTALLMENTS}", field="installment_count"
            )
        if self.installment_count > MAX_CARD_INSTALLMENTS:
            raise InvalidInput(
                f"installment_count must be <= {MAX_CARD_INSTALLMENTS}", field="installment_count"
            )


@dataclass(frozen=True, slots=True)
class CardInstallmentsPlan:
    total: Decimal
    entry_amount: Decimal
    remaining_amount: Decimal
    remaining_with_interest: Decimal
    installment_amount: Decimal
    installment_count: int
    installments: tuple[Installment, ...]
    total_financed: Decimal
    interest_amount: Decimal
    monthly_rate: Decimal
    interest_rate_percent: Decimal
