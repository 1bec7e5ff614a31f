from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from installment_engine.domain.errors import InvalidInput
from installment_engine.domain.money import is_positive_amount, round_currency, to_decimal
from installment_engine.domain.schedule import Installment


ADVISOR_MIN_ENTRY = Decimal("1000.00")
ADVISOR_MIN_INSTALLMENT = Decimal("600.00")
MAX_ENTRY_INSTALLMENTS = 12
MIN_INTERMEDIATE_INSTALLMENTS = 5
MAX_CLOSING_INSTALLMENTS = 18
ADVISOR_DEFAULT_MONTHLY_RATE = Decimal("0.0129")
MAX_ADVISOR_RATE = Decimal("1")


def intermediate_installment_value(total: Decimal, entry_value: Decimal, count: int) -> Decimal:
    """Unrounded (total - entry) / count."""
    return (to_decimal(total) - to_decimal(entry_value)) / count


@dataclass(frozen=True, slots=True)
class AdvisorConditionRequest:
    total: Decimal
    entry_value: Decimal
    entry_installment_count: int
    intermediate_installment_count: int
    closing_installment_count: int = 1
    rate: Decimal | None = None

    def validate(self) -> None:
        if not is_positive_amount(self.total):
            raise InvalidInput("total must be > 0", field="total")
        if not is_positive_amount(self.entry_value) or to_decimal(self.entry_value) < ADVISOR_MIN_ENTRY:
            raise InvalidInput(f"entry_value must be >= {ADVISOR_MIN_ENTRY}", field="entry_value")
        if not 1 <= self.entry_installment_count <= MAX_ENTRY_INSTALLMENTS:
            raise InvalidInput(
                f"entry_installment_count must be between 1 and {MAX_ENTRY_INSTALLMENTS}",
                field="entry_installment_count",
            )
        if self.intermediate_installment_count < MIN_INTERMEDIATE_INSTALLMENTS:
            raise InvalidInput(
                f"intermediate_installment_count must be >= {MIN_INTERMEDIATE_INSTALLMENTS}",
                field="intermediate_installment_count",
            )
        if not 1 <= self.closing_installment_count <= MAX_CLOSING_INSTALLMENTS:
            raise InvalidInput(
                f"closing_installment_count must be between 1 and {MAX_CLOSING_INSTALLMENTS}",
                field="closing_installment_count",
            )
        if self.rate is not None:
            rate = to_decimal(self.rate)
            if not rate.is_finite() or rate < 0:
                raise InvalidInput("rate must be a finite value >= 0", field="rate")

        installment = intermediate_installment_value(
            self.total, self.entry_value, self.intermediate_installment_count
        )
        if installment < ADVISOR_MIN_INSTALLMENT:
            raise InvalidInput(
                f"intermediate installment would be {round_currency(installment)}, "
                f"below the minimum of {ADVISOR_MIN_INSTALLMENT}",
                field="intermediate_installment_count",
                computed=str(round_currency(installment)),
                minimum=str(ADVISOR_MIN_INSTALLMENT),
            )


@dataclass(frozen=True, slots=True)
class AdvisorConditionPlan:
    total: Decimal
    entry_amount: Decimal
    entry_installment_count: int
    entry_installment_amount: Decimal
    entry_installments: tuple[Installment, ...]
    intermediate_installment_count: int
    intermediate_installment_amount: Decimal
    has_closing_balance: bool
    # Leftover before interest; None when intermediates exhaust the remainder
    closing_balance: Decimal | None
    closing_installment_count: int
    closing_installment_amount: Decimal | None
    closing_installments: tuple[Installment, ...]
    total_financed: Decimal
    interest_amount: Decimal
    monthly_rate: Decimal
    interest_rate_percent: Decimal
