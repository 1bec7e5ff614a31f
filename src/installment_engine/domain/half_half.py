from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from installment_engine.domain.calendar import days_between
from installment_engine.domain.errors import InvalidInput
from installment_engine.domain.money import is_positive_amount


HALF_HALF_ENTRY_SHARE = Decimal("0.20")
HALF_HALF_FIRST_BOLETO_SHARE = Decimal("0.30")
HALF_HALF_DEFAULT_MONTHLY_RATE = Decimal("0.0129")
MAX_HALF_HALF_RATE = Decimal("1")
FIRST_BOLETO_DAYS_AFTER_CONTRACT = 30
BALANCE_DAYS_BEFORE_EVENT = 30
MIN_DAYS_CONTRACT_TO_EVENT = 60
INTEREST_PERIOD_DAYS = 30


@dataclass(frozen=True, slots=True)
class HalfHalfRequest:
    total: Decimal
    contract_date: date
    event_date: date
    rate: Decimal | None = None

    def validate(self) -> None:
        if not is_positive_amount(self.total):
            raise InvalidInput("total must be > 0", field="total")
        if self.event_date <= self.contract_date:
            raise InvalidInput("event_date must be after contract_date", field="event_date")
        lead_days = days_between(self.contract_date, self.event_date)
        if lead_days < MIN_DAYS_CONTRACT_TO_EVENT:
            raise InvalidInput(
                f"event_date must be at least {MIN_DAYS_CONTRACT_TO_EVENT} days after contract_date",
                field="event_date",
                lead_days=lead_days,
            )


@dataclass(frozen=True, slots=True)
class HalfHalfPlan:
    total: Decimal
    entry_amount: Decimal
    first_boleto_amount: Decimal
    first_boleto_due_date: date
    balance_base: Decimal
    balance_amount: Decimal
    balance_due_date: date
    interest_periods: int
    total_financed: Decimal
    interest_amount: Decimal
    monthly_rate: Decimal
    interest_rate_percent: Decimal
