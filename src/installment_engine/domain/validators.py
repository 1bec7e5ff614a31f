"""
Per-model precondition checkers.

Validators never raise for business-rule violations: each returns a list of
human-readable messages (empty means the request is acceptable) so callers
can surface them in forms before committing to a model. The calculators
keep their own guard clauses and stay safe when validation is skipped.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Callable

from installment_engine.domain.advisor_condition import (
    ADVISOR_MIN_ENTRY,
    ADVISOR_MIN_INSTALLMENT,
    MAX_CLOSING_INSTALLMENTS,
    MAX_ENTRY_INSTALLMENTS,
    MIN_INTERMEDIATE_INSTALLMENTS,
    AdvisorConditionRequest,
    intermediate_installment_value,
)
from installment_engine.domain.calendar import calendar_months_between, days_between
from installment_engine.domain.card_installments import (
    MAX_CARD_INSTALLMENTS,
    MIN_CARD_INSTALLMENTS,
    CardInstallmentsRequest,
)
from installment_engine.domain.cash_discount import CashDiscountRequest
from installment_engine.domain.deferred_balance import MIN_LEAD_MONTHS, DeferredBalanceRequest
from installment_engine.domain.errors import InvalidInput
from installment_engine.domain.fixed_installments import FixedInstallmentsRequest
from installment_engine.domain.half_half import MIN_DAYS_CONTRACT_TO_EVENT, HalfHalfRequest
from installment_engine.domain.money import is_positive_amount, round_currency, to_decimal
from installment_engine.domain.payment_model import PaymentModel


TOTAL_NOT_POSITIVE = "Total value must be greater than zero"
NEGATIVE_RATE = "Interest rate cannot be negative"


def _negative_rate(rate: Any) -> bool:
    if rate is None:
        return False
    try:
        value = to_decimal(rate)
    except InvalidInput:
        return True
    return not value.is_finite() or value < 0


def validate_deferred_balance(req: DeferredBalanceRequest, today: date | None = None) -> list[str]:
    errors: list[str] = []
    reference = req.reference_date or today or date.today()

    if not is_positive_amount(req.total):
        errors.append(TOTAL_NOT_POSITIVE)

    if req.event_date <= reference:
        errors.append("Event date must be in the future")

    if calendar_months_between(req.event_date, reference) < MIN_LEAD_MONTHS:
        errors.append(
            f"Event must be at least {MIN_LEAD_MONTHS} months away to use the deferred-balance model"
        )

    return errors


def validate_fixed_installments(req: FixedInstallmentsRequest) -> list[str]:
    if not is_positive_amount(req.total):
        return [TOTAL_NOT_POSITIVE]
    return []


def validate_cash_discount(req: CashDiscountRequest) -> list[str]:
    if not is_positive_amount(req.total):
        return [TOTAL_NOT_POSITIVE]
    return []


def validate_card_installments(req: CardInstallmentsRequest) -> list[str]:
    errors: list[str] = []

    if not is_positive_amount(req.total):
        errors.append(TOTAL_NOT_POSITIVE)

    if req.installment_count < MIN_CARD_INSTALLMENTS:
        errors.append(f"Installment count must be at least {MIN_CARD_INSTALLMENTS}")

    if req.installment_count > MAX_CARD_INSTALLMENTS:
        errors.append(f"Installment count cannot exceed {MAX_CARD_INSTALLMENTS}")

    if _negative_rate(req.card_rate):
        errors.append(NEGATIVE_RATE)

    return errors


def validate_advisor_condition(req: AdvisorConditionRequest) -> list[str]:
    errors: list[str] = []
    total_ok = is_positive_amount(req.total)
    entry_ok = is_positive_amount(req.entry_value)

    if not total_ok:
        errors.append(TOTAL_NOT_POSITIVE)

    if not entry_ok or to_decimal(req.entry_value) < ADVISOR_MIN_ENTRY:
        errors.append(f"Minimum entry value is R$ {ADVISOR_MIN_ENTRY}")

    if not 1 <= req.entry_installment_count <= MAX_ENTRY_INSTALLMENTS:
        errors.append(f"Entry installments must be between 1 and {MAX_ENTRY_INSTALLMENTS}")

    if req.intermediate_installment_count < MIN_INTERMEDIATE_INSTALLMENTS:
        errors.append(
            f"At least {MIN_INTERMEDIATE_INSTALLMENTS} intermediate installments are required for this model"
        )

    if req.closing_installment_count < 1:
        errors.append("Closing installments must be at least 1")

    if req.closing_installment_count > MAX_CLOSING_INSTALLMENTS:
        errors.append(f"Closing balance can be split into at most {MAX_CLOSING_INSTALLMENTS} installments")

    if _negative_rate(req.rate):
        errors.append(NEGATIVE_RATE)

    if total_ok and entry_ok and req.intermediate_installment_count > 0:
        installment = intermediate_installment_value(
            req.total, req.entry_value, req.intermediate_installment_count
        )
        if installment < ADVISOR_MIN_INSTALLMENT:
            errors.append(
                f"Intermediate installment would be R$ {round_currency(installment)}, "
                f"but the minimum is R$ {ADVISOR_MIN_INSTALLMENT}"
            )

    return errors


def validate_half_half(req: HalfHalfRequest) -> list[str]:
    errors: list[str] = []

    if not is_positive_amount(req.total):
        errors.append(TOTAL_NOT_POSITIVE)

    if req.event_date <= req.contract_date:
        errors.append("Event date must be after the contract date")
    elif days_between(req.contract_date, req.event_date) < MIN_DAYS_CONTRACT_TO_EVENT:
        errors.append(
            f"There must be at least {MIN_DAYS_CONTRACT_TO_EVENT} days between the contract date "
            "and the event date for the 50/50 model"
        )

    if _negative_rate(req.rate):
        errors.append(NEGATIVE_RATE)

    return errors


VALIDATORS: dict[PaymentModel, Callable[..., list[str]]] = {
    PaymentModel.DEFERRED_BALANCE: validate_deferred_balance,
    PaymentModel.FIXED_INSTALLMENTS: validate_fixed_installments,
    PaymentModel.CASH_DISCOUNT: validate_cash_discount,
    PaymentModel.CARD_INSTALLMENTS: validate_card_installments,
    PaymentModel.ADVISOR_CONDITION: validate_advisor_condition,
    PaymentModel.HALF_HALF: validate_half_half,
}
