from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Iterable

from installment_engine.domain.advisor_condition import AdvisorConditionPlan, AdvisorConditionRequest
from installment_engine.domain.card_installments import CardInstallmentsPlan, CardInstallmentsRequest
from installment_engine.domain.cash_discount import CashDiscountPlan, CashDiscountRequest
from installment_engine.domain.deferred_balance import DeferredBalancePlan, DeferredBalanceRequest
from installment_engine.domain.errors import ValidationError
from installment_engine.domain.fixed_installments import FixedInstallmentsPlan, FixedInstallmentsRequest
from installment_engine.domain.half_half import HalfHalfPlan, HalfHalfRequest
from installment_engine.domain.schedule import Installment
from installment_engine.entrypoints.http.dtos.plans import (
    AdvisorConditionRequestDTO,
    AdvisorConditionResponseDTO,
    CardInstallmentsRequestDTO,
    CardInstallmentsResponseDTO,
    CashDiscountResponseDTO,
    DeferredBalanceRequestDTO,
    DeferredBalanceResponseDTO,
    FixedInstallmentsResponseDTO,
    HalfHalfRequestDTO,
    HalfHalfResponseDTO,
    InstallmentDTO,
    TotalOnlyRequestDTO,
)


def parse_decimals(**fields: str | None) -> dict[str, Decimal | None]:
    """
    Converts string fields to Decimal at the boundary.

    None passes through untouched. Every unparseable field is reported
    at once instead of failing on the first one.

    Raises:
        ValidationError: If any field is not a valid decimal
    """
    errors = []
    parsed: dict[str, Decimal | None] = {}

    for name, raw in fields.items():
        if raw is None:
            parsed[name] = None
            continue
        try:
            parsed[name] = Decimal(raw)
        except (InvalidOperation, ValueError):
            errors.append(
                {
                    "field": name,
                    "message": f"Must be a valid decimal: {raw}",
                    "code": "INVALID_DECIMAL",
                }
            )

    if errors:
        raise ValidationError(errors=errors)

    return parsed


def _installments(installments: Iterable[Installment]) -> list[InstallmentDTO]:
    return [
        InstallmentDTO(number=inst.number, amount=str(inst.amount), due_date=inst.due_date)
        for inst in installments
    ]


def _optional(value: Decimal | None) -> str | None:
    return None if value is None else str(value)


class PlanMapper:
    """Maps between REST DTOs and domain models for payment plans."""

    # ------------------------------------------------------------------
    # DTO -> domain
    # ------------------------------------------------------------------

    @staticmethod
    def to_deferred_balance_request(dto: DeferredBalanceRequestDTO) -> DeferredBalanceRequest:
        values = parse_decimals(total=dto.total)
        return DeferredBalanceRequest(
            total=values["total"],
            event_date=dto.event_date,
            reference_date=dto.reference_date,
        )

    @staticmethod
    def to_fixed_installments_request(dto: TotalOnlyRequestDTO) -> FixedInstallmentsRequest:
        return FixedInstallmentsRequest(total=parse_decimals(total=dto.total)["total"])

    @staticmethod
    def to_cash_discount_request(dto: TotalOnlyRequestDTO) -> CashDiscountRequest:
        return CashDiscountRequest(total=parse_decimals(total=dto.total)["total"])

    @staticmethod
    def to_card_installments_request(dto: CardInstallmentsRequestDTO) -> CardInstallmentsRequest:
        values = parse_decimals(total=dto.total, card_rate=dto.card_rate)
        return CardInstallmentsRequest(
            total=values["total"],
            installment_count=dto.installment_count,
            card_rate=values["card_rate"],
        )

    @staticmethod
    def to_advisor_condition_request(dto: AdvisorConditionRequestDTO) -> AdvisorConditionRequest:
        values = parse_decimals(total=dto.total, entry_value=dto.entry_value, rate=dto.rate)
        return AdvisorConditionRequest(
            total=values["total"],
            entry_value=values["entry_value"],
            entry_installment_count=dto.entry_installment_count,
            intermediate_installment_count=dto.intermediate_installment_count,
            closing_installment_count=dto.closing_installment_count,
            rate=values["rate"],
        )

    @staticmethod
    def to_half_half_request(dto: HalfHalfRequestDTO) -> HalfHalfRequest:
        values = parse_decimals(total=dto.total, rate=dto.rate)
        return HalfHalfRequest(
            total=values["total"],
            contract_date=dto.contract_date,
            event_date=dto.event_date,
            rate=values["rate"],
        )

    # ------------------------------------------------------------------
    # domain -> DTO
    # ------------------------------------------------------------------

    @staticmethod
    def deferred_balance_response(plan: DeferredBalancePlan) -> DeferredBalanceResponseDTO:
        return DeferredBalanceResponseDTO(
            total=str(plan.total),
            total_financed=str(plan.total_financed),
            entry_amount=str(plan.entry_amount),
            installment_amount=str(plan.installment_amount),
            installment_count=plan.installment_count,
            installments=_installments(plan.installments),
            balance_amount=str(plan.balance_amount),
            balance_due_date=plan.balance_due_date,
            interest_amount=str(plan.interest_amount),
            monthly_rate=str(plan.monthly_rate),
            interest_rate_percent=str(plan.interest_rate_percent),
        )

    @staticmethod
    def fixed_installments_response(plan: FixedInstallmentsPlan) -> FixedInstallmentsResponseDTO:
        return FixedInstallmentsResponseDTO(
            total=str(plan.total),
            total_financed=str(plan.total_financed),
            entry_amount=str(plan.entry_amount),
            installment_amount=str(plan.installment_amount),
            installment_count=plan.installment_count,
            installments=_installments(plan.installments),
            has_balance=plan.has_balance,
        )

    @staticmethod
    def cash_discount_response(plan: CashDiscountPlan) -> CashDiscountResponseDTO:
        return CashDiscountResponseDTO(
            total=str(plan.total),
            discount_percent=str(plan.discount_percent),
            discount_amount=str(plan.discount_amount),
            discounted_total=str(plan.discounted_total),
            total_financed=str(plan.total_financed),
            entry_amount=str(plan.entry_amount),
            balance_amount=str(plan.balance_amount),
        )

    @staticmethod
    def card_installments_response(plan: CardInstallmentsPlan) -> CardInstallmentsResponseDTO:
        return CardInstallmentsResponseDTO(
            total=str(plan.total),
            entry_amount=str(plan.entry_amount),
            remaining_amount=str(plan.remaining_amount),
            remaining_with_interest=str(plan.remaining_with_interest),
            installment_amount=str(plan.installment_amount),
            installment_count=plan.installment_count,
            installments=_installments(plan.installments),
            total_financed=str(plan.total_financed),
            interest_amount=str(plan.interest_amount),
            monthly_rate=str(plan.monthly_rate),
            interest_rate_percent=str(plan.interest_rate_percent),
        )

    @staticmethod
    def advisor_condition_response(plan: AdvisorConditionPlan) -> AdvisorConditionResponseDTO:
        return AdvisorConditionResponseDTO(
            total=str(plan.total),
            entry_amount=str(plan.entry_amount),
            entry_installment_count=plan.entry_installment_count,
            entry_installment_amount=str(plan.entry_installment_amount),
            entry_installments=_installments(plan.entry_installments),
            intermediate_installment_count=plan.intermediate_installment_count,
            intermediate_installment_amount=str(plan.intermediate_installment_amount),
            has_closing_balance=plan.has_closing_balance,
            closing_balance=_optional(plan.closing_balance),
            closing_installment_count=plan.closing_installment_count,
            closing_installment_amount=_optional(plan.closing_installment_amount),
            closing_installments=_installments(plan.closing_installments),
            total_financed=str(plan.total_financed),
            interest_amount=str(plan.interest_amount),
            monthly_rate=str(plan.monthly_rate),
            interest_rate_percent=str(plan.interest_rate_percent),
        )

    @staticmethod
    def half_half_response(plan: HalfHalfPlan) -> HalfHalfResponseDTO:
        return HalfHalfResponseDTO(
            total=str(plan.total),
            entry_amount=str(plan.entry_amount),
            first_boleto_amount=str(plan.first_boleto_amount),
            first_boleto_due_date=plan.first_boleto_due_date,
            balance_base=str(plan.balance_base),
            balance_amount=str(plan.balance_amount),
            balance_due_date=plan.balance_due_date,
            interest_periods=plan.interest_periods,
            total_financed=str(plan.total_financed),
            interest_amount=str(plan.interest_amount),
            monthly_rate=str(plan.monthly_rate),
            interest_rate_percent=str(plan.interest_rate_percent),
        )
