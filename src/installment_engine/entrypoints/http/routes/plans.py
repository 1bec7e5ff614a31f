from fastapi import APIRouter, Depends

from installment_engine.domain.payment_model import PaymentModel
from installment_engine.domain.validators import (
    validate_advisor_condition,
    validate_card_installments,
    validate_cash_discount,
    validate_deferred_balance,
    validate_fixed_installments,
    validate_half_half,
)
from installment_engine.entrypoints.http.dependencies import (
    get_advisor_condition_use_case,
    get_card_installments_use_case,
    get_cash_discount_use_case,
    get_deferred_balance_use_case,
    get_fixed_installments_use_case,
    get_half_half_use_case,
)
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
    MinimumEntryRequestDTO,
    MinimumEntryResponseDTO,
    PaymentModelDTO,
    TotalOnlyRequestDTO,
    ValidationResultDTO,
)
from installment_engine.entrypoints.http.error_responses import ErrorResponse
from installment_engine.entrypoints.http.mappers.plan_mapper import PlanMapper, parse_decimals
from installment_engine.use_cases.calculate_advisor_condition_plan import CalculateAdvisorConditionPlan
from installment_engine.use_cases.calculate_card_installments_plan import CalculateCardInstallmentsPlan
from installment_engine.use_cases.calculate_cash_discount_plan import CalculateCashDiscountPlan
from installment_engine.use_cases.calculate_deferred_balance_plan import CalculateDeferredBalancePlan
from installment_engine.use_cases.calculate_fixed_installments_plan import (
    CalculateFixedInstallmentsPlan,
)
from installment_engine.use_cases.calculate_half_half_plan import CalculateHalfHalfPlan


router = APIRouter(prefix="/plans", tags=["Payment plans"])

# Calculators reject invalid input with 422; the /validate endpoints never do
CALCULATION_ERRORS: dict[int | str, dict[str, object]] = {
    422: {"description": "Validation error", "model": ErrorResponse},
    500: {"description": "Computation overflow", "model": ErrorResponse},
}


def _result(violations: list[str]) -> ValidationResultDTO:
    return ValidationResultDTO(valid=not violations, violations=violations)


@router.get(
    "/models",
    response_model=list[PaymentModelDTO],
    summary="List payment models",
)
def list_payment_models() -> list[PaymentModelDTO]:
    return [PaymentModelDTO(slug=model.value, label=model.label) for model in PaymentModel]


# ==============================================================================
# Deferred balance (Indaiá)
# ==============================================================================


@router.post(
    "/deferred-balance",
    response_model=DeferredBalanceResponseDTO,
    summary="Calculate deferred-balance plan",
    description="""
    20% entry, 50% in monthly installments until one month before the event,
    30% balance due 30 days before the event. The total compounds at the
    configured monthly rate over the number of installments.

    Events less than two months away are still calculated; use the
    `/validate` endpoint to surface the lead-time rule to users.
    """,
    responses=CALCULATION_ERRORS,
)
def calculate_deferred_balance_plan(
    payload: DeferredBalanceRequestDTO,
    use_case: CalculateDeferredBalancePlan = Depends(get_deferred_balance_use_case),
) -> DeferredBalanceResponseDTO:
    """
    Follows the parse → map → execute → map pattern:
    1. Map DTO to domain request (string → Decimal)
    2. Execute use case (guard clauses + calculation)
    3. Map domain plan to response (Decimal → string)
    """
    request = PlanMapper.to_deferred_balance_request(payload)
    plan = use_case.execute(request)
    return PlanMapper.deferred_balance_response(plan)


@router.post(
    "/deferred-balance/validate",
    response_model=ValidationResultDTO,
    summary="Validate deferred-balance request",
)
def validate_deferred_balance_plan(
    payload: DeferredBalanceRequestDTO,
    use_case: CalculateDeferredBalancePlan = Depends(get_deferred_balance_use_case),
) -> ValidationResultDTO:
    request = PlanMapper.to_deferred_balance_request(payload)
    return _result(validate_deferred_balance(request, today=use_case.today()))


@router.post(
    "/deferred-balance/minimum-entry",
    response_model=MinimumEntryResponseDTO,
    summary="Minimum entry for the deferred-balance model",
    description="""
    Returns the entry the deferred-balance model requires for this total and
    event date. When `entry_value` is given, also reports whether it suffices.
    """,
    responses=CALCULATION_ERRORS,
)
def deferred_balance_minimum_entry(
    payload: MinimumEntryRequestDTO,
    use_case: CalculateDeferredBalancePlan = Depends(get_deferred_balance_use_case),
) -> MinimumEntryResponseDTO:
    request = PlanMapper.to_deferred_balance_request(payload)
    minimum = use_case.minimum_entry(request)

    entry_value = parse_decimals(entry_value=payload.entry_value)["entry_value"]
    if entry_value is None:
        return MinimumEntryResponseDTO(minimum_entry=str(minimum))

    return MinimumEntryResponseDTO(
        minimum_entry=str(minimum),
        entry_value=str(entry_value),
        accepted=use_case.accepts_entry(request, entry_value),
    )


# ==============================================================================
# Four fixed installments (1+4, no interest)
# ==============================================================================


@router.post(
    "/fixed-installments",
    response_model=FixedInstallmentsResponseDTO,
    summary="Calculate 1+4 plan without interest",
    responses=CALCULATION_ERRORS,
)
def calculate_fixed_installments_plan(
    payload: TotalOnlyRequestDTO,
    use_case: CalculateFixedInstallmentsPlan = Depends(get_fixed_installments_use_case),
) -> FixedInstallmentsResponseDTO:
    plan = use_case.execute(PlanMapper.to_fixed_installments_request(payload))
    return PlanMapper.fixed_installments_response(plan)


@router.post(
    "/fixed-installments/validate",
    response_model=ValidationResultDTO,
    summary="Validate 1+4 request",
)
def validate_fixed_installments_plan(payload: TotalOnlyRequestDTO) -> ValidationResultDTO:
    return _result(validate_fixed_installments(PlanMapper.to_fixed_installments_request(payload)))


# ==============================================================================
# Cash discount
# ==============================================================================


@router.post(
    "/cash-discount",
    response_model=CashDiscountResponseDTO,
    summary="Calculate cash plan with 5% discount",
    responses=CALCULATION_ERRORS,
)
def calculate_cash_discount_plan(
    payload: TotalOnlyRequestDTO,
    use_case: CalculateCashDiscountPlan = Depends(get_cash_discount_use_case),
) -> CashDiscountResponseDTO:
    plan = use_case.execute(PlanMapper.to_cash_discount_request(payload))
    return PlanMapper.cash_discount_response(plan)


@router.post(
    "/cash-discount/validate",
    response_model=ValidationResultDTO,
    summary="Validate cash-discount request",
)
def validate_cash_discount_plan(payload: TotalOnlyRequestDTO) -> ValidationResultDTO:
    return _result(validate_cash_discount(PlanMapper.to_cash_discount_request(payload)))


# ==============================================================================
# Partial card installments
# ==============================================================================


@router.post(
    "/card-installments",
    response_model=CardInstallmentsResponseDTO,
    summary="Calculate partial card-installment plan",
    description="""
    20% entry; the remaining 80% compounds at the card rate and is split
    into 1 to 18 card installments. Negative card rates are treated as zero.
    """,
    responses=CALCULATION_ERRORS,
)
def calculate_card_installments_plan(
    payload: CardInstallmentsRequestDTO,
    use_case: CalculateCardInstallmentsPlan = Depends(get_card_installments_use_case),
) -> CardInstallmentsResponseDTO:
    plan = use_case.execute(PlanMapper.to_card_installments_request(payload))
    return PlanMapper.card_installments_response(plan)


@router.post(
    "/card-installments/validate",
    response_model=ValidationResultDTO,
    summary="Validate card-installment request",
)
def validate_card_installments_plan(payload: CardInstallmentsRequestDTO) -> ValidationResultDTO:
    return _result(validate_card_installments(PlanMapper.to_card_installments_request(payload)))


# ==============================================================================
# Advisor special condition
# ==============================================================================


@router.post(
    "/advisor-condition",
    response_model=AdvisorConditionResponseDTO,
    summary="Calculate advisor special-condition plan",
    responses=CALCULATION_ERRORS,
)
def calculate_advisor_condition_plan(
    payload: AdvisorConditionRequestDTO,
    use_case: CalculateAdvisorConditionPlan = Depends(get_advisor_condition_use_case),
) -> AdvisorConditionResponseDTO:
    plan = use_case.execute(PlanMapper.to_advisor_condition_request(payload))
    return PlanMapper.advisor_condition_response(plan)


@router.post(
    "/advisor-condition/validate",
    response_model=ValidationResultDTO,
    summary="Validate advisor special-condition request",
)
def validate_advisor_condition_plan(payload: AdvisorConditionRequestDTO) -> ValidationResultDTO:
    return _result(validate_advisor_condition(PlanMapper.to_advisor_condition_request(payload)))


# ==============================================================================
# Half-half (50/50)
# ==============================================================================


@router.post(
    "/half-half",
    response_model=HalfHalfResponseDTO,
    summary="Calculate 50/50 plan",
    description="""
    20% entry, 30% boleto 30 days after the contract, 50% balance 30 days
    before the event. Only the balance accrues interest, over the whole
    30-day periods between the two due dates.
    """,
    responses=CALCULATION_ERRORS,
)
def calculate_half_half_plan(
    payload: HalfHalfRequestDTO,
    use_case: CalculateHalfHalfPlan = Depends(get_half_half_use_case),
) -> HalfHalfResponseDTO:
    plan = use_case.execute(PlanMapper.to_half_half_request(payload))
    return PlanMapper.half_half_response(plan)


@router.post(
    "/half-half/validate",
    response_model=ValidationResultDTO,
    summary="Validate 50/50 request",
)
def validate_half_half_plan(payload: HalfHalfRequestDTO) -> ValidationResultDTO:
    return _result(validate_half_half(PlanMapper.to_half_half_request(payload)))
