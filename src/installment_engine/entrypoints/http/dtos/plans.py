from datetime import date

from pydantic import BaseModel, ConfigDict, Field

MONEY_PATTERN = r"^\d+(\.\d{1,2})?$"
RATE_PATTERN = r"^-?\d+(\.\d+)?$"


def _money(description: str, example: str) -> object:
    return Field(description=description, examples=[example], pattern=MONEY_PATTERN)


def _rate() -> object:
    return Field(
        default=None,
        description="Monthly interest rate as decimal string (e.g., '0.0129' = 1.29%). Defaults to the configured rate",
        examples=["0.0129"],
        pattern=RATE_PATTERN,
    )


# ==============================================================================
# Requests
# ==============================================================================


class DeferredBalanceRequestDTO(BaseModel):
    """Request payload for the deferred-balance (Indaiá) model."""

    total: str = _money("Contract total as decimal string", "10000.00")
    event_date: date = Field(description="Event date (ISO 8601)", examples=["2026-12-15"])
    reference_date: date | None = Field(
        default=None,
        description="Date the schedule starts from. Defaults to today",
        examples=["2026-03-10"],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "total": "10000.00",
                "event_date": "2026-12-15",
                "reference_date": "2026-03-10",
            }
        }
    )


class MinimumEntryRequestDTO(DeferredBalanceRequestDTO):
    """Deferred-balance request plus an optional proposed entry to check."""

    entry_value: str | None = Field(
        default=None,
        description="Proposed entry as decimal string",
        examples=["2500.00"],
        pattern=MONEY_PATTERN,
    )


class TotalOnlyRequestDTO(BaseModel):
    """Request payload for models that only need the contract total."""

    total: str = _money("Contract total as decimal string", "10000.00")

    model_config = ConfigDict(json_schema_extra={"example": {"total": "10000.00"}})


class CardInstallmentsRequestDTO(BaseModel):
    """Request payload for the partial-card-installment model."""

    total: str = _money("Contract total as decimal string", "10000.00")
    installment_count: int = Field(
        description="Number of card installments (1 to 18)",
        examples=[10],
    )
    card_rate: str | None = _rate()

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "total": "10000.00",
                "installment_count": 10,
                "card_rate": "0.0129",
            }
        }
    )


class AdvisorConditionRequestDTO(BaseModel):
    """Request payload for the advisor special condition model."""

    total: str = _money("Contract total as decimal string", "20000.00")
    entry_value: str = _money("Entry value as decimal string (minimum 1000.00)", "2000.00")
    entry_installment_count: int = Field(
        description="Interest-free installments for the entry (1 to 12)",
        examples=[2],
    )
    intermediate_installment_count: int = Field(
        description="Intermediate installments (at least 5)",
        examples=[10],
    )
    closing_installment_count: int = Field(
        default=1,
        description="Installments for any closing balance (1 to 18)",
        examples=[1],
    )
    rate: str | None = _rate()

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "total": "20000.00",
                "entry_value": "2000.00",
                "entry_installment_count": 2,
                "intermediate_installment_count": 10,
                "closing_installment_count": 1,
            }
        }
    )


class HalfHalfRequestDTO(BaseModel):
    """Request payload for the 50/50 model."""

    total: str = _money("Contract total as decimal string", "10000.00")
    contract_date: date = Field(description="Contract date (ISO 8601)", examples=["2026-01-01"])
    event_date: date = Field(description="Event date (ISO 8601)", examples=["2026-07-01"])
    rate: str | None = _rate()

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "total": "10000.00",
                "contract_date": "2026-01-01",
                "event_date": "2026-07-01",
            }
        }
    )


# ==============================================================================
# Responses
# ==============================================================================


class InstallmentDTO(BaseModel):
    number: int
    amount: str
    due_date: date | None = None


class DeferredBalanceResponseDTO(BaseModel):
    total: str
    total_financed: str
    entry_amount: str
    installment_amount: str
    installment_count: int
    installments: list[InstallmentDTO]
    balance_amount: str
    balance_due_date: date
    interest_amount: str
    monthly_rate: str
    interest_rate_percent: str


class MinimumEntryResponseDTO(BaseModel):
    minimum_entry: str
    entry_value: str | None = None
    accepted: bool | None = Field(
        default=None,
        description="Whether entry_value covers the minimum entry. Null when no entry was proposed",
    )


class FixedInstallmentsResponseDTO(BaseModel):
    total: str
    total_financed: str
    entry_amount: str
    installment_amount: str
    installment_count: int
    installments: list[InstallmentDTO]
    has_balance: bool


class CashDiscountResponseDTO(BaseModel):
    total: str
    discount_percent: str
    discount_amount: str
    discounted_total: str
    total_financed: str
    entry_amount: str
    balance_amount: str


class CardInstallmentsResponseDTO(BaseModel):
    total: str
    entry_amount: str
    remaining_amount: str
    remaining_with_interest: str
    installment_amount: str
    installment_count: int
    installments: list[InstallmentDTO]
    total_financed: str
    interest_amount: str
    monthly_rate: str
    interest_rate_percent: str


class AdvisorConditionResponseDTO(BaseModel):
    total: str
    entry_amount: str
    entry_installment_count: int
    entry_installment_amount: str
    entry_installments: list[InstallmentDTO]
    intermediate_installment_count: int
    intermediate_installment_amount: str
    has_closing_balance: bool
    closing_balance: str | None
    closing_installment_count: int
    closing_installment_amount: str | None
    closing_installments: list[InstallmentDTO]
    total_financed: str
    interest_amount: str
    monthly_rate: str
    interest_rate_percent: str


class HalfHalfResponseDTO(BaseModel):
    total: str
    entry_amount: str
    first_boleto_amount: str
    first_boleto_due_date: date
    balance_base: str
    balance_amount: str
    balance_due_date: date
    interest_periods: int
    total_financed: str
    interest_amount: str
    monthly_rate: str
    interest_rate_percent: str


class ValidationResultDTO(BaseModel):
    """Outcome of a model validator. Violations are user-facing messages."""

    valid: bool
    violations: list[str]

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "valid": False,
                "violations": ["Installment count cannot exceed 18"],
            }
        }
    )


class PaymentModelDTO(BaseModel):
    slug: str
    label: str
