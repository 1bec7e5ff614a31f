"""
Numeric safety primitives shared by every payment model.

Rounding policy:
- Money is a Decimal with two fractional digits, rounded ROUND_HALF_UP
- Values are clamped to +/- MAX_CURRENCY_VALUE before rounding
- Non-finite values never leave this module
"""

from __future__ import annotations

import logging
from decimal import Context, Decimal, InvalidOperation, ROUND_HALF_EVEN, ROUND_HALF_UP, localcontext

from installment_engine.domain.errors import ComputationOverflow, InvalidInput, InvalidPrincipal

logger = logging.getLogger(__name__)

ZERO = Decimal("0.00")
ONE = Decimal("1")
HUNDRED = Decimal("100")
CENT = Decimal("0.01")

MAX_SAFE_INTEGER = Decimal(2**53 - 1)
MAX_CURRENCY_VALUE = MAX_SAFE_INTEGER / HUNDRED

# Compounding bounds exist to keep the math finite, they are not business rules
MIN_COMPOUND_RATE = Decimal("-0.99")
MAX_COMPOUND_RATE = Decimal("1")
MAX_COMPOUND_PERIODS = 600

# Fixed context so results never depend on the caller's thread-local decimal context
_GROWTH_CONTEXT = Context(prec=28, rounding=ROUND_HALF_EVEN)


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """Convert a boundary value to Decimal (floats go through str to avoid binary noise)."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    try:
        return Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise InvalidInput(f"not a decimal value: {value!r}") from exc


def clamp(value: Decimal | int | float, minimum: Decimal | int, maximum: Decimal | int) -> Decimal:
    """Bound value to [minimum, maximum]. Non-finite input maps to minimum."""
    number = to_decimal(value)
    if not number.is_finite():
        return Decimal(minimum)
    return min(max(number, Decimal(minimum)), Decimal(maximum))


def round_currency(value: Decimal | int | float) -> Decimal:
    """Clamp to the safe currency range and round to cents (half-up in magnitude)."""
    number = to_decimal(value)
    if not number.is_finite():
        return ZERO
    safe = clamp(number, -MAX_CURRENCY_VALUE, MAX_CURRENCY_VALUE)
    return safe.quantize(CENT, rounding=ROUND_HALF_UP)


def is_positive_amount(value: Decimal | int | float) -> bool:
    try:
        number = to_decimal(value)
    except InvalidInput:
        return False
    return number.is_finite() and number > 0


def portion(value: Decimal, fraction: Decimal) -> Decimal:
    """Rounded share of value, e.g. portion(total, Decimal("0.20")) for a 20% entry."""
    return round_currency(value * fraction)


def as_percent(rate: Decimal) -> Decimal:
    """0.0129 -> 1.29"""
    return (rate * HUNDRED).quantize(CENT, rounding=ROUND_HALF_UP)


def compound_growth(
    principal: Decimal | int | float,
    rate: Decimal | int | float,
    periods: Decimal | int | float,
) -> Decimal:
    """
    Compute principal * (1 + rate) ** periods without a direct power operation.

    Growth is evaluated as exp(periods * ln(1 + rate)) with:
    - rate clamped to [-0.99, 1.0] so the log base stays positive
    - periods clamped to [-600, 600]
    - the exponent clamped so the factor cannot push |principal| past MAX_SAFE_INTEGER
    - a principal already past MAX_SAFE_INTEGER returns +/- MAX_SAFE_INTEGER

    Raises:
        InvalidPrincipal: If principal is NaN or infinite
        ComputationOverflow: If the product is still non-finite after clamping
    """
    amount = to_decimal(principal)
    if not amount.is_finite():
        raise InvalidPrincipal(
            "principal must be a finite amount for compound growth",
            principal=str(amount),
        )

    raw_rate = to_decimal(rate)
    raw_periods = to_decimal(periods)

    # Past the cap the clamped result is always +/- MAX_SAFE_INTEGER; ln of the limit would underflow
    if amount.copy_abs() >= MAX_SAFE_INTEGER:
        logger.debug("Compound principal capped", extra={"principal": str(amount)})
        return MAX_SAFE_INTEGER.copy_sign(amount)

    with localcontext(_GROWTH_CONTEXT):
        bounded_rate = clamp(raw_rate, MIN_COMPOUND_RATE, MAX_COMPOUND_RATE)
        bounded_periods = clamp(raw_periods, -MAX_COMPOUND_PERIODS, MAX_COMPOUND_PERIODS)

        exponent = bounded_periods * (ONE + bounded_rate).ln()
        limit = (MAX_SAFE_INTEGER / max(ONE, amount.copy_abs())).ln()
        bounded_exponent = min(max(exponent, -limit), limit)

        result = amount * bounded_exponent.exp()

    if not raw_rate.is_finite() or bounded_rate != raw_rate:
        logger.debug("Compound rate clamped", extra={"rate": str(raw_rate), "clamped": str(bounded_rate)})
    if not raw_periods.is_finite() or bounded_periods != raw_periods:
        logger.debug(
            "Compound periods clamped",
            extra={"periods": str(raw_periods), "clamped": str(bounded_periods)},
        )
    if bounded_exponent != exponent:
        logger.debug(
            "Compound exponent clamped",
            extra={"principal": str(amount), "exponent": str(exponent), "limit": str(limit)},
        )

    if not result.is_finite():
        raise ComputationOverflow(
            "compound growth produced a non-finite amount",
            principal=str(amount),
            rate=str(bounded_rate),
            periods=str(bounded_periods),
        )

    return result
