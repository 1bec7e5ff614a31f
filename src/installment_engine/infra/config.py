from __future__ import annotations

import os
from decimal import Decimal, InvalidOperation

DEFAULT_MONTHLY_RATE = "0.0129"
DEFAULT_LOG_LEVEL = "INFO"


def monthly_interest_rate() -> Decimal:
    raw = os.getenv("INSTALLMENT_ENGINE_MONTHLY_RATE", DEFAULT_MONTHLY_RATE)

    try:
        rate = Decimal(raw)
    except InvalidOperation as exc:
        raise RuntimeError(
            f"INSTALLMENT_ENGINE_MONTHLY_RATE must be a decimal string, got {raw!r}"
        ) from exc

    if not rate.is_finite():
        raise RuntimeError(f"INSTALLMENT_ENGINE_MONTHLY_RATE must be finite, got {raw!r}")

    return rate


def log_level() -> str:
    return os.getenv("INSTALLMENT_ENGINE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
