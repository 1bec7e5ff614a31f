from __future__ import annotations

import logging
from dataclasses import dataclass

from installment_engine.domain.fixed_installments import (
    FIXED_ENTRY_SHARE,
    FIXED_INSTALLMENT_COUNT,
    FixedInstallmentsPlan,
    FixedInstallmentsRequest,
)
from installment_engine.domain.money import portion, round_currency
from installment_engine.domain.schedule import split_evenly

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CalculateFixedInstallmentsPlan:
    """
    "1+4, no interest": a 20% entry plus four installments of 20% each,
    all taken from the original total. No compounding and no balance bucket.
    """

    def execute(self, req: FixedInstallmentsRequest) -> FixedInstallmentsPlan:
        req.validate()

        principal = round_currency(req.total)
        entry_amount = portion(principal, FIXED_ENTRY_SHARE)
        installments = split_evenly(principal - entry_amount, FIXED_INSTALLMENT_COUNT)

        logger.debug("Fixed-installments plan calculated", extra={"total": str(principal)})

        return FixedInstallmentsPlan(
            total=principal,
            total_financed=principal,
            entry_amount=entry_amount,
            installment_amount=installments[0].amount,
            installment_count=FIXED_INSTALLMENT_COUNT,
            installments=installments,
        )
