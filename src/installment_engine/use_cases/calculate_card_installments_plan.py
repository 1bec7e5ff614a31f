from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from installment_engine.domain.card_installments import (
    CARD_DEFAULT_MONTHLY_RATE,
    CARD_ENTRY_SHARE,
    MAX_CARD_RATE,
    MIN_CARD_RATE,
    CardInstallmentsPlan,
    CardInstallmentsRequest,
)
from installment_engine.domain.money import (
    as_percent,
    clamp,
    compound_growth,
    portion,
    round_currency,
)
from installment_engine.domain.schedule import split_evenly

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CalculateCardInstallmentsPlan:
    """
    Partial cash plus credit-card installments.

    20% entry off the original total; the remaining 80% compounds at the card
    rate over the chosen number of installments (1 to 18) and is split evenly
    across them. The card rate is clamped to [0, 1]; a negative rate is
    reported by the validator and treated as zero here.
    """

    default_rate: Decimal = CARD_DEFAULT_MONTHLY_RATE

    def execute(self, req: CardInstallmentsRequest) -> CardInstallmentsPlan:
        req.validate()

        rate = clamp(
            self.default_rate if req.card_rate is None else req.card_rate,
            MIN_CARD_RATE,
            MAX_CARD_RATE,
        )
        count = req.installment_count

        principal = round_currency(req.total)
        entry_amount = portion(principal, CARD_ENTRY_SHARE)
        remaining_amount = principal - entry_amount
        remaining_with_interest = round_currency(compound_growth(remaining_amount, rate, count))
        installments = split_evenly(remaining_with_interest, count)

        logger.debug(
            "Card-installments plan calculated",
            extra={"total": str(principal), "installments": count, "rate": str(rate)},
        )

        return CardInstallmentsPlan(
            total=principal,
            entry_amount=entry_amount,
            remaining_amount=remaining_amount,
            remaining_with_interest=remaining_with_interest,
            installment_amount=installments[0].amount,
            installment_count=count,
            installments=installments,
            total_financed=entry_amount + remaining_with_interest,
            interest_amount=remaining_with_interest - remaining_amount,
            monthly_rate=rate,
            interest_rate_percent=as_percent(rate),
        )
