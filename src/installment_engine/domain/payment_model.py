from __future__ import annotations

from enum import Enum


class PaymentModel(str, Enum):
    """Payment models offered on proposals and contracts.

    Values double as URL slugs for the HTTP layer.
    """

    DEFERRED_BALANCE = "deferred-balance"
    FIXED_INSTALLMENTS = "fixed-installments"
    CASH_DISCOUNT = "cash-discount"
    CARD_INSTALLMENTS = "card-installments"
    ADVISOR_CONDITION = "advisor-condition"
    HALF_HALF = "half-half"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    PaymentModel.DEFERRED_BALANCE: "Pagamento Indaiá",
    PaymentModel.FIXED_INSTALLMENTS: "Sem Juros (1+4)",
    PaymentModel.CASH_DISCOUNT: "À vista (Dinheiro)",
    PaymentModel.CARD_INSTALLMENTS: "À vista Parcial (Cartão de Crédito)",
    PaymentModel.ADVISOR_CONDITION: "Condição Especial do Consultor",
    PaymentModel.HALF_HALF: "50/50",
}
