"""Splitting a money bucket into equal installments."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal, ROUND_DOWN
from typing import Sequence

from installment_engine.domain.money import CENT, round_currency


@dataclass(frozen=True, slots=True)
class Installment:
    number: int
    amount: Decimal
    due_date: date | None = None


def nominal_amount(bucket: Decimal, count: int) -> Decimal:
    """
    Per-installment amount shown to the customer.

    bucket / count rounded half-up, unless that would leave nothing for the
    last installment, in which case it is truncated to cents instead.
    """
    rounded = round_currency(bucket / count)
    if count > 1 and rounded * (count - 1) >= bucket:
        return (bucket / count).quantize(CENT, rounding=ROUND_DOWN)
    return rounded


def split_evenly(
    bucket: Decimal,
    count: int,
    due_dates: Sequence[date] | None = None,
) -> tuple[Installment, ...]:
    """
    Split bucket into `count` installments that sum exactly to bucket.

    Every installment carries the nominal amount; the last one absorbs the
    rounding remainder (at most count - 1 cents of drift).

    Example:
        100.03 / 4 -> 25.01, 25.01, 25.01, 25.00
    """
    if count < 1:
        raise ValueError("count must be >= 1")
    if due_dates is not None and len(due_dates) != count:
        raise ValueError("due_dates must have one date per installment")

    nominal = nominal_amount(bucket, count)
    last = bucket - nominal * (count - 1)

    installments = []
    for i in range(count):
        amount = last if i == count - 1 else nominal
        due_date = due_dates[i] if due_dates is not None else None
        installments.append(Installment(number=i + 1, amount=amount, due_date=due_date))

    return tuple(installments)


def schedule_total(installments: Sequence[Installment]) -> Decimal:
    return sum((inst.amount for inst in installments), Decimal("0.00"))
