from decimal import Decimal

import pytest

from installment_engine.infra.config import log_level, monthly_interest_rate


def test_monthly_rate_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("INSTALLMENT_ENGINE_MONTHLY_RATE", raising=False)

    assert monthly_interest_rate() == Decimal("0.0129")


def test_monthly_rate_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("INSTALLMENT_ENGINE_MONTHLY_RATE", "0.015")

    assert monthly_interest_rate() == Decimal("0.015")


@pytest.mark.parametrize("raw", ["abc", "", "NaN", "Infinity"])
def test_monthly_rate_rejects_invalid_values(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("INSTALLMENT_ENGINE_MONTHLY_RATE", raw)

    with pytest.raises(RuntimeError, match="INSTALLMENT_ENGINE_MONTHLY_RATE"):
        monthly_interest_rate()


def test_log_level_defaults_and_upper_cases(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("INSTALLMENT_ENGINE_LOG_LEVEL", raising=False)
    assert log_level() == "INFO"

    monkeypatch.setenv("INSTALLMENT_ENGINE_LOG_LEVEL", "debug")
    assert log_level() == "DEBUG"
