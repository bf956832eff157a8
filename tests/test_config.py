"""Tests for settings and logging setup."""

import logging
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from jupiter_swap.config import LOG_FORMAT, Settings, configure_logging
from jupiter_swap.contracts import (
    AUTO,
    DISABLED,
    JitoTipLamports,
    PriorityLevel,
    PriorityLevelWithMaxLamports,
    TransactionConfig,
)


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.api_url == "https://quote-api.jup.ag/v6"
    assert settings.quote_url == "https://quote-api.jup.ag/v6/quote"
    assert settings.swap_url == "https://quote-api.jup.ag/v6/swap"
    assert settings.swap_instructions_url == "https://quote-api.jup.ag/v6/swap-instructions"
    assert settings.default_slippage_bps == 50
    assert settings.transaction_config() == TransactionConfig()


def test_env_prefix(monkeypatch):
    """Settings load from JUPITER_* variables."""
    monkeypatch.setenv("JUPITER_API_URL", "https://api.jup.ag/swap/v1/")
    monkeypatch.setenv("JUPITER_WRAP_AND_UNWRAP_SOL", "false")
    monkeypatch.setenv("JUPITER_DYNAMIC_COMPUTE_UNIT_LIMIT", "true")

    settings = Settings(_env_file=None)
    config = settings.transaction_config()

    assert settings.quote_url == "https://api.jup.ag/swap/v1/quote"
    assert config.wrap_and_unwrap_sol is False
    assert config.dynamic_compute_unit_limit is True


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("auto", AUTO),
        ('"auto"', AUTO),
        ("disabled", DISABLED),
        ("5000", 5000),
        ('{"jitoTipLamports": 1000}', JitoTipLamports(jito_tip_lamports=1000)),
        (
            '{"priorityLevelWithMaxLamports": {"priorityLevel": "high", "maxLamports": 500}}',
            PriorityLevelWithMaxLamports(priority_level=PriorityLevel.HIGH, max_lamports=500),
        ),
    ],
)
def test_prioritization_fee_setting(monkeypatch, raw, expected):
    monkeypatch.setenv("JUPITER_PRIORITIZATION_FEE_LAMPORTS", raw)

    config = Settings(_env_file=None).transaction_config()

    assert config.prioritization_fee_lamports == expected


def test_compute_unit_price_setting(monkeypatch):
    monkeypatch.setenv("JUPITER_COMPUTE_UNIT_PRICE_MICRO_LAMPORTS", "25000")

    config = Settings(_env_file=None).transaction_config()

    assert config.compute_unit_price_micro_lamports == 25000


@pytest.mark.parametrize("field", ["prioritization_fee_lamports", "compute_unit_price_micro_lamports"])
def test_invalid_fee_setting_raises(field):
    settings = Settings(_env_file=None, **{field: "Auto"})

    with pytest.raises(ValidationError):
        settings.transaction_config()


def test_safe_dict_redacts_api_key():
    settings = Settings(_env_file=None, api_key="secret-key")

    data = settings.get_safe_dict()

    assert data["api_key"] == "***"
    assert "secret-key" not in str(data)


@pytest.mark.parametrize("debug,level", [(True, logging.DEBUG), (False, logging.INFO)])
def test_configure_logging(debug, level):
    with patch("jupiter_swap.config.logging.basicConfig") as basic_config:
        configure_logging(Settings(_env_file=None, debug=debug))

    basic_config.assert_called_once_with(level=level, format=LOG_FORMAT)
