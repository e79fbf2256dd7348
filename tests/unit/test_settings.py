"""Tests for environment-driven configuration."""

import pytest
import structlog

from launchpad.constants import (
    DEFAULT_BUY_FEE_BPS,
    DEFAULT_CURVE_A,
    DEFAULT_TOKEN_SUPPLY,
    DEFAULT_TOKEN_THRESHOLD,
)
from launchpad.errors import InvalidConfig
from launchpad.logging_config import configure_logging
from launchpad.settings import load_config


def test_defaults():
    config = load_config({})

    assert config.curve_a == DEFAULT_CURVE_A
    assert config.token_supply == DEFAULT_TOKEN_SUPPLY
    assert config.token_threshold == DEFAULT_TOKEN_THRESHOLD
    assert config.buy_fee_bps == DEFAULT_BUY_FEE_BPS
    assert config.fee_recipient is None


def test_overrides():
    config = load_config(
        {
            "LAUNCHPAD_CURVE_A": "2_720_310_557",
            "LAUNCHPAD_SELL_FEE_BPS": "25",
            "LAUNCHPAD_MIGRATION_ACCOUNT": "migration",
        }
    )

    assert config.curve_a == 2_720_310_557
    assert config.sell_fee_bps == 25
    assert config.migration_account == "migration"


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("LAUNCHPAD_DEPLOY_FEE", "20000000")
    assert load_config().deploy_fee == 20_000_000


def test_malformed_integer():
    with pytest.raises(InvalidConfig, match="LAUNCHPAD_CURVE_A"):
        load_config({"LAUNCHPAD_CURVE_A": "lots"})


def test_invalid_combination():
    with pytest.raises(InvalidConfig):
        load_config({"LAUNCHPAD_TOKEN_THRESHOLD": str(DEFAULT_TOKEN_SUPPLY + 1)})


def test_configure_logging_filters_debug(capsys):
    configure_logging()
    try:
        logger = structlog.get_logger()
        logger.debug("hidden_event")
        logger.info("shown_event", sale_id="mint-a")
    finally:
        structlog.reset_defaults()

    out = capsys.readouterr().out
    assert "shown_event" in out
    assert "hidden_event" not in out
