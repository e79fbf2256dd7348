"""Tests for curve configuration models."""

import pytest
from pydantic import ValidationError

from launchpad.errors import InvalidConfig, LaunchpadError
from launchpad.models import ConfigUpdate, CurveConfig, update_config
from tests.helpers import CURVE_A, TOKEN_SUPPLY, TOKEN_THRESHOLD, make_config


class TestCurveConfig:
    """Tests for CurveConfig validation."""

    def test_snake_case_fields(self):
        config = CurveConfig(
            curve_a=CURVE_A,
            token_supply=TOKEN_SUPPLY,
            token_threshold=TOKEN_THRESHOLD,
        )
        assert config.curve_a == CURVE_A
        assert config.buy_fee_bps == 0
        assert config.sell_fee_bps == 0
        assert config.deploy_fee == 0
        assert config.migration_account is None

    def test_camel_case_aliases(self):
        """On-chain JSON layout is accepted as is."""
        config = CurveConfig.model_validate(
            {
                "curveA": CURVE_A,
                "tokenSupply": TOKEN_SUPPLY,
                "tokenThreshold": TOKEN_THRESHOLD,
                "buyFeeBps": 100,
                "sellFeeBps": 50,
                "deployFee": 20_000_000,
                "feeRecipient": "fee",
                "migrationAccount": "migration",
            }
        )
        assert config.buy_fee_bps == 100
        assert config.sell_fee_bps == 50
        assert config.deploy_fee == 20_000_000
        assert config.fee_recipient == "fee"
        assert config.migration_account == "migration"

    def test_tokens_outside_curve(self):
        config = make_config()
        assert config.tokens_outside_curve == TOKEN_SUPPLY - TOKEN_THRESHOLD

    def test_frozen(self):
        config = make_config()
        with pytest.raises(ValidationError):
            config.curve_a = 1  # type: ignore[misc]

    @pytest.mark.parametrize(
        "overrides",
        [
            {"curve_a": 0},
            {"token_threshold": 0},
            {"buy_fee_bps": 10_001},
            {"sell_fee_bps": -1},
            {"deploy_fee": -1},
            {"token_supply": 2**64},
        ],
    )
    def test_rejects_out_of_range(self, overrides: dict):
        with pytest.raises(ValidationError):
            make_config(**overrides)

    def test_rejects_threshold_above_supply(self):
        with pytest.raises(ValidationError, match="exceeds token_supply"):
            make_config(token_supply=100, token_threshold=101)

    def test_threshold_equal_to_supply_allowed(self):
        config = make_config(token_supply=1_000, token_threshold=1_000)
        assert config.tokens_outside_curve == 0


class TestUpdateConfig:
    """Tests for partial config updates."""

    def test_unset_fields_unchanged(self):
        config = make_config()
        updated = update_config(config, ConfigUpdate(buy_fee_bps=250))

        assert updated.buy_fee_bps == 250
        assert updated.sell_fee_bps == config.sell_fee_bps
        assert updated.curve_a == config.curve_a
        assert updated.fee_recipient == config.fee_recipient

    def test_returns_new_value(self):
        """The original config is left untouched for existing sales."""
        config = make_config()
        updated = update_config(config, ConfigUpdate(curve_a=CURVE_A + 1))

        assert updated is not config
        assert config.curve_a == CURVE_A
        assert updated.curve_a == CURVE_A + 1

    def test_empty_update_is_equal(self):
        config = make_config()
        assert update_config(config, ConfigUpdate()) == config

    def test_update_by_alias(self):
        config = make_config()
        update = ConfigUpdate.model_validate({"migrationAccount": "new-migration"})
        assert update_config(config, update).migration_account == "new-migration"

    def test_changes_lists_only_set_fields(self):
        update = ConfigUpdate(sell_fee_bps=10, authority="admin")
        assert update.changes == {"sell_fee_bps": 10, "authority": "admin"}

    def test_invalid_merge_raises_invalid_config(self):
        """Each field is valid on its own but the result is not."""
        config = make_config()
        with pytest.raises(InvalidConfig) as exc_info:
            update_config(config, ConfigUpdate(token_threshold=TOKEN_SUPPLY + 1))
        assert exc_info.value.code == "InvalidConfig"

    def test_invalid_field_rejected_by_update_model(self):
        with pytest.raises(ValidationError):
            ConfigUpdate(buy_fee_bps=20_000)


class TestValidationErrors:
    """Which error each config entry point raises."""

    def test_update_config_raises_launchpad_error(self):
        with pytest.raises(LaunchpadError):
            update_config(make_config(), ConfigUpdate(token_supply=1))

    def test_direct_construction_raises_validation_error(self):
        with pytest.raises(ValidationError) as exc_info:
            CurveConfig(curve_a=CURVE_A, token_supply=10, token_threshold=11)
        assert not isinstance(exc_info.value, LaunchpadError)
        assert isinstance(exc_info.value, ValueError)
