"""Default curve configuration from environment variables.

Environment variables (all optional):
- LAUNCHPAD_CURVE_A: Curve constant (default: 2720310556)
- LAUNCHPAD_TOKEN_SUPPLY: Tokens minted per sale (default: 10^15)
- LAUNCHPAD_TOKEN_THRESHOLD: Tokens sold before completion (default: 793099999845341)
- LAUNCHPAD_BUY_FEE_BPS / LAUNCHPAD_SELL_FEE_BPS: Trade fees (default: 100)
- LAUNCHPAD_DEPLOY_FEE: Flat sale creation fee in lamports (default: 0)
- LAUNCHPAD_AUTHORITY, LAUNCHPAD_FEE_RECIPIENT, LAUNCHPAD_MIGRATION_ACCOUNT
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import ValidationError

from launchpad.constants import (
    DEFAULT_BUY_FEE_BPS,
    DEFAULT_CURVE_A,
    DEFAULT_DEPLOY_FEE,
    DEFAULT_SELL_FEE_BPS,
    DEFAULT_TOKEN_SUPPLY,
    DEFAULT_TOKEN_THRESHOLD,
)
from launchpad.errors import InvalidConfig
from launchpad.models.config import CurveConfig

ENV_PREFIX = "LAUNCHPAD_"


def _env_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(ENV_PREFIX + name, str(default))
    try:
        return int(raw.replace("_", ""))
    except ValueError as err:
        raise InvalidConfig(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from err


def load_config(env: Mapping[str, str] | None = None) -> CurveConfig:
    """Build the default CurveConfig for new sales.

    Args:
        env: Variables to read (defaults to os.environ)

    Raises:
        InvalidConfig: If a variable is malformed or the result fails validation
    """
    env = os.environ if env is None else env
    try:
        return CurveConfig(
            curve_a=_env_int(env, "CURVE_A", DEFAULT_CURVE_A),
            token_supply=_env_int(env, "TOKEN_SUPPLY", DEFAULT_TOKEN_SUPPLY),
            token_threshold=_env_int(env, "TOKEN_THRESHOLD", DEFAULT_TOKEN_THRESHOLD),
            buy_fee_bps=_env_int(env, "BUY_FEE_BPS", DEFAULT_BUY_FEE_BPS),
            sell_fee_bps=_env_int(env, "SELL_FEE_BPS", DEFAULT_SELL_FEE_BPS),
            deploy_fee=_env_int(env, "DEPLOY_FEE", DEFAULT_DEPLOY_FEE),
            authority=env.get(ENV_PREFIX + "AUTHORITY"),
            fee_recipient=env.get(ENV_PREFIX + "FEE_RECIPIENT"),
            migration_account=env.get(ENV_PREFIX + "MIGRATION_ACCOUNT"),
        )
    except ValidationError as err:
        raise InvalidConfig(str(err)) from err
