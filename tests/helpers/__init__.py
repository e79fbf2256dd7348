"""Test helpers module for shared test utilities.

- constants: Curve parameters and accounts
- factories: Config and state factory functions
"""

from tests.helpers.constants import (
    CURVE_A,
    FEE_BPS,
    FEE_RECIPIENT,
    FULL_CURVE_COST,
    MIGRATION_ACCOUNT,
    REFERENCE_CURVE_A,
    REFERENCE_THRESHOLD_SOLS,
    TOKEN_SUPPLY,
    TOKEN_THRESHOLD,
)
from tests.helpers.factories import make_config, make_state, token_value

__all__ = [
    # Constants
    "CURVE_A",
    "FEE_BPS",
    "FEE_RECIPIENT",
    "FULL_CURVE_COST",
    "MIGRATION_ACCOUNT",
    "REFERENCE_CURVE_A",
    "REFERENCE_THRESHOLD_SOLS",
    "TOKEN_SUPPLY",
    "TOKEN_THRESHOLD",
    # Factories
    "make_config",
    "make_state",
    "token_value",
]
