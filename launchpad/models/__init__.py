"""Data models for sales, configuration and trades."""

from launchpad.models.config import ConfigUpdate, CurveConfig, update_config
from launchpad.models.state import BondingCurveState, CurveStatus
from launchpad.models.trade import (
    BuyMode,
    BuyQuote,
    BuyResult,
    SellQuote,
    SellResult,
    WithdrawResult,
)

__all__ = [
    # Configuration
    "CurveConfig",
    "ConfigUpdate",
    "update_config",
    # State
    "BondingCurveState",
    "CurveStatus",
    # Trades
    "BuyMode",
    "BuyQuote",
    "BuyResult",
    "SellQuote",
    "SellResult",
    "WithdrawResult",
]
