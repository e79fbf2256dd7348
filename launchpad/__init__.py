"""Bonding curve launchpad core - pricing, trading and sale lifecycle."""

from launchpad.engine import TradeEngine
from launchpad.lifecycle import CurveLifecycle, init_sale
from launchpad.models import (
    BondingCurveState,
    BuyMode,
    ConfigUpdate,
    CurveConfig,
    CurveStatus,
    update_config,
)
from launchpad.registry import SaleRegistry

__version__ = "0.1.0"
__all__ = [
    "BondingCurveState",
    "BuyMode",
    "ConfigUpdate",
    "CurveConfig",
    "CurveLifecycle",
    "CurveStatus",
    "SaleRegistry",
    "TradeEngine",
    "init_sale",
    "update_config",
    "__version__",
]
