"""Fee calculation for launchpad trades.

Usage:
    from launchpad.fees import DEFAULT_FEE_CALCULATOR

    split = DEFAULT_FEE_CALCULATOR.split(sol_charged, config.buy_fee_bps)
    route_to_fee_recipient(split.fee)
"""

from launchpad.fees.calculator import (
    DEFAULT_FEE_CALCULATOR,
    BasisPointFeeCalculator,
    FeeCalculator,
    InvalidFeeBps,
    fee,
)
from launchpad.fees.result import FeeSplit

__all__ = [
    # Calculator
    "FeeCalculator",
    "BasisPointFeeCalculator",
    "DEFAULT_FEE_CALCULATOR",
    "InvalidFeeBps",
    "fee",
    # Result
    "FeeSplit",
]
