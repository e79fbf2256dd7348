"""Basis-point fee calculator.

Fees are floored: the protocol never collects more than
gross * bps / 10000, so any rounding goes to the trader.
"""

from __future__ import annotations

from typing import Protocol

import structlog

from launchpad.constants import BPS_DENOMINATOR
from launchpad.fees.result import FeeSplit
from launchpad.safe_int import S

logger = structlog.get_logger()


class InvalidFeeBps(ValueError):
    """Fee rate must be in range [0, 10000] bps."""

    pass


def fee(gross_amount: int, bps: int) -> int:
    """Compute floor(gross_amount * bps / 10000).

    Raises:
        InvalidFeeBps: If bps is outside [0, 10000]
        ValueError: If gross_amount is negative
    """
    if not 0 <= bps <= BPS_DENOMINATOR:
        raise InvalidFeeBps(f"Fee bps must be in [0, {BPS_DENOMINATOR}], got {bps}")
    if gross_amount < 0:
        raise ValueError(f"Gross amount cannot be negative: {gross_amount}")
    return ((S(gross_amount) * bps) // BPS_DENOMINATOR).value


class FeeCalculator(Protocol):
    """Protocol for trade fee calculation.

    The trade engine only needs a split for a gross amount and a rate, so
    tests can hand it a calculator with fixed or recorded behaviour.
    """

    def split(self, gross_amount: int, bps: int) -> FeeSplit:
        """Split a gross trade amount into fee and net."""
        ...


class BasisPointFeeCalculator:
    """Default fee calculation: floor(gross * bps / 10000)."""

    def split(self, gross_amount: int, bps: int) -> FeeSplit:
        amount = fee(gross_amount, bps)
        logger.debug("fee_calculated", gross=gross_amount, bps=bps, fee=amount)
        return FeeSplit(gross=gross_amount, fee=amount, bps=bps)


# Default calculator instance
DEFAULT_FEE_CALCULATOR = BasisPointFeeCalculator()
