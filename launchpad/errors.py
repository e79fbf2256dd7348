"""Launchpad error classes.

Each error carries a stable `code` that the ledger layer can surface to
clients, plus a default human-readable message. Every trade error is raised
before any state is touched.
"""

from __future__ import annotations

from typing import ClassVar


class LaunchpadError(Exception):
    """Base error for launchpad operations."""

    code: ClassVar[str] = "LaunchpadError"
    message: ClassVar[str] = "Launchpad operation failed"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        super().__init__(f"{self.message}: {detail}" if detail else self.message)


class TradeError(LaunchpadError):
    """A buy, sell or withdraw was rejected."""

    code = "TradeError"
    message = "Trade rejected"


class ZeroAmount(TradeError):
    code = "ZeroAmount"
    message = "Trade not allowed for zero amount"


class LessThanMinTokenAmount(TradeError):
    code = "LessThanMinTokenAmount"
    message = "Calculated token amount is less than min token amount"


class LessThanMinSolAmount(TradeError):
    code = "LessThanMinSolAmount"
    message = "Calculated sol amount is less than min sol amount"


class MoreThanMaxSolCost(TradeError):
    code = "MoreThanMaxSolCost"
    message = "Calculated sol cost is more than max sol cost"


class BondingCurveCompleted(TradeError):
    code = "BondingCurveCompleted"
    message = "Trade not allowed after threshold reached"


class BondingCurveNotCompleted(TradeError):
    code = "BondingCurveNotCompleted"
    message = "Withdraw not allowed before threshold reached"


class AlreadyWithdrawn(TradeError):
    code = "AlreadyWithdrawn"
    message = "Already withdrawn"


class InsufficientCirculatingSupply(TradeError):
    """Sell of more tokens than the curve has released."""

    code = "InsufficientCirculatingSupply"
    message = "Sell amount exceeds circulating supply"


class InvalidConfig(LaunchpadError):
    """Curve configuration failed validation."""

    code = "InvalidConfig"
    message = "Invalid curve configuration"


class UnknownSale(LaunchpadError):
    code = "UnknownSale"
    message = "No sale registered under this id"


class DuplicateSale(LaunchpadError):
    code = "DuplicateSale"
    message = "A sale is already registered under this id"
