"""Per-sale bonding curve state."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from launchpad.models.config import CurveConfig


class CurveStatus(str, Enum):
    """Lifecycle stage of a sale."""

    ACTIVE = "active"
    COMPLETED = "completed"
    WITHDRAWN = "withdrawn"


@dataclass
class BondingCurveState:
    """Reserves and lifecycle flags of one sale instance.

    Only TradeEngine and CurveLifecycle mutate this; callers that need a
    stable view should take a snapshot().

    Attributes:
        config: Parameters the sale was created with
        reserve_token: Tokens still held by the curve (starts at threshold)
        reserve_sol: Lamports held by the curve
        completed: True once reserve_token reached 0
        withdrawn: True after the single terminal withdrawal
    """

    config: CurveConfig
    reserve_token: int
    reserve_sol: int = 0
    completed: bool = False
    withdrawn: bool = False

    @property
    def curve_a(self) -> int:
        return self.config.curve_a

    @property
    def token_threshold(self) -> int:
        return self.config.token_threshold

    @property
    def token_supply(self) -> int:
        return self.config.token_supply

    @property
    def circulating_supply(self) -> int:
        """Tokens sold through the curve and not sold back."""
        return self.token_threshold - self.reserve_token

    @property
    def status(self) -> CurveStatus:
        if self.withdrawn:
            return CurveStatus.WITHDRAWN
        if self.completed:
            return CurveStatus.COMPLETED
        return CurveStatus.ACTIVE

    def snapshot(self) -> BondingCurveState:
        """Return an independent copy of this state."""
        return replace(self)
