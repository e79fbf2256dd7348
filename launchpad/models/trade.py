"""Trade quote and result types.

Results carry the post-trade reserves so the ledger layer can emit its
buy/sell events without re-reading the state.
"""

from dataclasses import dataclass
from enum import Enum


class BuyMode(str, Enum):
    """Which side of a buy the caller fixes."""

    BY_TOKEN = "by_token"  # exact token amount, bounded by max SOL cost
    BY_SOL = "by_sol"  # exact SOL amount, bounded by min token amount


@dataclass(frozen=True)
class BuyQuote:
    """Priced buy, before any state change.

    Attributes:
        token_amount: Tokens the buyer receives
        sol_cost: Lamports added to the curve reserve
        fee_amount: Buy fee on sol_cost, paid on top
        clamped: True if the request was cut down to the remaining reserve
    """

    token_amount: int
    sol_cost: int
    fee_amount: int
    clamped: bool = False


@dataclass(frozen=True)
class SellQuote:
    """Priced sell, before any state change."""

    sol_amount: int
    fee_amount: int


@dataclass(frozen=True)
class BuyResult:
    """Settled buy.

    `referral_partner` is the partner named by the buyer, passed through
    unpriced for the ledger's buy event.
    """

    token_amount: int
    sol_charged: int
    fee_amount: int
    reserve_sol: int
    reserve_token: int
    completed: bool = False
    referral_partner: str | None = None

    @property
    def total_sol_paid(self) -> int:
        """Lamports leaving the buyer: curve charge plus fee."""
        return self.sol_charged + self.fee_amount


@dataclass(frozen=True)
class SellResult:
    """Settled sell."""

    token_amount: int
    sol_amount: int
    fee_amount: int
    reserve_sol: int
    reserve_token: int

    @property
    def net_sol_amount(self) -> int:
        """Lamports the seller keeps after paying the fee."""
        return self.sol_amount - self.fee_amount


@dataclass(frozen=True)
class WithdrawResult:
    """Reserves released to the migration destination."""

    sol_out: int
    token_out: int
    migration_account: str | None = None
