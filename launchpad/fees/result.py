"""Fee calculation result types."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FeeSplit:
    """Fee extracted from a gross trade amount.

    The fee is routed to the fee recipient by the ledger layer; the core only
    reports how large it is.

    Attributes:
        gross: Amount the fee was computed on
        fee: floor(gross * bps / 10000)
        bps: Rate applied, in basis points

    Examples:
        split = FeeSplit(gross=1_000_000, fee=10_000, bps=100)
        assert split.net == 990_000
    """

    gross: int
    fee: int
    bps: int

    @property
    def net(self) -> int:
        """Gross amount with the fee removed."""
        return self.gross - self.fee

    @property
    def requires_fee(self) -> bool:
        """True if a non-zero fee should be routed."""
        return self.fee > 0
