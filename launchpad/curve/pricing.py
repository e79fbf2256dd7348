"""Square-root bonding curve pricing.

The curve relates circulating token supply to the SOL reserve raised so far:

    reserve(supply) = supply^2 / a^2
    supply(reserve) = a * sqrt(reserve)

Both directions are computed on integers with the SCALE precision factor,
flooring at every division. The floors make the two maps approximate
inverses only: cumulative_cost(inverse_cumulative_cost(r)) lands within a
lamport or two of r, while a token round trip can lose up to one lamport's
worth of tokens at the current price.
"""

from __future__ import annotations

from dataclasses import dataclass

from launchpad.math.fixed_point import integer_sqrt, scale_down, scale_up
from launchpad.safe_int import S


@dataclass(frozen=True)
class PricingCurve:
    """Pricing functions for a single curve constant.

    Attributes:
        curve_a: Steepness constant; larger values make tokens cheaper
    """

    curve_a: int

    def __post_init__(self) -> None:
        if self.curve_a <= 0:
            raise ValueError(f"curve_a must be positive, got {self.curve_a}")

    def cumulative_cost(self, token_reserve: int) -> int:
        """SOL raised once `token_reserve` tokens have been sold.

        Formula: floor(floor(supply^2 * SCALE / a^2) / SCALE)
        """
        if token_reserve == 0:
            return 0

        scaled_square = S(scale_up(token_reserve**2))
        return scale_down((scaled_square // S(self.curve_a) ** 2).value)

    def inverse_cumulative_cost(self, sol_reserve: int) -> int:
        """Tokens sold once `sol_reserve` lamports have been raised.

        Formula: floor(isqrt(reserve * SCALE^2) * a / SCALE)
        """
        if sol_reserve == 0:
            return 0

        root = integer_sqrt(scale_up(sol_reserve, times=2))
        return scale_down(root * self.curve_a)

    def sol_for_token_delta(self, current_token_reserve: int, token_delta: int) -> int:
        """Marginal SOL cost of the next `token_delta` tokens.

        Args:
            current_token_reserve: Tokens already in circulation
            token_delta: Additional tokens

        Returns:
            cost(current + delta) - cost(current)
        """
        after = self.cumulative_cost(current_token_reserve + token_delta)
        before = self.cumulative_cost(current_token_reserve)
        return (S(after) - before).value

    def token_for_sol_delta(self, current_token_reserve: int, sol_delta: int) -> int:
        """Tokens bought by adding `sol_delta` lamports at the current supply.

        The supply is first mapped to its reserve, the SOL is added there, and
        the difference is taken in token space so both terms share the same
        rounding.

        Args:
            current_token_reserve: Tokens already in circulation
            sol_delta: Lamports added to the reserve

        Returns:
            Tokens released by the curve
        """
        sol_reserve = self.cumulative_cost(current_token_reserve)
        after = self.inverse_cumulative_cost(sol_reserve + sol_delta)
        before = self.inverse_cumulative_cost(sol_reserve)
        return (S(after) - before).value

    def affordable_token_delta(self, current_token_reserve: int, sol_budget: int) -> int:
        """Tokens that `sol_budget` lamports can pay for at the current supply.

        Same as token_for_sol_delta, but never more tokens than the budget
        covers: sol_for_token_delta(current, result) <= sol_budget. The
        supply a reserve maps back to can sit below the real supply, and
        measuring from there alone would over-deliver by up to a couple of
        lamports' worth of tokens.
        """
        sol_reserve = self.cumulative_cost(current_token_reserve)
        covered = S(self.inverse_cumulative_cost(sol_reserve + sol_budget)).saturating_sub(
            current_token_reserve
        )
        return covered.min(self.token_for_sol_delta(current_token_reserve, sol_budget)).value
