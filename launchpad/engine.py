"""Trade engine: prices buys and sells against a sale's bonding curve.

Every trade is quote -> slippage check -> mutation. Quotes never touch the
state and raise before anything changes, so a failed trade leaves the state
exactly as it was. Fees are computed here but routed by the ledger layer;
they never enter the curve reserve.
"""

from __future__ import annotations

import structlog

from launchpad.curve.pricing import PricingCurve
from launchpad.errors import (
    InsufficientCirculatingSupply,
    LessThanMinSolAmount,
    LessThanMinTokenAmount,
    MoreThanMaxSolCost,
    ZeroAmount,
)
from launchpad.fees.calculator import DEFAULT_FEE_CALCULATOR, FeeCalculator
from launchpad.lifecycle import CurveLifecycle
from launchpad.models.state import BondingCurveState
from launchpad.models.trade import (
    BuyMode,
    BuyQuote,
    BuyResult,
    SellQuote,
    SellResult,
    WithdrawResult,
)
from launchpad.safe_int import S

logger = structlog.get_logger()


def _require_amount(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} cannot be negative: {value}")


class TradeEngine:
    """Buy/sell pricing and settlement for bonding curve sales.

    Attributes:
        fee_calculator: Computes the buy/sell fee on the SOL leg
    """

    def __init__(self, fee_calculator: FeeCalculator | None = None) -> None:
        self.fee_calculator = fee_calculator or DEFAULT_FEE_CALCULATOR

    # --- Quotes (pure) ---

    def quote_buy_by_token_amount(
        self,
        state: BondingCurveState,
        token_amount: int,
        max_sol_cost: int,
    ) -> BuyQuote:
        """Price a buy of an exact token amount.

        A request larger than the tokens left on the curve is cut down to the
        remainder and priced for that.

        Raises:
            BondingCurveCompleted: If the sale is not active
            ZeroAmount: If token_amount is 0
            MoreThanMaxSolCost: If the SOL cost exceeds max_sol_cost
        """
        _require_amount("token_amount", token_amount)
        CurveLifecycle.ensure_tradable(state)
        if token_amount == 0:
            raise ZeroAmount("token_amount")

        curve = PricingCurve(state.curve_a)
        circulating = state.circulating_supply

        clamped = token_amount > state.reserve_token
        if clamped:
            token_amount = state.reserve_token

        sol_cost = curve.sol_for_token_delta(circulating, token_amount)
        if sol_cost > max_sol_cost:
            logger.warning(
                "buy_rejected_max_sol_cost",
                token_amount=token_amount,
                sol_cost=sol_cost,
                max_sol_cost=max_sol_cost,
            )
            raise MoreThanMaxSolCost(f"cost {sol_cost} > max {max_sol_cost}")

        fee = self.fee_calculator.split(sol_cost, state.config.buy_fee_bps)
        logger.debug(
            "buy_quoted",
            mode=BuyMode.BY_TOKEN.value,
            circulating_supply=circulating,
            token_amount=token_amount,
            sol_cost=sol_cost,
            fee=fee.fee,
            clamped=clamped,
        )
        return BuyQuote(
            token_amount=token_amount,
            sol_cost=sol_cost,
            fee_amount=fee.fee,
            clamped=clamped,
        )

    def quote_buy_by_sol_amount(
        self,
        state: BondingCurveState,
        sol_amount: int,
        min_token_amount: int,
    ) -> BuyQuote:
        """Price a buy that spends up to `sol_amount` lamports.

        The tokens handed out never cost more on the curve than sol_amount,
        so selling them straight back cannot return more than was paid.
        If the SOL would buy past the threshold, the buyer gets only the tokens
        left on the curve and is charged the cost of exactly those tokens
        (plus one lamport of rounding in the protocol's favour, never more
        than sol_amount). The excess is not charged.

        Raises:
            BondingCurveCompleted: If the sale is not active
            ZeroAmount: If sol_amount is 0
            LessThanMinTokenAmount: If the (possibly clamped) token amount is
                below min_token_amount
        """
        _require_amount("sol_amount", sol_amount)
        CurveLifecycle.ensure_tradable(state)
        if sol_amount == 0:
            raise ZeroAmount("sol_amount")

        curve = PricingCurve(state.curve_a)
        circulating = state.circulating_supply

        token_amount = curve.affordable_token_delta(circulating, sol_amount)
        sol_cost = sol_amount
        clamped = token_amount > state.reserve_token
        if clamped:
            token_amount = state.reserve_token
            remainder_cost = S(curve.sol_for_token_delta(circulating, token_amount)) + 1
            sol_cost = remainder_cost.min(sol_amount).value

        if token_amount < min_token_amount:
            logger.warning(
                "buy_rejected_min_token_amount",
                sol_amount=sol_amount,
                token_amount=token_amount,
                min_token_amount=min_token_amount,
            )
            raise LessThanMinTokenAmount(f"{token_amount} < {min_token_amount}")

        fee = self.fee_calculator.split(sol_cost, state.config.buy_fee_bps)
        logger.debug(
            "buy_quoted",
            mode=BuyMode.BY_SOL.value,
            circulating_supply=circulating,
            token_amount=token_amount,
            sol_cost=sol_cost,
            fee=fee.fee,
            clamped=clamped,
        )
        return BuyQuote(
            token_amount=token_amount,
            sol_cost=sol_cost,
            fee_amount=fee.fee,
            clamped=clamped,
        )

    def quote_buy(
        self,
        state: BondingCurveState,
        amount_in: int,
        bound: int,
        mode: BuyMode = BuyMode.BY_SOL,
    ) -> BuyQuote:
        """Price a buy in either mode.

        Args:
            state: Sale state
            amount_in: Token amount (BY_TOKEN) or lamports (BY_SOL)
            bound: Max SOL cost (BY_TOKEN) or min token amount (BY_SOL)
            mode: Which side the caller fixes
        """
        if mode is BuyMode.BY_TOKEN:
            return self.quote_buy_by_token_amount(state, amount_in, bound)
        return self.quote_buy_by_sol_amount(state, amount_in, bound)

    def quote_sell(
        self,
        state: BondingCurveState,
        token_amount: int,
        min_sol_amount: int,
    ) -> SellQuote:
        """Price a sell of `token_amount` tokens back to the curve.

        The proceeds are the cost of the last `token_amount` tokens sold, less
        one lamport when positive, so a buy followed by the same sell never
        pays out more than went in. Proceeds are also capped at the SOL
        reserve.

        Raises:
            BondingCurveCompleted: If the sale is not active
            ZeroAmount: If token_amount is 0
            InsufficientCirculatingSupply: If more tokens are sold than circulate
            LessThanMinSolAmount: If proceeds are below min_sol_amount
        """
        _require_amount("token_amount", token_amount)
        CurveLifecycle.ensure_tradable(state)
        if token_amount == 0:
            raise ZeroAmount("token_amount")

        circulating = state.circulating_supply
        if token_amount > circulating:
            raise InsufficientCirculatingSupply(f"{token_amount} > {circulating}")

        curve = PricingCurve(state.curve_a)
        sol_amount = S(curve.sol_for_token_delta(circulating - token_amount, token_amount))
        sol_amount = sol_amount.saturating_sub(1).min(state.reserve_sol)

        if sol_amount < min_sol_amount:
            logger.warning(
                "sell_rejected_min_sol_amount",
                token_amount=token_amount,
                sol_amount=sol_amount.value,
                min_sol_amount=min_sol_amount,
            )
            raise LessThanMinSolAmount(f"{sol_amount.value} < {min_sol_amount}")

        fee = self.fee_calculator.split(sol_amount.value, state.config.sell_fee_bps)
        logger.debug(
            "sell_quoted",
            circulating_supply=circulating,
            token_amount=token_amount,
            sol_amount=sol_amount.value,
            fee=fee.fee,
        )
        return SellQuote(sol_amount=sol_amount.value, fee_amount=fee.fee)

    # --- Settlement (mutating) ---

    def apply_buy(
        self,
        state: BondingCurveState,
        sol_amount: int,
        min_token_amount: int,
        referral_partner: str | None = None,
    ) -> BuyResult:
        """Buy with an exact SOL amount and settle it on the state."""
        quote = self.quote_buy_by_sol_amount(state, sol_amount, min_token_amount)
        return self._settle_buy(state, quote, referral_partner)

    def apply_buy_by_token_amount(
        self,
        state: BondingCurveState,
        token_amount: int,
        max_sol_cost: int,
        referral_partner: str | None = None,
    ) -> BuyResult:
        """Buy an exact token amount and settle it on the state."""
        quote = self.quote_buy_by_token_amount(state, token_amount, max_sol_cost)
        return self._settle_buy(state, quote, referral_partner)

    def buy(
        self,
        state: BondingCurveState,
        amount_in: int,
        bound: int,
        mode: BuyMode = BuyMode.BY_SOL,
        referral_partner: str | None = None,
    ) -> BuyResult:
        """Buy in either mode; see quote_buy for the argument meanings.

        `referral_partner` is not priced; it is carried on the result for the
        ledger's buy event.
        """
        quote = self.quote_buy(state, amount_in, bound, mode)
        return self._settle_buy(state, quote, referral_partner)

    def apply_sell(
        self,
        state: BondingCurveState,
        token_amount: int,
        min_sol_amount: int,
    ) -> SellResult:
        """Sell tokens back to the curve and settle it on the state."""
        quote = self.quote_sell(state, token_amount, min_sol_amount)

        reserve_token = (S(state.reserve_token) + token_amount).to_u64()
        reserve_sol = (S(state.reserve_sol) - quote.sol_amount).to_u64()

        state.reserve_token = reserve_token
        state.reserve_sol = reserve_sol

        logger.info(
            "sell_settled",
            token_amount=token_amount,
            sol_amount=quote.sol_amount,
            fee=quote.fee_amount,
            reserve_sol=reserve_sol,
            reserve_token=reserve_token,
        )
        return SellResult(
            token_amount=token_amount,
            sol_amount=quote.sol_amount,
            fee_amount=quote.fee_amount,
            reserve_sol=reserve_sol,
            reserve_token=reserve_token,
        )

    sell = apply_sell

    def withdraw(self, state: BondingCurveState) -> WithdrawResult:
        """Release the reserves of a completed sale (once)."""
        return CurveLifecycle.withdraw(state)

    def _settle_buy(
        self,
        state: BondingCurveState,
        quote: BuyQuote,
        referral_partner: str | None = None,
    ) -> BuyResult:
        # New values are computed first so an arithmetic error cannot leave
        # a half-applied trade.
        reserve_token = (S(state.reserve_token) - quote.token_amount).to_u64()
        reserve_sol = (S(state.reserve_sol) + quote.sol_cost).to_u64()

        state.reserve_token = reserve_token
        state.reserve_sol = reserve_sol
        completed = CurveLifecycle.complete_if_exhausted(state)

        logger.info(
            "buy_settled",
            token_amount=quote.token_amount,
            sol_charged=quote.sol_cost,
            fee=quote.fee_amount,
            reserve_sol=reserve_sol,
            reserve_token=reserve_token,
            completed=completed,
            referral_partner=referral_partner,
        )
        return BuyResult(
            token_amount=quote.token_amount,
            sol_charged=quote.sol_cost,
            fee_amount=quote.fee_amount,
            reserve_sol=reserve_sol,
            reserve_token=reserve_token,
            completed=state.completed,
            referral_partner=referral_partner,
        )
