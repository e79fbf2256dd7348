"""Sale lifecycle: ACTIVE -> COMPLETED -> WITHDRAWN.

A sale completes inside the buy that empties the curve's token reserve and
is withdrawn by a single explicit call. WITHDRAWN is terminal: the state is
kept for reference but accepts no further operations.
"""

from __future__ import annotations

import structlog

from launchpad.errors import AlreadyWithdrawn, BondingCurveCompleted, BondingCurveNotCompleted
from launchpad.models.config import CurveConfig
from launchpad.models.state import BondingCurveState, CurveStatus
from launchpad.models.trade import WithdrawResult

logger = structlog.get_logger()


def init_sale(config: CurveConfig) -> BondingCurveState:
    """Create the state of a new sale with the full threshold on the curve."""
    return BondingCurveState(config=config, reserve_token=config.token_threshold, reserve_sol=0)


class CurveLifecycle:
    """Guards and transitions of the sale state machine."""

    @staticmethod
    def ensure_tradable(state: BondingCurveState) -> None:
        """Raise BondingCurveCompleted unless the sale is ACTIVE."""
        if state.status is not CurveStatus.ACTIVE:
            raise BondingCurveCompleted(f"sale is {state.status.value}")

    @staticmethod
    def ensure_withdrawable(state: BondingCurveState) -> None:
        """Raise unless the sale is COMPLETED.

        Raises:
            AlreadyWithdrawn: If the sale was already withdrawn
            BondingCurveNotCompleted: If the sale is still ACTIVE
        """
        status = state.status
        if status is CurveStatus.WITHDRAWN:
            raise AlreadyWithdrawn()
        if status is CurveStatus.ACTIVE:
            raise BondingCurveNotCompleted(f"{state.reserve_token} tokens left on the curve")

    @staticmethod
    def complete_if_exhausted(state: BondingCurveState) -> bool:
        """Move an ACTIVE sale to COMPLETED once its token reserve is empty.

        Returns:
            True if this call performed the transition
        """
        if state.completed or state.reserve_token != 0:
            return False

        state.completed = True
        logger.info(
            "bonding_curve_completed",
            reserve_sol=state.reserve_sol,
            token_threshold=state.token_threshold,
        )
        return True

    @classmethod
    def withdraw(cls, state: BondingCurveState) -> WithdrawResult:
        """Release the reserves of a COMPLETED sale, exactly once.

        The migration destination receives the SOL reserve and the minted
        tokens that were never offered on the curve (supply - threshold).
        """
        cls.ensure_withdrawable(state)

        result = WithdrawResult(
            sol_out=state.reserve_sol,
            token_out=state.config.tokens_outside_curve,
            migration_account=state.config.migration_account,
        )

        state.reserve_sol = 0
        state.reserve_token = 0
        state.withdrawn = True

        logger.info(
            "bonding_curve_withdrawn",
            sol_out=result.sol_out,
            token_out=result.token_out,
            migration_account=result.migration_account,
        )
        return result
