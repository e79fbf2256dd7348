"""Registry of live sales with per-sale exclusive locking.

Each sale's state is a single-writer resource: buys, sells and the withdraw
of one sale run one at a time under that sale's lock, while different sales
never contend. Quotes are computed on a snapshot taken under the lock and
then priced without holding it.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager

import structlog

from launchpad.engine import TradeEngine
from launchpad.errors import DuplicateSale, UnknownSale
from launchpad.lifecycle import init_sale
from launchpad.models.config import CurveConfig
from launchpad.models.state import BondingCurveState
from launchpad.models.trade import (
    BuyMode,
    BuyQuote,
    BuyResult,
    SellQuote,
    SellResult,
    WithdrawResult,
)

logger = structlog.get_logger()


class SaleRegistry:
    """Owns sale states keyed by sale id (typically the token mint).

    Attributes:
        engine: Trade engine used for every sale in the registry
    """

    def __init__(self, engine: TradeEngine | None = None) -> None:
        self.engine = engine or TradeEngine()
        self._sales: dict[str, BondingCurveState] = {}
        self._locks: dict[str, threading.Lock] = {}
        # Guards the two tables above, never held while trading
        self._table_lock = threading.Lock()

    def __contains__(self, sale_id: object) -> bool:
        with self._table_lock:
            return sale_id in self._sales

    def __len__(self) -> int:
        with self._table_lock:
            return len(self._sales)

    @property
    def sale_ids(self) -> list[str]:
        with self._table_lock:
            return list(self._sales)

    def init_sale(self, sale_id: str, config: CurveConfig) -> BondingCurveState:
        """Create and register a new sale.

        Returns:
            Snapshot of the new sale's state

        Raises:
            DuplicateSale: If sale_id is already registered
        """
        state = init_sale(config)
        with self._table_lock:
            if sale_id in self._sales:
                raise DuplicateSale(sale_id)
            self._sales[sale_id] = state
            self._locks[sale_id] = threading.Lock()
            snapshot = state.snapshot()

        logger.info(
            "sale_initialized",
            sale_id=sale_id,
            curve_a=config.curve_a,
            token_supply=config.token_supply,
            token_threshold=config.token_threshold,
            deploy_fee=config.deploy_fee,
        )
        return snapshot

    def snapshot(self, sale_id: str) -> BondingCurveState:
        """Consistent copy of a sale's current state."""
        with self._locked(sale_id) as state:
            return state.snapshot()

    # --- Quotes ---

    def quote_buy(
        self,
        sale_id: str,
        amount_in: int,
        bound: int,
        mode: BuyMode = BuyMode.BY_SOL,
    ) -> BuyQuote:
        return self.engine.quote_buy(self.snapshot(sale_id), amount_in, bound, mode)

    def quote_sell(self, sale_id: str, token_amount: int, min_sol_amount: int) -> SellQuote:
        return self.engine.quote_sell(self.snapshot(sale_id), token_amount, min_sol_amount)

    # --- Trades ---

    def buy(
        self,
        sale_id: str,
        amount_in: int,
        bound: int,
        mode: BuyMode = BuyMode.BY_SOL,
        referral_partner: str | None = None,
    ) -> BuyResult:
        with self._locked(sale_id) as state:
            return self.engine.buy(state, amount_in, bound, mode, referral_partner)

    def sell(self, sale_id: str, token_amount: int, min_sol_amount: int) -> SellResult:
        with self._locked(sale_id) as state:
            return self.engine.sell(state, token_amount, min_sol_amount)

    def withdraw(self, sale_id: str) -> WithdrawResult:
        with self._locked(sale_id) as state:
            return self.engine.withdraw(state)

    @contextmanager
    def _locked(self, sale_id: str) -> Iterator[BondingCurveState]:
        """Hold the sale's exclusive lock and yield its live state."""
        with self._table_lock:
            state = self._sales.get(sale_id)
            lock = self._locks.get(sale_id)
        if state is None or lock is None:
            raise UnknownSale(sale_id)

        with lock:
            yield state
