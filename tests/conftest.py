"""Pytest configuration and fixtures."""

from dataclasses import dataclass, field

import pytest

from launchpad.engine import TradeEngine
from launchpad.fees import FeeSplit
from launchpad.models import BondingCurveState, CurveConfig
from launchpad.registry import SaleRegistry
from tests.helpers import make_config, make_state


@pytest.fixture
def config() -> CurveConfig:
    """Deployment configuration (1% buy and sell fees)."""
    return make_config()


@pytest.fixture
def state() -> BondingCurveState:
    """Fresh sale with the full threshold on the curve."""
    return make_state()


@pytest.fixture
def engine() -> TradeEngine:
    return TradeEngine()


@pytest.fixture
def registry(engine: TradeEngine) -> SaleRegistry:
    return SaleRegistry(engine=engine)


# =============================================================================
# Mock classes for dependency injection
# =============================================================================


@dataclass
class RecordingFeeCalculator:
    """Fee calculator returning a fixed fee and recording every call.

    Usage:
        calculator = RecordingFeeCalculator(fixed_fee=7)
        engine = TradeEngine(fee_calculator=calculator)
    """

    fixed_fee: int = 0
    calls: list[tuple[int, int]] = field(default_factory=list)

    def split(self, gross_amount: int, bps: int) -> FeeSplit:
        self.calls.append((gross_amount, bps))
        return FeeSplit(gross=gross_amount, fee=self.fixed_fee, bps=bps)


@pytest.fixture
def recording_fee_calculator() -> RecordingFeeCalculator:
    return RecordingFeeCalculator(fixed_fee=7)
