"""Tests for the basis-point fee calculator."""

import pytest

from launchpad.fees import (
    DEFAULT_FEE_CALCULATOR,
    BasisPointFeeCalculator,
    FeeSplit,
    InvalidFeeBps,
    fee,
)


class TestFee:
    """Tests for fee()."""

    @pytest.mark.parametrize("bps", [0, 1, 25, 30, 100, 999, 5000, 9999, 10000])
    def test_matches_floor_formula(self, bps: int):
        """fee == floor(gross * bps / 10000) across the bps range."""
        for gross in (0, 1, 9_999, 10_000, 1_945_922_405, 85_000_000_062, 2**64 - 1):
            assert fee(gross, bps) == gross * bps // 10_000

    def test_zero_bps_is_free(self):
        assert fee(10**12, 0) == 0

    def test_full_bps_takes_everything(self):
        assert fee(12_345, 10_000) == 12_345

    def test_floors_toward_trader(self):
        """199 lamports at 1% is 1.99 -> 1."""
        assert fee(199, 100) == 1
        assert fee(99, 100) == 0

    def test_deployment_fees(self):
        assert fee(85_000_000_062, 100) == 850_000_000
        assert fee(1_891_869_004, 100) == 18_918_690

    @pytest.mark.parametrize("bps", [-1, 10_001, 65_535])
    def test_invalid_bps_raises(self, bps: int):
        with pytest.raises(InvalidFeeBps):
            fee(1_000, bps)

    def test_invalid_bps_is_value_error(self):
        assert issubclass(InvalidFeeBps, ValueError)

    def test_negative_gross_raises(self):
        with pytest.raises(ValueError, match="negative"):
            fee(-1, 100)


class TestFeeSplit:
    """Tests for FeeSplit."""

    def test_net(self):
        split = FeeSplit(gross=1_000_000, fee=10_000, bps=100)
        assert split.net == 990_000
        assert split.requires_fee

    def test_zero_fee(self):
        split = FeeSplit(gross=1_000_000, fee=0, bps=0)
        assert split.net == 1_000_000
        assert not split.requires_fee

    def test_frozen(self):
        split = FeeSplit(gross=1, fee=0, bps=0)
        with pytest.raises(AttributeError):
            split.fee = 1  # type: ignore[misc]


class TestBasisPointFeeCalculator:
    """Tests for the default calculator."""

    def test_split(self):
        split = BasisPointFeeCalculator().split(1_945_922_405, 100)
        assert split == FeeSplit(gross=1_945_922_405, fee=19_459_224, bps=100)

    def test_default_instance(self):
        assert isinstance(DEFAULT_FEE_CALCULATOR, BasisPointFeeCalculator)
        assert DEFAULT_FEE_CALCULATOR.split(10_000, 30).fee == 30
