"""Bonding curve pricing."""

from launchpad.curve.pricing import PricingCurve

__all__ = ["PricingCurve"]
