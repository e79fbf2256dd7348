"""Mathematical utilities for the launchpad.

This package provides the integer primitives used by curve pricing:
- integer_sqrt: exact floor square root
- SCALE: 10^9 fixed-point precision factor
"""

from launchpad.math.fixed_point import SCALE, integer_sqrt, scale_down, scale_up

__all__ = ["SCALE", "integer_sqrt", "scale_down", "scale_up"]
