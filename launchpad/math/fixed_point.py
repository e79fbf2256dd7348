"""Fixed-point integer primitives for curve math.

Curve values carry a precision factor of SCALE = 10^9 through every
intermediate step; the final division removes it. All operations are on
Python ints, so operands well beyond 10^40 are exact.
"""

from __future__ import annotations

__all__ = [
    "SCALE",
    "integer_sqrt",
    "scale_up",
    "scale_down",
]

# Precision factor (9 decimals)
SCALE = 10**9


def integer_sqrt(n: int) -> int:
    """Compute floor(sqrt(n)) with Newton's method.

    Starts from x0 = n and iterates y = (x + n // x) // 2 until the sequence
    stops decreasing. The first non-decreasing step means x is the floor root.

    Args:
        n: Non-negative integer

    Returns:
        The largest integer r with r * r <= n

    Raises:
        ValueError: If n is negative

    Examples:
        integer_sqrt(15) == 3
        integer_sqrt(10**40) == 10**20
    """
    if n < 0:
        raise ValueError(f"integer_sqrt requires non-negative input, got {n}")
    if n < 2:
        return n

    x = n
    y = (x + n // x) // 2
    while y < x:
        x = y
        y = (x + n // x) // 2
    return x


def scale_up(value: int, times: int = 1) -> int:
    """Multiply value by SCALE^times."""
    return value * SCALE**times


def scale_down(value: int, times: int = 1) -> int:
    """Floor-divide value by SCALE^times."""
    return value // SCALE**times
