"""Checked integer wrapper for ledger amounts.

Curve math runs on Python's unbounded ints, so intermediate products may be
far larger than anything the ledger stores. SafeInt keeps that freedom but
makes the failure modes explicit:
- Division by zero raises DivisionByZero
- Subtraction below zero raises Underflow
- Amounts outside u64 raise U64Overflow when converted with to_u64()

Usage pattern:
    from launchpad.safe_int import S

    def marginal_cost(a: int, b: int, scale: int) -> int:
        sa, sb = S(a), S(b)
        return ((sa - sb) * scale // sb).to_u64()
"""

from __future__ import annotations

from launchpad.constants import U64_MAX


class SafeIntError(ArithmeticError):
    """Base class for SafeInt arithmetic errors."""

    pass


class DivisionByZero(SafeIntError):
    """Division by zero."""

    pass


class Underflow(SafeIntError):
    """Subtraction would produce a negative result."""

    pass


class U64Overflow(SafeIntError):
    """Value does not fit in an unsigned 64-bit ledger amount."""

    pass


class SafeInt:
    """Integer with checked arithmetic.

    Attributes:
        value: The wrapped integer (read-only)
    """

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int | SafeInt) -> None:
        if isinstance(value, SafeInt):
            self._value = value._value
        elif isinstance(value, int) and not isinstance(value, bool):
            self._value = value
        else:
            raise TypeError(f"SafeInt requires int, got {type(value).__name__}")

    @property
    def value(self) -> int:
        """The underlying integer value."""
        return self._value

    def __repr__(self) -> str:
        return f"SafeInt({self._value})"

    def __hash__(self) -> int:
        return hash(self._value)

    def __add__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value + _extract_value(other))

    def __radd__(self, other: int) -> SafeInt:
        return SafeInt(other + self._value)

    def __sub__(self, other: SafeInt | int) -> SafeInt:
        """Subtract, raising Underflow if the result is negative."""
        other_val = _extract_value(other)
        result = self._value - other_val
        if result < 0:
            raise Underflow(f"Amount would go negative: {self._value} - {other_val}")
        return SafeInt(result)

    def __rsub__(self, other: int) -> SafeInt:
        result = other - self._value
        if result < 0:
            raise Underflow(f"Amount would go negative: {other} - {self._value}")
        return SafeInt(result)

    def __mul__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value * _extract_value(other))

    def __rmul__(self, other: int) -> SafeInt:
        return SafeInt(other * self._value)

    def __floordiv__(self, other: SafeInt | int) -> SafeInt:
        """Floor division, raising DivisionByZero on a zero divisor."""
        other_val = _extract_value(other)
        if other_val == 0:
            raise DivisionByZero(f"Cannot divide {self._value} by zero")
        return SafeInt(self._value // other_val)

    def __pow__(self, exponent: int) -> SafeInt:
        return SafeInt(self._value**exponent)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SafeInt):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def __lt__(self, other: SafeInt | int) -> bool:
        return self._value < _extract_value(other)

    def __le__(self, other: SafeInt | int) -> bool:
        return self._value <= _extract_value(other)

    def __gt__(self, other: SafeInt | int) -> bool:
        return self._value > _extract_value(other)

    def __ge__(self, other: SafeInt | int) -> bool:
        return self._value >= _extract_value(other)

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    def min(self, other: SafeInt | int) -> SafeInt:
        """Return the smaller of self and other."""
        return SafeInt(min(self._value, _extract_value(other)))

    def saturating_sub(self, other: SafeInt | int) -> SafeInt:
        """Subtract, clamping at zero instead of raising."""
        return SafeInt(max(0, self._value - _extract_value(other)))

    def to_u64(self) -> int:
        """Convert to int, validating the u64 range.

        Raises:
            U64Overflow: If value is negative or exceeds 2^64-1
        """
        if self._value < 0:
            raise U64Overflow(f"Negative value cannot be u64: {self._value}")
        if self._value > U64_MAX:
            raise U64Overflow(f"Value exceeds u64 max: {self._value}")
        return self._value


def _extract_value(x: SafeInt | int) -> int:
    if isinstance(x, SafeInt):
        return x._value
    return x


S = SafeInt
