#!/usr/bin/env python3
"""
Money Primitive Type

Immutable currency value wrapper that uses integer won internally.
Prevents floating-point drift when order amounts are summed across thousands
of rows.
"""

from dataclasses import dataclass
from typing import Any

from .currency import format_won, parse_won_amount


@dataclass(frozen=True)
class Money:
    """
    Immutable money value in won (KRW).

    Supports both positive and negative amounts (refunds and adjustments show
    up as negative settlement values in some marketplace exports).

    Examples:
        >>> payment = Money.from_won(12900)
        >>> str(payment)
        '₩12,900'

        >>> Money.parse("1,200원") + Money.parse("300")
        Money(won=1500)

        >>> Money.parse("3,000") * 2
        Money(won=6000)
    """

    won: int

    @classmethod
    def from_won(cls, won: int) -> "Money":
        """Create Money from integer won."""
        return cls(won=int(won))

    @classmethod
    def zero(cls) -> "Money":
        """Create a zero amount."""
        return cls(won=0)

    @classmethod
    def parse(cls, value: Any) -> "Money":
        """
        Parse a sheet cell like '12,900원' into Money.

        Invalid or empty cells become zero.
        """
        return cls(won=parse_won_amount(value))

    def to_won(self) -> int:
        """Get value in won."""
        return self.won

    def __add__(self, other: "Money") -> "Money":
        """Add two Money objects."""
        return Money(won=self.won + other.won)

    def __sub__(self, other: "Money") -> "Money":
        """Subtract two Money objects."""
        return Money(won=self.won - other.won)

    def __mul__(self, scalar: int) -> "Money":
        """Multiply Money by integer scalar."""
        return Money(won=self.won * scalar)

    def __lt__(self, other: "Money") -> bool:
        return self.won < other.won

    def __le__(self, other: "Money") -> bool:
        return self.won <= other.won

    def __gt__(self, other: "Money") -> bool:
        return self.won > other.won

    def __ge__(self, other: "Money") -> bool:
        return self.won >= other.won

    def __str__(self) -> str:
        """Format as won string."""
        return format_won(self.won)

    def __repr__(self) -> str:
        return f"Money(won={self.won})"
