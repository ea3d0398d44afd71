from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Union
from shareledger.core.errors import ValidationError

CENTS = Decimal("0.01")


@dataclass(frozen=True, order=True)
class Money:
    """
    Fixed-point amount with exactly 2 fractional digits, stored as integer cents.

    Addition, subtraction and comparison are exact integer operations.
    Rounding only ever happens in round_half_up_to_cents().
    """
    cents: int = 0

    def __post_init__(self):
        if isinstance(self.cents, bool) or not isinstance(self.cents, int):
            raise TypeError(f"Money needs integer cents, got {self.cents!r}")

    @classmethod
    def of(cls, value: Union["Money", Decimal, str, int]) -> "Money":
        """Parse a major-unit value ("12.50", Decimal("3"), 7) without rounding."""
        if isinstance(value, Money):
            return value
        if isinstance(value, float) or isinstance(value, bool):
            raise ValidationError(f"Money must not be built from {type(value).__name__}: {value!r}")

        try:
            d = Decimal(value) if not isinstance(value, Decimal) else value
            quantized = d.quantize(CENTS) if d.is_finite() else None
        except (InvalidOperation, TypeError, ValueError):
            raise ValidationError(f"Invalid money amount: {value!r}")

        if quantized is None:
            raise ValidationError(f"Invalid money amount: {value!r}")

        if d != quantized:
            raise ValidationError(f"Money amount has more than 2 decimal places: {value}")

        return cls(int(quantized.scaleb(2)))

    def to_decimal(self) -> Decimal:
        return Decimal(self.cents).scaleb(-2).quantize(CENTS)

    def __add__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return Money(self.cents + other.cents)

    def __radd__(self, other):
        # sum() starts from int 0
        if other == 0:
            return self
        return NotImplemented

    def __sub__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return Money(self.cents - other.cents)

    def __mul__(self, factor):
        if isinstance(factor, bool) or not isinstance(factor, int):
            return NotImplemented
        return Money(self.cents * factor)

    __rmul__ = __mul__

    def __neg__(self):
        return Money(-self.cents)

    def __abs__(self):
        return Money(abs(self.cents))

    def __bool__(self):
        return self.cents != 0

    def __str__(self):
        return str(self.to_decimal())

    def __repr__(self):
        return f"Money('{self}')"


ZERO = Money(0)
ONE_CENT = Money(1)


def round_half_up_to_cents(value: Decimal) -> Money:
    """Round a major-unit Decimal half-up to whole cents."""
    return Money(int(value.quantize(CENTS, rounding=ROUND_HALF_UP).scaleb(2)))
