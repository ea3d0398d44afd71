from decimal import Decimal
import pytest
from shareledger.core.errors import ValidationError
from shareledger.core.money import Money, ZERO, round_half_up_to_cents


def test_parse_and_render():
    assert Money.of("12.5") == Money(1250)
    assert Money.of(Decimal("3")) == Money(300)
    assert Money.of(7) == Money(700)
    assert str(Money(1250)) == "12.50"
    assert str(Money(-50)) == "-0.50"
    assert str(ZERO) == "0.00"


@pytest.mark.parametrize("bad", ["1.005", "abc", "NaN", 1.5])
def test_rejects_malformed_amounts(bad):
    with pytest.raises(ValidationError):
        Money.of(bad)


def test_arithmetic_is_exact():
    amounts = [Money.of("0.10")] * 3
    assert sum(amounts) == Money.of("0.30")
    assert Money.of("1.00") - Money.of("0.01") == Money(99)
    assert -Money(5) == Money(-5)
    assert Money(3) * 4 == Money(12)
    assert Money(1) < Money(2)


def test_round_half_up():
    assert round_half_up_to_cents(Decimal("0.005")) == Money(1)
    assert round_half_up_to_cents(Decimal("0.0049")) == Money(0)
    assert round_half_up_to_cents(Decimal("100") / 3) == Money(3333)
    assert round_half_up_to_cents(Decimal("-0.005")) == Money(-1)
