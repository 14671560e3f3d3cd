"""Unit tests for minor-unit currency conversion"""

from decimal import Decimal
from debt_tracker.domain.currency import to_decimal, to_minor_units


def test_to_decimal_divides_by_thousand():
    assert to_decimal(20000) == Decimal("20.00")
    assert to_decimal(-300000) == Decimal("-300")
    assert to_decimal(1) == Decimal("0.001")
    assert to_decimal(0) == Decimal("0")


def test_to_minor_units_from_decimal_and_float():
    assert to_minor_units(Decimal("20.00")) == 20000
    assert to_minor_units(20.5) == 20500
    assert to_minor_units(0.1 + 0.2) == 300  # float noise does not leak
    assert to_minor_units("12.345") == 12345


def test_to_minor_units_rounds_half_away_from_zero():
    """Sub-unit amounts round to nearest, ties away from zero"""
    assert to_minor_units("0.0004") == 0
    assert to_minor_units("0.0005") == 1
    assert to_minor_units("0.0015") == 2
    assert to_minor_units("-0.0005") == -1


def test_cent_amounts_survive_round_trip():
    """Cent-precision amounts come back unchanged, up to the 10^9 range"""
    for value in ["0", "0.01", "19.99", "20.00", "123456.78", "999999999.99", "1000000000"]:
        assert to_decimal(to_minor_units(Decimal(value))) == Decimal(value)


def test_minor_units_round_trip_exact_for_integers():
    for minor in [0, 1, -1, 999, 20000, -123456789]:
        assert to_minor_units(to_decimal(minor)) == minor
