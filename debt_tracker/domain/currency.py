"""Conversion between ledger minor units and decimal amounts"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

MINOR_UNITS_PER_UNIT = 1000  # Ledger stores thousandths of the major unit

Amount = Union[Decimal, int, float, str]


def to_decimal(minor_units: int) -> Decimal:
    """Convert signed minor units to an exact decimal amount"""
    return Decimal(minor_units) / MINOR_UNITS_PER_UNIT


def to_minor_units(amount: Amount) -> int:
    """
    Convert a decimal amount to ledger minor units.

    Rounds to the nearest minor unit with ties away from zero (ROUND_HALF_UP),
    so 0.0005 -> 1 and -0.0005 -> -1. Floats go through str() first to avoid
    binary representation noise.
    """
    if isinstance(amount, float):
        amount = str(amount)
    scaled = Decimal(amount) * MINOR_UNITS_PER_UNIT
    return int(scaled.quantize(Decimal(1), rounding=ROUND_HALF_UP))
