"""Money / rounding helpers.

Centralized so the converter and the VAT and discount calculators use
identical rounding semantics. Rounding happens once, on output values only.
"""

from __future__ import annotations
from decimal import Decimal, ROUND_HALF_UP


def round2(value: float) -> float:
    return float(Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def percent_of(amount: float, percentage: float) -> float:
    return amount * percentage / 100
