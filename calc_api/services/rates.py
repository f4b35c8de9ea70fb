from __future__ import annotations

"""Static exchange rate table.

Rates are multipliers: 1 unit of the source currency is worth ``rate`` units
of the target currency. The table is built once at import time and never
mutated; the converter receives it as a dependency.

Only the directed pairs stored in the table are usable. A pair that is not
stored is a lookup failure even when it could be derived through another
currency.
"""
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from calc_api.core.errors import RateUnavailableError

Pair = Tuple[str, str]

_EUR_USD = 1.1
_USD_GBP = 0.8

_DEFAULT_RATES: Dict[Pair, float] = {
    ("EUR", "USD"): _EUR_USD,
    ("USD", "GBP"): _USD_GBP,
    ("USD", "EUR"): 1 / _EUR_USD,
    ("GBP", "USD"): 1 / _USD_GBP,
    ("EUR", "GBP"): _EUR_USD * _USD_GBP,  # via USD
    ("GBP", "EUR"): 1 / (_EUR_USD * _USD_GBP),
}


class RateTable:
    """Read-only mapping of (source, target) currency pairs to multipliers."""

    def __init__(self, rates: Mapping[Pair, float]):
        normalized: Dict[Pair, float] = {}
        for (source, target), rate in rates.items():
            if rate <= 0:
                raise ValueError(f"rate for {source}_{target} must be positive")
            normalized[(source.upper(), target.upper())] = float(rate)
        self._rates = MappingProxyType(normalized)

    def __len__(self) -> int:
        return len(self._rates)

    def get_rate(self, from_currency: str, to_currency: str) -> float:
        source = from_currency.upper()
        target = to_currency.upper()
        if source == target:
            return 1.0
        rate = self._rates.get((source, target))
        if rate is None:
            raise RateUnavailableError(source, target)
        return rate

    def as_dict(self) -> Dict[str, float]:
        """Copy of the table keyed ``"EUR_USD"`` style."""
        return {f"{s}_{t}": r for (s, t), r in self._rates.items()}


# Singleton dependency helper used by FastAPI DI
@lru_cache
def get_rate_table() -> RateTable:
    return RateTable(_DEFAULT_RATES)
