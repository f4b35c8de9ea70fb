from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, Protocol

from calc_api.models.constants import SUPPORTED_CURRENCIES
from calc_api.services.money import round2
from calc_api.services.rates import get_rate_table
from calc_api.services.validation import ValidationResult, Validator, run_validated

"""Currency conversion against the static rate table.

Responsibilities:
    - Validate both currency codes and the amount, reporting every violation.
    - Fetch the rate via the injected rate table (identity pairs are 1).
    - Apply rounding (round2) once, on the converted amount only.
    - Return a simple immutable result object.
"""

_SUPPORTED_LABEL = ", ".join(SUPPORTED_CURRENCIES)


class SupportsRateLookup(Protocol):
    def get_rate(self, from_currency: str, to_currency: str) -> float: ...

    def as_dict(self) -> Dict[str, float]: ...


@dataclass(frozen=True)
class ConversionResult:
    from_currency: str
    to_currency: str
    original_amount: float
    converted_amount: float
    rate: float


def validate_conversion_params(from_currency: Any, to_currency: Any, amount: Any) -> ValidationResult:
    v = Validator()
    v.choice(
        "from_currency",
        from_currency,
        SUPPORTED_CURRENCIES,
        f"Devise source invalide. Devises supportées: {_SUPPORTED_LABEL}",
    )
    v.choice(
        "to_currency",
        to_currency,
        SUPPORTED_CURRENCIES,
        f"Devise cible invalide. Devises supportées: {_SUPPORTED_LABEL}",
    )
    v.number(
        "amount",
        amount,
        "Le montant doit être un nombre positif",
        minimum=0,
        exclusive_minimum=True,
    )
    return v.result()


class CurrencyConverter:
    def __init__(self, rate_table: SupportsRateLookup):
        self._rates = rate_table

    def get_rate(self, from_currency: str, to_currency: str) -> float:
        return self._rates.get_rate(from_currency, to_currency)

    def all_rates(self) -> Dict[str, float]:
        return self._rates.as_dict()

    def _compute(self, from_currency: str, to_currency: str, amount: float) -> ConversionResult:
        rate = self.get_rate(from_currency, to_currency)
        return ConversionResult(
            from_currency=from_currency,
            to_currency=to_currency,
            original_amount=amount,
            converted_amount=round2(amount * rate),
            rate=rate,
        )

    def convert(self, from_currency: Any, to_currency: Any, amount: Any) -> ConversionResult:
        """Convert ``amount`` from one supported currency to another.

        Raises InvalidInputError when any parameter is invalid and
        RateUnavailableError when the pair is missing from the table.
        """
        validation = validate_conversion_params(from_currency, to_currency, amount)
        return run_validated(validation, self._compute)


@lru_cache
def get_converter() -> CurrencyConverter:
    return CurrencyConverter(get_rate_table())
