"""VAT (TVA) calculations.

HT is the amount before tax, TTC the amount including tax, ``taux`` the rate
in percent. Forward and inverse computations round each output amount
independently from unrounded intermediates.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from calc_api.models.constants import STANDARD_TVA_RATES
from calc_api.services.money import percent_of, round2
from calc_api.services.validation import ValidationResult, Validator, run_validated

_TAUX_MESSAGE = "Le taux de TVA doit être un nombre entre 0 et 100"


@dataclass(frozen=True)
class TtcResult:
    ht: float
    taux: float
    montant_tva: float
    ttc: float


@dataclass(frozen=True)
class HtResult:
    ttc: float
    taux: float
    montant_tva: float
    ht: float


def _validate(amount_field: str, amount: Any, amount_message: str, taux: Any) -> ValidationResult:
    v = Validator()
    v.number(amount_field, amount, amount_message, minimum=0)
    v.number("taux", taux, _TAUX_MESSAGE, minimum=0, maximum=100)
    return v.result()


def validate_tva_params(ht: Any, taux: Any) -> ValidationResult:
    return _validate("ht", ht, "Le montant HT doit être un nombre positif ou nul", taux)


def _ttc(ht: float, taux: float) -> TtcResult:
    montant_tva = percent_of(ht, taux)
    return TtcResult(
        ht=ht,
        taux=taux,
        montant_tva=round2(montant_tva),
        ttc=round2(ht + montant_tva),
    )


def _ht(ttc: float, taux: float) -> HtResult:
    ht = ttc / (1 + taux / 100)
    return HtResult(
        ttc=ttc,
        taux=taux,
        montant_tva=round2(ttc - ht),
        ht=round2(ht),
    )


def calculate_ttc(ht: Any, taux: Any) -> TtcResult:
    return run_validated(validate_tva_params(ht, taux), _ttc)


def calculate_ht(ttc: Any, taux: Any) -> HtResult:
    validation = _validate(
        "ttc", ttc, "Le montant TTC doit être un nombre positif ou nul", taux
    )
    return run_validated(validation, _ht)


def calculate_tva_amount(ht: Any, taux: Any) -> float:
    return run_validated(
        validate_tva_params(ht, taux),
        lambda ht, taux: round2(percent_of(ht, taux)),
    )


def get_standard_tva_rates() -> Dict[str, float]:
    return dict(STANDARD_TVA_RATES)
