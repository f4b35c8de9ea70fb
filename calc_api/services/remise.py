"""Discount (remise) calculations.

Percentage discounts accept 0..100 inclusive. Reconstructing the original
price from a discounted one requires a percentage strictly below 100, since
a full discount leaves nothing to divide by.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from calc_api.services.money import percent_of, round2
from calc_api.services.validation import ValidationResult, Validator, run_validated

_PRIX_MESSAGE = "Le prix doit être un nombre positif ou nul"
_POURCENTAGE_MESSAGE = "Le pourcentage de remise doit être un nombre entre 0 et 100"

EXCEEDS_PRICE = "exceeds_price"


@dataclass(frozen=True)
class RemiseResult:
    prix_initial: float
    pourcentage: float
    montant_remise: float
    prix_final: float


def validate_remise_params(prix: Any, pourcentage: Any) -> ValidationResult:
    v = Validator()
    v.number("prix", prix, _PRIX_MESSAGE, minimum=0)
    v.number("pourcentage", pourcentage, _POURCENTAGE_MESSAGE, minimum=0, maximum=100)
    return v.result()


def validate_remise_fixe_params(prix: Any, montant: Any) -> ValidationResult:
    v = Validator()
    num_prix = v.number("prix", prix, _PRIX_MESSAGE, minimum=0)
    num_montant = v.number(
        "montant", montant, "Le montant de remise doit être un nombre positif ou nul", minimum=0
    )
    if num_prix is not None and num_montant is not None:
        v.check(
            "montant",
            num_montant <= num_prix,
            "Le montant de remise ne peut pas être supérieur au prix initial",
            EXCEEDS_PRICE,
        )
    return v.result()


def validate_prix_original_params(prix_final: Any, pourcentage: Any) -> ValidationResult:
    v = Validator()
    v.number("prix_final", prix_final, "Le prix final doit être un nombre positif ou nul", minimum=0)
    v.number(
        "pourcentage",
        pourcentage,
        "Le pourcentage de remise doit être un nombre entre 0 et 99.99",
        minimum=0,
        maximum=100,
        exclusive_maximum=True,
    )
    return v.result()


def _remise(prix: float, pourcentage: float) -> RemiseResult:
    montant_remise = percent_of(prix, pourcentage)
    return RemiseResult(
        prix_initial=prix,
        pourcentage=pourcentage,
        montant_remise=round2(montant_remise),
        prix_final=round2(prix - montant_remise),
    )


def _remise_fixe(prix: float, montant: float) -> RemiseResult:
    pourcentage = montant / prix * 100 if prix > 0 else 0.0
    return RemiseResult(
        prix_initial=prix,
        pourcentage=round2(pourcentage),
        montant_remise=montant,
        prix_final=round2(prix - montant),
    )


def _prix_original(prix_final: float, pourcentage: float) -> RemiseResult:
    prix_initial = prix_final / (1 - pourcentage / 100)
    return RemiseResult(
        prix_initial=round2(prix_initial),
        pourcentage=pourcentage,
        montant_remise=round2(prix_initial - prix_final),
        prix_final=prix_final,
    )


def apply_remise(prix: Any, pourcentage: Any) -> RemiseResult:
    return run_validated(validate_remise_params(prix, pourcentage), _remise)


def calculate_remise_amount(prix: Any, pourcentage: Any) -> float:
    return run_validated(
        validate_remise_params(prix, pourcentage),
        lambda prix, pourcentage: round2(percent_of(prix, pourcentage)),
    )


def apply_remise_fixe(prix: Any, montant: Any) -> RemiseResult:
    """Apply a fixed discount; it may not exceed the price (never clamped)."""
    return run_validated(validate_remise_fixe_params(prix, montant), _remise_fixe)


def calculate_prix_original(prix_final: Any, pourcentage: Any) -> RemiseResult:
    return run_validated(validate_prix_original_params(prix_final, pourcentage), _prix_original)
