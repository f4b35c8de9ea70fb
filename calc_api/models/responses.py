from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from calc_api.services.conversion import ConversionResult
from calc_api.services.remise import RemiseResult
from calc_api.services.tva import HtResult, TtcResult

"""Wire models for the HTTP API.

Fields use snake_case in Python and the camelCase names of the JSON API as
aliases; FastAPI serializes response models by alias.
"""


class _ApiModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ServiceInfo(_ApiModel):
    service: str
    version: str
    status: str = "OK"
    endpoints: List[str]


class ConversionOut(_ApiModel):
    from_currency: str = Field(..., alias="from")
    to_currency: str = Field(..., alias="to")
    original_amount: float = Field(..., alias="originalAmount")
    converted_amount: float = Field(..., alias="convertedAmount")

    @classmethod
    def from_result(cls, result: ConversionResult) -> "ConversionOut":
        return cls(
            from_currency=result.from_currency,
            to_currency=result.to_currency,
            original_amount=result.original_amount,
            converted_amount=result.converted_amount,
        )


class RatesOut(_ApiModel):
    rates: Dict[str, float]
    currencies: List[str]


class TvaOut(_ApiModel):
    ht: float
    taux: float
    ttc: float

    @classmethod
    def from_result(cls, result: TtcResult) -> "TvaOut":
        return cls(ht=result.ht, taux=result.taux, ttc=result.ttc)


class HtOut(_ApiModel):
    ttc: float
    taux: float
    montant_tva: float = Field(..., alias="montantTva")
    ht: float

    @classmethod
    def from_result(cls, result: HtResult) -> "HtOut":
        return cls(ttc=result.ttc, taux=result.taux, montant_tva=result.montant_tva, ht=result.ht)


class RemiseOut(_ApiModel):
    prix_initial: float = Field(..., alias="prixInitial")
    pourcentage: float
    prix_final: float = Field(..., alias="prixFinal")

    @classmethod
    def from_result(cls, result: RemiseResult) -> "RemiseOut":
        return cls(
            prix_initial=result.prix_initial,
            pourcentage=result.pourcentage,
            prix_final=result.prix_final,
        )


class RemiseDetailOut(RemiseOut):
    montant_remise: float = Field(..., alias="montantRemise")

    @classmethod
    def from_result(cls, result: RemiseResult) -> "RemiseDetailOut":
        return cls(
            prix_initial=result.prix_initial,
            pourcentage=result.pourcentage,
            montant_remise=result.montant_remise,
            prix_final=result.prix_final,
        )


class ErrorOut(BaseModel):
    error: str
    message: Optional[str] = None
