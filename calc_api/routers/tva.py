from typing import Dict, Optional

from fastapi import APIRouter, Query

from calc_api.models.responses import ErrorOut, HtOut, TvaOut
from calc_api.services import tva
from calc_api.routers.params import require_params

router = APIRouter(prefix="/tva", tags=["tva"])


@router.get(
    "",
    response_model=TvaOut,
    responses={400: {"model": ErrorOut}},
    summary="Compute the tax-inclusive price",
)
async def calculate_ttc(
    ht: Optional[str] = Query(None, description="Amount before tax"),
    taux: Optional[str] = Query(None, description="VAT rate in percent (0-100)"),
):
    require_params({"ht": ht, "taux": taux})
    return TvaOut.from_result(tva.calculate_ttc(ht, taux))


@router.get(
    "/ht",
    response_model=HtOut,
    responses={400: {"model": ErrorOut}},
    summary="Recover the pre-tax amount from a tax-inclusive price",
)
async def calculate_ht(
    ttc: Optional[str] = Query(None, description="Amount including tax"),
    taux: Optional[str] = Query(None, description="VAT rate in percent (0-100)"),
):
    require_params({"ttc": ttc, "taux": taux})
    return HtOut.from_result(tva.calculate_ht(ttc, taux))


@router.get("/rates", summary="Standard French VAT rates")
async def standard_rates() -> Dict[str, float]:
    return tva.get_standard_tva_rates()
