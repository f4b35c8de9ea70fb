from typing import Optional

from fastapi import APIRouter, Query

from calc_api.models.responses import ErrorOut, RemiseDetailOut, RemiseOut
from calc_api.services import remise
from calc_api.routers.params import require_params

router = APIRouter(prefix="/remise", tags=["remise"])


@router.get(
    "",
    response_model=RemiseOut,
    responses={400: {"model": ErrorOut}},
    summary="Apply a percentage discount",
)
async def apply_remise(
    prix: Optional[str] = Query(None, description="Initial price"),
    pourcentage: Optional[str] = Query(None, description="Discount in percent (0-100)"),
):
    require_params({"prix": prix, "pourcentage": pourcentage})
    return RemiseOut.from_result(remise.apply_remise(prix, pourcentage))


@router.get(
    "/fixe",
    response_model=RemiseDetailOut,
    responses={400: {"model": ErrorOut}},
    summary="Apply a fixed-amount discount",
)
async def apply_remise_fixe(
    prix: Optional[str] = Query(None, description="Initial price"),
    montant: Optional[str] = Query(None, description="Discount amount, at most the price"),
):
    require_params({"prix": prix, "montant": montant})
    return RemiseDetailOut.from_result(remise.apply_remise_fixe(prix, montant))


@router.get(
    "/original",
    response_model=RemiseDetailOut,
    responses={400: {"model": ErrorOut}},
    summary="Recover the price before a percentage discount",
)
async def calculate_prix_original(
    prix_final: Optional[str] = Query(None, alias="prixFinal", description="Discounted price"),
    pourcentage: Optional[str] = Query(None, description="Discount in percent (0-99.99)"),
):
    require_params({"prixFinal": prix_final, "pourcentage": pourcentage})
    return RemiseDetailOut.from_result(remise.calculate_prix_original(prix_final, pourcentage))
