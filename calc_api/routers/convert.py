from typing import Optional

from fastapi import APIRouter, Depends, Query

from calc_api.models.constants import SUPPORTED_CURRENCIES
from calc_api.models.responses import ConversionOut, ErrorOut, RatesOut
from calc_api.services.conversion import CurrencyConverter, get_converter
from calc_api.routers.params import require_params

router = APIRouter(tags=["convert"])


def get_currency_converter() -> CurrencyConverter:
    return get_converter()


@router.get(
    "/convert",
    response_model=ConversionOut,
    responses={400: {"model": ErrorOut}},
    summary="Convert an amount between two supported currencies",
)
async def convert(
    from_currency: Optional[str] = Query(None, alias="from", description="Source currency (EUR, USD, GBP)"),
    to_currency: Optional[str] = Query(None, alias="to", description="Target currency (EUR, USD, GBP)"),
    amount: Optional[str] = Query(None, description="Strictly positive amount"),
    converter: CurrencyConverter = Depends(get_currency_converter),
):
    require_params({"from": from_currency, "to": to_currency, "amount": amount})
    result = converter.convert(from_currency, to_currency, amount)
    return ConversionOut.from_result(result)


@router.get("/rates", response_model=RatesOut, summary="List the static exchange rates")
async def list_rates(converter: CurrencyConverter = Depends(get_currency_converter)):
    return RatesOut(rates=converter.all_rates(), currencies=list(SUPPORTED_CURRENCIES))
