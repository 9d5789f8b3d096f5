from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from api.deps import DocumentLoader, get_document_loader, require_currency_code
from api.schemas import ERROR_RESPONSES, ExchangeRateResponse, to_response
from api.services.rates import get_latest_rates, get_rates, get_rates_on

router = APIRouter(prefix="/rates", tags=["rates"], responses=ERROR_RESPONSES)


@router.get("", response_model=List[ExchangeRateResponse], summary="Rates for a currency within a date range")
def rates(
    currency_code: str = Depends(require_currency_code),
    dt_start: Optional[date] = Query(default=None, alias="dtStart"),
    dt_end: Optional[date] = Query(default=None, alias="dtEnd"),
    load: DocumentLoader = Depends(get_document_loader),
):
    return to_response(get_rates(load, currency_code, dt_start, dt_end))


@router.get("/date", response_model=List[ExchangeRateResponse], summary="Rates for a currency on a specific date")
def rates_by_date(
    currency_code: str = Depends(require_currency_code),
    dt_eff: date = Query(alias="dtEff"),
    load: DocumentLoader = Depends(get_document_loader),
):
    return to_response(get_rates_on(load, currency_code, dt_eff))


@router.get("/latest", response_model=List[ExchangeRateResponse], summary="Latest rates for a currency")
def latest_rates(
    currency_code: str = Depends(require_currency_code),
    load: DocumentLoader = Depends(get_document_loader),
):
    return to_response(get_latest_rates(load, currency_code))
