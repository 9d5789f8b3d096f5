from datetime import date
from decimal import Decimal
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from core.fx_rates import ExchangeRate


class ExchangeRateResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    currency_code: str = Field(alias="currencyCode")
    rate: Decimal
    date: date

    @field_serializer("rate", when_used="json")
    def serialize_rate(self, rate: Decimal) -> str:
        # Exact quotients such as 1E+1 are written out as 10.
        return format(rate, "f")

    @classmethod
    def from_rate(cls, item: ExchangeRate) -> "ExchangeRateResponse":
        return cls(currency_code=item.currency_code, rate=item.rate, date=item.date)


class HealthResponse(BaseModel):
    status: str
    timestamp: str


class ErrorResponse(BaseModel):
    error: str
    detail: Any


ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing or invalid query parameter"},
    500: {"model": ErrorResponse, "description": "Currency not found in the ECB data"},
    502: {"model": ErrorResponse, "description": "ECB document unavailable or malformed"},
}


def to_response(rates: List[ExchangeRate]) -> List[ExchangeRateResponse]:
    return [ExchangeRateResponse.from_rate(item) for item in rates]
