from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from api.dependencies import get_rate_service
from api.schemas import ExchangeRateResponse
from application.services import RateService
from domain.models.currency import ExchangeRate

router = APIRouter(prefix='/api', tags=['rates'])

CurrencyCode = Annotated[str, Path(min_length=3, max_length=5)]


def _to_response(result: ExchangeRate) -> ExchangeRateResponse:
	return ExchangeRateResponse(
		from_currency=result.from_currency,
		to_currency=result.to_currency,
		rate=result.rate,
		rate_date=result.on,
		source=result.source,
	)


@router.get(
	'/rates/{on}/{currency}',
	response_model=ExchangeRateResponse,
	status_code=status.HTTP_200_OK,
	summary='Get the base-currency rate of a currency on a date',
)
def get_rate(
	on: date,
	currency: CurrencyCode,
	service: Annotated[RateService, Depends(get_rate_service)],
) -> ExchangeRateResponse:
	return _to_response(service.get_rate(currency.upper(), on))


@router.get(
	'/rates/{on}/{from_currency}/{to_currency}',
	response_model=ExchangeRateResponse,
	status_code=status.HTTP_200_OK,
	summary='Get the cross-rate between two currencies on a date',
)
def get_cross_rate(
	on: date,
	from_currency: CurrencyCode,
	to_currency: CurrencyCode,
	service: Annotated[RateService, Depends(get_rate_service)],
) -> ExchangeRateResponse:
	result = service.get_cross_rate(from_currency.upper(), to_currency.upper(), on)
	return _to_response(result)
