from dataclasses import asdict
from decimal import Decimal
from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from api.dependencies import (
	get_conversion_service,
	get_currency_service,
	get_rate_service,
)
from api.schemas import (
	ConversionRequest,
	ConversionResponse,
	ExchangeRateResponse,
	RateSnapshotResponse,
	SupportedCurrenciesResponse,
)
from application.services import (
	ConversionService,
	CurrencyService,
	RateService,
)
from domain.models.rates import ConversionQuery

router = APIRouter(prefix='/api', tags=['currency'])

CurrencyCode = Annotated[str, Path(min_length=3, max_length=5)]


@router.get(
	'/convert/{from_currency}/{to_currency}/{amount}',
	response_model=ConversionResponse,
	status_code=status.HTTP_200_OK,
	summary='Convert currency amount',
)
async def convert_currency(
	from_currency: CurrencyCode,
	to_currency: CurrencyCode,
	amount: Annotated[Decimal, Path(ge=0)],
	service: Annotated[ConversionService, Depends(get_conversion_service)],
) -> ConversionResponse:
	result = await service.convert(amount, from_currency.upper(), to_currency.upper())
	return ConversionResponse(**asdict(result))


@router.post(
	'/convert',
	response_model=ConversionResponse,
	status_code=status.HTTP_200_OK,
	summary='Convert currency amount from a form body',
)
async def convert_currency_body(
	request: ConversionRequest,
	service: Annotated[ConversionService, Depends(get_conversion_service)],
) -> ConversionResponse:
	query = ConversionQuery(
		amount=request.amount,
		from_currency=request.from_currency,
		to_currency=request.to_currency,
	)
	result = await service.convert_query(query)
	return ConversionResponse(**asdict(result))


@router.get(
	'/rate/{from_currency}/{to_currency}',
	response_model=ExchangeRateResponse,
	status_code=status.HTTP_200_OK,
	summary='Get current exchange rate',
)
async def get_exchange_rate(
	from_currency: CurrencyCode,
	to_currency: CurrencyCode,
	service: Annotated[ConversionService, Depends(get_conversion_service)],
) -> ExchangeRateResponse:
	result = await service.get_unit_rate(from_currency.upper(), to_currency.upper())
	return ExchangeRateResponse(
		from_currency=result.from_currency,
		to_currency=result.to_currency,
		rate=result.unit_rate,
		base=result.base,
		date=result.date,
		source=result.source,
	)


@router.get(
	'/currencies',
	response_model=SupportedCurrenciesResponse,
	status_code=status.HTTP_200_OK,
	summary='List available currencies, popular ones first',
)
async def get_supported_currencies(
	service: Annotated[CurrencyService, Depends(get_currency_service)],
) -> SupportedCurrenciesResponse:
	listing = await service.list_currencies()
	return SupportedCurrenciesResponse(**asdict(listing))


@router.get(
	'/rates',
	response_model=RateSnapshotResponse,
	status_code=status.HTTP_200_OK,
	summary='Current rate snapshot',
)
async def get_rates(
	service: Annotated[RateService, Depends(get_rate_service)],
) -> RateSnapshotResponse:
	snapshot = await service.get_snapshot()
	return RateSnapshotResponse(
		base=snapshot.base, date=snapshot.date, rates=dict(snapshot.rates), source=service.source
	)


@router.post(
	'/rates/refresh',
	response_model=RateSnapshotResponse,
	status_code=status.HTTP_200_OK,
	summary='Refetch rates, bypassing the cache',
)
async def refresh_rates(
	service: Annotated[RateService, Depends(get_rate_service)],
) -> RateSnapshotResponse:
	snapshot = await service.refresh()
	return RateSnapshotResponse(
		base=snapshot.base, date=snapshot.date, rates=dict(snapshot.rates), source=service.source
	)
