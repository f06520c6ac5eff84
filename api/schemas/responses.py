from decimal import Decimal

from pydantic import BaseModel, Field


class ConversionResponse(BaseModel):
	from_currency: str = Field(..., description='Source currency code')
	to_currency: str = Field(..., description='Target currency code')
	original_amount: Decimal = Field(..., description='Original amount requested')
	converted_amount: Decimal = Field(..., description='Converted amount')
	unit_rate: Decimal = Field(..., description='Value of 1 unit of the source currency')
	base: str = Field(..., description='Base currency of the rate snapshot')
	date: str = Field(..., description='As-of date of the rate snapshot')
	source: str = Field(..., description='Where the snapshot came from (api or cache)')

	class ConfigDict:
		json_schema_extra = {
			'example': {
				'from_currency': 'USD',
				'to_currency': 'BRL',
				'original_amount': 10,
				'converted_amount': 50.0,
				'unit_rate': 5.0,
				'base': 'EUR',
				'date': '2025-09-26',
				'source': 'cache',
			}
		}


class ExchangeRateResponse(BaseModel):
	from_currency: str = Field(..., description='Source currency code')
	to_currency: str = Field(..., description='Target currency code')
	rate: Decimal = Field(..., description='Value of 1 unit of the source currency')
	base: str = Field(..., description='Base currency of the rate snapshot')
	date: str = Field(..., description='As-of date of the rate snapshot')
	source: str = Field(..., description='Where the snapshot came from (api or cache)')


class SupportedCurrenciesResponse(BaseModel):
	currencies: list[str] = Field(description='Currency codes, popular ones first')
	default_from: str = Field(description='Suggested source currency')
	default_to: str = Field(description='Suggested target currency')
	base: str = Field(description='Base currency of the rate snapshot')

	class ConfigDict:
		json_schema_extra = {
			'examples': [
				{
					'currencies': ['BRL', 'USD', 'EUR', 'AUD'],
					'default_from': 'BRL',
					'default_to': 'USD',
					'base': 'EUR',
				}
			]
		}


class RateSnapshotResponse(BaseModel):
	base: str = Field(..., description='Currency all rates are relative to')
	date: str = Field(..., description='As-of date asserted by the provider')
	rates: dict[str, Decimal] = Field(..., description='Units of each currency per 1 base')
	source: str | None = Field(None, description='Where the snapshot came from (api or cache)')


class HealthResponse(BaseModel):
	status: str
	snapshot_loaded: bool
	source: str | None = None
	base: str | None = None
	date: str | None = None
