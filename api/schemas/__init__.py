from .requests import ConversionRequest
from .responses import (
	ConversionResponse,
	ExchangeRateResponse,
	HealthResponse,
	RateSnapshotResponse,
	SupportedCurrenciesResponse,
)

__all__ = [
	'ConversionRequest',
	'ConversionResponse',
	'ExchangeRateResponse',
	'HealthResponse',
	'RateSnapshotResponse',
	'SupportedCurrenciesResponse',
]
