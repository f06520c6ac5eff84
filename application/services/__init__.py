from .conversion_service import ConversionService
from .currency_service import CurrencyListing, CurrencyService
from .rate_service import RateService

__all__ = ['ConversionService', 'CurrencyListing', 'CurrencyService', 'RateService']
