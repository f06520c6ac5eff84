from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	RATES_API_URL: str = 'https://api.frankfurter.dev/v1'
	HTTP_TIMEOUT: float = 10

	# Rate cache
	CACHE_BACKEND: Literal['memory', 'redis'] = 'memory'
	REDIS_URL: str = 'redis://localhost:6379'
	RATES_CACHE_KEY: str = 'currency_rates_cache_v1'
	RATES_CACHE_TTL_SECONDS: int = 60 * 60

	PRIORITY_CURRENCIES: list[str] = [
		'BRL', 'USD', 'EUR', 'GBP', 'JPY', 'ARS', 'CLP', 'MXN', 'CAD', 'AUD', 'CHF', 'CNY',
	]

	# Application
	APP_NAME: str = 'Currency Converter API'
	LOG_LEVEL: str = 'INFO'

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
