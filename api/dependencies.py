import logging
from datetime import timedelta
from typing import Annotated

from fastapi import Depends

from application.services import ConversionService, CurrencyService, RateService
from config.settings import get_settings
from infrastructure.cache.snapshot_cache import RateSnapshotCache
from infrastructure.cache.stores import InMemoryKeyValueStore, KeyValueStore, RedisKeyValueStore
from infrastructure.providers import FrankfurterProvider, RateSnapshotProvider

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	store: KeyValueStore | None = None
	provider: RateSnapshotProvider | None = None
	rate_service: RateService | None = None


deps = AppDependencies()


def init_dependencies() -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = get_settings()

	if settings.CACHE_BACKEND == 'redis':
		deps.store = RedisKeyValueStore.from_url(settings.REDIS_URL)
	else:
		deps.store = InMemoryKeyValueStore()

	cache = RateSnapshotCache(
		deps.store,
		ttl=timedelta(seconds=settings.RATES_CACHE_TTL_SECONDS),
		key=settings.RATES_CACHE_KEY,
	)
	deps.provider = FrankfurterProvider(settings.RATES_API_URL, timeout=settings.HTTP_TIMEOUT)
	deps.rate_service = RateService(cache=cache, provider=deps.provider)
	logger.info(f'Dependencies initialized ({settings.CACHE_BACKEND} rate cache)')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.provider:
		await deps.provider.close()
	if isinstance(deps.store, RedisKeyValueStore):
		await deps.store.close()

	deps.store = None
	deps.provider = None
	deps.rate_service = None
	logger.info('Cleanup complete')


def get_rate_service() -> RateService:
	if deps.rate_service is None:
		raise RuntimeError('Rate service not initialized')
	return deps.rate_service


def get_conversion_service(
	rate_service: Annotated[RateService, Depends(get_rate_service)],
) -> ConversionService:
	return ConversionService(rate_service=rate_service)


def get_currency_service(
	rate_service: Annotated[RateService, Depends(get_rate_service)],
) -> CurrencyService:
	return CurrencyService(rate_service=rate_service, priority=get_settings().PRIORITY_CURRENCIES)
