import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from api.dependencies import cleanup_dependencies, deps, init_dependencies
from api.error_handlers import register_exception_handlers
from api.routes import currency, health
from config.logging import setup_logging
from config.settings import get_settings
from domain.exceptions.currency import FetchFailedError

settings = get_settings()
setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
	logger.info('Starting Currency Converter API...')

	init_dependencies()

	try:
		await deps.rate_service.get_snapshot()
	except FetchFailedError as e:
		logger.warning(f'Initial rate load failed, will retry on first request: {e}')

	logger.info('Application ready')

	yield

	logger.info('Shutting down...')
	await cleanup_dependencies()


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

app.include_router(currency.router)
app.include_router(health.router)
register_exception_handlers(app)
