import logging
from collections.abc import Sequence
from dataclasses import dataclass

from application.services.rate_service import RateService
from domain.services.currency_list import (
	POPULAR_CURRENCIES,
	collect_codes,
	default_pair,
	order_for_display,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CurrencyListing:
	currencies: list[str]
	default_from: str
	default_to: str
	base: str


class CurrencyService:
	def __init__(self, rate_service: RateService, priority: Sequence[str] = POPULAR_CURRENCIES):
		self.rate_service = rate_service
		self.priority = tuple(priority)

	async def list_currencies(self) -> CurrencyListing:
		snapshot = await self.rate_service.get_snapshot()
		ordered = order_for_display(collect_codes(snapshot), self.priority)
		logger.debug(f'{len(ordered)} currencies available (base {snapshot.base})')

		default_from, default_to = default_pair(ordered, snapshot.base)
		return CurrencyListing(
			currencies=ordered,
			default_from=default_from,
			default_to=default_to,
			base=snapshot.base,
		)
