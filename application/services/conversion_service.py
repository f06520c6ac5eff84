from decimal import Decimal

from application.services.rate_service import RateService
from domain.models.rates import ConversionQuery, ConversionResult
from domain.services.conversion import convert, unit_rate


class ConversionService:
	def __init__(self, rate_service: RateService):
		self.rate_service = rate_service

	async def convert(self, amount: Decimal, from_currency: str, to_currency: str) -> ConversionResult:
		snapshot = await self.rate_service.get_snapshot()

		converted_amount = convert(amount, from_currency, to_currency, snapshot)
		rate = unit_rate(from_currency, to_currency, snapshot)

		return ConversionResult(
			from_currency=from_currency,
			to_currency=to_currency,
			original_amount=Decimal(str(amount)),
			converted_amount=converted_amount,
			unit_rate=rate,
			base=snapshot.base,
			date=snapshot.date,
			source=self.rate_service.source or 'unknown',
		)

	async def convert_query(self, query: ConversionQuery) -> ConversionResult:
		return await self.convert(query.amount, query.from_currency, query.to_currency)

	async def get_unit_rate(self, from_currency: str, to_currency: str) -> ConversionResult:
		return await self.convert(Decimal(1), from_currency, to_currency)
