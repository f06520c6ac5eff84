from decimal import Decimal

from pydantic import BaseModel, Field, field_validator


class ConversionRequest(BaseModel):
	from_currency: str = Field(..., min_length=3, max_length=5)
	to_currency: str = Field(..., min_length=3, max_length=5)
	amount: Decimal = Field(..., ge=0, allow_inf_nan=False)

	@field_validator('from_currency', 'to_currency')
	@classmethod
	def uppercase_currency(cls, v: str):
		return v.upper()

	class ConfigDict:
		json_schema_extra = {
			'example': {'from_currency': 'BRL', 'to_currency': 'USD', 'amount': 100.00}
		}
