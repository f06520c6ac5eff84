from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from datetime import datetime
from decimal import Decimal, InvalidOperation
from types import MappingProxyType


def _to_rate(code: str, value) -> Decimal:
    if isinstance(value, bool) or not isinstance(value, (int, float, str, Decimal)):
        raise ValueError(f"Rate for {code} is not a number: {value!r}")
    try:
        rate = Decimal(str(value))
    except InvalidOperation as e:
        raise ValueError(f"Rate for {code} is not a number: {value!r}") from e
    if not rate.is_finite() or rate <= 0:
        raise ValueError(f"Rate for {code} must be a positive finite number")
    return rate


@dataclass(frozen=True)
class RateSnapshot:
    base: str
    date: str
    rates: Mapping[str, Decimal] = field(default_factory=dict)

    def __post_init__(self):
        rates = {str(code): _to_rate(code, value) for code, value in self.rates.items()}
        # Read-only view so a snapshot can be shared between requests
        object.__setattr__(self, "rates", MappingProxyType(rates))

    @classmethod
    def from_dict(cls, data) -> "RateSnapshot":
        if not isinstance(data, Mapping):
            raise ValueError("Rate payload must be an object")

        base = data.get("base")
        if not isinstance(base, str) or not base:
            raise ValueError("Rate payload has no base currency")

        date = data.get("date")
        if not isinstance(date, str):
            raise ValueError("Rate payload has no date")

        raw_rates = data.get("rates")
        if not isinstance(raw_rates, Mapping):
            raise ValueError("Rate payload has no rates table")

        return cls(base=base, date=date, rates=raw_rates)

    def to_dict(self) -> dict:
        return {
            "base": self.base,
            "date": self.date,
            "rates": {code: str(rate) for code, rate in self.rates.items()},
        }


@dataclass(frozen=True)
class CacheEntry:
    saved_at: datetime
    payload: RateSnapshot


@dataclass(frozen=True)
class ConversionQuery:
    amount: Decimal
    from_currency: str
    to_currency: str

    def swap(self) -> "ConversionQuery":
        return replace(self, from_currency=self.to_currency, to_currency=self.from_currency)


@dataclass(frozen=True)
class ConversionResult:
    from_currency: str
    to_currency: str
    original_amount: Decimal
    converted_amount: Decimal
    unit_rate: Decimal  # 1 from_currency expressed in to_currency
    base: str
    date: str
    source: str
