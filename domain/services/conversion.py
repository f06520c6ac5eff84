"""Any-to-any conversion over a base-relative rate table.

A snapshot only stores how many units of each currency buy one unit of its
base, so every pair is reached with at most one hop through the base:
divide into base units first, then multiply out into the target.
"""

from decimal import Decimal, InvalidOperation

from domain.exceptions.currency import InvalidAmountError, UnknownCurrencyError
from domain.models.rates import RateSnapshot


def _as_amount(amount) -> Decimal:
    if isinstance(amount, bool) or not isinstance(amount, (int, float, Decimal)):
        raise InvalidAmountError(f"Amount must be a number, got {type(amount).__name__}")
    try:
        value = Decimal(str(amount))
    except InvalidOperation as e:
        raise InvalidAmountError(f"Amount {amount!r} is not a number") from e
    if not value.is_finite():
        raise InvalidAmountError("Amount must be finite")
    if value < 0:
        raise InvalidAmountError("Amount must not be negative")
    return value


def _rate_for(code: str, snapshot: RateSnapshot) -> Decimal:
    rate = snapshot.rates.get(code)
    if rate is None:
        raise UnknownCurrencyError(code)
    return rate


def convert(amount, from_currency: str, to_currency: str, snapshot: RateSnapshot) -> Decimal:
    value = _as_amount(amount)

    if from_currency == to_currency:
        return value

    if from_currency == snapshot.base:
        return value * _rate_for(to_currency, snapshot)

    if to_currency == snapshot.base:
        return value / _rate_for(from_currency, snapshot)

    rate_from = _rate_for(from_currency, snapshot)
    rate_to = _rate_for(to_currency, snapshot)

    in_base = value / rate_from
    return in_base * rate_to


def unit_rate(from_currency: str, to_currency: str, snapshot: RateSnapshot) -> Decimal:
    """Value of one unit of from_currency, computed through convert() itself."""
    return convert(1, from_currency, to_currency, snapshot)
