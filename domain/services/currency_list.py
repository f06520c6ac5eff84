from collections.abc import Iterable, Sequence

from domain.models.rates import RateSnapshot

POPULAR_CURRENCIES = (
    "BRL", "USD", "EUR", "GBP", "JPY", "ARS", "CLP", "MXN", "CAD", "AUD", "CHF", "CNY",
)


def collect_codes(snapshot: RateSnapshot) -> set[str]:
    codes = set(snapshot.rates)
    codes.add(snapshot.base)
    return codes


def order_for_display(codes: Iterable[str], priority: Sequence[str] = POPULAR_CURRENCIES) -> list[str]:
    """Priority codes first, in priority order, then the rest alphabetically."""
    available = set(codes)
    first = [code for code in dict.fromkeys(priority) if code in available]
    rest = sorted(available.difference(first))
    return first + rest


def default_pair(codes: Sequence[str], base: str) -> tuple[str, str]:
    from_currency = "BRL" if "BRL" in codes else base
    to_currency = "USD" if "USD" in codes else base
    return from_currency, to_currency
