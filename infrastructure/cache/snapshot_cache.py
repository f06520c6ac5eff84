import json
import logging
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from domain.exceptions.currency import CacheCorruptError
from domain.models.rates import CacheEntry, RateSnapshot
from infrastructure.cache.stores import KeyValueStore

logger = logging.getLogger(__name__)

DEFAULT_CACHE_KEY = "currency_rates_cache_v1"
DEFAULT_TTL = timedelta(hours=1)


def utc_now() -> datetime:
    return datetime.now(UTC)


def _to_epoch_ms(moment: datetime) -> int:
    return int(moment.timestamp() * 1000)


def encode_entry(entry: CacheEntry) -> str:
    return json.dumps({
        "savedAt": _to_epoch_ms(entry.saved_at),
        "payload": entry.payload.to_dict(),
    })


def decode_entry(raw: str) -> CacheEntry:
    """Parse a stored entry, raising CacheCorruptError for anything unreadable."""
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, TypeError, RecursionError) as e:
        raise CacheCorruptError("Invalid json data in rate cache") from e

    if not isinstance(data, dict):
        raise CacheCorruptError("Rate cache entry is not an object")

    saved_at = data.get("savedAt")
    payload = data.get("payload")
    if not saved_at or not payload:
        raise CacheCorruptError("Rate cache entry is missing savedAt or payload")
    if isinstance(saved_at, bool) or not isinstance(saved_at, (int, float)):
        raise CacheCorruptError(f"Rate cache savedAt is not a timestamp: {saved_at!r}")

    try:
        saved = datetime.fromtimestamp(saved_at / 1000, tz=UTC)
        snapshot = RateSnapshot.from_dict(payload)
    except (ValueError, OverflowError, OSError) as e:
        raise CacheCorruptError(f"Rate cache payload rejected: {e}") from e

    return CacheEntry(saved_at=saved, payload=snapshot)


class RateSnapshotCache:
    def __init__(
        self,
        store: KeyValueStore,
        ttl: timedelta = DEFAULT_TTL,
        clock: Callable[[], datetime] = utc_now,
        key: str = DEFAULT_CACHE_KEY,
    ):
        self.store = store
        self.ttl = ttl
        self.clock = clock
        self.key = key

    async def write(self, snapshot: RateSnapshot) -> None:
        entry = CacheEntry(saved_at=self.clock(), payload=snapshot)
        await self.store.set(self.key, encode_entry(entry))

    async def read(self) -> RateSnapshot | None:
        raw = await self.store.get(self.key)
        if not raw:
            logger.debug("Rate cache miss")
            return None

        try:
            entry = decode_entry(raw)
        except CacheCorruptError as e:
            logger.warning(f"Ignoring corrupt rate cache entry: {e}")
            return None

        age = self.clock() - entry.saved_at
        if age > self.ttl:
            logger.debug(f"Rate cache entry expired ({age} old)")
            return None

        logger.debug(f"Rate cache hit ({entry.payload.base}, {entry.payload.date})")
        return entry.payload
