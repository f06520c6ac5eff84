import logging

from domain.exceptions.currency import FetchFailedError
from domain.models.rates import RateSnapshot
from infrastructure.cache.snapshot_cache import RateSnapshotCache
from infrastructure.providers.base import RateSnapshotProvider

logger = logging.getLogger(__name__)


class RateService:
    """Holds the snapshot in use and decides between cache and provider."""

    def __init__(self, cache: RateSnapshotCache, provider: RateSnapshotProvider):
        self.cache = cache
        self.provider = provider
        self._current: RateSnapshot | None = None
        self._source: str | None = None

    @property
    def current(self) -> RateSnapshot | None:
        return self._current

    @property
    def source(self) -> str | None:
        return self._source

    async def get_snapshot(self, force_refresh: bool = False) -> RateSnapshot:
        snapshot = None if force_refresh else await self.cache.read()

        if snapshot is not None:
            self._set_current(snapshot, "cache")
            return snapshot

        try:
            snapshot = await self.provider.fetch_latest()
        except FetchFailedError as e:
            logger.error(f"Provider {self.provider.name} failed: {e}")
            self._current = None
            self._source = None
            raise

        await self.cache.write(snapshot)
        logger.info(
            f"Fetched {len(snapshot.rates)} rates from {self.provider.name} "
            f"(base {snapshot.base}, date {snapshot.date})"
        )
        self._set_current(snapshot, "api")
        return snapshot

    async def refresh(self) -> RateSnapshot:
        return await self.get_snapshot(force_refresh=True)

    def _set_current(self, snapshot: RateSnapshot, source: str) -> None:
        self._current = snapshot
        self._source = source
