from typing import Protocol

from domain.models.rates import RateSnapshot


class RateSnapshotProvider(Protocol):
    @property
    def name(self) -> str: ...

    async def fetch_latest(self) -> RateSnapshot: ...

    async def close(self) -> None: ...
