# nosec B101


from datetime import timedelta
from decimal import Decimal
from unittest.mock import AsyncMock, Mock

import pytest

from application.services.rate_service import RateService
from domain.exceptions.currency import FetchFailedError
from domain.models.rates import RateSnapshot
from infrastructure.cache.snapshot_cache import RateSnapshotCache
from infrastructure.cache.stores import InMemoryKeyValueStore


@pytest.fixture
def snapshot():
    return RateSnapshot(base='EUR', date='2025-09-26', rates={'USD': Decimal('1.1')})


@pytest.fixture
def mock_cache():
    cache = Mock()
    cache.read = AsyncMock(return_value=None)
    cache.write = AsyncMock()
    return cache


@pytest.fixture
def mock_provider(snapshot):
    provider = Mock()
    provider.name = 'frankfurter'
    provider.fetch_latest = AsyncMock(return_value=snapshot)
    return provider


@pytest.mark.asyncio
async def test_cache_hit_skips_provider(mock_cache, mock_provider, snapshot):
    mock_cache.read.return_value = snapshot
    service = RateService(cache=mock_cache, provider=mock_provider)

    result = await service.get_snapshot()

    assert result is snapshot
    assert service.current is snapshot
    assert service.source == 'cache'
    mock_provider.fetch_latest.assert_not_called()
    mock_cache.write.assert_not_called()


@pytest.mark.asyncio
async def test_cache_miss_fetches_and_writes(mock_cache, mock_provider, snapshot):
    service = RateService(cache=mock_cache, provider=mock_provider)

    result = await service.get_snapshot()

    assert result is snapshot
    assert service.source == 'api'
    mock_provider.fetch_latest.assert_awaited_once()
    mock_cache.write.assert_awaited_once_with(snapshot)


@pytest.mark.asyncio
async def test_force_refresh_bypasses_cache(mock_cache, mock_provider, snapshot):
    mock_cache.read.return_value = RateSnapshot(base='EUR', date='2025-09-25', rates={})
    service = RateService(cache=mock_cache, provider=mock_provider)

    result = await service.get_snapshot(force_refresh=True)

    assert result is snapshot
    mock_cache.read.assert_not_called()
    mock_cache.write.assert_awaited_once_with(snapshot)


@pytest.mark.asyncio
async def test_refresh_is_forced_get(mock_cache, mock_provider, snapshot):
    service = RateService(cache=mock_cache, provider=mock_provider)

    assert await service.refresh() is snapshot
    mock_cache.read.assert_not_called()


@pytest.mark.asyncio
async def test_fetch_failure_clears_session_and_propagates(mock_cache, mock_provider, snapshot):
    mock_cache.read.return_value = snapshot
    service = RateService(cache=mock_cache, provider=mock_provider)
    await service.get_snapshot()

    mock_provider.fetch_latest.side_effect = FetchFailedError('Frankfurter request failed')

    with pytest.raises(FetchFailedError):
        await service.refresh()

    assert service.current is None
    assert service.source is None
    mock_cache.write.assert_not_called()


@pytest.mark.asyncio
async def test_second_call_within_ttl_uses_cache(mock_provider, snapshot):
    cache = RateSnapshotCache(InMemoryKeyValueStore(), ttl=timedelta(hours=1))
    service = RateService(cache=cache, provider=mock_provider)

    first = await service.get_snapshot()
    second = await service.get_snapshot()

    assert first == second
    assert service.source == 'cache'
    mock_provider.fetch_latest.assert_awaited_once()


def test_new_service_has_no_snapshot(mock_cache, mock_provider):
    service = RateService(cache=mock_cache, provider=mock_provider)

    assert service.current is None
    assert service.source is None
