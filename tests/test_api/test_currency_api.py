from decimal import Decimal
from unittest.mock import AsyncMock, Mock

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_rate_service
from api.main import app
from application.services.rate_service import RateService
from domain.exceptions.currency import FetchFailedError
from domain.models.rates import RateSnapshot
from infrastructure.cache.snapshot_cache import RateSnapshotCache
from infrastructure.cache.stores import InMemoryKeyValueStore


@pytest.fixture
def snapshot():
    return RateSnapshot(
        base='EUR',
        date='2025-09-26',
        rates={'USD': Decimal('1.1'), 'BRL': Decimal('5.5'), 'ZAR': Decimal('20.4')},
    )


@pytest.fixture
def mock_provider(snapshot):
    provider = Mock()
    provider.name = 'frankfurter'
    provider.fetch_latest = AsyncMock(return_value=snapshot)
    return provider


@pytest.fixture
def rate_service(mock_provider):
    cache = RateSnapshotCache(InMemoryKeyValueStore())
    return RateService(cache=cache, provider=mock_provider)


@pytest.fixture
def client(rate_service):
    # Override the real dependency with one backed by a mock provider
    app.dependency_overrides[get_rate_service] = lambda: rate_service
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


def test_convert_cross_rate(client):
    response = client.get('/api/convert/USD/BRL/10')

    assert response.status_code == 200
    data = response.json()

    assert data['from_currency'] == 'USD'
    assert data['to_currency'] == 'BRL'
    assert Decimal(data['original_amount']) == Decimal('10')
    assert abs(Decimal(data['converted_amount']) - Decimal('50')) < Decimal('1e-20')
    assert abs(Decimal(data['unit_rate']) - Decimal('5')) < Decimal('1e-20')
    assert data['base'] == 'EUR'
    assert data['date'] == '2025-09-26'
    assert data['source'] == 'api'


def test_convert_lowercase_currencies_normalized(client):
    response = client.get('/api/convert/eur/usd/10')

    assert response.status_code == 200
    assert Decimal(response.json()['converted_amount']) == Decimal('11')


def test_second_request_is_served_from_cache(client, mock_provider):
    client.get('/api/convert/EUR/USD/1')
    response = client.get('/api/convert/EUR/USD/1')

    assert response.json()['source'] == 'cache'
    mock_provider.fetch_latest.assert_awaited_once()


def test_convert_unknown_currency_returns_400(client):
    response = client.get('/api/convert/USD/GBP/10')

    assert response.status_code == 400
    assert response.json()['currency'] == 'GBP'


def test_convert_negative_amount_rejected(client):
    response = client.get('/api/convert/USD/BRL/-5')

    assert response.status_code == 422


def test_convert_provider_down_returns_503(client, mock_provider):
    mock_provider.fetch_latest.side_effect = FetchFailedError('Frankfurter request failed: ConnectError')

    response = client.get('/api/convert/USD/BRL/10')

    assert response.status_code == 503
    assert response.json() == {'detail': 'Exchange rate service unavailable'}


def test_convert_body(client):
    response = client.post(
        '/api/convert', json={'from_currency': 'brl', 'to_currency': 'EUR', 'amount': 11}
    )

    assert response.status_code == 200
    data = response.json()
    assert data['from_currency'] == 'BRL'
    assert Decimal(data['converted_amount']) == Decimal('2')


def test_convert_body_same_currency_allowed(client):
    response = client.post(
        '/api/convert', json={'from_currency': 'XYZ', 'to_currency': 'XYZ', 'amount': 3.5}
    )

    assert response.status_code == 200
    assert Decimal(response.json()['converted_amount']) == Decimal('3.5')


def test_convert_body_negative_amount_rejected(client):
    response = client.post(
        '/api/convert', json={'from_currency': 'USD', 'to_currency': 'EUR', 'amount': -1}
    )

    assert response.status_code == 422


def test_get_rate(client):
    response = client.get('/api/rate/EUR/ZAR')

    assert response.status_code == 200
    data = response.json()
    assert Decimal(data['rate']) == Decimal('20.4')
    assert data['base'] == 'EUR'


def test_get_currencies_popular_first(client):
    response = client.get('/api/currencies')

    assert response.status_code == 200
    data = response.json()
    assert data['currencies'] == ['BRL', 'USD', 'EUR', 'ZAR']
    assert data['default_from'] == 'BRL'
    assert data['default_to'] == 'USD'


def test_get_rates_snapshot(client):
    response = client.get('/api/rates')

    assert response.status_code == 200
    data = response.json()
    assert data['base'] == 'EUR'
    assert {code: Decimal(rate) for code, rate in data['rates'].items()} == {
        'USD': Decimal('1.1'), 'BRL': Decimal('5.5'), 'ZAR': Decimal('20.4'),
    }
    assert data['source'] == 'api'


def test_refresh_rates_always_fetches(client, mock_provider):
    client.get('/api/rates')
    response = client.post('/api/rates/refresh')

    assert response.status_code == 200
    assert response.json()['source'] == 'api'
    assert mock_provider.fetch_latest.await_count == 2


def test_unhandled_error_returns_500(rate_service, mock_provider):
    mock_provider.fetch_latest.side_effect = RuntimeError('boom')
    app.dependency_overrides[get_rate_service] = lambda: rate_service
    client = TestClient(app, raise_server_exceptions=False)

    response = client.get('/api/rates')

    app.dependency_overrides.clear()
    assert response.status_code == 500
    assert response.json() == {'detail': 'Internal server error'}
