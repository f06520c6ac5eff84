import httpx

from domain.exceptions.currency import FetchFailedError
from domain.models.rates import RateSnapshot


class FrankfurterProvider:
    BASE_URL = "https://api.frankfurter.dev/v1"

    def __init__(
        self,
        base_url: str | None = None,
        client: httpx.AsyncClient | None = None,
        timeout: float = 10,
    ):
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self._client = client or httpx.AsyncClient(timeout=timeout)

    @property
    def name(self) -> str:
        return "frankfurter"

    async def _request(self, endpoint: str) -> dict:
        url = f"{self.base_url}/{endpoint}"

        try:
            response = await self._client.get(url)
            response.raise_for_status()
            return response.json()

        except httpx.HTTPStatusError as e:
            raise FetchFailedError(
                f"Frankfurter HTTP error {e.response.status_code}: {e.response.text[:200]}"
            ) from e
        except httpx.RequestError as e:
            raise FetchFailedError(f"Frankfurter request failed: {e.__class__.__name__}") from e
        except ValueError as e:
            raise FetchFailedError(f"Frankfurter response parsing error: {str(e)}") from e

    async def fetch_latest(self) -> RateSnapshot:
        data = await self._request("latest")
        try:
            return RateSnapshot.from_dict(data)
        except ValueError as e:
            raise FetchFailedError(f"Frankfurter returned malformed rates: {e}") from e

    async def close(self) -> None:
        await self._client.aclose()
