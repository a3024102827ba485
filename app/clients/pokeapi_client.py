import httpx
import logging

from app.fanout import gather_in_order

logger = logging.getLogger(__name__)

# Custom exception for any upstream failure (status, network or body)
class APIClientError(Exception):
    def __init__(self, status_code: int, detail: str):
        super().__init__(detail)
        self.status_code = status_code
        self.detail = detail

class PokeAPIClient:
    BASE_URL = "https://pokeapi.co/api/v2/"
    PAGE_SIZE = 20

    def __init__(self, base_url: str | None = None, timeout: float | None = None):
        # timeout=None: upstream calls are never cut short unless configured
        self.client = httpx.AsyncClient(base_url=base_url or self.BASE_URL, timeout=timeout)

    async def fetch_url(self, url: str, params: dict | None = None) -> dict:
        """
        GETs a path relative to the base URL (or an absolute reference URL) and
        returns the decoded JSON body. No retries.
        """
        logger.info(f"Fetching upstream resource: {url}")

        try:
            response = await self.client.get(url, params=params)
            response.raise_for_status()  # Raises for 4xx/5xx status codes
            return response.json()

        except httpx.HTTPStatusError as e:
            logger.error(f"PokeAPI error for {e.request.url}: status {e.response.status_code}")
            raise APIClientError(
                status_code=e.response.status_code,
                detail=f"PokeAPI failed with status {e.response.status_code} for {e.request.url}",
            )
        except httpx.RequestError as e:
            # Handle network failures/timeouts
            logger.error(f"PokeAPI network error for {url}: {str(e)}")
            raise APIClientError(status_code=503, detail=f"PokeAPI network error: {str(e)}")
        except ValueError:
            # Body was not JSON
            logger.error(f"PokeAPI response parsing error for {url}")
            raise APIClientError(status_code=502, detail="PokeAPI returned an unexpected response format.")

    async def fetch_details(self, urls: list[str]) -> list[dict]:
        """Fetches every detail record concurrently; results follow the order of `urls`."""
        return await gather_in_order(urls, self.fetch_url)

    async def list_types(self) -> dict:
        return await self.fetch_url("type")

    async def get_type(self, type_id: str) -> dict:
        return await self.fetch_url(f"type/{type_id}")

    async def get_pokemon(self, search: str) -> dict:
        return await self.fetch_url(f"pokemon/{search}")

    async def list_pokemon(self, offset: str | None) -> dict:
        """Fetches one upstream page of PAGE_SIZE items. `offset` is forwarded verbatim."""
        params = {"limit": self.PAGE_SIZE}
        if offset is not None:
            params["offset"] = offset
        return await self.fetch_url("pokemon", params=params)

    async def close(self):
        """Close the HTTP connection pool (call on app shutdown)."""
        await self.client.aclose()
