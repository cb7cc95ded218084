from async_lru import alru_cache
from loguru import logger

from app.core.base_client import BaseClient
from app.core.config import settings
from app.core.version import __version__


class TimezoneClient(BaseClient):
    """
    Client for a nearest-timezone lookup API keyed by coordinates.
    """

    def __init__(self, api_url: str | None = None, api_key: str | None = None, timeout: float | None = None):
        headers = {
            "User-Agent": f"Folio/{__version__}",
            "Accept": "application/json",
        }
        super().__init__(timeout=timeout or settings.TIMEZONE_LOOKUP_TIMEOUT, max_retries=2, headers=headers)
        self.api_url = api_url or settings.TIMEZONE_API_URL
        self.api_key = api_key if api_key is not None else settings.TIMEZONE_API_KEY

    async def lookup(self, latitude: float, longitude: float) -> dict:
        params = {"latitude": latitude, "longitude": longitude}
        if self.api_key:
            params["key"] = self.api_key
        return await self.get(self.api_url, params=params)


class NearestTimeZoneService:
    """Resolves the IANA zone name closest to a pair of coordinates."""

    def __init__(self, client: TimezoneClient | None = None):
        self.client = client or TimezoneClient()

    async def close(self):
        await self.client.close()

    async def resolve(self, latitude: float, longitude: float) -> str | None:
        try:
            return await self._lookup_zone(latitude, longitude)
        except Exception as e:
            logger.warning(f"Timezone lookup failed for ({latitude}, {longitude}): {e}")
            return None

    # Failures raise out of the cache so only successful answers are remembered
    @alru_cache(maxsize=5000, ttl=24 * 60 * 60)
    async def _lookup_zone(self, latitude: float, longitude: float) -> str | None:
        data = await self.client.lookup(latitude, longitude)
        if not isinstance(data, dict):
            return None
        zone = data.get("timeZone") or data.get("zoneName")
        if not zone:
            logger.debug(f"No timezone returned for ({latitude}, {longitude})")
            return None
        return zone


timezone_service = NearestTimeZoneService()
