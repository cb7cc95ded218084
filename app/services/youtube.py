from datetime import date

from async_lru import alru_cache
from loguru import logger

from app.core.base_client import BaseClient
from app.core.config import settings
from app.models.user import VideoEntry


class YouTubeClient(BaseClient):
    """
    Client for the YouTube Data API v3.
    """

    def __init__(self, api_key: str, timeout: float = 10.0, max_retries: int = 3):
        super().__init__(
            base_url="https://www.googleapis.com/youtube/v3",
            timeout=timeout,
            max_retries=max_retries,
            headers={"Accept": "application/json"},
        )
        self.api_key = api_key

    async def search_channel_videos(self, channel_id: str, max_results: int) -> dict:
        params = {
            "part": "snippet",
            "channelId": channel_id,
            "type": "video",
            "order": "date",
            "maxResults": max_results,
            "key": self.api_key,
        }
        return await self.get("/search", params=params)


def _parse_item(item: dict) -> VideoEntry | None:
    video_id = (item.get("id") or {}).get("videoId")
    snippet = item.get("snippet") or {}
    published_at = snippet.get("publishedAt") or ""
    if not video_id or not published_at:
        return None
    try:
        published = date.fromisoformat(published_at[:10])
    except ValueError:
        return None
    return VideoEntry(
        title=snippet.get("title") or video_id,
        url=f"https://www.youtube.com/watch?v={video_id}",
        published=published,
    )


class YouTubeService:
    """
    Lists a member's public YouTube uploads, newest first.

    Returns None whenever the list cannot be determined (no channel linked, no
    API key configured, or the API call failed) so the page shows its fallback.
    """

    def __init__(self, api_key: str | None = None, max_results: int | None = None):
        self.api_key = api_key if api_key is not None else settings.YOUTUBE_API_KEY
        self.max_results = max_results or settings.YOUTUBE_MAX_RESULTS
        self.client = YouTubeClient(api_key=self.api_key) if self.api_key else None

    async def close(self):
        if self.client:
            await self.client.close()

    async def get_videos(self, channel_id: str | None) -> list[VideoEntry] | None:
        if not channel_id:
            return None
        if self.client is None:
            logger.debug("YOUTUBE_API_KEY not set; skipping video lookup")
            return None

        try:
            return await self._list_uploads(channel_id)
        except Exception as e:
            logger.warning(f"YouTube lookup failed for channel {channel_id}: {e}")
            return None

    @alru_cache(maxsize=1000, ttl=60 * 60)
    async def _list_uploads(self, channel_id: str) -> list[VideoEntry]:
        data = await self.client.search_channel_videos(channel_id, self.max_results)
        videos = []
        for item in data.get("items", []):
            entry = _parse_item(item)
            if entry is not None:
                videos.append(entry)
        return videos


youtube_service = YouTubeService()
