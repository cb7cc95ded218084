from datetime import date

import httpx
import pytest
import respx

from app.services.youtube import YouTubeService

SEARCH_URL = "https://www.googleapis.com/youtube/v3/search"


def _item(video_id: str, title: str, published_at: str) -> dict:
    return {"id": {"videoId": video_id}, "snippet": {"title": title, "publishedAt": published_at}}


@pytest.mark.asyncio
@respx.mock
async def test_get_videos_parses_search_results():
    route = respx.get(SEARCH_URL).respond(
        200,
        json={
            "items": [
                _item("abc", "Pair programming", "2015-04-01T10:00:00Z"),
                {"id": {"kind": "youtube#channel"}, "snippet": {"title": "A channel"}},
                _item("def", "Scrum", "2015-03-01T10:00:00Z"),
            ]
        },
    )
    service = YouTubeService(api_key="yt-key", max_results=5)

    videos = await service.get_videos("UC123")

    assert [v.title for v in videos] == ["Pair programming", "Scrum"]
    assert videos[0].url == "https://www.youtube.com/watch?v=abc"
    assert videos[0].published == date(2015, 4, 1)
    params = route.calls.last.request.url.params
    assert params["channelId"] == "UC123"
    assert params["maxResults"] == "5"
    assert params["key"] == "yt-key"


@pytest.mark.asyncio
async def test_get_videos_without_channel():
    assert await YouTubeService(api_key="yt-key").get_videos(None) is None


@pytest.mark.asyncio
async def test_get_videos_without_api_key():
    service = YouTubeService(api_key="")
    assert service.client is None
    assert await service.get_videos("UC123") is None


@pytest.mark.asyncio
@respx.mock
async def test_get_videos_returns_none_on_failure():
    respx.get(SEARCH_URL).respond(403, json={"error": {"message": "quota"}})
    assert await YouTubeService(api_key="yt-key").get_videos("UC999") is None


@pytest.mark.asyncio
@respx.mock
async def test_failed_lookup_is_retried_on_next_request():
    route = respx.get(SEARCH_URL)
    route.side_effect = [
        httpx.Response(403, json={"error": {"message": "quota"}}),
        httpx.Response(200, json={"items": [_item("abc", "Pair programming", "2015-04-01T10:00:00Z")]}),
    ]
    service = YouTubeService(api_key="yt-key")

    assert await service.get_videos("UC-retry") is None
    videos = await service.get_videos("UC-retry")
    assert [v.title for v in videos] == ["Pair programming"]
    assert route.call_count == 2
