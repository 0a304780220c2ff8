"""YouTube Data API metadata provider."""

import logging
import re
from typing import Optional

import httpx

from ..exceptions import ExtractionError, ProviderError
from ..models import VideoMetadata
from .base import MetadataProvider

logger = logging.getLogger(__name__)

API_URL = "https://www.googleapis.com/youtube/v3/videos"

_VIDEO_ID_RE = re.compile(
    r"(youtu\.be/|youtube\.com/(watch\?(.*&)?v=|(embed|v|shorts)/))([^?&\">]+)"
)


def extract_video_id(url: str) -> str:
    """Pull the video ID out of a youtu.be or youtube.com URL."""
    match = _VIDEO_ID_RE.search(url)
    if not match:
        raise ExtractionError(f"Failed to extract video ID from URL: {url}", url=url)
    logger.debug("extract_video_id: %s -> %s", url, match.group(5))
    return match.group(5)


def _text(snippet: dict, key: str) -> str:
    value = snippet.get(key)
    return value if isinstance(value, str) else ""


class YouTubeProvider(MetadataProvider):
    def __init__(self, api_key: str, client: Optional[httpx.Client] = None):
        self._api_key = api_key
        self._client = client or httpx.Client(timeout=10.0)

    def close(self) -> None:
        self._client.close()

    def fetch(self, video_id: str) -> VideoMetadata:
        logger.debug("fetch: video_id=%s", video_id)
        try:
            response = self._client.get(
                API_URL,
                params={"id": video_id, "part": "snippet", "key": self._api_key},
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as e:
            raise ProviderError(
                f"YouTube API returned {e.response.status_code} for video_id={video_id}"
            ) from e
        except (httpx.HTTPError, ValueError) as e:
            raise ProviderError(
                f"YouTube API request failed for video_id={video_id}: {e}"
            ) from e

        items = payload.get("items") if isinstance(payload, dict) else None
        if not isinstance(items, list) or not items:
            raise ProviderError(f"Video metadata not found for video_id={video_id}")

        snippet = items[0].get("snippet") if isinstance(items[0], dict) else None
        if not isinstance(snippet, dict):
            snippet = {}
        tags = snippet.get("tags")
        if not isinstance(tags, list):
            tags = []

        return VideoMetadata(
            id=video_id,
            title=_text(snippet, "title"),
            description=_text(snippet, "description"),
            channel=_text(snippet, "channelTitle"),
            published_at=_text(snippet, "publishedAt"),
            tags=[tag for tag in tags if isinstance(tag, str)],
        )
