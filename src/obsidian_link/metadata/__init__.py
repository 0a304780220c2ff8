"""Metadata provider factories."""

from ..config import Config
from ..exceptions import ConfigError
from .base import MetadataProvider, PageMetadataProvider
from .webpage import FirecrawlPageProvider, PlaceholderPageProvider
from .youtube import YouTubeProvider, extract_video_id

__all__ = [
    "MetadataProvider",
    "PageMetadataProvider",
    "YouTubeProvider",
    "FirecrawlPageProvider",
    "PlaceholderPageProvider",
    "extract_video_id",
    "get_video_provider",
    "get_page_provider",
]


def get_video_provider(config: Config) -> MetadataProvider:
    """Create the YouTube metadata provider."""
    if not config.youtube_api_key:
        raise ConfigError(
            "YOUTUBE_API_KEY is required for video links. Set it in .env or environment."
        )
    return YouTubeProvider(api_key=config.youtube_api_key)


def get_page_provider(config: Config) -> PageMetadataProvider:
    """Create the web page provider; Firecrawl when a key is configured."""
    if config.firecrawl_api_key:
        return FirecrawlPageProvider(api_key=config.firecrawl_api_key)
    return PlaceholderPageProvider()
