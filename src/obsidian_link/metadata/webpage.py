"""Web page metadata for generic links."""

import logging

from firecrawl import FirecrawlApp

from ..exceptions import ProviderError
from ..models import PageMetadata
from ..utils import extract_domain, title_from_url
from .base import PageMetadataProvider

logger = logging.getLogger(__name__)


def _as_dict(metadata_obj) -> dict:
    # Convert Pydantic model to dict if needed
    if hasattr(metadata_obj, "model_dump"):
        return metadata_obj.model_dump()
    if hasattr(metadata_obj, "dict"):
        return metadata_obj.dict()
    return metadata_obj if isinstance(metadata_obj, dict) else {}


def _keywords(value) -> list[str]:
    if isinstance(value, list):
        return [str(v).strip() for v in value if str(v).strip()]
    if isinstance(value, str):
        return [k.strip() for k in value.split(",") if k.strip()]
    return []


class PlaceholderPageProvider(PageMetadataProvider):
    """Derives note fields from the URL alone, without any network call."""

    def fetch(self, url: str) -> PageMetadata:
        return PageMetadata(
            url=url,
            title=title_from_url(url),
            description="",
            author=extract_domain(url),
            tags=[],
        )


class FirecrawlPageProvider(PageMetadataProvider):
    """Scrapes the page with Firecrawl and reads its metadata."""

    def __init__(self, api_key: str):
        self._app = FirecrawlApp(api_key=api_key)

    def fetch(self, url: str) -> PageMetadata:
        logger.debug("fetch: url=%s", url)
        try:
            result = self._app.scrape(url, formats=["markdown"])
        except Exception as e:
            raise ProviderError(f"Failed to scrape {url}: {e}") from e

        if not result:
            raise ProviderError(f"Empty response from Firecrawl for {url}")

        metadata_obj = result.metadata if hasattr(result, "metadata") else result.get("metadata", {})
        metadata = _as_dict(metadata_obj)

        return PageMetadata(
            url=url,
            title=metadata.get("title") or metadata.get("og_title") or title_from_url(url),
            description=metadata.get("description") or metadata.get("og_description") or "",
            author=metadata.get("author") or extract_domain(url),
            tags=_keywords(metadata.get("keywords")),
        )
