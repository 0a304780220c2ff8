"""Turn one URL into one note."""

import logging
from pathlib import Path
from typing import Optional

from .config import Config
from .dispatcher import classify
from .formatter import WATCH_URL, current_timestamp, format_frontmatter, render_embed
from .metadata import (
    MetadataProvider,
    PageMetadataProvider,
    extract_video_id,
    get_page_provider,
    get_video_provider,
)
from .models import NoteTimestamp, Shorts, Video, WebLink
from .writer import write_note

logger = logging.getLogger(__name__)


def handle_video_url(
    link: Shorts | Video,
    config: Config,
    provider: MetadataProvider,
    now: NoteTimestamp,
) -> Path:
    """Write a note for a video or short, with an embedded player."""
    logger.debug("handle_video_url: %s", link)
    video_id = extract_video_id(link.url)
    metadata = provider.fetch(video_id)
    embed = render_embed(video_id, link.width, link.height)

    url = WATCH_URL.format(video_id=video_id) if config.canonical_video_url else link.url
    frontmatter = format_frontmatter(
        config.frontmatter, now, url=url, author=metadata.channel, tags=metadata.tags
    )
    return write_note(
        config.vault_path,
        link.folder,
        metadata.title,
        frontmatter,
        embed,
        metadata.description,
    )


def handle_weblink_url(
    link: WebLink,
    config: Config,
    provider: PageMetadataProvider,
    now: NoteTimestamp,
) -> Path:
    """Write a note for a generic web link. No embed is rendered."""
    logger.debug("handle_weblink_url: %s", link)
    page = provider.fetch(link.url)
    frontmatter = format_frontmatter(
        config.frontmatter, now, url=link.url, author=page.author, tags=page.tags
    )
    return write_note(
        config.vault_path,
        link.folder,
        page.title,
        frontmatter,
        "",
        page.description,
    )


def handle_url(
    url: str,
    config: Config,
    video_provider: Optional[MetadataProvider] = None,
    page_provider: Optional[PageMetadataProvider] = None,
    now: Optional[NoteTimestamp] = None,
) -> Path:
    """Classify a URL and write its note into the vault.

    Providers not passed in are built from the config and closed afterwards.
    Returns the path of the written note.
    """
    logger.debug("handle_url: url=%s", url)
    link = classify(url, config.rules)
    now = now or current_timestamp(config.timezone)

    if isinstance(link, (Shorts, Video)):
        provider = video_provider or get_video_provider(config)
        try:
            return handle_video_url(link, config, provider, now)
        finally:
            if video_provider is None:
                provider.close()

    if isinstance(link, WebLink):
        page = page_provider or get_page_provider(config)
        try:
            return handle_weblink_url(link, config, page, now)
        finally:
            if page_provider is None:
                page.close()

    raise TypeError(f"Unhandled link type: {type(link).__name__}")
