"""YAML frontmatter, embed and note body formatting."""

import logging
from datetime import datetime
from typing import Optional, Sequence
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .config import FrontmatterOverrides
from .exceptions import ConfigError
from .models import NoteTimestamp
from .utils import sanitize_tag

logger = logging.getLogger(__name__)

EMBED_URL = "https://www.youtube.com/embed/{video_id}"
WATCH_URL = "https://www.youtube.com/watch?v={video_id}"


def current_timestamp(
    timezone: str,
    now: Optional[datetime] = None,
) -> NoteTimestamp:
    """Return the date, weekday and time in the given zone."""
    try:
        tz = ZoneInfo(timezone)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ConfigError(f"Unknown timezone: {timezone}") from e

    now = now.astimezone(tz) if now else datetime.now(tz)
    return NoteTimestamp(
        date=now.strftime("%Y-%m-%d"),
        day=now.strftime("%a"),
        time=now.strftime("%H:%M"),
    )


def format_frontmatter(
    overrides: FrontmatterOverrides,
    now: NoteTimestamp,
    url: str,
    author: str,
    tags: Sequence[str],
) -> str:
    """Generate the YAML frontmatter block.

    Each configured override wins over the computed or fetched value.
    Field order is fixed: date, day, time, tags, url, author.
    """
    logger.debug("format_frontmatter: url=%s author=%s tags=%s", url, author, tags)
    chosen_tags = overrides.tags if overrides.tags is not None else tags
    clean_tags = [t for t in (sanitize_tag(tag) for tag in chosen_tags) if t]

    lines = [
        "---",
        f"date: {overrides.date if overrides.date is not None else now.date}",
        f"day: {overrides.day if overrides.day is not None else now.day}",
        f"time: {overrides.time if overrides.time is not None else now.time}",
    ]
    if clean_tags:
        lines.append("tags:")
        for tag in clean_tags:
            lines.append(f"  - {tag}")
    lines.extend([
        f"url: {overrides.url if overrides.url is not None else url}",
        f"author: {overrides.author if overrides.author is not None else author}",
        "---",
    ])
    return "\n".join(lines) + "\n"


def render_embed(video_id: str, width: int, height: int) -> str:
    """Build the iframe that embeds a video player."""
    src = EMBED_URL.format(video_id=video_id)
    return (
        f'<iframe width="{width}" height="{height}" src="{src}" '
        'frameborder="0" allowfullscreen></iframe>'
    )


def format_note(frontmatter: str, embed: str, description: str) -> str:
    """Assemble the full note text."""
    return f"{frontmatter}\n{embed}\n\n## Description\n{description}"
