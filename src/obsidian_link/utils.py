"""Utility functions for obsidian-link."""

import re
from urllib.parse import urlparse

_MAX_STEM_BYTES = 240


def sanitize_tag(tag: str) -> str:
    """Turn a free-form tag into a lowercase, hyphenated Obsidian tag."""
    tag = tag.replace("'", "").lower()
    tag = "".join(c if c.isalnum() or c.isspace() else "-" for c in tag)
    return re.sub(r"\s", "-", tag)


def sanitize_filename(name: str, max_length: int = 80) -> str:
    """Keep letters, digits, whitespace and hyphens; drop everything else.

    The stem is cut to max_length characters and to a byte length that
    leaves room for the ".md" suffix within a 255-byte filename.
    """
    name = "".join(c for c in name if c.isalnum() or c.isspace() or c == "-")
    name = re.sub(r"\s+", " ", name).strip()[:max_length]
    while len(name.encode("utf-8")) > _MAX_STEM_BYTES:
        name = name[:-1]
    name = name.strip()
    return name or "untitled"


def extract_domain(url: str) -> str:
    """Extract the domain from a URL."""
    parsed = urlparse(url)
    domain = parsed.netloc
    if domain.startswith("www."):
        domain = domain[4:]
    return domain


def title_from_url(url: str) -> str:
    """Derive a readable note title from the URL path or domain."""
    path = urlparse(url).path.strip("/")
    if path:
        last_segment = path.split("/")[-1]
        words = re.sub(r"[-_]+", " ", last_segment.rsplit(".", 1)[0]).strip()
        if words:
            return words
    return extract_domain(url) or url
