"""Match a URL against the configured rules."""

import logging
import re
from typing import Optional, Sequence

from .exceptions import ClassificationError, ConfigError
from .models import ClassifiedLink, Rule, Shorts, Video, WebLink
from .resolutions import RESOLUTION_TABLES, ResolutionTables, lookup_resolution

logger = logging.getLogger(__name__)

DEFAULT_RULE = "default"


def compile_pattern(rule: Rule) -> re.Pattern:
    """Compile a rule's regex, raising ConfigError if it is invalid."""
    try:
        return re.compile(rule.pattern)
    except re.error as e:
        raise ConfigError(
            f"Invalid regex for rule '{rule.name}': {rule.pattern!r} ({e})"
        ) from e


def classify(
    url: str,
    rules: Sequence[Rule],
    tables: ResolutionTables = RESOLUTION_TABLES,
) -> ClassifiedLink:
    """Classify a URL using the first matching rule.

    Rules are tried in configured order and the first non-default match
    wins. A match on the "default" rule is only remembered; scanning goes on
    so that a more specific rule listed after it can still claim the URL.

    Raises:
        ConfigError: a rule's regex is invalid or its resolution is unknown.
        ClassificationError: nothing matched and there is no default rule.
    """
    logger.debug("classify: url=%s rules=%d", url, len(rules))
    fallback: Optional[WebLink] = None

    for rule in rules:
        if not compile_pattern(rule).search(url):
            continue

        if rule.name == DEFAULT_RULE:
            if fallback is None:
                fallback = WebLink(url=url, folder=rule.folder, width=0, height=0)
            continue

        width, height = lookup_resolution(rule.name, rule.resolution, tables)
        logger.debug("classify: matched rule '%s' (%dx%d)", rule.name, width, height)
        if rule.name == "shorts":
            return Shorts(url=url, folder=rule.folder, width=width, height=height)
        if rule.name == "youtube":
            return Video(url=url, folder=rule.folder, width=width, height=height)
        return WebLink(url=url, folder=rule.folder, width=width, height=height)

    if fallback is not None:
        logger.debug("classify: using default rule for %s", url)
        return fallback

    raise ClassificationError(f"No matching rule for URL: {url}", url=url)
