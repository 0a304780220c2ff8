"""Configuration loading and validation."""

import datetime
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml
from dotenv import find_dotenv, load_dotenv

from .dispatcher import DEFAULT_RULE, compile_pattern
from .exceptions import ConfigError
from .models import Rule
from .resolutions import RESOLUTION_TABLES, ResolutionTables

DEFAULT_CONFIG_PATH = "~/.config/obsidian-link/obsidian-link.yml"
DEFAULT_TIMEZONE = "America/Los_Angeles"

_RULE_KEYS = ("name", "regex", "resolution", "folder")


@dataclass(frozen=True)
class FrontmatterOverrides:
    """Frontmatter values that replace computed or fetched ones."""

    date: Optional[str] = None
    day: Optional[str] = None
    time: Optional[str] = None
    tags: Optional[list[str]] = None
    url: Optional[str] = None
    author: Optional[str] = None


@dataclass
class Config:
    """Application configuration."""

    vault_path: Path
    rules: list[Rule] = field(default_factory=list)
    frontmatter: FrontmatterOverrides = field(default_factory=FrontmatterOverrides)
    youtube_api_key: str = ""
    firecrawl_api_key: str = ""
    timezone: str = DEFAULT_TIMEZONE
    # Write https://www.youtube.com/watch?v=<id> instead of the input URL
    canonical_video_url: bool = False
    verbose: bool = False

    def validate(self, tables: ResolutionTables = RESOLUTION_TABLES) -> None:
        """Validate rules and settings before any URL is handled."""
        if not str(self.vault_path).strip():
            raise ConfigError("'vault' is required in the config file.")
        if not self.rules:
            raise ConfigError("At least one entry under 'links' is required.")
        for rule in self.rules:
            compile_pattern(rule)
            if rule.name == DEFAULT_RULE:
                continue
            if rule.resolution not in tables.table_for(rule.name):
                raise ConfigError(
                    f"Resolution not found for rule '{rule.name}': {rule.resolution!r}"
                )
        try:
            ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ConfigError(f"Unknown timezone: {self.timezone}") from e


def expand_path(path: str | Path) -> Path:
    """Expand a leading ~ in a path."""
    return Path(os.path.expanduser(str(path)))


def _parse_rule(index: int, raw) -> Rule:
    if not isinstance(raw, dict):
        raise ConfigError(f"links[{index}] must be a mapping.")
    missing = [key for key in _RULE_KEYS if key not in raw]
    if missing:
        raise ConfigError(f"links[{index}] is missing: {', '.join(missing)}")
    return Rule(
        name=str(raw["name"]),
        pattern=str(raw["regex"]),
        resolution=str(raw["resolution"]),
        folder=str(raw["folder"]),
    )


def _parse_frontmatter(raw) -> FrontmatterOverrides:
    if raw is None:
        return FrontmatterOverrides()
    if not isinstance(raw, dict):
        raise ConfigError("'frontmatter' must be a mapping.")

    def text(key: str) -> Optional[str]:
        value = raw.get(key)
        if value is None or isinstance(value, str):
            return value
        # YAML reads an unquoted 2024-01-01 as a date
        if key == "date" and isinstance(value, datetime.date):
            return value.strftime("%Y-%m-%d")
        raise ConfigError(
            f"'frontmatter.{key}' must be a string, got {value!r}. "
            "Quote the value in the config file."
        )

    tags = raw.get("tags")
    if tags is not None:
        if isinstance(tags, str):
            tags = [tags]
        elif not isinstance(tags, list):
            raise ConfigError("'frontmatter.tags' must be a list.")
        for tag in tags:
            if not isinstance(tag, str):
                raise ConfigError(
                    f"'frontmatter.tags' entries must be strings, got {tag!r}. "
                    "Quote the value in the config file."
                )

    return FrontmatterOverrides(
        date=text("date"),
        day=text("day"),
        time=text("time"),
        tags=tags,
        url=text("url"),
        author=text("author"),
    )


def parse_config(data: dict, verbose: bool = False) -> Config:
    """Build a validated Config from an already-parsed YAML mapping."""
    if not isinstance(data, dict):
        raise ConfigError("Config file must contain a mapping.")
    if not data.get("vault"):
        raise ConfigError("'vault' is required in the config file.")

    links = data.get("links") or []
    if not isinstance(links, list):
        raise ConfigError("'links' must be a list.")

    canonical = data.get("canonical_video_url", False)
    if not isinstance(canonical, bool):
        raise ConfigError(
            f"'canonical_video_url' must be true or false, got {canonical!r}."
        )

    config = Config(
        vault_path=expand_path(data["vault"]),
        rules=[_parse_rule(i, raw) for i, raw in enumerate(links)],
        frontmatter=_parse_frontmatter(data.get("frontmatter")),
        youtube_api_key=os.getenv("YOUTUBE_API_KEY", ""),
        firecrawl_api_key=os.getenv("FIRECRAWL_API_KEY", ""),
        timezone=str(data.get("timezone") or DEFAULT_TIMEZONE),
        canonical_video_url=canonical,
        verbose=verbose,
    )

    config.validate()
    return config


def load_config(
    config_path: Optional[str] = None,
    verbose: bool = False,
) -> Config:
    """Load config from the YAML file, with API keys from .env."""
    load_dotenv(find_dotenv(usecwd=True))

    path = expand_path(
        config_path or os.getenv("OBSIDIAN_LINK_CONFIG", DEFAULT_CONFIG_PATH)
    )
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Failed to read config file {path}: {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse config file {path}: {e}") from e

    return parse_config(data or {}, verbose=verbose)
