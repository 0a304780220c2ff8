"""Data models for obsidian-link."""

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Rule:
    """A configured URL classification rule."""

    name: str  # youtube, shorts, default, or any web-link family
    pattern: str
    resolution: str
    folder: str


@dataclass(frozen=True)
class Shorts:
    """A short-form (vertical) video link."""

    url: str
    folder: str
    width: int
    height: int


@dataclass(frozen=True)
class Video:
    """A regular video link."""

    url: str
    folder: str
    width: int
    height: int


@dataclass(frozen=True)
class WebLink:
    """Any other link. The default rule yields a 0x0 WebLink."""

    url: str
    folder: str
    width: int = 0
    height: int = 0


ClassifiedLink = Union[Shorts, Video, WebLink]


@dataclass
class VideoMetadata:
    """Video details returned by a metadata provider."""

    id: str
    title: str = ""
    description: str = ""
    channel: str = ""
    published_at: str = ""
    tags: list[str] = field(default_factory=list)


@dataclass
class PageMetadata:
    """Details used for a generic web-link note."""

    url: str
    title: str = ""
    description: str = ""
    author: str = ""
    tags: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class NoteTimestamp:
    """Date, weekday and time strings written to the frontmatter."""

    date: str  # YYYY-MM-DD
    day: str  # Mon, Tue, ...
    time: str  # HH:MM
