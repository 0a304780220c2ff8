"""Shared pytest fixtures for the obsidian-link test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from obsidian_link.config import Config, FrontmatterOverrides
from obsidian_link.metadata.base import MetadataProvider, PageMetadataProvider
from obsidian_link.models import NoteTimestamp, PageMetadata, Rule, VideoMetadata

# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


@pytest.fixture()
def rules() -> list[Rule]:
    """A typical rule table with the default listed first."""
    return [
        Rule(name="default", pattern=r".*", resolution="none", folder="links"),
        Rule(name="shorts", pattern=r"youtube\.com/shorts/", resolution="1080p", folder="youtube/shorts"),
        Rule(name="youtube", pattern=r"(?:^|[/.])youtube\.com/watch|youtu\.be/", resolution="FHD", folder="youtube"),
        Rule(name="github", pattern=r"github\.com/", resolution="SD", folder="code"),
    ]


# ---------------------------------------------------------------------------
# Config and time
# ---------------------------------------------------------------------------


@pytest.fixture()
def config(tmp_path: Path, rules: list[Rule]) -> Config:
    """Config writing into a temporary vault."""
    return Config(
        vault_path=tmp_path / "vault",
        rules=rules,
        frontmatter=FrontmatterOverrides(),
        youtube_api_key="yt-test-key",
    )


@pytest.fixture()
def now() -> NoteTimestamp:
    return NoteTimestamp(date="2024-03-05", day="Tue", time="14:07")


# ---------------------------------------------------------------------------
# Fake providers
# ---------------------------------------------------------------------------


class FakeVideoProvider(MetadataProvider):
    def __init__(self, metadata: VideoMetadata) -> None:
        self.metadata = metadata
        self.requested: list[str] = []

    def fetch(self, video_id: str) -> VideoMetadata:
        self.requested.append(video_id)
        self.metadata.id = video_id
        return self.metadata


class FakePageProvider(PageMetadataProvider):
    def __init__(self, page: PageMetadata | None = None) -> None:
        self.page = page
        self.requested: list[str] = []

    def fetch(self, url: str) -> PageMetadata:
        self.requested.append(url)
        return self.page or PageMetadata(url=url, title="Example Page", author="example.com")


@pytest.fixture()
def video_provider() -> FakeVideoProvider:
    return FakeVideoProvider(
        VideoMetadata(
            id="",
            title="Test Video",
            description="Desc",
            channel="ChanX",
            published_at="2024-01-01T00:00:00Z",
            tags=["a", "b"],
        )
    )


@pytest.fixture()
def page_provider() -> FakePageProvider:
    return FakePageProvider()
