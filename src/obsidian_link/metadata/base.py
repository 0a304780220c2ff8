"""Abstract base classes for metadata providers."""

from abc import ABC, abstractmethod

from ..models import PageMetadata, VideoMetadata


class MetadataProvider(ABC):
    """Abstract video metadata provider interface."""

    @abstractmethod
    def fetch(self, video_id: str) -> VideoMetadata:
        """Fetch metadata for a single video.

        Args:
            video_id: The video identifier extracted from the URL.

        Raises ProviderError if the request fails or the video is unknown.
        """

    def close(self) -> None:
        """Release any network resources held by the provider."""


class PageMetadataProvider(ABC):
    """Abstract web page metadata provider interface."""

    @abstractmethod
    def fetch(self, url: str) -> PageMetadata:
        """Fetch title, description, author and tags for a web page."""

    def close(self) -> None:
        """Release any network resources held by the provider."""
