"""Custom exceptions for obsidian-link."""

from pathlib import Path


class ObsidianLinkError(Exception):
    """Base exception for obsidian-link."""


class ConfigError(ObsidianLinkError):
    """Raised when configuration is missing or invalid."""


class ClassificationError(ObsidianLinkError):
    """Raised when no configured rule matches a URL."""

    def __init__(self, message: str, url: str = ""):
        super().__init__(message)
        self.url = url


class ExtractionError(ObsidianLinkError):
    """Raised when a video ID cannot be derived from a URL."""

    def __init__(self, message: str, url: str = ""):
        super().__init__(message)
        self.url = url


class ProviderError(ObsidianLinkError):
    """Raised when fetching remote metadata fails."""


class NoteWriteError(ObsidianLinkError):
    """Raised when the note directory or file cannot be created."""

    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.path = path
