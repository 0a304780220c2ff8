"""Turn a single URL into a note in an Obsidian vault."""

__version__ = "0.3.0"
