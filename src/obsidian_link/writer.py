"""Write a rendered note to the vault filesystem."""

import logging
from pathlib import Path

from .config import expand_path
from .exceptions import NoteWriteError
from .formatter import format_note
from .utils import sanitize_filename

logger = logging.getLogger(__name__)


def write_note(
    vault_path: Path,
    folder: str,
    title: str,
    frontmatter: str,
    embed: str,
    description: str,
) -> Path:
    """Write one note to <vault>/<folder>/<title>.md, replacing any existing file.

    Returns the path of the written file.
    """
    output_dir = expand_path(vault_path) / folder
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise NoteWriteError(
            f"Failed to create directory {output_dir}: {e}", path=output_dir
        ) from e

    filepath = output_dir / (sanitize_filename(title) + ".md")
    content = format_note(frontmatter, embed, description)
    try:
        filepath.write_text(content, encoding="utf-8", newline="")
    except OSError as e:
        raise NoteWriteError(
            f"Failed to write note {filepath}: {e}", path=filepath
        ) from e

    logger.info("Wrote note %s", filepath)
    return filepath
