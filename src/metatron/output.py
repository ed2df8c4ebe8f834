"""Saving generated listings and hierarchies to disk."""

import logging
from pathlib import Path

from metatron.types import PathType, SaveResult

logger = logging.getLogger(__name__)


def save_to_file(content: str, output_dir: PathType, filename: str) -> SaveResult:
    """Write text content to ``output_dir / filename`` as UTF-8.

    An existing file with the same name is overwritten. I/O failures
    and text that cannot be encoded are reported through the
    result rather than raised.

    Args:
        content: Text to write.
        output_dir: Existing directory to write into.
        filename: Name of the file to create.

    Returns:
        SaveResult with the written path on success, or the error message on failure.

    Example:
        >>> result = save_to_file("data", "/nonexistent/dir", "out.txt")
        >>> result.success, result.path
        (False, None)
    """
    file_path = Path(output_dir) / filename
    try:
        file_path.write_text(content, encoding="utf-8")
    except (OSError, UnicodeError) as e:
        logger.debug("Failed to save %s: %s", file_path, e)
        return SaveResult(success=False, error=str(e))

    logger.info("Saved output to %s", file_path)
    return SaveResult(success=True, path=str(file_path))
