"""Fault-tolerant directory reading helpers shared by both traversal modes."""

import logging
import os
from typing import List, Optional

from metatron.types import FileType, PathType

logger = logging.getLogger(__name__)


def read_directory(directory: PathType) -> List["os.DirEntry[str]"]:
    """Return the entries of a directory in the order the OS yields them.

    A directory that cannot be read (missing, not a directory, access denied)
    is treated as empty.
    """
    try:
        with os.scandir(os.fspath(directory)) as it:
            return list(it)
    except OSError as e:
        logger.debug("Skipping unreadable directory %s: %s", directory, e)
        return []


def entry_type(entry: "os.DirEntry[str]") -> Optional[FileType]:
    """Classify an entry as a file or a directory, following symlinks.

    Returns:
        The entry type, or None for anything that is neither or cannot be inspected.
    """
    try:
        if entry.is_file():
            return FileType.FILE
        if entry.is_dir():
            return FileType.DIRECTORY
    except OSError as e:
        logger.debug("Cannot inspect %s: %s", entry.path, e)
    return None


def entry_size(entry: "os.DirEntry[str]") -> int:
    """Size of a file entry in bytes, or 0 if its metadata is unavailable."""
    try:
        return entry.stat().st_size
    except OSError as e:
        logger.debug("Cannot stat %s: %s", entry.path, e)
        return 0


def display_name(name: str) -> str:
    """Make a name safe for text output.

    Bytes that are not valid UTF-8 arrive as surrogate escapes and would fail to
    encode later on. They are replaced with U+FFFD.

    Example:
        >>> display_name("bad\\udcff.txt")
        'bad�.txt'
    """
    return os.fsencode(name).decode("utf-8", errors="replace")
