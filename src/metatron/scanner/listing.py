"""Flat listing of filtered directory contents.

The listing walks the tree depth-first in pre-order: a folder's contents are
listed right after the folder itself and before its following siblings.
Entries keep the order in which the operating system returns them; unlike the
hierarchy view, nothing is sorted.
"""

import logging
import os
from typing import Iterator, List, Sequence

from humanfriendly import format_size

from metatron.scanner.directory_reader import display_name, entry_size, entry_type, read_directory
from metatron.scanner.scan_options import ScanOptions
from metatron.types import FileEntry, FileType, ListingResult, PathType

logger = logging.getLogger(__name__)


def _to_entry(entry: "os.DirEntry[str]", size: int) -> FileEntry:
    return FileEntry(name=display_name(entry.name), path=display_name(entry.path), size=size)


def iterate_entries(root: PathType, options: ScanOptions) -> Iterator[FileEntry]:
    """Yield the entries of a listing scan in traversal order.

    Pending directories are kept on an explicit stack of iterators, so deep
    trees do not consume interpreter stack frames.

    Args:
        root: Directory to scan. Skipped entirely if it matches an ignored folder.
        options: Parsed filter configuration.

    Yields:
        A FileEntry for every matching file, or for every folder in folders-only mode.
    """
    root = os.fspath(root)
    if options.folder_rules.exclude(root):
        return

    stack = [iter(read_directory(root))]
    while stack:
        entry = next(stack[-1], None)
        if entry is None:
            stack.pop()
            continue

        kind = entry_type(entry)
        if kind is FileType.FILE:
            if options.folders_only:
                continue
            if not options.extension_rules.exclude(entry.path):
                yield _to_entry(entry, entry_size(entry))
        elif kind is FileType.DIRECTORY:
            if options.folder_rules.exclude(entry.path):
                continue
            if options.folders_only:
                yield _to_entry(entry, 0)
            stack.append(iter(read_directory(entry.path)))


def list_files(
    folder_path: PathType,
    extension: str = "",
    folders_only: bool = False,
    ignored_extensions: str = "",
    ignored_folders: Sequence[str] = (),
) -> ListingResult:
    """List matching files (or folders) below a directory.

    Args:
        folder_path: Root directory of the scan.
        extension: Free-form extension allow-list, e.g. ``".py .md"``. Empty allows all files.
        folders_only: List folders (with size 0) instead of files.
        ignored_extensions: Free-form extension deny-list.
        ignored_folders: Folder names or paths whose subtrees are skipped.

    Returns:
        A successful ListingResult. Unreadable or missing directories contribute
        no entries instead of failing the scan.

    Example:
        >>> result = list_files("/nonexistent/path")
        >>> result.success, result.files
        (True, [])
    """
    options = ScanOptions.from_raw(extension, folders_only, ignored_extensions, ignored_folders)
    files: List[FileEntry] = list(iterate_entries(folder_path, options))
    logger.info(
        "Listed %d %s under %s (%s)",
        len(files),
        "folders" if folders_only else "files",
        folder_path,
        format_size(sum(entry.size for entry in files)),
    )
    return ListingResult(success=True, files=files)
