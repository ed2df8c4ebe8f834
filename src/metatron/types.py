"""Result types returned by the scanning and saving operations."""

from dataclasses import asdict, dataclass, field
from enum import Enum
from os import PathLike
from typing import Any, Dict, List, Optional, Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class FileType(Enum):
    """Enumeration of entry types distinguished during traversal.

    Classification follows symbolic links, so a link to a directory is a
    DIRECTORY. Entries that are neither (sockets, broken links) are skipped.

    Attributes:
        FILE: Regular file
        DIRECTORY: Directory
    """

    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class FileEntry:
    """A file or folder emitted by a listing scan.

    Attributes:
        name: Base name of the entry, including its extension.
        path: Full path as traversed, using platform-native separators.
        size: Size in bytes. Always 0 for folders listed in folders-only mode.

    Example:
        >>> FileEntry("notes.md", "/tmp/docs/notes.md", 12).to_dict()
        {'name': 'notes.md', 'path': '/tmp/docs/notes.md', 'size': 12}
    """

    name: str
    path: str
    size: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ListingResult:
    """Outcome of a listing scan.

    Entries appear in traversal order. Traversal problems never flip ``success``;
    unreadable branches simply contribute no entries.

    Attributes:
        success: Whether the operation completed.
        files: Matching entries in the order they were visited.
        error: Error message when ``success`` is False.
    """

    success: bool = True
    files: List[FileEntry] = field(default_factory=list)
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "files": [entry.to_dict() for entry in self.files],
            "error": self.error,
        }


@dataclass
class HierarchyResult:
    """Outcome of a tree rendering scan.

    Attributes:
        success: Whether the operation completed.
        hierarchy: The rendered multi-line tree.
        error: Error message when ``success`` is False.
    """

    success: bool = True
    hierarchy: str = ""
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class SaveResult:
    """Outcome of writing generated output to disk.

    Attributes:
        success: Whether the file was written.
        path: Resolved path of the written file on success.
        error: Error message on failure.

    Example:
        >>> SaveResult(success=False, error="Permission denied").to_dict()
        {'success': False, 'path': None, 'error': 'Permission denied'}
    """

    success: bool
    path: Optional[str] = None
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
