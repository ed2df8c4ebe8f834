"""Folder exclusion rules matching directories by bare name or by path prefix."""

import os
from pathlib import Path
from typing import Iterable, List

from metatron.types import PathType

from .base_rules import BaseFilterRules

# Canonical separator for folder comparisons, independent of the host platform.
SEPARATOR = "\\"
DRIVE_MARKER = ":"


def normalize_path_str(value: str) -> str:
    """Normalize a path string for case-insensitive, separator-agnostic comparison.

    Surrounding whitespace is trimmed, forward slashes become backslashes,
    trailing separators are removed and the result is lowercased. The output is
    meant for comparisons only and is never shown to the user.

    Example:
        >>> normalize_path_str("  /Home/User/Build/ ")
        '\\\\home\\\\user\\\\build'
        >>> normalize_path_str("C:/Projects/")
        'c:\\\\projects'
    """
    return value.strip().replace("/", SEPARATOR).rstrip("\\/").lower()


def is_path_entry(normalized_entry: str) -> bool:
    """Tell whether a normalized ignore entry names a path rather than a bare folder name."""
    return SEPARATOR in normalized_entry or DRIVE_MARKER in normalized_entry


def _matches(folder_name: str, normalized_path: str, normalized_entry: str) -> bool:
    if is_path_entry(normalized_entry):
        # A path entry covers the folder itself and everything below it.
        return normalized_path == normalized_entry or normalized_path.startswith(normalized_entry + SEPARATOR)
    return folder_name == normalized_entry


def is_ignored_folder(path: PathType, ignored_folders: Iterable[str]) -> bool:
    """Check whether a directory is excluded by any ignored-folder entry.

    Bare names match the directory's base name at any depth. Entries containing
    a separator or a drive marker are treated as paths and match the directory
    itself or any of its descendants. All comparisons are case-insensitive.

    Args:
        path: Directory being visited.
        ignored_folders: Raw ignore entries (names or paths).

    Returns:
        True on the first matching entry, False if none match.

    Example:
        >>> is_ignored_folder("/srv/app/Node_Modules", ["node_modules"])
        True
        >>> is_ignored_folder("/srv/app/build/lib", ["/srv/app/build"])
        True
        >>> is_ignored_folder("/srv/app/builder", ["/srv/app/build"])
        False
    """
    path_str = os.fspath(path)
    folder_name = Path(path_str).name.lower()
    normalized_path = normalize_path_str(path_str)
    return any(_matches(folder_name, normalized_path, normalize_path_str(entry)) for entry in ignored_folders)


class FolderExclusionRules(BaseFilterRules):
    """Exclusion rules pruning whole directory subtrees.

    Empty and whitespace-only entries are discarded on construction, so a list
    coming straight from user input can be passed in unchanged. Entries keep
    their original spelling in ``entries``; normalization happens at match time.

    Attributes:
        entries (List[str]): The effective ignore entries.

    Example:
        >>> rules = FolderExclusionRules(["dist", "  ", "/opt/data/cache"])
        >>> rules.entries
        ['dist', '/opt/data/cache']
        >>> rules.exclude("/home/me/project/dist")
        True
        >>> rules.exclude("/opt/data/cache/2024")
        True
        >>> rules.exclude("/opt/data")
        False
    """

    def __init__(self, entries: Iterable[str] = ()) -> None:
        self.entries: List[str] = [entry for entry in entries if entry.strip()]

    def exclude(self, path: PathType) -> bool:
        if not self.has_rules():
            return False
        return is_ignored_folder(path, self.entries)

    def has_rules(self) -> bool:
        return bool(self.entries)
