"""Filter parameters shared by the listing and hierarchy scans."""

from dataclasses import dataclass, field
from typing import Iterable

from metatron.filters.extension_rules import ExtensionFilterRules
from metatron.filters.folder_rules import FolderExclusionRules


@dataclass
class ScanOptions:
    """Parsed filter configuration for a single scan.

    Attributes:
        extension_rules: Allow-list and deny-list applied to file names.
        folder_rules: Ignored folder names and paths.
        folders_only: Emit folders instead of files.

    Example:
        >>> options = ScanOptions.from_raw(".md", False, ".bak", ["node_modules", ""])
        >>> options.extension_rules.extensions
        ['md']
        >>> options.folder_rules.entries
        ['node_modules']
    """

    extension_rules: ExtensionFilterRules = field(default_factory=ExtensionFilterRules)
    folder_rules: FolderExclusionRules = field(default_factory=FolderExclusionRules)
    folders_only: bool = False

    @classmethod
    def from_raw(
        cls,
        extension: str = "",
        folders_only: bool = False,
        ignored_extensions: str = "",
        ignored_folders: Iterable[str] = (),
    ) -> "ScanOptions":
        """Build options from the raw values a caller passes to a scan.

        Args:
            extension: Free-form allow-list, e.g. ``".py, .md"``.
            folders_only: Whether to emit folders instead of files.
            ignored_extensions: Free-form deny-list.
            ignored_folders: Folder names or paths; blank entries are dropped.
        """
        return cls(
            extension_rules=ExtensionFilterRules(extension, ignored_extensions),
            folder_rules=FolderExclusionRules(ignored_folders),
            folders_only=folders_only,
        )
