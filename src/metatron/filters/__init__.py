"""Filters for selecting files by extension and pruning folders."""

from .base_rules import BaseFilterRules
from .extension_rules import (
    ExtensionFilterRules,
    format_extensions,
    is_ignored_file,
    matches_extension,
    parse_extensions,
)
from .folder_rules import FolderExclusionRules, is_ignored_folder, is_path_entry, normalize_path_str

__all__ = [
    "BaseFilterRules",
    "ExtensionFilterRules",
    "FolderExclusionRules",
    "format_extensions",
    "is_ignored_file",
    "is_ignored_folder",
    "is_path_entry",
    "matches_extension",
    "normalize_path_str",
    "parse_extensions",
]
