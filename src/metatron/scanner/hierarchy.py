"""Tree rendering of filtered directory contents.

The hierarchy is built in two steps. First a FileSystemNode tree holding only
the surviving entries is assembled, with folders sorted before files at every
level. Then the tree is rendered line by line with box-drawing connectors::

    📁 project
    ├── 📁 docs
    │   └── 📄 guide.md
    └── 📄 README.md

When an extension allow-list is active, folders without any matching
descendant are pruned so the output contains no dead-end branches.
"""

import logging
import os
from pathlib import Path
from typing import Iterator, Sequence

from metatron.scanner.directory_reader import display_name, entry_type, read_directory
from metatron.scanner.file_system_node import FileSystemNode
from metatron.scanner.scan_options import ScanOptions
from metatron.types import FileType, HierarchyResult, PathType

logger = logging.getLogger(__name__)

FOLDER_MARKER = "📁 "
FILE_MARKER = "📄 "
BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE_INDENT = "│   "
BLANK_INDENT = "    "


def _root_name(root: str) -> str:
    # Filesystem roots such as "/" have no base name.
    return display_name(Path(root).name or root)


def _populate(node: FileSystemNode, directory: str, options: ScanOptions) -> None:
    """Attach the surviving children of a directory to its node."""
    folders = []
    files = []
    for entry in read_directory(directory):
        kind = entry_type(entry)
        if kind is FileType.DIRECTORY:
            if not options.folder_rules.exclude(entry.path):
                folders.append(entry)
        elif kind is FileType.FILE:
            files.append(entry)

    folders.sort(key=lambda e: e.name)
    files.sort(key=lambda e: e.name)

    keep_empty_folders = options.folders_only or not options.extension_rules.restricts_extensions
    for folder in folders:
        child = FileSystemNode(display_name(folder.name), is_dir=True, full_path=folder.path)
        _populate(child, folder.path, options)
        if keep_empty_folders or child.children:
            child.parent = node

    if options.folders_only:
        return
    for file in files:
        if not options.extension_rules.exclude(file.path):
            FileSystemNode(display_name(file.name), parent=node, is_dir=False, full_path=file.path)


def build_hierarchy_tree(root: PathType, options: ScanOptions) -> FileSystemNode:
    """Build the filtered tree below a directory.

    The root itself is never matched against the ignored folders. A root that
    cannot be read yields a node without children.

    Args:
        root: Directory to scan.
        options: Parsed filter configuration.

    Returns:
        The root node. Its children are folders (sorted by name) followed by files (sorted by name).
    """
    root = os.fspath(root)
    tree = FileSystemNode(_root_name(root), is_dir=True, full_path=root)
    _populate(tree, root, options)
    return tree


def stream_hierarchy(tree: FileSystemNode) -> Iterator[str]:
    """Generate the rendered hierarchy one line at a time, without line terminators.

    Example:
        >>> root = FileSystemNode("project", is_dir=True)
        >>> docs = FileSystemNode("docs", parent=root, is_dir=True)
        >>> _ = FileSystemNode("guide.md", parent=docs)
        >>> _ = FileSystemNode("README.md", parent=root)
        >>> for line in stream_hierarchy(root):
        ...     print(line)
        📁 project
        ├── 📁 docs
        │   └── 📄 guide.md
        └── 📄 README.md
    """

    def write_children(node: FileSystemNode, prefix: str) -> Iterator[str]:
        children = node.children
        for i, child in enumerate(children):
            is_last = i == len(children) - 1
            connector = LAST_BRANCH if is_last else BRANCH
            marker = FOLDER_MARKER if child.is_dir else FILE_MARKER
            yield f"{prefix}{connector}{marker}{child.name}"
            if child.is_dir:
                yield from write_children(child, prefix + (BLANK_INDENT if is_last else PIPE_INDENT))

    yield f"{FOLDER_MARKER}{tree.name}"
    yield from write_children(tree, "")


def render_hierarchy(tree: FileSystemNode) -> str:
    """Render a tree as a single string; every line, including the last, ends with a newline."""
    return "".join(f"{line}\n" for line in stream_hierarchy(tree))


def get_hierarchy(
    folder_path: PathType,
    extension: str = "",
    folders_only: bool = False,
    ignored_extensions: str = "",
    ignored_folders: Sequence[str] = (),
) -> HierarchyResult:
    """Render the filtered hierarchy below a directory.

    Args:
        folder_path: Root directory of the scan.
        extension: Free-form extension allow-list. When set, folders without matches are hidden.
        folders_only: Render folders only, never files.
        ignored_extensions: Free-form extension deny-list.
        ignored_folders: Folder names or paths whose subtrees are skipped.

    Returns:
        A successful HierarchyResult. A missing or unreadable root renders as its root line only.

    Example:
        >>> get_hierarchy("/nonexistent/project").hierarchy
        '📁 project\\n'
    """
    options = ScanOptions.from_raw(extension, folders_only, ignored_extensions, ignored_folders)
    tree = build_hierarchy_tree(folder_path, options)
    logger.info("Rendered hierarchy of %s with %d entries", folder_path, len(tree.descendants))
    return HierarchyResult(success=True, hierarchy=render_hierarchy(tree))
