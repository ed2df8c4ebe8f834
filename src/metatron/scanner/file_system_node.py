"""Node representation for entries of a rendered hierarchy."""

from typing import Any, Optional

from anytree import Node


class FileSystemNode(Node):  # type: ignore
    """Node class representing a file or folder that survived filtering.

    Extends anytree.Node with a directory flag and the traversed path. A
    hierarchy is assembled from these nodes before being rendered, so only
    entries that will actually appear in the output are ever attached.

    Attributes:
        name (str): Base name of the file or folder.
        parent (Optional[FileSystemNode]): The parent node in the tree.
        is_dir (bool): True for folders, False for files.
        full_path (Optional[str]): Full path as traversed (anytree reserves ``path``).
        children (tuple[FileSystemNode]): Child nodes in render order (inherited from anytree.Node).

    Example:
        >>> root = FileSystemNode("project", is_dir=True)
        >>> readme = FileSystemNode("README.md", parent=root)
        >>> [child.name for child in root.children]
        ['README.md']
        >>> readme.is_dir
        False
    """

    def __init__(
        self,
        name: str,
        parent: Optional["FileSystemNode"] = None,
        is_dir: bool = False,
        full_path: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        self.is_dir = is_dir
        self.full_path = full_path
