"""Node representation for file system elements in the tree."""

from pathlib import Path
from typing import Any, Optional

from anytree import Node


class FileSystemNode(Node):  # type: ignore
    """Node class representing a file or directory in the filesystem tree.

    Extends anytree.Node with the data both renderers need about an entry. Inherits
    tree traversal and manipulation capabilities from anytree.Node; children keep
    the order in which they were listed.

    Attributes:
        name (str): The name of the file or directory (just the basename).
        parent (Optional[FileSystemNode]): The parent node in the tree.
        fs_path (Optional[Path]): Absolute path of the entry.
        relative_path (str): Path relative to the tree root, forward slashes, "" for the root.
        is_dir (bool): True if this node represents a directory, False for files.
        is_symlink (bool): True if this node represents a symbolic link.
        file_size (Optional[int]): Size in bytes for files, None if unknown or a directory.
        error (Optional[str]): Message of the error raised while listing this directory.
        children (tuple[FileSystemNode]): The child nodes (inherited from anytree.Node).

    Example:
        >>> root = FileSystemNode("root", is_dir=True)
        >>> child = FileSystemNode("file.txt", parent=root, file_size=12)
        >>> child.relative_path
        'file.txt'
        >>> child.depth
        1
    """

    def __init__(
        self,
        name: str,
        parent: Optional["FileSystemNode"] = None,
        fs_path: Optional[Path] = None,
        is_dir: bool = False,
        is_symlink: bool = False,
        file_size: Optional[int] = None,
        error: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        self.fs_path = fs_path
        self.is_dir = is_dir
        self.is_symlink = is_symlink
        self.file_size = file_size
        self.error = error

    @property
    def relative_path(self) -> str:
        # anytree's path runs from the root node down to this node
        return "/".join(node.name for node in self.path[1:])
