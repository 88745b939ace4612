"""File system tree representation with configurable exclusion rules.

This module provides the main FileSystemTree class for building a tree of the
entries under a directory, filtered by the name-based exclusion rules, and for
rendering it as a connector-based tree diagram.
"""

import os
from pathlib import Path
from typing import Iterator, Optional

from export2md.config import DEFAULT_CONFIG, TraversalConfig
from export2md.exclusion_rules.base_rules import BaseExclusionRules
from export2md.exclusion_rules.composite_rules import rules_from_config
from export2md.file_system_tree.file_system_node import FileSystemNode
from export2md.types import PathType

PIPE = "│"
TEE = "├"
LAST = "└"
BLANK = " "
DASH = "─"

DIRECTORY_ICON = "📁"
FILE_ICON = "📄"


def is_dir(path: Path) -> bool:
    """Return whether a path is a directory, treating inaccessible paths as files."""
    try:
        return path.is_dir()
    except OSError:
        return False


def root_display_name(root_path: Path) -> str:
    """Name shown for the exported root: the real folder name, even for ``.`` or ``..``."""
    resolved = root_path.resolve()
    return resolved.name or str(resolved)


class FileSystemTree:
    """A tree representation of a directory structure filtered by exclusion rules.

    The tree is built lazily on first access. Entries of each directory are listed
    once, sorted by name, and the same node order is used by the tree diagram and
    by the content outline, so both describe the same shape.

    Only the exclusion rules are applied while building (hidden entries, excluded
    folder and file names, ignore patterns). Binary and size classification belong
    to the content outline, and so does the depth limit: the tree diagram always
    shows the full depth.

    A directory that cannot be listed keeps its node; the error message is stored
    on the node and rendered in place of its children. Symbolic links to directories
    are only descended into when ``follow_symlinks`` is set; no loop detection is
    performed.

    Attributes:
        root_path (Path): The root directory.
        config (TraversalConfig): Configuration the tree was built with.
        exclusion_rules (BaseExclusionRules): Rules deciding which entries are skipped.

    Example:
        >>> tree = FileSystemTree("src")  # doctest: +SKIP
        >>> print(tree.get_tree_representation(), end="")  # doctest: +SKIP
        └─ 📁 export2md/
           ├─ 📄 __init__.py
           └─ 📄 config.py
    """

    def __init__(
        self,
        root_path: PathType,
        config: TraversalConfig = DEFAULT_CONFIG,
        exclusion_rules: Optional[BaseExclusionRules] = None,
    ) -> None:
        """Initialize a FileSystemTree.

        Args:
            root_path: Path to the root directory to represent. Can be any path-like object.
            config: Traversal configuration. Defaults to DEFAULT_CONFIG.
            exclusion_rules: Rules for excluding entries. Defaults to the rules
                derived from ``config``.
        """
        self.root_path = Path(root_path)
        self.config = config
        self.exclusion_rules = exclusion_rules if exclusion_rules is not None else rules_from_config(config)
        self._tree: Optional[FileSystemNode] = None

    def get_tree(self) -> FileSystemNode:
        """Get the root node of the filesystem tree, building it if needed.

        Raises:
            FileNotFoundError: If the root path doesn't exist.
            NotADirectoryError: If the root path isn't a directory.
        """
        if self._tree is None:
            self._tree = self._build_tree()
        return self._tree

    def _build_tree(self) -> FileSystemNode:
        if not self.root_path.exists():
            raise FileNotFoundError(f"Root path does not exist: {self.root_path}")
        if not self.root_path.is_dir():
            raise NotADirectoryError(f"Root path is not a directory: {self.root_path}")

        root = FileSystemNode(root_display_name(self.root_path), fs_path=self.root_path, is_dir=True)
        self._add_children(root)
        return root

    def _add_children(self, node: FileSystemNode) -> None:
        """Recursively attach the non-excluded entries of a directory node."""
        assert node.fs_path is not None
        try:
            names = sorted(os.listdir(node.fs_path))
        except OSError as e:
            node.error = str(e)
            return

        for name in names:
            child_path = node.fs_path / name
            relative_path = f"{node.relative_path}/{name}" if node.parent is not None else name
            child_is_dir = is_dir(child_path)

            if self.exclusion_rules.exclude(relative_path, child_is_dir):
                continue

            child_is_symlink = child_path.is_symlink()
            size = None
            if not child_is_dir:
                try:
                    size = child_path.stat().st_size
                except OSError:
                    # Dangling symlink or vanished file; classified as unreadable later
                    size = None

            child = FileSystemNode(
                name,
                parent=node,
                fs_path=child_path,
                is_dir=child_is_dir,
                is_symlink=child_is_symlink,
                file_size=size,
            )
            if child_is_dir and (self.config.follow_symlinks or not child_is_symlink):
                self._add_children(child)

    def stream_tree_representation(self) -> Iterator[str]:
        """Generate the tree diagram one line at a time.

        Every line ends with a newline. The root itself is not part of the output.
        A directory that could not be listed yields ``Erreur: <message>`` in place
        of its children.

        Yields:
            Lines of the tree diagram.

        Raises:
            FileNotFoundError: If the root path doesn't exist.
            NotADirectoryError: If the root path isn't a directory.
        """
        yield from self._stream_children(self.get_tree(), "")

    def _stream_children(self, node: FileSystemNode, prefix: str) -> Iterator[str]:
        if node.error is not None:
            yield f"Erreur: {node.error}\n"
            return

        children = node.children
        for i, child in enumerate(children):
            is_last = i == len(children) - 1
            connector = LAST if is_last else TEE
            item_prefix = f"{prefix}{connector}{DASH} "

            if child.is_dir:
                yield f"{item_prefix}{DIRECTORY_ICON} {child.name}/\n"
                child_prefix = f"{prefix}{BLANK if is_last else PIPE}  "
                yield from self._stream_children(child, child_prefix)
            else:
                yield f"{item_prefix}{FILE_ICON} {child.name}\n"

    def get_tree_representation(self) -> str:
        """Get the complete tree diagram as a string."""
        return "".join(self.stream_tree_representation())
