"""Content outline rendering.

This module walks the filtered filesystem tree and renders every entry as part of
the nested content outline, embedding text files and annotating the others.
"""

from collections import Counter
from typing import Iterator, Optional

from .config import TraversalConfig
from .file_system_tree.file_classifier import classify_file, read_text_content
from .file_system_tree.file_system_node import FileSystemNode
from .file_system_tree.file_system_tree import FileSystemTree
from .languages import language_for
from .output_strategies.base_strategy import OutputStrategy
from .output_strategies.markdown_strategy import MarkdownOutputStrategy
from .types import FileClassification


class FileContentPrinter:
    """Renders the content outline of a filesystem tree.

    Entries are visited depth first in the order held by the tree, which is the
    order used by the tree diagram. Directory children are expanded until the
    configured ``max_depth`` is exceeded: at depth ``d > max_depth`` nothing is
    rendered, so ``max_depth=0`` lists the root's children without expanding
    any subdirectory.

    Each file is classified (binary extension, zero-byte sniff, size cap) and
    rendered either with its content or with a one-line annotation. Read errors
    never abort the rendering; they become annotations.

    The printer also counts what it rendered, see :attr:`counts`.

    Attributes:
        fs_tree (FileSystemTree): The filesystem tree to render.
        output_strategy (OutputStrategy): Strategy formatting each entry.
        counts (Counter): Number of rendered directories and files per outcome.
            Keys are ``"directories"`` and the FileClassification values.

    Example:
        >>> tree = FileSystemTree("src")  # doctest: +SKIP
        >>> printer = FileContentPrinter(tree)  # doctest: +SKIP
        >>> print(printer.render_contents())  # doctest: +SKIP
    """

    def __init__(self, fs_tree: FileSystemTree, output_strategy: Optional[OutputStrategy] = None) -> None:
        self.fs_tree = fs_tree
        self.output_strategy = output_strategy if output_strategy is not None else MarkdownOutputStrategy()
        self.counts: Counter = Counter()

    @property
    def config(self) -> TraversalConfig:
        return self.fs_tree.config

    def stream_contents(self) -> Iterator[str]:
        """Generate the content outline one entry at a time.

        Raises:
            FileNotFoundError: If the root path doesn't exist.
            NotADirectoryError: If the root path isn't a directory.
        """
        self.counts = Counter()
        yield from self._stream_directory(self.fs_tree.get_tree(), 0)

    def render_contents(self) -> str:
        """Get the complete content outline as a string."""
        return "".join(self.stream_contents())

    def _stream_directory(self, node: FileSystemNode, depth: int) -> Iterator[str]:
        if self.config.depth_exceeded(depth):
            return

        if node.error is not None:
            yield self.output_strategy.format_directory_error(node.error, depth)
            return

        for child in node.children:
            if child.is_dir:
                self.counts["directories"] += 1
                yield self.output_strategy.format_directory(child.name, depth)
                yield from self._stream_directory(child, depth + 1)
            else:
                yield self._format_file(child, depth)

    def _format_file(self, node: FileSystemNode, depth: int) -> str:
        classification = classify_file(node.fs_path, node.file_size, self.config)

        if classification is FileClassification.TEXT:
            try:
                content = read_text_content(node.fs_path)
            except OSError:
                classification = FileClassification.UNREADABLE
            else:
                self.counts[classification.value] += 1
                return self.output_strategy.format_text_file(node.name, content, language_for(node.name), depth)

        self.counts[classification.value] += 1
        if classification.is_binary:
            return self.output_strategy.format_binary_file(node.name, depth)
        if classification is FileClassification.OVERSIZED:
            return self.output_strategy.format_oversized_file(node.name, node.file_size, depth)
        return self.output_strategy.format_unreadable_file(node.name, depth)
