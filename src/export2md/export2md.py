"""Directory to Markdown export.

This module assembles the final Markdown document from the tree diagram and the
content outline, and provides the ProjectExporter facade used by the CLI.
"""

from datetime import datetime
from pathlib import Path
from typing import Dict, Optional

from export2md.config import DEFAULT_CONFIG, TraversalConfig
from export2md.file_content_printer import FileContentPrinter
from export2md.file_system_tree.file_system_tree import FileSystemTree, root_display_name
from export2md.output_strategies.markdown_strategy import MarkdownOutputStrategy
from export2md.types import FileClassification, PathType

DEFAULT_OUTPUT_PATH = "project-structure.md"

# Same rendering as a fr-FR locale date and time, e.g. "19/10/2026 14:05:09"
TIMESTAMP_FORMAT = "%d/%m/%Y %H:%M:%S"


def format_timestamp(moment: datetime) -> str:
    return moment.strftime(TIMESTAMP_FORMAT)


def assemble_document(
    root_name: str,
    tree_text: str,
    content_text: str,
    generated_at: Optional[datetime] = None,
) -> str:
    """Combine the header, the tree diagram and the content outline into one document.

    This is plain concatenation; ``tree_text`` and ``content_text`` are expected to
    end with a newline when not empty.

    Args:
        root_name: Name of the exported root folder.
        tree_text: Tree diagram, without the root line.
        content_text: Content outline.
        generated_at: Generation time. Defaults to now.

    Returns:
        The complete Markdown document.

    Example:
        >>> doc = assemble_document("demo", "└─ 📄 a.txt\\n", "- 📄 **a.txt** (fichier binaire)\\n",
        ...                         datetime(2024, 1, 2, 3, 4, 5))
        >>> print(doc, end="")
        # Structure du projet demo
        <BLANKLINE>
        Généré le 02/01/2024 03:04:05
        <BLANKLINE>
        ## Vue arborescente
        <BLANKLINE>
        ```
        📁 demo/
        └─ 📄 a.txt
        ```
        <BLANKLINE>
        ## Structure détaillée avec contenu
        <BLANKLINE>
        📁 **Racine du projet: demo**
        <BLANKLINE>
        - 📄 **a.txt** (fichier binaire)
    """
    if generated_at is None:
        generated_at = datetime.now()

    return (
        f"# Structure du projet {root_name}\n\n"
        f"Généré le {format_timestamp(generated_at)}\n\n"
        f"## Vue arborescente\n\n"
        f"```\n"
        f"📁 {root_name}/\n"
        f"{tree_text}"
        f"```\n\n"
        f"## Structure détaillée avec contenu\n\n"
        f"📁 **Racine du projet: {root_name}**\n\n"
        f"{content_text}"
    )


class ProjectExporter:
    """Exports a directory as a single Markdown document.

    The directory is listed once; the tree diagram and the content outline are both
    rendered from that listing. The whole document is built in memory and written
    in one go.

    Attributes:
        directory (Path): Directory being exported.
        config (TraversalConfig): Configuration used for the export.

    Example:
        >>> exporter = ProjectExporter("my-project", build_config(max_depth=2))  # doctest: +SKIP
        >>> exporter.save("docs/structure.md")  # doctest: +SKIP
    """

    def __init__(self, directory: PathType, config: TraversalConfig = DEFAULT_CONFIG) -> None:
        """Initialize the exporter.

        Args:
            directory: Directory to export. Can be any path-like object.
            config: Traversal configuration. Defaults to DEFAULT_CONFIG.

        Raises:
            FileNotFoundError: If the directory doesn't exist.
            NotADirectoryError: If the path isn't a directory.
        """
        self.directory = Path(directory)
        if not self.directory.exists():
            raise FileNotFoundError(f"Directory does not exist: {self.directory}")
        if not self.directory.is_dir():
            raise NotADirectoryError(f"Not a directory: {self.directory}")

        self.config = config
        self._fs_tree = FileSystemTree(self.directory, config)
        self._content_printer = FileContentPrinter(self._fs_tree, MarkdownOutputStrategy())

    @property
    def root_name(self) -> str:
        """Name of the exported folder, resolved so that ``.`` shows the real name."""
        return root_display_name(self.directory)

    def render_tree(self) -> str:
        return self._fs_tree.get_tree_representation()

    def render_contents(self) -> str:
        return self._content_printer.render_contents()

    def render_document(self, generated_at: Optional[datetime] = None) -> str:
        """Render the complete Markdown document."""
        return assemble_document(self.root_name, self.render_tree(), self.render_contents(), generated_at)

    def save(self, output_path: PathType = DEFAULT_OUTPUT_PATH, generated_at: Optional[datetime] = None) -> Path:
        """Render the document and write it as UTF-8, replacing any existing file.

        Returns:
            The path written to.

        Raises:
            OSError: If the output file cannot be written.
        """
        document = self.render_document(generated_at)
        path = Path(output_path)
        with open(path, "w", encoding="utf-8", newline="") as output:
            output.write(document)
        return path

    def summary(self) -> Dict[str, int]:
        """Counts of what the last rendering of the content outline contained.

        Directories and files are counted as rendered, so entries beyond the depth
        limit are not included.
        """
        counts = self._content_printer.counts
        return {
            "directories": counts["directories"],
            "text files": counts[FileClassification.TEXT.value],
            "binary files": counts[FileClassification.BINARY_EXTENSION.value]
            + counts[FileClassification.BINARY_CONTENT.value],
            "oversized files": counts[FileClassification.OVERSIZED.value],
            "unreadable files": counts[FileClassification.UNREADABLE.value],
        }
