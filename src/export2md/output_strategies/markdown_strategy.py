"""Markdown output strategy for the content outline.

The produced text is a nested bullet list in French. Its exact shape is relied
upon by consumers of previously exported documents and must not change.
"""

from export2md.sizes import format_kilobytes

from .base_strategy import OutputStrategy

INDENT_UNIT = "  "
FENCE = "```"


class MarkdownOutputStrategy(OutputStrategy):
    """Output strategy that renders the content outline as Markdown.

    Directories become bold bullets and text files become bullets with their line
    count followed by a collapsible ``<details>`` block holding a fenced, language
    tagged code block. The file content and the closing fence are written
    unindented so that the content stays byte-for-byte identical to the file.

    Example:
        >>> strategy = MarkdownOutputStrategy()
        >>> strategy.format_directory("src", 0)
        '- 📁 **src/**\\n'
        >>> strategy.format_binary_file("logo.png", 1)
        '  - 📄 **logo.png** (fichier binaire)\\n'
        >>> print(strategy.format_text_file("a.py", "x = 1", "python", 0), end="")
        - 📄 **a.py** (1 lignes)
        <BLANKLINE>
          <details>
          <summary>Voir le contenu</summary>
        <BLANKLINE>
          ```python
        x = 1
        ```
          </details>
        <BLANKLINE>
    """

    def format_directory(self, name: str, depth: int) -> str:
        return f"{self.indent(depth)}- 📁 **{name}/**\n"

    def format_text_file(self, name: str, content: str, language: str, depth: int) -> str:
        indent = self.indent(depth)
        return (
            f"{indent}- 📄 **{name}** ({count_lines(content)} lignes)\n\n"
            f"{indent}  <details>\n"
            f"{indent}  <summary>Voir le contenu</summary>\n\n"
            f"{indent}  {FENCE}{language}\n{content}\n{FENCE}\n"
            f"{indent}  </details>\n\n"
        )

    def format_binary_file(self, name: str, depth: int) -> str:
        return f"{self.indent(depth)}- 📄 **{name}** (fichier binaire)\n"

    def format_oversized_file(self, name: str, size: int, depth: int) -> str:
        return f"{self.indent(depth)}- 📄 **{name}** (fichier trop volumineux: {format_kilobytes(size)} Ko)\n"

    def format_unreadable_file(self, name: str, depth: int) -> str:
        return f"{self.indent(depth)}- 📄 **{name}** (impossible de lire le contenu)\n"

    def format_directory_error(self, message: str, depth: int) -> str:
        # Written at column 0 whatever the depth, as in previously exported documents
        return f"Erreur lors de la lecture du dossier: {message}\n"

    @staticmethod
    def indent(depth: int) -> str:
        return INDENT_UNIT * depth


def count_lines(content: str) -> int:
    """Count lines as the number of newline-separated segments.

    A trailing newline therefore adds a final empty line, and an empty file has one line.

    Example:
        >>> count_lines("hi\\n")
        2
        >>> count_lines("")
        1
    """
    return content.count("\n") + 1
