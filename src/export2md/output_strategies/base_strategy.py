"""Output strategy base class defining the interface for content outline formatting.

This module provides the abstract base class that defines how each entry of the
content outline is formatted. The content printer decides what to render (and in
which order); the strategy decides how it looks.
"""

from abc import ABC, abstractmethod


class OutputStrategy(ABC):
    """Abstract base class defining the interface for content outline formatting strategies.

    Every method receives the nesting ``depth`` of the entry (0 for children of the
    exported root) and returns the complete text for that entry, newlines included.
    Directory children are rendered by the caller right after ``format_directory``.

    Example:
        >>> class PlainStrategy(OutputStrategy):
        ...     def format_directory(self, name: str, depth: int) -> str:
        ...         return "  " * depth + name + "/\\n"
        ...
        ...     def format_text_file(self, name: str, content: str, language: str, depth: int) -> str:
        ...         return "  " * depth + name + "\\n"
        ...
        ...     def format_binary_file(self, name: str, depth: int) -> str:
        ...         return "  " * depth + name + " [binary]\\n"
        ...
        ...     def format_oversized_file(self, name: str, size: int, depth: int) -> str:
        ...         return "  " * depth + f"{name} [{size} bytes]\\n"
        ...
        ...     def format_unreadable_file(self, name: str, depth: int) -> str:
        ...         return "  " * depth + name + " [unreadable]\\n"
        ...
        ...     def format_directory_error(self, message: str, depth: int) -> str:
        ...         return "  " * depth + message + "\\n"
        >>> PlainStrategy().format_directory("src", 1)
        '  src/\\n'
    """

    @abstractmethod
    def format_directory(self, name: str, depth: int) -> str:
        """Format the line introducing a directory."""
        pass

    @abstractmethod
    def format_text_file(self, name: str, content: str, language: str, depth: int) -> str:
        """Format a text file together with its embedded content.

        Args:
            name: File name.
            content: Complete file content, embedded verbatim.
            language: Language tag inferred from the file extension.
            depth: Nesting depth of the file.

        Returns:
            The formatted entry.
        """
        pass

    @abstractmethod
    def format_binary_file(self, name: str, depth: int) -> str:
        """Format a file classified as binary. Its content is never embedded."""
        pass

    @abstractmethod
    def format_oversized_file(self, name: str, size: int, depth: int) -> str:
        """Format a text file larger than the size cap.

        Args:
            name: File name.
            size: File size in bytes.
            depth: Nesting depth of the file.
        """
        pass

    @abstractmethod
    def format_unreadable_file(self, name: str, depth: int) -> str:
        """Format a file that could not be read."""
        pass

    @abstractmethod
    def format_directory_error(self, message: str, depth: int) -> str:
        """Format the annotation replacing the children of a directory that could not be listed."""
        pass
