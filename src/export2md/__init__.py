"""Directory to Markdown export utilities.

This package provides tools for turning a directory tree into a single Markdown
document: a tree diagram followed by a nested outline embedding each text file.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("export2md")
except PackageNotFoundError:
    __version__ = "unknown"
