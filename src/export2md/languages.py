"""Extension to fenced code block language lookup."""

from pathlib import PurePath

DEFAULT_LANGUAGE = "plaintext"

LANGUAGE_MAP = {
    ".js": "javascript",
    ".jsx": "jsx",
    ".ts": "typescript",
    ".tsx": "tsx",
    ".html": "html",
    ".css": "css",
    ".scss": "scss",
    ".json": "json",
    ".xml": "xml",
    ".md": "markdown",
    ".py": "python",
    ".java": "java",
    ".php": "php",
    ".sql": "sql",
    ".sh": "bash",
    ".yaml": "yaml",
    ".yml": "yaml",
}


def language_for(filename: str) -> str:
    """Return the code fence language tag for a file name.

    Example:
        >>> language_for("main.PY")
        'python'
        >>> language_for("Makefile")
        'plaintext'
    """
    return LANGUAGE_MAP.get(PurePath(filename).suffix.lower(), DEFAULT_LANGUAGE)
