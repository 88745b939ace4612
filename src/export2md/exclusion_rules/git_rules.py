"""Implementation of exclusion rules using .gitignore pattern syntax."""

from typing import List, Sequence

from pathspec import GitIgnoreSpec

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Implementation of exclusion rules using .gitignore pattern syntax.

    Paths are matched with the pathspec library in the same way that Git does,
    so the rules support basic globs (``*``, ``?``, ``[abc]``), directory-only
    patterns ending in ``/``, negation with ``!``, ``**`` and comment lines.

    Patterns come from ``-i/--ignore`` on the command line. They are kept in the
    order they were given; later patterns override earlier ones, which is what
    makes negation work.

    Attributes:
        spec (GitIgnoreSpec): Compiled pattern matcher from the pathspec library.

    Example:
        >>> rules = GitIgnoreExclusionRules(["*.log", "tmp/"])
        >>> rules.exclude("logs/app.log")
        True
        >>> rules.exclude("src/tmp", is_dir=True)
        True
        >>> rules.exclude("src/tmp", is_dir=False)
        False
        >>> GitIgnoreExclusionRules(["*.log", "!keep.log"]).exclude("keep.log")
        False

    Note:
        The paths provided to exclude() should use forward slashes (/) as path separators,
        even on Windows systems, to match Git's behavior.
    """

    def __init__(self, patterns: Sequence[str] = ()):
        self._lines: List[str] = list(patterns)
        self.spec = GitIgnoreSpec.from_lines(self._lines)

    def exclude(self, path: str, is_dir: bool = False) -> bool:
        """Check if a path matches the patterns.

        Directories are matched with a trailing slash so that directory-only
        patterns such as ``build/`` apply to them.

        Args:
            path: Path relative to the exported root.
            is_dir: Whether the path refers to a directory.

        Returns:
            bool: True if the last matching pattern is a non-negated one.
        """
        if not self._lines:
            return False
        if is_dir and not path.endswith("/"):
            path += "/"
        return bool(self.spec.match_file(path))
