"""Interface shared by every exclusion rule set."""

from abc import ABC, abstractmethod


class BaseExclusionRules(ABC):
    """Decides which entries are left out of the export.

    A rule set only sees the path of an entry relative to the exported root and
    whether it is a directory. An excluded entry is missing from both the tree
    diagram and the content outline; an excluded directory is never listed, so
    its whole subtree disappears with it.

    Example:
        >>> from export2md.exclusion_rules.name_rules import NameExclusionRules
        >>> rules = NameExclusionRules(excluded_folders={"node_modules"})
        >>> rules.exclude("web/node_modules", is_dir=True)
        True
        >>> rules.exclude("web/node_modules", is_dir=False)
        False
        >>> rules.exclude(".git", is_dir=True)
        True
    """

    @abstractmethod
    def exclude(self, path: str, is_dir: bool = False) -> bool:
        """
        Determine if a given path should be excluded.

        Args:
            path (str): Path relative to the exported root, using forward slashes.
            is_dir (bool): Whether the path refers to a directory.

        Returns:
            bool: True if the entry is left out of the export.
        """
        pass
