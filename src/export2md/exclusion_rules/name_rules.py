"""Exclusion by exact entry name and by the hidden-entry convention."""

from typing import FrozenSet, Iterable

from .base_rules import BaseExclusionRules


class NameExclusionRules(BaseExclusionRules):
    """Exclusion rules matching the basename of an entry.

    Three checks are applied, in order:

    1. Hidden entries (name starting with ``.``) are excluded unless
       ``include_hidden`` is set. This applies to files and directories alike.
    2. Directories whose name is in ``excluded_folders`` are excluded.
    3. Files whose name is in ``excluded_files`` are excluded.

    Names are compared exactly; ``build`` in ``excluded_folders`` matches a
    directory called ``build`` at any depth but never a file called ``build``.

    Attributes:
        excluded_folders (FrozenSet[str]): Directory names to exclude.
        excluded_files (FrozenSet[str]): File names to exclude.
        include_hidden (bool): Whether dot-entries are kept.

    Example:
        >>> rules = NameExclusionRules({"dist"}, {"thumbs.db"})
        >>> rules.exclude("pkg/dist", is_dir=True)
        True
        >>> rules.exclude("photos/thumbs.db")
        True
        >>> rules.exclude("src/.env")
        True
        >>> NameExclusionRules(include_hidden=True).exclude("src/.env")
        False
    """

    def __init__(
        self,
        excluded_folders: Iterable[str] = (),
        excluded_files: Iterable[str] = (),
        include_hidden: bool = False,
    ) -> None:
        self.excluded_folders: FrozenSet[str] = frozenset(excluded_folders)
        self.excluded_files: FrozenSet[str] = frozenset(excluded_files)
        self.include_hidden = include_hidden

    def exclude(self, path: str, is_dir: bool = False) -> bool:
        name = path.rstrip("/").rsplit("/", 1)[-1]

        if not self.include_hidden and name.startswith("."):
            return True
        if is_dir:
            return name in self.excluded_folders
        return name in self.excluded_files
