"""Composite exclusion rules for combining multiple rule types."""

from typing import List, Sequence

from export2md.config import TraversalConfig

from .base_rules import BaseExclusionRules
from .git_rules import GitIgnoreExclusionRules
from .name_rules import NameExclusionRules


class CompositeExclusionRules(BaseExclusionRules):
    """Composite exclusion rules that combine multiple rule types.

    A path is excluded if ANY of the constituent rules excludes it. Rules are
    evaluated in the order provided and evaluation stops at the first match.

    Attributes:
        rules (List[BaseExclusionRules]): List of constituent exclusion rules.

    Example:
        >>> names = NameExclusionRules(excluded_folders={"build"})
        >>> patterns = GitIgnoreExclusionRules(patterns=["*.log"])
        >>> composite = CompositeExclusionRules([names, patterns])
        >>> composite.exclude("build", is_dir=True)
        True
        >>> composite.exclude("server.log")
        True
        >>> composite.exclude("src/main.py")
        False
    """

    def __init__(self, rules: Sequence[BaseExclusionRules]):
        """Initialize composite exclusion rules.

        Args:
            rules: Sequence of exclusion rules to combine.

        Raises:
            ValueError: If rules is empty.
            TypeError: If any rule doesn't implement BaseExclusionRules.
        """
        if not rules:
            raise ValueError("At least one exclusion rule must be provided")

        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseExclusionRules):
                raise TypeError(f"Rule at index {i} must implement BaseExclusionRules, got {type(rule)}")

        self.rules: List[BaseExclusionRules] = list(rules)

    def exclude(self, path: str, is_dir: bool = False) -> bool:
        return any(rule.exclude(path, is_dir) for rule in self.rules)


def rules_from_config(config: TraversalConfig) -> CompositeExclusionRules:
    """Build the exclusion rules shared by both renderers from a configuration.

    Name and hidden-entry rules always come first; gitignore-style patterns are
    only consulted when the configuration carries some.

    Example:
        >>> from export2md.config import build_config
        >>> rules = rules_from_config(build_config(ignore_patterns=("*.tmp",)))
        >>> rules.exclude("node_modules", is_dir=True), rules.exclude("a.tmp"), rules.exclude("a.py")
        (True, True, False)
    """
    rules: List[BaseExclusionRules] = [
        NameExclusionRules(config.excluded_folders, config.excluded_files, config.include_hidden)
    ]
    if config.ignore_patterns:
        rules.append(GitIgnoreExclusionRules(patterns=config.ignore_patterns))
    return CompositeExclusionRules(rules)
