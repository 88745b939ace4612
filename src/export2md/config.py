"""Traversal configuration.

A single immutable :data:`DEFAULT_CONFIG` is merged with caller overrides into a
fresh :class:`TraversalConfig` for every export; nothing mutates a configuration
once it has been built.
"""

from dataclasses import dataclass, field, replace
from typing import Any, FrozenSet, Iterable, Tuple

DEFAULT_EXCLUDED_FOLDERS = frozenset({"node_modules", ".git", "dist", "build", "coverage"})

DEFAULT_EXCLUDED_FILES = frozenset({".DS_Store", "thumbs.db", ".env", ".gitignore", "package-lock.json"})

DEFAULT_BINARY_EXTENSIONS = frozenset(
    {
        # Documents and images
        ".pdf",
        ".jpg",
        ".jpeg",
        ".png",
        ".gif",
        ".bmp",
        ".tiff",
        ".psd",
        ".ico",
        ".webp",
        # Executables
        ".exe",
        ".dll",
        ".so",
        ".class",
        ".bin",
        # Videos
        ".mp4",
        ".mkv",
        ".avi",
        ".mov",
        ".wmv",
        # Audio
        ".mp3",
        ".aac",
        ".wav",
        ".flac",
        ".ogg",
        # Archives
        ".zip",
        ".rar",
        ".7z",
        ".tar",
        ".gz",
        ".bz2",
        ".xz",
        ".iso",
        # Database
        ".sqlite",
        ".sqlite3",
        ".db",
    }
)

DEFAULT_MAX_FILE_SIZE = 1024 * 1024  # 1 MiB


def _normalize_extension(extension: str) -> str:
    extension = extension.strip().lower()
    if extension and not extension.startswith("."):
        extension = "." + extension
    return extension


@dataclass(frozen=True)
class TraversalConfig:
    """Options shared by the tree renderer and the content renderer.

    Attributes:
        excluded_folders: Directory names (exact basename match) skipped with their subtree.
        excluded_files: File names (exact basename match) skipped.
        binary_extensions: Lower-case extensions, leading dot included, treated as binary
            without opening the file.
        max_depth: Deepest level expanded by the content outline; -1 means unlimited.
            The tree diagram always shows the full depth.
        max_file_size: Files larger than this many bytes are annotated instead of embedded.
        include_hidden: When False, every entry whose name starts with ``.`` is skipped.
        ignore_patterns: Additional gitignore-style patterns matched against relative paths.
        follow_symlinks: Whether symbolic links to directories are descended into.

    Example:
        >>> config = TraversalConfig(max_depth=2)
        >>> config.max_depth
        2
        >>> "node_modules" in config.excluded_folders
        True
    """

    excluded_folders: FrozenSet[str] = DEFAULT_EXCLUDED_FOLDERS
    excluded_files: FrozenSet[str] = DEFAULT_EXCLUDED_FILES
    binary_extensions: FrozenSet[str] = DEFAULT_BINARY_EXTENSIONS
    max_depth: int = -1
    max_file_size: int = DEFAULT_MAX_FILE_SIZE
    include_hidden: bool = False
    ignore_patterns: Tuple[str, ...] = field(default_factory=tuple)
    follow_symlinks: bool = False

    def __post_init__(self) -> None:
        # Accept any iterable from callers but always store immutable sets
        object.__setattr__(self, "excluded_folders", frozenset(self.excluded_folders))
        object.__setattr__(self, "excluded_files", frozenset(self.excluded_files))
        object.__setattr__(
            self, "binary_extensions", frozenset(_normalize_extension(ext) for ext in self.binary_extensions)
        )
        object.__setattr__(self, "ignore_patterns", tuple(self.ignore_patterns))

        if self.max_depth < -1:
            raise ValueError(f"max_depth must be -1 (unlimited) or a non-negative integer, got {self.max_depth}")
        if self.max_file_size < 0:
            raise ValueError("max_file_size cannot be negative")

    def depth_exceeded(self, depth: int) -> bool:
        """Return True if the content outline must not expand entries at ``depth``."""
        return self.max_depth != -1 and depth > self.max_depth


DEFAULT_CONFIG = TraversalConfig()


def build_config(
    base: TraversalConfig = DEFAULT_CONFIG,
    *,
    extra_excluded_folders: Iterable[str] = (),
    **overrides: Any,
) -> TraversalConfig:
    """Merge caller overrides onto a base configuration.

    The base is never modified; a new configuration is returned.

    Args:
        base: Configuration to start from. Defaults to DEFAULT_CONFIG.
        extra_excluded_folders: Folder names appended to the folder exclusions of
            ``base`` (or of the ``excluded_folders`` override, when given).
        **overrides: Field values replacing those of ``base``.

    Returns:
        A fresh TraversalConfig.

    Raises:
        TypeError: If an override does not name a TraversalConfig field.
        ValueError: If an override value is out of range.

    Example:
        >>> config = build_config(extra_excluded_folders=["tmp"], max_depth=1)
        >>> sorted(config.excluded_folders - DEFAULT_CONFIG.excluded_folders)
        ['tmp']
        >>> DEFAULT_CONFIG.max_depth
        -1
    """
    extra = {name.strip() for name in extra_excluded_folders if name.strip()}
    if extra:
        folders = frozenset(overrides.get("excluded_folders", base.excluded_folders))
        overrides["excluded_folders"] = folders | extra
    return replace(base, **overrides)
