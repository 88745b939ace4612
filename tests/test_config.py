"""Unit tests for the traversal configuration."""

import dataclasses

import pytest

from export2md.config import (
    DEFAULT_BINARY_EXTENSIONS,
    DEFAULT_CONFIG,
    DEFAULT_EXCLUDED_FILES,
    DEFAULT_EXCLUDED_FOLDERS,
    DEFAULT_MAX_FILE_SIZE,
    TraversalConfig,
    build_config,
)


class TestTraversalConfig:
    """Test the TraversalConfig dataclass."""

    def test_defaults(self):
        config = TraversalConfig()
        assert config.excluded_folders == {"node_modules", ".git", "dist", "build", "coverage"}
        assert config.excluded_files == {".DS_Store", "thumbs.db", ".env", ".gitignore", "package-lock.json"}
        assert {".jpg", ".jpeg", ".png", ".gif", ".pdf", ".zip", ".tar", ".gz"} <= config.binary_extensions
        assert config.max_depth == -1
        assert config.max_file_size == DEFAULT_MAX_FILE_SIZE
        assert config.include_hidden is False
        assert config.ignore_patterns == ()
        assert config.follow_symlinks is False

    def test_is_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_CONFIG.max_depth = 3  # type: ignore[misc]

    def test_sets_are_frozen(self):
        config = TraversalConfig(excluded_folders=["tmp"], excluded_files={"x"}, ignore_patterns=["*.log"])
        assert isinstance(config.excluded_folders, frozenset)
        assert isinstance(config.excluded_files, frozenset)
        assert config.ignore_patterns == ("*.log",)

    def test_binary_extensions_are_normalized(self):
        config = TraversalConfig(binary_extensions={"PNG", ".Jpg", " .gz "})
        assert config.binary_extensions == {".png", ".jpg", ".gz"}

    def test_invalid_depth(self):
        with pytest.raises(ValueError, match="max_depth"):
            TraversalConfig(max_depth=-2)

    def test_negative_size(self):
        with pytest.raises(ValueError, match="cannot be negative"):
            TraversalConfig(max_file_size=-1)

    @pytest.mark.parametrize(
        "max_depth, depth, expected",
        [(-1, 0, False), (-1, 100, False), (0, 0, False), (0, 1, True), (2, 2, False), (2, 3, True)],
    )
    def test_depth_exceeded(self, max_depth, depth, expected):
        assert TraversalConfig(max_depth=max_depth).depth_exceeded(depth) is expected


class TestBuildConfig:
    """Test merging overrides onto the defaults."""

    def test_without_overrides_equals_defaults(self):
        assert build_config() == DEFAULT_CONFIG

    def test_returns_fresh_instance(self):
        config = build_config(max_depth=2)
        assert config is not DEFAULT_CONFIG
        assert config.max_depth == 2
        assert DEFAULT_CONFIG.max_depth == -1

    def test_extra_excluded_folders_are_appended(self):
        config = build_config(extra_excluded_folders=["temp", "cache"])
        assert config.excluded_folders == DEFAULT_EXCLUDED_FOLDERS | {"temp", "cache"}
        assert DEFAULT_CONFIG.excluded_folders == DEFAULT_EXCLUDED_FOLDERS

    def test_extra_excluded_folders_ignore_blanks(self):
        config = build_config(extra_excluded_folders=["", " ", "tmp "])
        assert config.excluded_folders == DEFAULT_EXCLUDED_FOLDERS | {"tmp"}

    def test_extra_folders_combine_with_override(self):
        config = build_config(excluded_folders={"vendor"}, extra_excluded_folders=["tmp"])
        assert config.excluded_folders == {"vendor", "tmp"}

    def test_base_is_respected(self):
        base = build_config(include_hidden=True)
        config = build_config(base, max_depth=0)
        assert config.include_hidden is True
        assert config.max_depth == 0
        assert config.excluded_files == DEFAULT_EXCLUDED_FILES
        assert config.binary_extensions == DEFAULT_BINARY_EXTENSIONS

    def test_unknown_override(self):
        with pytest.raises(TypeError):
            build_config(max_size=10)

    def test_invalid_override_value(self):
        with pytest.raises(ValueError):
            build_config(max_depth=-5)
