"""Test configuration and fixtures for export2md."""

from pathlib import Path

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def sample_project(tmp_path: Path) -> Path:
    """Create a small project directory.

    project/
      .git/config
      docs/README.md
      node_modules/lib/index.js
      src/main.py
      src/utils/helpers.py
      data.bin           (contains a zero byte)
      logo.png
      a.txt              ("hi\\n")
    """
    root = tmp_path / "project"
    (root / ".git").mkdir(parents=True)
    (root / ".git" / "config").write_text("[core]\n")
    (root / "docs").mkdir()
    (root / "docs" / "README.md").write_text("# Test Project\nDescription.\n")
    (root / "node_modules" / "lib").mkdir(parents=True)
    (root / "node_modules" / "lib" / "index.js").write_text("module.exports = {};\n")
    (root / "src" / "utils").mkdir(parents=True)
    (root / "src" / "main.py").write_text("def main():\n    print('Hello')\n")
    (root / "src" / "utils" / "helpers.py").write_text("def helper():\n    pass\n")
    (root / "data.bin").write_bytes(b"abc\x00def")
    (root / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n")
    (root / "a.txt").write_text("hi\n")
    return root
