"""Tests for the Markdown output strategy."""

import pytest

from export2md.output_strategies.base_strategy import OutputStrategy
from export2md.output_strategies.markdown_strategy import MarkdownOutputStrategy, count_lines


@pytest.fixture
def strategy():
    return MarkdownOutputStrategy()


def test_is_output_strategy(strategy):
    assert isinstance(strategy, OutputStrategy)


def test_cannot_instantiate_base():
    with pytest.raises(TypeError):
        OutputStrategy()  # type: ignore[abstract]


def test_format_directory(strategy):
    assert strategy.format_directory("src", 0) == "- 📁 **src/**\n"
    assert strategy.format_directory("utils", 2) == "    - 📁 **utils/**\n"


def test_format_text_file(strategy):
    expected = (
        "- 📄 **a.txt** (2 lignes)\n"
        "\n"
        "  <details>\n"
        "  <summary>Voir le contenu</summary>\n"
        "\n"
        "  ```plaintext\n"
        "hi\n"
        "\n"
        "```\n"
        "  </details>\n"
        "\n"
    )
    assert strategy.format_text_file("a.txt", "hi\n", "plaintext", 0) == expected


def test_format_text_file_nested_keeps_content_unindented(strategy):
    output = strategy.format_text_file("main.py", "def f():\n    pass", "python", 1)
    expected = (
        "  - 📄 **main.py** (2 lignes)\n"
        "\n"
        "    <details>\n"
        "    <summary>Voir le contenu</summary>\n"
        "\n"
        "    ```python\n"
        "def f():\n"
        "    pass\n"
        "```\n"
        "    </details>\n"
        "\n"
    )
    assert output == expected


def test_format_empty_text_file(strategy):
    output = strategy.format_text_file("empty.js", "", "javascript", 0)
    assert output.startswith("- 📄 **empty.js** (1 lignes)\n")
    assert "  ```javascript\n\n```\n" in output


def test_content_with_fences_is_embedded_verbatim(strategy):
    content = "```python\nx = 1\n```"
    output = strategy.format_text_file("README.md", content, "markdown", 0)
    assert f"  ```markdown\n{content}\n```\n" in output


def test_format_binary_file(strategy):
    assert strategy.format_binary_file("logo.png", 0) == "- 📄 **logo.png** (fichier binaire)\n"
    assert strategy.format_binary_file("data.bin", 1) == "  - 📄 **data.bin** (fichier binaire)\n"


def test_format_oversized_file(strategy):
    assert (
        strategy.format_oversized_file("big.log", 2 * 1024 * 1024, 0)
        == "- 📄 **big.log** (fichier trop volumineux: 2048.0 Ko)\n"
    )
    assert (
        strategy.format_oversized_file("dump.sql", 1536, 1) == "  - 📄 **dump.sql** (fichier trop volumineux: 1.5 Ko)\n"
    )


def test_format_unreadable_file(strategy):
    assert strategy.format_unreadable_file("secret.txt", 0) == "- 📄 **secret.txt** (impossible de lire le contenu)\n"


def test_format_directory_error(strategy):
    assert (
        strategy.format_directory_error("Permission denied", 2)
        == "Erreur lors de la lecture du dossier: Permission denied\n"
    )


def test_indent(strategy):
    assert strategy.indent(0) == ""
    assert strategy.indent(3) == "      "


@pytest.mark.parametrize(
    "content, expected",
    [
        ("", 1),
        ("one line", 1),
        ("hi\n", 2),
        ("a\nb\nc", 3),
        ("a\r\nb\r\n", 3),
    ],
)
def test_count_lines(content, expected):
    assert count_lines(content) == expected
