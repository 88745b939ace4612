"""Unit tests for file size parsing and formatting."""

import pytest

from export2md.sizes import format_kilobytes, parse_file_size


class TestParseFileSize:
    """Test the parse_file_size utility function."""

    def test_bare_numbers_are_kilobytes(self):
        assert parse_file_size("1") == 1024
        assert parse_file_size("500") == 512000
        assert parse_file_size("0") == 0
        assert parse_file_size(" 2 ") == 2048

    def test_fractional_kilobytes(self):
        assert parse_file_size("0.5") == 512
        assert parse_file_size("1.5") == 1536

    def test_integer_input(self):
        assert parse_file_size(4) == 4096

    def test_human_readable_decimal(self):
        assert parse_file_size("1KB") == 1000
        assert parse_file_size("2MB") == 2000000
        assert parse_file_size("2.5 MB") == 2500000

    def test_human_readable_binary(self):
        assert parse_file_size("1KiB") == 1024
        assert parse_file_size("1MiB") == 1048576

    @pytest.mark.parametrize("value", ["invalid", "", "1XB", "inf"])
    def test_invalid_format(self, value):
        with pytest.raises(ValueError, match="Invalid size format"):
            parse_file_size(value)

    def test_negative(self):
        with pytest.raises(ValueError, match="cannot be negative"):
            parse_file_size("-1")


@pytest.mark.parametrize("size, expected", [(0, "0.0"), (1024, "1.0"), (1536, "1.5"), (2_000_000, "1953.1")])
def test_format_kilobytes(size, expected):
    assert format_kilobytes(size) == expected
