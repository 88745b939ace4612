"""File size parsing and formatting."""

import math
from typing import Union

from humanfriendly import InvalidSize, parse_size

KILOBYTE = 1024


def parse_file_size(size_str: Union[str, int]) -> int:
    """Parse a maximum file size to bytes.

    A bare number is a count of kilobytes (1024 bytes), which is what ``-s/--max-size``
    takes. Anything with a unit is handed to humanfriendly, so ``2MB`` means two
    million bytes and ``512KiB`` means 524288 bytes.

    Args:
        size_str: Size like '500', '2.5', '1MB' or '512 KiB'.

    Returns:
        Size in bytes.

    Raises:
        ValueError: If size_str is not a valid size or is negative.

    Example:
        >>> parse_file_size("500")
        512000
        >>> parse_file_size("1MiB")
        1048576
    """
    text = str(size_str).strip()
    if not text:
        raise ValueError("Invalid size format '': empty value")

    try:
        kilobytes = float(text)
    except ValueError:
        try:
            size = int(parse_size(text))
        except InvalidSize as e:
            raise ValueError(f"Invalid size format '{text}': {e}")
    else:
        if not math.isfinite(kilobytes):
            raise ValueError(f"Invalid size format '{text}': not a finite number")
        size = int(kilobytes * KILOBYTE)

    if size < 0:
        raise ValueError("Size cannot be negative")
    return size


def format_kilobytes(size: int) -> str:
    """Format a byte count as kilobytes with one decimal.

    Example:
        >>> format_kilobytes(1536)
        '1.5'
    """
    return f"{size / KILOBYTE:.1f}"
