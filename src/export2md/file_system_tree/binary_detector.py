"""Binary file detection utilities."""

from pathlib import Path, PurePath
from typing import AbstractSet

from export2md.io.chunked_file_reader import DEFAULT_CHUNK_SIZE, ChunkedFileReader
from export2md.types import PathType


def has_binary_extension(file_name: str, binary_extensions: AbstractSet[str]) -> bool:
    """Check a file name against a set of lower-case binary extensions.

    The file is not opened.

    Example:
        >>> has_binary_extension("photo.PNG", {".png"})
        True
        >>> has_binary_extension("notes.txt", {".png"})
        False
    """
    return PurePath(file_name).suffix.lower() in binary_extensions


def contains_null_byte(file_path: PathType, chunk_size: int = DEFAULT_CHUNK_SIZE) -> bool:
    """Scan a whole file for a zero byte.

    The file is read in chunks and the scan stops at the first zero byte found.
    This is a heuristic: text in encodings such as UTF-16 contains zero bytes and
    is reported as binary.

    Args:
        file_path: Path to the file to scan. Can be any path-like object.
        chunk_size: Number of bytes read at a time.

    Returns:
        True if a zero byte occurs anywhere in the file. Empty files are text.

    Raises:
        OSError: If the file cannot be opened or read.

    Example:
        >>> contains_null_byte("README.md")  # doctest: +SKIP
        False
    """
    with open(Path(file_path), "rb") as file:
        for chunk in ChunkedFileReader(file, chunk_size):
            if b"\0" in chunk:
                return True
    return False
