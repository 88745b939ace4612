"""Classification of files that survived the exclusion rules."""

from pathlib import Path
from typing import Optional

from export2md.config import TraversalConfig
from export2md.file_system_tree.binary_detector import contains_null_byte, has_binary_extension
from export2md.types import FileClassification, PathType


def classify_file(file_path: PathType, size: Optional[int], config: TraversalConfig) -> FileClassification:
    """Decide how the content outline renders a file.

    The checks run in a fixed order: binary extension (the file is not opened),
    zero-byte sniff over the whole file, then the size cap. Anything left is text.

    Args:
        file_path: Path to the file.
        size: Size in bytes, or None when it could not be determined.
        config: Configuration providing the binary extensions and the size cap.

    Returns:
        The classification. Read failures during the sniff yield UNREADABLE
        instead of raising.
    """
    path = Path(file_path)

    if has_binary_extension(path.name, config.binary_extensions):
        return FileClassification.BINARY_EXTENSION

    if size is None:
        return FileClassification.UNREADABLE

    try:
        if contains_null_byte(path):
            return FileClassification.BINARY_CONTENT
    except OSError:
        return FileClassification.UNREADABLE

    if size > config.max_file_size:
        return FileClassification.OVERSIZED

    return FileClassification.TEXT


def read_text_content(file_path: PathType) -> str:
    """Read a file as UTF-8, replacing undecodable bytes.

    Line endings are returned untranslated so the embedded content is verbatim.

    Raises:
        OSError: If the file cannot be read.
    """
    with open(Path(file_path), "r", encoding="utf-8", errors="replace", newline="") as file:
        return file.read()
