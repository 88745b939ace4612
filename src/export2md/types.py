from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class FileClassification(Enum):
    """Outcome of classifying a file that survived the name-based exclusion rules.

    Attributes:
        BINARY_EXTENSION: Extension is listed as binary; the file is never opened.
        BINARY_CONTENT: The raw bytes contain a zero byte.
        OVERSIZED: Text file larger than the configured size cap.
        TEXT: Text file whose content gets embedded.
        UNREADABLE: The file could not be inspected or read.
    """

    BINARY_EXTENSION = "binary-extension"
    BINARY_CONTENT = "binary-content"
    OVERSIZED = "oversized"
    TEXT = "text"
    UNREADABLE = "unreadable"

    @property
    def is_binary(self) -> bool:
        return self in (FileClassification.BINARY_EXTENSION, FileClassification.BINARY_CONTENT)
