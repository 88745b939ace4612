"""Fixed-size chunk iteration over binary files."""

from typing import BinaryIO, Iterator

DEFAULT_CHUNK_SIZE = 64 * 1024


class ChunkedFileReader:
    """Iterate over a binary file in chunks of at most ``chunk_size`` bytes.

    The zero-byte sniff uses this to scan whole files with bounded memory and to
    stop reading as soon as it has an answer. The reader does not own the file
    object; closing it is up to the caller.

    Raises:
        ValueError: If chunk_size is below MINIMUM_CHUNK_SIZE.

    Example:
        >>> import io
        >>> [len(chunk) for chunk in ChunkedFileReader(io.BytesIO(b"x" * 10000), chunk_size=4096)]
        [4096, 4096, 1808]
    """

    MINIMUM_CHUNK_SIZE = 4096

    def __init__(self, file_obj: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        if chunk_size < self.MINIMUM_CHUNK_SIZE:
            raise ValueError(f"chunk_size must be at least {self.MINIMUM_CHUNK_SIZE} bytes, got {chunk_size}")
        self.file_obj = file_obj
        self.chunk_size = chunk_size

    def __iter__(self) -> Iterator[bytes]:
        return self

    def __next__(self) -> bytes:
        # An empty read means end of file; read errors propagate as OSError
        chunk = self.file_obj.read(self.chunk_size)
        if not chunk:
            raise StopIteration
        return chunk
