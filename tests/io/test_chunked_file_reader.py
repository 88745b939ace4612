"""Unit tests for the ChunkedFileReader class."""

import io

import pytest

from export2md.io.chunked_file_reader import ChunkedFileReader


def test_basic_chunked_reading() -> None:
    data = bytes(range(256)) * 64  # 16384 bytes
    reader = ChunkedFileReader(io.BytesIO(data), chunk_size=4096)

    chunks = list(reader)
    assert b"".join(chunks) == data
    assert [len(chunk) for chunk in chunks] == [4096, 4096, 4096, 4096]


def test_last_chunk_is_shorter() -> None:
    data = b"x" * 5000
    chunks = list(ChunkedFileReader(io.BytesIO(data), chunk_size=4096))
    assert [len(chunk) for chunk in chunks] == [4096, 904]


def test_empty_file() -> None:
    assert list(ChunkedFileReader(io.BytesIO(b""))) == []


def test_small_file_single_chunk() -> None:
    assert list(ChunkedFileReader(io.BytesIO(b"hello"))) == [b"hello"]


def test_minimum_chunk_size() -> None:
    with pytest.raises(ValueError, match="chunk_size must be at least 4096 bytes"):
        ChunkedFileReader(io.BytesIO(b""), chunk_size=1024)


def test_stops_reading_when_consumer_stops() -> None:
    file_obj = io.BytesIO(b"a" * 10000)
    reader = ChunkedFileReader(file_obj, chunk_size=4096)

    assert next(reader) == b"a" * 4096
    assert file_obj.tell() == 4096
