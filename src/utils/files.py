"""File helpers used when staging capability files."""
from __future__ import annotations

import hashlib
from pathlib import Path
from typing import BinaryIO, Iterator

CHUNK_SIZE = 2**20


def _chunks(handle: BinaryIO, chunk_size: int) -> Iterator[bytes]:
    return iter(lambda: handle.read(chunk_size), b"")


def copy_file(source: Path, destination: Path, chunk_size: int = CHUNK_SIZE) -> str:
    """Copy ``source`` over ``destination`` byte-for-byte.

    Returns the SHA1 checksum of the copied content, computed while streaming.
    """

    digest = hashlib.sha1()
    with source.open("rb") as reader, destination.open("wb") as writer:
        for chunk in _chunks(reader, chunk_size):
            digest.update(chunk)
            writer.write(chunk)
    return digest.hexdigest()


def file_sha1(path: Path, chunk_size: int = CHUNK_SIZE) -> str:
    """SHA1 of what is on disk at ``path``; used to verify a finished copy."""

    digest = hashlib.sha1()
    with path.open("rb") as handle:
        for chunk in _chunks(handle, chunk_size):
            digest.update(chunk)
    return digest.hexdigest()
