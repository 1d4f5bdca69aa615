from __future__ import annotations

import os
from pathlib import Path
from typing import BinaryIO

DEFAULT_COPY_CHUNK_BYTES = 1024 * 1024


def ensure_directory(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def temp_sibling(dst: Path) -> Path:
    return dst.parent / f".{dst.name}.tmp"


def copy_stream(src: BinaryIO, dst: BinaryIO, chunk_size: int = DEFAULT_COPY_CHUNK_BYTES) -> int:
    """Copy ``src`` into ``dst`` in order and return the number of bytes written."""
    total = 0
    for chunk in iter(lambda: src.read(chunk_size), b""):
        dst.write(chunk)
        total += len(chunk)
    return total


def write_stream(src: BinaryIO, dst: Path, chunk_size: int = DEFAULT_COPY_CHUNK_BYTES) -> int:
    ensure_directory(dst.parent)
    with dst.open("wb") as out:
        return copy_stream(src, out, chunk_size)


def write_stream_atomic(src: BinaryIO, dst: Path, chunk_size: int = DEFAULT_COPY_CHUNK_BYTES) -> int:
    ensure_directory(dst.parent)
    temp_path = temp_sibling(dst)
    try:
        with temp_path.open("wb") as out:
            written = copy_stream(src, out, chunk_size)
        os.replace(temp_path, dst)
    except Exception:
        temp_path.unlink(missing_ok=True)
        raise
    return written
