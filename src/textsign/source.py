"""Byte sources: stdin or a file, drained to bytes."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import BinaryIO, Union

from textsign.const import HASH_CHUNK_SIZE


def get_reader(input: str) -> BinaryIO:
    """Binary reader for ``input``. "-" means standard input."""
    if input == "-":
        return sys.stdin.buffer
    return open(input, "rb")


def read_all(stream: BinaryIO) -> bytes:
    """Drain ``stream`` to completion. Never seeks; read errors propagate."""
    chunks = []
    while True:
        chunk = stream.read(HASH_CHUNK_SIZE)
        if not chunk:
            break
        chunks.append(chunk)
    return b"".join(chunks)


def load_key_bytes(path: Union[str, Path]) -> bytes:
    return Path(path).read_bytes()
