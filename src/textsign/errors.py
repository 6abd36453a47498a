"""
Error taxonomy for textsign.

A cryptographic mismatch is not an error: verify() returns False for it.
Only malformed key or signature bytes raise. Stream I/O errors are never
wrapped and reach the caller unchanged.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional

from textsign.const import AlgorithmTag


class KeyErrorKind(str, Enum):
    TOO_SHORT = "E_KEY_TOO_SHORT"
    INVALID_LENGTH = "E_KEY_INVALID_LENGTH"
    INVALID_ENCODING = "E_KEY_INVALID_ENCODING"


class TextSignError(Exception):
    pass


class KeyFormatError(TextSignError):
    def __init__(
        self,
        kind: KeyErrorKind,
        tag: AlgorithmTag,
        length: int,
        message: Optional[str] = None,
    ):
        self.kind = kind
        self.tag = tag
        self.length = length
        super().__init__(message or f"{kind.value}: invalid {tag.value} key ({length} bytes)")


class SignatureFormatError(TextSignError):
    def __init__(
        self,
        tag: Optional[AlgorithmTag],
        expected: Optional[int],
        actual: Optional[int],
        message: Optional[str] = None,
    ):
        self.tag = tag
        self.expected = expected
        self.actual = actual
        if message is None:
            name = tag.value if tag is not None else "unknown"
            message = f"{name} signature must be {expected} bytes, got {actual}"
        super().__init__(message)
