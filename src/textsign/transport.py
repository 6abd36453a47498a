"""
Textual transport for signatures and the base64 commands.

Signatures travel as URL-safe base64 without padding. Decoding is tolerant
of whitespace and of padding added when copying from a terminal.
"""
from __future__ import annotations

import base64
import binascii
import re
from typing import BinaryIO

from textsign.const import Base64Format
from textsign.errors import SignatureFormatError
from textsign.source import read_all


def _b64_urlsafe_encode(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


URLSAFE_RE = re.compile(r"[A-Za-z0-9_-]*")


def _b64_urlsafe_decode(text: str) -> bytes:
    s = (text or "").strip().rstrip("=")
    if not URLSAFE_RE.fullmatch(s):
        raise binascii.Error("characters outside the URL-safe base64 alphabet")
    pad = (-len(s)) % 4
    if pad:
        s += "=" * pad
    return base64.urlsafe_b64decode(s.encode("ascii"))


def encode_signature(raw: bytes) -> str:
    return _b64_urlsafe_encode(raw)


def decode_signature(text: str) -> bytes:
    try:
        return _b64_urlsafe_decode(text)
    except (binascii.Error, UnicodeEncodeError, ValueError) as e:
        raise SignatureFormatError(None, None, None, f"Signature is not URL-safe base64: {e}") from e


def process_encode(reader: BinaryIO, fmt: Base64Format) -> str:
    buf = read_all(reader)
    if Base64Format(fmt) is Base64Format.STANDARD:
        return base64.b64encode(buf).decode("ascii")
    return _b64_urlsafe_encode(buf)


def process_decode(reader: BinaryIO, fmt: Base64Format) -> bytes:
    """Decode base64 text from ``reader``; trailing newlines are ignored."""
    text = read_all(reader).decode("ascii").strip()
    if Base64Format(fmt) is Base64Format.STANDARD:
        return base64.b64decode(text.encode("ascii"), validate=True)
    return _b64_urlsafe_decode(text)
