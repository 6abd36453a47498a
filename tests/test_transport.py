"""Signature text transport and base64 commands."""
import base64
import io

import pytest

from textsign.const import Base64Format
from textsign.errors import SignatureFormatError
from textsign.transport import decode_signature, encode_signature, process_decode, process_encode


def test_signature_encoding_is_unpadded_urlsafe():
    raw = b"\xfb\xff\xfe" * 11  # 33 bytes: exercises - and _
    text = encode_signature(raw)
    assert "=" not in text
    assert "+" not in text and "/" not in text
    assert text == base64.urlsafe_b64encode(raw).decode().rstrip("=")
    assert decode_signature(text) == raw


def test_decode_tolerates_padding_and_newline():
    raw = bytes(range(32))
    padded = base64.urlsafe_b64encode(raw).decode()
    assert padded.endswith("=")
    assert decode_signature(padded + "\n") == raw


def test_decode_rejects_garbage():
    with pytest.raises(SignatureFormatError):
        decode_signature("not base64 at all!!")


def test_process_encode_standard():
    assert process_encode(io.BytesIO(b"hello world"), Base64Format.STANDARD) == "aGVsbG8gd29ybGQ="


def test_process_encode_urlsafe():
    assert process_encode(io.BytesIO(b"hello world"), Base64Format.URLSAFE) == "aGVsbG8gd29ybGQ"


@pytest.mark.parametrize("fmt,text", [
    (Base64Format.STANDARD, b"aGVsbG8gd29ybGQ=\n"),
    (Base64Format.URLSAFE, b"aGVsbG8gd29ybGQ\n"),
])
def test_process_decode_trims_newline(fmt, text):
    assert process_decode(io.BytesIO(text), fmt) == b"hello world"


def test_decode_rejects_standard_alphabet():
    """+ and / belong to the standard alphabet, not the URL-safe one."""
    standard = base64.b64encode(b"\xfb\xff\xfe" * 11).decode()
    assert "+" in standard and "/" in standard
    with pytest.raises(SignatureFormatError):
        decode_signature(standard)


def test_process_decode_urlsafe_rejects_standard_alphabet():
    with pytest.raises(ValueError):
        process_decode(io.BytesIO(b"+//+"), Base64Format.URLSAFE)
