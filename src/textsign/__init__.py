"""
textsign — sign and verify text with BLAKE3 (keyed hash) or Ed25519.

Usage:
    from textsign import AlgorithmTag, sign, verify, generate
    bundle = generate(AlgorithmTag.ED25519)
    sig = sign(open("msg.txt", "rb"), bundle["ed25519.sk"], AlgorithmTag.ED25519)
    ok = verify(open("msg.txt", "rb"), bundle["ed25519.pk"], sig, AlgorithmTag.ED25519)
"""
from textsign.const import AlgorithmTag
from textsign.engine import generate, sign, verify
from textsign.errors import (
    KeyErrorKind,
    KeyFormatError,
    SignatureFormatError,
    TextSignError,
)
from textsign.factory import KeyBundle
from textsign.keys import KeyMaterial, KeyRole

__version__ = "0.1.0"

__all__ = [
    "AlgorithmTag",
    "KeyBundle",
    "KeyErrorKind",
    "KeyFormatError",
    "KeyMaterial",
    "KeyRole",
    "SignatureFormatError",
    "TextSignError",
    "generate",
    "sign",
    "verify",
]
