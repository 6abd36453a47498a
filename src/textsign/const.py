from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple


class AlgorithmTag(str, Enum):
    """Closed set of signing schemes.

    KEYED_HASH is BLAKE3 in keyed mode, ASYMMETRIC is Ed25519.
    """

    KEYED_HASH = "blake3"
    ASYMMETRIC = "ed25519"

    @classmethod
    def parse(cls, text: str) -> "AlgorithmTag":
        value = (text or "").strip().lower()
        for tag in cls:
            if tag.value == value:
                return tag
        raise ValueError(f"Unsupported format: {text}")

    def __str__(self) -> str:
        return self.value


class Base64Format(str, Enum):
    STANDARD = "standard"
    URLSAFE = "urlsafe"

    def __str__(self) -> str:
        return self.value


KEY_LEN = 32
PUBKEY_LEN = 32

# Key/sig sizes per suite. Every length check reads from here.
SUITE_SIZES: Dict[AlgorithmTag, Dict[str, int]] = {
    AlgorithmTag.KEYED_HASH: {"key": KEY_LEN, "pk": KEY_LEN, "sig": 32},
    AlgorithmTag.ASYMMETRIC: {"key": KEY_LEN, "pk": PUBKEY_LEN, "sig": 64},
}

# Generated artifact names, in generation order.
BLAKE3_KEY_NAME = "blake3.txt"
ED25519_SK_NAME = "ed25519.sk"
ED25519_PK_NAME = "ed25519.pk"

ARTIFACT_NAMES: Dict[AlgorithmTag, Tuple[str, ...]] = {
    AlgorithmTag.KEYED_HASH: (BLAKE3_KEY_NAME,),
    AlgorithmTag.ASYMMETRIC: (ED25519_SK_NAME, ED25519_PK_NAME),
}

HASH_CHUNK_SIZE = 64 * 1024
