"""
textsign — Scheme factory and key generation

One dispatch point per operation, keyed on AlgorithmTag. Adding a suite
means adding a tag, its sizes in const.SUITE_SIZES and a branch here.
"""
from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass, field
from typing import Dict, Iterator, Mapping, Union

from nacl.signing import SigningKey

from textsign.const import (
    BLAKE3_KEY_NAME,
    ED25519_PK_NAME,
    ED25519_SK_NAME,
    SUITE_SIZES,
    AlgorithmTag,
)
from textsign.keys import KeyMaterial, KeyRole
from textsign.sign import (
    AsymmetricSigner,
    AsymmetricVerifier,
    KeyedHashSigner,
    KeyedHashVerifier,
    TextSigner,
    TextVerifier,
)

logger = logging.getLogger(__name__)

KeyInput = Union[bytes, bytearray, memoryview, KeyMaterial]


def _material(key: KeyInput, tag: AlgorithmTag, role: KeyRole) -> KeyMaterial:
    if isinstance(key, KeyMaterial):
        if key.tag is not tag:
            raise ValueError(f"key material is for {key.tag.value}, not {tag.value}")
        return key
    return KeyMaterial.from_bytes(bytes(key), tag, role)


def build_signer(key: KeyInput, tag: AlgorithmTag) -> TextSigner:
    """Signer for ``tag`` from raw key bytes (blake3 key or ed25519 seed)."""
    if tag is AlgorithmTag.KEYED_HASH:
        return KeyedHashSigner(_material(key, tag, KeyRole.SECRET))
    if tag is AlgorithmTag.ASYMMETRIC:
        return AsymmetricSigner(_material(key, tag, KeyRole.SIGNING))
    raise ValueError(f"Unsupported format: {tag}")


def build_verifier(key: KeyInput, tag: AlgorithmTag) -> TextVerifier:
    """Verifier for ``tag`` from raw key bytes (blake3 key or ed25519 public key)."""
    if tag is AlgorithmTag.KEYED_HASH:
        return KeyedHashVerifier(_material(key, tag, KeyRole.SECRET))
    if tag is AlgorithmTag.ASYMMETRIC:
        return AsymmetricVerifier(_material(key, tag, KeyRole.VERIFYING))
    raise ValueError(f"Unsupported format: {tag}")


@dataclass(frozen=True)
class KeyBundle(Mapping[str, bytes]):
    """Generated key artifacts, artifact name -> bytes. The caller persists them."""

    tag: AlgorithmTag
    artifacts: Dict[str, bytes] = field(default_factory=dict)

    def __getitem__(self, name: str) -> bytes:
        return self.artifacts[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self.artifacts)

    def __len__(self) -> int:
        return len(self.artifacts)

    def __repr__(self) -> str:
        sizes = ", ".join(f"{k}={len(v)}B" for k, v in self.artifacts.items())
        return f"KeyBundle(tag={self.tag.value}, {sizes})"


def generate(tag: AlgorithmTag) -> KeyBundle:
    """Fresh key material for ``tag`` from the OS CSPRNG.

    blake3 keys are 32 uniformly random bytes, not a printable password.
    """
    if tag is AlgorithmTag.KEYED_HASH:
        key = secrets.token_bytes(SUITE_SIZES[tag]["key"])
        logger.debug("generated blake3 key")
        return KeyBundle(tag, {BLAKE3_KEY_NAME: key})
    if tag is AlgorithmTag.ASYMMETRIC:
        seed = secrets.token_bytes(SUITE_SIZES[tag]["key"])
        public_key = bytes(SigningKey(seed).verify_key)
        logger.debug("generated ed25519 keypair")
        return KeyBundle(tag, {ED25519_SK_NAME: seed, ED25519_PK_NAME: public_key})
    raise ValueError(f"Unsupported format: {tag}")
