"""
textsign — Signing and verifying schemes

Two suites, one contract:
  - blake3  : keyed BLAKE3. 32-byte key, 32-byte digest used as the signature.
  - ed25519 : Ed25519 (nacl). 32-byte seed / public key, 64-byte signatures.

Every scheme drains the whole stream before computing. Signing is
deterministic for both suites. verify() returns False on a mismatch and
raises SignatureFormatError only when the signature bytes are malformed.
"""
from __future__ import annotations

import hmac
import logging
from dataclasses import dataclass
from typing import BinaryIO, ClassVar, Protocol

import blake3
from nacl.exceptions import BadSignatureError
from nacl.signing import SigningKey, VerifyKey

from textsign.const import SUITE_SIZES, AlgorithmTag
from textsign.errors import SignatureFormatError
from textsign.keys import KeyMaterial, KeyRole
from textsign.source import read_all

logger = logging.getLogger(__name__)


class TextSigner(Protocol):
    tag: AlgorithmTag

    def sign(self, stream: BinaryIO) -> bytes:
        ...


class TextVerifier(Protocol):
    tag: AlgorithmTag

    def verify(self, stream: BinaryIO, signature: bytes) -> bool:
        ...


def _check_signature_len(tag: AlgorithmTag, signature: bytes) -> bytes:
    expected = SUITE_SIZES[tag]["sig"]
    signature = bytes(signature)
    if len(signature) != expected:
        raise SignatureFormatError(tag, expected, len(signature))
    return signature


def _require(key: KeyMaterial, tag: AlgorithmTag, role: KeyRole) -> None:
    if key.tag is not tag or key.role is not role:
        raise TypeError(
            f"expected {tag.value}/{role.value} key material, got {key.tag.value}/{key.role.value}"
        )


# ── blake3 ───────────────────────────────────────────────────────────────────

def keyed_hash(key: bytes, data: bytes) -> bytes:
    return blake3.blake3(data, key=key).digest()


@dataclass(frozen=True, repr=False)
class KeyedHashSigner:
    key: KeyMaterial
    tag: ClassVar[AlgorithmTag] = AlgorithmTag.KEYED_HASH

    def __post_init__(self) -> None:
        _require(self.key, AlgorithmTag.KEYED_HASH, KeyRole.SECRET)

    def sign(self, stream: BinaryIO) -> bytes:
        data = read_all(stream)
        logger.debug("blake3 sign over %d bytes", len(data))
        return keyed_hash(self.key.data, data)


@dataclass(frozen=True, repr=False)
class KeyedHashVerifier:
    key: KeyMaterial
    tag: ClassVar[AlgorithmTag] = AlgorithmTag.KEYED_HASH

    def __post_init__(self) -> None:
        _require(self.key, AlgorithmTag.KEYED_HASH, KeyRole.SECRET)

    def verify(self, stream: BinaryIO, signature: bytes) -> bool:
        signature = _check_signature_len(self.tag, signature)
        data = read_all(stream)
        expected = keyed_hash(self.key.data, data)
        ok = hmac.compare_digest(expected, signature)
        logger.debug("blake3 verify over %d bytes: %s", len(data), ok)
        return ok


# ── ed25519 ──────────────────────────────────────────────────────────────────

@dataclass(frozen=True, repr=False)
class AsymmetricSigner:
    key: KeyMaterial
    tag: ClassVar[AlgorithmTag] = AlgorithmTag.ASYMMETRIC

    def __post_init__(self) -> None:
        _require(self.key, AlgorithmTag.ASYMMETRIC, KeyRole.SIGNING)

    @property
    def signing_key(self) -> SigningKey:
        return SigningKey(self.key.data)

    @property
    def verify_key_bytes(self) -> bytes:
        return bytes(self.signing_key.verify_key)

    def sign(self, stream: BinaryIO) -> bytes:
        """Deterministic sign. Same seed + same message = same signature."""
        data = read_all(stream)
        logger.debug("ed25519 sign over %d bytes", len(data))
        return self.signing_key.sign(data).signature


@dataclass(frozen=True, repr=False)
class AsymmetricVerifier:
    key: KeyMaterial
    tag: ClassVar[AlgorithmTag] = AlgorithmTag.ASYMMETRIC

    def __post_init__(self) -> None:
        _require(self.key, AlgorithmTag.ASYMMETRIC, KeyRole.VERIFYING)

    def verify(self, stream: BinaryIO, signature: bytes) -> bool:
        signature = _check_signature_len(self.tag, signature)
        data = read_all(stream)
        try:
            VerifyKey(self.key.data).verify(data, signature)
            ok = True
        except BadSignatureError:
            ok = False
        logger.debug("ed25519 verify over %d bytes: %s", len(data), ok)
        return ok
