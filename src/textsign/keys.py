"""
textsign — Key material

Raw key bytes arrive already read by the caller (file, stdin, memory).
This module only validates them. Length and encoding problems are rejected
here, at construction, never later when the key is used.

  blake3  : 32-byte secret. Longer input is truncated to the first 32 bytes
            so key files with a trailing newline still load. This also hides
            a key file that is genuinely too long.
  ed25519 : 32-byte signing seed, or 32-byte public key that must decode to
            a valid curve point. No truncation.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from nacl.bindings import crypto_core_ed25519_is_valid_point

from textsign.const import SUITE_SIZES, AlgorithmTag
from textsign.errors import KeyErrorKind, KeyFormatError

logger = logging.getLogger(__name__)


class KeyRole(str, Enum):
    SECRET = "secret"        # symmetric, both sides
    SIGNING = "signing"
    VERIFYING = "verifying"


def _expected_len(tag: AlgorithmTag, role: KeyRole) -> int:
    sizes = SUITE_SIZES[tag]
    return sizes["pk"] if role is KeyRole.VERIFYING else sizes["key"]


@dataclass(frozen=True)
class KeyMaterial:
    """Length-validated key bytes for one algorithm tag.

    Build through from_bytes(); direct construction still enforces the
    exact length for the tag and role.
    """

    tag: AlgorithmTag
    role: KeyRole
    data: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.data, bytes):
            object.__setattr__(self, "data", bytes(self.data))
        if self.tag is AlgorithmTag.KEYED_HASH and self.role is not KeyRole.SECRET:
            object.__setattr__(self, "role", KeyRole.SECRET)
        expected = _expected_len(self.tag, self.role)
        if len(self.data) != expected:
            raise KeyFormatError(KeyErrorKind.INVALID_LENGTH, self.tag, len(self.data))

    def __repr__(self) -> str:
        # Never print key bytes.
        return f"KeyMaterial(tag={self.tag.value}, role={self.role.value}, len={len(self.data)})"

    def __bytes__(self) -> bytes:
        return self.data

    def __len__(self) -> int:
        return len(self.data)

    @classmethod
    def from_bytes(
        cls,
        raw: bytes,
        tag: AlgorithmTag,
        role: KeyRole = KeyRole.SIGNING,
    ) -> "KeyMaterial":
        """Validate raw key bytes for ``tag``.

        Raises KeyFormatError:
          TOO_SHORT        blake3 key shorter than 32 bytes
          INVALID_LENGTH   ed25519 key not exactly 32 bytes
          INVALID_ENCODING ed25519 public key is not a valid curve point
        """
        raw = bytes(raw)
        if tag is AlgorithmTag.KEYED_HASH:
            need = SUITE_SIZES[tag]["key"]
            if len(raw) < need:
                raise KeyFormatError(KeyErrorKind.TOO_SHORT, tag, len(raw))
            if len(raw) > need:
                logger.debug("blake3 key is %d bytes, using the first %d", len(raw), need)
            return cls(tag=tag, role=KeyRole.SECRET, data=raw[:need])

        if role is KeyRole.SECRET:
            role = KeyRole.SIGNING
        need = _expected_len(tag, role)
        if len(raw) != need:
            raise KeyFormatError(KeyErrorKind.INVALID_LENGTH, tag, len(raw))
        if role is KeyRole.VERIFYING and not crypto_core_ed25519_is_valid_point(raw):
            raise KeyFormatError(
                KeyErrorKind.INVALID_ENCODING,
                tag,
                len(raw),
                f"{KeyErrorKind.INVALID_ENCODING.value}: ed25519 public key is not a valid curve point",
            )
        return cls(tag=tag, role=role, data=raw)
