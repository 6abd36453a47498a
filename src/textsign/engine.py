"""
textsign — Engine API

    sign(stream, key, tag)             -> signature bytes
    verify(stream, key, signature, tag) -> bool
    generate(tag)                      -> KeyBundle

Stateless and synchronous. Each call builds its own validated scheme from
raw key bytes and drains the stream once. Safe to call from many threads
as long as each caller brings its own stream.
"""
from __future__ import annotations

import logging
from typing import BinaryIO, Union

from textsign.const import AlgorithmTag
from textsign.factory import KeyBundle, KeyInput, build_signer, build_verifier
from textsign.factory import generate as _generate

logger = logging.getLogger(__name__)


def _tag(tag: Union[AlgorithmTag, str]) -> AlgorithmTag:
    if isinstance(tag, AlgorithmTag):
        return tag
    return AlgorithmTag.parse(tag)


def sign(stream: BinaryIO, key: KeyInput, tag: AlgorithmTag) -> bytes:
    tag = _tag(tag)
    signature = build_signer(key, tag).sign(stream)
    logger.debug("signed with %s (%d-byte signature)", tag.value, len(signature))
    return signature


def verify(stream: BinaryIO, key: KeyInput, signature: bytes, tag: AlgorithmTag) -> bool:
    """True if ``signature`` matches the stream. False is a mismatch, not an error."""
    tag = _tag(tag)
    return build_verifier(key, tag).verify(stream, signature)


def generate(tag: AlgorithmTag) -> KeyBundle:
    return _generate(_tag(tag))
