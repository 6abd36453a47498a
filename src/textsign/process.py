"""CLI-facing glue: open inputs, load key files, encode signatures, write bundles."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Union

from textsign import engine
from textsign.const import AlgorithmTag
from textsign.source import get_reader, load_key_bytes
from textsign.transport import decode_signature, encode_signature

logger = logging.getLogger(__name__)


def process_text_sign(input: str, key: Union[str, Path], tag: AlgorithmTag) -> str:
    """Sign ``input`` ("-" for stdin) with the key file at ``key``; returns base64."""
    key_bytes = load_key_bytes(key)
    reader = get_reader(input)
    try:
        signature = engine.sign(reader, key_bytes, tag)
    finally:
        if input != "-":
            reader.close()
    return encode_signature(signature)


def process_text_verify(input: str, key: Union[str, Path], tag: AlgorithmTag, sig: str) -> bool:
    signature = decode_signature(sig)
    key_bytes = load_key_bytes(key)
    reader = get_reader(input)
    try:
        return engine.verify(reader, key_bytes, signature, tag)
    finally:
        if input != "-":
            reader.close()


def process_text_generate(tag: AlgorithmTag, outdir: Union[str, Path]) -> Dict[str, Path]:
    """Generate keys for ``tag`` and write each artifact to ``outdir/<name>``."""
    bundle = engine.generate(tag)
    out = Path(outdir)
    out.mkdir(parents=True, exist_ok=True)
    written: Dict[str, Path] = {}
    for name, data in bundle.items():
        path = out / name
        path.write_bytes(data)
        written[name] = path
    logger.info("wrote %s keys to %s", AlgorithmTag(tag).value, out)
    return written
