"""Shared key fixtures."""
from pathlib import Path

import pytest

# RFC 8032, section 7.1, TEST 1 (empty message)
RFC8032_SK = bytes.fromhex("9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60")
RFC8032_PK = bytes.fromhex("d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a")
RFC8032_SIG = bytes.fromhex(
    "e5564300c360ac729086e2cc806e828a84877f1eb8e5d974d873e065224901555fb8821590a33bacc61e39701cf9b46bd25bf5f0595bbe24655141438e7a100b"
)

ZERO_KEY = b"\x00" * 32


@pytest.fixture
def blake3_key() -> bytes:
    return bytes(range(32))


@pytest.fixture
def key_dir(tmp_path: Path, blake3_key: bytes) -> Path:
    """Key files as the generate command writes them, blake3 key with a trailing newline."""
    d = tmp_path / "keys"
    d.mkdir()
    (d / "blake3.txt").write_bytes(blake3_key + b"\n")
    (d / "ed25519.sk").write_bytes(RFC8032_SK)
    (d / "ed25519.pk").write_bytes(RFC8032_PK)
    return d


@pytest.fixture
def message_file(tmp_path: Path) -> Path:
    p = tmp_path / "message.txt"
    p.write_bytes(b"hello world")
    return p
