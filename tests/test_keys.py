"""Key material validation for both suites."""
import pytest
from nacl.signing import SigningKey

from textsign.const import AlgorithmTag
from textsign.errors import KeyErrorKind, KeyFormatError
from textsign.keys import KeyMaterial, KeyRole

from conftest import RFC8032_PK, RFC8032_SK


class TestBlake3Keys:
    def test_exact_length(self):
        km = KeyMaterial.from_bytes(b"k" * 32, AlgorithmTag.KEYED_HASH)
        assert km.data == b"k" * 32
        assert km.role is KeyRole.SECRET

    def test_oversized_key_truncated(self):
        """33 bytes load; only the first 32 are used (trailing newline in key files)."""
        raw = bytes(range(32)) + b"\n"
        km = KeyMaterial.from_bytes(raw, AlgorithmTag.KEYED_HASH)
        assert km.data == raw[:32]
        assert len(km) == 32

    def test_much_longer_key_also_truncated(self):
        raw = b"a" * 32 + b"b" * 100
        km = KeyMaterial.from_bytes(raw, AlgorithmTag.KEYED_HASH)
        assert km.data == b"a" * 32

    def test_too_short(self):
        with pytest.raises(KeyFormatError) as exc:
            KeyMaterial.from_bytes(b"\x00" * 31, AlgorithmTag.KEYED_HASH)
        assert exc.value.kind is KeyErrorKind.TOO_SHORT
        assert exc.value.length == 31

    def test_empty(self):
        with pytest.raises(KeyFormatError):
            KeyMaterial.from_bytes(b"", AlgorithmTag.KEYED_HASH)


class TestEd25519Keys:
    def test_signing_seed(self):
        km = KeyMaterial.from_bytes(RFC8032_SK, AlgorithmTag.ASYMMETRIC, KeyRole.SIGNING)
        assert km.data == RFC8032_SK

    @pytest.mark.parametrize("size", [0, 31, 33, 64])
    def test_signing_seed_wrong_size(self, size):
        with pytest.raises(KeyFormatError) as exc:
            KeyMaterial.from_bytes(b"\x01" * size, AlgorithmTag.ASYMMETRIC, KeyRole.SIGNING)
        assert exc.value.kind is KeyErrorKind.INVALID_LENGTH

    def test_31_byte_key_rejected(self):
        """No truncation or padding for ed25519."""
        with pytest.raises(KeyFormatError):
            KeyMaterial.from_bytes(RFC8032_SK[:31], AlgorithmTag.ASYMMETRIC)

    def test_33_byte_key_rejected(self):
        with pytest.raises(KeyFormatError) as exc:
            KeyMaterial.from_bytes(RFC8032_SK + b"\n", AlgorithmTag.ASYMMETRIC)
        assert exc.value.kind is KeyErrorKind.INVALID_LENGTH

    def test_public_key(self):
        km = KeyMaterial.from_bytes(RFC8032_PK, AlgorithmTag.ASYMMETRIC, KeyRole.VERIFYING)
        assert km.role is KeyRole.VERIFYING

    def test_generated_public_key(self):
        pk = bytes(SigningKey.generate().verify_key)
        km = KeyMaterial.from_bytes(pk, AlgorithmTag.ASYMMETRIC, KeyRole.VERIFYING)
        assert km.data == pk

    def test_public_key_wrong_size(self):
        with pytest.raises(KeyFormatError) as exc:
            KeyMaterial.from_bytes(RFC8032_PK[:16], AlgorithmTag.ASYMMETRIC, KeyRole.VERIFYING)
        assert exc.value.kind is KeyErrorKind.INVALID_LENGTH

    def test_public_key_not_a_point(self):
        """All-zero bytes decode to a small-order point and are rejected."""
        with pytest.raises(KeyFormatError) as exc:
            KeyMaterial.from_bytes(b"\x00" * 32, AlgorithmTag.ASYMMETRIC, KeyRole.VERIFYING)
        assert exc.value.kind is KeyErrorKind.INVALID_ENCODING

    def test_public_key_non_canonical(self):
        with pytest.raises(KeyFormatError) as exc:
            KeyMaterial.from_bytes(b"\xff" * 32, AlgorithmTag.ASYMMETRIC, KeyRole.VERIFYING)
        assert exc.value.kind is KeyErrorKind.INVALID_ENCODING


class TestKeyMaterialInvariants:
    def test_immutable(self):
        km = KeyMaterial.from_bytes(b"k" * 32, AlgorithmTag.KEYED_HASH)
        with pytest.raises(AttributeError):
            km.data = b"x" * 32

    def test_direct_construction_checks_length(self):
        with pytest.raises(KeyFormatError):
            KeyMaterial(tag=AlgorithmTag.KEYED_HASH, role=KeyRole.SECRET, data=b"k" * 33)

    def test_repr_hides_bytes(self):
        km = KeyMaterial.from_bytes(b"secretsecretsecretsecretsecret!!", AlgorithmTag.KEYED_HASH)
        assert "secret!!" not in repr(km)
        assert "len=32" in repr(km)
