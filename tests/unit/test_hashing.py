"""
Hashing Unit Tests
Tests for core/crypto/hashing.py

Tests:
- keccak256 / sha256 known values
- to_hex/from_hex behaviour
- Hasher.combine sorted-pair rule
- get_hasher lookup
"""
import hashlib

import pytest

from core.crypto.hashing import (
    DEFAULT_HASH_FUNCTION,
    Keccak256Hasher,
    Sha256Hasher,
    from_hex,
    get_hasher,
    hash_sorted_pair,
    keccak256,
    sha256,
    supported_hash_functions,
    to_hex,
)
from core.schemas.errors import ErrorCodes, UnsupportedHashError


class TestKeccak256:
    """Tests for keccak256()."""

    def test_keccak256_empty_known_value(self):
        """keccak256 of empty bytes is the well-known Ethereum constant."""
        assert keccak256(b"").hex() == (
            "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"
        )

    def test_keccak256_is_not_sha3(self):
        """Ethereum keccak differs from NIST SHA3-256."""
        assert keccak256(b"abc") != hashlib.sha3_256(b"abc").digest()

    def test_keccak256_length(self):
        assert len(keccak256(b"hello")) == 32


class TestSha256:
    """Tests for sha256()."""

    def test_sha256_known_value(self):
        assert sha256(b"hello") == hashlib.sha256(b"hello").digest()

    def test_sha256_empty(self):
        assert sha256(b"") == hashlib.sha256(b"").digest()


class TestHexConversion:
    """Tests for to_hex / from_hex."""

    def test_to_hex_prefix(self):
        assert to_hex(bytes.fromhex("deadbeef")) == "0xdeadbeef"

    def test_to_hex_empty(self):
        assert to_hex(b"") == "0x"

    def test_from_hex_round_trip(self):
        data = keccak256(b"x")
        assert from_hex(to_hex(data)) == data

    def test_from_hex_upper_case_prefix(self):
        assert from_hex("0XDEADBEEF") == bytes.fromhex("deadbeef")

    def test_from_hex_requires_prefix(self):
        with pytest.raises(ValueError, match="0x"):
            from_hex("deadbeef")

    def test_from_hex_odd_length(self):
        with pytest.raises(ValueError, match="even length"):
            from_hex("0xabc")

    def test_from_hex_invalid_chars(self):
        with pytest.raises(ValueError, match="Invalid hex"):
            from_hex("0xzz")


class TestSortedPair:
    """Tests for the sorted-pair combination rule."""

    def test_combine_is_commutative(self):
        hasher = Keccak256Hasher()
        a, b = keccak256(b"a"), keccak256(b"b")

        assert hasher.combine(a, b) == hasher.combine(b, a)

    def test_combine_orders_ascending(self):
        hasher = Keccak256Hasher()
        a, b = keccak256(b"a"), keccak256(b"b")
        low, high = min(a, b), max(a, b)

        assert hasher.combine(a, b) == keccak256(low + high)

    def test_hash_sorted_pair_uses_given_function(self):
        a, b = b"\x02" * 32, b"\x01" * 32
        assert hash_sorted_pair(sha256, a, b) == sha256(b + a)

    def test_sha256_hasher_combine(self):
        hasher = Sha256Hasher()
        a, b = sha256(b"a"), sha256(b"b")

        assert hasher.combine(a, b) == sha256(min(a, b) + max(a, b))


class TestGetHasher:
    """Tests for get_hasher()."""

    def test_default_is_keccak(self):
        assert DEFAULT_HASH_FUNCTION == "keccak256"
        assert isinstance(get_hasher(), Keccak256Hasher)
        assert isinstance(get_hasher(None), Keccak256Hasher)

    def test_lookup_is_case_insensitive(self):
        assert isinstance(get_hasher("SHA256"), Sha256Hasher)
        assert isinstance(get_hasher(" Keccak256 "), Keccak256Hasher)

    def test_unknown_hash_raises(self):
        with pytest.raises(UnsupportedHashError) as exc_info:
            get_hasher("md5")

        assert exc_info.value.code == ErrorCodes.UNSUPPORTED_HASH
        assert exc_info.value.details["supported"] == ["keccak256", "sha256"]

    def test_supported_hash_functions(self):
        assert supported_hash_functions() == ["keccak256", "sha256"]

    def test_digest_size(self):
        assert get_hasher().digest_size == 32
        assert get_hasher("sha256").digest_size == 32
