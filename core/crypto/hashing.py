"""
Hashing Utilities
Hash primitives and the node-hashing interface for allowlist commitments.

This module provides:
- keccak256 / SHA-256 hashing for raw bytes
- Hex encoding/decoding with 0x prefix
- Hasher: the {hash, combine} interface used by the Merkle builder

Commitment Rules (Hard Contracts):
1. Leaves and parent nodes are hashed with the SAME function
2. combine(a, b) == combine(b, a) == hash(min(a, b) + max(a, b))
3. keccak256 is the default; it matches Solidity's keccak256()

Security/Determinism Notes:
- Always hash raw bytes exactly as given
- All operations are deterministic
"""
from __future__ import annotations

import hashlib
from abc import ABC, abstractmethod

from eth_utils import keccak

from core.schemas.errors import UnsupportedHashError


def keccak256(data: bytes) -> bytes:
    """
    Compute the Ethereum keccak256 hash of raw bytes.

    Args:
        data: Raw bytes to hash

    Returns:
        32-byte keccak256 digest

    Example:
        >>> keccak256(b"").hex()
        'c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470'
    """
    return keccak(data)


def sha256(data: bytes) -> bytes:
    """
    Compute SHA-256 hash of raw bytes.

    Args:
        data: Raw bytes to hash

    Returns:
        32-byte SHA-256 digest
    """
    return hashlib.sha256(data).digest()


def to_hex(data: bytes) -> str:
    """
    Convert bytes to hexadecimal string with 0x prefix.

    Example:
        >>> to_hex(bytes.fromhex("deadbeef"))
        '0xdeadbeef'
    """
    return "0x" + data.hex()


def from_hex(hex_string: str) -> bytes:
    """
    Convert hexadecimal string (with 0x prefix) to bytes.

    Args:
        hex_string: Hex string with 0x prefix

    Returns:
        Decoded bytes

    Raises:
        ValueError: If string doesn't start with 0x, has odd length,
                   or contains invalid hex characters
    """
    if not hex_string.startswith(("0x", "0X")):
        raise ValueError(
            f"Hex string must start with '0x' prefix, got: {hex_string[:10]}..."
        )

    hex_content = hex_string[2:]

    if len(hex_content) % 2 != 0:
        raise ValueError(
            f"Hex string must have even length after 0x prefix, "
            f"got length {len(hex_content)}"
        )

    try:
        return bytes.fromhex(hex_content)
    except ValueError as e:
        raise ValueError(f"Invalid hex characters in string: {e}") from e


def hash_sorted_pair(hash_fn, left: bytes, right: bytes) -> bytes:
    """
    Hash two nodes after ordering them ascending.

    parent = hash_fn(min(left, right) + max(left, right))

    The result does not depend on which side of the tree each node sat,
    which is what lets a verifier fold a proof without position flags.
    """
    if right < left:
        left, right = right, left
    return hash_fn(left + right)


class Hasher(ABC):
    """
    Node hashing interface used by the Merkle builder.

    A single Hasher instance is used for both leaves and parents,
    so the two can never drift apart.
    """

    name: str = ""
    digest_size: int = 32

    @abstractmethod
    def hash(self, data: bytes) -> bytes:
        """Hash raw bytes into a node digest."""

    def combine(self, left: bytes, right: bytes) -> bytes:
        """Hash an unordered pair of child digests."""
        return hash_sorted_pair(self.hash, left, right)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"


class Keccak256Hasher(Hasher):
    """keccak256, as used by EVM contracts (default)."""

    name = "keccak256"

    def hash(self, data: bytes) -> bytes:
        return keccak256(data)


class Sha256Hasher(Hasher):
    """SHA-256, for verifiers that cannot compute keccak."""

    name = "sha256"

    def hash(self, data: bytes) -> bytes:
        return sha256(data)


DEFAULT_HASH_FUNCTION = Keccak256Hasher.name

_HASHERS: dict[str, type[Hasher]] = {
    Keccak256Hasher.name: Keccak256Hasher,
    Sha256Hasher.name: Sha256Hasher,
}


def supported_hash_functions() -> list[str]:
    """Names accepted by get_hasher()."""
    return sorted(_HASHERS)


def get_hasher(name: str | None = None) -> Hasher:
    """
    Look up a Hasher by name.

    Args:
        name: "keccak256" (default when None) or "sha256", case-insensitive

    Returns:
        A new Hasher instance

    Raises:
        UnsupportedHashError: If the name is unknown
    """
    key = (name or DEFAULT_HASH_FUNCTION).strip().lower()
    try:
        return _HASHERS[key]()
    except KeyError:
        raise UnsupportedHashError(name or "", supported_hash_functions()) from None


__all__ = [
    "keccak256",
    "sha256",
    "to_hex",
    "from_hex",
    "hash_sorted_pair",
    "Hasher",
    "Keccak256Hasher",
    "Sha256Hasher",
    "DEFAULT_HASH_FUNCTION",
    "supported_hash_functions",
    "get_hasher",
]
