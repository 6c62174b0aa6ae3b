"""
Core cryptographic utilities.

Hash primitives, hex codec and the Hasher interface used for
allowlist commitments.
"""
from .hashing import (
    DEFAULT_HASH_FUNCTION,
    Hasher,
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
