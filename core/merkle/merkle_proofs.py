"""
Allowlist Commitment Builder
Class-based interface over the Merkle tree functions.

This module provides:
- AllowlistCommitmentBuilder: build_commitment / build_proof / verify
  bound to one hash function

The builder holds nothing but its Hasher, so one instance can be shared
freely between threads and requests.
"""
from __future__ import annotations

from typing import Any, Iterable

from core.crypto.hashing import Hasher, get_hasher, to_hex
from core.merkle.merkle_tree import (
    MerkleProof,
    ProofInput,
    build_merkle_proof,
    build_merkle_root,
    verify_merkle_proof,
)


class AllowlistCommitmentBuilder:
    """
    Builds and checks allowlist commitments.

    Example:
        >>> builder = AllowlistCommitmentBuilder()
        >>> root = builder.build_commitment(addresses)
        >>> proof = builder.build_proof(addresses, addresses[0])
        >>> builder.verify(proof, addresses[0], root)
        True
    """

    def __init__(self, hasher: Hasher | str | None = None) -> None:
        if hasher is None or isinstance(hasher, str):
            hasher = get_hasher(hasher)
        self._hasher = hasher

    @property
    def hasher(self) -> Hasher:
        return self._hasher

    @property
    def hash_function(self) -> str:
        return self._hasher.name

    def build_commitment(self, addresses: Iterable[Any]) -> bytes:
        """
        Compute the root committing to an address set.

        Raises:
            EmptyInputError: If the set is empty
        """
        return build_merkle_root(addresses, self._hasher)

    def build_hex_commitment(self, addresses: Iterable[Any]) -> str:
        """Root as a 0x hex string, for storage in a contract slot."""
        return to_hex(self.build_commitment(addresses))

    def build_proof(self, addresses: Iterable[Any], target: Any) -> MerkleProof:
        """
        Generate the membership proof for target.

        Raises:
            EmptyInputError: If the set is empty
            NotAMemberError: If target is not in the set
        """
        return build_merkle_proof(addresses, target, self._hasher)

    def verify(self, proof: ProofInput, target: Any, root: bytes | str) -> bool:
        """
        Check a proof for target against root.

        Returns False for a proof that simply does not match; raises
        MalformedProofError only for structurally invalid input.
        """
        return verify_merkle_proof(proof, target, root, self._hasher)

    def __repr__(self) -> str:
        return f"AllowlistCommitmentBuilder(hash_function={self.hash_function!r})"


def build_commitment(addresses: Iterable[Any], hash_function: str | None = None) -> bytes:
    """Module-level shortcut for AllowlistCommitmentBuilder.build_commitment."""
    return AllowlistCommitmentBuilder(hash_function).build_commitment(addresses)


def build_proof(
    addresses: Iterable[Any],
    target: Any,
    hash_function: str | None = None,
) -> MerkleProof:
    """Module-level shortcut for AllowlistCommitmentBuilder.build_proof."""
    return AllowlistCommitmentBuilder(hash_function).build_proof(addresses, target)


def verify(
    proof: ProofInput,
    target: Any,
    root: bytes | str,
    hash_function: str | None = None,
) -> bool:
    """Module-level shortcut for AllowlistCommitmentBuilder.verify."""
    return AllowlistCommitmentBuilder(hash_function).verify(proof, target, root)


__all__ = [
    "AllowlistCommitmentBuilder",
    "build_commitment",
    "build_proof",
    "verify",
]
