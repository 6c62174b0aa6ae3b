"""
Merkle Tree and Allowlist Commitments
Deterministic Merkle allowlist construction + proof generation/verification.

This module provides:
- MerkleProof / ProofStep: Dataclasses representing an inclusion proof
- build_merkle_root: Compute root from an address set
- build_merkle_proof: Generate proof for one address
- verify_merkle_proof: Verify a proof against a published root
- AllowlistCommitmentBuilder: the same operations bound to one hasher

Canonical Commitment Rules:
1. Leaf hashing: keccak256(20 address bytes)
2. Leaves de-duplicated and sorted ascending
3. Parent hashing: keccak256(min(a, b) + max(a, b))
4. Padding: carry last node forward if odd number at any level
5. Single leaf: root = leaf

Usage:
    from core.merkle import AllowlistCommitmentBuilder

    builder = AllowlistCommitmentBuilder()
    root = builder.build_commitment(addresses)
    proof = builder.build_proof(addresses, "0xA687...")
    assert builder.verify(proof, "0xA687...", root)

    contract.allowlistMint(proof.hex_proof, 1)
"""
from .merkle_tree import (
    MerkleProof,
    ProofStep,
    build_layers,
    build_leaves,
    build_merkle_proof,
    build_merkle_root,
    compute_tree_depth,
    leaf_hash,
    merkle_parent,
    proof_from_layers,
    verify_merkle_proof,
)

from .merkle_proofs import (
    AllowlistCommitmentBuilder,
    build_commitment,
    build_proof,
    verify,
)


__all__ = [
    # Core types
    "MerkleProof",
    "ProofStep",
    # Core functions
    "leaf_hash",
    "build_leaves",
    "merkle_parent",
    "build_layers",
    "build_merkle_root",
    "build_merkle_proof",
    "proof_from_layers",
    "verify_merkle_proof",
    "compute_tree_depth",
    # Builder
    "AllowlistCommitmentBuilder",
    "build_commitment",
    "build_proof",
    "verify",
]
