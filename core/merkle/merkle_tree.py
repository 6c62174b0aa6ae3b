"""
Merkle Tree Implementation
Sorted-leaf, sorted-pair Merkle tree over allowlisted addresses.

This module provides:
- Deterministic Merkle root computation from an address set
- Merkle proof generation for any member
- Merkle proof verification against a published root

Canonical Commitment Rules (Hard Contracts):
1. Leaf hashing: leaf = H(normalize_address(addr))   (20 raw bytes)
2. Leaves are de-duplicated and sorted ascending before building
3. Parent hashing: parent = H(min(a, b) + max(a, b))
4. Padding rule: an odd node at any level is carried forward unchanged
   and contributes no proof step at that level
5. Single leaf: root = leaf, proof is empty
6. Empty input is an error, there is no empty-tree sentinel

Determinism Notes:
- Input order, duplicates and address letter case never affect the root
- With H = keccak256 the root and proofs verify against OpenZeppelin's
  MerkleProof.verify(proof, root, keccak256(abi.encodePacked(addr)))
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Sequence, Union

from core.crypto.hashing import Hasher, from_hex, get_hasher, to_hex
from core.schemas.address import checksum_address, normalize_address
from core.schemas.errors import EmptyInputError, MalformedProofError, NotAMemberError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProofStep:
    """
    One level of a Merkle proof.

    Attributes:
        sibling: Hash combined with the running hash at this level
        position: "left" if the sibling is concatenated first, else "right"
    """
    sibling: bytes
    position: str

    def __post_init__(self) -> None:
        if self.position not in ("left", "right"):
            raise ValueError(f"Position must be 'left' or 'right', got {self.position!r}")


@dataclass(frozen=True)
class MerkleProof:
    """
    A Merkle inclusion proof for a single allowlisted address.

    Attributes:
        leaf: The leaf hash being proven
        steps: Proof steps from the leaf level up to the root
        root: The Merkle root this proof is against
    """
    leaf: bytes
    steps: list[ProofStep] = field(default_factory=list)
    root: bytes = b""

    @property
    def siblings(self) -> list[bytes]:
        return [s.sibling for s in self.steps]

    @property
    def positions(self) -> list[str]:
        return [s.position for s in self.steps]

    @property
    def hex_proof(self) -> list[str]:
        """Sibling hashes as 0x hex strings, ready for a contract call."""
        return [to_hex(s.sibling) for s in self.steps]

    @property
    def hex_root(self) -> str:
        return to_hex(self.root)


ProofInput = Union[MerkleProof, Sequence[Union[ProofStep, bytes, str]]]


def leaf_hash(address: Any, hasher: Hasher | None = None) -> bytes:
    """
    Compute the leaf hash of one address.

    Args:
        address: Hex string or 20 raw bytes
        hasher: Node hasher (keccak256 when None)

    Returns:
        Leaf digest
    """
    hasher = hasher or get_hasher()
    return hasher.hash(normalize_address(address))


def build_leaves(addresses: Iterable[Any], hasher: Hasher | None = None) -> list[bytes]:
    """
    Hash, de-duplicate and sort the leaves for an address set.

    Raises:
        EmptyInputError: If no addresses are given
        InvalidAddressError: If any address is malformed
    """
    hasher = hasher or get_hasher()
    leaves = sorted({leaf_hash(addr, hasher) for addr in addresses})
    if not leaves:
        raise EmptyInputError()
    return leaves


def merkle_parent(left: bytes, right: bytes, hasher: Hasher | None = None) -> bytes:
    """Compute the parent of two nodes with the sorted-pair rule."""
    hasher = hasher or get_hasher()
    return hasher.combine(left, right)


def build_layers(leaves: Sequence[bytes], hasher: Hasher | None = None) -> list[list[bytes]]:
    """
    Build every level of the tree, leaves first, root last.

    Padding Rule: carry the last node forward if a level is odd.
    Example: [a, b, c] -> [parent(a,b), c] -> [parent(parent(a,b), c)]

    Args:
        leaves: Sorted, de-duplicated leaf hashes

    Returns:
        List of levels; levels[-1] == [root]
    """
    if len(leaves) == 0:
        raise EmptyInputError()

    hasher = hasher or get_hasher()
    layers: list[list[bytes]] = [list(leaves)]

    while len(layers[-1]) > 1:
        current = layers[-1]
        next_level: list[bytes] = []
        for i in range(0, len(current) - 1, 2):
            next_level.append(hasher.combine(current[i], current[i + 1]))
        if len(current) % 2 == 1:
            next_level.append(current[-1])
        layers.append(next_level)

    return layers


def build_merkle_root(addresses: Iterable[Any], hasher: Hasher | None = None) -> bytes:
    """
    Build the allowlist root for a set of addresses.

    Args:
        addresses: Any iterable of addresses; order and duplicates are ignored
        hasher: Node hasher (keccak256 when None)

    Returns:
        Root digest

    Raises:
        EmptyInputError: If no addresses are given
    """
    hasher = hasher or get_hasher()
    leaves = build_leaves(addresses, hasher)
    layers = build_layers(leaves, hasher)
    logger.debug(
        "Built %s root over %d leaves (%d layers)",
        hasher.name, len(leaves), len(layers) - 1,
    )
    return layers[-1][0]


def build_merkle_proof(
    addresses: Iterable[Any],
    target: Any,
    hasher: Hasher | None = None,
) -> MerkleProof:
    """
    Generate the inclusion proof for one address.

    Algorithm:
    1. Rebuild the sorted leaves and all levels
    2. Find the target leaf index
    3. At each level record the sibling (index XOR 1) if it exists;
       a carried-forward node has none
    4. Move up: index = index // 2

    Raises:
        EmptyInputError: If no addresses are given
        NotAMemberError: If the target is not in the set
    """
    hasher = hasher or get_hasher()
    leaves = build_leaves(addresses, hasher)
    target_leaf = leaf_hash(target, hasher)

    try:
        index = leaves.index(target_leaf)
    except ValueError:
        raise NotAMemberError(checksum_address(target)) from None

    layers = build_layers(leaves, hasher)
    return proof_from_layers(layers, index, hasher)


def proof_from_layers(
    layers: Sequence[Sequence[bytes]],
    index: int,
    hasher: Hasher | None = None,
) -> MerkleProof:
    """
    Walk already-built levels from leaf `index` up to the root.

    Raises:
        IndexError: If index is out of range for the leaf level
    """
    if index < 0 or index >= len(layers[0]):
        raise IndexError(
            f"Leaf index {index} out of range for {len(layers[0])} leaves"
        )

    hasher = hasher or get_hasher()
    leaf = layers[0][index]
    steps: list[ProofStep] = []
    node = leaf

    for level in layers[:-1]:
        sibling_index = index ^ 1
        if sibling_index < len(level):
            sibling = level[sibling_index]
            position = "left" if sibling < node else "right"
            steps.append(ProofStep(sibling=sibling, position=position))
            node = hasher.combine(node, sibling)
        index //= 2

    return MerkleProof(leaf=leaf, steps=steps, root=layers[-1][0])


def _coerce_hash(value: Any, size: int, what: str, step_index: int | None = None) -> bytes:
    if isinstance(value, str):
        try:
            value = from_hex(value)
        except ValueError as e:
            raise MalformedProofError(f"{what} is not valid hex: {e}", step_index) from e
    if not isinstance(value, (bytes, bytearray)):
        raise MalformedProofError(
            f"{what} must be bytes or hex, got {type(value).__name__}", step_index
        )
    if len(value) != size:
        raise MalformedProofError(
            f"{what} must be {size} bytes, got {len(value)}",
            step_index,
            {"expected_length": size, "actual_length": len(value)},
        )
    return bytes(value)


def _coerce_siblings(proof: ProofInput, size: int) -> list[bytes]:
    items = proof.steps if isinstance(proof, MerkleProof) else list(proof)
    siblings: list[bytes] = []
    for i, item in enumerate(items):
        raw = item.sibling if isinstance(item, ProofStep) else item
        siblings.append(_coerce_hash(raw, size, f"Proof step {i}", i))
    return siblings


def verify_merkle_proof(
    proof: ProofInput,
    target: Any,
    root: bytes | str,
    hasher: Hasher | None = None,
) -> bool:
    """
    Verify that an address is committed under a root.

    Recomputes the leaf from the target, folds the siblings with the
    sorted-pair rule, and compares the result to the root.

    Args:
        proof: MerkleProof, list of ProofStep, or list of sibling hashes
               (bytes or 0x hex)
        target: Address claimed to be on the allowlist
        root: Published root (bytes or 0x hex)

    Returns:
        True if the proof is valid, False otherwise

    Raises:
        MalformedProofError: Wrong hash length, or an empty proof against
                             a root that is not the target's own leaf
        InvalidAddressError: If the target is not an address
    """
    hasher = hasher or get_hasher()
    root_bytes = _coerce_hash(root, hasher.digest_size, "Root")
    siblings = _coerce_siblings(proof, hasher.digest_size)
    current = leaf_hash(target, hasher)

    if not siblings:
        if current != root_bytes:
            raise MalformedProofError(
                "Empty proof can only verify a single-member root",
                details={"root": to_hex(root_bytes)},
            )
        return True

    for sibling in siblings:
        current = hasher.combine(current, sibling)

    return current == root_bytes


def compute_tree_depth(num_leaves: int) -> int:
    """
    Number of combination layers above the leaves.

    Equals ceil(log2(num_leaves)); a single leaf has depth 0.
    """
    if num_leaves < 0:
        raise ValueError(f"Leaf count must be non-negative, got {num_leaves}")
    depth = 0
    n = num_leaves
    while n > 1:
        n = (n + 1) // 2
        depth += 1
    return depth


__all__ = [
    "ProofStep",
    "MerkleProof",
    "leaf_hash",
    "build_leaves",
    "merkle_parent",
    "build_layers",
    "build_merkle_root",
    "build_merkle_proof",
    "proof_from_layers",
    "verify_merkle_proof",
    "compute_tree_depth",
]
