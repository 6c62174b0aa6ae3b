"""
Allowlist Proof Book
File: proof_book.py

Purpose: Build the root plus every member's proof in one pass and
save/load it as JSON, so proofs can be handed out without rebuilding.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable

from pydantic import ValidationError

from core.crypto.hashing import Hasher, get_hasher, to_hex
from core.merkle.merkle_tree import (
    build_layers,
    build_leaves,
    leaf_hash,
    proof_from_layers,
    compute_tree_depth,
)
from core.schemas.address import checksum_address, normalize_addresses
from core.schemas.commitment import AllowlistCommitment, MemberProof
from core.schemas.errors import AllowlistSourceError, EmptyInputError


logger = logging.getLogger(__name__)


def build_proof_book(
    addresses: Iterable[Any],
    hasher: Hasher | str | None = None,
) -> AllowlistCommitment:
    """
    Build the full commitment for an allowlist.

    Members are listed in ascending address order.

    Raises:
        EmptyInputError: If no addresses are given
        InvalidAddressError: If any address is malformed
    """
    if hasher is None or isinstance(hasher, str):
        hasher = get_hasher(hasher)

    members = normalize_addresses(addresses)
    if not members:
        raise EmptyInputError()

    leaves = build_leaves(members, hasher)
    layers = build_layers(leaves, hasher)
    index_of = {leaf: i for i, leaf in enumerate(leaves)}

    proofs: list[MemberProof] = []
    for address in members:
        proof = proof_from_layers(layers, index_of[leaf_hash(address, hasher)], hasher)
        proofs.append(MemberProof(
            address=checksum_address(address),
            leaf=to_hex(proof.leaf),
            proof=proof.hex_proof,
            positions=proof.positions,
        ))

    return AllowlistCommitment(
        hash_function=hasher.name,
        root=to_hex(layers[-1][0]),
        leaf_count=len(leaves),
        depth=compute_tree_depth(len(leaves)),
        members=proofs,
    )


def write_proof_book(commitment: AllowlistCommitment, path: str | Path) -> Path:
    """Write a proof book as indented JSON, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = commitment.model_dump(mode="json")
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    logger.info(
        f"Wrote proof book for {commitment.leaf_count} members "
        f"(root {commitment.root}) to {path}"
    )
    return path


def read_proof_book(path: str | Path) -> AllowlistCommitment:
    """
    Load a proof book written by write_proof_book().

    Raises:
        AllowlistSourceError: If the file is missing or not a proof book
    """
    path = Path(path)
    if not path.exists():
        raise AllowlistSourceError(f"Proof book not found: {path}", path=str(path))
    try:
        return AllowlistCommitment.model_validate_json(path.read_text(encoding="utf-8"))
    except ValidationError as e:
        raise AllowlistSourceError(
            f"Invalid proof book: {e.error_count()} validation error(s)",
            path=str(path),
        ) from e


__all__ = [
    "build_proof_book",
    "write_proof_book",
    "read_proof_book",
]
