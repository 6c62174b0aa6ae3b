"""
Schemas - Commitment Transport Models
File: commitment.py

Purpose: Serializable forms of an allowlist commitment and its proofs,
as handed to the chain client (root) and to end users (proofs).
All hashes are 0x-prefixed lower-case hex strings.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .address import normalize_address


HEX_HASH_PATTERN = r"^0x[0-9a-f]*$"


class ProofStepModel(BaseModel):
    """One sibling hash on the path from a leaf to the root."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    sibling: str = Field(..., pattern=HEX_HASH_PATTERN)
    position: Literal["left", "right"] = Field(
        ...,
        description="Side the sibling takes when concatenated with the running hash",
    )


class MemberProof(BaseModel):
    """Inclusion proof for one allowlisted address."""

    model_config = ConfigDict(extra="forbid")

    address: str = Field(..., description="EIP-55 checksum address")
    leaf: str = Field(..., pattern=HEX_HASH_PATTERN)
    proof: list[str] = Field(
        default_factory=list,
        description="Sibling hashes bottom-up, as passed to the minting call",
    )
    positions: list[Literal["left", "right"]] = Field(default_factory=list)

    @field_validator("proof")
    @classmethod
    def _check_hex(cls, v: list[str]) -> list[str]:
        for item in v:
            if not item.startswith("0x"):
                raise ValueError(f"Proof entries must be 0x-prefixed hex, got {item[:10]}...")
        return v

    @property
    def steps(self) -> list[ProofStepModel]:
        return [
            ProofStepModel(sibling=s, position=p)
            for s, p in zip(self.proof, self.positions)
        ]


class AllowlistCommitment(BaseModel):
    """
    A built allowlist: the root plus every member's proof.

    This is the "proof book" distributed out-of-band; the root alone is
    what gets stored on-chain.
    """

    model_config = ConfigDict(extra="forbid")

    hash_function: str = Field(..., description="Hash used for leaves and nodes")
    root: str = Field(..., pattern=HEX_HASH_PATTERN)
    leaf_count: int = Field(..., ge=1)
    depth: int = Field(..., ge=0, description="Number of combination layers")
    members: list[MemberProof] = Field(default_factory=list)

    def get_member(self, address: str) -> MemberProof | None:
        """Find a member's proof by address, ignoring letter case."""
        wanted = normalize_address(address)
        for member in self.members:
            if normalize_address(member.address) == wanted:
                return member
        return None

    @property
    def addresses(self) -> list[str]:
        return [m.address for m in self.members]


__all__ = [
    "ProofStepModel",
    "MemberProof",
    "AllowlistCommitment",
]
