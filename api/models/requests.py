"""
API Request Models

Pydantic models for API request validation.
"""

from pydantic import BaseModel, Field


class CommitmentRequest(BaseModel):
    """Request body for POST /commitment endpoint."""

    addresses: list[str] = Field(
        ...,
        description="Allowlisted addresses; order, duplicates and case are ignored",
    )
    hash_function: str | None = Field(
        default=None,
        description="keccak256 (default) or sha256",
    )
    include_proofs: bool = Field(
        default=False,
        description="Return every member's proof alongside the root",
    )


class ProofRequest(BaseModel):
    """Request body for POST /proof endpoint."""

    addresses: list[str] = Field(..., description="The full allowlist")
    address: str = Field(..., min_length=1, description="Member to prove")
    hash_function: str | None = Field(default=None)


class VerifyProofRequest(BaseModel):
    """Request body for POST /verify endpoint."""

    address: str = Field(..., min_length=1, description="Claimed member")
    proof: list[str] = Field(
        default_factory=list,
        description="Sibling hashes as 0x hex strings, bottom-up",
    )
    root: str = Field(..., min_length=1, description="Published root as 0x hex")
    hash_function: str | None = Field(default=None)
