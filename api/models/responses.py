"""
API Response Models

Pydantic models for API response serialization.
"""

from typing import Any

from pydantic import BaseModel, Field

from core.schemas.commitment import MemberProof, ProofStepModel


class HealthResponse(BaseModel):
    """Response for GET /health endpoint."""

    ok: bool = True
    service: str = "allowlist-commitment-api"
    version: str = "v1"


class CommitmentResponse(BaseModel):
    """Response for POST /commitment and GET /allowlist/root."""

    ok: bool = True
    hash_function: str = Field(..., description="Hash used for leaves and nodes")
    root: str = Field(..., description="Merkle root as 0x hex")
    leaf_count: int = Field(..., description="Distinct members committed")
    depth: int = Field(..., description="Combination layers above the leaves")
    members: list[MemberProof] | None = Field(
        default=None,
        description="Per-member proofs, when requested",
    )


class ProofResponse(BaseModel):
    """Response for POST /proof and GET /allowlist/proof/{address}."""

    ok: bool = True
    hash_function: str
    root: str = Field(..., description="Root the proof verifies against")
    address: str = Field(..., description="EIP-55 checksum address")
    leaf: str
    proof: list[str] = Field(default_factory=list, description="Sibling hashes bottom-up")
    positions: list[str] = Field(default_factory=list)
    steps: list[ProofStepModel] = Field(
        default_factory=list,
        description="Sibling and side per level, for position-aware verifiers",
    )


class VerifyProofResponse(BaseModel):
    """Response for POST /verify endpoint."""

    ok: bool = True
    valid: bool = Field(..., description="Whether the proof verifies against the root")
    address: str
    root: str


class ErrorDetail(BaseModel):
    """Detailed error information."""

    code: str = Field(..., description="Error code")
    message: str = Field(..., description="Human-readable error message")
    details: dict[str, Any] = Field(default_factory=dict)


class ErrorResponse(BaseModel):
    """Standard error response."""

    ok: bool = False
    error: ErrorDetail = Field(..., description="Error details")
