"""
Configured Allowlist Routes

Serve the root and member proofs for the allowlist this server is
configured with (ALLOWLIST_PATH or ALLOWLIST_PROOF_BOOK_PATH).
"""

from __future__ import annotations

from fastapi import APIRouter

from api.deps import get_configured_commitment
from api.models.responses import CommitmentResponse, ProofResponse
from core.schemas.address import checksum_address
from core.schemas.errors import NotAMemberError


router = APIRouter(prefix="/allowlist", tags=["allowlist"])


@router.get("/root", response_model=CommitmentResponse)
def get_root() -> CommitmentResponse:
    """Root of the configured allowlist."""
    commitment = get_configured_commitment()
    return CommitmentResponse(
        hash_function=commitment.hash_function,
        root=commitment.root,
        leaf_count=commitment.leaf_count,
        depth=commitment.depth,
    )


@router.get("/proof/{address}", response_model=ProofResponse)
def get_proof(address: str) -> ProofResponse:
    """Proof for one member of the configured allowlist."""
    commitment = get_configured_commitment()
    member = commitment.get_member(address)
    if member is None:
        raise NotAMemberError(checksum_address(address))

    return ProofResponse(
        hash_function=commitment.hash_function,
        root=commitment.root,
        address=member.address,
        leaf=member.leaf,
        proof=member.proof,
        positions=member.positions,
        steps=member.steps,
    )
