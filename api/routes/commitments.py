"""
Commitment Routes

Build roots and proofs for an address set supplied in the request,
and verify proofs against a root.

Handlers are plain functions: hashing is CPU-bound, so FastAPI runs
them in its worker threadpool.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter

from api.deps import get_builder
from api.models.requests import CommitmentRequest, ProofRequest, VerifyProofRequest
from api.models.responses import CommitmentResponse, ProofResponse, VerifyProofResponse
from core.allowlist import build_proof_book
from core.crypto.hashing import to_hex
from core.schemas.address import checksum_address
from core.schemas.commitment import ProofStepModel


logger = logging.getLogger(__name__)

router = APIRouter(tags=["commitments"])


@router.post("/commitment", response_model=CommitmentResponse)
def create_commitment(request: CommitmentRequest) -> CommitmentResponse:
    """
    Compute the Merkle root for an allowlist.

    The root is what gets stored on-chain; set include_proofs to also
    receive every member's proof.
    """
    builder = get_builder(request.hash_function)
    commitment = build_proof_book(request.addresses, builder.hasher)
    logger.info(
        f"Built {commitment.hash_function} commitment over "
        f"{commitment.leaf_count} members: {commitment.root}"
    )

    return CommitmentResponse(
        hash_function=commitment.hash_function,
        root=commitment.root,
        leaf_count=commitment.leaf_count,
        depth=commitment.depth,
        members=commitment.members if request.include_proofs else None,
    )


@router.post("/proof", response_model=ProofResponse)
def create_proof(request: ProofRequest) -> ProofResponse:
    """
    Generate the membership proof for one address.

    Returns 404 NOT_A_MEMBER if the address is not in the list.
    """
    builder = get_builder(request.hash_function)
    proof = builder.build_proof(request.addresses, request.address)

    return ProofResponse(
        hash_function=builder.hash_function,
        root=proof.hex_root,
        address=checksum_address(request.address),
        leaf=to_hex(proof.leaf),
        proof=proof.hex_proof,
        positions=proof.positions,
        steps=[
            ProofStepModel(sibling=to_hex(step.sibling), position=step.position)
            for step in proof.steps
        ],
    )


@router.post("/verify", response_model=VerifyProofResponse)
def verify_proof(request: VerifyProofRequest) -> VerifyProofResponse:
    """
    Check a proof against a root.

    A proof that does not match is a normal valid=false response;
    only malformed hashes or addresses produce an error.
    """
    builder = get_builder(request.hash_function)
    valid = builder.verify(request.proof, request.address, request.root)

    return VerifyProofResponse(
        valid=valid,
        address=checksum_address(request.address),
        root=request.root,
    )
