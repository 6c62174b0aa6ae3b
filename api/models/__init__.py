"""API request and response models."""

from api.models.requests import CommitmentRequest, ProofRequest, VerifyProofRequest
from api.models.responses import (
    HealthResponse,
    CommitmentResponse,
    ProofResponse,
    VerifyProofResponse,
    ErrorDetail,
    ErrorResponse,
)

__all__ = [
    "CommitmentRequest",
    "ProofRequest",
    "VerifyProofRequest",
    "HealthResponse",
    "CommitmentResponse",
    "ProofResponse",
    "VerifyProofResponse",
    "ErrorDetail",
    "ErrorResponse",
]
