"""
Schemas
File: __init__.py

Purpose: Export the public API for the schemas module: error taxonomy,
address normalization and commitment transport models.
"""

# Error models and exceptions
from .errors import (
    AllowlistError,
    AllowlistException,
    AllowlistSourceError,
    ConfigurationError,
    EmptyInputError,
    ErrorCodes,
    InvalidAddressError,
    MalformedProofError,
    NotAMemberError,
    UnsupportedHashError,
)

# Addresses
from .address import (
    ADDRESS_SIZE,
    checksum_address,
    normalize_address,
    normalize_addresses,
)

# Commitment transport models
from .commitment import (
    AllowlistCommitment,
    MemberProof,
    ProofStepModel,
)

__all__ = [
    # Errors
    "ErrorCodes",
    "AllowlistError",
    "AllowlistException",
    "EmptyInputError",
    "NotAMemberError",
    "MalformedProofError",
    "InvalidAddressError",
    "UnsupportedHashError",
    "AllowlistSourceError",
    "ConfigurationError",
    # Addresses
    "ADDRESS_SIZE",
    "normalize_address",
    "normalize_addresses",
    "checksum_address",
    # Commitments
    "ProofStepModel",
    "MemberProof",
    "AllowlistCommitment",
]
