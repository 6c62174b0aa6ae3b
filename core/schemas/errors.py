"""
Schemas - Error Taxonomy
File: errors.py

Purpose: Standard error taxonomy for allowlist commitments.
Defines both Pydantic models for structured error communication
and Python exceptions for control flow.

Errors here indicate caller misuse or a bad server configuration,
never transient failure, so none of them are retryable.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes."""

    # Input Errors
    EMPTY_INPUT = "EMPTY_INPUT"
    INVALID_ADDRESS = "INVALID_ADDRESS"
    UNSUPPORTED_HASH = "UNSUPPORTED_HASH"

    # Merkle & Commitment Errors
    NOT_A_MEMBER = "NOT_A_MEMBER"
    MALFORMED_PROOF = "MALFORMED_PROOF"

    # Allowlist Source Errors
    ALLOWLIST_SOURCE_ERROR = "ALLOWLIST_SOURCE_ERROR"

    # Server Configuration Errors
    CONFIG_ERROR = "CONFIG_ERROR"


# =============================================================================
# Pydantic Error Models (Structured Communication)
# =============================================================================

class AllowlistError(BaseModel):
    """
    Base error model for structured error communication.

    Used for passing errors across the API boundary without exceptions.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.NOT_A_MEMBER],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )
    retryable: bool = Field(
        default=False,
        description="Whether the operation can be retried",
    )

    def to_exception(self) -> "AllowlistException":
        """Convert this error model to a raised exception."""
        return AllowlistException(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class AllowlistException(Exception):
    """
    Base exception for all allowlist commitment errors.

    Carries structured error information and can be
    converted to/from AllowlistError models.
    """

    def __init__(
        self,
        message: str,
        code: str = "ALLOWLIST_ERROR",
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.retryable = retryable

    def to_error_model(self) -> AllowlistError:
        """Convert this exception to an AllowlistError model."""
        return AllowlistError(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class EmptyInputError(AllowlistException):
    """Raised when a commitment is requested over zero addresses."""

    def __init__(
        self,
        message: str = "Cannot build a commitment from an empty address set",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.EMPTY_INPUT,
            details=details,
            retryable=False,
        )


class NotAMemberError(AllowlistException):
    """Raised when a proof is requested for an address outside the set."""

    def __init__(
        self,
        address: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        full_details["address"] = address
        super().__init__(
            message=f"Address {address} is not on the allowlist",
            code=ErrorCodes.NOT_A_MEMBER,
            details=full_details,
            retryable=False,
        )
        self.address = address


class MalformedProofError(AllowlistException):
    """Raised when a proof or root is structurally invalid."""

    def __init__(
        self,
        message: str,
        step_index: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if step_index is not None:
            full_details["step_index"] = step_index
        super().__init__(
            message=message,
            code=ErrorCodes.MALFORMED_PROOF,
            details=full_details,
            retryable=False,
        )


class InvalidAddressError(AllowlistException):
    """Raised when an address cannot be normalized to 20 bytes."""

    def __init__(
        self,
        value: Any,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        full_details["value"] = repr(value)
        super().__init__(
            message=f"Invalid address: {value!r}",
            code=ErrorCodes.INVALID_ADDRESS,
            details=full_details,
            retryable=False,
        )


class UnsupportedHashError(AllowlistException):
    """Raised when an unknown hash function name is requested."""

    def __init__(
        self,
        name: str,
        supported: list[str] | None = None,
    ) -> None:
        details: dict[str, Any] = {"hash_function": name}
        if supported:
            details["supported"] = supported
        super().__init__(
            message=f"Unsupported hash function: {name!r}",
            code=ErrorCodes.UNSUPPORTED_HASH,
            details=details,
            retryable=False,
        )


class AllowlistSourceError(AllowlistException):
    """Raised when an allowlist file cannot be read or has a bad shape."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if path:
            full_details["path"] = path
        super().__init__(
            message=message,
            code=ErrorCodes.ALLOWLIST_SOURCE_ERROR,
            details=full_details,
            retryable=False,
        )


class ConfigurationError(AllowlistException):
    """Raised when the server's own configuration is unusable."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if path:
            full_details["path"] = path
        super().__init__(
            message=message,
            code=ErrorCodes.CONFIG_ERROR,
            details=full_details,
            retryable=False,
        )
