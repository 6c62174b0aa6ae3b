"""
Schemas - Addresses
File: address.py

Purpose: Normalize participant addresses to their canonical 20-byte form.

Rules:
- Hex strings are accepted with or without 0x, in any letter case
- Surrounding whitespace is ignored
- Raw bytes must be exactly 20 long
- Checksums are NOT enforced: lower-case and mixed-case input for the
  same address normalize to the same bytes
"""

from __future__ import annotations

from typing import Any, Iterable

from eth_utils import is_hex_address, to_canonical_address, to_checksum_address

from .errors import InvalidAddressError


ADDRESS_SIZE = 20


def normalize_address(value: Any) -> bytes:
    """
    Normalize an address to its canonical 20 bytes.

    Args:
        value: 0x-prefixed or bare 40-char hex string, or 20 raw bytes

    Returns:
        20-byte canonical address

    Raises:
        InvalidAddressError: If the value is not a 20-byte address
    """
    if isinstance(value, (bytes, bytearray)):
        if len(value) != ADDRESS_SIZE:
            raise InvalidAddressError(value, {"expected_length": ADDRESS_SIZE})
        return bytes(value)

    if isinstance(value, str):
        candidate = value.strip()
        if candidate[:2].lower() == "0x":
            candidate = candidate[2:]
        candidate = "0x" + candidate.lower()
        if is_hex_address(candidate):
            return to_canonical_address(candidate)

    raise InvalidAddressError(value)


def checksum_address(value: Any) -> str:
    """Return the EIP-55 checksum form of an address."""
    return to_checksum_address(normalize_address(value))


def normalize_addresses(values: Iterable[Any]) -> list[bytes]:
    """
    Normalize many addresses, dropping duplicates.

    Output is sorted so the result does not depend on input order.
    """
    return sorted({normalize_address(v) for v in values})


__all__ = [
    "ADDRESS_SIZE",
    "normalize_address",
    "checksum_address",
    "normalize_addresses",
]
