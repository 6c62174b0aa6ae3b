"""
Test fixtures package for allowlist commitment tests.

Usage:
    from fixtures.allowlist_fixtures import PRODUCTION_ADDRESSES, keccak_leaf
"""

from .allowlist_fixtures import (
    ADDR1,
    ADDR2,
    ADDR_A,
    ADDR_B,
    ADDR_C,
    ADDR_D,
    OWNER,
    PRODUCTION_ADDRESSES,
    TEAM,
    flip_byte,
    keccak_leaf,
    keccak_pair,
    make_addresses,
    make_allowlist_file,
)

__all__ = [
    "PRODUCTION_ADDRESSES",
    "OWNER",
    "ADDR1",
    "ADDR2",
    "TEAM",
    "ADDR_A",
    "ADDR_B",
    "ADDR_C",
    "ADDR_D",
    "make_addresses",
    "keccak_leaf",
    "keccak_pair",
    "flip_byte",
    "make_allowlist_file",
]
