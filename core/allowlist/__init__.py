"""
Allowlist files and proof books.
"""

from .sources import load_addresses, parse_csv, parse_text
from .proof_book import build_proof_book, read_proof_book, write_proof_book

__all__ = [
    "load_addresses",
    "parse_text",
    "parse_csv",
    "build_proof_book",
    "write_proof_book",
    "read_proof_book",
]
