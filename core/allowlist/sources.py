"""
Allowlist Sources
File: sources.py

Purpose: Read allowlist address files from disk.

Supported formats (chosen by file suffix):
- .txt            one address per line; blank lines and '#' comments ignored
- .csv            address in the first column; a header row and any
                  further columns (amounts, notes) are ignored
- .json           ["0x..", ...] or {"addresses": ["0x..", ...]}
- .yaml / .yml    same shapes as JSON

Addresses are returned exactly as written; normalization happens when
the tree is built.
"""

from __future__ import annotations

import csv
import io
import json
import logging
from pathlib import Path
from typing import Any

import yaml

from core.schemas.errors import AllowlistSourceError


logger = logging.getLogger(__name__)

TEXT_SUFFIXES = (".txt",)
CSV_SUFFIXES = (".csv",)
JSON_SUFFIXES = (".json",)
YAML_SUFFIXES = (".yaml", ".yml")


def parse_text(content: str) -> list[str]:
    """Parse the one-address-per-line text format."""
    addresses: list[str] = []
    for line in content.splitlines():
        entry = line.split("#", 1)[0].strip().rstrip(",")
        if entry:
            addresses.append(entry)
    return addresses


def _is_header_cell(cell: str) -> bool:
    # Bare 40-char hex is an address too
    return not cell.lower().startswith("0x") and len(cell) != 40


def parse_csv(content: str) -> list[str]:
    """Parse a CSV allowlist, taking the address from the first column."""
    addresses: list[str] = []
    first_row = True
    for row in csv.reader(io.StringIO(content)):
        cell = row[0].strip() if row else ""
        if not cell or cell.startswith("#"):
            continue
        if first_row:
            first_row = False
            if _is_header_cell(cell):
                continue
        addresses.append(cell)
    return addresses


def _extract_addresses(data: Any, path: str) -> list[str]:
    if isinstance(data, dict):
        if "addresses" not in data:
            raise AllowlistSourceError(
                "Allowlist mapping must have an 'addresses' key", path=path
            )
        data = data["addresses"]

    if not isinstance(data, list):
        raise AllowlistSourceError(
            f"Allowlist must be a list of addresses, got {type(data).__name__}",
            path=path,
        )

    for i, item in enumerate(data):
        if not isinstance(item, str):
            raise AllowlistSourceError(
                f"Allowlist entry {i} must be a string, got {type(item).__name__}",
                path=path,
                details={"index": i},
            )
    return list(data)


def load_addresses(path: str | Path) -> list[str]:
    """
    Load allowlist addresses from a file.

    Args:
        path: Path to a .txt, .csv, .json, .yaml or .yml file

    Returns:
        Addresses in file order

    Raises:
        AllowlistSourceError: Missing file, unknown suffix, or bad shape
    """
    path = Path(path)
    if not path.exists():
        raise AllowlistSourceError(f"Allowlist file not found: {path}", path=str(path))

    suffix = path.suffix.lower()
    content = path.read_text(encoding="utf-8")

    if suffix in TEXT_SUFFIXES:
        addresses = parse_text(content)
    elif suffix in CSV_SUFFIXES:
        addresses = parse_csv(content)
    elif suffix in JSON_SUFFIXES:
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise AllowlistSourceError(f"Invalid JSON: {e}", path=str(path)) from e
        addresses = _extract_addresses(data, str(path))
    elif suffix in YAML_SUFFIXES:
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise AllowlistSourceError(f"Invalid YAML: {e}", path=str(path)) from e
        addresses = _extract_addresses(data, str(path))
    else:
        raise AllowlistSourceError(
            f"Unsupported allowlist file type: {suffix or '(none)'}",
            path=str(path),
        )

    logger.info(f"Loaded {len(addresses)} allowlist entries from {path}")
    return addresses


__all__ = [
    "parse_text",
    "parse_csv",
    "load_addresses",
]
