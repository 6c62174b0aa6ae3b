"""
Allowlist Commitment API (FastAPI)

HTTP API for handing out allowlist roots and proofs:
- POST /commitment - Root (and optionally all proofs) for an address list
- POST /proof - Proof for one address
- POST /verify - Check a proof against a root
- GET /allowlist/root - Root of the configured allowlist
- GET /allowlist/proof/{address} - Proof from the configured allowlist
- GET /health - Health check

Usage:
    uvicorn api.app:app --reload
"""

__version__ = "0.1.0"
