"""
FastAPI Application

Main application setup and configuration.

Usage:
    uvicorn api.app:app --reload

    # Or run directly
    python -m api.app
"""

import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import health, commitments, allowlist
from api.errors import (
    APIError,
    allowlist_error_handler,
    api_error_handler,
    generic_error_handler,
)
from core.schemas.errors import AllowlistException


# Configure logging, respects ALLOWLIST_LOG_LEVEL
logging.basicConfig(
    level=getattr(logging, os.getenv("ALLOWLIST_LOG_LEVEL", "INFO").upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="Allowlist Commitment API",
        description="""
Merkle allowlist roots and proofs for allowlist minting.

## Endpoints

- **POST /commitment** - Root for an address list
- **POST /proof** - Membership proof for one address
- **POST /verify** - Verify a proof against a root
- **GET /allowlist/root** - Root of the configured allowlist
- **GET /allowlist/proof/{address}** - Proof from the configured allowlist
- **GET /health** - Health check

## Commitment rules

Leaves are keccak256 of the 20 address bytes, sorted; pairs are sorted
before hashing; an odd node is carried up unchanged. Roots and proofs
verify with OpenZeppelin's `MerkleProof.verify`.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(AllowlistException, allowlist_error_handler)
    app.add_exception_handler(Exception, generic_error_handler)

    app.include_router(health.router)
    app.include_router(commitments.router)
    app.include_router(allowlist.router)

    return app


# Create the application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
