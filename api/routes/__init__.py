"""API route handlers."""

from api.routes import health, commitments, allowlist

__all__ = ["health", "commitments", "allowlist"]
