"""
Pytest configuration and shared fixtures for allowlist commitment tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Keeps ALLOWLIST_* environment variables from leaking into tests
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

from fixtures.allowlist_fixtures import (  # noqa: E402
    ADDR1,
    OWNER,
    PRODUCTION_ADDRESSES,
    make_allowlist_file,
)
from core.config.runtime import set_default_config  # noqa: E402


_ENV_VARS = [
    "ALLOWLIST_HASH_FUNCTION",
    "ALLOWLIST_PATH",
    "ALLOWLIST_PROOF_BOOK_PATH",
    "ALLOWLIST_LOG_LEVEL",
    "ALLOWLIST_CONFIG",
]


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from ALLOWLIST_* env vars and config files in cwd or ~."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    set_default_config(None)
    yield
    set_default_config(None)


@pytest.fixture
def production_addresses():
    """The allowlist shipped with the deployment scripts."""
    return list(PRODUCTION_ADDRESSES)


@pytest.fixture
def signer_addresses():
    """Owner and addr1, the allowlist used by the mint tests."""
    return [OWNER, ADDR1]


@pytest.fixture
def allowlist_file(tmp_path):
    """A text allowlist file holding the production addresses."""
    return make_allowlist_file(tmp_path)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
