"""
API Dependencies

Factories for configuration, builders and the configured allowlist.
Nothing is cached: every request sees the current config and files.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from api.errors import AllowlistNotConfiguredError
from core.allowlist import build_proof_book, load_addresses, read_proof_book
from core.config.runtime import ENV_PREFIX, RuntimeConfig
from core.merkle import AllowlistCommitmentBuilder
from core.schemas.commitment import AllowlistCommitment
from core.schemas.errors import ConfigurationError, UnsupportedHashError

logger = logging.getLogger(__name__)


def config_search_paths() -> list[Path]:
    """Config file locations, highest priority first."""
    paths: list[Path] = []
    explicit = os.getenv(f"{ENV_PREFIX}CONFIG")
    if explicit:
        paths.append(Path(explicit))
    paths.extend([
        Path.cwd() / "allowlist.config.yaml",
        Path.cwd() / "allowlist.config.json",
        Path.home() / ".config" / "allowlist" / "config.yaml",
    ])
    return paths


def load_runtime_config() -> RuntimeConfig:
    """Load RuntimeConfig from a config file, then overlay environment variables.

    Environment variables ALWAYS override config file values.
    The .env file is loaded automatically by core.config.runtime on import.

    Raises:
        ConfigurationError: If the file or an ALLOWLIST_* variable is invalid
    """
    config: RuntimeConfig | None = None

    try:
        for path in config_search_paths():
            if path.exists():
                logger.info(f"Loaded config from {path}")
                config = RuntimeConfig.from_file(path)
                break

        if config is None:
            config = RuntimeConfig()

        return config.with_env_overrides()
    except UnsupportedHashError as e:
        logger.error(f"Invalid server configuration: {e.message}")
        raise ConfigurationError(
            f"Invalid server configuration: {e.message}", details=e.details
        ) from e


def get_builder(hash_function: str | None = None) -> AllowlistCommitmentBuilder:
    """Builder for the requested hash, or the configured one when None."""
    if hash_function is None:
        hash_function = load_runtime_config().hash_function
    return AllowlistCommitmentBuilder(hash_function)


def get_configured_commitment() -> AllowlistCommitment:
    """
    The commitment for the server's own allowlist.

    A saved proof book wins over the raw allowlist file.

    Raises:
        AllowlistNotConfiguredError: If neither path is set
    """
    config = load_runtime_config()

    if config.proof_book_path and Path(config.proof_book_path).exists():
        return read_proof_book(config.proof_book_path)

    if config.allowlist_path:
        addresses = load_addresses(config.allowlist_path)
        return build_proof_book(addresses, config.hash_function)

    raise AllowlistNotConfiguredError()
