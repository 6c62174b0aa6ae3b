"""
Runtime Configuration

Central configuration for allowlist commitments and the proof API.
"""

from __future__ import annotations

import copy
import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from core.crypto.hashing import DEFAULT_HASH_FUNCTION, get_hasher
from core.schemas.errors import ConfigurationError

load_dotenv()


ENV_PREFIX = "ALLOWLIST_"


@dataclass
class RuntimeConfig:
    """
    Complete runtime configuration.

    Can be loaded from:
    - Environment variables (ALLOWLIST_* prefix, .env honoured)
    - YAML or JSON file
    - Programmatic construction
    """
    hash_function: str = DEFAULT_HASH_FUNCTION
    allowlist_path: Optional[str] = None
    proof_book_path: Optional[str] = None
    log_level: str = "INFO"
    extra: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Fail early on a bad hash name
        self.hash_function = get_hasher(self.hash_function).name
        self.log_level = self.log_level.upper()

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - ALLOWLIST_HASH_FUNCTION: keccak256 or sha256
        - ALLOWLIST_PATH: allowlist file served by the API
        - ALLOWLIST_PROOF_BOOK_PATH: where proof books are written
        - ALLOWLIST_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR
        """
        overrides: dict[str, Any] = {}

        if os.getenv(f"{ENV_PREFIX}HASH_FUNCTION"):
            overrides["hash_function"] = os.getenv(f"{ENV_PREFIX}HASH_FUNCTION")
        if os.getenv(f"{ENV_PREFIX}PATH"):
            overrides["allowlist_path"] = os.getenv(f"{ENV_PREFIX}PATH")
        if os.getenv(f"{ENV_PREFIX}PROOF_BOOK_PATH"):
            overrides["proof_book_path"] = os.getenv(f"{ENV_PREFIX}PROOF_BOOK_PATH")
        if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
            overrides["log_level"] = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")

        return overrides

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        """
        Load configuration purely from environment variables.

        Uses defaults for any values not specified in env vars.
        """
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_yaml(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a YAML file."""
        import yaml
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML config: {e}", path=str(path)) from e

        return cls.from_dict(data, source=str(path))

    @classmethod
    def from_json(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a JSON file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigurationError(f"Invalid JSON config: {e}", path=str(path)) from e

        return cls.from_dict(data, source=str(path))

    @classmethod
    def from_file(cls, path: str | Path) -> "RuntimeConfig":
        """Load from YAML or JSON depending on the file suffix."""
        if Path(path).suffix.lower() == ".json":
            return cls.from_json(path)
        return cls.from_yaml(path)

    @classmethod
    def from_dict(cls, data: dict[str, Any], source: str | None = None) -> "RuntimeConfig":
        """
        Load configuration from a dictionary (supports partial data).

        Raises:
            ConfigurationError: If data is not a mapping
        """
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Config must be a mapping, got {type(data).__name__}", path=source
            )
        return cls(
            hash_function=data.get("hash_function") or DEFAULT_HASH_FUNCTION,
            allowlist_path=data.get("allowlist_path"),
            proof_book_path=data.get("proof_book_path"),
            log_level=data.get("log_level") or "INFO",
            extra=data.get("extra", {}),
        )

    def with_env_overrides(self) -> "RuntimeConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        new_config = copy.deepcopy(self)
        for key, value in overrides.items():
            setattr(new_config, key, value)
        new_config.__post_init__()
        return new_config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "hash_function": self.hash_function,
            "allowlist_path": self.allowlist_path,
            "proof_book_path": self.proof_book_path,
            "log_level": self.log_level,
            "extra": self.extra,
        }


# Global default configuration
_default_config: Optional[RuntimeConfig] = None


def get_default_config() -> RuntimeConfig:
    """Get the default runtime configuration."""
    global _default_config
    if _default_config is None:
        _default_config = RuntimeConfig.from_env()
    return _default_config


def set_default_config(config: Optional[RuntimeConfig]) -> None:
    """Set the default runtime configuration (None resets to env)."""
    global _default_config
    _default_config = config
