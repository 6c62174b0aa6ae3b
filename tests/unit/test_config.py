"""
Runtime Configuration Tests
Tests for core/config/runtime.py and api/deps.py config loading
"""
import json

import pytest
import yaml

from api.deps import load_runtime_config
from core.config import RuntimeConfig, get_default_config, set_default_config
from core.schemas.errors import ConfigurationError, ErrorCodes, UnsupportedHashError


class TestDefaults:
    """Tests for default values."""

    def test_defaults(self):
        config = RuntimeConfig()

        assert config.hash_function == "keccak256"
        assert config.allowlist_path is None
        assert config.proof_book_path is None
        assert config.log_level == "INFO"

    def test_hash_function_normalized(self):
        assert RuntimeConfig(hash_function="SHA256").hash_function == "sha256"

    def test_unknown_hash_rejected(self):
        with pytest.raises(UnsupportedHashError):
            RuntimeConfig(hash_function="md5")

    def test_log_level_upper(self):
        assert RuntimeConfig(log_level="debug").log_level == "DEBUG"


class TestFromSources:
    """Tests for dict / file / env loading."""

    def test_from_dict_partial(self):
        config = RuntimeConfig.from_dict({"allowlist_path": "list.txt"})

        assert config.allowlist_path == "list.txt"
        assert config.hash_function == "keccak256"

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.safe_dump({"hash_function": "sha256", "log_level": "WARNING"}))

        config = RuntimeConfig.from_yaml(path)

        assert config.hash_function == "sha256"
        assert config.log_level == "WARNING"

    def test_from_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"proof_book_path": "book.json"}))

        assert RuntimeConfig.from_file(path).proof_book_path == "book.json"

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")

        assert RuntimeConfig.from_yaml(path) == RuntimeConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            RuntimeConfig.from_yaml(tmp_path / "missing.yaml")

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("ALLOWLIST_HASH_FUNCTION", "sha256")
        monkeypatch.setenv("ALLOWLIST_PATH", "/tmp/list.txt")
        monkeypatch.setenv("ALLOWLIST_LOG_LEVEL", "debug")

        config = RuntimeConfig.from_env()

        assert config.hash_function == "sha256"
        assert config.allowlist_path == "/tmp/list.txt"
        assert config.log_level == "DEBUG"

    def test_env_overrides_file(self, monkeypatch):
        base = RuntimeConfig.from_dict({"hash_function": "sha256", "allowlist_path": "a.txt"})
        monkeypatch.setenv("ALLOWLIST_PATH", "b.txt")

        config = base.with_env_overrides()

        assert config.allowlist_path == "b.txt"
        assert config.hash_function == "sha256"
        assert base.allowlist_path == "a.txt"

    def test_no_overrides_returns_same(self):
        config = RuntimeConfig()
        assert config.with_env_overrides() is config

    def test_to_dict_round_trip(self):
        config = RuntimeConfig(hash_function="sha256", allowlist_path="x.txt")
        assert RuntimeConfig.from_dict(config.to_dict()) == config


class TestDefaultConfig:
    """Tests for the process-wide default."""

    def test_set_and_get(self):
        config = RuntimeConfig(hash_function="sha256")
        set_default_config(config)

        assert get_default_config() is config

    def test_reset_reads_env(self, monkeypatch):
        monkeypatch.setenv("ALLOWLIST_HASH_FUNCTION", "sha256")
        set_default_config(None)

        assert get_default_config().hash_function == "sha256"


class TestApiConfigLoading:
    """Tests for api.deps.load_runtime_config()."""

    def test_defaults_without_file(self):
        assert load_runtime_config() == RuntimeConfig()

    def test_reads_config_in_cwd(self, tmp_path):
        (tmp_path / "allowlist.config.yaml").write_text(
            yaml.safe_dump({"hash_function": "sha256"})
        )
        assert load_runtime_config().hash_function == "sha256"

    def test_explicit_config_env(self, tmp_path, monkeypatch):
        path = tmp_path / "custom.json"
        path.write_text(json.dumps({"allowlist_path": "custom.txt"}))
        monkeypatch.setenv("ALLOWLIST_CONFIG", str(path))

        assert load_runtime_config().allowlist_path == "custom.txt"

    def test_env_beats_file(self, tmp_path, monkeypatch):
        (tmp_path / "allowlist.config.yaml").write_text(
            yaml.safe_dump({"hash_function": "sha256"})
        )
        monkeypatch.setenv("ALLOWLIST_HASH_FUNCTION", "keccak256")

        assert load_runtime_config().hash_function == "keccak256"

    def test_bad_hash_in_env_is_config_error(self, monkeypatch):
        monkeypatch.setenv("ALLOWLIST_HASH_FUNCTION", "md5")

        with pytest.raises(ConfigurationError) as exc_info:
            load_runtime_config()

        assert exc_info.value.code == ErrorCodes.CONFIG_ERROR
        assert exc_info.value.details["hash_function"] == "md5"

    def test_bad_hash_in_file_is_config_error(self, tmp_path):
        (tmp_path / "allowlist.config.yaml").write_text(
            yaml.safe_dump({"hash_function": "blake2b"})
        )
        with pytest.raises(ConfigurationError):
            load_runtime_config()


class TestMalformedConfigFiles:
    """Config files that are not a mapping, or do not parse."""

    def test_yaml_list(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ConfigurationError, match="mapping") as exc_info:
            RuntimeConfig.from_yaml(path)

        assert exc_info.value.details["path"] == str(path)

    def test_json_scalar(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("42")

        with pytest.raises(ConfigurationError, match="int"):
            RuntimeConfig.from_json(path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("hash_function: [unclosed\n")

        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            RuntimeConfig.from_yaml(path)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json")

        with pytest.raises(ConfigurationError, match="Invalid JSON"):
            RuntimeConfig.from_json(path)

    def test_from_dict_rejects_list(self):
        with pytest.raises(ConfigurationError):
            RuntimeConfig.from_dict(["hash_function"])
