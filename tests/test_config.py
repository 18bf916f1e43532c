"""
Tests for configuration management.
"""

import json

import pytest

from textseal.config import CONFIG_ENV_VAR, ConfigError, TextSealConfig
from textseal.crypto.keys import AlgorithmTag


def write_config(directory, data) -> None:
    (directory / "config.json").write_text(json.dumps(data), encoding="utf-8")


class TestTextSealConfig:
    """Test loading and saving settings."""

    def test_defaults_when_missing(self, tmp_path):
        """Test defaults apply without a config file."""
        config = TextSealConfig.load(str(tmp_path))
        assert config.default_format is AlgorithmTag.BLAKE3
        assert config.key_dir == "."
        assert config.strict_key_length is False
        assert config.log_level == "WARNING"
        assert not config.exists()

    def test_load_values(self, tmp_path):
        """Test loading values from config.json."""
        write_config(tmp_path, {
            "default_format": "ed25519",
            "key_dir": "/tmp/keys",
            "strict_key_length": True,
            "log_level": "debug",
        })
        config = TextSealConfig.load(str(tmp_path))
        assert config.default_format is AlgorithmTag.ED25519
        assert config.key_dir == "/tmp/keys"
        assert config.strict_key_length is True
        assert config.log_level == "DEBUG"

    def test_env_var_directory(self, tmp_path, monkeypatch):
        """Test TEXTSEAL_HOME selects the directory."""
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path))
        write_config(tmp_path, {"default_format": "chacha20"})
        assert TextSealConfig.load().default_format is AlgorithmTag.CHACHA20

    def test_invalid_json(self, tmp_path):
        """Test invalid JSON raises ConfigError."""
        (tmp_path / "config.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigError):
            TextSealConfig.load(str(tmp_path))

    def test_not_an_object(self, tmp_path):
        """Test a non-object document raises ConfigError."""
        write_config(tmp_path, ["blake3"])
        with pytest.raises(ConfigError):
            TextSealConfig.load(str(tmp_path))

    @pytest.mark.parametrize("data", [
        {"default_format": "rsa"},
        {"strict_key_length": "yes"},
        {"key_dir": ""},
        {"log_level": "LOUD"},
        {"unknown": 1},
    ])
    def test_invalid_values(self, tmp_path, data):
        """Test invalid setting values are rejected."""
        write_config(tmp_path, data)
        with pytest.raises(ConfigError):
            TextSealConfig.load(str(tmp_path))

    def test_save_and_reload(self, tmp_path):
        """Test save then load round trip."""
        directory = tmp_path / "nested"
        config = TextSealConfig(str(directory))
        config.update({"default_format": "ed25519", "strict_key_length": True})
        config.save()

        assert config.exists()
        reloaded = TextSealConfig.load(str(directory))
        assert reloaded.to_dict() == config.to_dict()
