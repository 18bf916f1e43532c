"""
Configuration management for textseal.

Settings live in a small JSON file inside the configuration directory
($TEXTSEAL_HOME, or ~/.textseal by default). A missing file means defaults.
No key material is ever stored here.
"""

import json
import logging
import os
from typing import Optional

from .crypto.errors import UnsupportedOperation
from .crypto.keys import AlgorithmTag


CONFIG_ENV_VAR = "TEXTSEAL_HOME"
CONFIG_FILE_NAME = "config.json"

DEFAULTS = {
    "default_format": "blake3",
    "key_dir": ".",
    "strict_key_length": False,
    "log_level": "WARNING",
}


class ConfigError(Exception):
    """Raised when configuration operations fail."""
    pass


class TextSealConfig:
    """
    Configuration manager for textseal.

    Attributes:
        default_format: Algorithm used when a command does not name one
        key_dir: Default output directory for generated keys
        strict_key_length: Require key files of exactly 32 bytes
        log_level: Logging level name for the command line
    """

    def __init__(self, config_dir: Optional[str] = None):
        """
        Initialize configuration with defaults.

        Args:
            config_dir: Directory for configuration files. Defaults to
                $TEXTSEAL_HOME or ~/.textseal/
        """
        if config_dir is None:
            config_dir = os.environ.get(CONFIG_ENV_VAR) or os.path.expanduser("~/.textseal")

        self.config_dir = config_dir
        self.config_file_path = os.path.join(config_dir, CONFIG_FILE_NAME)

        self.default_format = AlgorithmTag.parse(DEFAULTS["default_format"])
        self.key_dir = DEFAULTS["key_dir"]
        self.strict_key_length = DEFAULTS["strict_key_length"]
        self.log_level = DEFAULTS["log_level"]

    @classmethod
    def load(cls, config_dir: Optional[str] = None) -> 'TextSealConfig':
        """
        Load configuration from disk, falling back to defaults.

        Raises:
            ConfigError: If the file exists but cannot be read or is invalid
        """
        config = cls(config_dir)
        if not os.path.exists(config.config_file_path):
            return config

        try:
            with open(config.config_file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {config.config_file_path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to read {config.config_file_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError("Configuration file must contain a JSON object")

        config.update(data)
        return config

    def update(self, data: dict) -> None:
        """
        Apply settings from a dictionary.

        Raises:
            ConfigError: If a key is unknown or a value is invalid
        """
        unknown = set(data) - set(DEFAULTS)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")

        if "default_format" in data:
            try:
                self.default_format = AlgorithmTag.parse(data["default_format"])
            except UnsupportedOperation as e:
                raise ConfigError(f"Invalid default_format: {e}") from e

        if "key_dir" in data:
            if not isinstance(data["key_dir"], str) or not data["key_dir"]:
                raise ConfigError("key_dir must be a non-empty string")
            self.key_dir = data["key_dir"]

        if "strict_key_length" in data:
            if not isinstance(data["strict_key_length"], bool):
                raise ConfigError("strict_key_length must be true or false")
            self.strict_key_length = data["strict_key_length"]

        if "log_level" in data:
            level = data["log_level"]
            if not isinstance(level, str) or not isinstance(logging.getLevelName(level.upper()), int):
                raise ConfigError(f"Invalid log_level: {level}")
            self.log_level = level.upper()

    def to_dict(self) -> dict:
        """Return settings as a JSON-serializable dictionary."""
        return {
            "default_format": self.default_format.value,
            "key_dir": self.key_dir,
            "strict_key_length": self.strict_key_length,
            "log_level": self.log_level,
        }

    def save(self) -> None:
        """
        Write settings to the configuration file.

        Raises:
            ConfigError: If the file cannot be written
        """
        try:
            os.makedirs(self.config_dir, exist_ok=True)
            with open(self.config_file_path, 'w', encoding='utf-8') as f:
                json.dump(self.to_dict(), f, indent=2)
                f.write("\n")
        except OSError as e:
            raise ConfigError(f"Failed to save configuration: {e}") from e

    def exists(self) -> bool:
        """Check if a configuration file exists."""
        return os.path.exists(self.config_file_path)
