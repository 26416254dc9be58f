"""
Configuration utility for the attribute engine.
"""

import copy
import json
import logging
import os
import threading
from typing import Any, Dict, Optional

from html_attributes.exceptions import ConfigError
from html_attributes.parser.attr_parser import AttributeParser
from html_attributes.utils.logging import resolve_level

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "parser": {
        "bare_tokens": "flag",
        "quote_chars": "'\""
    },
    "logging": {
        "console_level": "WARNING",
        "log_file": None
    }
}


def default_config_path() -> str:
    """Return ~/.wink_attributes/config.json."""
    return os.path.join(os.path.expanduser("~"), ".wink_attributes", "config.json")


class Config:
    """JSON backed configuration with dotted key access."""

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to the config file (defaults to ~/.wink_attributes/config.json)
        """
        self.config_path = config_path or default_config_path()
        self.config: Dict[str, Any] = {}
        self._lock = threading.Lock()

        self.load()

        logger.debug(f"Configuration initialized (config_path: {self.config_path})")

    def load(self) -> None:
        """Load configuration from file, falling back to defaults."""
        self._set_defaults()
        if not os.path.exists(self.config_path):
            logger.debug(f"Configuration file not found at {self.config_path}, using defaults")
            return

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Error loading configuration: {e}")
            return

        if not isinstance(loaded, dict):
            logger.error(f"Ignoring configuration in {self.config_path}: top level is not an object")
            return

        with self._lock:
            _merge(self.config, loaded)
        logger.debug(f"Configuration loaded from {self.config_path}")

    def save(self) -> None:
        """Save configuration to file."""
        with self._lock:
            config_copy = copy.deepcopy(self.config)

        config_dir = os.path.dirname(self.config_path)
        if config_dir:
            os.makedirs(config_dir, exist_ok=True)

        with open(self.config_path, 'w', encoding='utf-8') as f:
            json.dump(config_copy, f, indent=4)

        logger.debug(f"Configuration saved to {self.config_path}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: Configuration key (can be nested using dots, e.g. 'parser.bare_tokens')
            default: Default value if key doesn't exist

        Returns:
            Any: Configuration value or default
        """
        with self._lock:
            config = self.config
            parts = key.split('.')
            for part in parts[:-1]:
                if part not in config or not isinstance(config[part], dict):
                    return default
                config = config[part]
            return config.get(parts[-1], default)

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value.

        Args:
            key: Configuration key (can be nested using dots)
            value: Configuration value
        """
        with self._lock:
            config = self.config
            parts = key.split('.')
            for part in parts[:-1]:
                if not isinstance(config.get(part), dict):
                    config[part] = {}
                config = config[part]
            config[parts[-1]] = value

    def remove(self, key: str) -> bool:
        """
        Remove a configuration value.

        Args:
            key: Configuration key

        Returns:
            bool: True if key was removed
        """
        with self._lock:
            config = self.config
            parts = key.split('.')
            for part in parts[:-1]:
                if part not in config or not isinstance(config[part], dict):
                    return False
                config = config[part]

            if parts[-1] in config:
                del config[parts[-1]]
                return True
            return False

    def get_all(self) -> Dict[str, Any]:
        with self._lock:
            return copy.deepcopy(self.config)

    def create_parser(self) -> AttributeParser:
        """
        Build an attribute parser from the ``parser.*`` settings.

        Returns:
            AttributeParser: Configured parser

        Raises:
            ConfigError: If a parser setting is invalid
        """
        quote_chars = self.get("parser.quote_chars", DEFAULT_CONFIG["parser"]["quote_chars"])
        if not isinstance(quote_chars, str):
            raise ConfigError(f"parser.quote_chars must be a string, got {type(quote_chars).__name__}")
        return AttributeParser(
            bare_tokens=self.get("parser.bare_tokens", DEFAULT_CONFIG["parser"]["bare_tokens"]),
            quote_chars=quote_chars
        )

    def logging_options(self) -> Dict[str, Any]:
        """
        Read the ``logging.*`` settings as keyword arguments for setup_logging.

        Returns:
            Dict[str, Any]: ``log_file`` and ``console_level``

        Raises:
            ConfigError: If a logging setting has the wrong type
        """
        log_file = self.get("logging.log_file")
        if log_file is not None and not isinstance(log_file, str):
            raise ConfigError(f"logging.log_file must be a path or null, got {type(log_file).__name__}")

        console_level = self.get("logging.console_level", DEFAULT_CONFIG["logging"]["console_level"])
        try:
            resolve_level(console_level, logging.WARNING)
        except TypeError as e:
            raise ConfigError(f"logging.console_level: {e}") from e

        return {"log_file": log_file, "console_level": console_level}

    def _set_defaults(self) -> None:
        with self._lock:
            self.config = copy.deepcopy(DEFAULT_CONFIG)


def _merge(target: Dict[str, Any], source: Dict[str, Any]) -> None:
    """Recursively merge ``source`` into ``target``."""
    for key, value in source.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            _merge(target[key], value)
        else:
            target[key] = value
