"""
Configuration utility for the engine.
"""

import copy
import json
import logging
import os
import threading
from typing import Any, Dict, List, Optional

from ..errors import ConfigError
from ..grid.columns import GridConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "breakpoints": {
        "small": 480,
        "medium": 768,
        "large": 1024,
        "xlarge": 1280
    },
    "typography": {
        "base_font_size": 16,
        "base_line_height": 24,
        "use_unit_mixins": True
    },
    "grid": {
        "columns": 12,
        "gutters": False,
        "gutter_percent": 2
    },
    "naming": {
        "column": "col-",
        "push": "push-",
        "pull": "pull-",
        "gutters": "gutters"
    },
    "responsive": []
}


class Config:
    """Configuration for a stylesheet build."""

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration.

        Args:
            config_path: Path to a JSON config file, None for defaults only
        """
        self.config_path = config_path
        self.config = {}
        self._lock = threading.Lock()

        self.load()

        logger.debug(f"Configuration initialized (config_path: {config_path})")

    def load(self) -> None:
        """
        Load configuration from file, merged over the defaults.

        Raises:
            ConfigError: If the file exists but cannot be parsed
        """
        self._set_defaults()
        if not self.config_path or not os.path.exists(self.config_path):
            logger.debug(f"Configuration file not found at {self.config_path}, using defaults")
            return

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                loaded = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"Error loading configuration from {self.config_path}: {e}") from e

        if not isinstance(loaded, dict):
            raise ConfigError(f"Configuration in {self.config_path} must be a JSON object")

        with self._lock:
            for key, value in loaded.items():
                if isinstance(value, dict) and isinstance(self.config.get(key), dict):
                    self.config[key].update(value)
                else:
                    self.config[key] = value
        logger.debug(f"Configuration loaded from {self.config_path}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: Configuration key (can be nested using dots, e.g. 'grid.columns')
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
            key: Configuration key (can be nested using dots, e.g. 'grid.columns')
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

    def get_all(self) -> Dict[str, Any]:
        """
        Get all configuration values.

        Returns:
            Dict[str, Any]: Copy of all configuration values
        """
        with self._lock:
            return copy.deepcopy(self.config)

    def breakpoint_map(self) -> Dict[str, float]:
        """Get the breakpoint name to width mapping."""
        breakpoints = self.get("breakpoints", {})
        if not isinstance(breakpoints, dict):
            raise ConfigError("'breakpoints' must be an object of name to width")
        return dict(breakpoints)

    def grid_config(self) -> GridConfig:
        """
        Build the grid configuration.

        Returns:
            GridConfig: Validated grid configuration

        Raises:
            InvalidGridConfig: If the configured values are rejected
        """
        return GridConfig(
            self.get("grid.columns"),
            bool(self.get("grid.gutters", False)),
            self.get("grid.gutter_percent", 0),
        )

    def base_font_size(self) -> float:
        return self.get("typography.base_font_size")

    def base_line_height(self) -> float:
        return self.get("typography.base_line_height")

    def use_unit_mixins(self) -> bool:
        return bool(self.get("typography.use_unit_mixins", True))

    def naming(self) -> Dict[str, str]:
        return dict(self.get("naming", {}))

    def responsive_rules(self) -> List[Dict[str, Any]]:
        """
        Get the configured responsive rules.

        Each rule is an object with ``selector``, ``properties``, ``value``
        and an optional ``overrides`` object of breakpoint to value.

        Returns:
            List of rule dictionaries

        Raises:
            ConfigError: If a rule is missing a required key or has the wrong shape
        """
        rules = self.get("responsive", [])
        if not isinstance(rules, list):
            raise ConfigError("'responsive' must be a list of rules")
        for position, rule in enumerate(rules):
            if not isinstance(rule, dict):
                raise ConfigError(f"Responsive rule {position} must be an object")
            missing = [key for key in ("selector", "properties", "value") if key not in rule]
            if missing:
                raise ConfigError(f"Responsive rule {position} is missing {', '.join(missing)}")
            properties = rule["properties"]
            if not isinstance(properties, list) or not all(isinstance(p, str) for p in properties):
                raise ConfigError(f"Responsive rule {position}: 'properties' must be a list of property names")
            if not isinstance(rule.get("overrides", {}), dict):
                raise ConfigError(f"Responsive rule {position}: 'overrides' must be an object")
        return rules

    def _set_defaults(self) -> None:
        """Set default configuration values."""
        with self._lock:
            self.config = copy.deepcopy(DEFAULT_CONFIG)
