import os
import copy
import yaml
from typing import Dict, Any, Optional
import logging

logger = logging.getLogger(__name__)

# Default configuration
DEFAULT_CONFIG = {
    "relation": {
        "wildcard": "*",
        "strict_arity": False
    },
    "display": {
        "separator": ", ",
        "not_found": "Relation not found"
    },
    "logging": {
        "level": "WARNING"
    }
}

class Config:
    """Configuration manager for the relational calculator."""

    _instance = None
    _config_dict = None
    _config_file = None

    @classmethod
    def get_instance(cls) -> 'Config':
        """Get the singleton instance of Config."""
        if cls._instance is None:
            cls._instance = Config()
        return cls._instance

    def __init__(self):
        """Initialize with default configuration."""
        if Config._instance is not None:
            raise RuntimeError("Config is a singleton. Use Config.get_instance() instead.")
        self._config_dict = copy.deepcopy(DEFAULT_CONFIG)

    def load_from_file(self, config_file: str) -> None:
        """Load configuration from a YAML file."""
        if not os.path.exists(config_file):
            logger.warning(f"Config file {config_file} not found. Using default configuration.")
            return

        with open(config_file, 'r') as f:
            loaded = yaml.safe_load(f)

        if not loaded:
            logger.warning("Empty config file. Using default configuration.")
            return

        if not isinstance(loaded, dict):
            raise ValueError(f"Config file {config_file} must contain a mapping, got {type(loaded).__name__}")

        # Update configuration, maintaining defaults for missing values
        self._update_dict_recursive(self._config_dict, loaded)
        self._config_file = config_file
        logger.info(f"Loaded configuration from {config_file}")

    def _update_dict_recursive(self, target: Dict, source: Dict) -> None:
        """Recursively update a dictionary, preserving keys not in source."""
        for key, value in source.items():
            if key in target and isinstance(target[key], dict) and isinstance(value, dict):
                self._update_dict_recursive(target[key], value)
            else:
                target[key] = value

    def get(self, path: str, default: Any = None) -> Any:
        """Get configuration value by dot-notation path."""
        parts = path.split('.')
        current = self._config_dict

        for part in parts:
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default

        return current

    def set(self, path: str, value: Any) -> None:
        """Set configuration value by dot-notation path."""
        parts = path.split('.')
        current = self._config_dict

        # Navigate to the parent of the target
        for part in parts[:-1]:
            if part not in current or not isinstance(current[part], dict):
                current[part] = {}
            current = current[part]

        current[parts[-1]] = value

    def reset(self) -> None:
        """Drop every override and return to the defaults."""
        self._config_dict = copy.deepcopy(DEFAULT_CONFIG)
        self._config_file = None

    def get_wildcard(self) -> str:
        """Token matching any value in a selection condition."""
        return self.get('relation.wildcard', '*')

    def is_strict_arity(self) -> bool:
        return bool(self.get('relation.strict_arity', False))

    def get_separator(self) -> str:
        return self.get('display.separator', ', ')

    def get_not_found_message(self) -> str:
        return self.get('display.not_found', 'Relation not found')

    def get_log_level(self) -> int:
        """Resolve `logging.level` (a name or a number) to a logging level."""
        level = self.get('logging.level', 'WARNING')
        if isinstance(level, int):
            return level
        resolved = logging.getLevelName(str(level).upper())
        if not isinstance(resolved, int):
            logger.warning(f"Unknown log level {level!r}. Falling back to WARNING.")
            return logging.WARNING
        return resolved

    def save(self, config_file: Optional[str] = None) -> None:
        """Save current configuration to a YAML file."""
        file_path = config_file or self._config_file

        if not file_path:
            logger.warning("No config file specified for saving.")
            return

        with open(file_path, 'w') as f:
            yaml.dump(self._config_dict, f, default_flow_style=False)
        logger.info(f"Saved configuration to {file_path}")

# Singleton instance
config = Config.get_instance()
