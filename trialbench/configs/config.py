"""Configuration management system for trialbench."""

from dataclasses import asdict
from typing import Any

from trialbench.configs.config_io import PathLike, load_config_file, save_config_file


class Config:
    """Unified configuration container for trialbench."""

    def __init__(self, config_dict: dict[str, Any] | None = None):
        """Initialize configuration.

        Args:
            config_dict: Optional dictionary to use as base (shallow copy)
        """
        self.config = (config_dict or {}).copy()

    def update(self, config_dict: dict[str, Any]) -> None:
        """Update configuration with provided values.

        Nested dicts are merged one level deep; other values are replaced.
        """
        for key, value in config_dict.items():
            if isinstance(self.config.get(key), dict) and isinstance(value, dict):
                self.config[key] = {**self.config[key], **value}
            else:
                self.config[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by dotted key (e.g. 'benchmark.trials')."""
        value = self.config
        for k in key.split("."):
            if isinstance(value, dict):
                value = value.get(k)
            else:
                return default
        return value if value is not None else default

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        result = {}
        for key, value in self.config.items():
            if hasattr(value, "__dataclass_fields__"):
                result[key] = asdict(value)
            else:
                result[key] = value
        return result


class ConfigManager:
    """Manages loading and saving configuration files."""

    @staticmethod
    def load(filepath: PathLike) -> Config:
        """Load configuration from a YAML or JSON file."""
        return Config(load_config_file(filepath))

    @staticmethod
    def save(config: Config, filepath: PathLike) -> None:
        """Save configuration (dataclass sections expanded) to YAML or JSON."""
        save_config_file(filepath, config.to_dict())

    @staticmethod
    def load_or_default(
        filepath: PathLike | None = None,
        default_config: dict[str, Any] | None = None,
    ) -> Config:
        """Load configuration from file layered over defaults.

        Args:
            filepath: Optional path to a .yaml/.yml/.json configuration file
            default_config: Optional default config dict

        Returns:
            Config object (defaults updated with file contents)

        Raises:
            ConfigError: If filepath is given but cannot be loaded
        """
        base = Config(default_config or {})
        if filepath:
            base.update(ConfigManager.load(filepath).config)
        return base
