"""
Configuration management for the TDL editor.

Handles loading and merging configuration from JSON files, providing
defaults and validation for editor settings.
"""

import json
import logging
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .errors import ConfigError
from .generator import DEFAULT_KIND, is_known_kind
from .output import DEFAULT_FILENAME


@dataclass
class EditorConfig:
    """Settings shared by the CLI and the interactive editor."""

    # Output settings
    output_file: str = DEFAULT_FILENAME

    # Builder defaults
    default_kind: str = DEFAULT_KIND

    # Logging
    log_level: Union[str, int] = "WARNING"
    log_file: Optional[str] = None

    # Unrecognised settings from config files
    custom: Dict[str, Any] = field(default_factory=dict)


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager with built-in defaults."""
        self._defaults: Dict[str, Any] = asdict(EditorConfig())

    def get_config(
        self,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> EditorConfig:
        """
        Get the complete editor configuration.

        Defaults are overlaid with the config file, then with explicit
        overrides. ``None`` values in overrides are ignored so unset CLI
        options do not mask file settings.

        Args:
            custom_config: Configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration
        """
        base_config = dict(self._defaults)
        base_config["custom"] = {}

        if config_file:
            base_config.update(self._load_config_file(config_file))

        if custom_config:
            base_config.update(
                {key: value for key, value in custom_config.items() if value is not None}
            )

        return self._dict_to_config(base_config)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if path.suffix.lower() != ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> EditorConfig:
        """Convert dictionary to EditorConfig instance."""
        known_fields = {f.name for f in fields(EditorConfig)}

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        if custom_args:
            existing_custom = dict(config_args.get("custom") or {})
            existing_custom.update(custom_args)
            config_args["custom"] = existing_custom

        return EditorConfig(**config_args)

    def save_config(self, config: EditorConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)

        config_dict = asdict(config)
        custom = config_dict.pop("custom")
        config_dict.update(custom)

        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(config_dict, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {e}") from e

    def validate_config(self, config: EditorConfig) -> List[str]:
        """
        Validate configuration values.

        Returns:
            List of validation warnings
        """
        warnings = []

        if not is_known_kind(config.default_kind):
            warnings.append(f"Unknown default_kind: {config.default_kind}")

        level = config.log_level
        if isinstance(level, str):
            level = logging.getLevelName(level.upper())
        if not isinstance(level, int) or isinstance(level, bool):
            warnings.append(f"Unknown log_level: {config.log_level}")

        if not config.output_file:
            warnings.append("output_file must not be empty")

        return warnings


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> EditorConfig:
    """
    Convenience function to load configuration.

    Args:
        custom_config: Configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration
    """
    return get_config_manager().get_config(custom_config, config_file)
