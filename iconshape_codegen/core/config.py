"""
Configuration management for icon generation.

Handles loading and merging configuration from JSON files,
providing defaults and validation for generator settings.
"""

import json
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Union


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""
    pass


@dataclass(frozen=True)
class FilterOptions:
    """Attribute filtering toggles applied while serializing child elements."""

    # Deny-list entries
    strip_id: bool = False
    strip_class: bool = False
    strip_fill: bool = False
    strip_stroke: bool = False

    # Overrides, checked before the deny-list
    g_force_fill_currentcolor: bool = False
    allow_fill_currentcolor: bool = False

    @property
    def denied_attributes(self) -> frozenset:
        """Attribute names removed from every element."""
        denied = set()
        if self.strip_id:
            denied.add("id")
        if self.strip_class:
            denied.add("class")
        if self.strip_fill:
            denied.add("fill")
        if self.strip_stroke:
            denied.add("stroke")
        return frozenset(denied)


@dataclass
class GeneratorConfig:
    """Configuration for a generation run."""

    # Identifier prefix for every generated struct, e.g. "Go" -> GoAlert
    prefix: str = ""

    # Dialect key; resolved from the prefix when not set
    dialect: Optional[str] = None

    # Output settings
    output_file: Optional[str] = None

    # Worker threads for per-file extraction
    jobs: int = 1

    filters: FilterOptions = field(default_factory=FilterOptions)


_FILTER_KEYS = {f.name for f in fields(FilterOptions)}
_CONFIG_KEYS = {f.name for f in fields(GeneratorConfig)}


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._defaults: Dict[str, Any] = {
            "prefix": "",
            "dialect": None,
            "output_file": None,
            "jobs": 1,
            "filters": {},
        }

    def get_config(self, custom_config: Optional[Dict[str, Any]] = None,
                   config_file: Optional[Union[str, Path]] = None) -> GeneratorConfig:
        """
        Get complete configuration.

        Args:
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration
        """
        base_config = dict(self._defaults)
        base_config["filters"] = dict(self._defaults["filters"])

        # Load from file if provided
        if config_file:
            self._merge(base_config, self._load_config_file(config_file))

        # Apply custom overrides
        if custom_config:
            self._merge(base_config, custom_config)

        return self._dict_to_config(base_config)

    def _merge(self, target: Dict[str, Any], source: Dict[str, Any]):
        """Merge source into target; filter toggles may be nested or flat."""
        for key, value in source.items():
            if key == "filters":
                if isinstance(value, FilterOptions):
                    value = asdict(value)
                if not isinstance(value, dict):
                    raise ConfigError("'filters' must be an object")
                target["filters"].update(value)
            elif key in _FILTER_KEYS:
                target["filters"][key] = value
            else:
                target[key] = value

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == '.json':
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Convert dictionary to GeneratorConfig instance."""
        unknown = sorted(set(config_dict) - _CONFIG_KEYS)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

        filter_args = config_dict.pop("filters")
        unknown_filters = sorted(set(filter_args) - _FILTER_KEYS)
        if unknown_filters:
            raise ConfigError(f"Unknown filter options: {', '.join(unknown_filters)}")

        for key, value in filter_args.items():
            if not isinstance(value, bool):
                raise ConfigError(f"Filter option '{key}' must be true or false")

        jobs = config_dict.get("jobs")
        if not isinstance(jobs, int) or isinstance(jobs, bool) or jobs < 1:
            raise ConfigError(f"'jobs' must be a positive integer, got {jobs!r}")

        prefix = config_dict.get("prefix")
        if not isinstance(prefix, str):
            raise ConfigError(f"'prefix' must be a string, got {prefix!r}")

        for key in ("dialect", "output_file"):
            value = config_dict.get(key)
            if value is not None and not isinstance(value, str):
                raise ConfigError(f"'{key}' must be a string, got {value!r}")

        return GeneratorConfig(filters=FilterOptions(**filter_args), **config_dict)

    def save_config(self, config: GeneratorConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)

        try:
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(asdict(config), f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {e}") from e

    def validate_config(self, config: GeneratorConfig) -> List[str]:
        """
        Validate configuration.

        Returns:
            List of validation warnings
        """
        warnings = []

        if config.prefix and not config.prefix[0].isalpha():
            warnings.append(
                f"Prefix '{config.prefix}' does not start with a letter; "
                "generated identifiers may be invalid"
            )

        filters = config.filters
        if filters.strip_fill and filters.g_force_fill_currentcolor:
            warnings.append(
                "g_force_fill_currentcolor overrides strip_fill on <g> elements"
            )

        return warnings


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(custom_config: Optional[Dict[str, Any]] = None,
                config_file: Optional[Union[str, Path]] = None) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration
    """
    manager = get_config_manager()
    return manager.get_config(custom_config, config_file)


# Example configuration file for reference
EXAMPLE_CONFIG = {
    "prefix": "Md",
    "dialect": "material",
    "jobs": 4,
    "filters": {
        "strip_id": True,
        "allow_fill_currentcolor": True,
    },
}
