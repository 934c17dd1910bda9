"""
isovin Configuration - Centralized Settings
===========================================

All configurable parameters in one place.
Supports environment variable overrides and YAML/JSON files.

Usage:
    from isovin.config import get_config
    config = get_config()
    print(config.lookup.namespace)

Environment Variables:
    VIN_LOG_LEVEL=DEBUG
    VIN_LOG_FILE=/tmp/isovin.log
    VIN_WMI_NAMESPACE=ISO3780_WMI
    VIN_LOOKUP_PLACEHOLDER=?
    VIN_WMI_TABLE=/path/to/wmi_en.yaml
"""

import os
import json
import logging
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Optional, Dict, Any, Union

import yaml

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = ('.yaml', '.yml')


def _get_env_str(key: str, default: str) -> str:
    """Get string from environment variable."""
    return os.environ.get(key, default)


def _get_env_bool(key: str, default: bool) -> bool:
    """Get bool from environment variable."""
    value = os.environ.get(key)
    if value is not None:
        return value.lower() in ('true', '1', 'yes', 'on')
    return default


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = field(
        default_factory=lambda: _get_env_str('VIN_LOG_LEVEL', 'WARNING')
    )
    format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    date_format: str = '%Y-%m-%d %H:%M:%S'

    # File logging (optional)
    log_file: Optional[str] = field(
        default_factory=lambda: os.environ.get('VIN_LOG_FILE')
    )


@dataclass
class LookupConfig:
    """WMI lookup configuration."""

    namespace: str = field(
        default_factory=lambda: _get_env_str('VIN_WMI_NAMESPACE', 'ISO3780_WMI')
    )
    placeholder: str = field(
        default_factory=lambda: _get_env_str('VIN_LOOKUP_PLACEHOLDER', '?')
    )
    table_path: Optional[str] = field(
        default_factory=lambda: os.environ.get('VIN_WMI_TABLE')
    )


@dataclass
class VINConfig:
    """Complete isovin configuration."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    lookup: LookupConfig = field(default_factory=LookupConfig)

    # Include per-step correction notes in CLI proposal output
    show_corrections: bool = field(
        default_factory=lambda: _get_env_bool('VIN_SHOW_CORRECTIONS', False)
    )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    def save(self, path: Union[str, Path]):
        """Save configuration to a YAML or JSON file, chosen by suffix."""
        path = Path(path)
        with open(path, 'w', encoding='utf-8') as f:
            if path.suffix.lower() in _YAML_SUFFIXES:
                yaml.dump(self.to_dict(), f, default_flow_style=False, allow_unicode=True)
            else:
                json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, path: Union[str, Path]) -> 'VINConfig':
        """
        Load configuration from a YAML or JSON file.

        Unknown keys are ignored; missing keys keep their defaults.

        Raises:
            ConfigurationError: If the file cannot be read or parsed, or
                a section is not a mapping
        """
        path = Path(path)
        try:
            with open(path, encoding='utf-8') as f:
                if path.suffix.lower() in _YAML_SUFFIXES:
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except OSError as e:
            raise ConfigurationError(f"Cannot read config {path}: {e}") from e
        except (UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Cannot parse config {path}: {e}") from e

        data = data or {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config {path} must be a mapping")

        config = cls()

        # Update logging and lookup sections
        for name in ('logging', 'lookup'):
            if name not in data:
                continue
            section = data[name] or {}
            if not isinstance(section, dict):
                raise ConfigurationError(
                    f"Config section '{name}' in {path} must be a mapping, "
                    f"got {type(section).__name__}"
                )
            target = getattr(config, name)
            for key, value in section.items():
                if hasattr(target, key):
                    setattr(target, key, value)

        if 'show_corrections' in data:
            config.show_corrections = bool(data['show_corrections'])

        return config


# Global configuration instance (singleton pattern)
_config: Optional[VINConfig] = None


def get_config() -> VINConfig:
    """
    Get the global configuration instance.

    Creates a new instance on first call, returns cached instance thereafter.
    """
    global _config
    if _config is None:
        _config = VINConfig()
    return _config


def reset_config():
    """Reset configuration to defaults (useful for testing)."""
    global _config
    _config = None


def setup_logging(config: LoggingConfig):
    """Configure logging based on settings.

    The level may be a name ('DEBUG') or a numeric level (10), as YAML
    loads unquoted numbers as ints.
    """
    if isinstance(config.level, int):
        level = config.level
    else:
        level = getattr(logging, str(config.level).upper(), None)
    if not isinstance(level, int):
        logger.warning(f"Invalid log level {config.level!r}, using WARNING")
        level = logging.WARNING

    handlers = [logging.StreamHandler()]

    if config.log_file:
        handlers.append(logging.FileHandler(config.log_file))

    logging.basicConfig(
        level=level,
        format=config.format,
        datefmt=config.date_format,
        handlers=handlers,
    )
