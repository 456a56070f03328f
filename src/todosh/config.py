"""Configuration management for the todosh application."""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "~/.todosh/config.yaml"
CONFIG_ENV_VAR = "TODOSH_CONFIG"
TABLE_STYLES = ("rounded", "simple", "ascii", "square")


@dataclass
class ConfigModel:
    """Global configuration model for todosh."""

    # Storage
    database_path: str = "data/db.csv"

    # Display preferences
    show_completed: bool = True
    table_style: str = "rounded"  # rounded, simple, ascii, square
    no_color: bool = False

    # Diagnostics
    log_level: str = "WARNING"

    def __post_init__(self):
        """Post-initialization setup."""
        self.database_path = os.path.expanduser(str(self.database_path))

        if self.table_style not in TABLE_STYLES:
            logger.warning(
                "Unknown table style %r, using 'rounded'", self.table_style
            )
            self.table_style = "rounded"

        self.log_level = str(self.log_level).upper()

    def to_yaml(self) -> str:
        """Serialize config to YAML."""
        data = {
            "database_path": self.database_path,
            "show_completed": self.show_completed,
            "table_style": self.table_style,
            "no_color": self.no_color,
            "log_level": self.log_level,
        }
        return yaml.dump(data, default_flow_style=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ConfigModel":
        """Deserialize config from YAML."""
        data = yaml.safe_load(yaml_str) or {}
        if not isinstance(data, dict):
            raise ValueError("config file must contain a mapping")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning("Ignoring unknown config keys: %s", ", ".join(unknown))

        return cls(**{key: value for key, value in data.items() if key in known})


def get_config_path() -> Path:
    """Get the config file path, honouring the TODOSH_CONFIG variable."""
    return Path(os.path.expanduser(os.environ.get(CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH)))


class Config:
    """Configuration manager for todosh."""

    _instance: Optional[ConfigModel] = None

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> ConfigModel:
        """Load configuration from file or fall back to defaults."""
        if cls._instance is not None:
            return cls._instance

        if config_path is None:
            config_path = get_config_path()

        config = ConfigModel()

        if config_path.exists():
            try:
                with open(config_path, "r", encoding="utf-8") as f:
                    yaml_content = f.read()
                config = ConfigModel.from_yaml(yaml_content)
                logger.debug("Loaded configuration from %s", config_path)
            except (OSError, yaml.YAMLError, ValueError, TypeError) as e:
                logger.warning("Failed to load config from %s: %s", config_path, e)
                logger.warning("Using default configuration.")
        else:
            logger.debug("No config file at %s, using defaults", config_path)

        cls._instance = config
        return config

    @classmethod
    def get(cls) -> ConfigModel:
        """Get the current configuration instance."""
        if cls._instance is None:
            cls._instance = cls.load()
        return cls._instance

    @classmethod
    def reload(cls, config_path: Optional[Path] = None) -> ConfigModel:
        """Reload configuration from file."""
        cls._instance = None
        return cls.load(config_path)

    @classmethod
    def reset(cls) -> None:
        """Drop the cached configuration (useful for testing)."""
        cls._instance = None


def get_config() -> ConfigModel:
    """Get the current configuration."""
    return Config.get()

