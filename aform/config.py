"""
Configuration Module

Holds the tables the AForm components read at call time: alert messages,
the date/time preset format tables and the e-mail pattern.

Defaults come from ``aform.constants``. A YAML file can override any of
them:

    messages:
      IDS_INVALID_VALUE: "Bad value for field"
    date_formats:
      - "dd.mm.yyyy"
    time_formats:
      - "HH:MM"
"""

from pathlib import Path
from typing import Any, Optional
from dataclasses import dataclass, field

import yaml
from loguru import logger

from .constants import (
    DATE_FORMATS,
    EMAIL_PATTERN,
    TIME_FORMATS,
    GlobalConstants,
)


@dataclass
class AFormConfig:
    """Tables consulted by formatters and validators."""
    messages: dict[str, str] = field(default_factory=GlobalConstants.as_dict)
    date_formats: list[str] = field(default_factory=lambda: list(DATE_FORMATS))
    time_formats: list[str] = field(default_factory=lambda: list(TIME_FORMATS))
    email_pattern: str = EMAIL_PATTERN

    def message(self, key: str) -> str:
        """Get an alert message by its IDS_* key."""
        return self.messages[key]

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> 'AFormConfig':
        """Create a config from a dict, keeping defaults for missing keys."""
        config = cls()
        if not data:
            return config

        messages = data.get('messages') or {}
        unknown = set(messages) - set(config.messages)
        if unknown:
            logger.warning(f"Ignoring unknown message keys: {sorted(unknown)}")
        for key, value in messages.items():
            if key in config.messages:
                config.messages[key] = str(value)

        if data.get('date_formats'):
            config.date_formats = [str(f) for f in data['date_formats']]
        if data.get('time_formats'):
            config.time_formats = [str(f) for f in data['time_formats']]
        if data.get('email_pattern'):
            config.email_pattern = str(data['email_pattern'])

        return config

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            'messages': dict(self.messages),
            'date_formats': list(self.date_formats),
            'time_formats': list(self.time_formats),
            'email_pattern': self.email_pattern,
        }


class ConfigLoader:
    """
    Loads AForm configuration overrides from YAML files.
    """

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize config loader.

        Args:
            config_path: Path to a YAML override file
        """
        self.config_path = config_path
        self.raw = {}
        self.config = AFormConfig()

        if config_path:
            self.load(config_path)

    def load(self, config_path: Path) -> AFormConfig:
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML config file

        Returns:
            The resulting AFormConfig
        """
        logger.info(f"Loading configuration from: {config_path}")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                self.raw = yaml.safe_load(f) or {}

            if not isinstance(self.raw, dict):
                raise ValueError(
                    f"Config root must be a mapping, got {type(self.raw).__name__}"
                )

            self.config = AFormConfig.from_dict(self.raw)
            logger.info(
                f"Loaded {len(self.config.date_formats)} date formats, "
                f"{len(self.config.time_formats)} time formats"
            )
            return self.config

        except Exception as e:
            logger.error(f"Failed to load config: {e}")
            raise


def load_config(config_path: Optional[Path] = None) -> AFormConfig:
    """Load a config file, or return the defaults when no path is given."""
    if config_path is None:
        return AFormConfig()
    return ConfigLoader(config_path).config
