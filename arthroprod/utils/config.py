"""
Configuration management for arthroprod.

Provides a configuration class for the registry ordering and logging level,
with JSON load/save helpers.
"""

import json
import logging
from dataclasses import dataclass, field, asdict
from typing import Dict, Any, List
from pathlib import Path

from ..algebra.allowed import Allowed
from ..core.constants import ALLOWED_INDICES, LOGGER_NAME
from ..core.errors import InvalidConfigError


@dataclass
class Config:
    """
    Configuration for arthroprod.

    Attributes:
        allowed: The 16 allowed index strings in registry order
        log_level: Level name for the 'arthroprod' logger ('DEBUG', 'INFO', ...)
        extra: Unrecognised keys from a loaded config
    """

    allowed: List[str] = field(default_factory=lambda: list(ALLOWED_INDICES))
    log_level: str = 'WARNING'

    # Additional fields
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Create config from dictionary."""
        # Extract known fields
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        known_kwargs = {k: v for k, v in config_dict.items() if k in known_fields}
        extra_kwargs = {k: v for k, v in config_dict.items() if k not in known_fields}

        config = cls(**known_kwargs)
        config.extra = {**config.extra, **extra_kwargs}
        return config

    def update(self, **kwargs) -> 'Config':
        """Return a new config with updated values."""
        config_dict = self.to_dict()
        config_dict.update(kwargs)
        return Config.from_dict(config_dict)

    def build_allowed(self) -> Allowed:
        """
        Build and validate the registry described by ``allowed``.

        Raises:
            InvalidConfigError: if the entries do not form a valid registry
        """
        if not isinstance(self.allowed, (list, tuple)):
            raise InvalidConfigError(f"allowed must be a list of strings, got {self.allowed!r}")
        return Allowed.from_strings(self.allowed)

    def apply_logging(self) -> None:
        """Set the level of the package logger. No handlers are installed."""
        level = logging.getLevelName(str(self.log_level).upper())
        if not isinstance(level, int):
            raise InvalidConfigError(f"unknown log level {self.log_level!r}")
        logging.getLogger(LOGGER_NAME).setLevel(level)


def load_config(filepath: str) -> Config:
    """
    Load configuration from JSON file.

    Args:
        filepath: Path to JSON config file

    Returns:
        Config object
    """
    filepath = Path(filepath)
    with open(filepath, 'r') as f:
        config_dict = json.load(f)
    if not isinstance(config_dict, dict):
        raise InvalidConfigError(f"{filepath} does not contain a JSON object")
    return Config.from_dict(config_dict)


def save_config(config: Config, filepath: str) -> None:
    """
    Save configuration to JSON file.

    Args:
        config: Config object to save
        filepath: Output file path
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    with open(filepath, 'w') as f:
        json.dump(config.to_dict(), f, indent=2)
