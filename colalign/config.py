"""Configuration loading.

Defaults for the command line options can be kept in a YAML file::

    spec: "<><"
    separator: " "
    until: 4
    width_table: unicode

Files are looked up in priority order:

1. ``./.colalign.yaml`` (project)
2. ``~/.colalign/config.yaml`` (user)
"""

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional, Union

import yaml

from .exceptions import ConfigError
from .spec import parse_spec
from .utils import get_width_function

logger = logging.getLogger(__name__)

PROJECT_CONFIG_NAME = ".colalign.yaml"


@dataclass
class Config:
    """Default alignment options."""

    spec: str = ""
    separator: str = " "
    until: Optional[int] = None
    width_table: str = "unicode"

    def validate(self) -> None:
        """Check option values.

        Raises:
            ConfigError: If a value has the wrong type or is out of range
            InvalidSpecError: If ``spec`` does not parse
        """
        if not isinstance(self.spec, str):
            raise ConfigError(f"spec must be a string, got {type(self.spec).__name__}")
        if not isinstance(self.separator, str):
            raise ConfigError(f"separator must be a string, got {type(self.separator).__name__}")
        if self.until is not None and (
            isinstance(self.until, bool) or not isinstance(self.until, int) or self.until < 0
        ):
            raise ConfigError(f"until must be a non-negative integer, got {self.until!r}")
        if not isinstance(self.width_table, str):
            raise ConfigError(f"width_table must be a string, got {type(self.width_table).__name__}")
        get_width_function(self.width_table)
        parse_spec(self.spec)

    @classmethod
    def from_yaml(cls, config_path: Union[str, Path]) -> "Config":
        """Load configuration from a YAML file.

        Args:
            config_path: Configuration file path

        Returns:
            Config instance

        Raises:
            FileNotFoundError: Configuration file does not exist
            ConfigError: Invalid configuration content
        """
        config_path = Path(config_path)

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file does not exist: {config_path}")

        try:
            with open(config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Cannot parse {config_path}: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Cannot read {config_path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"{config_path} must contain a mapping of options")

        known = {f.name for f in fields(cls)}
        unknown = sorted(str(key) for key in data if key not in known)
        if unknown:
            raise ConfigError(f"Unknown option(s) in {config_path}: {', '.join(unknown)}")

        config = cls(**data)
        config.validate()
        logger.debug("Loaded configuration from %s", config_path)
        return config

    @staticmethod
    def find_config_file() -> Optional[Path]:
        """Find the first existing configuration file in priority order."""
        search_paths = [
            Path.cwd() / PROJECT_CONFIG_NAME,
            Path.home() / ".colalign" / "config.yaml",
        ]
        for path in search_paths:
            if path.is_file():
                return path
        return None

    @classmethod
    def load(cls, config_path: Union[str, Path, None] = None) -> "Config":
        """Load ``config_path``, or the first file found, or the defaults."""
        if config_path is None:
            config_path = cls.find_config_file()
            if config_path is None:
                logger.debug("No configuration file found, using defaults")
                return cls()
        return cls.from_yaml(config_path)
