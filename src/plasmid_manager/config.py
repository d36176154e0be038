"""Configuration management for plasmid manager."""

from __future__ import annotations

import codecs
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

from .exceptions import ConfigurationError


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class PlasmidConfig:
    """Plasmid manager configuration settings."""

    load_file: Optional[Path] = None
    save_file: Optional[Path] = None
    name_width: int = 10
    encoding: str = "utf-8"
    log_level: str = "INFO"

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.load_file is not None:
            self.load_file = Path(self.load_file)
            if not self.load_file.exists():
                raise ConfigurationError(
                    f"Load file not found: {self.load_file}", parameter="load_file"
                )

        if self.save_file is not None:
            self.save_file = Path(self.save_file)

        if (not isinstance(self.name_width, int) or isinstance(self.name_width, bool)
                or self.name_width <= 0 or self.name_width > 100):
            raise ConfigurationError(f"Invalid name_width: {self.name_width}", parameter="name_width")

        try:
            codecs.lookup(self.encoding)
        except (LookupError, TypeError):
            raise ConfigurationError(f"Unknown encoding: {self.encoding}", parameter="encoding")

        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(f"Invalid log_level: {self.log_level}", parameter="log_level")

    @classmethod
    def from_yaml(cls, yaml_file: Path) -> "PlasmidConfig":
        """Load configuration from YAML file."""
        yaml_file = Path(yaml_file)
        if not yaml_file.exists():
            raise ConfigurationError(f"Config file not found: {yaml_file}")

        try:
            with open(yaml_file, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML config: {e}", config_file=str(yaml_file))
        except (IOError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Failed to read config file: {e}", config_file=str(yaml_file))

        if not isinstance(data, dict):
            raise ConfigurationError("Expected a mapping at top level", config_file=str(yaml_file))

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(
                f"Unknown parameters: {', '.join(unknown)}", config_file=str(yaml_file)
            )

        return cls(**data)

    @classmethod
    def from_args(cls, args: dict, base: Optional["PlasmidConfig"] = None) -> "PlasmidConfig":
        """
        Create configuration from command-line arguments.

        Arguments left as None keep the value from ``base`` (or the default).
        """
        # Map command-line argument names to config field names
        arg_mapping = {
            'load': 'load_file',
            'save': 'save_file',
            'name_width': 'name_width',
            'encoding': 'encoding',
            'log_level': 'log_level',
        }

        config_args = {}
        if base is not None:
            config_args = {f.name: getattr(base, f.name) for f in fields(base)}

        for arg_name, config_name in arg_mapping.items():
            if arg_name in args and args[arg_name] is not None:
                config_args[config_name] = args[arg_name]

        return cls(**config_args)
