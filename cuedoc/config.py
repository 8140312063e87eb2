"""
Configuration management for the cue sheet converter.

Settings come from defaults, then the environment, then command-line flags.
"""

import os
from dataclasses import dataclass
from typing import Any, Dict

from .reader import DEFAULT_MAX_FILE_SIZE

LOG_FORMATS = ("console", "json")


def _as_bool(value: str) -> bool:
    return value.lower() in ("true", "1", "yes")


@dataclass
class ConverterConfig:
    """Configuration for a conversion run."""

    encoding: str = "utf-8"
    max_file_size_bytes: int = DEFAULT_MAX_FILE_SIZE
    pretty: bool = False
    log_level: str = "WARNING"
    log_format: str = "console"

    @classmethod
    def from_env(cls) -> "ConverterConfig":
        """Create configuration from environment variables.

        Environment variables follow the pattern CUEDOC_<SETTING>.

        Examples:
        - CUEDOC_ENCODING=auto
        - CUEDOC_PRETTY=true
        - CUEDOC_LOG_FORMAT=json
        """
        config = cls()

        config.encoding = os.getenv("CUEDOC_ENCODING", config.encoding)
        if val := os.getenv("CUEDOC_MAX_FILE_SIZE_BYTES"):
            config.max_file_size_bytes = int(val)
        if val := os.getenv("CUEDOC_PRETTY"):
            config.pretty = _as_bool(val)
        config.log_level = os.getenv("CUEDOC_LOG_LEVEL", config.log_level)
        config.log_format = os.getenv("CUEDOC_LOG_FORMAT", config.log_format)

        return config

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ConverterConfig":
        """Create configuration from a dictionary, ignoring unknown keys."""
        config = cls()
        for key, value in data.items():
            if hasattr(config, key):
                setattr(config, key, value)
        return config

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "encoding": self.encoding,
            "max_file_size_bytes": self.max_file_size_bytes,
            "pretty": self.pretty,
            "log_level": self.log_level,
            "log_format": self.log_format,
        }

    def validate(self) -> list[str]:
        """Validate configuration values.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.max_file_size_bytes <= 0:
            errors.append("max_file_size_bytes must be positive")
        if self.log_format not in LOG_FORMATS:
            errors.append(f"log_format must be one of {', '.join(LOG_FORMATS)}")
        if self.log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"Unknown log_level: {self.log_level}")

        return errors
