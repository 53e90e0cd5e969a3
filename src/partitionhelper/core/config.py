"""
PartitionHelper configuration management.

Provides centralized configuration with validation using Pydantic.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from partitionhelper.core.models import CommandTemplates

DEFAULT_CONFIG_DIR = Path.home() / ".partitionhelper"


class LoggingConfig(BaseModel):
    """Configuration for structured logging."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    file_enabled: bool = False
    console_enabled: bool = True
    json_format: bool = False
    log_directory: Path = Field(default_factory=lambda: DEFAULT_CONFIG_DIR / "logs")

    @field_validator("log_directory", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        return Path(v).expanduser().resolve()


class ExecutorConfig(BaseModel):
    """Configuration for running external partitioning tools."""

    shell: str = "/bin/sh"
    timeout_seconds: int = Field(default=300, ge=1, le=86400)
    # Tool output is parsed, so keep it in the C locale
    environment: dict[str, str] = Field(default_factory=lambda: {"LC_ALL": "C"})


class PartitionHelperConfig(BaseModel):
    """Main PartitionHelper configuration."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    executor: ExecutorConfig = Field(default_factory=ExecutorConfig)
    templates: CommandTemplates = Field(default_factory=CommandTemplates)

    @classmethod
    def load(cls, config_path: Path | None = None) -> PartitionHelperConfig:
        """Load configuration from file or create default."""
        if config_path is None:
            config_path = DEFAULT_CONFIG_DIR / "config.json"

        if config_path.exists():
            with open(config_path) as f:
                data = json.load(f)
            return cls.model_validate(data)

        return cls()

    def save(self, config_path: Path | None = None) -> None:
        """Save configuration to file."""
        if config_path is None:
            config_path = DEFAULT_CONFIG_DIR / "config.json"

        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w") as f:
            json.dump(self.model_dump(mode="json"), f, indent=2, default=str)

    def ensure_directories(self) -> None:
        """Create all required directories."""
        if self.logging.file_enabled:
            self.logging.log_directory.mkdir(parents=True, exist_ok=True)


def get_default_config() -> PartitionHelperConfig:
    """Get the default configuration."""
    return PartitionHelperConfig()


def load_config(config_path: Path | None = None) -> PartitionHelperConfig:
    """Load or create configuration."""
    config = PartitionHelperConfig.load(config_path)
    config.ensure_directories()
    return config
