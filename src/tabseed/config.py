"""
Configuration management for tabseed.

Loads and validates configuration from tabseed.toml files using Pydantic.
Every setting can also be given through the environment, e.g.
TABSEED_OUTPUT_DELIMITER=tab or TABSEED_FAKER_SEED=42.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tabseed.models import RowCountMode

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "tabseed.toml"

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class OutputConfig(BaseSettings):
    """Table output defaults."""

    model_config = SettingsConfigDict(env_prefix="TABSEED_OUTPUT_")

    delimiter: str = Field(default=",", description="',' or 'tab'")
    row_count: int = Field(default=100, description="Default requested row count")
    row_count_mode: RowCountMode = Field(
        default=RowCountMode.LITERAL,
        description="'literal' emits row_count - 1 body rows, 'exact' emits row_count",
    )


class FakerConfig(BaseSettings):
    """Faker catalog configuration."""

    model_config = SettingsConfigDict(env_prefix="TABSEED_FAKER_")

    locale: str = Field(default="en_US", description="Faker locale")
    seed: Optional[int] = Field(default=None, description="Seed for reproducible output")


class LoggingConfig(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="TABSEED_LOGGING_")

    level: str = Field(default="WARNING", description="Root log level")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalize to an upper-case stdlib level name."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level '{v}', expected one of: {', '.join(LOG_LEVELS)}")
        return level


class Config(BaseSettings):
    """Main configuration for tabseed."""

    model_config = SettingsConfigDict(env_prefix="TABSEED_")

    output: OutputConfig = Field(default_factory=OutputConfig)
    faker: FakerConfig = Field(default_factory=FakerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_toml(cls, path: Path | str) -> Config:
        """
        Load configuration from a tabseed.toml file.

        A section present in the file replaces the TABSEED_* environment
        values for that section; its missing keys take the defaults.
        Sections the file omits are still read from the environment.

        Args:
            path: Path to tabseed.toml file

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If the TOML is malformed or a value fails validation
        """
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
        config = cls(**data)
        logger.info(f"Loaded configuration from {config_path}")
        return config

    @classmethod
    def find_and_load(cls, start_dir: Optional[Path] = None) -> Config:
        """
        Load the nearest tabseed.toml.

        Looks in start_dir (default: the working directory) and then in each
        of its ancestors; the first tabseed.toml wins. Use load_or_default
        when running without a file is acceptable.

        Raises:
            FileNotFoundError: If no ancestor holds a tabseed.toml
        """
        origin = Path(start_dir or Path.cwd()).resolve()

        for directory in (origin, *origin.parents):
            candidate = directory / CONFIG_FILENAME
            if candidate.is_file():
                return cls.from_toml(candidate)

        raise FileNotFoundError(
            f"No {CONFIG_FILENAME} found in {origin} or its parents. "
            f"Run 'tabseed init' to create one."
        )

    @classmethod
    def load_or_default(cls, start_dir: Optional[Path] = None) -> Config:
        """Like find_and_load, but fall back to defaults when no file exists."""
        try:
            return cls.find_and_load(start_dir)
        except FileNotFoundError:
            logger.debug(f"No {CONFIG_FILENAME} found, using defaults")
            return cls()

    def to_toml(self, path: Path | str) -> None:
        """
        Write configuration to TOML file.

        Args:
            path: Path to write tabseed.toml
        """
        config_path = Path(path)

        delimiter = "tab" if self.output.delimiter == "\t" else self.output.delimiter
        seed_line = f"seed = {self.faker.seed}\n" if self.faker.seed is not None else ""

        # Build TOML content manually for better formatting
        toml_content = f"""# tabseed configuration

[output]
delimiter = "{delimiter}"
row_count = {self.output.row_count}
row_count_mode = "{self.output.row_count_mode.value}"

[faker]
locale = "{self.faker.locale}"
{seed_line}
[logging]
level = "{self.logging.level}"
"""

        config_path.write_text(toml_content)
