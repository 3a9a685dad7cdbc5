# pyright: reportExplicitAny=false, reportAny=false
"""Configuration models.

Pydantic models for the gitinfo configuration sections, and the Config
container that loads and merges configuration sources.
"""

from enum import StrEnum
from pathlib import Path  # noqa: TC003 - Used at runtime in method signatures
from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, ValidationError

from gitinfo.config._defaults import DEFAULT_CONFIG
from gitinfo.config._loader import deep_merge, parse_env_vars, read_toml_file
from gitinfo.exceptions import ConfigError
from gitinfo.utils import get_project_config_file, get_user_config_file


class LogLevel(StrEnum):
    """Log level threshold values.

    Values are ordered from most verbose (debug) to least verbose (error).
    """

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class LogFormat(StrEnum):
    """Log output format values."""

    JSON = "json"
    TEXT = "text"


class LoggingConfig(BaseModel):
    """Logging configuration section.

    Attributes:
        level: Log level threshold.
        format: Log output format.
        file: Path to log file (empty logs to stderr).
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    level: LogLevel = LogLevel.WARNING
    format: LogFormat = LogFormat.TEXT
    file: str = ""


class GitConfig(BaseModel):
    """Git configuration section.

    Attributes:
        remote: Name of the upstream remote.
        marker: Entry that marks a working copy root.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(
        frozen=True, extra="ignore", coerce_numbers_to_str=True
    )

    remote: str = "origin"
    marker: str = ".git"


class Config(BaseModel):
    """Configuration container with typed access.

    Sources are merged in precedence order, lowest first: built-in
    defaults, user config file, project config file, environment
    variables, CLI overrides.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    logging: LoggingConfig = LoggingConfig()
    git: GitConfig = GitConfig()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create configuration from a dictionary merged over the defaults.

        Raises:
            ConfigError: If the merged values fail validation.
        """
        merged = deep_merge(DEFAULT_CONFIG, data)
        try:
            return cls.model_validate(merged)
        except ValidationError as e:
            msg = f"Invalid configuration: {e}"
            raise ConfigError(msg) from e

    @classmethod
    def from_file(cls, path: Path) -> Self:
        """Create configuration from a single TOML file.

        Raises:
            FileNotFoundError: If the file does not exist.
            ConfigLoadError: If the file cannot be parsed.
            ConfigError: If the values fail validation.
        """
        return cls.from_dict(read_toml_file(path))

    @classmethod
    def load(
        cls,
        *,
        start_dir: Path | None = None,
        include_env: bool = True,
        cli_overrides: dict[str, Any] | None = None,
    ) -> Self:
        """Discover, merge and validate all configuration sources.

        Args:
            start_dir: Directory searched for the project config file.
                Defaults to the current working directory.
            include_env: Whether to apply GITINFO_* environment variables.
            cli_overrides: Values from command-line flags.

        Returns:
            The merged configuration.

        Raises:
            ConfigLoadError: If a config file cannot be parsed.
            ConfigError: If the merged values fail validation.
        """
        data: dict[str, Any] = {}
        for path in (get_user_config_file(), get_project_config_file(start_dir)):
            if path.is_file():
                data = deep_merge(data, read_toml_file(path))
        if include_env:
            data = deep_merge(data, parse_env_vars())
        if cli_overrides:
            data = deep_merge(data, cli_overrides)
        return cls.from_dict(data)
