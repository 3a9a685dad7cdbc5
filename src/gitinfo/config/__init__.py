"""gitinfo configuration.

Configuration is read from TOML files and GITINFO_* environment variables
and validated with pydantic.

Sources, lowest precedence first:
    1. Built-in defaults
    2. User file: gitinfo/config.toml in the platform config directory
    3. Project file: .gitinfo.toml in the start directory
    4. Environment: GITINFO_<SECTION>__<KEY>, e.g. GITINFO_GIT__REMOTE
    5. CLI overrides

Example:
    >>> from gitinfo.config import Config
    >>> config = Config.load()
    >>> config.git.remote
    'origin'
"""

from ._defaults import DEFAULT_CONFIG
from ._load import safe_load_config
from ._loader import deep_merge, parse_env_vars, read_toml_file
from ._models import Config, GitConfig, LogFormat, LoggingConfig, LogLevel

__all__ = [
    "DEFAULT_CONFIG",
    "Config",
    "GitConfig",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "deep_merge",
    "parse_env_vars",
    "read_toml_file",
    "safe_load_config",
]
