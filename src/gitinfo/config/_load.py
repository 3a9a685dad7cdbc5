import os
import sys
from pathlib import Path  # noqa: TC003 - Used at runtime in signatures

from gitinfo.exceptions import ConfigError

from ._loader import deep_merge, read_toml_file
from ._models import Config


def safe_load_config(
    *,
    config_path: Path | None = None,
    start_dir: Path | None = None,
    cli_overrides: dict[str, object] | None = None,
) -> tuple[Config, str | None]:
    """Load configuration with error handling.

    Attempts to load configuration and handles errors based on the
    GITINFO_STRICT_CONFIG environment variable:
    - If unset or "0": warn to stderr and return the default config
    - If "1": fail fast with sys.exit(1)

    When config_path is provided, the file must exist (explicit user request).

    Args:
        config_path: Explicit path to config file (--config flag).
        start_dir: Directory searched for the project config file.
        cli_overrides: CLI argument overrides.

    Returns:
        Tuple of (Config, error_message). On success, error_message is None.
    """
    strict_mode = os.environ.get("GITINFO_STRICT_CONFIG", "0") == "1"

    try:
        if config_path is not None:
            if not config_path.exists():
                # Always fail for explicit path
                print(f"Error: Config file not found: {config_path}", file=sys.stderr)  # noqa: T201
                sys.exit(1)
            data = deep_merge(read_toml_file(config_path), cli_overrides or {})
            return Config.from_dict(data), None

        config = Config.load(start_dir=start_dir, cli_overrides=cli_overrides)
    except (ConfigError, OSError) as e:
        error_msg = f"Failed to load config: {e}"
        if strict_mode:
            print(f"Error: {error_msg}", file=sys.stderr)  # noqa: T201
            sys.exit(1)
        print(f"Warning: {error_msg}", file=sys.stderr)  # noqa: T201
        return Config(), error_msg
    else:
        return config, None
