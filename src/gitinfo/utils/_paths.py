from pathlib import Path
from typing import Final

import platformdirs

PROJECT_CONFIG_FILENAME: Final = ".gitinfo.toml"


def get_user_config_file() -> Path:
    """Get the path to the user config file for the current platform.

    The path is returned whether or not the file exists.

    - Linux: ``$XDG_CONFIG_HOME/gitinfo/config.toml``
      (``~/.config/gitinfo/config.toml`` when unset)
    - macOS: ``~/Library/Application Support/gitinfo/config.toml``
    - Windows: ``%APPDATA%\\gitinfo\\config.toml``
    """
    return platformdirs.user_config_path("gitinfo") / "config.toml"


def get_project_config_file(start_dir: Path | None = None) -> Path:
    """Get the path to the project config file in ``start_dir``.

    Args:
        start_dir: Directory holding the file. Defaults to the current
            working directory.
    """
    if start_dir is None:
        start_dir = Path.cwd()
    return start_dir / PROJECT_CONFIG_FILENAME
