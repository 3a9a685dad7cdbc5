"""Default configuration values.

DEFAULT_CONFIG is a plain dict so it can be fed to deep_merge, which copies
its inputs.
"""

from typing import Any

DEFAULT_CONFIG: dict[str, Any] = {  # pyright: ignore[reportExplicitAny]
    "logging": {
        "level": "warning",
        "format": "text",
        "file": "",
    },
    "git": {
        "remote": "origin",
        "marker": ".git",
    },
}
