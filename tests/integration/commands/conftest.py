from collections.abc import Callable

import pytest
from rich.console import Console

from gitinfo.cli import create_app


@pytest.fixture
def gitinfo_cli(console: Console) -> Callable[..., int]:
    """Create the CLI app for testing and return a runner yielding the exit code.

    Tokens go through the meta app, so global options are handled as in a
    real invocation.
    """
    app = create_app(console=console, error_console=console)

    def _run(*args: str) -> int:
        try:
            app.meta(list(args))
        except SystemExit as e:
            return e.code if isinstance(e.code, int) else 1
        else:
            return 0

    return _run
