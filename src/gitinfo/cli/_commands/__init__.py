"""gitinfo CLI commands."""
# pyright: reportUnusedCallResult=false

from typing import TYPE_CHECKING

from ._context import CLIContext
from ._git import branch_as_environment, git_highest_working_copy_dir, git_info, tag
from ._shared import ExitCode, exit_with_error, get_error_console

if TYPE_CHECKING:
    from cyclopts import App

__all__ = [
    "CLIContext",
    "ExitCode",
    "exit_with_error",
    "get_error_console",
    "register_commands",
]


def register_commands(app: "App") -> None:  # noqa: UP037
    app.command(
        git_highest_working_copy_dir, name="git-highest-working-copy-dir", alias="ghwc"
    )
    app.command(git_info, name="git-info", alias="gi")
    app.command(tag, name="tag", alias="t")
    app.command(branch_as_environment, name="branch-as-environment", alias="b")
