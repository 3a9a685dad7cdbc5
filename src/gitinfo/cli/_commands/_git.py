# ruff: noqa: TC003  # Path needed at runtime for cyclopts parameter parsing
"""Commands reporting on and tagging the highest git working copy."""

from pathlib import Path
from typing import Annotated, Never

import anyio
import orjson
from cyclopts import Parameter
from rich.console import Console

from gitinfo.builder import create_for_highest_root
from gitinfo.exceptions import (
    NoRepositoryFoundError,
    NotARepositoryError,
    TagCreationFailedError,
)
from gitinfo.locator import find_highest_root
from gitinfo.snapshot import RepoStatusSnapshot
from gitinfo.tagging import tag_repository

from ._context import CLIContext
from ._shared import ExitCode, exit_with_error

__all__ = [
    "branch_as_environment",
    "git_highest_working_copy_dir",
    "git_info",
    "tag",
]

PathArgument = Annotated[
    Path | None,
    Parameter(help="Path to start from. Defaults to the current directory."),
]

_TAG_FAILED_MESSAGE = (
    "Could not create the tag on the git repository. Does it already exist?"
)


def _start_path(path: Path | None) -> Path:
    return path if path is not None else Path.cwd()


def _no_repository(start_path: Path) -> Never:
    exit_with_error(
        f"No git directory found above {start_path}", ExitCode.NOT_FOUND
    )


def _snapshot(path: Path | None, command: str) -> RepoStatusSnapshot:
    ctx = CLIContext.get_current()
    start_path = _start_path(path)
    try:
        return anyio.run(
            lambda: create_for_highest_root(
                start_path,
                remote_name=ctx.config.git.remote,
                marker=ctx.config.git.marker,
                logger=ctx.command_logger(command),
            )
        )
    except NoRepositoryFoundError:
        _no_repository(start_path)


def git_highest_working_copy_dir(path: PathArgument = None) -> None:
    """Show the top directory of the highest git working copy PATH is in.

    This is the top most ancestor directory that contains a .git folder.
    Nothing is printed when PATH is not inside a working copy.

    Args:
        path: Path to start from. Defaults to the current directory.
    """
    ctx = CLIContext.get_current()
    root = anyio.run(
        lambda: find_highest_root(
            _start_path(path),
            marker=ctx.config.git.marker,
            logger=ctx.command_logger("git-highest-working-copy-dir"),
        )
    )
    if root is not None:
        Console().out(str(root), highlight=False)


def git_info(path: PathArgument = None) -> None:
    """Show the highest git working copy above PATH as JSON.

    Args:
        path: Path to start from. Defaults to the current directory.
    """
    snapshot = _snapshot(path, "git-info")
    Console().out(snapshot.to_json(), highlight=False)


def tag(tag_name: str, path: PathArgument = None) -> None:
    """Tag the highest git working copy above PATH with TAG_NAME.

    The tag is not pushed.

    Args:
        tag_name: Name of the tag to create.
        path: Path to start from. Defaults to the current directory.
    """
    if not tag_name:
        exit_with_error("Tag name is mandatory", ExitCode.TAG_ERROR)

    ctx = CLIContext.get_current()
    start_path = _start_path(path)
    logger = ctx.command_logger("tag")

    async def _tag_highest_root() -> bool:
        root = await find_highest_root(
            start_path, marker=ctx.config.git.marker, logger=logger
        )
        if root is None:
            return False
        await tag_repository(root, tag_name, logger=logger)
        return True

    try:
        tagged = anyio.run(_tag_highest_root)
    except NotARepositoryError:
        _no_repository(start_path)
    except TagCreationFailedError:
        exit_with_error(_TAG_FAILED_MESSAGE, ExitCode.TAG_ERROR)
    if not tagged:
        _no_repository(start_path)

    Console().out(orjson.dumps({"tag": tag_name}).decode("utf-8"), highlight=False)


def branch_as_environment(path: PathArgument = None) -> None:
    """Show the branch of the highest working copy above PATH as an environment.

    Slashes become dashes and the result is url-escaped. An empty line is
    printed for a detached HEAD.

    Args:
        path: Path to start from. Defaults to the current directory.
    """
    snapshot = _snapshot(path, "branch-as-environment")
    Console().out(snapshot.environment or "", highlight=False)

