"""Snapshot building.

This module gathers raw facts about a working copy through a git-access
collaborator and assembles them into a RepoStatusSnapshot.
"""

from pathlib import Path
from typing import TYPE_CHECKING, Final

import anyio
import anyio.to_thread

from gitinfo.exceptions import (
    NoRepositoryFoundError,
    NoSuchReferenceError,
    NoSuchRemoteError,
)
from gitinfo.locator import DEFAULT_MARKER, find_highest_root
from gitinfo.repository import DulwichGitAccess, GitOpener
from gitinfo.snapshot import RepoStatusSnapshot
from gitinfo.utils import create_logger, remote_tracking_ref, unwrap_single_error

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

DEFAULT_REMOTE_NAME: Final = "origin"


async def build_snapshot(
    repo_path: Path | str,
    *,
    opener: GitOpener = DulwichGitAccess.open,
    remote_name: str = DEFAULT_REMOTE_NAME,
    logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
) -> RepoStatusSnapshot:
    """Build the status snapshot of the working copy at ``repo_path``.

    HEAD, the branch and its remote-tracking commit, the remote URL and the
    file statuses are read concurrently, each in a worker thread.

    A detached HEAD gives no branch. A missing remote or remote-tracking
    branch gives no origin URL or origin SHA rather than an error. Any other
    failure propagates unchanged.

    Args:
        repo_path: Path to the working copy root.
        opener: Callable opening a git-access collaborator for a path.
        remote_name: Name of the upstream remote.
        logger: Optional logger for diagnostics.

    Returns:
        The snapshot, with ``path`` set to ``str(repo_path)``.

    Raises:
        NotARepositoryError: If ``repo_path`` is not a git working copy.
    """
    if logger is None:
        logger = create_logger()
    log = logger.bind(repo_path=str(repo_path))

    git = await anyio.to_thread.run_sync(opener, repo_path)
    sha: str = ""
    branch: str | None = None
    origin_branch_sha: str | None = None
    origin_url: str | None = None
    changes: frozenset[str] = frozenset()

    async def read_head() -> None:
        nonlocal sha
        sha = await anyio.to_thread.run_sync(git.head_sha)

    async def read_branch() -> None:
        nonlocal branch, origin_branch_sha
        branch = await anyio.to_thread.run_sync(git.current_branch_name)
        if branch is None:
            log.debug("detached_head")
            return
        ref = remote_tracking_ref(remote_name, branch)
        try:
            origin_branch_sha = await anyio.to_thread.run_sync(
                git.branch_commit_sha, ref
            )
        except NoSuchReferenceError:
            # the branch does not exist on the remote, so certainly not pushed
            log.debug("no_remote_tracking_branch", ref=ref)

    async def read_remote_url() -> None:
        nonlocal origin_url
        try:
            origin_url = await anyio.to_thread.run_sync(git.remote_url, remote_name)
        except NoSuchRemoteError:
            log.debug("no_remote", remote=remote_name)

    async def read_changes() -> None:
        nonlocal changes
        statuses = await anyio.to_thread.run_sync(git.file_statuses)
        changes = frozenset(status.path for status in statuses if status.is_change)

    with git, unwrap_single_error():
        async with anyio.create_task_group() as tg:
            tg.start_soon(read_head)
            tg.start_soon(read_branch)
            tg.start_soon(read_remote_url)
            tg.start_soon(read_changes)

    snapshot = RepoStatusSnapshot(
        path=str(repo_path),
        sha=sha,
        branch=branch,
        origin_url=origin_url,
        changes=changes,
        origin_branch_sha=origin_branch_sha,
    )
    log.info(
        "snapshot_built",
        sha=snapshot.sha,
        branch=snapshot.branch,
        changes=len(snapshot.changes),
        is_save=snapshot.is_save,
    )
    return snapshot


async def create_for_highest_root(
    start_path: Path | str,
    *,
    opener: GitOpener = DulwichGitAccess.open,
    remote_name: str = DEFAULT_REMOTE_NAME,
    marker: str = DEFAULT_MARKER,
    logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
) -> RepoStatusSnapshot:
    """Build the snapshot of the highest working copy ``start_path`` is in.

    Args:
        start_path: Path to start the search from.
        opener: Callable opening a git-access collaborator for a path.
        remote_name: Name of the upstream remote.
        marker: Name of the entry marking a working copy root.
        logger: Optional logger for diagnostics.

    Returns:
        The snapshot of the highest working copy.

    Raises:
        NoRepositoryFoundError: If no ancestor of ``start_path`` is a working copy.
        NotARepositoryError: If the directory found cannot be opened.
    """
    if logger is None:
        logger = create_logger()

    root = await find_highest_root(start_path, marker=marker, logger=logger)
    if root is None:
        msg = f"No git directory found above {start_path}"
        raise NoRepositoryFoundError(msg, start_path=start_path)
    return await build_snapshot(
        root, opener=opener, remote_name=remote_name, logger=logger
    )
