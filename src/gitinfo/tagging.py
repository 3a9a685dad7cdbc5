"""Local tag creation."""

from pathlib import Path
from typing import TYPE_CHECKING, cast

import anyio
import anyio.to_thread

from gitinfo.exceptions import TagCreationFailedError
from gitinfo.repository import DulwichGitAccess, GitOpener, Signature
from gitinfo.utils import create_logger, unwrap_single_error

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger


def tag_message(tag_name: str) -> str:
    """Message used for tags created by gitinfo."""
    return f"tag with {tag_name}"


async def tag_repository(
    repo_path: Path | str,
    tag_name: str,
    *,
    opener: GitOpener = DulwichGitAccess.open,
    logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
) -> None:
    """Tag HEAD of the working copy at ``repo_path`` with ``tag_name``.

    Creates an annotated tag signed with the default identity. An existing
    tag is never overwritten. The tag is not pushed.

    Args:
        repo_path: Path to the working copy root.
        tag_name: Name of the tag to create.
        opener: Callable opening a git-access collaborator for a path.
        logger: Optional logger for diagnostics.

    Raises:
        TypeError: If ``repo_path`` or ``tag_name`` has the wrong type.
        ValueError: If ``repo_path`` or ``tag_name`` is empty.
        NotARepositoryError: If ``repo_path`` is not a git working copy.
        TagCreationFailedError: If the identity cannot be resolved or the
            tag cannot be created, e.g. because it already exists.
    """
    if not isinstance(repo_path, (str, Path)):
        msg = f"repo_path must be a str or Path, got {type(repo_path).__name__}"
        raise TypeError(msg)
    if not str(repo_path):
        msg = "repo_path must not be empty"
        raise ValueError(msg)
    if not isinstance(tag_name, str):
        msg = f"tag_name must be a str, got {type(tag_name).__name__}"
        raise TypeError(msg)
    if not tag_name:
        msg = "tag_name must not be empty"
        raise ValueError(msg)
    if logger is None:
        logger = create_logger()
    log = logger.bind(repo_path=str(repo_path), tag=tag_name)

    git = await anyio.to_thread.run_sync(opener, repo_path)
    head: str = ""
    signature: Signature | None = None

    async def read_head() -> None:
        nonlocal head
        head = await anyio.to_thread.run_sync(git.head_sha)

    async def read_signature() -> None:
        nonlocal signature
        signature = await anyio.to_thread.run_sync(git.default_signature)

    with git:
        try:
            with unwrap_single_error():
                async with anyio.create_task_group() as tg:
                    tg.start_soon(read_head)
                    tg.start_soon(read_signature)
            tag_id = await anyio.to_thread.run_sync(
                git.create_tag,
                tag_name,
                head,
                cast("Signature", signature),
                tag_message(tag_name),
            )
        except Exception as e:
            log.warning("tag_creation_failed", error=str(e))
            msg = f"could not create tag {tag_name}"
            raise TagCreationFailedError(msg, tag_name=tag_name) from e

    log.info("tag_created", commit=head, tag_id=tag_id)
