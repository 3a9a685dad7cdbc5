"""Git access protocol for dependency injection.

This module defines a runtime-checkable Protocol for the small set of git
operations gitinfo needs. The dulwich-backed DulwichGitAccess and the
in-memory FakeGitAccess both satisfy it, so the snapshot builder and the
tag creator can be tested without a repository on disk.
"""

from collections.abc import Callable, Sequence
from pathlib import Path
from types import TracebackType
from typing import Protocol, Self, TypeAlias, runtime_checkable

from gitinfo.repository._models import FileStatus, Signature


@runtime_checkable
class GitAccessProtocol(Protocol):
    """Protocol for read access and tagging on an opened git working copy.

    Implementations are obtained from an opener callable taking the working
    copy path, which raises NotARepositoryError when the path cannot be
    opened.

    Example:
        >>> def current_sha(git: GitAccessProtocol) -> str:
        ...     with git:
        ...         return git.head_sha()
    """

    def __enter__(self) -> Self: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None: ...

    def close(self) -> None:
        """Release resources held by the repository."""
        ...

    def head_sha(self) -> str:
        """Get the SHA of the commit HEAD points to.

        Returns:
            40-character lowercase hex SHA.
        """
        ...

    def current_branch_name(self) -> str | None:
        """Get the name of the checked-out branch.

        Returns:
            Branch name without the ``refs/heads/`` prefix, or None when
            HEAD is detached.
        """
        ...

    def branch_commit_sha(self, ref: str) -> str:
        """Get the commit SHA a reference points to.

        Args:
            ref: Full reference name, e.g. ``refs/remotes/origin/main``.

        Returns:
            40-character lowercase hex SHA.

        Raises:
            NoSuchReferenceError: If the reference does not exist.
        """
        ...

    def remote_url(self, name: str) -> str:
        """Get the URL of a remote.

        Args:
            name: Remote name, e.g. ``origin``.

        Returns:
            The configured remote URL.

        Raises:
            NoSuchRemoteError: If no remote with that name is configured.
        """
        ...

    def file_statuses(self) -> Sequence[FileStatus]:
        """List the status of every path that is not unmodified.

        Returns:
            One FileStatus per path, including ignored files.
        """
        ...

    def default_signature(self) -> Signature:
        """Get the default tagger identity for this repository.

        Raises:
            SignatureError: If no identity is configured.
        """
        ...

    def create_tag(
        self, name: str, commit: str, signature: Signature, message: str
    ) -> str:
        """Create an annotated tag without overwriting an existing one.

        Args:
            name: Tag name without the ``refs/tags/`` prefix.
            commit: SHA of the commit to tag.
            signature: Tagger identity.
            message: Tag message.

        Returns:
            SHA of the created tag object.

        Raises:
            TagExistsError: If a tag with that name already exists.
        """
        ...


# Opens the working copy at a path; raises NotARepositoryError on failure.
GitOpener: TypeAlias = Callable[[Path | str], GitAccessProtocol]
