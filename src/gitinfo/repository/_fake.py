# ruff: noqa: TC003  # Path needed at runtime for dataclass fields
"""Fake git access for testing.

This module provides a FakeGitAccess class that implements GitAccessProtocol
for use in tests without requiring an actual Git repository.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from types import TracebackType
from typing import Self

from gitinfo.exceptions import (
    NoSuchReferenceError,
    NoSuchRemoteError,
    NotARepositoryError,
    SignatureError,
    TagExistsError,
)
from gitinfo.repository._models import FileStatus, Signature

_FAKE_SHA = "0" * 40


@dataclass(slots=True)
class FakeGitAccess:
    """Fake git working copy for testing.

    The fake holds plain mutable state that tests set up directly:
    - head/branch describe what is checked out
    - refs maps full reference names to SHAs
    - remotes maps remote names to URLs
    - statuses is returned as-is by file_statuses()
    - tags records created tags as (commit, signature, message)

    Setting one of the ``*_error`` fields makes the matching method raise it.

    Example:
        >>> git = FakeGitAccess(branch="main", remotes={"origin": "git@host:repo"})
        >>> git.remote_url("origin")
        'git@host:repo'
    """

    root: Path = field(default_factory=lambda: Path("/fake/project"))
    head: str = "b557eb5aabebf72f84ae9750be2ad1b7b6b43a4b"
    branch: str | None = "master"
    refs: dict[str, str] = field(default_factory=dict)
    remotes: dict[str, str] = field(default_factory=dict)
    statuses: list[FileStatus] = field(default_factory=list)
    signature: Signature | None = field(
        default_factory=lambda: Signature(name="Test User", email="test@example.com")
    )
    tags: dict[str, tuple[str, Signature, str]] = field(default_factory=dict)
    head_error: Exception | None = None
    ref_error: Exception | None = None
    remote_error: Exception | None = None
    status_error: Exception | None = None
    tag_error: Exception | None = None
    closed: bool = False

    # =========================================================================
    # Factory Helpers
    # =========================================================================

    def opener(self) -> Callable[[Path | str], "FakeGitAccess"]:
        """Return an opener that yields this fake for any path.

        The fake's root is updated to the opened path.
        """

        def _open(path: Path | str) -> FakeGitAccess:
            self.root = Path(path)
            self.closed = False
            return self

        return _open

    @staticmethod
    def failing_opener() -> Callable[[Path | str], "FakeGitAccess"]:
        """Return an opener that rejects every path as not a repository."""

        def _open(path: Path | str) -> FakeGitAccess:
            msg = f"{path} is not a git directory"
            raise NotARepositoryError(msg, path=path)

        return _open

    def track_remote(self, remote: str, branch: str, sha: str | None = None) -> None:
        """Record a remote-tracking branch, defaulting to the current HEAD."""
        self.refs[f"refs/remotes/{remote}/{branch}"] = sha or self.head

    # =========================================================================
    # Context Manager Protocol
    # =========================================================================

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    # =========================================================================
    # GitAccessProtocol Methods
    # =========================================================================

    def close(self) -> None:
        """Mark the fake as closed."""
        self.closed = True

    def head_sha(self) -> str:
        if self.head_error is not None:
            raise self.head_error
        return self.head

    def current_branch_name(self) -> str | None:
        return self.branch

    def branch_commit_sha(self, ref: str) -> str:
        if self.ref_error is not None:
            raise self.ref_error
        try:
            return self.refs[ref]
        except KeyError as e:
            msg = f"no reference found for {ref}"
            raise NoSuchReferenceError(msg, ref=ref) from e

    def remote_url(self, name: str) -> str:
        if self.remote_error is not None:
            raise self.remote_error
        try:
            return self.remotes[name]
        except KeyError as e:
            msg = f'remote "{name}" does not exist'
            raise NoSuchRemoteError(msg, remote=name) from e

    def file_statuses(self) -> Sequence[FileStatus]:
        if self.status_error is not None:
            raise self.status_error
        return list(self.statuses)

    def default_signature(self) -> Signature:
        if self.signature is None:
            msg = "no tagger identity configured"
            raise SignatureError(msg)
        return self.signature

    def create_tag(
        self, name: str, commit: str, signature: Signature, message: str
    ) -> str:
        if self.tag_error is not None:
            raise self.tag_error
        if name in self.tags:
            msg = f"tag {name} already exists"
            raise TagExistsError(msg, tag_name=name)
        self.tags[name] = (commit, signature, message)
        return _FAKE_SHA
