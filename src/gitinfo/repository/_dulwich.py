# ruff: noqa: TC003  # Path needed at runtime for method signatures
"""Dulwich-backed git access.

This module provides DulwichGitAccess, the GitAccessProtocol implementation
used outside of tests. All paths in file statuses are repository-relative
strings with forward slashes.
"""

import os
import time
from collections.abc import Sequence
from pathlib import Path
from types import TracebackType
from typing import Final, Self

from dulwich import porcelain
from dulwich.errors import NotGitRepository
from dulwich.objects import Commit, Tag
from dulwich.repo import Repo

from gitinfo.exceptions import (
    NoSuchReferenceError,
    NoSuchRemoteError,
    NotARepositoryError,
    SignatureError,
    TagExistsError,
)
from gitinfo.repository._models import FileStatus, Signature
from gitinfo.utils._git import (
    REFS_HEADS_PREFIX,
    REFS_TAGS_PREFIX,
    decode_bytes,
    decode_path,
)

# Environment overrides for the tagger identity
_TAGGER_NAME_ENV: Final = "GITINFO_TAGGER_NAME"
_TAGGER_EMAIL_ENV: Final = "GITINFO_TAGGER_EMAIL"


class DulwichGitAccess:
    """Git access on a working copy opened with dulwich.

    Use ``DulwichGitAccess.open(path)`` rather than the constructor. The
    instance implements the context manager protocol and closes the
    underlying Repo on exit.

    Attributes:
        root: The working copy directory.
    """

    __slots__: Final = ("_repo", "_root")
    _repo: Repo
    _root: Path

    def __init__(self, repo: Repo) -> None:
        """Wrap an already opened dulwich Repo.

        Args:
            repo: The repository to wrap.
        """
        self._repo = repo
        self._root = Path(decode_bytes(repo.path))

    @classmethod
    def open(cls, path: Path | str) -> Self:
        """Open the working copy at ``path``.

        The path must be the working copy root; parent directories are not
        searched.

        Args:
            path: Path to the working copy root.

        Returns:
            A DulwichGitAccess for the repository.

        Raises:
            NotARepositoryError: If ``path`` is not a git working copy.
        """
        try:
            repo = Repo(str(path))
        except NotGitRepository as e:
            msg = f"{path} is not a git directory"
            raise NotARepositoryError(msg, path=path) from e
        return cls(repo)

    # =========================================================================
    # Context Manager Protocol
    # =========================================================================

    def __enter__(self) -> Self:
        """Enter the context manager.

        Returns:
            The git access instance.
        """
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit the context manager and close the repository."""
        self.close()

    def close(self) -> None:
        """Close the underlying git repository.

        Releases file handles held by the dulwich Repo.
        """
        self._repo.close()

    @property
    def root(self) -> Path:
        """Get the working copy directory."""
        return self._root

    # =========================================================================
    # Read Operations
    # =========================================================================

    def head_sha(self) -> str:
        """Get the HEAD commit SHA.

        Raises:
            KeyError: If HEAD does not point to a commit yet.
        """
        return decode_bytes(self._repo.head())

    def current_branch_name(self) -> str | None:
        """Get the current branch name.

        Returns:
            Branch name without refs/heads/ prefix, or None if HEAD is detached.
        """
        symrefs = self._repo.refs.get_symrefs()

        head_ref = symrefs.get(b"HEAD")
        if head_ref is None:
            return None

        head_ref_str = decode_bytes(head_ref)
        if head_ref_str.startswith(REFS_HEADS_PREFIX):
            return head_ref_str[len(REFS_HEADS_PREFIX) :]
        return None

    def branch_commit_sha(self, ref: str) -> str:
        """Get the SHA a reference points to, following symbolic refs."""
        try:
            sha = self._repo.refs[ref.encode()]
        except KeyError as e:
            msg = f"no reference found for {ref}"
            raise NoSuchReferenceError(msg, ref=ref) from e
        return decode_bytes(sha)

    def remote_url(self, name: str) -> str:
        """Get the URL configured for remote ``name``."""
        config = self._repo.get_config()
        try:
            url = config.get((b"remote", name.encode()), b"url")
        except KeyError as e:
            msg = f'remote "{name}" does not exist'
            raise NoSuchRemoteError(msg, remote=name) from e
        return decode_bytes(url)

    def file_statuses(self) -> Sequence[FileStatus]:
        """Collect the status of every changed or untracked path.

        Staged additions are new, staged deletions are deleted, other staged
        and unstaged entries are modified, except unstaged entries missing
        from the working tree, which are deleted. Untracked files are new.
        Ignored files are left out by dulwich. Path bytes that are not valid
        UTF-8 are replaced with U+FFFD.

        Returns:
            One FileStatus per path, sorted by path.
        """
        # dulwich doesn't have type stubs
        status = porcelain.status(self._repo, untracked_files="all")  # pyright: ignore[reportUnknownMemberType]
        flags: dict[str, dict[str, bool]] = {}

        def mark(path: bytes | str, flag: str) -> None:
            key = decode_path(path).replace(os.sep, "/")
            flags.setdefault(key, {})[flag] = True

        staged_dict = status.staged  # pyright: ignore[reportUnknownMemberType,reportUnknownVariableType]
        for change_type, flag in (
            ("add", "is_new"),
            ("delete", "is_deleted"),
            ("modify", "is_modified"),
        ):
            files: list[bytes] = staged_dict.get(change_type, [])  # pyright: ignore[reportUnknownMemberType,reportUnknownVariableType]
            for f in files:  # pyright: ignore[reportUnknownVariableType]
                mark(f, flag)  # pyright: ignore[reportUnknownArgumentType]

        unstaged: list[bytes] = status.unstaged  # pyright: ignore[reportUnknownMemberType,reportUnknownVariableType]
        for f in unstaged:  # pyright: ignore[reportUnknownVariableType]
            if os.path.lexists(self._root / os.fsdecode(f)):  # pyright: ignore[reportUnknownArgumentType]
                mark(f, "is_modified")  # pyright: ignore[reportUnknownArgumentType]
            else:
                mark(f, "is_deleted")  # pyright: ignore[reportUnknownArgumentType]

        untracked: list[bytes | str] = status.untracked  # pyright: ignore[reportUnknownMemberType,reportUnknownVariableType]
        for f in untracked:  # pyright: ignore[reportUnknownVariableType]
            mark(f, "is_new")  # pyright: ignore[reportUnknownArgumentType]

        return [FileStatus(path=path, **flags[path]) for path in sorted(flags)]

    def default_signature(self) -> Signature:
        """Resolve the tagger identity.

        Resolution order:
        1. Environment variables (GITINFO_TAGGER_NAME, GITINFO_TAGGER_EMAIL)
        2. Repository, user and system git config (user.name, user.email)

        Raises:
            SignatureError: If name or email cannot be resolved.
        """
        config = self._repo.get_config_stack()

        def lookup(env_var: str, key: bytes) -> str | None:
            value = os.environ.get(env_var)
            if value:
                return value
            try:
                return decode_bytes(config.get((b"user",), key)) or None
            except KeyError:
                return None

        name = lookup(_TAGGER_NAME_ENV, b"name")
        email = lookup(_TAGGER_EMAIL_ENV, b"email")
        if name is None or email is None:
            msg = "no tagger identity configured (user.name and user.email)"
            raise SignatureError(msg)
        return Signature(name=name, email=email)

    # =========================================================================
    # Write Operations
    # =========================================================================

    def create_tag(
        self, name: str, commit: str, signature: Signature, message: str
    ) -> str:
        """Create an annotated tag pointing at ``commit``.

        Raises:
            TagExistsError: If ``refs/tags/<name>`` already exists.
            KeyError: If ``commit`` is not in the object store.
        """
        ref = f"{REFS_TAGS_PREFIX}{name}".encode()
        if ref in self._repo.refs:
            msg = f"tag {name} already exists"
            raise TagExistsError(msg, tag_name=name)

        commit_id = commit.encode()
        # Fail before writing anything if the commit is unknown
        _ = self._repo[commit_id]

        tag = Tag()
        tag.tagger = signature.identity.encode()
        tag.message = f"{message}\n".encode()
        tag.name = name.encode()
        tag.object = (Commit, commit_id)
        tag.tag_time = int(time.time())
        tag.tag_timezone = time.localtime().tm_gmtoff
        self._repo.object_store.add_object(tag)

        # add_if_new refuses to overwrite a tag created concurrently
        if not self._repo.refs.add_if_new(ref, tag.id):
            msg = f"tag {name} already exists"
            raise TagExistsError(msg, tag_name=name)
        return decode_bytes(tag.id)
