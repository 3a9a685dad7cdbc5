"""Repository status snapshot.

This module defines RepoStatusSnapshot, an immutable value object holding the
raw facts gathered from a git working copy together with the properties
derived from them.
"""

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Final, Self, cast

import orjson

from gitinfo.environment import format_branch_as_environment_name

SHA_PATTERN: Final = re.compile(r"[a-f0-9]{40}")

# Substrings that make a branch precious; matched case-sensitively anywhere
# in the branch name.
PRECIOUS_BRANCH_NAME_FRAGMENTS: Final = ("prod", "staging", "stage", "test")


def _check_optional_str(name: str, value: object) -> None:
    if value is None:
        return
    if not isinstance(value, str):
        msg = f"{name} must be a str or None, got {type(value).__name__}"
        raise TypeError(msg)
    if not value:
        msg = f"{name} must not be empty; use None for an absent value"
        raise ValueError(msg)


def _check_sha(name: str, value: object) -> None:
    if not isinstance(value, str):
        msg = f"{name} must be a str, got {type(value).__name__}"
        raise TypeError(msg)
    if SHA_PATTERN.fullmatch(value) is None:
        msg = f"{name} must be 40 lowercase hex digits, got {value!r}"
        raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class RepoStatusSnapshot:
    """Consolidated state of the git working copy at ``path``.

    Only the raw fields are validated on construction. The derived
    properties are computed on every read, so they are always consistent
    with the raw fields.

    Attributes:
        path: Path to the working copy root. Not checked for existence.
        sha: SHA of the checked-out commit (40 lowercase hex digits).
        branch: Name of the checked-out branch, or None if HEAD is detached.
        origin_url: URL of the upstream remote, or None if there is none.
        changes: Repository-relative paths of files that are new, modified,
            type-changed, renamed or deleted. Ignored files are excluded.
        origin_branch_sha: SHA of ``branch`` on the upstream remote, or None
            if the branch does not exist there.
    """

    path: str
    sha: str
    branch: str | None = None
    origin_url: str | None = None
    changes: frozenset[str] = field(default_factory=frozenset)
    origin_branch_sha: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.path, str):
            msg = f"path must be a str, got {type(self.path).__name__}"
            raise TypeError(msg)
        if not self.path:
            msg = "path must not be empty"
            raise ValueError(msg)
        _check_sha("sha", self.sha)
        _check_optional_str("branch", self.branch)
        _check_optional_str("origin_url", self.origin_url)
        if self.origin_branch_sha is not None:
            _check_sha("origin_branch_sha", self.origin_branch_sha)

        changes: object = self.changes
        if isinstance(changes, str) or not isinstance(changes, Iterable):
            msg = f"changes must be an iterable of paths, got {type(changes).__name__}"
            raise TypeError(msg)
        frozen = frozenset(cast("Iterable[object]", changes))
        for change in frozen:
            if not isinstance(change, str):
                msg = f"changes must contain str paths, got {type(change).__name__}"
                raise TypeError(msg)
            if not change:
                msg = "changes must not contain empty paths"
                raise ValueError(msg)
        object.__setattr__(self, "changes", frozen)

    # =========================================================================
    # Derived Properties
    # =========================================================================

    @property
    def environment(self) -> str | None:
        """Environment name derived from the branch.

        None when no branch is checked out, ``default`` for ``master``.
        """
        return format_branch_as_environment_name(self.branch)

    @property
    def is_clean(self) -> bool:
        """Whether the working copy has no uncommitted changes."""
        return len(self.changes) == 0

    @property
    def is_pushed(self) -> bool:
        """Whether the branch exists on the remote at the checked-out commit."""
        return self.origin_branch_sha == self.sha

    @property
    def is_precious(self) -> bool:
        """Whether the checked-out branch is precious.

        A detached HEAD is always precious.
        """
        if self.branch is None:
            return True
        return any(
            fragment in self.branch for fragment in PRECIOUS_BRANCH_NAME_FRAGMENTS
        )

    @property
    def is_save(self) -> bool:
        """Whether the working copy is safe to release automatically.

        A non-precious branch is always safe. A precious branch must be
        clean and pushed.
        """
        return not self.is_precious or (self.is_clean and self.is_pushed)

    # =========================================================================
    # Serialization
    # =========================================================================

    def to_dict(self) -> dict[str, Any]:  # pyright: ignore[reportExplicitAny]
        """Convert the snapshot to its interchange form.

        Absent values are kept as None and ``changes`` is a sorted list.

        Returns:
            Dictionary with raw and derived values under camelCase keys.
        """
        return {
            "path": self.path,
            "sha": self.sha,
            "branch": self.branch,
            "environment": self.environment,
            "originUrl": self.origin_url,
            "changes": sorted(self.changes),
            "originBranchSha": self.origin_branch_sha,
            "isClean": self.is_clean,
            "isPushed": self.is_pushed,
            "isPrecious": self.is_precious,
            "isSave": self.is_save,
        }

    def to_json(self) -> str:
        """Render the interchange form as a single line of JSON."""
        return orjson.dumps(self.to_dict()).decode("utf-8")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:  # pyright: ignore[reportExplicitAny]
        """Create a snapshot from its interchange form.

        Derived keys are ignored; they are recomputed from the raw values.

        Args:
            data: Mapping with at least the ``path`` and ``sha`` keys.

        Returns:
            The reconstructed snapshot.

        Raises:
            KeyError: If ``path`` or ``sha`` is missing.
        """
        return cls(
            path=data["path"],
            sha=data["sha"],
            branch=data.get("branch"),
            origin_url=data.get("originUrl"),
            changes=data.get("changes", ()),
            origin_branch_sha=data.get("originBranchSha"),
        )

    @classmethod
    def from_json(cls, content: str | bytes) -> Self:
        """Create a snapshot from JSON produced by ``to_json``.

        Raises:
            orjson.JSONDecodeError: If content is not valid JSON.
            TypeError: If content is not a JSON object.
        """
        data: object = orjson.loads(content)
        if not isinstance(data, dict):
            msg = f"expected a JSON object, got {type(data).__name__}"
            raise TypeError(msg)
        return cls.from_dict(cast("dict[str, Any]", data))  # pyright: ignore[reportExplicitAny]
