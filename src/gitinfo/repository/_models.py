"""Git access models.

This module defines the data structures exchanged with git-access
collaborators.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FileStatus:
    """Status of a single path in the working copy.

    Attributes:
        path: Repository-relative path, using forward slashes.
        is_new: File is untracked or newly staged.
        is_modified: File content differs from the index or HEAD.
        is_typechange: File type changed (e.g. file to symlink).
        is_renamed: File was renamed.
        is_deleted: File was deleted.
        is_ignored: File matches an ignore rule.
    """

    path: str
    is_new: bool = False
    is_modified: bool = False
    is_typechange: bool = False
    is_renamed: bool = False
    is_deleted: bool = False
    is_ignored: bool = False

    @property
    def is_change(self) -> bool:
        """Whether this status counts as an uncommitted change.

        Ignored files never count, whatever their other flags.
        """
        if self.is_ignored:
            return False
        return (
            self.is_new
            or self.is_modified
            or self.is_typechange
            or self.is_renamed
            or self.is_deleted
        )


@dataclass(frozen=True, slots=True)
class Signature:
    """Identity used to sign tags.

    Attributes:
        name: Tagger name.
        email: Tagger email.
    """

    name: str
    email: str

    @property
    def identity(self) -> str:
        """Git identity string, ``Name <email>``."""
        return f"{self.name} <{self.email}>"
