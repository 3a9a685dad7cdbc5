"""Git access for gitinfo.

This package provides the git-access collaborator used by the snapshot
builder and the tag creator, behind a runtime-checkable protocol so that a
fake can be substituted in tests.

Classes:
    GitAccessProtocol: Protocol for dependency injection.
    DulwichGitAccess: Implementation backed by a dulwich Repo.
    FakeGitAccess: In-memory implementation for tests.

Models:
    FileStatus: Status flags of a single path.
    Signature: Tagger identity.

Example:
    >>> from gitinfo.repository import DulwichGitAccess
    >>> with DulwichGitAccess.open("/path/to/working/copy") as git:
    ...     print(git.head_sha())
"""

from gitinfo.repository._dulwich import DulwichGitAccess
from gitinfo.repository._fake import FakeGitAccess
from gitinfo.repository._models import FileStatus, Signature
from gitinfo.repository._protocol import GitAccessProtocol, GitOpener

__all__ = [
    "DulwichGitAccess",
    "FakeGitAccess",
    "FileStatus",
    "GitAccessProtocol",
    "GitOpener",
    "Signature",
]
