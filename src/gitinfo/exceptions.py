"""gitinfo exceptions.

Programming-contract violations (wrong argument types, malformed SHAs) are
raised as plain ``TypeError``/``ValueError`` and never as a ``GitInfoError``.
"""

from pathlib import Path  # noqa: TC003  # needed at runtime for annotations


class GitInfoError(Exception):
    """Base exception for gitinfo errors."""


# =============================================================================
# Repository Exceptions
# =============================================================================


class NotARepositoryError(GitInfoError):
    """Raised when a path cannot be opened as a git working copy.

    Attributes:
        path: The path that was not a working copy.
    """

    def __init__(self, message: str, *, path: Path | str | None = None) -> None:
        """Initialize with error message and the offending path.

        Args:
            message: Human-readable error message.
            path: The path that was not a working copy.
        """
        super().__init__(message)
        self.path: Path | str | None = path


class NoRepositoryFoundError(GitInfoError):
    """Raised when no ancestor of a start path contains a working copy.

    Attributes:
        start_path: The path the search started from.
    """

    def __init__(self, message: str, *, start_path: Path | str | None = None) -> None:
        """Initialize with error message and search context.

        Args:
            message: Human-readable error message.
            start_path: The path the search started from.
        """
        super().__init__(message)
        self.start_path: Path | str | None = start_path


class NoSuchRemoteError(GitInfoError, KeyError):
    """Raised when the repository has no remote with the requested name.

    Attributes:
        remote: Name of the missing remote.
    """

    def __init__(self, message: str, *, remote: str) -> None:
        """Initialize with error message and remote name."""
        super().__init__(message)
        self.remote: str = remote

    def __str__(self) -> str:
        # KeyError quotes its argument
        return str(self.args[0])


class NoSuchReferenceError(GitInfoError, KeyError):
    """Raised when a reference (e.g. a remote-tracking branch) does not exist.

    Attributes:
        ref: Full name of the missing reference.
    """

    def __init__(self, message: str, *, ref: str) -> None:
        """Initialize with error message and reference name."""
        super().__init__(message)
        self.ref: str = ref

    def __str__(self) -> str:
        return str(self.args[0])


# =============================================================================
# Tag Exceptions
# =============================================================================


class SignatureError(GitInfoError):
    """Raised when no tagger identity can be determined."""


class TagExistsError(GitInfoError):
    """Raised when a tag with the requested name already exists.

    Attributes:
        tag_name: The name of the existing tag.
    """

    def __init__(self, message: str, *, tag_name: str) -> None:
        """Initialize with error message and tag name."""
        super().__init__(message)
        self.tag_name: str = tag_name


class TagCreationFailedError(GitInfoError):
    """Raised when a tag could not be created, whatever the cause.

    The underlying error is available as ``__cause__``.

    Attributes:
        tag_name: The name of the tag that could not be created.
    """

    def __init__(self, message: str, *, tag_name: str) -> None:
        """Initialize with error message and tag name."""
        super().__init__(message)
        self.tag_name: str = tag_name


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigError(GitInfoError):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when configuration cannot be loaded or parsed."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        """Initialize with error message and optional location context."""
        super().__init__(message)
        self.path: Path | None = path
        self.line: int | None = line
        self.column: int | None = column
