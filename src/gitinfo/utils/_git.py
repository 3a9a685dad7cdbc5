"""Common git helper functions.

Byte/string conversion and reference-name handling shared by the dulwich
adapter.
"""

import os
from typing import Final

REFS_HEADS_PREFIX: Final = "refs/heads/"
REFS_TAGS_PREFIX: Final = "refs/tags/"
REFS_REMOTES_PREFIX: Final = "refs/remotes/"


def decode_bytes(value: bytes | str) -> str:
    """Decode bytes to str if needed.

    Args:
        value: A bytes or str value.

    Returns:
        The value as a string.
    """
    if isinstance(value, bytes):
        return value.decode()
    return value


def decode_path(value: bytes | str) -> str:
    """Decode a file system path so it can always be encoded as UTF-8.

    Bytes are decoded with the file system encoding. Bytes that are not
    valid UTF-8, and the surrogate escapes standing for them, become U+FFFD.

    Example:
        >>> decode_path(b"caf\\xe9.txt")
        'caf\ufffd.txt'
    """
    return (
        os.fsdecode(value)
        .encode("utf-8", "surrogateescape")
        .decode("utf-8", "replace")
    )


def remote_tracking_ref(remote: str, branch: str) -> str:
    """Build the remote-tracking reference name for a branch.

    Example:
        >>> remote_tracking_ref("origin", "feature/x")
        'refs/remotes/origin/feature/x'
    """
    return f"{REFS_REMOTES_PREFIX}{remote}/{branch}"
