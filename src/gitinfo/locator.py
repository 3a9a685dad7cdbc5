"""Working copy root discovery.

This module finds the highest (topmost) ancestor directory of a path that
contains a git marker, probing all ancestors concurrently.
"""

from pathlib import Path
from typing import TYPE_CHECKING, Final

import anyio

from gitinfo.utils import create_logger

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

DEFAULT_MARKER: Final = ".git"


def _ancestors(start_path: Path) -> list[Path]:
    """List the ancestors of ``start_path``, filesystem root first, inclusive."""
    return [*reversed(start_path.parents), start_path]


async def find_highest_root(
    start_path: Path | str,
    *,
    marker: str = DEFAULT_MARKER,
    logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
) -> Path | None:
    """Find the highest git working copy directory ``start_path`` is in.

    That is the topmost ancestor directory of ``start_path`` (inclusive)
    that contains ``marker``. Relative paths are made absolute first;
    symlinks are not resolved.

    Every ancestor is probed concurrently and the result is chosen only after
    all probes finish. A probe failing with OSError counts as "no marker".

    Args:
        start_path: Path to start from.
        marker: Name of the entry marking a working copy root.
        logger: Optional logger for diagnostics.

    Returns:
        The highest working copy directory, or None if there is none.

    Raises:
        TypeError: If ``start_path`` is not a str or Path.
    """
    if not isinstance(start_path, (str, Path)):
        msg = f"start_path must be a str or Path, got {type(start_path).__name__}"
        raise TypeError(msg)
    if logger is None:
        logger = create_logger()

    candidates = _ancestors(Path(start_path).absolute())
    found = [False] * len(candidates)

    async def probe(index: int, directory: Path) -> None:
        try:
            found[index] = await anyio.Path(directory / marker).exists()
        except OSError as e:
            logger.debug("probe_failed", directory=str(directory), error=str(e))

    async with anyio.create_task_group() as tg:
        for index, directory in enumerate(candidates):
            tg.start_soon(probe, index, directory)

    for directory, has_marker in zip(candidates, found, strict=True):
        if has_marker:
            logger.debug(
                "highest_root_found", start_path=str(start_path), root=str(directory)
            )
            return directory

    logger.debug("no_root_found", start_path=str(start_path))
    return None
