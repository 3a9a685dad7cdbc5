"""Helpers for anyio task groups."""

from collections.abc import Iterator
from contextlib import contextmanager


@contextmanager
def unwrap_single_error() -> Iterator[None]:
    """Re-raise the sole exception of an ExceptionGroup unchanged.

    anyio task groups always wrap task failures in an ExceptionGroup. When
    exactly one task failed, that task's exception is raised instead.
    Groups with several failures propagate as they are.

    Example:
        >>> with unwrap_single_error():
        ...     async with anyio.create_task_group() as tg:
        ...         tg.start_soon(work)
    """
    try:
        yield
    except ExceptionGroup as group:
        if len(group.exceptions) == 1:
            raise group.exceptions[0]  # noqa: B904
        raise
