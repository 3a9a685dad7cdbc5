"""Shared test fixtures for gitinfo tests."""

from collections.abc import Callable
from pathlib import Path

import pytest
from rich.console import Console

from gitinfo.cli import CLIContext
from tests.git_fixtures import GitWorkingCopy, init_working_copy


@pytest.fixture
def make_working_copy(tmp_path: Path) -> Callable[..., GitWorkingCopy]:
    """Return a factory creating committed working copies under tmp_path."""

    def _make(relpath: str = "project", *, commit: bool = True) -> GitWorkingCopy:
        working_copy = init_working_copy(tmp_path / relpath)
        if commit:
            _ = working_copy.write("README.md", "# project\n")
            _ = working_copy.commit("README.md", message="initial commit")
        return working_copy

    return _make


@pytest.fixture
def working_copy(make_working_copy: Callable[..., GitWorkingCopy]) -> GitWorkingCopy:
    """A working copy on master with one commit and no remote."""
    return make_working_copy()


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def console() -> Console:
    return Console(
        width=70,
        force_terminal=True,
        highlight=False,
        color_system=None,
        legacy_windows=False,
    )


@pytest.fixture(autouse=True)
def isolated_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Keep user config and GITINFO_* variables from leaking into tests."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    for name in (
        "GITINFO_DEBUG",
        "GITINFO_LOG_LEVEL",
        "GITINFO_STRICT_CONFIG",
        "GITINFO_TAGGER_NAME",
        "GITINFO_TAGGER_EMAIL",
        "GITINFO_GIT__REMOTE",
        "GITINFO_GIT__MARKER",
        "GITINFO_LOGGING__LEVEL",
        "GITINFO_LOGGING__FORMAT",
        "GITINFO_LOGGING__FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    CLIContext.reset()
