from pathlib import Path

import pytest

from gitinfo.repository import FakeGitAccess

HEAD_SHA = "b557eb5aabebf72f84ae9750be2ad1b7b6b43a4b"


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        if Path(item.path).is_relative_to(Path(__file__).parent):
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def fake_git() -> FakeGitAccess:
    """Create a FakeGitAccess on master with an origin remote."""
    return FakeGitAccess(
        head=HEAD_SHA,
        branch="master",
        remotes={"origin": "git@github.com:example/project.git"},
    )
