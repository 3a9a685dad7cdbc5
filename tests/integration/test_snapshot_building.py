"""Integration tests for building snapshots of real working copies."""

import os
import sys
from collections.abc import Callable
from pathlib import Path

import orjson
import pytest

from gitinfo.builder import build_snapshot, create_for_highest_root
from gitinfo.exceptions import NoRepositoryFoundError, NotARepositoryError
from gitinfo.snapshot import RepoStatusSnapshot
from tests.git_fixtures import ORIGIN_URL, GitWorkingCopy

pytestmark = pytest.mark.anyio


class TestBuildSnapshot:
    async def test_clean_pushed_master(self, working_copy: GitWorkingCopy) -> None:
        working_copy.add_remote()
        working_copy.track_remote("master")

        snapshot = await build_snapshot(working_copy.root)

        assert snapshot == RepoStatusSnapshot(
            path=str(working_copy.root),
            sha=working_copy.head(),
            branch="master",
            origin_url=ORIGIN_URL,
            changes=frozenset(),
            origin_branch_sha=working_copy.head(),
        )
        assert snapshot.environment == "default"
        assert snapshot.is_save is True

    async def test_without_remote(self, working_copy: GitWorkingCopy) -> None:
        snapshot = await build_snapshot(working_copy.root)

        assert snapshot.origin_url is None
        assert snapshot.origin_branch_sha is None
        assert snapshot.is_pushed is False

    async def test_branch_missing_on_remote(self, working_copy: GitWorkingCopy) -> None:
        working_copy.add_remote()
        working_copy.track_remote("master")
        working_copy.checkout_new_branch("production")

        snapshot = await build_snapshot(working_copy.root)

        assert snapshot.branch == "production"
        assert snapshot.origin_url == ORIGIN_URL
        assert snapshot.origin_branch_sha is None
        assert snapshot.is_precious is True
        assert snapshot.is_save is False

    async def test_remote_behind(self, working_copy: GitWorkingCopy) -> None:
        working_copy.add_remote()
        working_copy.track_remote("master")
        pushed = working_copy.head()
        _ = working_copy.write("next.txt")
        _ = working_copy.commit("next.txt")

        snapshot = await build_snapshot(working_copy.root)

        assert snapshot.origin_branch_sha == pushed
        assert snapshot.is_pushed is False

    async def test_dirty_precious_branch_is_not_save(
        self, working_copy: GitWorkingCopy
    ) -> None:
        working_copy.checkout_new_branch("staging/4")
        working_copy.track_remote("staging/4")
        _ = working_copy.write("README.md", "# dirty\n")
        _ = working_copy.write("a/new.txt")

        snapshot = await build_snapshot(working_copy.root)

        assert snapshot.changes == frozenset({"README.md", "a/new.txt"})
        assert snapshot.is_pushed is True
        assert snapshot.environment == "staging-4"
        assert snapshot.is_save is False

    async def test_detached_head(self, working_copy: GitWorkingCopy) -> None:
        working_copy.detach()

        snapshot = await build_snapshot(working_copy.root)

        assert snapshot.branch is None
        assert snapshot.environment is None
        assert snapshot.is_precious is True

    async def test_not_a_repository(self, tmp_path: Path) -> None:
        with pytest.raises(NotARepositoryError):
            _ = await build_snapshot(tmp_path)

    async def test_serialized_form_round_trips(
        self, working_copy: GitWorkingCopy
    ) -> None:
        _ = working_copy.write("x.txt")

        snapshot = await build_snapshot(working_copy.root)

        assert RepoStatusSnapshot.from_json(snapshot.to_json()) == snapshot

    @pytest.mark.skipif(
        sys.getfilesystemencodeerrors() != "surrogateescape",
        reason="needs a file system accepting arbitrary name bytes",
    )
    async def test_non_utf8_file_name_serializes(
        self, working_copy: GitWorkingCopy
    ) -> None:
        _ = (working_copy.root / os.fsdecode(b"caf\xe9.txt")).write_text("x")

        snapshot = await build_snapshot(working_copy.root)

        assert orjson.loads(snapshot.to_json())["changes"] == ["caf\ufffd.txt"]


class TestCreateForHighestRoot:
    async def test_uses_highest_of_nested_working_copies(
        self, make_working_copy: Callable[..., GitWorkingCopy]
    ) -> None:
        outer = make_working_copy("outer")
        inner = make_working_copy("outer/vendor/inner")
        start = inner.root / "src"
        start.mkdir()

        snapshot = await create_for_highest_root(start)

        assert snapshot.path == str(outer.root)
        assert snapshot.sha == outer.head()

    async def test_no_working_copy(self, tmp_path: Path) -> None:
        with pytest.raises(NoRepositoryFoundError) as exc_info:
            _ = await create_for_highest_root(tmp_path)

        assert str(exc_info.value) == f"No git directory found above {tmp_path}"
