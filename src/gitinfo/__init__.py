"""Status snapshots of the highest git working copy above a path."""

from gitinfo.builder import build_snapshot, create_for_highest_root
from gitinfo.environment import format_branch_as_environment_name
from gitinfo.locator import find_highest_root
from gitinfo.snapshot import RepoStatusSnapshot
from gitinfo.tagging import tag_repository

__all__ = [
    "RepoStatusSnapshot",
    "build_snapshot",
    "create_for_highest_root",
    "find_highest_root",
    "format_branch_as_environment_name",
    "tag_repository",
]
