"""Branch to environment name formatting.

Environment names are used as deployment identifiers (e.g. Terraform
workspaces) and must be safe to use as a URL component.
"""

from typing import Final
from urllib.parse import quote

MASTER_BRANCH_NAME: Final = "master"
DEFAULT_ENVIRONMENT_NAME: Final = "default"

# Characters left unescaped in addition to quote()'s always-safe set
# (letters, digits, "_.-~"), matching Node's querystring.escape.
_SAFE_CHARACTERS: Final = "!*'()"


def format_branch_as_environment_name(branch: str | None) -> str | None:
    """Format a branch name so it can be used as an environment name.

    Every ``/`` is replaced by ``-`` and the result is percent-encoded.
    ``master`` maps to ``default``.

    The mapping is not collision free: ``a/b`` and ``a-b`` both format as
    ``a-b``, and a branch named ``default`` formats like ``master``.

    Args:
        branch: Branch name, or None when no branch is checked out.

    Returns:
        The environment name, or None if branch is None or empty.
    """
    if not branch:
        return None
    if branch == MASTER_BRANCH_NAME:
        return DEFAULT_ENVIRONMENT_NAME
    return quote(branch.replace("/", "-"), safe=_SAFE_CHARACTERS)
