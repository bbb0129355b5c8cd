"""Merge operations for MiniGit."""

from minigit.core.errors import UnsupportedError


def merge(repo, branch: str) -> None:
    """
    Merge branch into the current branch.

    Three-way merge is not implemented.

    Raises:
        UnsupportedError: Always
    """
    raise UnsupportedError(f"Merge of '{branch}' is not supported")
