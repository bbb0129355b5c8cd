"""Branch management: create, remove and list branch records."""

import logging
from typing import List

from minigit.core.errors import InvalidOperationError

logger = logging.getLogger(__name__)


def create_branch(repo, name: str) -> str:
    """
    Create a branch at the current commit and attach HEAD to it.

    Args:
        repo: Repository instance
        name: New branch name

    Returns:
        str: Commit hash the branch points to ('' before the first commit)

    Raises:
        AlreadyExistsError: If the branch exists
        InvalidOperationError: If the name is not a valid branch name
    """
    head = repo.head
    commit_hash = head.current_commit_hash()
    head.branches.create(name, commit_hash)
    head.set_branch(name)
    logger.debug("Created branch %s at %s", name, commit_hash[:7] or '(no commits)')
    return commit_hash


def remove_branch(repo, name: str) -> None:
    """
    Delete a branch record.

    Raises:
        NotFoundError: If the branch does not exist
        InvalidOperationError: If it is the branch HEAD is attached to
    """
    head = repo.head
    if head.branch_exists(name) and head.attached_branch() == name:
        raise InvalidOperationError("Cannot remove current branch")
    head.branches.delete(name)


def list_branches(repo) -> List[str]:
    """Sorted branch names."""
    return repo.head.branches.names()
