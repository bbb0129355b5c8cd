"""Commit history."""

from dataclasses import dataclass
from typing import List, Optional

from minigit.core.errors import NotFoundError
from minigit.core.objects import Commit, format_date


@dataclass
class LogEntry:
    """One commit in the history."""

    hash: str
    commit: Commit

    def format(self) -> str:
        return (
            f"Commit {self.hash}\n"
            f"Author: {self.commit.author}\n"
            f"Date: {format_date(self.commit.date)}\n"
            f"\n"
            f"{self.commit.message}\n"
        )


def resolve_start(repo, revision: Optional[str]) -> str:
    """
    Resolve the starting point of a log walk.

    Args:
        repo: Repository instance
        revision: Branch name, commit hash, or None for the current commit

    Returns:
        Commit hash ('' for a branch without commits)

    Raises:
        NotFoundError: If revision is neither a branch nor a commit
    """
    head = repo.head
    if revision is None:
        return head.current_commit_hash()
    if head.branch_exists(revision):
        return head.branches.read(revision)
    if head.commit_exists(revision):
        return revision
    raise NotFoundError(f"Neither commit, nor branch exists named '{revision}'")


def get_commit_history(repo, start_hash: str) -> List[LogEntry]:
    """
    Walk first-parent history from start_hash until the root commit.

    Returns:
        Entries in reverse chronological order
    """
    history = []
    commit_hash = start_hash
    while commit_hash:
        commit = repo.objects.read_commit(commit_hash)
        history.append(LogEntry(commit_hash, commit))
        commit_hash = commit.parent
    return history
