"""Reference management for MiniGit: branch records and HEAD."""

import logging
from pathlib import Path
from typing import List

from .errors import AlreadyExistsError, InvalidOperationError, NotFoundError
from .hash import is_hash
from .objects import COMMIT
from .tree import DirNode, read_tree

logger = logging.getLogger(__name__)

REF_PREFIX = 'ref '


def validate_branch_name(name: str) -> None:
    """
    Raises:
        InvalidOperationError: If name cannot be used as a branch record filename
    """
    if (not name or name in ('.', '..') or '/' in name or '\\' in name
            or any(c.isspace() for c in name)):
        raise InvalidOperationError(f"Invalid branch name: '{name}'")


class BranchStore:
    """
    Branch records: one file per branch under .mini-git/branches.

    Each file holds a raw commit hash, or nothing for a branch that has no
    commits yet.
    """

    def __init__(self, branches_dir: Path):
        self.branches_dir = branches_dir

    def path(self, name: str) -> Path:
        return self.branches_dir / name

    def exists(self, name: str) -> bool:
        return bool(name) and self.path(name).is_file()

    def read(self, name: str) -> str:
        """Commit hash of branch, '' if it has none or does not exist."""
        path = self.path(name)
        if not path.is_file():
            return ''
        return path.read_text().strip()

    def write(self, name: str, commit_hash: str) -> None:
        self.path(name).write_text(commit_hash)
        logger.debug("Branch %s -> %s", name, commit_hash[:7] or '(empty)')

    def create(self, name: str, commit_hash: str) -> None:
        """
        Raises:
            AlreadyExistsError: If branch exists
        """
        validate_branch_name(name)
        if self.exists(name):
            raise AlreadyExistsError(f"Branch '{name}' already exists")
        self.write(name, commit_hash)

    def delete(self, name: str) -> None:
        """
        Raises:
            NotFoundError: If branch does not exist
        """
        if not self.exists(name):
            raise NotFoundError(f"Branch '{name}' does not exist")
        self.path(name).unlink()
        logger.debug("Deleted branch %s", name)

    def names(self) -> List[str]:
        """Sorted branch names."""
        if not self.branches_dir.exists():
            return []
        return sorted(p.name for p in self.branches_dir.iterdir() if p.is_file())


class HeadState:
    """
    Tracks the current checkout position.

    HEAD is either attached to a branch (file content ``ref <branch>``) or
    detached at a raw commit hash.
    """

    def __init__(self, repo):
        """
        Initialize HEAD state.

        Args:
            repo: Repository instance
        """
        self.repo = repo
        self.head_file = repo.head_file
        self.branches = BranchStore(repo.branches_dir)

    def _read(self) -> str:
        return self.head_file.read_text().strip()

    def is_detached(self) -> bool:
        """True if HEAD holds a raw commit hash."""
        return not self._read().startswith(REF_PREFIX)

    def attached_branch(self) -> str:
        """Branch name if attached, '' if detached."""
        content = self._read()
        if content.startswith(REF_PREFIX):
            return content[len(REF_PREFIX):]
        return ''

    def current_branch(self) -> str:
        """
        Get the current branch name.

        Returns:
            Branch name, or the commit hash when HEAD is detached
        """
        content = self._read()
        if content.startswith(REF_PREFIX):
            return content[len(REF_PREFIX):]
        return content

    def current_commit_hash(self) -> str:
        """
        Resolve HEAD to a commit hash.

        Returns:
            Commit hash, or '' if the current branch has no commits yet
        """
        content = self._read()
        if content.startswith(REF_PREFIX):
            return self.branches.read(content[len(REF_PREFIX):])
        return content

    def branch_exists(self, name: str) -> bool:
        return self.branches.exists(name)

    def commit_exists(self, commit_hash: str) -> bool:
        return is_hash(commit_hash) and self.repo.objects.exists(COMMIT, commit_hash)

    def set_branch(self, name: str) -> None:
        """
        Attach HEAD to a branch.

        Raises:
            NotFoundError: If the branch does not exist
        """
        if not self.branch_exists(name):
            raise NotFoundError(f"Branch '{name}' does not exist")
        self.head_file.write_text(f"{REF_PREFIX}{name}")
        logger.debug("HEAD -> ref %s", name)

    def set_commit_detached(self, commit_hash: str) -> None:
        """Detach HEAD at a raw commit hash."""
        self.head_file.write_text(commit_hash)
        logger.debug("HEAD detached at %s", commit_hash[:7])

    def set_commit(self, commit_hash: str) -> None:
        """
        Move the current ref to a commit.

        If attached, the current branch is moved; if detached, HEAD itself.

        Raises:
            NotFoundError: If the commit does not exist
        """
        if not self.commit_exists(commit_hash):
            raise NotFoundError(f"Commit '{commit_hash}' does not exist")

        branch = self.attached_branch()
        if branch:
            self.branches.write(branch, commit_hash)
        else:
            self.set_commit_detached(commit_hash)

    def shifted_commit(self, n: int) -> str:
        """
        Walk n parent links back from the current commit.

        Args:
            n: Number of steps (HEAD~n)

        Returns:
            Commit hash n steps back

        Raises:
            InvalidOperationError: If n is negative
            NotFoundError: If history is shorter than n commits
        """
        if n < 0:
            raise InvalidOperationError(f"HEAD~N requires a non-negative N, got {n}")

        commit_hash = self.current_commit_hash()
        steps = n
        while steps > 0 and commit_hash:
            commit_hash = self.repo.objects.read_commit(commit_hash).parent
            steps -= 1

        if not commit_hash:
            raise NotFoundError(f"No commit found associated with HEAD~{n}")
        return commit_hash

    def load_tree(self) -> DirNode:
        """
        Load the tree of the current commit.

        Returns:
            Root directory node; empty for a repository without commits
        """
        commit_hash = self.current_commit_hash()
        if not commit_hash:
            return DirNode()
        commit = self.repo.objects.read_commit(commit_hash)
        return read_tree(self.repo.objects, commit.tree)

    def __repr__(self) -> str:
        state = 'detached' if self.is_detached() else 'attached'
        return f"HeadState({state}, {self.current_branch()})"
