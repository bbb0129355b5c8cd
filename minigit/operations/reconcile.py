"""Reconciliation of the working tree, the index and the committed tree.

Status compares the three views; commit, reset and checkout move HEAD and
rewrite the index and working tree to match the target snapshot.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional

from minigit.core.errors import InvalidOperationError, NotFoundError
from minigit.core.objects import Commit
from minigit.core.tree import build_tree, flatten, write_tree
from minigit.utils.worktree import (
    clear_directory,
    hash_working_files,
    list_working_files,
    normalize_path,
    prune_empty_dirs,
    reject_excluded,
    write_file,
)

logger = logging.getLogger(__name__)


@dataclass
class Changes:
    """Paths grouped by how the newer view differs from the older one."""

    new: List[str] = field(default_factory=list)
    modified: List[str] = field(default_factory=list)
    deleted: List[str] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not (self.new or self.modified or self.deleted)


def classify(current: Mapping[str, str], base: Mapping[str, str]) -> Changes:
    """
    Classify paths of current against base.

    - only in current: new
    - only in base: deleted
    - in both with different hashes: modified

    Args:
        current: path -> hash of the newer view
        base: path -> hash of the older view
    """
    changes = Changes()
    for path in sorted(set(current) | set(base)):
        if path not in base:
            changes.new.append(path)
        elif path not in current:
            changes.deleted.append(path)
        elif current[path] != base[path]:
            changes.modified.append(path)
    return changes


@dataclass
class StatusReport:
    """Result of a status computation."""

    branch: str
    unstaged: Changes
    staged: Changes

    @property
    def is_clean(self) -> bool:
        return self.unstaged.is_empty() and self.staged.is_empty()


class ReconciliationEngine:
    """
    Keeps HEAD, the index and the working tree in step.

    Operates on a Repository; each public method loads the index it needs
    and saves it when it changes it.
    """

    def __init__(self, repo):
        """
        Initialize engine.

        Args:
            repo: Repository instance
        """
        self.repo = repo
        self.head = repo.head

    def working_files(self) -> Dict[str, str]:
        """path -> content hash for every file in the working tree."""
        files = list_working_files(self.repo.work_tree, self.repo.is_metadata)
        return hash_working_files(files)

    def status(self) -> StatusReport:
        """
        Compare working tree vs index and index vs current commit.

        Raises:
            InvalidOperationError: If HEAD is detached
        """
        if self.head.is_detached():
            raise InvalidOperationError("Head is detached")

        index = self.repo.load_index().entries()
        committed = flatten(self.head.load_tree())

        return StatusReport(
            branch=self.head.current_branch(),
            unstaged=classify(self.working_files(), index),
            staged=classify(index, committed),
        )

    def commit(self, message: str, author: Optional[str] = None) -> str:
        """
        Record the index as a new commit on the current ref.

        Empty commits are allowed.

        Args:
            message: Commit message
            author: Author name (defaults to configured user.name)

        Returns:
            str: New commit hash
        """
        index = self.repo.load_index()
        objects = self.repo.objects

        tree_hash = write_tree(objects, build_tree(index.entries()))
        commit = Commit.create(
            tree_hash=tree_hash,
            parent_hash=self.head.current_commit_hash(),
            author=author or self.repo.config.author(),
            message=message,
        )
        commit_hash = objects.write_object(commit)
        self.head.set_commit(commit_hash)

        logger.debug("Committed %s (tree %s, %d files)", commit_hash[:7], tree_hash[:7], len(index))
        return commit_hash

    def _move_head(self, target: str, detach: bool) -> None:
        if self.head.branch_exists(target):
            self.head.set_branch(target)
        elif self.head.commit_exists(target):
            if detach:
                self.head.set_commit_detached(target)
            else:
                self.head.set_commit(target)
        else:
            raise NotFoundError(f"Neither commit, nor branch exists named '{target}'")

    def _materialize(self, entries: Mapping[str, str]) -> None:
        work_tree = self.repo.work_tree
        for path, blob_hash in sorted(entries.items()):
            write_file(work_tree / path, self.repo.objects.read_blob(blob_hash).data)

    def _sync_index(self) -> Dict[str, str]:
        entries = flatten(self.head.load_tree())
        index = self.repo.load_index()
        index.set_entries(entries)
        index.save()
        return entries

    def reset(self, target: str) -> None:
        """
        Move HEAD to target and overwrite index and working tree with its tree.

        A branch name attaches HEAD; a commit hash moves the current ref.
        Everything in the working tree outside the metadata directory is
        deleted first, so uncommitted work is lost.

        Raises:
            NotFoundError: If target is neither a branch nor a commit
        """
        self._move_head(target, detach=False)
        entries = self._sync_index()

        clear_directory(self.repo.work_tree, self.repo.is_metadata)
        self._materialize(entries)
        logger.debug("Reset to %s (%d files)", target, len(entries))

    def checkout(self, target: str) -> None:
        """
        Switch to a branch or a detached commit.

        Files of the new tree are written (overwriting), files tracked only
        by the previous tree are deleted, and directories left empty are
        pruned. Untracked files are left alone.

        Raises:
            NotFoundError: If target is neither a branch nor a commit
        """
        previous = flatten(self.head.load_tree())

        self._move_head(target, detach=True)
        entries = self._sync_index()
        self._materialize(entries)

        work_tree = self.repo.work_tree
        for path in sorted(set(previous) - set(entries)):
            stale = work_tree / path
            # A new file may now stand where this path's parent directory was
            if stale.is_file() or stale.is_symlink():
                stale.unlink()

        prune_empty_dirs(work_tree, self.repo.is_metadata)
        logger.debug("Checked out %s (%d files)", target, len(entries))

    def checkout_paths(self, paths: Iterable[str]) -> List[str]:
        """
        Restore files from the current commit. HEAD and index are unchanged.

        Every path is validated before anything is written.

        Returns:
            List of restored paths

        Raises:
            NotFoundError: If a path is not tracked by the current commit
        """
        committed = flatten(self.head.load_tree())
        work_tree = self.repo.work_tree

        restored = [normalize_path(work_tree, path) for path in paths]
        for path in restored:
            reject_excluded(work_tree, path, self.repo.is_metadata)
            if path not in committed:
                raise NotFoundError(f"Filename '{path}' is not recognized by git")

        for path in restored:
            write_file(work_tree / path, self.repo.objects.read_blob(committed[path]).data)

        return restored
