"""Repository management for MiniGit."""

import logging
from pathlib import Path
from typing import Optional

from .errors import AlreadyExistsError, NotInitializedError

logger = logging.getLogger(__name__)

META_DIR = '.mini-git'
MASTER_BRANCH = 'master'


class Repository:
    """
    Represents a MiniGit repository.

    A repository owns the working directory and the .mini-git directory
    beneath it, and hands out the components that operate on them.
    """

    def __init__(self, path: str = '.'):
        """
        Initialize repository.

        Args:
            path: Path to repository root (defaults to current directory)
        """
        self.work_tree = Path(path).resolve()
        self.meta_dir = self.work_tree / META_DIR
        self.blobs_dir = self.meta_dir / 'blobs'
        self.trees_dir = self.meta_dir / 'trees'
        self.commits_dir = self.meta_dir / 'commits'
        self.branches_dir = self.meta_dir / 'branches'
        self.head_file = self.meta_dir / 'HEAD'
        self.index_file = self.meta_dir / 'INDEX'
        self.config_file = self.meta_dir / 'config'
        self.lock_file = self.meta_dir / 'LOCK'

        # Lazily created components (avoids import cycles)
        self._objects = None
        self._head = None
        self._lock = None
        self._config = None

    @property
    def objects(self):
        """Get ObjectStore instance."""
        if self._objects is None:
            from .store import ObjectStore
            self._objects = ObjectStore(self.meta_dir)
        return self._objects

    @property
    def head(self):
        """Get HeadState instance."""
        if self._head is None:
            from .refs import HeadState
            self._head = HeadState(self)
        return self._head

    @property
    def lock(self):
        """Get RepositoryLock instance."""
        if self._lock is None:
            from .lock import RepositoryLock
            self._lock = RepositoryLock(self.lock_file)
        return self._lock

    @property
    def config(self):
        """Get Config instance."""
        if self._config is None:
            from .config import Config
            self._config = Config(self.config_file)
        return self._config

    def load_index(self):
        """Read the staging index from disk."""
        from .index import StagingIndex
        index = StagingIndex(self)
        index.load()
        return index

    def init(self) -> 'Repository':
        """
        Initialize a new repository.

        Creates the .mini-git directory structure:
        .mini-git/
        ├── blobs/         # File contents
        ├── trees/         # Directory snapshots
        ├── commits/       # Commit records
        ├── branches/      # One file per branch, holding a commit hash
        ├── HEAD           # 'ref <branch>' or a detached commit hash
        └── INDEX          # Staging area

        The 'master' branch is created empty and HEAD is attached to it.

        Returns:
            Repository: self for method chaining

        Raises:
            AlreadyExistsError: If repository already exists
        """
        if self.meta_dir.exists():
            raise AlreadyExistsError(f"Repository already exists at {self.meta_dir}")

        self.meta_dir.mkdir(parents=True)
        for directory in (self.blobs_dir, self.trees_dir, self.commits_dir, self.branches_dir):
            directory.mkdir()

        self.index_file.write_text('')
        (self.branches_dir / MASTER_BRANCH).write_text('')
        self.head_file.write_text(f'ref {MASTER_BRANCH}')

        logger.debug("Initialized repository at %s", self.meta_dir)
        return self

    def is_initialized(self) -> bool:
        """Check whether the metadata directory exists."""
        return self.head_file.is_file()

    def require_initialized(self) -> None:
        """
        Raises:
            NotInitializedError: If init has not been run
        """
        if not self.is_initialized():
            raise NotInitializedError(f"MiniGit repository not initialized in {self.work_tree}")

    def is_metadata(self, path: Path) -> bool:
        """Exclusion predicate for working-tree traversal."""
        return path == self.meta_dir

    @classmethod
    def find_repository(cls, path: str = '.') -> Optional['Repository']:
        """
        Find repository by searching up the directory tree.

        Args:
            path: Starting path for search

        Returns:
            Repository if found, None otherwise
        """
        current = Path(path).resolve()

        while True:
            if (current / META_DIR).is_dir():
                return cls(str(current))

            if current == current.parent:
                return None

            current = current.parent

    def __repr__(self) -> str:
        return f"Repository(path={self.work_tree})"
