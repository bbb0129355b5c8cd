"""Core functionality for MiniGit.

This module contains the core data structures:
- Objects (Blob, Tree, Commit) and the content-addressed ObjectStore
- Tree construction from the staging index
- Staging index
- HEAD and branch records
- Repository layout, locking and configuration
- Error hierarchy

For status, commit, reset, checkout, log and branch commands,
see minigit.operations
"""

from minigit.core.errors import (
    ErrorKind, MiniGitError, NotInitializedError, NotFoundError, AlreadyExistsError,
    CorruptIndexError, CorruptObjectError, InvalidOperationError, UnsupportedError,
    IOFailureError,
)
from minigit.core.objects import Blob, Tree, TreeEntry, Commit
from minigit.core.store import ObjectStore
from minigit.core.tree import BlobLeaf, DirNode, build_tree, write_tree, read_tree, flatten
from minigit.core.repository import Repository
from minigit.core.hash import hash_object, hash_file
from minigit.core.index import StagingIndex
from minigit.core.refs import BranchStore, HeadState
from minigit.core.lock import RepositoryLock
from minigit.core.config import Config

__all__ = [
    'ErrorKind',
    'MiniGitError',
    'NotInitializedError',
    'NotFoundError',
    'AlreadyExistsError',
    'CorruptIndexError',
    'CorruptObjectError',
    'InvalidOperationError',
    'UnsupportedError',
    'IOFailureError',
    'Blob',
    'Tree',
    'TreeEntry',
    'Commit',
    'ObjectStore',
    'BlobLeaf',
    'DirNode',
    'build_tree',
    'write_tree',
    'read_tree',
    'flatten',
    'Repository',
    'StagingIndex',
    'BranchStore',
    'HeadState',
    'RepositoryLock',
    'Config',
    'hash_object',
    'hash_file',
]
