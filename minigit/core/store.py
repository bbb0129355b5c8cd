"""Content-addressed object store.

Blobs, trees and commits each live in their own directory under the
repository metadata directory, with the object's SHA-1 as the filename:

    .mini-git/blobs/<hash>
    .mini-git/trees/<hash>
    .mini-git/commits/<hash>

Objects are written once and never modified or deleted.
"""

import logging
from pathlib import Path
from typing import Dict, Union

from .errors import NotFoundError
from .hash import hash_object
from .objects import BLOB, COMMIT, TREE, Blob, Commit, Tree

logger = logging.getLogger(__name__)

MiniGitObject = Union[Blob, Tree, Commit]


class ObjectStore:
    """Reads and writes content-addressed objects."""

    def __init__(self, meta_dir: Path):
        """
        Initialize object store.

        Args:
            meta_dir: Repository metadata directory
        """
        self.dirs: Dict[str, Path] = {
            BLOB: meta_dir / 'blobs',
            TREE: meta_dir / 'trees',
            COMMIT: meta_dir / 'commits',
        }

    def object_path(self, kind: str, obj_hash: str) -> Path:
        """
        Get filesystem path for an object.

        Args:
            kind: Object kind ('blob', 'tree' or 'commit')
            obj_hash: 40-character SHA-1 hash

        Returns:
            Path: Full path to object file
        """
        return self.dirs[kind] / obj_hash

    def put(self, kind: str, data: bytes) -> str:
        """
        Store bytes under their content hash.

        The write is skipped when the object already exists, so storing
        the same bytes twice performs at most one physical write.

        Args:
            kind: Object kind
            data: Exact bytes to hash and store

        Returns:
            str: SHA-1 hash of data
        """
        obj_hash = hash_object(data)
        path = self.object_path(kind, obj_hash)

        if path.exists():
            logger.debug("%s %s already stored", kind, obj_hash[:7])
            return obj_hash

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        logger.debug("Stored %s %s (%d bytes)", kind, obj_hash[:7], len(data))
        return obj_hash

    def get(self, kind: str, obj_hash: str) -> bytes:
        """
        Read raw object bytes.

        Raises:
            NotFoundError: If the object does not exist
        """
        path = self.object_path(kind, obj_hash)
        if not obj_hash or not path.is_file():
            raise NotFoundError(f"{kind.capitalize()} '{obj_hash}' does not exist")
        return path.read_bytes()

    def exists(self, kind: str, obj_hash: str) -> bool:
        """Check if object exists in the store."""
        return bool(obj_hash) and self.object_path(kind, obj_hash).is_file()

    def write_object(self, obj: MiniGitObject) -> str:
        """
        Write object to the store.

        Args:
            obj: Blob, Tree or Commit

        Returns:
            str: SHA-1 hash of the object
        """
        return self.put(obj.kind, obj.serialize())

    def read_blob(self, obj_hash: str) -> Blob:
        return Blob.parse(self.get(BLOB, obj_hash))

    def read_tree(self, obj_hash: str) -> Tree:
        return Tree.parse(self.get(TREE, obj_hash))

    def read_commit(self, obj_hash: str) -> Commit:
        return Commit.parse(self.get(COMMIT, obj_hash))

    def __repr__(self) -> str:
        return f"ObjectStore(path={self.dirs[BLOB].parent})"
