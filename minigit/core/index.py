"""Index (staging area) implementation."""

import logging
from typing import Dict, Iterable, List, Mapping

from minigit.utils.worktree import expand_paths

from .errors import CorruptIndexError, InvalidOperationError, NotFoundError
from .objects import Blob

logger = logging.getLogger(__name__)


class StagingIndex:
    """
    MiniGit index (staging area).

    The index maps repository-relative paths to the blob hash that will be
    recorded for that path by the next commit. It is stored as plain text,
    one ``<path> <hash>`` line per entry.
    """

    def __init__(self, repo):
        """
        Initialize empty index.

        Args:
            repo: Repository instance
        """
        self.repo = repo
        self._entries: Dict[str, str] = {}

    def load(self) -> None:
        """
        Read index from disk. A missing file is an empty index.

        Raises:
            CorruptIndexError: If a line is not '<path> <hash>'
        """
        self._entries.clear()
        if not self.repo.index_file.exists():
            return

        for number, line in enumerate(self.repo.index_file.read_text().splitlines(), 1):
            if not line:
                continue
            path, sep, blob_hash = line.rpartition(' ')
            if not sep or not path or not blob_hash:
                raise CorruptIndexError(f"Malformed index line {number}: {line!r}")
            self._entries[path] = blob_hash

        logger.debug("Loaded %d index entries", len(self._entries))

    def save(self) -> None:
        """Write index to disk, sorted by path."""
        content = ''.join(f"{path} {self._entries[path]}\n" for path in sorted(self._entries))
        self.repo.index_file.write_text(content)
        logger.debug("Saved %d index entries", len(self._entries))

    def add(self, paths: Iterable[str]) -> List[str]:
        """
        Stage files. Directories are expanded to every file beneath them.

        Each file's content is stored as a blob and its path is upserted
        with the blob hash.

        Args:
            paths: Paths relative to the working tree

        Returns:
            List of staged relative paths

        Raises:
            NotFoundError: If a path does not exist; nothing is staged
            InvalidOperationError: If a path contains a line break; nothing is staged
        """
        files = expand_paths(self.repo.work_tree, paths, self.repo.is_metadata)

        for rel_path in sorted(files):
            if '\n' in rel_path or '\r' in rel_path:
                raise InvalidOperationError(f"Cannot stage {rel_path!r}: path contains a line break")

        missing = sorted(rel for rel, full in files.items() if not full.is_file())
        if missing:
            raise NotFoundError(f"Path '{missing[0]}' did not match any files")

        for rel_path in sorted(files):
            blob = Blob.from_file(files[rel_path])
            self._entries[rel_path] = self.repo.objects.write_object(blob)

        return sorted(files)

    def remove(self, paths: Iterable[str]) -> List[str]:
        """
        Unstage files. Stored blobs are left untouched.

        A path that no longer exists on disk removes its own entry and
        any entries beneath it.

        Returns:
            List of removed relative paths

        Raises:
            InvalidOperationError: If a path lies inside the metadata directory
        """
        removed = []
        for rel_path, full_path in expand_paths(self.repo.work_tree, paths,
                                                self.repo.is_metadata).items():
            if full_path.exists():
                targets = [rel_path]
            else:
                prefix = rel_path + '/'
                targets = [rel_path] + [p for p in self._entries if p.startswith(prefix)]

            for target in targets:
                if self._entries.pop(target, None) is not None:
                    removed.append(target)

        return sorted(removed)

    def entries(self) -> Dict[str, str]:
        """Copy of the path -> blob hash mapping."""
        return dict(self._entries)

    def set_entries(self, entries: Mapping[str, str]) -> None:
        """Replace all entries."""
        self._entries = dict(entries)

    def get(self, path: str):
        return self._entries.get(path)

    def __contains__(self, path: str) -> bool:
        return path in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"StagingIndex(entries={len(self._entries)})"
