"""Working-directory traversal and rewriting.

All traversals take an ``exclude`` predicate that is called for every
directory before descending into it; the repository passes one that
matches its metadata directory.
"""

import logging
import shutil
from pathlib import Path, PurePosixPath
from typing import Callable, Dict, Iterable, Iterator

from minigit.core.errors import InvalidOperationError
from minigit.core.hash import hash_file

logger = logging.getLogger(__name__)

ExcludePredicate = Callable[[Path], bool]


def normalize_path(work_tree: Path, name: str) -> str:
    """
    Convert a user-supplied path into a repository-relative posix path.

    Strips ``./`` segments and accepts absolute paths inside the working
    tree. The working root itself normalizes to ''.

    Raises:
        InvalidOperationError: If the path points outside the working tree
    """
    raw = name.replace('\\', '/')
    candidate = Path(raw)
    if candidate.is_absolute():
        try:
            raw = candidate.resolve().relative_to(work_tree).as_posix()
        except ValueError:
            raise InvalidOperationError(f"Path '{name}' is outside the repository")

    parts = []
    for part in PurePosixPath(raw).parts:
        if part in ('.', ''):
            continue
        if part == '..':
            if not parts:
                raise InvalidOperationError(f"Path '{name}' is outside the repository")
            parts.pop()
            continue
        parts.append(part)
    return '/'.join(parts)


def reject_excluded(work_tree: Path, rel_path: str, exclude: ExcludePredicate) -> Path:
    """
    Resolve rel_path under work_tree, refusing excluded locations.

    Returns:
        Absolute path

    Raises:
        InvalidOperationError: If the path is an excluded directory or lies beneath one
    """
    full_path = work_tree / rel_path if rel_path else work_tree
    if any(exclude(path) for path in (full_path, *full_path.parents)):
        raise InvalidOperationError(f"Path '{rel_path}' is inside the repository metadata")
    return full_path


def iter_files(directory: Path, exclude: ExcludePredicate) -> Iterator[Path]:
    """Yield every regular file beneath directory, skipping excluded directories."""
    stack = [directory]
    while stack:
        current = stack.pop()
        for item in sorted(current.iterdir()):
            if item.is_dir() and not item.is_symlink():
                if not exclude(item):
                    stack.append(item)
            elif item.is_file():
                yield item


def list_working_files(work_tree: Path, exclude: ExcludePredicate) -> Dict[str, Path]:
    """Map relative posix path -> absolute path for every working file."""
    return {
        path.relative_to(work_tree).as_posix(): path
        for path in iter_files(work_tree, exclude)
    }


def hash_working_files(files: Dict[str, Path]) -> Dict[str, str]:
    """Hash the content of each working file."""
    return {rel_path: hash_file(path) for rel_path, path in files.items()}


def expand_paths(work_tree: Path, names: Iterable[str],
                 exclude: ExcludePredicate) -> Dict[str, Path]:
    """
    Expand user paths into individual files.

    Directories are expanded recursively to the regular files beneath them.
    Any other name (including one that no longer exists on disk) maps to
    itself so the caller can decide how to treat it.

    Returns:
        Dict mapping relative posix path to absolute path

    Raises:
        InvalidOperationError: If a name points into an excluded directory
    """
    result = {}
    for name in names:
        rel_path = normalize_path(work_tree, name)
        full_path = reject_excluded(work_tree, rel_path, exclude)

        if full_path.is_dir():
            for path in iter_files(full_path, exclude):
                result[path.relative_to(work_tree).as_posix()] = path
        elif rel_path:
            result[rel_path] = full_path
    return result


def write_file(path: Path, data: bytes) -> None:
    """Write data to path, creating parent directories.

    A file standing where a parent directory is needed, or a directory
    standing where the file goes, is removed first.
    """
    for parent in reversed(path.parents):
        if parent.is_file() or parent.is_symlink():
            parent.unlink()
            break
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)


def clear_directory(root: Path, exclude: ExcludePredicate) -> int:
    """
    Delete every file and directory under root except excluded ones.

    Returns:
        Number of top-level entries removed
    """
    removed = 0
    for item in list(root.iterdir()):
        if item.is_dir() and not item.is_symlink():
            if exclude(item):
                continue
            shutil.rmtree(item)
        else:
            item.unlink()
        removed += 1
    logger.debug("Cleared %d entries under %s", removed, root)
    return removed


def prune_empty_dirs(root: Path, exclude: ExcludePredicate) -> None:
    """Remove directories left empty beneath root. Root itself is kept."""
    for item in list(root.iterdir()):
        if item.is_dir() and not item.is_symlink() and not exclude(item):
            prune_empty_dirs(item, exclude)
            if not any(item.iterdir()):
                item.rmdir()
                logger.debug("Pruned empty directory %s", item)
