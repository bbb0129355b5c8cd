"""Tree construction from a flat path mapping.

A snapshot is modelled as a tagged variant: a ``BlobLeaf`` holds a content
hash, a ``DirNode`` holds named children. Hashing, persisting and
flattening are plain recursive functions over that variant.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Mapping, Union

from .objects import BLOB, TREE, Tree
from .store import ObjectStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BlobLeaf:
    """File at the end of a path."""

    hash: str


@dataclass
class DirNode:
    """Directory with named children."""

    children: Dict[str, 'Node'] = field(default_factory=dict)

    def is_empty(self) -> bool:
        return not self.children


Node = Union[BlobLeaf, DirNode]


def insert_path(root: DirNode, path: str, blob_hash: str) -> bool:
    """
    Insert a blob leaf at path, creating directories on demand.

    An existing name is never overwritten: the first write wins.

    Args:
        root: Root directory node
        path: Slash-separated path
        blob_hash: Content hash of the file

    Returns:
        bool: False if the path was skipped because a file is in the way
    """
    *dirs, name = path.split('/')
    node = root

    for part in dirs:
        child = node.children.get(part)
        if child is None:
            child = DirNode()
            node.children[part] = child
        elif isinstance(child, BlobLeaf):
            return False
        node = child

    node.children.setdefault(name, BlobLeaf(blob_hash))
    return True


def build_tree(entries: Mapping[str, str]) -> DirNode:
    """
    Build a directory hierarchy from a path -> blob hash mapping.

    Paths are inserted in sorted order so the result does not depend on
    the mapping's iteration order.
    """
    root = DirNode()
    for path in sorted(entries):
        if not insert_path(root, path, entries[path]):
            logger.warning("Skipping '%s': a parent path is tracked as a file", path)
    return root


def tree_object(node: DirNode) -> Tree:
    """Build the Tree object for one directory level."""
    tree = Tree()
    for name, child in node.children.items():
        if isinstance(child, BlobLeaf):
            tree.add_entry(BLOB, child.hash, name)
        else:
            tree.add_entry(TREE, hash_node(child), name)
    return tree


def hash_node(node: Node) -> str:
    """Compute the hash of a node, recursing into subdirectories."""
    if isinstance(node, BlobLeaf):
        return node.hash
    return tree_object(node).hash


def write_tree(store: ObjectStore, node: DirNode) -> str:
    """
    Persist every directory node, children first.

    Blob leaves are not written; their content is already in the store.

    Returns:
        str: Hash of node
    """
    tree = Tree()
    for name, child in node.children.items():
        if isinstance(child, BlobLeaf):
            tree.add_entry(BLOB, child.hash, name)
        else:
            tree.add_entry(TREE, write_tree(store, child), name)
    return store.write_object(tree)


def read_tree(store: ObjectStore, tree_hash: str) -> DirNode:
    """Load a full directory hierarchy from the store."""
    node = DirNode()
    for entry in store.read_tree(tree_hash).entries:
        if entry.type == TREE:
            node.children[entry.name] = read_tree(store, entry.hash)
        else:
            node.children[entry.name] = BlobLeaf(entry.hash)
    return node


def flatten(node: DirNode, prefix: str = '') -> Dict[str, str]:
    """
    Flatten a hierarchy back into a path -> blob hash mapping.

    Args:
        node: Directory node
        prefix: Path prefix for nested calls

    Returns:
        Dict mapping slash-separated paths to blob hashes
    """
    files = {}
    for name, child in node.children.items():
        path = f"{prefix}{name}"
        if isinstance(child, BlobLeaf):
            files[path] = child.hash
        else:
            files.update(flatten(child, f"{path}/"))
    return files
