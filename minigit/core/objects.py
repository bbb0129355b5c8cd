"""MiniGit objects: blobs, trees and commits.

Each object kind serializes to the exact bytes that are hashed and stored.
There is no shared header: the object kind is implied by the store directory
the object lives in.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import ClassVar, List, Optional

from .errors import CorruptObjectError
from .hash import hash_object

BLOB = 'blob'
TREE = 'tree'
COMMIT = 'commit'


@dataclass
class Blob:
    """
    Represents file content.

    A blob stores the raw content of a file without any metadata
    like filename or permissions.
    """

    kind: ClassVar[str] = BLOB

    data: bytes = b''

    def serialize(self) -> bytes:
        """Return the raw file content."""
        return self.data

    @classmethod
    def parse(cls, data: bytes) -> 'Blob':
        """Build a blob from stored bytes."""
        return cls(data)

    @classmethod
    def from_file(cls, filepath) -> 'Blob':
        """
        Create blob from file.

        Args:
            filepath: Path to file

        Returns:
            Blob: New blob containing file content
        """
        with open(filepath, 'rb') as f:
            return cls(f.read())

    @property
    def hash(self) -> str:
        return hash_object(self.data)

    def __repr__(self) -> str:
        return f"Blob(hash={self.hash[:7]}, size={len(self.data)})"


@dataclass(frozen=True)
class TreeEntry:
    """
    Represents a single entry in a tree.

    Each entry contains:
    - type: Object type ('blob' or 'tree')
    - hash: SHA-1 hash of the object
    - name: Filename or directory name
    """

    type: str
    hash: str
    name: str

    def __lt__(self, other: 'TreeEntry') -> bool:
        """Sort entries by name for consistent ordering."""
        return self.name < other.name

    def __str__(self) -> str:
        return f"{self.type} {self.hash} {self.name}"


@dataclass
class Tree:
    """
    Represents one directory level.

    A tree contains entries pointing to blobs (files) and other trees
    (subdirectories). Entries are always serialized sorted by name so the
    hash depends only on the set of entries, never on insertion order.
    """

    kind: ClassVar[str] = TREE

    entries: List[TreeEntry] = field(default_factory=list)

    def add_entry(self, obj_type: str, obj_hash: str, name: str) -> None:
        """
        Add entry to tree.

        Args:
            obj_type: Object type ('blob' or 'tree')
            obj_hash: Object hash
            name: Entry name
        """
        self.entries.append(TreeEntry(obj_type, obj_hash, name))

    def serialize(self) -> bytes:
        """
        Serialize tree to bytes.

        Format: one ``<type> <hash> <name>`` line per entry, sorted by name.

        Returns:
            bytes: Serialized tree data
        """
        return ''.join(f"{entry}\n" for entry in sorted(self.entries)).encode()

    @classmethod
    def parse(cls, data: bytes) -> 'Tree':
        """
        Deserialize tree from bytes.

        Args:
            data: Serialized tree data

        Raises:
            CorruptObjectError: If a line is not a valid entry
        """
        tree = cls()
        for line in data.decode().splitlines():
            if not line:
                continue
            parts = line.split(' ', 2)
            if len(parts) != 3 or parts[0] not in (BLOB, TREE) or not parts[2]:
                raise CorruptObjectError(f"Invalid tree entry: {line!r}")
            tree.add_entry(parts[0], parts[1], parts[2])
        return tree

    @property
    def hash(self) -> str:
        return hash_object(self.serialize())

    def __repr__(self) -> str:
        return f"Tree(entries={len(self.entries)})"


def escape_field(text: str) -> str:
    """Escape a free-text commit field (author, message) so it fits on one line."""
    return text.replace('\\', '\\\\').replace('\n', '\\n').replace('\r', '\\r')


def unescape_field(text: str) -> str:
    """Inverse of escape_field."""
    result = []
    chars = iter(text)
    for char in chars:
        if char != '\\':
            result.append(char)
            continue
        following = next(chars, '')
        if following == 'n':
            result.append('\n')
        elif following == 'r':
            result.append('\r')
        else:
            result.append(following)
    return ''.join(result)


def format_date(date: datetime) -> str:
    """Format an aware datetime as ISO-8601 with a ``+HH:MM`` offset."""
    return date.isoformat(timespec='seconds')


@dataclass
class Commit:
    """
    Represents a commit.

    A commit captures:
    - Snapshot of project (tree hash)
    - Parent commit (empty string for the root commit)
    - Author
    - Timestamp with UTC offset
    - Commit message
    """

    kind: ClassVar[str] = COMMIT

    tree: str = ''
    parent: str = ''
    author: str = ''
    date: Optional[datetime] = None
    message: str = ''

    def serialize(self) -> bytes:
        """
        Serialize commit to bytes.

        Format (five lines):
        tree <tree-hash>
        parent <parent-hash or empty>
        author <escaped name>
        date <ISO-8601 timestamp with offset>
        message <escaped message>

        Returns:
            bytes: Serialized commit data
        """
        lines = [
            f'tree {self.tree}',
            f'parent {self.parent}',
            f'author {escape_field(self.author)}',
            f'date {format_date(self.date)}',
            f'message {escape_field(self.message)}',
        ]
        return '\n'.join(lines).encode()

    @classmethod
    def parse(cls, data: bytes) -> 'Commit':
        """
        Deserialize commit from bytes.

        Raises:
            CorruptObjectError: If the body does not have the five header lines
        """
        lines = data.decode().split('\n')
        keys = ('tree', 'parent', 'author', 'date', 'message')
        if len(lines) != len(keys):
            raise CorruptObjectError(f"Commit has {len(lines)} lines, expected {len(keys)}")

        values = {}
        for key, line in zip(keys, lines):
            if line != key and not line.startswith(key + ' '):
                raise CorruptObjectError(f"Expected '{key}' line, got {line!r}")
            values[key] = line[len(key) + 1:]

        try:
            date = datetime.fromisoformat(values['date'])
        except ValueError:
            raise CorruptObjectError(f"Invalid commit date: {values['date']!r}")

        return cls(
            tree=values['tree'],
            parent=values['parent'],
            author=unescape_field(values['author']),
            date=date,
            message=unescape_field(values['message']),
        )

    @classmethod
    def create(
        cls,
        tree_hash: str,
        parent_hash: str,
        author: str,
        message: str,
        date: Optional[datetime] = None,
    ) -> 'Commit':
        """
        Create a new commit.

        Args:
            tree_hash: Hash of root tree object
            parent_hash: Parent commit hash, or '' for a root commit
            author: Author name
            message: Commit message
            date: Commit time (defaults to now, in the local offset)

        Returns:
            Commit: New commit object
        """
        if date is None:
            date = datetime.now().astimezone()
        elif date.tzinfo is None:
            date = date.astimezone()
        return cls(
            tree=tree_hash,
            parent=parent_hash,
            author=author,
            date=date.replace(microsecond=0),
            message=message,
        )

    @property
    def hash(self) -> str:
        return hash_object(self.serialize())

    def __repr__(self) -> str:
        msg_preview = self.message.split('\n')[0][:50]
        return f"Commit(hash={self.hash[:7]}, msg='{msg_preview}')"
