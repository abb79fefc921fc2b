"""Rit objects: trees and commits."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from .binary import BinaryReader, BinaryWriter
from .hash import DIGEST_SIZE, hash_object

ZERO_DIGEST = b'\x00' * DIGEST_SIZE

# Identity is not read from configuration yet.
DEFAULT_AUTHOR = 'rit <rit@localhost>'


class RitObject(ABC):
    """Base class for objects kept in the object store."""

    @abstractmethod
    def serialize(self) -> bytes:
        """
        Serialize object to bytes.

        Returns:
            bytes: Serialized object data
        """
        pass

    @classmethod
    @abstractmethod
    def deserialize(cls, data: bytes) -> 'RitObject':
        """
        Deserialize object from bytes.

        Args:
            data: Serialized object data
        """
        pass

    @property
    def type(self) -> str:
        """Object type name (tree, commit)."""
        return self.__class__.__name__.lower()

    @property
    def hash(self) -> str:
        """
        Hex digest of the serialized form.

        This is the key the object store files it under.
        """
        return hash_object(self.serialize())


class TreeEntry:
    """
    A single staged file inside a tree.

    Each entry contains:
    - mode: File mode as recorded in the index
    - path: './'-relative file path
    - digest: Raw 32-byte SHA-256 of the file content
    """

    def __init__(self, mode: int, path: str, digest: bytes):
        self.mode = mode
        self.path = path
        self.digest = digest

    def __eq__(self, other) -> bool:
        if not isinstance(other, TreeEntry):
            return NotImplemented
        return (self.mode, self.path, self.digest) == (other.mode, other.path, other.digest)

    def __repr__(self) -> str:
        return f"TreeEntry({self.mode:o} {self.digest.hex()[:7]} {self.path})"


class Tree(RitObject):
    """
    Flat snapshot of the staging area.

    Entries keep index order. Each one is written as
    ``mode (u32) | path length (u32) | path | digest (32 bytes)`` followed by
    zero padding to the next 8-byte boundary of the tree buffer.
    """

    def __init__(self, entries: Optional[List[TreeEntry]] = None):
        self.entries: List[TreeEntry] = list(entries or [])

    def add_entry(self, mode: int, path: str, digest: bytes) -> None:
        self.entries.append(TreeEntry(mode, path, digest))

    @classmethod
    def from_index(cls, index) -> 'Tree':
        """Build a tree from index entries, in index order."""
        tree = cls()
        for entry in index.entries:
            tree.add_entry(entry.mode, entry.path, entry.sha256)
        return tree

    def serialize(self) -> bytes:
        writer = BinaryWriter()
        for entry in self.entries:
            path_bytes = entry.path.encode()
            writer.pack('>II', entry.mode, len(path_bytes))
            writer.write(path_bytes)
            writer.write(entry.digest)
            writer.align()
        return writer.getvalue()

    @classmethod
    def deserialize(cls, data: bytes) -> 'Tree':
        """
        Parse a tree.

        Raises:
            ValueError: If an entry is truncated
        """
        tree = cls()
        reader = BinaryReader(data)
        while not reader.at_end():
            mode, path_len = reader.unpack('>II')
            path = reader.read(path_len).decode('utf-8')
            digest = reader.read(DIGEST_SIZE)
            reader.align()
            tree.add_entry(mode, path, digest)
        return tree

    def to_dict(self) -> Dict[str, bytes]:
        """Map of path to raw digest."""
        return {entry.path: entry.digest for entry in self.entries}

    def __len__(self) -> int:
        return len(self.entries)

    def __repr__(self) -> str:
        return f"Tree(entries={len(self.entries)})"


class Commit(RitObject):
    """
    Represents a commit.

    Layout::

        tree digest (32) | parent flag (1) | parent digest or zeros (32)
        author <identity>\\n
        committer <identity>\\n
        \\n
        <message>

    History is linear, so there is at most one parent.
    """

    def __init__(self):
        self.tree: bytes = ZERO_DIGEST
        self.parent: Optional[bytes] = None
        self.author: str = DEFAULT_AUTHOR
        self.committer: str = DEFAULT_AUTHOR
        self.message: str = ''

    @classmethod
    def create(
        cls,
        tree: bytes,
        parent: Optional[bytes],
        message: str,
        author: str = DEFAULT_AUTHOR,
        committer: str = DEFAULT_AUTHOR,
    ) -> 'Commit':
        """
        Create a new commit.

        Args:
            tree: Raw digest of the tree object
            parent: Raw digest of the parent commit, or None for a root commit
            message: Commit message
            author: Author identity
            committer: Committer identity

        Returns:
            Commit: New commit object
        """
        commit = cls()
        commit.tree = tree
        commit.parent = parent
        commit.message = message
        commit.author = author
        commit.committer = committer
        return commit

    def serialize(self) -> bytes:
        writer = BinaryWriter()
        writer.write(self.tree)
        if self.parent is None:
            writer.write(b'\x00')
            writer.write(ZERO_DIGEST)
        else:
            writer.write(b'\x01')
            writer.write(self.parent)
        writer.write(f'author {self.author}\n'.encode())
        writer.write(f'committer {self.committer}\n'.encode())
        writer.write(b'\n')
        writer.write(self.message.encode())
        return writer.getvalue()

    @classmethod
    def deserialize(cls, data: bytes) -> 'Commit':
        """
        Parse a commit.

        Raises:
            ValueError: If the fixed-width header is truncated
        """
        reader = BinaryReader(data)
        commit = cls()
        commit.tree = reader.read(DIGEST_SIZE)
        has_parent = reader.read(1) != b'\x00'
        parent = reader.read(DIGEST_SIZE)
        commit.parent = parent if has_parent else None

        rest = reader.read(reader.remaining).decode('utf-8')
        headers, _, commit.message = rest.partition('\n\n')
        for line in headers.split('\n'):
            if line.startswith('author '):
                commit.author = line[7:]
            elif line.startswith('committer '):
                commit.committer = line[10:]

        return commit

    @staticmethod
    def tree_of(data: bytes) -> bytes:
        """Tree digest of a serialized commit (its first 32 bytes)."""
        return BinaryReader(data).read(DIGEST_SIZE)

    def __repr__(self) -> str:
        parent_info = f", parent={self.parent.hex()[:7]}" if self.parent else ""
        msg_preview = self.message.split('\n')[0][:50]
        return f"Commit(hash={self.hash[:7]}{parent_info}, msg='{msg_preview}')"
