"""Index (staging area) implementation."""

import os
import struct
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .binary import BinaryReader, BinaryWriter
from .hash import DIGEST_SIZE

SIGNATURE = b'DIRC'
VERSION = 3

HEADER_FORMAT = '>4sII'
HEADER_SIZE = struct.calcsize(HEADER_FORMAT)

# ctime, ctime_ns, mtime, mtime_ns, dev, ino, mode, size, sha256, path length
ENTRY_FORMAT = f'>IIIIIIII{DIGEST_SIZE}sI'
ENTRY_SIZE = struct.calcsize(ENTRY_FORMAT)

U32_MASK = 0xFFFFFFFF


@dataclass
class IndexHeader:
    """Fixed 12-byte header at the start of the index file."""
    signature: bytes = SIGNATURE
    version: int = VERSION
    num_entries: int = 0


@dataclass
class IndexEntry:
    """
    Represents a single entry in the index.

    Stores metadata about a staged file captured at add time and the
    SHA-256 digest of its content. All integer fields are stored as u32.
    """
    ctime: int          # Change time (seconds)
    ctime_ns: int       # Change time (nanoseconds)
    mtime: int          # Modification time (seconds)
    mtime_ns: int       # Modification time (nanoseconds)
    dev: int            # Device ID
    ino: int            # Inode number
    mode: int           # File mode/permissions
    size: int           # File size
    sha256: bytes       # Raw 32-byte digest of content
    path: str           # './'-relative file path

    @property
    def file_path_len(self) -> int:
        """Length of the UTF-8 encoded path."""
        return len(self.path.encode())

    @property
    def hexdigest(self) -> str:
        return self.sha256.hex()

    @classmethod
    def from_stat(cls, path: str, sha256: bytes, st: os.stat_result) -> 'IndexEntry':
        """Build an entry from ``os.stat`` output, truncating fields to u32."""
        return cls(
            ctime=int(st.st_ctime) & U32_MASK,
            ctime_ns=st.st_ctime_ns % 1_000_000_000,
            mtime=int(st.st_mtime) & U32_MASK,
            mtime_ns=st.st_mtime_ns % 1_000_000_000,
            dev=st.st_dev & U32_MASK,
            ino=st.st_ino & U32_MASK,
            mode=st.st_mode & U32_MASK,
            size=st.st_size & U32_MASK,
            sha256=sha256,
            path=path,
        )

    def __repr__(self) -> str:
        return f"IndexEntry({self.mode:o} {self.hexdigest[:7]} {self.path})"


@dataclass
class Index:
    """
    Rit index (staging area).

    Holds the header and the ordered list of staged entries. Paths are
    unique; replacing a path removes the old entry and appends the new
    one. The whole file is loaded, mutated in memory and rewritten; there
    is no locking between concurrent processes.
    """
    header: IndexHeader = field(default_factory=IndexHeader)
    entries: List[IndexEntry] = field(default_factory=list)

    def get_entry(self, path: str) -> Optional[IndexEntry]:
        """Get entry by path."""
        for entry in self.entries:
            if entry.path == path:
                return entry
        return None

    def add_entry(self, entry: IndexEntry) -> None:
        """Append a new entry; the path must not already be staged."""
        if self.get_entry(entry.path) is not None:
            raise ValueError(f"Path already staged: {entry.path}")
        self.entries.append(entry)
        self.header.num_entries += 1

    def remove_entry(self, path: str) -> Optional[IndexEntry]:
        """
        Remove entry by path.

        Returns:
            The removed entry, or None if the path was not staged
        """
        entry = self.get_entry(path)
        if entry is None:
            return None
        self.entries.remove(entry)
        self.header.num_entries -= 1
        return entry

    def as_dict(self) -> dict:
        """Map of path to raw digest."""
        return {entry.path: entry.sha256 for entry in self.entries}

    def serialize(self) -> bytes:
        """
        Serialize index to Rit binary format.

        Format:
        - Header: 'DIRC' + version (4 bytes) + entry count (4 bytes)
        - Entries in index order: 68 fixed bytes + path bytes, then zero
          padding to the next 8-byte boundary of the file offset

        Returns:
            bytes: Serialized index
        """
        self.header.num_entries = len(self.entries)

        writer = BinaryWriter()
        writer.pack(
            HEADER_FORMAT,
            self.header.signature,
            self.header.version,
            self.header.num_entries,
        )

        for entry in self.entries:
            path_bytes = entry.path.encode('utf-8')
            writer.pack(
                ENTRY_FORMAT,
                entry.ctime,
                entry.ctime_ns,
                entry.mtime,
                entry.mtime_ns,
                entry.dev,
                entry.ino,
                entry.mode,
                entry.size,
                entry.sha256,
                len(path_bytes),
            )
            writer.write(path_bytes)
            writer.align()

        return writer.getvalue()

    @classmethod
    def deserialize(cls, data: bytes) -> 'Index':
        """
        Parse index bytes.

        Raises:
            ValueError: On a bad signature or truncated data
        """
        reader = BinaryReader(data)

        if data[:4] != SIGNATURE:
            raise ValueError(f"Invalid index signature: {data[:4]!r}")

        signature, version, num_entries = reader.unpack(HEADER_FORMAT)
        header = IndexHeader(signature=signature, version=version, num_entries=num_entries)

        entries = []
        for _ in range(num_entries):
            (ctime, ctime_ns, mtime, mtime_ns, dev, ino,
             mode, size, sha256, path_len) = reader.unpack(ENTRY_FORMAT)
            path = reader.read(path_len).decode('utf-8')
            reader.align()

            entries.append(IndexEntry(
                ctime=ctime,
                ctime_ns=ctime_ns,
                mtime=mtime,
                mtime_ns=mtime_ns,
                dev=dev,
                ino=ino,
                mode=mode,
                size=size,
                sha256=sha256,
                path=path,
            ))

        return cls(header=header, entries=entries)

    @classmethod
    def load(cls, index_path) -> 'Index':
        """
        Read index from disk.

        Raises:
            FileNotFoundError: If there is no index file yet
            ValueError: If the file is corrupt
        """
        with open(index_path, 'rb') as f:
            data = f.read()
        return cls.deserialize(data)

    @classmethod
    def load_or_empty(cls, index_path) -> 'Index':
        """Read index from disk, treating a missing file as an empty index."""
        try:
            return cls.load(index_path)
        except FileNotFoundError:
            return cls()

    def store(self, index_path) -> None:
        """
        Truncate and rewrite the index file.

        The file is left untouched if serialization fails.

        Raises:
            UnicodeEncodeError: If an entry path is not valid UTF-8 text
        """
        data = self.serialize()
        with open(Path(index_path), 'wb') as f:
            f.write(data)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, path: str) -> bool:
        return self.get_entry(path) is not None

    def __repr__(self) -> str:
        return f"Index(entries={len(self.entries)})"
