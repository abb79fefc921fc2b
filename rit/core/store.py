"""Content-addressed object store for Rit."""

import logging
import os
import tempfile
from pathlib import Path

from .hash import hash_object

logger = logging.getLogger(__name__)

SHARD_LENGTH = 3
OBJECT_MODE = 0o444


class ObjectStore:
    """
    Stores immutable blobs keyed by the hex SHA-256 of their content.

    Blobs live at ``objects/<first 3 hex chars>/<remaining hex chars>``.
    File contents, trees and commits all share this store. There is no
    reference counting: deleting a blob does not consider other index
    entries or trees that may point at the same digest.
    """

    def __init__(self, root: Path):
        """
        Initialize object store.

        Args:
            root: The ``objects`` directory; must already exist
        """
        self.root = Path(root)

    def path_for(self, hex_digest: str) -> Path:
        """
        Get filesystem path for a blob.

        Args:
            hex_digest: 64-character hex digest

        Returns:
            Path: Full path to blob file
        """
        return self.root / hex_digest[:SHARD_LENGTH] / hex_digest[SHARD_LENGTH:]

    def _require_root(self) -> None:
        if not self.root.is_dir():
            raise FileNotFoundError(f"Object store not found: {self.root}")

    def put(self, data: bytes, exclusive: bool = False) -> str:
        """
        Store content under its digest.

        Writing content that is already stored is a no-op. With
        ``exclusive`` set, that case raises ``FileExistsError`` instead so
        the caller can tell a fresh write from a duplicate.

        Args:
            data: Blob content
            exclusive: Raise if the blob already exists

        Returns:
            str: Hex digest of the content

        Raises:
            FileNotFoundError: If the store root is missing
            FileExistsError: If ``exclusive`` and the blob already exists
        """
        self._require_root()
        hex_digest = hash_object(data)
        path = self.path_for(hex_digest)
        path.parent.mkdir(exist_ok=True)

        # A blob only appears under its digest once fully written.
        fd, tmp_path = tempfile.mkstemp(dir=path.parent, prefix='.tmp-')
        os.chmod(tmp_path, OBJECT_MODE)
        try:
            with open(fd, 'wb') as f:
                f.write(data)
            os.link(tmp_path, path)
        except FileExistsError:
            if exclusive:
                raise
            logger.debug("Object %s already stored", hex_digest)
            return hex_digest
        finally:
            os.unlink(tmp_path)

        logger.debug("Stored object %s (%d bytes)", hex_digest, len(data))
        return hex_digest

    def get(self, hex_digest: str) -> bytes:
        """
        Read a blob.

        Raises:
            FileNotFoundError: If the blob does not exist
        """
        path = self.path_for(hex_digest)
        if not path.is_file():
            raise FileNotFoundError(f"Object {hex_digest} not found")
        return path.read_bytes()

    def delete(self, hex_digest: str) -> None:
        """
        Remove a blob.

        The caller must know that nothing else still needs it.

        Raises:
            FileNotFoundError: If the store root or the blob is missing
            OSError: For permission problems or a directory in the way
        """
        self._require_root()
        self.path_for(hex_digest).unlink()
        logger.debug("Deleted object %s", hex_digest)

    def exists(self, hex_digest: str) -> bool:
        """Check if a blob is stored."""
        return self.path_for(hex_digest).is_file()

    def __repr__(self) -> str:
        return f"ObjectStore(root={self.root})"
