"""Reference management for Rit VCS."""

from typing import Optional

from .hash import DIGEST_SIZE


class RefManager:
    """
    Manages the head reference.

    There is a single implicit branch, ``refs/heads/main``, whose file holds
    the raw 32-byte digest of the latest commit. A missing file means there
    are no commits yet.
    """

    def __init__(self, repo):
        """
        Initialize reference manager.

        Args:
            repo: Repository instance
        """
        self.repo = repo
        self.head_file = repo.head_file

    def read_head(self) -> Optional[bytes]:
        """
        Read the head commit digest.

        Returns:
            Raw digest, or None if nothing has been committed

        Raises:
            ValueError: If the reference file is not exactly 32 bytes
        """
        try:
            with open(self.head_file, 'rb') as f:
                data = f.read()
        except FileNotFoundError:
            return None

        if len(data) != DIGEST_SIZE:
            raise ValueError(
                f"Corrupt head reference {self.head_file}: {len(data)} bytes"
            )
        return data

    def resolve_head(self) -> Optional[str]:
        """Head commit as a hex string, or None."""
        head = self.read_head()
        return head.hex() if head is not None else None

    def write_head(self, digest: bytes) -> None:
        """
        Point the head reference at a commit, overwriting the old value.

        Args:
            digest: Raw 32-byte commit digest
        """
        if len(digest) != DIGEST_SIZE:
            raise ValueError(f"Invalid commit digest length: {len(digest)}")
        self.head_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.head_file, 'wb') as f:
            f.write(digest)
