"""Hash utilities for Rit."""

import hashlib
from typing import Tuple

DIGEST_SIZE = 32
HEX_SIZE = DIGEST_SIZE * 2


def digest(data: bytes) -> bytes:
    """
    Compute SHA-256 digest of data.

    Args:
        data: Bytes to hash

    Returns:
        32 raw digest bytes
    """
    return hashlib.sha256(data).digest()


def hash_object(data: bytes) -> str:
    """
    Compute SHA-256 hash of data.

    Args:
        data: Bytes to hash

    Returns:
        64-character hex string
    """
    return hashlib.sha256(data).hexdigest()


def hash_file(filepath: str) -> Tuple[bytes, str]:
    """
    Compute SHA-256 hash of file.

    Args:
        filepath: Path to file

    Returns:
        Tuple of (raw digest, 64-character hex string)
    """
    with open(filepath, 'rb') as f:
        raw = digest(f.read())
    return raw, raw.hex()


def to_hex(raw: bytes) -> str:
    """Render a raw digest as lowercase hex."""
    return raw.hex()


def from_hex(hex_digest: str) -> bytes:
    """
    Parse a hex digest back into raw bytes.

    Raises:
        ValueError: If the string is not a 64-character hex digest
    """
    if len(hex_digest) != HEX_SIZE:
        raise ValueError(f"Invalid digest length: {len(hex_digest)}")
    return bytes.fromhex(hex_digest)
