"""Cursor-based helpers for the fixed-width binary formats.

Both the index file and tree objects are sequences of big-endian fields
followed by zero padding up to the next 8-byte boundary. The reader and
writer here track a single position so callers never compute offsets
by hand.
"""

import struct

ALIGNMENT = 8


def padding_for(position: int, alignment: int = ALIGNMENT) -> int:
    """Number of padding bytes needed to move ``position`` to a boundary."""
    return (alignment - (position % alignment)) % alignment


class BinaryReader:
    """Sequential reader over a bytes buffer."""

    def __init__(self, data: bytes, offset: int = 0):
        self.data = data
        self.offset = offset

    @property
    def remaining(self) -> int:
        return len(self.data) - self.offset

    def at_end(self) -> bool:
        return self.offset >= len(self.data)

    def read(self, size: int) -> bytes:
        """
        Read exactly ``size`` bytes.

        Raises:
            ValueError: If fewer than ``size`` bytes are left
        """
        if size > self.remaining:
            raise ValueError(
                f"Truncated data: wanted {size} bytes at offset {self.offset}, "
                f"only {self.remaining} left"
            )
        chunk = self.data[self.offset:self.offset + size]
        self.offset += size
        return chunk

    def unpack(self, fmt: str) -> tuple:
        """Read and unpack a struct format."""
        return struct.unpack(fmt, self.read(struct.calcsize(fmt)))

    def read_u32(self) -> int:
        return self.unpack('>I')[0]

    def align(self, alignment: int = ALIGNMENT) -> None:
        """Skip padding up to the next boundary (padding is not validated)."""
        self.offset = min(self.offset + padding_for(self.offset, alignment), len(self.data))


class BinaryWriter:
    """Append-only buffer that knows its own position."""

    def __init__(self):
        self.buffer = bytearray()

    @property
    def position(self) -> int:
        return len(self.buffer)

    def write(self, data: bytes) -> None:
        self.buffer.extend(data)

    def pack(self, fmt: str, *values) -> None:
        self.buffer.extend(struct.pack(fmt, *values))

    def write_u32(self, value: int) -> None:
        self.pack('>I', value)

    def align(self, alignment: int = ALIGNMENT) -> None:
        """Zero-pad to the next boundary of the running length."""
        self.buffer.extend(b'\x00' * padding_for(self.position, alignment))

    def getvalue(self) -> bytes:
        return bytes(self.buffer)
