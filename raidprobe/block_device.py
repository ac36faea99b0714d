"""Seekable, readable storage whose total size can be queried."""

from __future__ import annotations

import os
import struct
from abc import ABC, abstractmethod
from typing import BinaryIO

__all__ = ["BLKGETSIZE64", "BlockDevice", "FileBlockDevice", "NativeBlockDevice"]


def _ior(group: int, number: int, size: int) -> int:
    read_direction = 2
    return (read_direction << 30) | (size << 16) | (group << 8) | number


BLKGETSIZE64 = _ior(0x12, 114, 8)


class BlockDevice(ABC):
    """A readable, seekable device backed by an open binary file."""

    def __init__(self, file: BinaryIO) -> None:
        self._file = file

    @classmethod
    def open_path(cls, path: str | os.PathLike[str]) -> BlockDevice:
        """Open the file or device at ``path`` for reading."""
        return cls(open(path, "rb"))

    @classmethod
    def from_file(cls, file: BinaryIO) -> BlockDevice:
        """Wrap an already open binary file."""
        return cls(file)

    @abstractmethod
    def size(self) -> int:
        """Total size of the device in bytes."""

    def read(self, size: int = -1) -> bytes:
        """Read up to ``size`` bytes from the current position."""
        return self._file.read(size)

    def read_exact(self, size: int) -> bytes:
        """Read exactly ``size`` bytes or raise ``EOFError``."""
        if size < 0:
            raise ValueError("size must not be negative")
        data = bytearray()
        while len(data) < size:
            chunk = self._file.read(size - len(data))
            if not chunk:
                raise EOFError(f"expected {size} bytes, got {len(data)}")
            data += chunk
        return bytes(data)

    def seek(self, offset: int, whence: int = os.SEEK_SET) -> int:
        """Move the read position and return the new absolute position."""
        return self._file.seek(offset, whence)

    def close(self) -> None:
        """Close the underlying file."""
        self._file.close()

    def __enter__(self) -> BlockDevice:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class FileBlockDevice(BlockDevice):
    """A regular file used as a block device."""

    def size(self) -> int:
        return os.fstat(self._file.fileno()).st_size


class NativeBlockDevice(BlockDevice):
    """A kernel block device whose size comes from the BLKGETSIZE64 ioctl."""

    def size(self) -> int:
        import fcntl

        result = bytearray(8)
        fcntl.ioctl(self._file.fileno(), BLKGETSIZE64, result, True)
        return struct.unpack("=Q", result)[0]