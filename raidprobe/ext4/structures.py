"""Fixed-layout ext4 on-disk records: inodes and directory entries."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import ClassVar, Generic, TypeVar

from raidprobe.block_device import BlockDevice

__all__ = ["DirEntry1", "DirEntry2", "DirEntryTail", "Ext4Fs", "Inode"]

NAME_LENGTH = 255
_NUM_BLOCKS = 15


def _unpack(layout: struct.Struct, name: str, data: bytes) -> tuple:
    """Unpack ``layout`` from the start of ``data``, checking its length."""
    if len(data) < layout.size:
        raise ValueError(f"{name} needs {layout.size} bytes, got {len(data)}")
    return layout.unpack_from(data)


_INODE_STRUCT = struct.Struct(f"<HHIIIIIHHHII{4 * _NUM_BLOCKS}sIIII12sHHIIIIIII")
_DIR_ENTRY_1_STRUCT = struct.Struct(f"<IHH{NAME_LENGTH}s")
_DIR_ENTRY_2_STRUCT = struct.Struct(f"<IHBB{NAME_LENGTH}s")
_DIR_ENTRY_TAIL_STRUCT = struct.Struct("<IHBBI")


@dataclass(frozen=True)
class Inode:
    """An ext4 inode record."""

    SIZE: ClassVar[int] = _INODE_STRUCT.size

    file_mode: int
    user_id_low: int
    size_low: int
    access_time: int
    change_time: int
    modified_time: int
    delete_time: int
    group_id_low: int
    links_count: int
    block_count_low: int
    flags: int
    os_dependent_1: int
    blocks: bytes
    generation: int
    file_acl_low: int
    size_high: int
    obsolete_fragment_address: int
    os_dependent_2: bytes
    extra_isize: int
    checksum_high: int
    change_time_extra: int
    modified_time_extra: int
    access_time_extra: int
    creation_time: int
    creation_time_extra: int
    version_high: int
    project_id: int

    @classmethod
    def from_bytes(cls, data: bytes) -> Inode:
        """Decode an inode from the start of ``data``."""
        return cls(*_unpack(_INODE_STRUCT, cls.__name__, data))


@dataclass(frozen=True)
class DirEntry1:
    """A directory entry with a 16-bit name length."""

    SIZE: ClassVar[int] = _DIR_ENTRY_1_STRUCT.size

    inode: int
    record_length: int
    name_length: int
    name: bytes

    @classmethod
    def from_bytes(cls, data: bytes) -> DirEntry1:
        """Decode a directory entry from the start of ``data``."""
        return cls(*_unpack(_DIR_ENTRY_1_STRUCT, cls.__name__, data))


@dataclass(frozen=True)
class DirEntry2:
    """A directory entry with an 8-bit name length and a file type."""

    SIZE: ClassVar[int] = _DIR_ENTRY_2_STRUCT.size

    inode: int
    record_length: int
    name_length: int
    file_type: int
    name: bytes

    @classmethod
    def from_bytes(cls, data: bytes) -> DirEntry2:
        """Decode a directory entry from the start of ``data``."""
        return cls(*_unpack(_DIR_ENTRY_2_STRUCT, cls.__name__, data))


@dataclass(frozen=True)
class DirEntryTail:
    """The checksum record at the end of a directory block."""

    SIZE: ClassVar[int] = _DIR_ENTRY_TAIL_STRUCT.size

    reserved_zero_1: int
    record_length: int
    reserved_zero_2: int
    reserved_file_type: int
    checksum: int

    @classmethod
    def from_bytes(cls, data: bytes) -> DirEntryTail:
        """Decode a directory block tail from the start of ``data``."""
        return cls(*_unpack(_DIR_ENTRY_TAIL_STRUCT, cls.__name__, data))


_D = TypeVar("_D", bound=BlockDevice)


@dataclass
class Ext4Fs(Generic[_D]):
    """An ext4 filesystem on a block device."""

    device: _D

    @classmethod
    def open(cls, device: _D) -> Ext4Fs[_D]:
        """Use ``device`` as the filesystem's backing storage."""
        return cls(device)