"""The ext4 superblock: decoding, validation and checksum."""

from __future__ import annotations

import struct
import uuid
from datetime import datetime, timedelta
from typing import BinaryIO, Protocol

from raidprobe.ext4.enums import (
    Checksum,
    ChecksumType,
    CreatorOs,
    EncryptionAlgorithm,
    ErrorPolicy,
    HashVersion,
    UnknownValue,
    decode,
)
from raidprobe.ext4.features import (
    CompatibleFeatures,
    Flags,
    IncompatibleFeatures,
    MountOptions,
    ReadOnlyCompatibleFeatures,
    State,
)
from raidprobe.ext4.string import Ext4String
from raidprobe.timeutil import UNIX_EPOCH, from_low_high

__all__ = ["Superblock", "crc32c"]

_CRC32C_POLY = 0x82F63B78


def _make_crc_table() -> tuple[int, ...]:
    table = []
    for byte in range(256):
        crc = byte
        for _ in range(8):
            crc = (crc >> 1) ^ _CRC32C_POLY if crc & 1 else crc >> 1
        table.append(crc)
    return tuple(table)


_CRC_TABLE = _make_crc_table()


def crc32c(data: bytes, crc: int = 0xFFFFFFFF) -> int:
    """CRC-32C as ext4 uses it: initial value all ones, no final inversion."""
    for byte in data:
        crc = _CRC_TABLE[(crc ^ byte) & 0xFF] ^ (crc >> 8)
    return crc


_LAYOUT: list[tuple[str, str]] = [
    ("inodes_count", "I"),
    ("blocks_count_low", "I"),
    ("reserved_blocks_count_low", "I"),
    ("free_blocks_count_low", "I"),
    ("free_inodes_count", "I"),
    ("first_data_block", "I"),
    ("log_block_size", "I"),
    ("log_cluster_size", "I"),
    ("blocks_per_group", "I"),
    ("clusters_per_group", "I"),
    ("inodes_per_group", "I"),
    ("mount_time_low", "I"),
    ("write_time_low", "I"),
    ("mount_count", "H"),
    ("max_mount_count", "H"),
    ("magic", "H"),
    ("state", "H"),
    ("error_policy", "H"),
    ("minor_revision_level", "H"),
    ("last_check_time_low", "I"),
    ("check_interval", "I"),
    ("creator_os", "I"),
    ("revision_level", "I"),
    ("default_reserved_user_id", "H"),
    ("default_reserved_group_id", "H"),
    ("first_inode", "I"),
    ("inode_size", "H"),
    ("block_group_number", "H"),
    ("compatible_features", "I"),
    ("incompatible_features", "I"),
    ("read_only_compatible_features", "I"),
    ("uuid", "16s"),
    ("volume_name", "16s"),
    ("last_mounted_path", "64s"),
    ("algorithm_usage_bitmap", "I"),
    ("preallocate_blocks", "B"),
    ("preallocate_directory_blocks", "B"),
    ("reserved_gdt_blocks", "H"),
    ("journal_uuid", "16s"),
    ("journal_inode_number", "I"),
    ("journal_device_number", "I"),
    ("last_orphan", "I"),
    ("hash_seed", "16s"),
    ("default_hash_version", "B"),
    ("journal_backup_type", "B"),
    ("group_descriptor_size", "H"),
    ("default_mount_options", "I"),
    ("first_meta_block_group", "I"),
    ("creation_time_low", "I"),
    ("journal_blocks", "68s"),
    ("blocks_count_high", "I"),
    ("reserved_blocks_count_high", "I"),
    ("free_blocks_count_high", "I"),
    ("minimum_extra_inode_size", "H"),
    ("wanted_extra_inode_size", "H"),
    ("flags", "I"),
    ("raid_stride", "H"),
    ("multi_mount_prevention_interval", "H"),
    ("multi_mount_prevention_block", "Q"),
    ("raid_stripe_width", "I"),
    ("log_groups_per_flex", "B"),
    ("checksum_type", "B"),
    ("reserved_0", "H"),
    ("kbytes_written", "Q"),
    ("snapshot_inode_number", "I"),
    ("snapshot_id", "I"),
    ("snapshot_reserved_blocks_count", "Q"),
    ("snapshot_list_inode_number", "I"),
    ("error_count", "I"),
    ("first_error_time_low", "I"),
    ("first_error_inode", "I"),
    ("first_error_block", "Q"),
    ("first_error_function_name", "32s"),
    ("first_error_line", "I"),
    ("last_error_time_low", "I"),
    ("last_error_inode", "I"),
    ("last_error_line", "I"),
    ("last_error_block", "Q"),
    ("last_error_function_name", "32s"),
    ("mount_options", "64s"),
    ("user_quota_inode_number", "I"),
    ("group_quota_inode_number", "I"),
    ("overhead_blocks", "I"),
    ("superblock_backup_block_group_0", "I"),
    ("superblock_backup_block_group_1", "I"),
    ("encryption_algorithms", "4s"),
    ("encryption_password_salt", "16s"),
    ("lost_and_found_inode_number", "I"),
    ("project_quota_inode_number", "I"),
    ("checksum_seed", "I"),
    ("write_time_high", "B"),
    ("mount_time_high", "B"),
    ("creation_time_high", "B"),
    ("last_check_time_high", "B"),
    ("first_error_time_high", "B"),
    ("last_error_time_high", "B"),
    ("reserved_1", "2s"),
    ("filename_character_encoding", "H"),
    ("filename_character_encoding_flags", "H"),
    ("orphan_file_inode_number", "I"),
    ("reserved_2", "376s"),
    ("checksum", "I"),
]


def _build_fields() -> tuple[dict[str, tuple[int, struct.Struct]], int]:
    fields: dict[str, tuple[int, struct.Struct]] = {}
    offset = 0
    for name, fmt in _LAYOUT:
        packed = struct.Struct("<" + fmt)
        fields[name] = (offset, packed)
        offset += packed.size
    return fields, offset


_FIELDS, _SIZE = _build_fields()


def _power_of_two(exponent: int) -> int:
    if exponent >= 64:
        raise ValueError(f"2**{exponent} does not fit in 64 bits")
    return 1 << exponent


class _Reader(Protocol):
    def read(self, size: int = ..., /) -> bytes: ...


class Superblock:
    """A view over the 1024 bytes of an ext4 superblock."""

    SIZE = _SIZE
    MAGIC = 0xEF53
    CHECKSUM_OFFSET = _FIELDS["checksum"][0]

    __slots__ = ("_data",)

    def __init__(self, data: bytes) -> None:
        if len(data) < self.SIZE:
            raise ValueError(f"a superblock needs {self.SIZE} bytes, got {len(data)}")
        self._data = bytes(data[: self.SIZE])

    @classmethod
    def read(cls, reader: _Reader | BinaryIO) -> Superblock:
        """Read and validate a superblock.

        Raises ``EOFError`` on short input and ``ValueError`` if it is invalid.
        """
        data = bytearray()
        while len(data) < cls.SIZE:
            chunk = reader.read(cls.SIZE - len(data))
            if not chunk:
                raise EOFError(f"expected {cls.SIZE} bytes, got {len(data)}")
            data += chunk
        superblock = cls(bytes(data))
        if not superblock.valid():
            raise ValueError("invalid ext4 superblock")
        return superblock

    def __bytes__(self) -> bytes:
        return self._data

    def _get(self, name: str):
        offset, packed = _FIELDS[name]
        return packed.unpack_from(self._data, offset)[0]

    def _low_high(self, name: str) -> int:
        return self._get(f"{name}_low") | (self._get(f"{name}_high") << 32)

    def _time(self, name: str) -> datetime:
        return from_low_high(self._get(f"{name}_low"), self._get(f"{name}_high"))

    def _optional_time(self, name: str) -> datetime | None:
        time = self._time(name)
        return None if time == UNIX_EPOCH else time

    def _optional_string(self, name: str) -> Ext4String | None:
        text = Ext4String.from_null_terminated_bytes(self._get(name))
        return None if text.is_empty() else text

    def _bigalloc(self) -> bool:
        return ReadOnlyCompatibleFeatures.BIGALLOC in self.read_only_compatible_features()

    # Validation

    def valid(self) -> bool:
        return (
            self.valid_cluster_size()
            and self.valid_clusters_per_group()
            and self.valid_magic()
            and self.valid_error_policy()
            and self.valid_checksum()
        )

    def valid_cluster_size(self) -> bool:
        return self._bigalloc() or (
            self._get("log_cluster_size") == self._get("log_block_size")
        )

    def valid_clusters_per_group(self) -> bool:
        return self._bigalloc() or self.clusters_per_group() == self.blocks_per_group()

    def valid_magic(self) -> bool:
        return self.magic() == self.MAGIC

    def valid_error_policy(self) -> bool:
        return not isinstance(self.error_policy(), UnknownValue)

    def valid_checksum(self) -> bool:
        checksum = self.checksum()
        if checksum.kind is ChecksumType.NONE:
            return True
        if checksum.kind is ChecksumType.CRC32C:
            return checksum.value == self.expected_checksum()
        return False

    # Fields

    def inodes_count(self) -> int:
        return self._get("inodes_count")

    def blocks_count(self) -> int:
        return self._low_high("blocks_count")

    def reserved_blocks_count(self) -> int:
        return self._low_high("reserved_blocks_count")

    def free_blocks_count(self) -> int:
        return self._low_high("free_blocks_count")

    def free_inodes_count(self) -> int:
        return self._get("free_inodes_count")

    def first_data_block(self) -> int:
        return self._get("first_data_block")

    def block_size_bytes(self) -> int:
        return _power_of_two(10 + self._get("log_block_size"))

    def cluster_size_blocks(self) -> int:
        return _power_of_two(10 + self._get("log_cluster_size"))

    def blocks_per_group(self) -> int:
        return self._get("blocks_per_group")

    def clusters_per_group(self) -> int:
        return self._get("clusters_per_group")

    def inodes_per_group(self) -> int:
        return self._get("inodes_per_group")

    def mount_time(self) -> datetime | None:
        return self._optional_time("mount_time")

    def write_time(self) -> datetime:
        return self._time("write_time")

    def mount_count(self) -> int:
        return self._get("mount_count")

    def max_mount_count(self) -> int:
        return self._get("max_mount_count")

    def magic(self) -> int:
        return self._get("magic")

    def state(self) -> State:
        return State(self._get("state"))

    def error_policy(self) -> ErrorPolicy | UnknownValue:
        return decode(ErrorPolicy, self._get("error_policy"))

    def minor_revision_level(self) -> int:
        return self._get("minor_revision_level")

    def last_check_time(self) -> datetime:
        return self._time("last_check_time")

    def check_interval(self) -> timedelta | None:
        seconds = self._get("check_interval")
        return None if seconds == 0 else timedelta(seconds=seconds)

    def creator_os(self) -> CreatorOs | UnknownValue:
        return decode(CreatorOs, self._get("creator_os"))

    def revision_level(self) -> int:
        return self._get("revision_level")

    def default_reserved_user_id(self) -> int:
        return self._get("default_reserved_user_id")

    def default_reserved_group_id(self) -> int:
        return self._get("default_reserved_group_id")

    def first_inode(self) -> int:
        return self._get("first_inode")

    def inode_size(self) -> int:
        return self._get("inode_size")

    def block_group_number(self) -> int:
        return self._get("block_group_number")

    def compatible_features(self) -> CompatibleFeatures:
        return CompatibleFeatures(self._get("compatible_features"))

    def incompatible_features(self) -> IncompatibleFeatures:
        return IncompatibleFeatures(self._get("incompatible_features"))

    def read_only_compatible_features(self) -> ReadOnlyCompatibleFeatures:
        return ReadOnlyCompatibleFeatures(self._get("read_only_compatible_features"))

    def uuid(self) -> uuid.UUID:
        return uuid.UUID(bytes=self._get("uuid"))

    def volume_name(self) -> Ext4String | None:
        return self._optional_string("volume_name")

    def last_mounted_path(self) -> Ext4String | None:
        return self._optional_string("last_mounted_path")

    def algorithm_usage_bitmap(self) -> int:
        return self._get("algorithm_usage_bitmap")

    def preallocate_blocks(self) -> int:
        return self._get("preallocate_blocks")

    def preallocate_directory_blocks(self) -> int:
        return self._get("preallocate_directory_blocks")

    def reserved_gdt_blocks(self) -> int:
        return self._get("reserved_gdt_blocks")

    def journal_uuid(self) -> uuid.UUID:
        return uuid.UUID(bytes=self._get("journal_uuid"))

    def journal_inode_number(self) -> int:
        return self._get("journal_inode_number")

    def journal_device_number(self) -> int:
        return self._get("journal_device_number")

    def last_orphan(self) -> int:
        return self._get("last_orphan")

    def hash_seed(self) -> bytes:
        return self._get("hash_seed")

    def default_hash_version(self) -> HashVersion | UnknownValue:
        return decode(HashVersion, self._get("default_hash_version"))

    def journal_backup_type(self) -> int:
        return self._get("journal_backup_type")

    def group_descriptor_size(self) -> int:
        return self._get("group_descriptor_size")

    def default_mount_options(self) -> MountOptions:
        return MountOptions(self._get("default_mount_options"))

    def first_meta_block_group(self) -> int:
        return self._get("first_meta_block_group")

    def creation_time(self) -> datetime | None:
        return self._optional_time("creation_time")

    def journal_blocks(self) -> bytes:
        return self._get("journal_blocks")

    def minimum_extra_inode_size(self) -> int:
        return self._get("minimum_extra_inode_size")

    def wanted_extra_inode_size(self) -> int:
        return self._get("wanted_extra_inode_size")

    def flags(self) -> Flags:
        return Flags(self._get("flags"))

    def raid_stride(self) -> int:
        return self._get("raid_stride")

    def multi_mount_prevention_interval(self) -> int:
        return self._get("multi_mount_prevention_interval")

    def multi_mount_prevention_block(self) -> int:
        return self._get("multi_mount_prevention_block")

    def raid_stripe_width(self) -> int:
        return self._get("raid_stripe_width")

    def groups_per_flex(self) -> int:
        return _power_of_two(self._get("log_groups_per_flex"))

    def kbytes_written(self) -> int:
        return self._get("kbytes_written")

    def snapshot_inode_number(self) -> int:
        return self._get("snapshot_inode_number")

    def snapshot_id(self) -> int:
        return self._get("snapshot_id")

    def snapshot_reserved_blocks_count(self) -> int:
        return self._get("snapshot_reserved_blocks_count")

    def snapshot_list_inode_number(self) -> int:
        return self._get("snapshot_list_inode_number")

    def error_count(self) -> int:
        return self._get("error_count")

    def first_error_time(self) -> datetime | None:
        return self._optional_time("first_error_time")

    def first_error_inode(self) -> int:
        return self._get("first_error_inode")

    def first_error_block(self) -> int:
        return self._get("first_error_block")

    def first_error_function_name(self) -> Ext4String | None:
        return self._optional_string("first_error_function_name")

    def first_error_line(self) -> int:
        return self._get("first_error_line")

    def last_error_time(self) -> datetime | None:
        return self._optional_time("last_error_time")

    def last_error_inode(self) -> int:
        return self._get("last_error_inode")

    def last_error_line(self) -> int:
        return self._get("last_error_line")

    def last_error_block(self) -> int:
        return self._get("last_error_block")

    def last_error_function_name(self) -> Ext4String | None:
        return self._optional_string("last_error_function_name")

    def mount_options(self) -> Ext4String:
        return Ext4String.from_null_terminated_bytes(self._get("mount_options"))

    def user_quota_inode_number(self) -> int:
        return self._get("user_quota_inode_number")

    def group_quota_inode_number(self) -> int:
        return self._get("group_quota_inode_number")

    def overhead_blocks(self) -> int:
        return self._get("overhead_blocks")

    def superblock_backup_block_groups(self) -> tuple[int, int]:
        return (
            self._get("superblock_backup_block_group_0"),
            self._get("superblock_backup_block_group_1"),
        )

    def encryption_algorithms(self) -> list[EncryptionAlgorithm | UnknownValue]:
        """The configured encryption algorithms, empty slots left out."""
        return [
            algorithm
            for algorithm in (
                decode(EncryptionAlgorithm, raw)
                for raw in self._get("encryption_algorithms")
            )
            if algorithm is not EncryptionAlgorithm.INVALID
        ]

    def encryption_password_salt(self) -> bytes:
        return self._get("encryption_password_salt")

    def lost_and_found_inode_number(self) -> int:
        return self._get("lost_and_found_inode_number")

    def project_quota_inode_number(self) -> int:
        return self._get("project_quota_inode_number")

    def checksum_seed(self) -> int:
        return self._get("checksum_seed")

    def filename_character_encoding(self) -> int:
        return self._get("filename_character_encoding")

    def filename_character_encoding_flags(self) -> int:
        return self._get("filename_character_encoding_flags")

    def orphan_file_inode_number(self) -> int:
        return self._get("orphan_file_inode_number")

    def checksum(self) -> Checksum:
        """The stored checksum and the algorithm it claims to use."""
        kind = decode(ChecksumType, self._get("checksum_type"))
        if kind is ChecksumType.NONE:
            return Checksum(ChecksumType.NONE)
        return Checksum(kind, self._get("checksum"))

    def expected_checksum(self) -> int:
        """The CRC-32C of everything before the checksum field."""
        return crc32c(self._data[: self.CHECKSUM_OFFSET])