"""Bit flags stored in the ext4 superblock.

Bits that have no name are kept, so a value read from disk survives intact.
"""

from __future__ import annotations

from enum import IntFlag

__all__ = [
    "CompatibleFeatures",
    "Flags",
    "IncompatibleFeatures",
    "MountOptions",
    "ReadOnlyCompatibleFeatures",
    "State",
]


class CompatibleFeatures(IntFlag):
    """Features an unaware kernel may still mount read-write."""

    DIRECTORY_PREALLOCATION = 0x1
    MAGIC_INODES = 0x2
    HAS_JOURNAL = 0x4
    SUPPORTS_EXTENDED_ATTRIBUTES = 0x8
    HAS_RESERVED_GDT_BLOCKS = 0x10
    HAS_DIRECTORY_INDICES = 0x20
    LAZY_BG = 0x40
    EXCLUDE_INODE = 0x80
    EXCLUDE_BITMAP = 0x100
    SPARSE_SUPERBLOCK_V2 = 0x200
    SUPPORTS_FAST_COMMITS = 0x400
    ORPHAN_PRESENT = 0x1000


class IncompatibleFeatures(IntFlag):
    """Features an unaware kernel must refuse to mount."""

    COMPRESSION = 0x1
    DIRECTORY_ENTRIES_RECORD_FILE_TYPE = 0x2
    NEEDS_RECOVERY = 0x4
    HAS_SEPARATE_JOURNAL_DEVICE = 0x8
    HAS_META_BLOCK_GROUPS = 0x10
    FILES_USE_EXTENTS = 0x40
    IS_64_BIT = 0x80
    MULTIPLE_MOUNT_PROTECTION = 0x100
    FLEXIBLE_BLOCK_GROUPS = 0x200
    INODES_STORE_LARGE_EXTENDED_ATTRIBUTE_VALUES = 0x400
    DATA_IN_DIRECTORY_ENTRY = 0x1000
    METADATA_CHECKSUM_SEED = 0x2000  # seed is stored in the superblock
    LARGE_DIRECTORIES = 0x4000  # directories over 2GB or with 3-level htrees
    DATA_IN_INODE = 0x8000
    HAS_ENCRYPTED_INODES = 0x10000


class ReadOnlyCompatibleFeatures(IntFlag):
    """Features an unaware kernel may mount only read-only."""

    SPARSE_SUPERBLOCKS = 0x1
    CONTAINS_LARGE_FILES = 0x2  # a file larger than 2GiB was stored
    BTREE_DIR = 0x4  # not used by Linux
    CONTAINS_HUGE_FILES = 0x8  # sizes in logical blocks, not 512-byte sectors
    GROUP_DESCRIPTORS_HAVE_CHECKSUMS = 0x10
    UNLIMITED_SUBDIRECTORIES = 0x20  # no 32,000 subdirectory limit
    CONTAINS_LARGE_INODES = 0x40
    HAS_SNAPSHOT = 0x80
    QUOTA = 0x100
    BIGALLOC = 0x200  # extents tracked in clusters rather than blocks
    METADATA_CHECKSUMS = 0x400
    REPLICA = 0x800
    READ_ONLY = 0x1000
    PROJECT_QUOTA = 0x2000
    VERITY = 0x8000
    ORPHAN_PRESENT = 0x10000  # orphan entries must be cleaned up at mount


class MountOptions(IntFlag):
    """Default mount options."""

    PRINT_DEBUGGING_INFO = 0x1
    NEW_FILES_INHERIT_DIRECTORY_GROUP_ID = 0x2
    ENABLE_USERSPACE_EXTENDED_ATTRIBUTES = 0x4
    ENABLE_POSIX_ACLS = 0x8
    DISABLE_16_BIT_USER_IDS = 0x10
    COMMIT_ALL_DATA_AND_METADATA_TO_JOURNAL = 0x20
    FLUSH_ALL_DATA_BEFORE_COMMITTING_METADATA = 0x40
    DATA_ORDERING_NOT_PRESERVED = 0x80
    DISABLE_WRITE_FLUSHES = 0x100
    TRACK_METADATA_BLOCKS = 0x200
    ENABLE_DISCARD = 0x400
    DISABLE_DELAYED_ALLOCATION = 0x800


class Flags(IntFlag):
    """Miscellaneous filesystem flags."""

    SIGNED_DIRECTORY_HASH = 0x1
    UNSIGNED_DIRECTORY_HASH = 0x2
    TEST_FILESYSTEM = 0x4  # fit for use with experimental code


class State(IntFlag):
    """Filesystem state."""

    CLEANLY_UNMOUNTED = 0x1
    ERRORS_DETECTED = 0x2
    ORPHANS_BEING_RECOVERED = 0x4