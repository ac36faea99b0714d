"""Enumerated values stored in the ext4 superblock."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Union

__all__ = [
    "Checksum",
    "ChecksumType",
    "CreatorOs",
    "EncryptionAlgorithm",
    "ErrorPolicy",
    "HashVersion",
    "UnknownValue",
    "decode",
    "encode",
]


class ChecksumType(IntEnum):
    """Algorithm used for metadata checksums."""

    NONE = 0
    CRC32C = 1


class CreatorOs(IntEnum):
    """Operating system that created the filesystem."""

    LINUX = 0
    HURD = 1
    MASIX = 2
    FREE_BSD = 3
    LITES = 4


class EncryptionAlgorithm(IntEnum):
    """Encryption algorithm slot in the superblock."""

    INVALID = 0
    AES_256_XTS = 1
    AES_256_GCM = 2
    AES_256_CBC = 3


class ErrorPolicy(IntEnum):
    """What the kernel does when it detects an error."""

    CONTINUE = 1
    REMOUNT_READ_ONLY = 2
    PANIC = 3


class HashVersion(IntEnum):
    """Default hash algorithm for directory indices."""

    LEGACY = 0
    HALF_MD4 = 1
    TEA = 2
    LEGACY_UNSIGNED = 3
    HALF_MD4_UNSIGNED = 4
    TEA_UNSIGNED = 5


_WIDTHS: dict[type[IntEnum], int] = {
    ChecksumType: 8,
    CreatorOs: 32,
    EncryptionAlgorithm: 8,
    ErrorPolicy: 16,
    HashVersion: 8,
}


def _check_range(enum_type: type[IntEnum], value: int) -> None:
    bits = _WIDTHS.get(enum_type)
    if bits is None:
        raise TypeError(f"not an on-disk enumeration: {enum_type!r}")
    if not 0 <= value < (1 << bits):
        raise ValueError(f"{value} does not fit in {bits} bits for {enum_type.__name__}")


@dataclass(frozen=True)
class UnknownValue:
    """A raw value of ``enum_type`` that matches none of its members."""

    enum_type: type[IntEnum]
    value: int

    def __post_init__(self) -> None:
        _check_range(self.enum_type, self.value)
        if self.value in self.enum_type._value2member_map_:
            raise ValueError(
                f"{self.value} is a known {self.enum_type.__name__} value"
            )

    def __int__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"UnknownValue({self.enum_type.__name__}, {self.value})"


def decode(enum_type: type[IntEnum], value: int) -> IntEnum | UnknownValue:
    """The member of ``enum_type`` with this raw value, or an ``UnknownValue``."""
    _check_range(enum_type, value)
    try:
        return enum_type(value)
    except ValueError:
        return UnknownValue(enum_type, value)


def encode(value: IntEnum | UnknownValue) -> int:
    """The raw value of a decoded enumeration value."""
    if isinstance(value, UnknownValue):
        return value.value
    if isinstance(value, IntEnum) and type(value) in _WIDTHS:
        return int(value)
    raise TypeError(f"not an on-disk enumeration value: {value!r}")


ChecksumKind = Union[ChecksumType, UnknownValue]


@dataclass(frozen=True)
class Checksum:
    """A stored checksum together with the algorithm that produced it.

    ``value`` is None exactly when ``kind`` is ``ChecksumType.NONE``.
    """

    kind: ChecksumKind
    value: int | None = None

    def __post_init__(self) -> None:
        if isinstance(self.kind, UnknownValue):
            if self.kind.enum_type is not ChecksumType:
                raise TypeError("unknown checksum kind must be of ChecksumType")
        elif not isinstance(self.kind, ChecksumType):
            raise TypeError(f"not a checksum kind: {self.kind!r}")

        if self.kind is ChecksumType.NONE:
            if self.value is not None:
                raise ValueError("a missing checksum carries no value")
            return
        if self.value is None:
            raise ValueError("a checksum value is required")
        if not 0 <= self.value <= 0xFFFFFFFF:
            raise ValueError(f"checksum value out of range: {self.value}")