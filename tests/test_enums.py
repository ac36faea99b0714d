import pytest

from raidprobe.ext4.enums import (
    Checksum,
    ChecksumType,
    CreatorOs,
    EncryptionAlgorithm,
    ErrorPolicy,
    HashVersion,
    UnknownValue,
    decode,
    encode,
)


def test_decode_known_member():
    assert decode(CreatorOs, 0) is CreatorOs.LINUX
    assert decode(ErrorPolicy, 1) is ErrorPolicy.CONTINUE
    assert decode(ChecksumType, 1) is ChecksumType.CRC32C


def test_decode_unknown_value():
    result = decode(CreatorOs, 77)
    assert result == UnknownValue(CreatorOs, 77)
    assert int(result) == 77


def test_error_policy_zero_is_unknown():
    result = decode(ErrorPolicy, 0)
    assert result == UnknownValue(ErrorPolicy, 0)
    assert encode(result) == 0


@pytest.mark.parametrize(
    "enum_type", [ChecksumType, EncryptionAlgorithm, HashVersion]
)
def test_round_trip_all_byte_values(enum_type):
    for raw in range(256):
        assert encode(decode(enum_type, raw)) == raw


def test_round_trip_wide_values():
    for raw in (0, 4, 5, 0xFFFF, 0xFFFFFFFF):
        assert encode(decode(CreatorOs, raw)) == raw
    for raw in (0, 3, 4, 0xFFFF):
        assert encode(decode(ErrorPolicy, raw)) == raw


@pytest.mark.parametrize(
    "enum_type, raw",
    [(ChecksumType, 256), (ErrorPolicy, 0x10000), (CreatorOs, 1 << 32), (HashVersion, -1)],
)
def test_decode_out_of_range(enum_type, raw):
    with pytest.raises(ValueError):
        decode(enum_type, raw)


def test_unknown_value_rejects_known_member():
    with pytest.raises(ValueError):
        UnknownValue(CreatorOs, 0)


def test_encode_rejects_other_types():
    with pytest.raises(TypeError):
        encode(5)


def test_checksum_crc32c():
    checksum = Checksum(ChecksumType.CRC32C, 0x42350B17)
    assert checksum.value == 0x42350B17
    assert checksum == Checksum(decode(ChecksumType, 1), 0x42350B17)


def test_checksum_none_has_no_value():
    assert Checksum(ChecksumType.NONE).value is None
    with pytest.raises(ValueError):
        Checksum(ChecksumType.NONE, 5)


def test_checksum_requires_value():
    with pytest.raises(ValueError):
        Checksum(ChecksumType.CRC32C)


def test_checksum_unknown_kind():
    kind = decode(ChecksumType, 9)
    checksum = Checksum(kind, 1234)
    assert encode(checksum.kind) == 9
    assert checksum.value == 1234


def test_checksum_rejects_foreign_unknown():
    with pytest.raises(TypeError):
        Checksum(UnknownValue(CreatorOs, 9), 1)


def test_checksum_value_range():
    with pytest.raises(ValueError):
        Checksum(ChecksumType.CRC32C, 1 << 32)