import io

import pytest

from raidprobe.block_device import FileBlockDevice
from raidprobe.ext4.structures import DirEntry1, DirEntry2, DirEntryTail, Ext4Fs, Inode


def test_dir_entry_tail_fields():
    data = (
        b"\x00\x00\x00\x00"
        + (12).to_bytes(2, "little")
        + b"\x00"
        + b"\xde"
        + (0x12345678).to_bytes(4, "little")
    )
    tail = DirEntryTail.from_bytes(data)
    assert tail.reserved_zero_1 == 0
    assert tail.record_length == 12
    assert tail.reserved_zero_2 == 0
    assert tail.reserved_file_type == 0xDE
    assert tail.checksum == 0x12345678
    assert DirEntryTail.SIZE == len(data)


def test_dir_entry_2_fields():
    data = (
        (2).to_bytes(4, "little")
        + (12).to_bytes(2, "little")
        + bytes([1, 2])
        + b".".ljust(255, b"\x00")
    )
    entry = DirEntry2.from_bytes(data)
    assert entry.inode == 2
    assert entry.record_length == 12
    assert entry.name_length == 1
    assert entry.file_type == 2
    assert entry.name[: entry.name_length] == b"."
    assert len(entry.name) == 255


def test_dir_entry_1_fields():
    data = (
        (11).to_bytes(4, "little")
        + (20).to_bytes(2, "little")
        + (10).to_bytes(2, "little")
        + b"lost+found".ljust(255, b"\x00")
    )
    entry = DirEntry1.from_bytes(data)
    assert entry.inode == 11
    assert entry.record_length == 20
    assert entry.name_length == 10
    assert entry.name[: entry.name_length] == b"lost+found"


def test_dir_entries_share_size():
    data = bytes(DirEntry2.SIZE)
    entry = DirEntry1.from_bytes(data)
    assert entry.name == bytes(255)
    assert entry.name_length == 0


def test_inode_first_and_last_fields():
    data = bytearray(Inode.SIZE)
    data[0:2] = (0x81A4).to_bytes(2, "little")
    data[-4:] = (0xCAFE).to_bytes(4, "little")
    inode = Inode.from_bytes(bytes(data))
    assert inode.file_mode == 0x81A4
    assert inode.project_id == 0xCAFE
    assert inode.size_low == 0
    assert len(inode.blocks) == 60
    assert len(inode.os_dependent_2) == 12


def test_trailing_bytes_are_ignored():
    data = bytearray(Inode.SIZE + 16)
    data[0:2] = (0x41ED).to_bytes(2, "little")
    assert Inode.from_bytes(bytes(data)).file_mode == 0x41ED


@pytest.mark.parametrize("record", [Inode, DirEntry1, DirEntry2, DirEntryTail])
def test_short_data_is_rejected(record):
    with pytest.raises(ValueError):
        record.from_bytes(bytes(record.SIZE - 1))


def test_ext4fs_open_keeps_device(tmp_path):
    path = tmp_path / "image"
    path.write_bytes(bytes(4096))
    with FileBlockDevice.open_path(path) as device:
        fs = Ext4Fs.open(device)
        assert fs.device is device
        assert fs.device.size() == 4096


def test_ext4fs_open_wraps_file_object(tmp_path):
    path = tmp_path / "image"
    path.write_bytes(b"abc")
    with open(path, "rb") as handle:
        fs = Ext4Fs.open(FileBlockDevice.from_file(handle))
        assert fs.device.read_exact(3) == b"abc"
    assert isinstance(io.BytesIO(), io.BytesIO)