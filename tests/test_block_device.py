import io
import os

import pytest

from raidprobe.block_device import (
    BlockDevice,
    FileBlockDevice,
    NativeBlockDevice,
)


@pytest.fixture
def image(tmp_path):
    data = bytes(range(256)) * 20
    path = tmp_path / "image.bin"
    path.write_bytes(data)
    return path, data


def test_file_size_matches_contents(image):
    path, data = image
    with FileBlockDevice.open_path(path) as device:
        assert device.size() == len(data)


def test_seek_then_read(image):
    path, data = image
    with FileBlockDevice.open_path(path) as device:
        assert device.seek(1000) == 1000
        assert device.read(16) == data[1000:1016]


def test_seek_from_end(image):
    path, data = image
    with FileBlockDevice.open_path(path) as device:
        position = device.seek(-10, os.SEEK_END)
        assert position == len(data) - 10
        assert device.read_exact(10) == data[-10:]


def test_read_exact_past_end_raises(image):
    path, data = image
    with FileBlockDevice.open_path(path) as device:
        device.seek(len(data) - 4)
        with pytest.raises(EOFError):
            device.read_exact(8)


def test_read_exact_negative_rejected(image):
    path, _ = image
    with FileBlockDevice.open_path(path) as device:
        with pytest.raises(ValueError):
            device.read_exact(-1)


def test_from_file_wraps_open_file(image):
    path, data = image
    handle = open(path, "rb")
    device = FileBlockDevice.from_file(handle)
    assert device.read_exact(4) == data[:4]
    device.close()
    assert handle.closed


def test_context_manager_closes(image):
    path, _ = image
    with FileBlockDevice.open_path(path) as device:
        pass
    with pytest.raises(ValueError):
        device.read(1)


def test_read_exact_over_in_memory_stream():
    device = FileBlockDevice.from_file(io.BytesIO(b"abcdef"))
    assert device.read_exact(3) == b"abc"
    assert device.read() == b"def"


def test_native_size_on_regular_file_fails(image):
    path, _ = image
    with NativeBlockDevice.open_path(path) as device:
        with pytest.raises(OSError):
            device.size()


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        BlockDevice(io.BytesIO(b""))