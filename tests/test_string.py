import pytest

from raidprobe.ext4.string import Ext4String


def test_null_terminated_stops_at_first_nul():
    name = Ext4String.from_null_terminated_bytes(b"ext4-3\0\0junk")
    assert bytes(name) == b"ext4-3"
    assert name == Ext4String.from_str("ext4-3")


def test_without_nul_takes_everything():
    assert bytes(Ext4String.from_null_terminated_bytes(b"abc")) == b"abc"


def test_leading_nul_is_empty():
    name = Ext4String.from_null_terminated_bytes(b"\0abc")
    assert name.is_empty()
    assert len(name) == 0


def test_non_empty():
    name = Ext4String.from_str("volume")
    assert not name.is_empty()
    assert len(name) == len("volume")


def test_lossy_replaces_invalid_bytes():
    text = Ext4String(b"a\xffb").to_str_lossy()
    assert text.startswith("a") and text.endswith("b")
    assert "\ufffd" in text


def test_strict_decoding_raises():
    with pytest.raises(UnicodeDecodeError):
        Ext4String(b"\xff").to_str()


def test_strict_round_trip():
    assert Ext4String.from_str("héllo").to_str() == "héllo"


def test_str_is_lossy_text():
    assert str(Ext4String(b"/mnt/data")) == "/mnt/data"


def test_ordering_follows_text():
    names = [Ext4String.from_str(s) for s in ["c", "a", "b"]]
    assert [str(n) for n in sorted(names)] == ["a", "b", "c"]


def test_equal_values_hash_equal():
    first = Ext4String(b"same")
    second = Ext4String.from_null_terminated_bytes(b"same\0")
    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1


def test_not_equal_to_plain_bytes():
    assert (Ext4String(b"x") == b"x") is False