"""Byte strings as stored in ext4 metadata."""

from __future__ import annotations

from functools import total_ordering

__all__ = ["Ext4String"]


@total_ordering
class Ext4String:
    """Raw bytes that are usually, but not always, UTF-8 text."""

    __slots__ = ("_data",)

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)

    @classmethod
    def from_null_terminated_bytes(cls, data: bytes) -> Ext4String:
        """Take the bytes up to the first NUL, or all of them if there is none."""
        return cls(bytes(data).split(b"\0", 1)[0])

    @classmethod
    def from_str(cls, text: str) -> Ext4String:
        """Encode text as UTF-8."""
        return cls(text.encode("utf-8"))

    def to_str_lossy(self) -> str:
        """Decode as UTF-8, replacing invalid sequences."""
        return self._data.decode("utf-8", errors="replace")

    def to_str(self) -> str:
        """Decode as UTF-8, raising ``UnicodeDecodeError`` on invalid data."""
        return self._data.decode("utf-8")

    def is_empty(self) -> bool:
        return not self._data

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return self._data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ext4String):
            return NotImplemented
        return self._data == other._data

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Ext4String):
            return NotImplemented
        return self.to_str_lossy() < other.to_str_lossy()

    def __hash__(self) -> int:
        return hash(self.to_str_lossy())

    def __str__(self) -> str:
        return self.to_str_lossy()

    def __repr__(self) -> str:
        return f"Ext4String({self._data!r})"