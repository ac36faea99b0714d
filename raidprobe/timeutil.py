"""Timestamps stored as a 32-bit low part and an 8-bit high part."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

__all__ = ["UNIX_EPOCH", "from_low_high"]

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def from_low_high(low: int, high: int) -> datetime:
    """Build a UTC time from seconds split into low 32 bits and high 8 bits.

    Raises ``OverflowError`` when the time lies beyond what ``datetime`` holds.
    """
    if not 0 <= low <= 0xFFFFFFFF:
        raise ValueError(f"low part out of range: {low}")
    if not 0 <= high <= 0xFF:
        raise ValueError(f"high part out of range: {high}")
    return UNIX_EPOCH + timedelta(seconds=low | (high << 32))