"""Grouping of key/value pairs into a mapping of lists."""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import TypeVar

__all__ = ["from_multi_iter"]

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def from_multi_iter(pairs: Iterable[tuple[K, V]]) -> dict[K, list[V]]:
    """Collect every value under its key, keeping the order they came in."""
    grouped: dict[K, list[V]] = {}
    for key, value in pairs:
        grouped.setdefault(key, []).append(value)
    return grouped