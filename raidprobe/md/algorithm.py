"""Selection of the striping algorithm from an md level and layout."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from raidprobe.md.raid5 import Raid5Algorithm
from raidprobe.md.raid6 import Raid6Algorithm

__all__ = ["MdAlgorithm", "UnsupportedAlgorithm", "from_level_and_layout"]


@dataclass(frozen=True)
class UnsupportedAlgorithm:
    """A level and layout combination that is not understood."""

    level: int
    layout: int


MdAlgorithm = Union[Raid5Algorithm, Raid6Algorithm, UnsupportedAlgorithm]


def from_level_and_layout(level: int, layout: int) -> MdAlgorithm:
    """The algorithm for an md RAID level and layout number."""
    algorithm: Raid5Algorithm | Raid6Algorithm | None
    if level == 5:
        algorithm = Raid5Algorithm.from_layout(layout)
    elif level == 6:
        algorithm = Raid6Algorithm.from_layout(layout)
    else:
        algorithm = None
    if algorithm is None:
        return UnsupportedAlgorithm(level, layout)
    return algorithm