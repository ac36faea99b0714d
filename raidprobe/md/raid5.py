"""RAID 5 parity layouts and sector mapping."""

from __future__ import annotations

from enum import Enum

__all__ = ["Raid5Algorithm"]

_U32_MASK = 0xFFFFFFFF


class Raid5Algorithm(Enum):
    """RAID 5 layouts, valued by their md layout number."""

    LEFT_ASYMMETRIC = 0  # rotating parity N with data restart
    RIGHT_ASYMMETRIC = 1  # rotating parity 0 with data restart
    LEFT_SYMMETRIC = 2  # rotating parity N with data continuation
    RIGHT_SYMMETRIC = 3  # rotating parity 0 with data continuation
    PARITY_0 = 4  # parity is the initial device
    PARITY_N = 5  # parity is the final device

    @classmethod
    def from_layout(cls, layout: int) -> Raid5Algorithm | None:
        """The layout with md number ``layout``, or None if there is none."""
        try:
            return cls(layout)
        except ValueError:
            return None

    def compute_sector(
        self, sector: int, sectors_per_chunk: int, raid_disks: int
    ) -> tuple[int, int, int]:
        """Map an array sector to ``(device sector, parity disk, data disk)``."""
        if sectors_per_chunk < 1:
            raise ValueError("sectors_per_chunk must be positive")
        if raid_disks < 2:
            raise ValueError("RAID 5 needs at least two disks")

        chunk_index, sector_in_chunk = divmod(sector, sectors_per_chunk)
        data_disks = raid_disks - 1
        stripe, data_disk_index = divmod(chunk_index, data_disks)
        stripe &= _U32_MASK

        cls = type(self)
        match self:
            case cls.LEFT_ASYMMETRIC | cls.LEFT_SYMMETRIC:
                parity_disk = data_disks - stripe % raid_disks
            case cls.RIGHT_ASYMMETRIC | cls.RIGHT_SYMMETRIC:
                parity_disk = stripe % raid_disks
            case cls.PARITY_0:
                parity_disk = 0
            case _:
                parity_disk = data_disks

        match self:
            case cls.LEFT_ASYMMETRIC | cls.RIGHT_ASYMMETRIC:
                data_disk = data_disk_index + (1 if data_disk_index >= parity_disk else 0)
            case cls.LEFT_SYMMETRIC | cls.RIGHT_SYMMETRIC:
                data_disk = (parity_disk + 1 + data_disk_index) % raid_disks
            case cls.PARITY_0:
                data_disk = data_disk_index + 1
            case _:
                data_disk = data_disk_index

        new_sector = chunk_index * sectors_per_chunk + sector_in_chunk
        return new_sector, parity_disk, data_disk