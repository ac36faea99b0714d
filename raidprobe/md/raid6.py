"""RAID 6 parity layouts and sector mapping."""

from __future__ import annotations

from enum import Enum

__all__ = ["Raid6Algorithm"]

_U32_MASK = 0xFFFFFFFF


class Raid6Algorithm(Enum):
    """RAID 6 layouts, valued by their md layout number."""

    LEFT_ASYMMETRIC = 0  # rotating parity N with data restart
    RIGHT_ASYMMETRIC = 1  # rotating parity 0 with data restart
    LEFT_SYMMETRIC = 2  # rotating parity N with data continuation
    RIGHT_SYMMETRIC = 3  # rotating parity 0 with data continuation
    PARITY_0 = 4  # P and Q are the initial devices
    PARITY_N = 5  # P and Q are the final devices
    ROTATING_0_RESTART = 8  # DDF v1.2 PRL=6 RLQ=1
    ROTATING_N_RESTART = 9  # DDF v1.2 PRL=6 RLQ=2
    ROTATING_N_CONTINUE = 10  # DDF v1.2 PRL=6 RLQ=3
    LEFT_ASYMMETRIC_6 = 16  # as LEFT_ASYMMETRIC, Q always on the last device
    RIGHT_ASYMMETRIC_6 = 17  # as RIGHT_ASYMMETRIC, Q always on the last device
    LEFT_SYMMETRIC_6 = 18  # as LEFT_SYMMETRIC, Q always on the last device
    RIGHT_SYMMETRIC_6 = 19  # as RIGHT_SYMMETRIC, Q always on the last device
    PARITY_0_6 = 20  # as PARITY_0, Q always on the last device

    @classmethod
    def from_layout(cls, layout: int) -> Raid6Algorithm | None:
        """The layout with md number ``layout``, or None if there is none."""
        try:
            return cls(layout)
        except ValueError:
            return None

    def compute_sector(
        self, sector: int, sectors_per_chunk: int, raid_disks: int
    ) -> tuple[int, int, int, int]:
        """Map an array sector to ``(device sector, P disk, Q disk, data disk)``."""
        if sectors_per_chunk < 1:
            raise ValueError("sectors_per_chunk must be positive")
        if raid_disks < 3:
            raise ValueError("RAID 6 needs at least three disks")

        chunk_index, sector_in_chunk = divmod(sector, sectors_per_chunk)
        data_disks = raid_disks - 2
        stripe, data_disk_index = divmod(chunk_index, data_disks)
        stripe &= _U32_MASK

        cls = type(self)
        match self:
            case cls.LEFT_ASYMMETRIC | cls.LEFT_SYMMETRIC | cls.ROTATING_N_CONTINUE:
                p_disk = raid_disks - 1 - stripe % raid_disks
            case cls.RIGHT_ASYMMETRIC | cls.RIGHT_SYMMETRIC | cls.ROTATING_0_RESTART:
                p_disk = stripe % raid_disks
            case cls.PARITY_0 | cls.PARITY_0_6:
                p_disk = 0
            case cls.PARITY_N:
                p_disk = data_disks
            case cls.ROTATING_N_RESTART:
                p_disk = raid_disks - 1 - (stripe + 1) % raid_disks
            case cls.LEFT_ASYMMETRIC_6 | cls.LEFT_SYMMETRIC_6:
                p_disk = data_disks - stripe % (raid_disks - 1)
            case _:
                p_disk = stripe % (raid_disks - 1)

        match self:
            case (
                cls.LEFT_ASYMMETRIC
                | cls.RIGHT_ASYMMETRIC
                | cls.LEFT_SYMMETRIC
                | cls.RIGHT_SYMMETRIC
                | cls.ROTATING_0_RESTART
                | cls.ROTATING_N_RESTART
            ):
                q_disk = (p_disk + 1) % raid_disks
            case cls.PARITY_0:
                q_disk = 1
            case cls.PARITY_N:
                q_disk = data_disks + 1
            case cls.ROTATING_N_CONTINUE:
                q_disk = (p_disk + raid_disks - 1) % raid_disks
            case _:
                q_disk = raid_disks - 1

        match self:
            case (
                cls.LEFT_ASYMMETRIC
                | cls.RIGHT_ASYMMETRIC
                | cls.ROTATING_0_RESTART
                | cls.ROTATING_N_RESTART
            ):
                if q_disk == 0:
                    shift = 1
                elif data_disk_index >= p_disk:
                    shift = 2
                else:
                    shift = 0
                data_disk = data_disk_index + shift
            case cls.LEFT_SYMMETRIC | cls.RIGHT_SYMMETRIC:
                data_disk = (p_disk + 2 + data_disk_index) % raid_disks
            case cls.PARITY_0:
                data_disk = data_disk_index + 2
            case cls.PARITY_N:
                data_disk = data_disk_index
            case cls.ROTATING_N_CONTINUE:
                data_disk = (p_disk + 1 + data_disk_index) % raid_disks
            case cls.LEFT_ASYMMETRIC_6 | cls.RIGHT_ASYMMETRIC_6:
                data_disk = data_disk_index + (1 if data_disk_index >= p_disk else 0)
            case cls.LEFT_SYMMETRIC_6 | cls.RIGHT_SYMMETRIC_6:
                data_disk = (p_disk + 1 + data_disk_index) % (raid_disks - 1)
            case _:
                data_disk = data_disk_index + 1

        new_sector = chunk_index * sectors_per_chunk + sector_in_chunk
        return new_sector, p_disk, q_disk, data_disk