"""Block devices, md RAID striping layouts and ext4 on-disk structures."""

__version__ = "0.1.0"