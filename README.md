# raidprobe

A library for looking at the raw contents of disks that belonged to a Linux
md RAID array, and at the ext2/ext3/ext4 structures stored on them. It needs
only the Python standard library (3.10 or later).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `raidprobe.block_device`

- `BlockDevice` – abstract base over an open binary file, with `read(size)`,
  `read_exact(size)` (raises `EOFError` on short data), `seek(offset, whence)`,
  `close()` and `size()`. It is a context manager. Build one with the class
  methods `open_path(path)` or `from_file(file)`.
- `FileBlockDevice` – a regular file or image; `size()` is the file size.
- `NativeBlockDevice` – a kernel block device; `size()` asks the kernel with
  the `BLKGETSIZE64` ioctl (Linux only).

### `raidprobe.md`

- `raidprobe.md.raid5.Raid5Algorithm` and `raidprobe.md.raid6.Raid6Algorithm`
  – enumerations of the md layouts, valued by md layout number.
  `from_layout(layout)` returns the member or `None`.
  `compute_sector(sector, sectors_per_chunk, raid_disks)` returns
  `(device sector, parity disk, data disk)` for RAID 5 and
  `(device sector, P disk, Q disk, data disk)` for RAID 6. It raises
  `ValueError` for a non-positive chunk size or too few disks (RAID 5 needs
  two, RAID 6 three).
- `raidprobe.md.algorithm.from_level_and_layout(level, layout)` – the RAID 5
  or RAID 6 algorithm for a level and layout, or an `UnsupportedAlgorithm`
  holding `level` and `layout` for anything else.

### `raidprobe.ext4`

- `raidprobe.ext4.superblock.Superblock` – a view over the 1024-byte
  superblock. One method per field (`blocks_count()`, `block_size_bytes()`,
  `uuid()`, `volume_name()`, `mount_time()`, `state()`, the feature sets, and
  many more), plus `valid()` and the individual checks `valid_magic()`,
  `valid_cluster_size()`, `valid_clusters_per_group()`,
  `valid_error_policy()` and `valid_checksum()`. `checksum()` returns the
  stored `Checksum`; `expected_checksum()` computes it.
  `Superblock.read(reader)` reads 1024 bytes and raises `EOFError` on short
  input and `ValueError` if the superblock is not valid.
  `crc32c(data, crc)` is the CRC-32C variant ext4 uses (no final inversion).
- `raidprobe.ext4.features` – `CompatibleFeatures`, `IncompatibleFeatures`,
  `ReadOnlyCompatibleFeatures`, `MountOptions`, `Flags` and `State` as
  `IntFlag`s; unnamed bits are kept.
- `raidprobe.ext4.enums` – `ChecksumType`, `CreatorOs`, `EncryptionAlgorithm`,
  `ErrorPolicy` and `HashVersion`. `decode(enum_type, value)` returns the
  member or an `UnknownValue`; `encode(value)` gives back the raw number.
  `Checksum` pairs a checksum kind with its value.
- `raidprobe.ext4.structures` – `Inode`, `DirEntry1`, `DirEntry2` and
  `DirEntryTail`, each decoded with `from_bytes(data)` (raises `ValueError`
  when `data` is too short). `Ext4Fs.open(device)` wraps a block device.
- `raidprobe.ext4.string.Ext4String` – bytes from an on-disk field;
  `from_null_terminated_bytes`, `from_str`, `to_str`, `to_str_lossy`,
  `is_empty`.

### Helpers

- `raidprobe.confidence.Confidence(good, total)` – `bad()`, `as_ratio()`,
  `as_percentage()`; `str()` gives e.g. `75%`.
- `raidprobe.multimap.from_multi_iter(pairs)` – groups `(key, value)` pairs
  into a `dict` of lists, keeping order.
- `raidprobe.timeutil.from_low_high(low, high)` – a UTC `datetime` from
  seconds split into a 32-bit low and 8-bit high part.

## Example

```python
from raidprobe.block_device import FileBlockDevice
from raidprobe.ext4.superblock import Superblock
from raidprobe.md.algorithm import from_level_and_layout

with FileBlockDevice.open_path("disk.img") as device:
    device.seek(1024, 0)
    superblock = Superblock.read(device)
    print(superblock.volume_name(), superblock.blocks_count(), superblock.block_size_bytes())

algorithm = from_level_and_layout(5, 2)
new_sector, parity_disk, data_disk = algorithm.compute_sector(1000, 128, 4)
```

## What it does not do

- There is no command-line program; everything is used from Python.
- md member superblocks are not read, and there is no check of a set of
  devices against each other; only the striping layouts are provided.
- `Ext4Fs` only holds its device: it does not walk block groups, read
  inodes from disk or list directories. Inodes and directory entries are
  decoded only from bytes you supply.