[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "raidprobe"
version = "0.1.0"
description = "Decode md RAID striping layouts and ext4 superblocks, inodes and directory entries from raw disks"
requires-python = ">=3.10"
dependencies = []
keywords = ["raid", "md", "ext4", "superblock", "crc32c", "recovery", "block-device"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Recovery Tools",
    "Topic :: System :: Filesystems",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["raidprobe"]

[tool.pytest.ini_options]
addopts = "-ra"
