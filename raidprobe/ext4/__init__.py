"""Decoders for the ext2, ext3 and ext4 superblock, inodes and directory entries."""