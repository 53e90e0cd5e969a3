"""
PartitionHelper Linux Platform Backend.

Implements partition table operations using standard Linux tools:
- partprobe for probing and re-reading partition tables
- parted for creating tables and partitions
- sgdisk for GPT partition GUIDs
"""

from partitionhelper.platform.linux.executor import ShellExecutor
from partitionhelper.platform.linux.parsers import (
    build_partition_info,
    parse_partition_exists,
    parse_partition_guid,
    parse_partition_table_type,
    parse_sgdisk_info,
)
from partitionhelper.platform.linux.partitioner import LinuxPartitioner

__all__ = [
    "LinuxPartitioner",
    "ShellExecutor",
    "build_partition_info",
    "parse_partition_exists",
    "parse_partition_guid",
    "parse_partition_table_type",
    "parse_sgdisk_info",
]
