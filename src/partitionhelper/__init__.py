"""
PartitionHelper - partition table management for Linux block devices.

Drives parted, partprobe and sgdisk to inspect and change the partition
table of a device.
"""

__version__ = "1.0.0"
__author__ = "PartitionHelper Team"

from partitionhelper.core.config import PartitionHelperConfig
from partitionhelper.platform import get_partitioner
from partitionhelper.platform.base import CommandExecutor, Partitioner

__all__ = [
    "CommandExecutor",
    "PartitionHelperConfig",
    "Partitioner",
    "get_partitioner",
    "__version__",
]
