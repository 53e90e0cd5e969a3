"""
PartitionHelper CLI Module.

Provides command-line interface for partition table operations.
"""

from partitionhelper.cli.main import cli, main

__all__ = ["main", "cli"]
