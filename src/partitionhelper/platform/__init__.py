"""
PartitionHelper Platform Abstraction Layer.

Provides the partitioner contract and its Linux implementation.
"""

from __future__ import annotations

import os
import platform
from typing import TYPE_CHECKING

from partitionhelper.platform.base import CommandExecutor, CommandResult, Partitioner

if TYPE_CHECKING:
    from partitionhelper.core.config import PartitionHelperConfig


def get_partitioner(
    config: PartitionHelperConfig | None = None,
    executor: CommandExecutor | None = None,
) -> Partitioner:
    """Get the partitioner for the current OS."""
    system = platform.system().lower()

    if system != "linux":
        raise RuntimeError(f"Unsupported platform: {system}")

    from partitionhelper.core.config import get_default_config
    from partitionhelper.platform.linux import LinuxPartitioner, ShellExecutor

    config = config or get_default_config()
    if executor is None:
        executor = ShellExecutor.from_config(config.executor)

    return LinuxPartitioner(executor, templates=config.templates)


def is_linux() -> bool:
    """Check if running on Linux."""
    return platform.system().lower() == "linux"


def is_admin() -> bool:
    """Check if running with root privileges."""
    if is_linux():
        return os.geteuid() == 0
    return False


__all__ = [
    "CommandExecutor",
    "CommandResult",
    "Partitioner",
    "get_partitioner",
    "is_linux",
    "is_admin",
]
