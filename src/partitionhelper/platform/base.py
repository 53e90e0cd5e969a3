"""
PartitionHelper Platform Base.

Defines the command executor and partitioner contracts.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from partitionhelper.core.models import PartitionInfo


class CommandResult:
    """Result of a command execution."""

    def __init__(
        self,
        returncode: int,
        stdout: str,
        stderr: str,
        command: str,
        duration_seconds: float = 0.0,
    ) -> None:
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        self.command = command
        self.duration_seconds = duration_seconds

    @property
    def success(self) -> bool:
        return self.returncode == 0

    def __repr__(self) -> str:
        return f"CommandResult(rc={self.returncode}, cmd='{self.command[:50]}...')"


class CommandExecutor(ABC):
    """Runs a command line through a shell."""

    @abstractmethod
    def run_cmd(self, command: str) -> CommandResult:
        """
        Run a command line.

        A non-zero exit, a failure to start, or a timeout is reported through
        an unsuccessful result, never raised.
        """


class Partitioner(ABC):
    """Operations on the partition table of a block device."""

    @abstractmethod
    def is_partition_exists(self, device: str, part_num: str) -> bool:
        """Check whether the device has partitions."""

    @abstractmethod
    def create_partition_table(self, device: str, table_type: str) -> None:
        """Create a partition table of a supported type on the device."""

    @abstractmethod
    def get_partition_table_type(self, device: str) -> str:
        """Get the partition table type of the device (e.g. 'gpt', 'msdos')."""

    @abstractmethod
    def create_partition(self, device: str, part_name: str) -> None:
        """Create a partition spanning the device's free space."""

    @abstractmethod
    def delete_partition(self, device: str, part_num: str) -> None:
        """Delete a partition from the device."""

    @abstractmethod
    def set_partition_uuid(self, device: str, part_num: str, part_uuid: str) -> None:
        """Set the unique GUID of a partition."""

    @abstractmethod
    def get_partition_uuid(self, device: str, part_num: str) -> str:
        """Get the unique GUID of a partition, lower-cased."""

    @abstractmethod
    def get_partition_info(self, device: str, part_num: str) -> PartitionInfo:
        """Get the GPT details of a partition."""

    @abstractmethod
    def sync_partition_table(self, device: str) -> None:
        """
        Ask the kernel to re-read the partition table.

        An empty device re-reads the tables of all devices.
        """
