"""
Linux Partitioner Implementation.

Drives parted, partprobe and sgdisk through a command executor and
interprets their output.
"""

from __future__ import annotations

from partitionhelper.core.errors import (
    CommandFailedError,
    ParseError,
    PartitionExistenceCheckError,
    UnsupportedPartitionTableError,
)
from partitionhelper.core.logging import OperationLogger, get_logger
from partitionhelper.core.models import (
    SUPPORTED_TABLE_TYPES,
    CommandTemplates,
    PartitionInfo,
    PartitionTableType,
    is_supported_table_type,
)
from partitionhelper.platform.base import CommandExecutor, CommandResult, Partitioner
from partitionhelper.platform.linux.parsers import (
    build_partition_info,
    parse_partition_exists,
    parse_partition_guid,
    parse_partition_table_type,
)

logger = get_logger(__name__)


class LinuxPartitioner(Partitioner):
    """Partitioner backed by parted, partprobe and sgdisk."""

    def __init__(
        self,
        executor: CommandExecutor,
        templates: CommandTemplates | None = None,
    ) -> None:
        self.executor = executor
        self.templates = templates or CommandTemplates()

    def _run(
        self,
        action: str,
        command: str,
        device: str,
        partition: str | None = None,
        error_class: type[CommandFailedError] = CommandFailedError,
    ) -> CommandResult:
        """Run a command and raise error_class if it fails."""
        with OperationLogger(
            action, logger=logger, device=device, partition=partition, command=command
        ) as op:
            result = self.executor.run_cmd(command)
            op.update(returncode=result.returncode)

            if not result.success:
                raise error_class(
                    action=action,
                    device=device,
                    command=command,
                    returncode=result.returncode,
                    stderr=result.stderr,
                    partition=partition,
                )

        return result

    def is_partition_exists(self, device: str, part_num: str) -> bool:
        # Only tells whether the device has any partition; part_num is not
        # matched against the listed numbers.
        command = self.templates.probe_device.format(device=device)
        result = self._run(
            "check partition existence",
            command,
            device,
            partition=str(part_num),
            error_class=PartitionExistenceCheckError,
        )
        return parse_partition_exists(result.stdout)

    def create_partition_table(self, device: str, table_type: str) -> None:
        if not is_supported_table_type(table_type):
            raise UnsupportedPartitionTableError(device, table_type, SUPPORTED_TABLE_TYPES)
        table_type = PartitionTableType(table_type).value

        command = self.templates.create_table.format(device=device, table_type=table_type)
        self._run("create partition table", command, device)
        logger.info("Created partition table", device=device, table_type=table_type)

    def get_partition_table_type(self, device: str) -> str:
        command = self.templates.probe_device.format(device=device)
        result = self._run("get partition table type", command, device)

        table_type = parse_partition_table_type(result.stdout)
        if table_type is None:
            raise ParseError(
                f"unable to parse partition table type from output {result.stdout!r} "
                f"for device {device}",
                device=device,
                output=result.stdout,
            )
        return table_type

    def create_partition(self, device: str, part_name: str) -> None:
        command = self.templates.create_partition.format(device=device, part_name=part_name)
        self._run("create partition", command, device)
        logger.info("Created partition", device=device, part_name=part_name)

    def delete_partition(self, device: str, part_num: str) -> None:
        command = self.templates.delete_partition.format(device=device, part_num=part_num)
        self._run("delete partition", command, device, partition=str(part_num))
        logger.info("Deleted partition", device=device, partition=part_num)

    def set_partition_uuid(self, device: str, part_num: str, part_uuid: str) -> None:
        command = self.templates.set_partition_guid.format(
            device=device, part_num=part_num, part_uuid=part_uuid
        )
        self._run("set partition GUID", command, device, partition=str(part_num))
        logger.info("Set partition GUID", device=device, partition=part_num, guid=part_uuid)

    def get_partition_uuid(self, device: str, part_num: str) -> str:
        command = self.templates.get_partition_info.format(device=device, part_num=part_num)
        result = self._run("get partition GUID", command, device, partition=str(part_num))

        guid = parse_partition_guid(result.stdout)
        if guid is None:
            raise ParseError(
                f"unable to get partition GUID for device {device}",
                device=device,
                output=result.stdout,
            )
        return guid

    def get_partition_info(self, device: str, part_num: str) -> PartitionInfo:
        command = self.templates.get_partition_info.format(device=device, part_num=part_num)
        result = self._run("get partition info", command, device, partition=str(part_num))

        info = build_partition_info(device, str(part_num), result.stdout)
        if info is None:
            raise ParseError(
                f"unable to parse partition {part_num!r} info for device {device}",
                device=device,
                output=result.stdout,
            )
        return info

    def sync_partition_table(self, device: str) -> None:
        command = self.templates.reread_table.format(device=device)
        self._run("sync partition table", command, device or "<all>")
