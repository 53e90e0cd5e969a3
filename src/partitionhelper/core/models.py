"""
PartitionHelper data models.

Value shapes exchanged with parted, partprobe and sgdisk.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict


class PartitionTableType(str, Enum):
    """Partition table types accepted for table creation."""

    GPT = "gpt"


SUPPORTED_TABLE_TYPES: tuple[str, ...] = tuple(t.value for t in PartitionTableType)

DEFAULT_SECTOR_SIZE = 512


def is_supported_table_type(table_type: str) -> bool:
    """Check a table type against the allow-list (exact match)."""
    return table_type in SUPPORTED_TABLE_TYPES


class CommandTemplates(BaseModel):
    """
    Command line templates issued for each partition operation.

    Placeholders are filled with ``str.format``; values are interpolated
    verbatim, without shell quoting.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    probe_device: str = "partprobe -d -s {device}"
    reread_table: str = "partprobe {device}"
    create_table: str = "parted -s {device} mklabel {table_type}"
    create_partition: str = "parted -s {device} mkpart --align optimal {part_name} 0% 100%"
    delete_partition: str = "parted -s {device} rm {part_num}"
    set_partition_guid: str = "sgdisk {device} --partition-guid={part_num}:{part_uuid}"
    get_partition_info: str = "sgdisk {device} --info={part_num}"


@dataclass
class PartitionInfo:
    """Partition details as reported by ``sgdisk --info``."""

    device: str
    number: str
    unique_guid: str
    type_guid: str = ""
    type_name: str = ""
    first_sector: int | None = None
    last_sector: int | None = None
    size_sectors: int | None = None
    attribute_flags: str = ""
    name: str = ""

    def size_bytes(self, sector_size: int = DEFAULT_SECTOR_SIZE) -> int | None:
        if self.size_sectors is None:
            return None
        return self.size_sectors * sector_size

    def to_dict(self, sector_size: int = DEFAULT_SECTOR_SIZE) -> dict[str, Any]:
        data = asdict(self)
        data["sector_size"] = sector_size
        data["size_bytes"] = self.size_bytes(sector_size)
        return data
