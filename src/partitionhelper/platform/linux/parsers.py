"""
Linux output parsers.

Parsers for partprobe and sgdisk output.
"""

from __future__ import annotations

import re

from partitionhelper.core.models import PartitionInfo

PARTITIONS_TOKEN = "partitions"
UNIQUE_GUID_LABEL = "Partition unique GUID:"

_GUID_CODE_RE = re.compile(r"^(?P<guid>\S+)(?:\s+\((?P<name>.*)\))?$")
_SECTOR_RE = re.compile(r"^(?P<value>\d+)")


def parse_partition_exists(output: str) -> bool:
    """
    Check partprobe output for a non-empty partition list.

    Example input:
    /dev/sdy: gpt partitions 1 2
    """
    parts = output.strip().split(PARTITIONS_TOKEN)
    # the partition numbers follow the token
    return len(parts) > 1 and parts[1] != ""


def parse_partition_table_type(output: str) -> str | None:
    """
    Get the partition table type from partprobe output.

    Example input:
    /dev/sda: msdos partitions 1
    """
    fields = output.split()
    if len(fields) < 2:
        return None
    return fields[1]


def parse_partition_guid(output: str) -> str | None:
    """
    Get the lower-cased partition unique GUID from ``sgdisk --info`` output.

    The first line carrying the label decides the result.
    """
    for line in output.splitlines():
        if UNIQUE_GUID_LABEL in line:
            guid = line.strip().split(UNIQUE_GUID_LABEL, 1)[1].strip()
            return guid.lower() or None
    return None


def parse_sgdisk_info(output: str) -> dict[str, str]:
    """
    Parse ``sgdisk --info`` output into a label/value mapping.

    Example input:
    Partition GUID code: 0FC63DAF-8483-4772-8E79-3D69D8477DE4 (Linux filesystem)
    Partition unique GUID: 5209CFD8-3AB1-4720-BCEA-DFA80315EC92
    First sector: 2048 (at 1024.0 KiB)
    Last sector: 999423 (at 488.0 MiB)
    Partition size: 997376 sectors (487.0 MiB)
    Attribute flags: 0000000000000000
    Partition name: ''
    """
    result: dict[str, str] = {}

    for line in output.splitlines():
        line = line.strip()
        if not line or ":" not in line:
            continue

        label, value = line.split(":", 1)
        result.setdefault(label.strip(), value.strip())

    return result


def _parse_sectors(value: str | None) -> int | None:
    if not value:
        return None
    match = _SECTOR_RE.match(value)
    return int(match.group("value")) if match else None


def build_partition_info(device: str, number: str, output: str) -> PartitionInfo | None:
    """Build PartitionInfo from ``sgdisk --info`` output."""
    unique_guid = parse_partition_guid(output)
    if unique_guid is None:
        return None

    fields = parse_sgdisk_info(output)

    type_guid = ""
    type_name = ""
    code_match = _GUID_CODE_RE.match(fields.get("Partition GUID code", ""))
    if code_match:
        type_guid = code_match.group("guid").lower()
        type_name = code_match.group("name") or ""

    return PartitionInfo(
        device=device,
        number=str(number),
        unique_guid=unique_guid,
        type_guid=type_guid,
        type_name=type_name,
        first_sector=_parse_sectors(fields.get("First sector")),
        last_sector=_parse_sectors(fields.get("Last sector")),
        size_sectors=_parse_sectors(fields.get("Partition size")),
        attribute_flags=fields.get("Attribute flags", ""),
        name=fields.get("Partition name", "").strip("'"),
    )
