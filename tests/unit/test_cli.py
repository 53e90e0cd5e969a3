"""
Tests for partitionhelper.cli module.
"""

import json
from typing import Any
from unittest.mock import Mock

import pytest
from click.testing import CliRunner
from pytest_mock import MockerFixture

from partitionhelper.cli.main import cli
from partitionhelper.core.errors import CommandFailedError, ParseError
from partitionhelper.core.models import PartitionInfo
from partitionhelper.platform.base import Partitioner


@pytest.fixture
def partitioner(mocker: MockerFixture) -> Mock:
    return mocker.Mock(spec=Partitioner)


@pytest.fixture
def invoke(sample_config, partitioner: Mock, mocker: MockerFixture):
    mocker.patch("partitionhelper.cli.main.is_admin", return_value=True)
    runner = CliRunner()

    def _invoke(*args: str, input: str | None = None) -> Any:
        obj = {"config": sample_config, "partitioner": partitioner}
        return runner.invoke(cli, list(args), obj=obj, input=input)

    return _invoke


class TestReadCommands:
    """Tests for read-only commands."""

    def test_exists(self, invoke, partitioner: Mock) -> None:
        partitioner.is_partition_exists.return_value = True

        result = invoke("exists", "/dev/sdy", "1")

        assert result.exit_code == 0
        assert "Partitions present on /dev/sdy" in result.output
        partitioner.is_partition_exists.assert_called_once_with("/dev/sdy", "1")

    def test_exists_json(self, invoke, partitioner: Mock) -> None:
        partitioner.is_partition_exists.return_value = False

        result = invoke("--json", "exists", "/dev/sdy", "1")

        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "device": "/dev/sdy",
            "partition": "1",
            "exists": False,
        }

    def test_exists_failure(self, invoke, partitioner: Mock) -> None:
        partitioner.is_partition_exists.side_effect = CommandFailedError(
            action="check partition existence",
            device="/dev/sdy",
            command="partprobe -d -s /dev/sdy",
            returncode=1,
        )

        result = invoke("exists", "/dev/sdy", "1")

        assert result.exit_code == 1
        assert "unable to check partition existence" in result.output

    def test_table_type(self, invoke, partitioner: Mock) -> None:
        partitioner.get_partition_table_type.return_value = "gpt"

        result = invoke("--json", "table-type", "/dev/sdy")

        assert result.exit_code == 0
        assert json.loads(result.output)["table_type"] == "gpt"

    def test_get_guid(self, invoke, partitioner: Mock) -> None:
        partitioner.get_partition_uuid.return_value = "5209cfd8-3ab1-4720-bcea-dfa80315ec92"

        result = invoke("get-guid", "/dev/sdy", "1")

        assert result.exit_code == 0
        assert "5209cfd8-3ab1-4720-bcea-dfa80315ec92" in result.output

    def test_get_guid_parse_error(self, invoke, partitioner: Mock) -> None:
        partitioner.get_partition_uuid.side_effect = ParseError(
            "unable to get partition GUID for device /dev/sdy", "/dev/sdy"
        )

        result = invoke("get-guid", "/dev/sdy", "1")

        assert result.exit_code == 1
        assert "unable to get partition GUID" in result.output

    def test_info(self, invoke, partitioner: Mock) -> None:
        partitioner.get_partition_info.return_value = PartitionInfo(
            device="/dev/sdy",
            number="1",
            unique_guid="5209cfd8-3ab1-4720-bcea-dfa80315ec92",
            type_name="Linux filesystem",
            size_sectors=2048,
        )

        result = invoke("--json", "info", "/dev/sdy", "1")

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["type_name"] == "Linux filesystem"
        assert data["size_bytes"] == 1048576

    def test_info_table(self, invoke, partitioner: Mock) -> None:
        partitioner.get_partition_info.return_value = PartitionInfo(
            device="/dev/sdy", number="1", unique_guid="abcd", size_sectors=2048
        )

        result = invoke("info", "/dev/sdy", "1")

        assert result.exit_code == 0
        assert "abcd" in result.output
        assert "1.0 MiB" in result.output


class TestSyncCommand:
    """Tests for the sync command."""

    def test_sync_device(self, invoke, partitioner: Mock) -> None:
        result = invoke("sync", "/dev/sdy")

        assert result.exit_code == 0
        partitioner.sync_partition_table.assert_called_once_with("/dev/sdy")

    def test_sync_all(self, invoke, partitioner: Mock) -> None:
        result = invoke("sync")

        assert result.exit_code == 0
        assert "all devices" in result.output
        partitioner.sync_partition_table.assert_called_once_with("")


class TestMutatingCommands:
    """Tests for commands that change the partition table."""

    def test_mklabel_confirmed(self, invoke, partitioner: Mock) -> None:
        result = invoke("mklabel", "/dev/sdy", input="y\n")

        assert result.exit_code == 0
        partitioner.create_partition_table.assert_called_once_with("/dev/sdy", "gpt")

    def test_mklabel_declined(self, invoke, partitioner: Mock) -> None:
        result = invoke("mklabel", "/dev/sdy", input="n\n")

        assert result.exit_code == 1
        partitioner.create_partition_table.assert_not_called()

    def test_mklabel_rejects_unsupported_type(self, invoke, partitioner: Mock) -> None:
        result = invoke("mklabel", "/dev/sdy", "--type", "msdos", "--yes")

        assert result.exit_code == 2
        partitioner.create_partition_table.assert_not_called()

    def test_mkpart(self, invoke, partitioner: Mock) -> None:
        result = invoke("mkpart", "/dev/sdy", "primary", "--yes")

        assert result.exit_code == 0
        partitioner.create_partition.assert_called_once_with("/dev/sdy", "primary")

    def test_rm(self, invoke, partitioner: Mock) -> None:
        result = invoke("rm", "/dev/sdy", "2", "--yes")

        assert result.exit_code == 0
        partitioner.delete_partition.assert_called_once_with("/dev/sdy", "2")

    def test_rm_failure(self, invoke, partitioner: Mock) -> None:
        partitioner.delete_partition.side_effect = CommandFailedError(
            action="delete partition",
            device="/dev/sdy",
            command="parted -s /dev/sdy rm 2",
            returncode=1,
            stderr="Error: Partition doesn't exist.",
            partition="2",
        )

        result = invoke("rm", "/dev/sdy", "2", "--yes")

        assert result.exit_code == 1
        assert "Partition doesn't exist" in result.output

    def test_set_guid(self, invoke, partitioner: Mock) -> None:
        result = invoke("set-guid", "/dev/sdy", "1", "5209CFD8-3AB1-4720-BCEA-DFA80315EC92", "-y")

        assert result.exit_code == 0
        partitioner.set_partition_uuid.assert_called_once_with(
            "/dev/sdy", "1", "5209CFD8-3AB1-4720-BCEA-DFA80315EC92"
        )

    def test_dry_run_shows_command(self, invoke, partitioner: Mock) -> None:
        result = invoke("rm", "/dev/sdy", "2", "--dry-run")

        assert result.exit_code == 0
        assert "parted -s /dev/sdy rm 2" in result.output
        partitioner.delete_partition.assert_not_called()

    def test_mutating_command_warns_when_not_root(
        self, invoke, partitioner: Mock, mocker: MockerFixture
    ) -> None:
        mocker.patch("partitionhelper.cli.main.is_admin", return_value=False)

        result = invoke("mkpart", "/dev/sdy", "primary", "--yes")

        assert result.exit_code == 0
        assert "Not running as root" in result.output
        partitioner.create_partition.assert_called_once_with("/dev/sdy", "primary")

    def test_root_has_no_warning(self, invoke) -> None:
        result = invoke("mkpart", "/dev/sdy", "primary", "--yes")

        assert "Not running as root" not in result.output


class TestOutputEscaping:
    """User-supplied values are printed literally, not as rich markup."""

    def test_device_with_brackets(self, invoke, partitioner: Mock) -> None:
        result = invoke("sync", "/dev/disk/by-id/[bold]sdy")

        assert result.exit_code == 0
        assert "/dev/disk/by-id/[bold]sdy" in result.output

    def test_guid_with_brackets(self, invoke, partitioner: Mock) -> None:
        result = invoke("set-guid", "/dev/sdy", "[1]", "[red]abcd", "--yes")

        assert result.exit_code == 0
        assert "[1]" in result.output
        assert "[red]abcd" in result.output

    def test_table_type_with_brackets(self, invoke, partitioner: Mock) -> None:
        partitioner.get_partition_table_type.return_value = "[dim]gpt"

        result = invoke("table-type", "/dev/[b]sdy")

        assert "/dev/[b]sdy:" in result.output
        assert "[dim]gpt" in result.output


class TestInfoSectorSize:
    """The --sector-size option applies to every output format."""

    def test_json_uses_sector_size(self, invoke, partitioner: Mock) -> None:
        partitioner.get_partition_info.return_value = PartitionInfo(
            device="/dev/sdy", number="1", unique_guid="abcd", size_sectors=2048
        )

        result = invoke("--json", "info", "/dev/sdy", "1", "--sector-size", "4096")

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["size_bytes"] == 2048 * 4096
        assert data["sector_size"] == 4096

    def test_table_uses_sector_size(self, invoke, partitioner: Mock) -> None:
        partitioner.get_partition_info.return_value = PartitionInfo(
            device="/dev/sdy", number="1", unique_guid="abcd", size_sectors=2048
        )

        result = invoke("info", "/dev/sdy", "1", "--sector-size", "4096")

        assert result.exit_code == 0
        assert "8.0 MiB" in result.output
