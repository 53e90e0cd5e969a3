"""
Pytest configuration and fixtures for PartitionHelper tests.
"""

import sys
import tempfile
from pathlib import Path
from typing import Generator

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from partitionhelper.platform.base import CommandExecutor, CommandResult  # noqa: E402


class RecordingExecutor(CommandExecutor):
    """Executor stub that records commands and replays canned results."""

    def __init__(
        self,
        stdout: str = "",
        stderr: str = "",
        returncode: int = 0,
    ) -> None:
        self.stdout = stdout
        self.stderr = stderr
        self.returncode = returncode
        self.commands: list[str] = []

    def run_cmd(self, command: str) -> CommandResult:
        self.commands.append(command)
        return CommandResult(
            returncode=self.returncode,
            stdout=self.stdout,
            stderr=self.stderr,
            command=command,
        )


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def executor() -> RecordingExecutor:
    """Executor whose commands all succeed with empty output."""
    return RecordingExecutor()


@pytest.fixture
def failing_executor() -> RecordingExecutor:
    """Executor whose commands all exit non-zero."""
    return RecordingExecutor(stderr="Error: Could not stat device /dev/sdy\n", returncode=1)


@pytest.fixture
def sample_config(temp_dir: Path) -> "PartitionHelperConfig":
    """Create a sample configuration for testing."""
    from partitionhelper.core.config import PartitionHelperConfig

    config = PartitionHelperConfig()
    config.logging.console_enabled = False
    config.logging.log_directory = temp_dir / "logs"
    return config


SGDISK_INFO_OUTPUT = """Partition GUID code: 0FC63DAF-8483-4772-8E79-3D69D8477DE4 (Linux filesystem)
Partition unique GUID: 5209CFD8-3AB1-4720-BCEA-DFA80315EC92
First sector: 2048 (at 1024.0 KiB)
Last sector: 999423 (at 488.0 MiB)
Partition size: 997376 sectors (487.0 MiB)
Attribute flags: 0000000000000000
Partition name: 'data'
"""


@pytest.fixture
def sgdisk_info_output() -> str:
    return SGDISK_INFO_OUTPUT


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "slow: Slow running tests")


@pytest.fixture
def make_executor() -> type[RecordingExecutor]:
    """Factory for executors with custom canned output."""
    return RecordingExecutor
