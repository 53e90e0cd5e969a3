"""
PartitionHelper error hierarchy.

Separates input rejected before any command runs, external tool failures,
and tool output that could not be interpreted.
"""

from __future__ import annotations

from collections.abc import Iterable


class PartitionHelperError(Exception):
    """Base exception for all partition helper failures."""

    def __init__(self, message: str, device: str = "") -> None:
        super().__init__(message)
        self.device = device


class InvalidInputError(PartitionHelperError):
    """Input was rejected before any external command was issued."""

    def __init__(self, message: str, device: str = "", value: str = "") -> None:
        super().__init__(message, device)
        self.value = value


class UnsupportedPartitionTableError(InvalidInputError):
    """Requested partition table type is not in the supported list."""

    def __init__(self, device: str, table_type: str, supported: Iterable[str]) -> None:
        self.supported = tuple(supported)
        super().__init__(
            f"unable to create partition table for device {device}: "
            f"unsupported partition table type {table_type!r} "
            f"(supported: {', '.join(self.supported)})",
            device=device,
            value=table_type,
        )


class CommandFailedError(PartitionHelperError):
    """An external tool exited non-zero or could not be started."""

    def __init__(
        self,
        action: str,
        device: str,
        command: str,
        returncode: int,
        stderr: str = "",
        partition: str | None = None,
    ) -> None:
        self.action = action
        self.partition = partition
        self.command = command
        self.returncode = returncode
        self.stderr = stderr.strip()

        target = f"partition {partition!r} on device {device}" if partition else f"device {device}"
        message = f"unable to {action} for {target}: '{command}' exited with code {returncode}"
        if self.stderr:
            message += f": {self.stderr}"
        super().__init__(message, device)


class PartitionExistenceCheckError(CommandFailedError):
    """The existence probe itself failed; says nothing about the partition."""


class ParseError(PartitionHelperError):
    """An external tool succeeded but its output had an unexpected shape."""

    def __init__(self, message: str, device: str, output: str = "") -> None:
        super().__init__(message, device)
        self.output = output
