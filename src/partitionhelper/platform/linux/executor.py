"""
Linux shell command executor.
"""

from __future__ import annotations

import os
import subprocess
import time
from typing import TYPE_CHECKING

from partitionhelper.core.logging import get_logger
from partitionhelper.platform.base import CommandExecutor, CommandResult

if TYPE_CHECKING:
    from partitionhelper.core.config import ExecutorConfig

logger = get_logger(__name__)


class ShellExecutor(CommandExecutor):
    """Runs command lines through a POSIX shell."""

    def __init__(
        self,
        shell: str = "/bin/sh",
        timeout: int = 300,
        environment: dict[str, str] | None = None,
    ) -> None:
        self.shell = shell
        self.timeout = timeout
        self.environment = dict(environment or {})

    @classmethod
    def from_config(cls, config: ExecutorConfig) -> ShellExecutor:
        return cls(
            shell=config.shell,
            timeout=config.timeout_seconds,
            environment=config.environment,
        )

    def _build_env(self) -> dict[str, str]:
        env = os.environ.copy()
        env.update(self.environment)
        return env

    def run_cmd(self, command: str) -> CommandResult:
        """Run a command line through the shell."""
        logger.debug("Running command", command=command)
        start_time = time.time()

        try:
            result = subprocess.run(
                [self.shell, "-c", command],
                capture_output=True,
                text=True,
                timeout=self.timeout,
                env=self._build_env(),
            )
        except subprocess.TimeoutExpired:
            logger.warning("Command timed out", command=command, timeout=self.timeout)
            return CommandResult(
                returncode=-1,
                stdout="",
                stderr=f"Command timed out after {self.timeout}s",
                command=command,
                duration_seconds=self.timeout,
            )
        except OSError as e:
            logger.warning("Command could not be started", command=command, error=str(e))
            return CommandResult(
                returncode=-1,
                stdout="",
                stderr=str(e),
                command=command,
                duration_seconds=time.time() - start_time,
            )

        cmd_result = CommandResult(
            returncode=result.returncode,
            stdout=result.stdout,
            stderr=result.stderr,
            command=command,
            duration_seconds=time.time() - start_time,
        )

        if not cmd_result.success:
            logger.warning(
                "Command failed",
                command=command,
                returncode=result.returncode,
                stderr=result.stderr[:500] if result.stderr else "",
            )

        return cmd_result
