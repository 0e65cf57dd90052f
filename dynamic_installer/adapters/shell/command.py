"""
Shell command adapter — run one install command in a child shell.

This is the only place a process is spawned. One command per call,
awaited to completion; the orchestrator never has two in flight.
"""

from __future__ import annotations

import asyncio
import logging
import shutil
import time

from dynamic_installer.adapters.base import Adapter
from dynamic_installer.core.models.install import CommandResult

logger = logging.getLogger(__name__)


def _decode(data: bytes | None) -> str:
    return data.decode("utf-8", errors="replace") if data else ""


def describe_failure(command: str, return_code: int, stderr: str) -> str:
    """Error description for a process that exited non-zero."""
    description = f"Command failed (exit {return_code}): {command}"
    if stderr:
        description = f"{description}\n{stderr}"
    return description


class ShellCommandAdapter(Adapter):
    """Execute install commands through the system shell.

    The command string is passed to the shell verbatim, which is why the
    orchestrator only ever builds it from validated names and tokens.
    Inherits the caller's working directory and environment.
    """

    @property
    def name(self) -> str:
        return "shell"

    def is_available(self) -> bool:
        return shutil.which("sh") is not None

    async def execute(self, command: str) -> CommandResult:
        logger.debug("Executing: %s", command)
        start = time.monotonic()

        try:
            process = await asyncio.create_subprocess_shell(
                command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
            raw_stdout, raw_stderr = await process.communicate()
        except OSError as e:
            return CommandResult(
                command=command,
                error=f"Command execution error: {e}",
                duration_ms=int((time.monotonic() - start) * 1000),
            )

        elapsed_ms = int((time.monotonic() - start) * 1000)
        stdout = _decode(raw_stdout)
        stderr = _decode(raw_stderr)

        error = None
        if process.returncode != 0:
            error = describe_failure(command, process.returncode, stderr)

        return CommandResult(
            command=command,
            stdout=stdout,
            stderr=stderr,
            error=error,
            return_code=process.returncode,
            duration_ms=elapsed_ms,
        )
