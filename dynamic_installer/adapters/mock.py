"""
Mock adapter — records commands instead of spawning them.

Used by the CLI's ``--dry-run`` mode and as the test double for the
orchestrator. Returns success for everything unless a response has been
configured for a command.
"""

from __future__ import annotations

from dynamic_installer.adapters.base import Adapter
from dynamic_installer.core.models.install import CommandResult


class MockAdapter(Adapter):
    """Universal mock adapter.

    Responses are matched by exact command string first, then by any
    whitespace-separated word of the command (usually the dependency
    name), so tests can script "axios fails" without spelling out the
    whole command.
    """

    def __init__(
        self,
        adapter_name: str = "mock",
        available: bool = True,
        default_output: str = "[mock] executed",
    ):
        self._name = adapter_name
        self._available = available
        self._default_output = default_output
        self._responses: dict[str, CommandResult] = {}
        self._call_log: list[str] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def call_log(self) -> list[str]:
        """Every command this mock has received, in order."""
        return self._call_log

    @property
    def call_count(self) -> int:
        """Number of times execute has been called."""
        return len(self._call_log)

    def is_available(self) -> bool:
        return self._available

    def set_response(self, key: str, result: CommandResult) -> None:
        """Set a custom response for a command string or dependency name."""
        self._responses[key] = result

    def set_output(self, key: str, stdout: str = "", stderr: str = "") -> None:
        """Configure a successful run with specific output streams."""
        self._responses[key] = CommandResult(command=key, stdout=stdout, stderr=stderr, return_code=0)

    def set_failure(self, key: str, error: str = "Mock failure", stderr: str = "") -> None:
        """Configure a command or dependency to fail."""
        self._responses[key] = CommandResult(command=key, stderr=stderr, error=error, return_code=1)

    def _lookup(self, command: str) -> CommandResult | None:
        if command in self._responses:
            return self._responses[command]
        for key, result in self._responses.items():
            if key in command.split():
                return result
        return None

    async def execute(self, command: str) -> CommandResult:
        self._call_log.append(command)

        scripted = self._lookup(command)
        if scripted is not None:
            return scripted.model_copy(update={"command": command})

        # Default: success
        return CommandResult(command=command, stdout=self._default_output, return_code=0)

    def reset(self) -> None:
        """Clear call log and custom responses."""
        self._call_log.clear()
        self._responses.clear()
