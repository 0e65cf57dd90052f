"""
Adapter base — the contract between the orchestrator and child processes.

The orchestrator never spawns anything itself. It hands a fully built,
already validated command string to an adapter and awaits a
CommandResult. Adapters NEVER raise: spawn failures, non-zero exits and
anything else that goes wrong are captured in the result's ``error``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from dynamic_installer.core.models.install import CommandResult


class Adapter(ABC):
    """Abstract base class for process adapters.

    To create a new adapter:
        1. Subclass Adapter
        2. Implement name, is_available, execute
        3. Pass an instance to DependencyInstaller(adapter=...)
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The adapter identifier (e.g., 'shell', 'mock')."""

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the adapter can run commands on this host.

        Should be fast and never raise.
        """

    @abstractmethod
    async def execute(self, command: str) -> CommandResult:
        """Run one command to completion and return its outcome.

        MUST never raise exceptions. No retry, no timeout: the
        coroutine completes when the child process does.
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
