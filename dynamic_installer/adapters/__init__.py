"""
Adapters — the process boundary of the installer.

The orchestrator only talks to child processes through an Adapter.
"""

from dynamic_installer.adapters.base import Adapter
from dynamic_installer.adapters.mock import MockAdapter
from dynamic_installer.adapters.shell.command import ShellCommandAdapter

__all__ = ["Adapter", "MockAdapter", "ShellCommandAdapter"]
