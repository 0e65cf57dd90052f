"""
Run log — the ordered, append-only trace of one installation run.

Each run owns its own RunLog; nothing here is module-level state, so
concurrent runs never see each other's lines. When verbose, every line
is also handed to a live sink before ``log()`` returns. The default
sink writes the line to stdout with ``click.echo``, whatever the
process's logging configuration.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime

import click

logger = logging.getLogger(__name__)

LOG_TAG = "dynamic-installer"

Sink = Callable[[str], None]


def _now_iso() -> str:
    """Current UTC time as ISO string."""
    return datetime.now(UTC).isoformat()


def console_sink(line: str) -> None:
    """Write one trace line to stdout."""
    click.echo(line)


def stderr_sink(line: str) -> None:
    """Write one trace line to stderr (keeps stdout clean for JSON output)."""
    click.echo(line, err=True)


def format_entry(message: str, timestamp: str | None = None) -> str:
    """Render one trace line: ``<timestamp> - [dynamic-installer]: <message>``."""
    return f"{timestamp or _now_iso()} - [{LOG_TAG}]: {message}"


class RunLog:
    """Append-only trace for a single run."""

    def __init__(self, verbose: bool = True, sink: Sink | None = None):
        self._verbose = verbose
        self._sink = sink or console_sink
        self._lines: list[str] = []

    @property
    def lines(self) -> list[str]:
        """A copy of the entries, in order."""
        return list(self._lines)

    @property
    def text(self) -> str:
        """All entries as one string, each terminated by a newline."""
        return "".join(f"{line}\n" for line in self._lines)

    def log(self, message: str) -> str:
        """Append one entry and mirror it to the sink when verbose.

        Never raises: a failing sink is reported at DEBUG and otherwise
        ignored.
        """
        entry = format_entry(message)
        self._lines.append(entry)
        if self._verbose:
            try:
                self._sink(entry)
            except Exception:
                logger.debug("Live log sink failed", exc_info=True)
        return entry
