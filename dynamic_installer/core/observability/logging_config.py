"""
Diagnostic logging setup for the CLI.

Diagnostics (``logging.getLogger(__name__)`` in every module) go to
stderr, so they never mix with the run-log trace or ``--json`` output
on stdout. The run-log trace itself is not routed through logging; it
follows ``InstallConfig.verbose`` via the RunLog sink.

Level precedence:  CLI flag  >  DI_LOG_LEVEL env var  >  WARNING
Optional copy of every record to DI_LOG_FILE, at DEBUG.
"""

from __future__ import annotations

import logging
import sys

_FMT_CONSOLE = "%(levelname)s [%(name)s] %(message)s"
_FMT_FILE = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"
_DATEFMT_FILE = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "WARNING", log_file: str | None = None) -> None:
    """Configure the root logger once per CLI invocation."""
    numeric_level = _parse_level(level)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(numeric_level)
    console.setFormatter(logging.Formatter(_FMT_CONSOLE))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)
    root.setLevel(numeric_level)

    if log_file:
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter(_FMT_FILE, datefmt=_DATEFMT_FILE))
        root.addHandler(fh)
        root.setLevel(logging.DEBUG)

    # Don't propagate exceptions from logging itself
    logging.raiseExceptions = False


def _parse_level(level: str | None) -> int:
    """Convert a level name string to its numeric constant."""
    numeric = getattr(logging, (level or "").upper(), None)
    return numeric if isinstance(numeric, int) else logging.WARNING
