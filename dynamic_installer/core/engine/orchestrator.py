"""
Installer orchestrator — the sequential install loop.

Takes an InstallConfig, and for each dependency in declaration order:
validates the name, resolves the effective options, builds the command,
runs it through the adapter, and records exactly one DependencyResult.
A failing dependency never stops the loop.

Flow (per dependency):
    name check → option resolution → build command → execute → trace → result
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from dynamic_installer.adapters.base import Adapter
from dynamic_installer.adapters.shell.command import ShellCommandAdapter
from dynamic_installer.core.domain.command_builder import (
    DEFAULT_INSTALL_COMMAND,
    build_command,
    resolve_effective_options,
)
from dynamic_installer.core.domain.input_validation import (
    is_valid_dependency_name,
    validate_options,
)
from dynamic_installer.core.models.install import (
    CommandResult,
    Dependency,
    DependencyResult,
    InstallConfig,
    InstallReport,
)
from dynamic_installer.core.models.options import OptionSet, RejectedOptions
from dynamic_installer.core.observability.run_log import RunLog, Sink

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlannedInstall:
    """What the installer would do for one dependency.

    Exactly one of ``command`` and ``error`` is set.
    """

    name: Any
    command: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class DependencyInstaller:
    """Runs one install command per declared dependency, strictly in sequence.

    The installer itself is stateless between runs: every call to
    ``install`` creates its own RunLog and result list, so one instance
    may serve several runs, including concurrent ones.
    """

    def __init__(
        self,
        adapter: Adapter | None = None,
        install_command: str = DEFAULT_INSTALL_COMMAND,
        sink: Sink | None = None,
    ):
        self._adapter = adapter or ShellCommandAdapter()
        self._install_command = install_command
        self._sink = sink

    @property
    def adapter(self) -> Adapter:
        return self._adapter

    # ── Planning (pure) ──────────────────────────────────────────

    def plan(self, config: InstallConfig) -> list[PlannedInstall]:
        """Decide, without running anything, what each dependency would do."""
        global_options = validate_options(config.global_options)
        return [self._plan_one(dep, global_options) for dep in config.dependencies]

    def _plan_one(self, dep: Dependency, global_options: OptionSet) -> PlannedInstall:
        if not is_valid_dependency_name(dep.name):
            return PlannedInstall(name=dep.name, error=f"Invalid dependency name: {dep.name}")

        effective = resolve_effective_options(
            global_options,
            validate_options(dep.options),
            dep.override,
        )
        if isinstance(effective, RejectedOptions):
            logger.debug("Options rejected for %s: %s", dep.name, effective.reason)
            return PlannedInstall(name=dep.name, error=f"Invalid options for dependency: {dep.name}")

        return PlannedInstall(
            name=dep.name,
            command=build_command(dep.name, effective, self._install_command),
        )

    # ── Execution ────────────────────────────────────────────────

    async def install(self, config: InstallConfig) -> InstallReport:
        """Install every dependency in ``config`` and report per-item outcomes.

        Never raises for caller-supplied data; validation and execution
        failures become failed DependencyResults.
        """
        log = RunLog(verbose=config.verbose, sink=self._sink)
        global_options = validate_options(config.global_options)
        results: list[DependencyResult] = []

        logger.info(
            "Installing %d dependencies via %s", len(config.dependencies), self._adapter.name
        )

        for dep in config.dependencies:
            planned = self._plan_one(dep, global_options)

            if not planned.ok:
                log.log(planned.error)
                results.append(DependencyResult(name=dep.name, success=False, message=planned.error))
                continue

            outcome = await self._execute(planned.command, log)
            results.append(
                DependencyResult(name=dep.name, success=outcome.success, message=outcome.message)
            )

        report = InstallReport(
            success=all(r.success for r in results),
            details=results,
            logs=log.text,
            logs_array=log.lines,
        )
        logger.info(
            "Install finished: %d/%d succeeded",
            len(results) - len(report.failed),
            len(results),
        )
        return report

    async def _execute(self, command: str, log: RunLog) -> CommandResult:
        """Run one command and write its fixed five-line trace.

        The command line is written before the process starts, so a hung
        child still shows up in the log.
        """
        log.log(f"command: {command}")
        try:
            result = await self._adapter.execute(command)
        except Exception as e:
            # Adapters must not raise; keep the loop going if one does.
            logger.exception("Adapter %s raised for: %s", self._adapter.name, command)
            result = CommandResult(command=command, error=str(e) or type(e).__name__)

        logger.debug("Finished in %dms: %s", result.duration_ms, command)
        log.log(f"stdout: {result.stdout}")
        log.log(f"stderr: {result.stderr}")
        log.log(f"error: {result.error if result.error is not None else 'none'}")
        log.log(f"success: {result.success}, message: {result.message}")
        return result


async def install_dependencies(
    config: InstallConfig | dict[str, Any],
    *,
    adapter: Adapter | None = None,
    install_command: str = DEFAULT_INSTALL_COMMAND,
    sink: Sink | None = None,
) -> InstallReport:
    """Install the configured dependencies one at a time.

    Args:
        config: An InstallConfig, or a mapping with the same shape
                (``globalOptions`` is accepted for ``global_options``).
        adapter: Process adapter (default: ShellCommandAdapter).
        install_command: The install verb, e.g. ``"npm install"``.
        sink: Live sink for verbose run-log lines
              (default: stdout).

    Returns:
        The aggregate InstallReport.

    Raises:
        pydantic.ValidationError: If the mapping has no ``dependencies``
            list. Malformed entries inside it fail individually instead.
    """
    if not isinstance(config, InstallConfig):
        config = InstallConfig.from_mapping(config)
    installer = DependencyInstaller(adapter=adapter, install_command=install_command, sink=sink)
    return await installer.install(config)
