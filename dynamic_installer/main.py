"""
Dynamic Installer — CLI entrypoint.

Usage:
    python -m dynamic_installer.main --help
    python -m dynamic_installer.main install
    python -m dynamic_installer.main --config deps.yml check --json
"""

from __future__ import annotations

import asyncio
import json
import os
import sys
from pathlib import Path

import click

from dynamic_installer import __version__
from dynamic_installer.core.observability.logging_config import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="dynamic-installer")
@click.option("--verbose", "-v", is_flag=True, help="Enable info-level diagnostic logging.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to dependencies.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """Dynamic Installer — install package dependencies from a declaration."""
    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("DI_LOG_LEVEL", "WARNING")

    setup_logging(level=level, log_file=os.environ.get("DI_LOG_FILE"))


def _load_config(ctx: click.Context):
    """Load the install config or exit with a readable error."""
    from dynamic_installer.core.config.loader import ConfigError, load_install_config

    try:
        return load_install_config(ctx.obj.get("config_path"))
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)


def _shell_adapter():
    """Return the shell adapter, or exit when no shell is available."""
    from dynamic_installer.adapters.shell.command import ShellCommandAdapter

    adapter = ShellCommandAdapter()
    if not adapter.is_available():
        click.secho("❌ No shell found on PATH; cannot run install commands.", fg="red", err=True)
        sys.exit(1)
    return adapter


def _first_line(text: str) -> str:
    stripped = text.strip()
    return stripped.splitlines()[0] if stripped else ""


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output the report as JSON.")
@click.option("--dry-run", is_flag=True, help="Build and trace commands without running them.")
@click.option(
    "--install-command",
    default=None,
    help="Install verb to run (default: 'npm install').",
)
@click.pass_context
def install(ctx: click.Context, as_json: bool, dry_run: bool, install_command: str | None) -> None:
    """Install every declared dependency, one at a time."""
    from dynamic_installer.adapters.mock import MockAdapter
    from dynamic_installer.core.domain.command_builder import DEFAULT_INSTALL_COMMAND
    from dynamic_installer.core.engine.orchestrator import install_dependencies
    from dynamic_installer.core.observability.run_log import stderr_sink

    config = _load_config(ctx)
    if ctx.obj.get("quiet"):
        config = config.model_copy(update={"verbose": False})

    if dry_run:
        adapter = MockAdapter(adapter_name="dry-run", default_output="[dry-run] not executed")
    else:
        adapter = _shell_adapter()

    # The trace goes to stderr when stdout carries the JSON report.
    report = asyncio.run(
        install_dependencies(
            config,
            adapter=adapter,
            install_command=install_command or DEFAULT_INSTALL_COMMAND,
            sink=stderr_sink if as_json else None,
        )
    )

    if as_json:
        click.echo(json.dumps(report.to_dict(), indent=2))
    else:
        for detail in report.details:
            if detail.success:
                click.secho(f"✅ {detail.name}", fg="green")
            else:
                click.secho(f"❌ {detail.name} — {_first_line(detail.message)}", fg="red")
        if not ctx.obj.get("quiet"):
            total = len(report.details)
            click.echo(f"\n{total - len(report.failed)}/{total} installed")

    if not report.success:
        sys.exit(1)


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option(
    "--install-command",
    default=None,
    help="Install verb to check against (default: 'npm install').",
)
@click.pass_context
def check(ctx: click.Context, as_json: bool, install_command: str | None) -> None:
    """Validate names and options, and show the commands that would run."""
    from dynamic_installer.core.domain.command_builder import DEFAULT_INSTALL_COMMAND
    from dynamic_installer.core.engine.orchestrator import DependencyInstaller

    config = _load_config(ctx)
    installer = DependencyInstaller(install_command=install_command or DEFAULT_INSTALL_COMMAND)
    plan = installer.plan(config)

    if as_json:
        click.echo(json.dumps(
            [{"name": p.name, "command": p.command, "error": p.error} for p in plan],
            indent=2,
        ))
    else:
        for p in plan:
            if p.ok:
                click.echo(f"✓ {p.name}  → {p.command}")
            else:
                click.secho(f"✗ {p.error}", fg="red")
        if not installer.adapter.is_available():
            click.secho(f"⚠ {installer.adapter.name} adapter unavailable: install would fail", fg="yellow")

    if not all(p.ok for p in plan):
        sys.exit(1)


if __name__ == "__main__":
    cli()
