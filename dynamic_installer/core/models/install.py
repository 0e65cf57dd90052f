"""
Install models — the caller's request and the installer's report.

The configuration side (Dependency, InstallConfig) is what the caller
hands in. The result side (DependencyResult, InstallReport) is the only
channel through which outcomes flow back. CommandResult is the contract
between the orchestrator and the process adapters.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator

# Options arrive either as one space-delimited string or as a list of tokens.
# Other values are kept as given and rejected per dependency by validation.
OptionsInput = str | list[str] | None

# Keys accepted from JSON-style callers and config files
_CAMEL_KEYS = {"globalOptions": "global_options"}


class Dependency(BaseModel):
    """One caller-supplied request to install a named package.

    ``name`` and ``options`` are not type-checked here: a malformed entry
    must fail on its own, as an invalid name or invalid options, without
    taking the rest of the run down with it.
    """

    name: Any = None
    options: Any = None             # OptionsInput when well-formed
    override: bool = False          # True = ignore global options entirely

    @model_validator(mode="before")
    @classmethod
    def _wrap_bare_entry(cls, data: Any) -> Any:
        # A bare entry ("lodash") is shorthand for {"name": "lodash"}.
        if isinstance(data, (dict, BaseModel)):
            return data
        return {"name": data}


class InstallConfig(BaseModel):
    """The single input to an installation run.

    Consumed once per run and never mutated by the installer.
    """

    global_options: Any = None      # OptionsInput when well-formed
    dependencies: list[Dependency]
    verbose: bool = True

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> InstallConfig:
        """Validate a plain mapping, accepting camelCase keys as well."""
        data = {_CAMEL_KEYS.get(key, key): value for key, value in data.items()}
        return cls.model_validate(data)


class DependencyResult(BaseModel):
    """Outcome of one dependency. Created once, never mutated."""

    model_config = {"frozen": True}

    name: Any
    success: bool
    message: str


class InstallReport(BaseModel):
    """Aggregate result of an installation run.

    ``details`` is one-to-one and order-preserving with the configured
    dependencies, including ones rejected before any process spawned.
    Callers should inspect ``details`` to find out which dependency
    failed; ``success`` only says whether any did.
    """

    success: bool
    details: list[DependencyResult] = Field(default_factory=list)
    logs: str = ""
    logs_array: list[str] = Field(default_factory=list)

    @property
    def failed(self) -> list[DependencyResult]:
        """Results of the dependencies that did not install."""
        return [d for d in self.details if not d.success]

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


class CommandResult(BaseModel):
    """Normalized outcome of one child process.

    ``error`` is the execution error description, or None when the
    process completed without one. A non-empty ``stderr`` alone does not
    make the result a failure.
    """

    command: str
    stdout: str = ""
    stderr: str = ""
    error: str | None = None
    return_code: int | None = None
    duration_ms: int = 0

    @property
    def success(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str:
        """Error description on failure, else stdout (falling back to stderr)."""
        if self.error is not None:
            return self.error
        return self.stdout or self.stderr
