"""
Domain models for the installer.

    from dynamic_installer.core.models import InstallConfig, InstallReport, AcceptedOptions
"""

from dynamic_installer.core.models.install import (
    CommandResult,
    Dependency,
    DependencyResult,
    InstallConfig,
    InstallReport,
    OptionsInput,
)
from dynamic_installer.core.models.options import (
    AcceptedOptions,
    OptionSet,
    RejectedOptions,
)

__all__ = [
    # install.py
    "CommandResult",
    "Dependency",
    "DependencyResult",
    "InstallConfig",
    "InstallReport",
    "OptionsInput",
    # options.py
    "AcceptedOptions",
    "OptionSet",
    "RejectedOptions",
]
