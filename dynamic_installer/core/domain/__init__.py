"""
Domain layer — pure validation and command construction.
"""

from dynamic_installer.core.domain.command_builder import (
    DEFAULT_INSTALL_COMMAND,
    build_command,
    resolve_effective_options,
)
from dynamic_installer.core.domain.input_validation import (
    is_valid_dependency_name,
    is_valid_option_token,
    normalize_options,
    validate_options,
)

__all__ = [
    "DEFAULT_INSTALL_COMMAND",
    "build_command",
    "is_valid_dependency_name",
    "is_valid_option_token",
    "normalize_options",
    "resolve_effective_options",
    "validate_options",
]
