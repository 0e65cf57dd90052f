"""
Domain — command construction (pure).

Takes names and option sets that have already been validated and
produces the single command string handed to the shell. Flag order is
preserved exactly; nothing is deduplicated or reordered, so a later flag
keeps whatever precedence the package manager gives it.
"""

from __future__ import annotations

from collections.abc import Sequence

from dynamic_installer.core.models.options import (
    AcceptedOptions,
    OptionSet,
    RejectedOptions,
)

DEFAULT_INSTALL_COMMAND = "npm install"


def resolve_effective_options(
    global_options: OptionSet,
    dependency_options: OptionSet,
    override: bool,
) -> OptionSet:
    """Combine global and per-dependency option sets.

    With ``override`` the global set is ignored entirely, even when it
    was rejected. Otherwise the result is global tokens followed by
    dependency tokens, and a rejection on either side rejects the whole.
    """
    if override:
        return dependency_options
    if isinstance(global_options, RejectedOptions):
        return global_options
    if isinstance(dependency_options, RejectedOptions):
        return dependency_options
    return global_options + dependency_options


def build_command(
    name: str,
    options: AcceptedOptions | Sequence[str] = (),
    install_command: str = DEFAULT_INSTALL_COMMAND,
) -> str:
    """Build ``"<install-command> <name> <options...>"``.

    Trailing whitespace is trimmed when there are no options.
    """
    if isinstance(options, RejectedOptions):
        raise ValueError(f"Cannot build a command from rejected options: {options.reason}")
    tokens = options.tokens if isinstance(options, AcceptedOptions) else tuple(options)
    return f"{install_command} {name} {' '.join(tokens)}".rstrip()
