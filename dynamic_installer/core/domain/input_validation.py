"""
Domain — input validation for names and option tokens (pure).

This is the shell-injection filter: every string that ends up in the
command line passes through here first. No I/O, no subprocess.
"""

from __future__ import annotations

import logging
import re

from dynamic_installer.core.models.install import OptionsInput
from dynamic_installer.core.models.options import (
    AcceptedOptions,
    OptionSet,
    RejectedOptions,
)

logger = logging.getLogger(__name__)

# Letters, digits and @ . _ / - only. Syntactic filter, not a registry check:
# "../evil" and "@scope/../evil" are accepted because "." and "/" are.
_NAME_PATTERN = re.compile(r"[A-Za-z0-9@._/-]+")

# -x / -abc  or  --save / --save-dev (lowercase groups, single hyphens)
_SHORT_FLAG = re.compile(r"-[A-Za-z]+")
_LONG_FLAG = re.compile(r"--[a-z]+(?:-[a-z]+)*")

SHELL_METACHARACTERS = frozenset(";&|$`<>\\*?(){}[]~")


def is_valid_dependency_name(name: str) -> bool:
    """Return True if ``name`` only uses characters safe to put on a shell line."""
    if not isinstance(name, str):
        return False
    return _NAME_PATTERN.fullmatch(name) is not None


def is_valid_option_token(token: str) -> bool:
    """Return True if ``token`` is a short or long flag with no shell metacharacters.

    Mixed-case long flags (``--Save``) are rejected; short flags accept
    either case (``-D``, ``-g``).
    """
    if not isinstance(token, str) or not token:
        return False
    if any(ch in SHELL_METACHARACTERS for ch in token):
        return False
    return bool(_SHORT_FLAG.fullmatch(token) or _LONG_FLAG.fullmatch(token))


def normalize_options(options: OptionsInput) -> list[str]:
    """Convert either accepted input shape to one ordered token list.

    A string is split on whitespace. A list is taken element by element:
    each element is one token, so an element that itself contains
    whitespace stays whole and fails validation.

    ``None`` and the empty string both mean "no options".
    """
    if options is None:
        return []
    if isinstance(options, str):
        return options.split()
    return list(options)


def validate_options(options: OptionsInput) -> OptionSet:
    """Normalize ``options`` and validate every token.

    Returns:
        ``AcceptedOptions`` with the ordered tokens, or ``RejectedOptions``
        naming the first token that failed.
    """
    if options is not None and not isinstance(options, (str, list, tuple)):
        return RejectedOptions((), reason=f"Unsupported options value: {options!r}")
    tokens = tuple(normalize_options(options))
    for token in tokens:
        if not is_valid_option_token(token):
            logger.debug("Rejected option token %r", token)
            return RejectedOptions(tokens, reason=f"Invalid option token: {token!r}")
    return AcceptedOptions(tokens)
