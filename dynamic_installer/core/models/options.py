"""
Validated option sets — a tagged result instead of an overloaded list.

An empty AcceptedOptions means "no options supplied". RejectedOptions
means "options were supplied and at least one token was refused".
The two must never be confused: treating a rejection as an empty list
would silently run the install without the caller's flags.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AcceptedOptions:
    """Every supplied token passed validation (possibly zero tokens)."""

    tokens: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return True

    def __add__(self, other: AcceptedOptions) -> AcceptedOptions:
        return AcceptedOptions(self.tokens + other.tokens)


@dataclass(frozen=True)
class RejectedOptions:
    """At least one supplied token failed validation."""

    tokens: tuple[str, ...]
    reason: str = ""

    @property
    def ok(self) -> bool:
        return False


OptionSet = AcceptedOptions | RejectedOptions
