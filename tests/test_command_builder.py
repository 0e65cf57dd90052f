"""
Tests for command construction and effective-option resolution.
"""

import pytest

from dynamic_installer.core.domain.command_builder import (
    DEFAULT_INSTALL_COMMAND,
    build_command,
    resolve_effective_options,
)
from dynamic_installer.core.models.options import AcceptedOptions, RejectedOptions

GLOBAL = AcceptedOptions(("--save-exact",))
DEP = AcceptedOptions(("--save-dev",))
BAD = RejectedOptions(("; rm -rf /",), reason="Invalid option token")


class TestBuildCommand:
    def test_no_options_is_trimmed(self):
        assert build_command("lodash") == "npm install lodash"

    def test_options_joined_in_order(self):
        cmd = build_command("lodash", AcceptedOptions(("--save-dev", "-E", "--save-prod")))
        assert cmd == "npm install lodash --save-dev -E --save-prod"

    def test_duplicates_are_kept(self):
        cmd = build_command("lodash", ["--save", "--save"])
        assert cmd == "npm install lodash --save --save"

    def test_custom_install_command(self):
        assert build_command("left-pad", ["-D"], install_command="pnpm add") == "pnpm add left-pad -D"

    def test_default_install_command(self):
        assert DEFAULT_INSTALL_COMMAND == "npm install"

    def test_rejected_options_refused(self):
        with pytest.raises(ValueError):
            build_command("lodash", BAD)


class TestResolveEffectiveOptions:
    def test_global_then_dependency(self):
        result = resolve_effective_options(GLOBAL, DEP, override=False)
        assert result == AcceptedOptions(("--save-exact", "--save-dev"))

    def test_override_drops_global(self):
        assert resolve_effective_options(GLOBAL, DEP, override=True) == DEP

    def test_override_ignores_rejected_global(self):
        assert resolve_effective_options(BAD, DEP, override=True) == DEP

    def test_override_keeps_rejected_dependency(self):
        assert isinstance(resolve_effective_options(GLOBAL, BAD, override=True), RejectedOptions)

    def test_rejected_global_rejects_combined(self):
        assert isinstance(resolve_effective_options(BAD, DEP, override=False), RejectedOptions)

    def test_rejected_dependency_rejects_combined(self):
        assert isinstance(resolve_effective_options(GLOBAL, BAD, override=False), RejectedOptions)

    def test_empty_global_does_not_mask_rejection(self):
        result = resolve_effective_options(AcceptedOptions(), BAD, override=False)
        assert isinstance(result, RejectedOptions)

    def test_both_empty(self):
        assert resolve_effective_options(AcceptedOptions(), AcceptedOptions(), False) == AcceptedOptions()
